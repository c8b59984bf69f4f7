"""Crowd psychology analyzer.

Scores the social signals in the copy: social proof, fear of missing out,
bandwagon cues, herd language and information cascades.
"""

from creative_science.knowledge.analyzers.base import DomainAnalyzer
from creative_science.knowledge.data import crowd_psychology as data
from creative_science.knowledge.data.knowledge import DomainKnowledge
from creative_science.knowledge.schemas import AnalysisInput, ScoringFactor
from creative_science.knowledge.text import (
    count_matching_patterns,
    find_phrases,
    power_words_in,
)


class CrowdPsychologyAnalyzer(DomainAnalyzer):
    """Social proof, FOMO and herd signals in the copy."""

    FACTOR_WEIGHTS = {
        "social_proof": 0.30,
        "fomo": 0.25,
        "bandwagon": 0.20,
        "herd_behavior": 0.15,
        "information_cascade": 0.10,
    }

    @property
    def domain(self) -> str:
        return data.DOMAIN

    @classmethod
    def default_knowledge(cls) -> DomainKnowledge:
        return data.KNOWLEDGE

    def _extract(self, input: AnalysisInput) -> str | None:
        text = input.all_text
        return text if text.strip() else None

    def _score_factors(self, text: str) -> list[ScoringFactor]:
        return [
            self._social_proof(text),
            self._fomo(text),
            self._bandwagon(text),
            self._herd_behavior(text),
            self._information_cascade(text),
        ]

    def _social_proof(self, text: str) -> ScoringFactor:
        triggers = find_phrases(text, self._knowledge.words("social_proof"))
        social_words = power_words_in(text, "social")
        score = 0
        if triggers:
            score = 30 + 15 * len(triggers)
        score += 10 * len(social_words)
        if count_matching_patterns(text, self._knowledge.regexes("crowd_count")):
            score += 20
        explanation = (
            f"{len(triggers)} social proof trigger(s) found ({', '.join(triggers)})."
            if triggers
            else 'No social proof triggers. Add reviews, ratings or "N customers" counts.'
        )
        return self._factor("social_proof", score, explanation)

    def _fomo(self, text: str) -> ScoringFactor:
        triggers = find_phrases(text, self._knowledge.words("fomo"))
        urgency_words = power_words_in(text, "urgency")
        score = 0
        if triggers:
            score = 40 + 15 * len(triggers)
        score += 10 * len(urgency_words)
        if count_matching_patterns(text, self._knowledge.regexes("time_limit")):
            score += 15
        explanation = (
            f"{len(triggers)} FOMO trigger(s) found ({', '.join(triggers)})."
            if triggers
            else 'No FOMO triggers. Add "limited", "today only" or a countdown.'
        )
        return self._factor("fomo", score, explanation)

    def _bandwagon(self, text: str) -> ScoringFactor:
        matches = count_matching_patterns(text, self._knowledge.regexes("bandwagon"))
        explanation = (
            f"{matches} bandwagon pattern(s) emphasise what the crowd chose."
            if matches
            else 'No bandwagon cues. Add "#1 bestseller" or "100k people chose" style figures.'
        )
        return self._factor("bandwagon", 25 * matches, explanation)

    def _herd_behavior(self, text: str) -> ScoringFactor:
        found = find_phrases(text, self._knowledge.words("herd"))
        score = 35 + 15 * len(found) if found else 0
        explanation = (
            f"{len(found)} herd keyword(s) found ({', '.join(found)})."
            if found
            else 'No herd keywords. Consider "trending" or "everyone\'s talking about".'
        )
        return self._factor("herd_behavior", score, explanation)

    def _information_cascade(self, text: str) -> ScoringFactor:
        matches = count_matching_patterns(text, self._knowledge.regexes("cascade"))
        explanation = (
            f"{matches} cascade pattern(s) chain earlier adopters' choices."
            if matches
            else 'No cascade cues. Add "trusted by experts" style sequential endorsements.'
        )
        return self._factor("information_cascade", 33 * matches, explanation)
