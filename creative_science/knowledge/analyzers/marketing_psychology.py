"""Marketing psychology analyzer.

Detects classic persuasion techniques in the copy: Cialdini's principles of
influence, loss aversion, price anchoring, gain/loss framing and the
endowment effect.
"""

from creative_science.knowledge.analyzers.base import DomainAnalyzer
from creative_science.knowledge.data import marketing_psychology as data
from creative_science.knowledge.data.knowledge import DomainKnowledge
from creative_science.knowledge.schemas import AnalysisInput, ScoringFactor
from creative_science.knowledge.text import (
    contains_any,
    count_matching_patterns,
    count_phrase,
)


class MarketingPsychologyAnalyzer(DomainAnalyzer):
    """Persuasion principles and behavioural economics in the copy."""

    FACTOR_WEIGHTS = {
        "persuasion_diversity": 0.35,
        "loss_aversion": 0.20,
        "anchoring": 0.15,
        "framing": 0.15,
        "endowment": 0.15,
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
            self._persuasion_diversity(text),
            self._loss_aversion(text),
            self._anchoring(text),
            self._framing(text),
            self._endowment(text),
        ]

    def _persuasion_diversity(self, text: str) -> ScoringFactor:
        used = [p for p in data.PRINCIPLES if contains_any(text, self._knowledge.words(p))]
        score = data.DIVERSITY_SCORES.get(len(used), data.DIVERSITY_OVERLOAD_SCORE)
        label = ", ".join(p.replace("_", " ") for p in used) or "none"
        return self._factor(
            "persuasion_diversity",
            score,
            f"{len(used)} persuasion principle(s) used ({label}); 3-5 is ideal.",
        )

    def _loss_aversion(self, text: str) -> ScoringFactor:
        loss = contains_any(text, self._knowledge.words("loss"))
        deadline = contains_any(text, self._knowledge.words("deadline"))
        score = 50 + 30 * loss + 20 * deadline
        return self._factor(
            "loss_aversion",
            score,
            f"Loss framing {'present' if loss else 'absent'}, "
            f"deadline {'present' if deadline else 'absent'}.",
        )

    def _anchoring(self, text: str) -> ScoringFactor:
        comparison = count_matching_patterns(text, self._knowledge.regexes("price_comparison")) > 0
        number = count_matching_patterns(text, self._knowledge.regexes("number_anchor")) > 0
        score = 50 + 25 * comparison + 25 * number
        return self._factor(
            "anchoring",
            score,
            f"Reference price {'shown' if comparison else 'missing'}, "
            f"concrete figures {'shown' if number else 'missing'}.",
        )

    def _framing(self, text: str) -> ScoringFactor:
        positive = sum(count_phrase(text, w) for w in self._knowledge.words("positive_frame"))
        negative = sum(count_phrase(text, w) for w in self._knowledge.words("negative_frame"))
        if positive > negative:
            score, verdict = 90, "gain-framed"
        elif positive == 0 and negative == 0:
            score, verdict = 60, "neutral"
        elif negative > positive:
            score, verdict = 70, "loss-framed"
        else:
            score, verdict = 50, "mixed"
        return self._factor(
            "framing",
            score,
            f"Copy is {verdict} ({positive} gain terms, {negative} loss terms).",
        )

    def _endowment(self, text: str) -> ScoringFactor:
        possessive = contains_any(text, self._knowledge.words("possessive"))
        ownership = contains_any(text, self._knowledge.words("ownership"))
        score = 50 + 25 * possessive + 25 * ownership
        return self._factor(
            "endowment",
            score,
            f"Possessive language {'present' if possessive else 'absent'}, "
            f"trial or ownership offer {'present' if ownership else 'absent'}.",
        )
