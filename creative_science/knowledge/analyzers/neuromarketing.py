"""Neuromarketing analyzer.

Scores how the copy is likely to be processed by the brain: cognitive load,
emotional charge, the headline's attention hook, reward anticipation, and
fit between the copy style and the campaign objective (System 1 vs System 2).
"""

import re
from dataclasses import dataclass

from creative_science.knowledge.analyzers.base import DomainAnalyzer
from creative_science.knowledge.data import neuromarketing as data
from creative_science.knowledge.data.knowledge import DomainKnowledge
from creative_science.knowledge.schemas import AnalysisInput, ScoringFactor
from creative_science.knowledge.text import (
    contains_any,
    count_words,
    find_phrases,
    has_number,
    power_word_density,
    tokenize,
)

PERCENT_PATTERN = re.compile(r"\d+(?:\.\d+)?\s?%")


@dataclass(frozen=True)
class _CopyInput:
    headline: str
    primary_text: str
    all_text: str
    objective: str


class NeuromarketingAnalyzer(DomainAnalyzer):
    """Cognitive and emotional processing of the ad copy."""

    FACTOR_WEIGHTS = {
        "cognitive_load": 0.25,
        "emotional_processing": 0.25,
        "attention_hook": 0.20,
        "dopamine_response": 0.15,
        "dual_process_alignment": 0.15,
    }

    @property
    def domain(self) -> str:
        return data.DOMAIN

    @classmethod
    def default_knowledge(cls) -> DomainKnowledge:
        return data.KNOWLEDGE

    def _extract(self, input: AnalysisInput) -> _CopyInput | None:
        if not input.all_text.strip():
            return None
        return _CopyInput(
            headline=input.content.headline or "",
            primary_text=input.content.primary_text or "",
            all_text=input.all_text,
            # Copy without a stated objective is judged as awareness copy
            objective=(input.objective or "awareness").strip().lower(),
        )

    def _score_factors(self, extracted: _CopyInput) -> list[ScoringFactor]:
        density = power_word_density(extracted.all_text)
        return [
            self._cognitive_load(extracted),
            self._emotional_processing(density),
            self._attention_hook(extracted.headline),
            self._dopamine_response(extracted.all_text),
            self._dual_process_alignment(extracted, density),
        ]

    def _cognitive_load(self, copy: _CopyInput) -> ScoringFactor:
        words = count_words(f"{copy.headline} {copy.primary_text}")
        score = 100.0
        if words > data.MAX_WORDS:
            score = 100 - (words - data.MAX_WORDS) * 5
            verdict = "too long; readers are likely to scroll past"
        elif words > data.OPTIMAL_WORDS:
            excess = words - data.OPTIMAL_WORDS
            score = 100 - excess / (data.MAX_WORDS - data.OPTIMAL_WORDS) * 30
            verdict = "acceptable length"
        elif words < data.OPTIMAL_WORDS * 0.5:
            score = 70
            verdict = "too short to carry the core message"
        else:
            verdict = "optimal length"
        return self._factor(
            "cognitive_load",
            score,
            f"{words} words in headline and primary text "
            f"(optimal {data.OPTIMAL_WORDS}, max {data.MAX_WORDS}): {verdict}.",
        )

    def _emotional_processing(self, density: float) -> ScoringFactor:
        if density < 0.10:
            score = 40
        elif density < 0.15:
            score = 70
        elif density > 0.40:
            score = 60
        elif density > 0.30:
            score = 85
        else:
            score = 100
        return self._factor(
            "emotional_processing",
            score,
            f"Power word density {density:.0%} (optimal 15-30%).",
        )

    def _attention_hook(self, headline: str) -> ScoringFactor:
        words = tokenize(headline)
        score = 50
        notes: list[str] = []
        if 4 <= len(words) <= 8:
            score += 30
            notes.append("scannable length")
        elif len(words) > 10:
            score -= 10
            notes.append("too long to scan")

        openers = self._knowledge.words("strong_openers")
        opening = " ".join(words[:3])
        if any(opening == o or opening.startswith(o + " ") for o in openers):
            score += 15
            notes.append("strong opener")
        if "?" in headline:
            score += 10
            notes.append("question")
        if has_number(headline):
            score += 10
            notes.append("number")

        detail = ", ".join(notes) if notes else "no attention cues"
        return self._factor(
            "attention_hook",
            score,
            f"Headline of {len(words)} words: {detail}.",
        )

    def _dopamine_response(self, text: str) -> ScoringFactor:
        anticipation = contains_any(text, self._knowledge.words("anticipation"))
        novelty = contains_any(text, self._knowledge.words("novelty"))
        reward = contains_any(text, self._knowledge.words("reward"))
        score = 50 + 20 * anticipation + 20 * novelty + 10 * reward
        present = [
            label
            for label, hit in (("anticipation", anticipation), ("novelty", novelty), ("reward", reward))
            if hit
        ]
        return self._factor(
            "dopamine_response",
            score,
            f"Reward cues present: {', '.join(present) or 'none'}.",
        )

    def _dual_process_alignment(self, copy: _CopyInput, density: float) -> ScoringFactor:
        score = 50
        if copy.objective == "awareness":
            if density > 0.15:
                score += 30
            if density > 0.25:
                score += 20
            explanation = f"Awareness copy should be fast and emotional (density {density:.0%})."
        elif copy.objective in ("consideration", "conversion"):
            logical = bool(PERCENT_PATTERN.search(copy.all_text)) or bool(
                find_phrases(copy.all_text, self._knowledge.words("logical"))
            )
            if logical:
                score += 30
            if 0.10 < density < 0.20:
                score += 20
            explanation = (
                f"{copy.objective.capitalize()} copy needs evidence "
                f"({'present' if logical else 'missing'}) balanced with emotion."
            )
        else:
            explanation = f"Unrecognized objective {copy.objective!r}; neutral alignment."
        return self._factor("dual_process_alignment", score, explanation)
