"""Copywriting psychology analyzer.

Scores the craft of the copy: power word density, headline quality, the
SUCCESs stickiness framework, call-to-action strength and readability.
"""

from dataclasses import dataclass

from creative_science.knowledge.analyzers.base import DomainAnalyzer
from creative_science.knowledge.data import copywriting as data
from creative_science.knowledge.data.knowledge import DomainKnowledge
from creative_science.knowledge.schemas import AnalysisInput, ScoringFactor
from creative_science.knowledge.text import (
    contains_any,
    count_matching_patterns,
    count_words,
    find_power_words,
    has_number,
    power_word_density,
    power_words_in,
    split_sentences,
)

SUCCESS_ELEMENTS = ("Simple", "Unexpected", "Concrete", "Credible", "Emotional", "Stories")


@dataclass(frozen=True)
class _CopyFields:
    headline: str
    body: str
    call_to_action: str
    combined: str


class CopywritingPsychologyAnalyzer(DomainAnalyzer):
    """Headline, body and call-to-action craft."""

    FACTOR_WEIGHTS = {
        "power_word_density": 0.25,
        "headline_quality": 0.25,
        "success_framework": 0.20,
        "cta_strength": 0.20,
        "readability": 0.10,
    }

    @property
    def domain(self) -> str:
        return data.DOMAIN

    @classmethod
    def default_knowledge(cls) -> DomainKnowledge:
        return data.KNOWLEDGE

    def _extract(self, input: AnalysisInput) -> _CopyFields | None:
        content = input.content
        if not (content.headline or content.primary_text or content.description):
            return None
        body = " ".join(p for p in (content.primary_text, content.description) if p)
        return _CopyFields(
            headline=content.headline or "",
            body=body,
            call_to_action=content.call_to_action or "",
            combined=input.all_text,
        )

    def _score_factors(self, copy: _CopyFields) -> list[ScoringFactor]:
        return [
            self._power_word_density(copy.combined),
            self._headline_quality(copy.headline),
            self._success_framework(copy),
            self._cta_strength(copy.call_to_action),
            self._readability(" ".join(p for p in (copy.headline, copy.body) if p)),
        ]

    def _power_word_density(self, text: str) -> ScoringFactor:
        density = power_word_density(text)
        if 0.15 <= density <= 0.25:
            score = 90
        elif 0.10 < density < 0.30:
            score = 75
        elif 0.05 < density < 0.35:
            score = 60
        elif density > 0.35:
            score = 40
        else:
            score = 30

        found = len(find_power_words(text))
        if 0.15 <= density <= 0.25:
            verdict = "optimal"
        elif density > 0.25:
            verdict = "too dense, risks reading as spam"
        else:
            verdict = "too sparse, target 15-25%"
        return self._factor(
            "power_word_density",
            score,
            f"Power word density {density:.1%} ({found} power word(s), "
            f"{count_words(text)} words): {verdict}.",
        )

    def _headline_quality(self, headline: str) -> ScoringFactor:
        chars = len(headline)
        score = 50
        if data.HEADLINE_OPTIMAL[0] <= chars <= data.HEADLINE_OPTIMAL[1]:
            score += 20
        elif data.HEADLINE_ACCEPTABLE[0] <= chars <= data.HEADLINE_ACCEPTABLE[1]:
            score += 10
        else:
            score -= 10

        power = find_power_words(headline)
        number = has_number(headline)
        specifics = count_matching_patterns(headline, self._knowledge.regexes("specifics")) > 0
        if power:
            score += 15
        if number:
            score += 10
        if specifics:
            score += 5

        issues: list[str] = []
        if chars < data.HEADLINE_OPTIMAL[0]:
            issues.append("too short")
        if chars > data.HEADLINE_ACCEPTABLE[1]:
            issues.append("too long")
        if not power:
            issues.append("no power word")
        if not number:
            issues.append("no number")
        explanation = (
            f"Headline of {chars} chars with {len(power)} power word(s)"
            + (f"; needs work: {', '.join(issues)}." if issues else ".")
        )
        return self._factor("headline_quality", score, explanation)

    def _success_framework(self, copy: _CopyFields) -> ScoringFactor:
        text = copy.combined
        present = {
            "Simple": len(copy.headline) <= data.SIMPLE_HEADLINE_CHARS
            and count_words(text) <= data.SIMPLE_BODY_WORDS,
            "Unexpected": count_matching_patterns(text, self._knowledge.regexes("unexpected")) > 0,
            "Concrete": contains_any(text, self._knowledge.words("concrete")) or has_number(text),
            "Credible": bool(power_words_in(text, "trust")),
            "Emotional": bool(power_words_in(text, "emotion")),
            "Stories": contains_any(text, self._knowledge.words("story")),
        }
        count = sum(present.values())
        missing = [e for e in SUCCESS_ELEMENTS if not present[e]]
        explanation = f"SUCCESs elements {count}/6."
        if missing:
            explanation += f" Missing: {', '.join(missing[:3])}."
        return self._factor("success_framework", count / len(SUCCESS_ELEMENTS) * 100, explanation)

    def _cta_strength(self, cta: str) -> ScoringFactor:
        if not cta.strip():
            return self._factor(
                "cta_strength",
                50,
                "No call-to-action; the CTA directly drives conversion.",
            )
        words = self._knowledge.words
        first_person = contains_any(cta, words("cta_first_person"))
        strong = contains_any(cta, words("cta_strong"))
        weak = contains_any(cta, words("cta_weak"))
        urgency = contains_any(cta, words("cta_urgency"))
        benefit = contains_any(cta, words("cta_benefit"))
        score = 50 + 20 * first_person + 15 * strong - 15 * weak + 10 * urgency + 10 * benefit

        suggestions: list[str] = []
        if not first_person:
            suggestions.append("use first person")
        if not urgency:
            suggestions.append("add urgency")
        if not benefit:
            suggestions.append("state the benefit")
        if weak:
            suggestions.append("drop weak wording")
        explanation = f"CTA {cta!r}"
        explanation += f": {', '.join(suggestions[:2])}." if suggestions else " is strong."
        return self._factor("cta_strength", score, explanation)

    def _readability(self, text: str) -> ScoringFactor:
        chars = len(text)
        sentences = split_sentences(text)
        score = 70
        if data.BODY_OPTIMAL[0] <= chars <= data.BODY_OPTIMAL[1]:
            score += 15
        elif data.BODY_ACCEPTABLE[0] <= chars <= data.BODY_ACCEPTABLE[1]:
            score += 5
        elif chars > data.BODY_ACCEPTABLE[1]:
            score -= 10
        else:
            score -= 5

        avg_words = count_words(text) / len(sentences) if sentences else 0.0
        if data.SENTENCE_WORDS[0] <= avg_words <= data.SENTENCE_WORDS[1]:
            score += 10
        return self._factor(
            "readability",
            score,
            f"{chars} chars in {len(sentences)} sentence(s), {avg_words:.1f} words per sentence.",
        )
