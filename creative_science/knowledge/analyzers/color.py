"""Color psychology analyzer.

Scores the creative's dominant colors for industry fit, cultural
associations, emotional match with the objective, light/dark contrast and
seasonal relevance.
"""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date

from creative_science.knowledge.analyzers.base import DomainAnalyzer
from creative_science.knowledge.config import KnowledgeConfig
from creative_science.knowledge.data import color as data
from creative_science.knowledge.data.knowledge import DomainKnowledge
from creative_science.knowledge.schemas import AnalysisInput, ScoringFactor


@dataclass(frozen=True)
class _ColorInput:
    colors: tuple[str, ...]
    industry: str | None
    objective: str | None
    month: int


class ColorPsychologyAnalyzer(DomainAnalyzer):
    """Dominant color choices against industry, emotion and season."""

    FACTOR_WEIGHTS = {
        "industry_alignment": 0.30,
        "cultural_fit": 0.25,
        "emotional_match": 0.20,
        "contrast_quality": 0.15,
        "seasonal_relevance": 0.10,
    }

    def __init__(
        self,
        knowledge: DomainKnowledge | None = None,
        config: KnowledgeConfig | None = None,
        palette: data.ColorPalette | None = None,
        clock: Callable[[], date] = date.today,
    ) -> None:
        """
        Initialize the analyzer.

        Args:
            knowledge: Knowledge tables (default tables if None)
            config: Engine configuration (default from environment if None)
            palette: Color tables (default palette if None)
            clock: Supplies the date used for seasonal relevance when the
                input carries no ``as_of`` date
        """
        super().__init__(knowledge, config)
        self._palette = palette or data.DEFAULT_PALETTE
        self._clock = clock

    @property
    def domain(self) -> str:
        return data.DOMAIN

    @classmethod
    def default_knowledge(cls) -> DomainKnowledge:
        return data.KNOWLEDGE

    def _extract(self, input: AnalysisInput) -> _ColorInput | None:
        colors = tuple(c.lower() for c in input.creative.dominant_colors)
        if not colors:
            return None
        as_of = input.as_of or self._clock()
        industry = input.context.industry
        objective = input.objective
        return _ColorInput(
            colors=colors,
            industry=industry.strip().lower() if industry else None,
            objective=objective.strip().lower() if objective else None,
            month=as_of.month,
        )

    def _score_factors(self, extracted: _ColorInput) -> list[ScoringFactor]:
        return [
            self._industry_alignment(extracted),
            self._cultural_fit(extracted),
            self._emotional_match(extracted),
            self._contrast_quality(extracted),
            self._seasonal_relevance(extracted),
        ]

    def _industry_alignment(self, c: _ColorInput) -> ScoringFactor:
        mapping = self._palette.industry_colors.get(c.industry or "")
        if mapping is None:
            return self._factor(
                "industry_alignment",
                60,
                f"No color guidance for industry {c.industry or 'unspecified'}; neutral score.",
            )
        primary = [col for col in c.colors if col in mapping.primary]
        accent = [col for col in c.colors if col in mapping.accent]
        avoid = [col for col in c.colors if col in mapping.avoid]
        score = 50 + 20 * len(primary) + 10 * len(accent) - 15 * len(avoid)
        explanation = (
            f"{c.industry}: {len(primary)} primary, {len(accent)} accent, "
            f"{len(avoid)} avoided color(s). Recommended: {', '.join(mapping.primary)}."
        )
        return self._factor("industry_alignment", score, explanation)

    def _cultural_fit(self, c: _ColorInput) -> ScoringFactor:
        score = 70
        issues: list[str] = []
        positives: list[str] = []
        for col in c.colors:
            assoc = self._palette.associations.get(col)
            if assoc is None or c.industry is None:
                continue
            if c.industry in assoc.negative_industries:
                score -= 15
                issues.append(f"{col} reads poorly in {c.industry}")
            if c.industry in assoc.positive_industries:
                score += 10
                positives.append(f"{col} ({assoc.emotion})")
        if issues:
            explanation = f"Cultural mismatch: {'; '.join(issues)}."
        elif positives:
            explanation = f"Positive associations: {', '.join(positives)}."
        else:
            explanation = "Color associations are neutral."
        return self._factor("cultural_fit", score, explanation)

    def _emotional_match(self, c: _ColorInput) -> ScoringFactor:
        targets = self._palette.objective_colors.get(
            c.objective or "", self._palette.default_objective_colors
        )
        matches = sum(1 for col in c.colors if col in targets)
        objective = c.objective or "unspecified"
        explanation = (
            f"{matches} color(s) match the {objective} objective."
            if matches
            else f"No color matches the {objective} objective. Suggested: {', '.join(targets)}."
        )
        return self._factor("emotional_match", 50 + 25 * matches, explanation)

    def _contrast_quality(self, c: _ColorInput) -> ScoringFactor:
        unique = set(c.colors)
        light_dark = any(col in unique for col in self._palette.light_colors) and any(
            col in unique for col in self._palette.dark_colors
        )
        score = 60 + 20 * (len(unique) >= 2) + 20 * light_dark
        if light_dark:
            explanation = "Strong light/dark contrast for the call-to-action."
        elif len(unique) >= 2:
            explanation = "Several colors but no light/dark pair; contrast could improve."
        else:
            explanation = "Single color; contrast needs strengthening."
        return self._factor("contrast_quality", score, explanation)

    def _seasonal_relevance(self, c: _ColorInput) -> ScoringFactor:
        season = self._palette.season_for(c.month)
        matches = sum(1 for col in c.colors if col in season.colors)
        explanation = (
            f"{matches} color(s) fit the {season.name} palette."
            if matches
            else f"No {season.name} colors used. Season palette: {', '.join(season.colors)}."
        )
        return self._factor("seasonal_relevance", 60 + 15 * matches, explanation)
