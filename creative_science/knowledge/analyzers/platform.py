"""Platform best practices analyzer.

Checks the creative against feed ad placement rules: format choice, copy
length limits, mobile fitness, observed metrics against the industry
benchmark, and format/objective alignment.
"""

from creative_science.knowledge.analyzers.base import DomainAnalyzer
from creative_science.knowledge.config import KnowledgeConfig
from creative_science.knowledge.data import platform as data
from creative_science.knowledge.data.benchmarks import get_benchmark
from creative_science.knowledge.data.knowledge import DomainKnowledge
from creative_science.knowledge.schemas import AnalysisInput, ScoringFactor


class PlatformBestPracticesAnalyzer(DomainAnalyzer):
    """Feed placement rules applied to format, copy length and metrics."""

    FACTOR_WEIGHTS = {
        "format_optimization": 0.25,
        "content_length": 0.20,
        "mobile_fitness": 0.20,
        "metrics_benchmark": 0.20,
        "objective_alignment": 0.15,
    }

    def __init__(
        self,
        knowledge: DomainKnowledge | None = None,
        config: KnowledgeConfig | None = None,
        rules: data.PlatformRules | None = None,
    ) -> None:
        super().__init__(knowledge, config)
        self._rules = rules or data.PlatformRules()

    @property
    def domain(self) -> str:
        return data.DOMAIN

    @classmethod
    def default_knowledge(cls) -> DomainKnowledge:
        return data.KNOWLEDGE

    def _extract(self, input: AnalysisInput) -> AnalysisInput | None:
        has_metrics = input.metrics is not None and not input.metrics.is_empty
        if not input.all_text.strip() and input.creative.is_empty and not has_metrics:
            return None
        return input

    def _score_factors(self, input: AnalysisInput) -> list[ScoringFactor]:
        fmt = self._format_of(input)
        return [
            self._format_optimization(input, fmt),
            self._content_length(input),
            self._mobile_fitness(input, fmt),
            self._metrics_benchmark(input),
            self._objective_alignment(input, fmt),
        ]

    def _format_of(self, input: AnalysisInput) -> str:
        fmt = (input.creative.format or "image").strip().lower()
        return fmt if fmt in self._rules.format_scores else "image"

    def _format_optimization(self, input: AnalysisInput, fmt: str) -> ScoringFactor:
        base = self._rules.format_scores[fmt]
        score = base
        bonus = input.creative.has_video and fmt != "video"
        if bonus:
            score += self._rules.video_bonus
        ranking = " > ".join(
            f"{name} ({value})"
            for name, value in sorted(self._rules.format_scores.items(), key=lambda kv: -kv[1])
        )
        explanation = f"Format {fmt} scores {base}. Preferred: {ranking}."
        if bonus:
            explanation += f" Attached video adds {self._rules.video_bonus}."
        return self._factor("format_optimization", score, explanation)

    def _content_length(self, input: AnalysisInput) -> ScoringFactor:
        rules = self._rules
        headline = len(input.content.headline or "")
        primary = len(input.content.primary_text or "")

        if headline == 0:
            headline_score = 0.0
        elif headline <= rules.headline_optimal:
            headline_score = 100.0
        elif headline <= rules.headline_max:
            span = rules.headline_max - rules.headline_optimal
            headline_score = 100 - (headline - rules.headline_optimal) / span * 30
        else:
            headline_score = 50.0

        if primary == 0:
            # Primary text is optional but recommended
            primary_score = 50.0
        elif primary <= rules.primary_text_optimal:
            primary_score = 100.0
        else:
            primary_score = 100 - min(50.0, (primary - rules.primary_text_optimal) / 2)

        return self._factor(
            "content_length",
            headline_score * 0.6 + primary_score * 0.4,
            f"Headline {headline} chars (optimal {rules.headline_optimal}, "
            f"{headline_score:.0f}), primary text {primary} chars "
            f"(optimal {rules.primary_text_optimal}, {primary_score:.0f}).",
        )

    def _mobile_fitness(self, input: AnalysisInput, fmt: str) -> ScoringFactor:
        rules = self._rules
        duration = input.creative.video_duration or 0
        score = 50
        if duration > 0:
            if duration <= rules.short_video_seconds:
                score = 100
            elif duration <= rules.max_video_seconds:
                score = 70
            else:
                score = 40
            explanation = (
                f"Video runs {duration:g}s (optimal {rules.short_video_seconds:g}s or less)."
            )
        else:
            if fmt in ("image", "carousel"):
                score = 70
            explanation = f"Static {fmt} format is mobile friendly; short video would do better."

        # Short videos and static formats are assumed to be vertical friendly
        if duration <= rules.short_video_seconds or fmt != "video":
            score += 10
        return self._factor("mobile_fitness", score, explanation)

    def _metrics_benchmark(self, input: AnalysisInput) -> ScoringFactor:
        benchmark = get_benchmark(input.context.industry, self._rules.benchmarks)
        metrics = input.metrics
        ratios: list[float] = []
        parts: list[str] = []
        if metrics is not None:
            for label, value, average in (
                ("CTR", metrics.ctr, benchmark.avg_ctr),
                ("CVR", metrics.cvr, benchmark.avg_cvr),
                ("ROAS", metrics.roas, benchmark.avg_roas),
            ):
                if value and value > 0:
                    ratios.append(min(100.0, value / average * 100))
                    parts.append(f"{label} {value:.2f} vs {average:g}")

        if not ratios:
            return self._factor(
                "metrics_benchmark",
                50,
                f"No metrics supplied. {benchmark.industry} benchmark: CTR "
                f"{benchmark.avg_ctr:g}%, CVR {benchmark.avg_cvr:g}%, ROAS {benchmark.avg_roas:g}.",
            )
        return self._factor(
            "metrics_benchmark",
            sum(ratios) / len(ratios),
            f"Against the {benchmark.industry} benchmark: {', '.join(parts)}.",
        )

    def _objective_alignment(self, input: AnalysisInput, fmt: str) -> ScoringFactor:
        objective = (input.objective or self._rules.default_objective).strip().lower()
        recommended = self._rules.objective_formats.get(objective, ())
        aligned = fmt in recommended
        formats = ", ".join(recommended) or "none known"
        explanation = (
            f"Format {fmt} {'fits' if aligned else 'does not fit'} the {objective} "
            f"objective (recommended: {formats})."
        )
        return self._factor("objective_alignment", 100 if aligned else 40, explanation)
