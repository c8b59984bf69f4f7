"""Knowledge tables for the platform best practices domain (feed ads)."""

from dataclasses import dataclass, field

from creative_science.knowledge.data.benchmarks import INDUSTRY_BENCHMARKS, IndustryBenchmark
from creative_science.knowledge.data.knowledge import DomainKnowledge, FactorAdvice
from creative_science.knowledge.schemas import Citation

DOMAIN = "platform_best_practices"


@dataclass(frozen=True)
class PlatformRules:
    """
    Numeric placement rules of the ad platform.

    Attributes:
        format_scores: Base score per creative format.
        video_bonus: Bonus for attaching video to a non-video format.
        objective_formats: Formats recommended per campaign objective.
        default_objective: Objective assumed when none is given.
        headline_optimal / headline_max: Headline length in characters.
        primary_text_optimal: Primary text length in characters.
        benchmarks: Industry performance benchmarks.
    """

    format_scores: dict[str, int] = field(
        default_factory=lambda: {"video": 100, "carousel": 85, "image": 60}
    )
    video_bonus: int = 10
    objective_formats: dict[str, tuple[str, ...]] = field(
        default_factory=lambda: {
            "awareness": ("video", "reels"),
            "consideration": ("carousel", "video"),
            "conversion": ("collection", "carousel", "video"),
        }
    )
    default_objective: str = "conversion"
    headline_optimal: int = 27
    headline_max: int = 40
    primary_text_optimal: int = 125
    short_video_seconds: float = 15
    max_video_seconds: float = 30
    benchmarks: dict[str, IndustryBenchmark] = field(
        default_factory=lambda: dict(INDUSTRY_BENCHMARKS)
    )


CITATIONS: tuple[Citation, ...] = (
    Citation(
        id="meta-andromeda-2025",
        domain=DOMAIN,
        source="Meta for Business (2025). Andromeda Algorithm: Creative-First Targeting",
        finding="The delivery algorithm prioritises creative quality; video outperforms static images by about 34%.",
        applicability="Vertical video and Reels earn the highest engagement on mobile placements.",
        confidence_level="high",
        category="platform_algorithm",
        year=2025,
    ),
    Citation(
        id="meta-feed-optimization-2024",
        domain=DOMAIN,
        source="Meta for Business (2024). Feed Ad Best Practices",
        finding="Headlines up to 27 characters and primary text up to 125 characters get the best read-through.",
        applicability="Longer copy is truncated behind a 'see more' link on mobile feeds.",
        confidence_level="high",
        category="content_optimization",
        year=2024,
    ),
    Citation(
        id="meta-mobile-2024",
        domain=DOMAIN,
        source="Meta Internal Data (2024). Mobile Insights",
        finding="Over 90% of feed ad traffic is mobile; videos of 15 seconds or less have the highest completion.",
        applicability="Short vertical video is recommended; landscape video loses completion rate.",
        confidence_level="high",
        category="mobile_optimization",
        year=2024,
    ),
    Citation(
        id="meta-benchmarks-2024",
        domain=DOMAIN,
        source="Meta for Business (2024). Industry Benchmarks Report",
        finding="Average CTR, CVR and ROAS per industry.",
        applicability="Observed metrics are compared against the industry average.",
        confidence_level="high",
        category="benchmarks",
        year=2024,
    ),
    Citation(
        id="meta-objective-format-2024",
        domain=DOMAIN,
        source="Meta for Business (2024). Campaign Objective Guide",
        finding="Aligning format with objective lifts performance by about 40%.",
        applicability="Awareness: video. Consideration: carousel. Conversion: collection or carousel.",
        confidence_level="high",
        category="objective_alignment",
        year=2024,
    ),
    Citation(
        id="meta-creative-diversity-2024",
        domain=DOMAIN,
        source="Meta for Business (2024). Creative Testing Framework",
        finding="Running 3-5 diverse creatives per ad set improves the odds of finding a winner.",
        applicability="Budget roughly 20% of spend to structured creative tests.",
        confidence_level="medium",
        category="creative_testing",
        year=2024,
    ),
)

FACTOR_CITATIONS = {
    "format_optimization": "meta-andromeda-2025",
    "content_length": "meta-feed-optimization-2024",
    "mobile_fitness": "meta-mobile-2024",
    "metrics_benchmark": "meta-benchmarks-2024",
    "objective_alignment": "meta-objective-format-2024",
}

ADVICE = {
    "format_optimization": FactorAdvice(
        recommendation="Switch to video or carousel, or attach a short video to the creative.",
        scientific_basis="Creative-first delivery favours video formats.",
        expected_impact="Around 34% better delivery efficiency.",
    ),
    "content_length": FactorAdvice(
        recommendation="Keep the headline to 27 characters and primary text to 125 characters.",
        scientific_basis="Feed best practices: copy beyond these limits is truncated on mobile.",
        expected_impact="Higher read-through and click-through in mobile feeds.",
    ),
    "mobile_fitness": FactorAdvice(
        recommendation="Cut video to 15 seconds or less in a vertical 4:5 or 9:16 ratio.",
        scientific_basis="Mobile data: short vertical video has the highest completion rate.",
        expected_impact="Up to 45% better completion rate.",
    ),
    "metrics_benchmark": FactorAdvice(
        recommendation="Test 3-5 creative variants and shift budget to the best performer.",
        scientific_basis="Creative testing framework: diversity increases the chance of a winning combination.",
        expected_impact="Closing the gap to industry average CTR, CVR and ROAS.",
    ),
    "objective_alignment": FactorAdvice(
        recommendation="Use the format recommended for the campaign objective.",
        scientific_basis="Objective guide: format-objective alignment lifts performance.",
        expected_impact="Around 40% better campaign performance.",
    ),
}

MISSING_INPUT = FactorAdvice(
    recommendation="Provide the creative format, copy or performance metrics.",
    scientific_basis="Placement best practices depend on format, copy length and observed metrics.",
    expected_impact="Enables a full platform best practices evaluation.",
)

KNOWLEDGE = DomainKnowledge(
    domain=DOMAIN,
    citations=CITATIONS,
    factor_citations=FACTOR_CITATIONS,
    advice=ADVICE,
    missing_input=MISSING_INPUT,
)
