"""Schema definitions for the multi-domain scoring engine.

Provides the analysis input handed in by the application layer and the
immutable value types every domain analyzer produces: citations, scoring
factors, recommendations, per-domain scores and the composite score.

All types are frozen dataclasses with tuple-valued sequences. They are
created fresh for each analysis call and never mutated afterwards.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Literal

KnowledgeDomain = Literal[
    "neuromarketing",
    "marketing_psychology",
    "crowd_psychology",
    "platform_best_practices",
    "color_psychology",
    "copywriting_psychology",
]

# Registration order. Recommendation tie-breaks and failed-domain reporting
# follow this order.
ALL_KNOWLEDGE_DOMAINS: tuple[str, ...] = (
    "neuromarketing",
    "marketing_psychology",
    "crowd_psychology",
    "platform_best_practices",
    "color_psychology",
    "copywriting_psychology",
)

Priority = Literal["critical", "high", "medium", "low"]
ConfidenceLevel = Literal["high", "medium", "low"]
Objective = Literal["awareness", "consideration", "conversion"]
CreativeFormat = Literal["image", "video", "carousel"]
Grade = Literal["A+", "A", "B+", "B", "C+", "C", "D", "F"]

VALID_PRIORITIES: frozenset[str] = frozenset({"critical", "high", "medium", "low"})
VALID_CONFIDENCE_LEVELS: frozenset[str] = frozenset({"high", "medium", "low"})
VALID_OBJECTIVES: frozenset[str] = frozenset({"awareness", "consideration", "conversion"})
VALID_FORMATS: frozenset[str] = frozenset({"image", "video", "carousel"})

MAX_SCORE = 100


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value)
    return text if text.strip() else None


def _optional_float(value: Any) -> float | None:
    if value is None or value == "":
        return None
    return float(value)


def _flag(value: Any) -> bool:
    """Real booleans, or the strings "true"/"false" in any case. None is False."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    raise ValueError(f"Expected a boolean, got {value!r}")


def _names(value: Any) -> tuple[str, ...]:
    """Lower-cased, non-blank names from a list; a bare string is one name."""
    if value is None:
        return ()
    if isinstance(value, str):
        value = [value]
    elif not isinstance(value, (list, tuple)):
        raise ValueError(f"Expected a list of names, got {type(value).__name__}")
    return tuple(str(v).strip().lower() for v in value if str(v).strip())


# ── Analysis input ───────────────────────────────────────


@dataclass(frozen=True)
class ContentInput:
    """Copy of the creative. Every field is optional."""

    headline: str | None = None
    primary_text: str | None = None
    description: str | None = None
    call_to_action: str | None = None

    @property
    def is_empty(self) -> bool:
        """True when no copy field carries any text."""
        return not any(
            (self.headline, self.primary_text, self.description, self.call_to_action)
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ContentInput":
        return cls(
            headline=_optional_str(data.get("headline")),
            primary_text=_optional_str(data.get("primary_text")),
            description=_optional_str(data.get("description")),
            call_to_action=_optional_str(data.get("call_to_action")),
        )


@dataclass(frozen=True)
class CreativeInput:
    """Visual metadata of the creative.

    Attributes:
        format: image / video / carousel. Unknown values are treated as image.
        has_video: Whether any video asset is attached.
        video_duration: Video length in seconds.
        dominant_colors: Color names, most dominant first.
    """

    format: str | None = None
    has_video: bool = False
    video_duration: float | None = None
    dominant_colors: tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        """True when no creative metadata was supplied."""
        return (
            self.format is None
            and not self.has_video
            and not self.video_duration
            and not self.dominant_colors
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CreativeInput":
        return cls(
            format=_optional_str(data.get("format")),
            has_video=_flag(data.get("has_video")),
            video_duration=_optional_float(data.get("video_duration")),
            dominant_colors=_names(data.get("dominant_colors")),
        )


@dataclass(frozen=True)
class ContextInput:
    """Campaign context: industry and objective."""

    industry: str | None = None
    objective: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ContextInput":
        return cls(
            industry=_optional_str(data.get("industry")),
            objective=_optional_str(data.get("objective")),
        )


@dataclass(frozen=True)
class MetricsInput:
    """Observed performance. CTR and CVR are percentages, ROAS a ratio."""

    ctr: float | None = None
    cvr: float | None = None
    roas: float | None = None

    @property
    def is_empty(self) -> bool:
        return not any((self.ctr, self.cvr, self.roas))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MetricsInput":
        return cls(
            ctr=_optional_float(data.get("ctr")),
            cvr=_optional_float(data.get("cvr")),
            roas=_optional_float(data.get("roas")),
        )


@dataclass(frozen=True)
class AnalysisInput:
    """
    Everything the engine knows about one creative.

    Constructed once per analysis request by the application layer. Missing
    fields are never an error: analyzers fall back to a neutral placeholder
    score for the parts they cannot evaluate.

    Attributes:
        content: Headline, primary text, description and call-to-action.
        creative: Format, video and color metadata.
        context: Industry and campaign objective.
        metrics: Optional observed CTR / CVR / ROAS.
        as_of: Reference date for season-dependent heuristics. When absent the
            analyzer's own clock is used.
    """

    content: ContentInput = field(default_factory=ContentInput)
    creative: CreativeInput = field(default_factory=CreativeInput)
    context: ContextInput = field(default_factory=ContextInput)
    metrics: MetricsInput | None = None
    as_of: date | None = None

    @property
    def objective(self) -> str | None:
        return self.context.objective

    @property
    def text_fields(self) -> tuple[str, ...]:
        """Non-empty copy fields in reading order."""
        parts = (
            self.content.headline,
            self.content.primary_text,
            self.content.description,
            self.content.call_to_action,
        )
        return tuple(p for p in parts if p)

    @property
    def all_text(self) -> str:
        """All copy fields joined with single spaces."""
        return " ".join(self.text_fields)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AnalysisInput":
        """
        Create AnalysisInput from a dictionary (e.g. parsed JSON).

        Args:
            data: Dictionary with optional "content", "creative", "context",
                "metrics" and "as_of" keys.

        Returns:
            AnalysisInput instance.
        """
        as_of = data.get("as_of")
        if isinstance(as_of, str):
            as_of = date.fromisoformat(as_of)

        metrics = data.get("metrics")
        return cls(
            content=ContentInput.from_dict(data.get("content") or {}),
            creative=CreativeInput.from_dict(data.get("creative") or {}),
            context=ContextInput.from_dict(data.get("context") or {}),
            metrics=MetricsInput.from_dict(metrics) if metrics else None,
            as_of=as_of,
        )


# ── Analyzer output ──────────────────────────────────────


@dataclass(frozen=True)
class Citation:
    """
    Provenance for a factor or recommendation.

    Many factors may reference the same citation id.

    Attributes:
        id: Stable citation identifier (e.g. "neuro-001").
        domain: Domain that owns the citation.
        source: Authors / publication.
        finding: What the research found.
        applicability: How the finding applies to ad creatives.
        confidence_level: high / medium / low.
        category: Free-form category tag.
        year: Publication year, when known.
    """

    id: str
    domain: str
    source: str
    finding: str
    applicability: str
    confidence_level: ConfidenceLevel = "high"
    category: str = ""
    year: int | None = None

    def __post_init__(self) -> None:
        if self.confidence_level not in VALID_CONFIDENCE_LEVELS:
            raise ValueError(
                f"Invalid confidence_level {self.confidence_level!r}. "
                f"Must be one of: {sorted(VALID_CONFIDENCE_LEVELS)}"
            )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "domain": self.domain,
            "source": self.source,
            "finding": self.finding,
            "applicability": self.applicability,
            "confidence_level": self.confidence_level,
            "category": self.category,
            "year": self.year,
        }


@dataclass(frozen=True)
class ScoringFactor:
    """
    One weighted sub-score of a domain.

    Attributes:
        name: Factor name, unique within its domain.
        score: Sub-score in [0, 100].
        weight: Share of the domain score in [0, 1]. Weights of one domain sum to 1.
        explanation: Human-readable reasoning behind the score.
        citation: Supporting research, if any.
    """

    name: str
    score: float
    weight: float
    explanation: str
    citation: Citation | None = None

    def __post_init__(self) -> None:
        if not (0 <= self.score <= MAX_SCORE):
            raise ValueError(f"Factor {self.name!r} score must be 0-100, got {self.score}")
        if not (0.0 <= self.weight <= 1.0):
            raise ValueError(f"Factor {self.name!r} weight must be 0-1, got {self.weight}")

    @property
    def weighted_score(self) -> float:
        return self.score * self.weight

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "score": self.score,
            "weight": self.weight,
            "explanation": self.explanation,
            "citation": self.citation.to_dict() if self.citation else None,
        }


@dataclass(frozen=True)
class DomainRecommendation:
    """An actionable, citation-backed recommendation from one domain."""

    domain: str
    priority: Priority
    recommendation: str
    scientific_basis: str
    expected_impact: str
    citations: tuple[Citation, ...] = ()

    def __post_init__(self) -> None:
        if self.priority not in VALID_PRIORITIES:
            raise ValueError(
                f"Invalid priority {self.priority!r}. "
                f"Must be one of: {sorted(VALID_PRIORITIES)}"
            )

    def to_dict(self) -> dict[str, Any]:
        return {
            "domain": self.domain,
            "priority": self.priority,
            "recommendation": self.recommendation,
            "scientific_basis": self.scientific_basis,
            "expected_impact": self.expected_impact,
            "citations": [c.to_dict() for c in self.citations],
        }


@dataclass(frozen=True)
class DomainScore:
    """
    Result of one successful analyzer run.

    Attributes:
        domain: Domain identifier.
        score: round(sum(factor.score * factor.weight)), clamped to [0, 100].
        grade: Letter grade derived from score.
        factors: Ordered scoring factors.
        citations: Ordered citations consulted by the domain.
        recommendations: Worst-first recommendations (at most a few per domain).
        max_score: Always 100.
    """

    domain: str
    score: int
    grade: str
    factors: tuple[ScoringFactor, ...] = ()
    citations: tuple[Citation, ...] = ()
    recommendations: tuple[DomainRecommendation, ...] = ()
    max_score: int = MAX_SCORE

    def __post_init__(self) -> None:
        if not (0 <= self.score <= self.max_score):
            raise ValueError(f"Domain {self.domain!r} score must be 0-100, got {self.score}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "domain": self.domain,
            "score": self.score,
            "max_score": self.max_score,
            "grade": self.grade,
            "factors": [f.to_dict() for f in self.factors],
            "citations": [c.to_dict() for c in self.citations],
            "recommendations": [r.to_dict() for r in self.recommendations],
        }


@dataclass(frozen=True)
class CompositeScore:
    """
    Cross-domain aggregate produced once per orchestrator run.

    Attributes:
        overall: Weighted composite score in [0, 100].
        grade: Letter grade of the overall score.
        domain_scores: Scores of the domains that succeeded, in registration order.
        failed_domains: Domains whose analyzer raised, in registration order.
        top_recommendations: Highest-priority recommendations across domains.
        analyzed_domains: Identifiers of domain_scores, in order.
        total_citations: Citations of all succeeded domains, concatenated.
        weights: Renormalized weights actually applied (sum to 1.0).
        summary: One-line description of the result.
    """

    overall: int
    grade: str
    domain_scores: tuple[DomainScore, ...] = ()
    failed_domains: tuple[str, ...] = ()
    top_recommendations: tuple[DomainRecommendation, ...] = ()
    analyzed_domains: tuple[str, ...] = ()
    total_citations: tuple[Citation, ...] = ()
    weights: dict[str, float] = field(default_factory=dict)
    summary: str = ""

    def get_domain_score(self, domain: str) -> DomainScore | None:
        """Look up the score of one succeeded domain."""
        for ds in self.domain_scores:
            if ds.domain == domain:
                return ds
        return None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "overall": self.overall,
            "grade": self.grade,
            "domain_scores": [ds.to_dict() for ds in self.domain_scores],
            "failed_domains": list(self.failed_domains),
            "top_recommendations": [r.to_dict() for r in self.top_recommendations],
            "analyzed_domains": list(self.analyzed_domains),
            "total_citations": [c.to_dict() for c in self.total_citations],
            "weights": dict(self.weights),
            "summary": self.summary,
        }
