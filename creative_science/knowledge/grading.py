"""Grade table and recommendation ranking.

The same grade table applies to every domain score and to the composite
score. Recommendations are ranked by priority with a stable sort, so among
equal priorities the domain registration order (and the per-domain
worst-first order) is preserved.
"""

from collections.abc import Iterable

from creative_science.knowledge.schemas import DomainRecommendation

# (lower bound inclusive, grade), highest first
GRADE_BOUNDARIES: tuple[tuple[int, str], ...] = (
    (95, "A+"),
    (90, "A"),
    (85, "B+"),
    (80, "B"),
    (70, "C+"),
    (60, "C"),
    (40, "D"),
)
FAILING_GRADE = "F"

PRIORITY_RANK: dict[str, int] = {
    "critical": 0,
    "high": 1,
    "medium": 2,
    "low": 3,
}


def get_grade(score: float) -> str:
    """Map a 0-100 score to its letter grade.

    Args:
        score: Domain or composite score.

    Returns:
        One of A+, A, B+, B, C+, C, D, F.
    """
    for lower_bound, grade in GRADE_BOUNDARIES:
        if score >= lower_bound:
            return grade
    return FAILING_GRADE


def priority_for_score(score: float) -> str:
    """Priority of a recommendation triggered by a factor with this score."""
    if score < 50:
        return "critical"
    if score < 60:
        return "high"
    if score < 70:
        return "medium"
    return "low"


def rank_recommendations(
    recommendations: Iterable[DomainRecommendation],
    limit: int | None = None,
) -> list[DomainRecommendation]:
    """Stable-sort recommendations by priority rank, most urgent first.

    Args:
        recommendations: Recommendations in domain registration order.
        limit: Keep at most this many. None keeps all of them.

    Returns:
        Ranked list.
    """
    ranked = sorted(recommendations, key=lambda r: PRIORITY_RANK[r.priority])
    if limit is not None:
        return ranked[:limit]
    return ranked
