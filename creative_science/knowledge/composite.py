"""Composite score builder.

Combines the succeeded domain scores into one weighted overall score,
grades it, and ranks the cross-domain recommendations.
"""

from collections.abc import Mapping, Sequence

from creative_science.knowledge.grading import get_grade, rank_recommendations
from creative_science.knowledge.schemas import CompositeScore, DomainScore
from creative_science.knowledge.weights import DEFAULT_WEIGHTS, renormalize_weights

DEFAULT_TOP_RECOMMENDATIONS = 5


def _clamp_score(value: float) -> int:
    return max(0, min(100, round(value)))


def calculate_weighted_average(
    domain_scores: Sequence[DomainScore],
    weights: Mapping[str, float] | None = None,
) -> int:
    """
    Weighted average of domain scores, renormalized over the given domains.

    Args:
        domain_scores: Scores to combine.
        weights: Weight table (default table when omitted). Domains missing
            from it contribute nothing unless every weight is zero.

    Returns:
        round(sum(score * w) / sum(w)) clamped to [0, 100]; 0 when no scores.
    """
    if not domain_scores:
        return 0
    table = DEFAULT_WEIGHTS if weights is None else weights
    normalized = renormalize_weights(table, (ds.domain for ds in domain_scores))
    return _clamp_score(sum(ds.score * normalized[ds.domain] for ds in domain_scores))


def build_summary(overall: int, grade: str, analyzed: int, failed: int) -> str:
    """One-line description of a composite result."""
    summary = f"Overall score {overall}/100 (grade {grade}) across {analyzed} domain(s)"
    if failed:
        summary += f"; {failed} domain(s) failed"
    return summary


def build_composite_score(
    domain_scores: Sequence[DomainScore],
    weights: Mapping[str, float],
    failed_domains: Sequence[str] = (),
    top_n: int = DEFAULT_TOP_RECOMMENDATIONS,
) -> CompositeScore:
    """
    Build the composite score from the domains that succeeded.

    The selected weight table is restricted to the succeeded domains and
    rescaled to sum to 1.0 before weighting.

    Args:
        domain_scores: Succeeded domain scores in registration order.
        weights: Selected (unnormalized) weight table.
        failed_domains: Domains whose analyzer raised, in registration order.
        top_n: Recommendations kept on the composite.

    Returns:
        CompositeScore.
    """
    applied = renormalize_weights(weights, (ds.domain for ds in domain_scores))
    overall = _clamp_score(sum(ds.score * applied[ds.domain] for ds in domain_scores))
    grade = get_grade(overall)

    flattened = [rec for ds in domain_scores for rec in ds.recommendations]
    top = rank_recommendations(flattened, limit=top_n)

    return CompositeScore(
        overall=overall,
        grade=grade,
        domain_scores=tuple(domain_scores),
        failed_domains=tuple(failed_domains),
        top_recommendations=tuple(top),
        analyzed_domains=tuple(ds.domain for ds in domain_scores),
        total_citations=tuple(c for ds in domain_scores for c in ds.citations),
        weights=applied,
        summary=build_summary(overall, grade, len(domain_scores), len(failed_domains)),
    )
