"""Cross-domain weight tables.

A weight table maps every known domain to its share of the composite score.
There is one default table plus one override per campaign objective; each is
complete and sums to 1.0. Exactly one table is selected per run, then
renormalized over the domains that actually succeeded.
"""

import math
from collections.abc import Iterable, Mapping

from creative_science.knowledge.schemas import ALL_KNOWLEDGE_DOMAINS

WEIGHT_TOLERANCE = 1e-6

DEFAULT_WEIGHTS: dict[str, float] = {
    "neuromarketing": 0.20,
    "marketing_psychology": 0.20,
    "crowd_psychology": 0.15,
    "platform_best_practices": 0.20,
    "color_psychology": 0.10,
    "copywriting_psychology": 0.15,
}

OBJECTIVE_WEIGHTS: dict[str, dict[str, float]] = {
    # Awareness rewards attention capture and visual identity
    "awareness": {
        "neuromarketing": 0.25,
        "marketing_psychology": 0.10,
        "crowd_psychology": 0.15,
        "platform_best_practices": 0.20,
        "color_psychology": 0.15,
        "copywriting_psychology": 0.15,
    },
    # Consideration rewards persuasion and message quality
    "consideration": {
        "neuromarketing": 0.15,
        "marketing_psychology": 0.25,
        "crowd_psychology": 0.15,
        "platform_best_practices": 0.15,
        "color_psychology": 0.10,
        "copywriting_psychology": 0.20,
    },
    # Conversion rewards social proof, placement and call-to-action copy
    "conversion": {
        "neuromarketing": 0.15,
        "marketing_psychology": 0.20,
        "crowd_psychology": 0.20,
        "platform_best_practices": 0.20,
        "color_psychology": 0.05,
        "copywriting_psychology": 0.20,
    },
}


def validate_weight_table(
    weights: Mapping[str, float],
    domains: Iterable[str] = ALL_KNOWLEDGE_DOMAINS,
) -> None:
    """
    Check that a weight table is complete, non-negative and sums to 1.0.

    Args:
        weights: Table to check.
        domains: Domains the table must cover exactly.

    Raises:
        ValueError: If the table has unknown or missing domains, a negative
            weight, or does not sum to 1.0.
    """
    expected = set(domains)
    unknown = set(weights) - expected
    if unknown:
        raise ValueError(f"Weight table has unknown domains: {sorted(unknown)}")
    missing = expected - set(weights)
    if missing:
        raise ValueError(f"Weight table is missing domains: {sorted(missing)}")

    negative = [d for d, w in weights.items() if w < 0]
    if negative:
        raise ValueError(f"Weight table has negative weights for: {sorted(negative)}")

    total = sum(weights.values())
    if not math.isclose(total, 1.0, abs_tol=WEIGHT_TOLERANCE):
        raise ValueError(f"Weight table must sum to 1.0, got {total:.6f}")


def select_weights(
    objective: str | None,
    default: Mapping[str, float] | None = None,
    overrides: Mapping[str, Mapping[str, float]] | None = None,
) -> dict[str, float]:
    """
    Pick the weight table for a campaign objective.

    Args:
        objective: Campaign objective from the analysis input.
        default: Table used when the objective is absent or unrecognized.
        overrides: Objective-keyed tables.

    Returns:
        A fresh copy of the selected table.
    """
    default = DEFAULT_WEIGHTS if default is None else default
    overrides = OBJECTIVE_WEIGHTS if overrides is None else overrides
    if objective is not None:
        table = overrides.get(objective.strip().lower())
        if table is not None:
            return dict(table)
    return dict(default)


def renormalize_weights(
    weights: Mapping[str, float],
    domains: Iterable[str],
) -> dict[str, float]:
    """
    Restrict a weight table to a set of domains and rescale it to sum to 1.0.

    Weights are scaled proportionally by 1 / (sum of remaining weights).
    Domains absent from the table get weight 0. When every remaining weight
    is 0 the weight is split uniformly.

    Args:
        weights: Full weight table.
        domains: Domains that contribute to the composite, in order.

    Returns:
        Mapping over ``domains`` (same order) summing to 1.0, or an empty
        mapping when ``domains`` is empty.
    """
    selected = list(dict.fromkeys(domains))
    if not selected:
        return {}

    raw = {d: float(weights.get(d, 0.0)) for d in selected}
    total = sum(raw.values())
    if total <= 0:
        share = 1.0 / len(selected)
        return {d: share for d in selected}
    return {d: w / total for d, w in raw.items()}


for _table in (DEFAULT_WEIGHTS, *OBJECTIVE_WEIGHTS.values()):
    validate_weight_table(_table)
