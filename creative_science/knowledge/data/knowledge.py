"""Containers for the static knowledge a domain analyzer consults.

Analyzers never read module-level tables directly. Each one is constructed
with a ``DomainKnowledge`` instance (and, for some domains, an extra table
such as industry benchmarks), so the data can be swapped per test or per
market without touching analyzer code.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field

from creative_science.knowledge.schemas import Citation


@dataclass(frozen=True)
class FactorAdvice:
    """Advice attached to a recommendation triggered by one factor.

    Attributes:
        recommendation: What to change in the creative.
        scientific_basis: Why the change should help.
        expected_impact: Expected effect on performance.
    """

    recommendation: str
    scientific_basis: str
    expected_impact: str


@dataclass(frozen=True)
class DomainKnowledge:
    """
    Read-only knowledge tables of one domain.

    Attributes:
        domain: Domain identifier the tables belong to.
        citations: Ordered citations reported on every DomainScore.
        factor_citations: Factor name -> citation id.
        advice: Factor name -> advice used when the factor scores low.
        keywords: Named keyword / phrase groups.
        patterns: Named compiled regex groups.
        missing_input: Advice emitted when the domain's input is absent.
    """

    domain: str
    citations: tuple[Citation, ...]
    factor_citations: Mapping[str, str] = field(default_factory=dict)
    advice: Mapping[str, FactorAdvice] = field(default_factory=dict)
    keywords: Mapping[str, tuple[str, ...]] = field(default_factory=dict)
    patterns: Mapping[str, tuple[re.Pattern[str], ...]] = field(default_factory=dict)
    missing_input: FactorAdvice | None = None

    def __post_init__(self) -> None:
        ids = {c.id for c in self.citations}
        dangling = sorted(set(self.factor_citations.values()) - ids)
        if dangling:
            raise ValueError(
                f"Knowledge for {self.domain!r} references unknown citations: {dangling}"
            )

    def citation(self, citation_id: str) -> Citation | None:
        for c in self.citations:
            if c.id == citation_id:
                return c
        return None

    def citation_for(self, factor_name: str) -> Citation | None:
        """Citation backing a factor, if the domain has one."""
        citation_id = self.factor_citations.get(factor_name)
        return self.citation(citation_id) if citation_id else None

    def advice_for(self, factor_name: str) -> FactorAdvice | None:
        return self.advice.get(factor_name)

    def words(self, group: str) -> tuple[str, ...]:
        """Keyword group by name; empty when the group is not defined."""
        return self.keywords.get(group, ())

    def regexes(self, group: str) -> tuple[re.Pattern[str], ...]:
        """Pattern group by name; empty when the group is not defined."""
        return self.patterns.get(group, ())
