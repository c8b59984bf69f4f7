"""Context formatter.

Renders a CompositeScore as a bounded plain-text block meant to be injected
into a downstream language-model prompt as grounding context.

The text is assembled from sections, each with a drop priority. When the
rendered text exceeds the character budget, sections are removed starting
with the least important (highest priority number), last one first, until
it fits. The header and the failed-domain warning are never removed.
"""

import logging
from dataclasses import dataclass

from creative_science.knowledge.config import KnowledgeConfig
from creative_science.knowledge.data.display import DOMAIN_DISPLAY_NAMES, display_name
from creative_science.knowledge.schemas import CompositeScore, DomainScore, ScoringFactor

logger = logging.getLogger(__name__)

# Drop priorities: 0 is never dropped, larger numbers are dropped first
REQUIRED = 0
DOMAIN_LINE = 1
FIRST_RECOMMENDATION = 2
TOP_FINDING = 3
FINDING_CITATION = 4
EXTRA_RECOMMENDATION = 5
RECOMMENDATION_CITATION = 6

MAX_RECOMMENDATIONS = 5

RECOMMENDATIONS_HEADING = "Top recommendations:"


@dataclass(frozen=True)
class Section:
    """A block of the rendered context (usually one line) and how readily it can be dropped."""

    text: str
    priority: int


def top_finding(domain_score: DomainScore) -> ScoringFactor | None:
    """Factor with the largest score * weight; the first one wins ties."""
    if not domain_score.factors:
        return None
    return max(domain_score.factors, key=lambda f: f.weighted_score)


def render(sections: list[Section]) -> str:
    return "\n".join(s.text for s in sections)


def fit_to_budget(sections: list[Section], max_chars: int) -> list[Section]:
    """
    Drop sections until the rendered text fits in max_chars.

    The droppable section with the highest priority number goes first; among
    equal priorities the one furthest down goes first. Required sections are
    kept even if they alone exceed the budget.

    Args:
        sections: Sections in output order.
        max_chars: Character budget.

    Returns:
        Surviving sections, in output order.
    """
    kept = list(sections)
    length = len(render(kept))
    while length > max_chars:
        droppable = [(s.priority, i) for i, s in enumerate(kept) if s.priority != REQUIRED]
        if not droppable:
            break
        _, index = max(droppable)
        removed = kept.pop(index)
        # One newline goes with every line except a lone survivor
        length -= len(removed.text) + (1 if kept else 0)
    return kept


class ContextFormatter:
    """
    Formats composite scores into a bounded knowledge context.

    Usage:
        formatter = ContextFormatter()
        context = formatter.format(composite)
    """

    def __init__(
        self,
        config: KnowledgeConfig | None = None,
        display_names: dict[str, str] | None = None,
        max_chars: int | None = None,
    ) -> None:
        """
        Initialize the formatter.

        Args:
            config: Engine configuration (token budget, chars per token)
            display_names: Domain id -> display name mapping
            max_chars: Explicit character budget overriding the configured one
        """
        self._config = config or KnowledgeConfig()
        self._names = DOMAIN_DISPLAY_NAMES if display_names is None else display_names
        self._max_chars = self._config.context_char_budget if max_chars is None else max_chars

    @property
    def max_chars(self) -> int:
        return self._max_chars

    def format(self, composite: CompositeScore) -> str:
        """Render the composite score within the character budget."""
        sections = self.build_sections(composite)
        kept = fit_to_budget(sections, self._max_chars)
        if len(kept) < len(sections):
            logger.debug(
                "Context trimmed from %d to %d sections to fit %d chars",
                len(sections),
                len(kept),
                self._max_chars,
            )
        return render(kept)

    def build_sections(self, composite: CompositeScore) -> list[Section]:
        """All sections of the context, in output order, before trimming."""
        sections = [
            Section(
                f"Creative science analysis: overall {composite.overall}/100 "
                f"(grade {composite.grade})",
                REQUIRED,
            )
        ]

        for ds in composite.domain_scores:
            sections.append(
                Section(f"- {self._name(ds.domain)}: {ds.score}/100 ({ds.grade})", DOMAIN_LINE)
            )
            finding = top_finding(ds)
            if finding is None:
                continue
            sections.append(
                Section(
                    f"  Top finding: {finding.name.replace('_', ' ')} "
                    f"({finding.score:g}/100). {finding.explanation}",
                    TOP_FINDING,
                )
            )
            if finding.citation is not None:
                sections.append(
                    Section(
                        f"  Evidence: {finding.citation.finding} ({finding.citation.source})",
                        FINDING_CITATION,
                    )
                )

        recommendations = composite.top_recommendations[:MAX_RECOMMENDATIONS]
        for i, rec in enumerate(recommendations, start=1):
            line = f"{i}. [{rec.priority.upper()}] {self._name(rec.domain)}: {rec.recommendation}"
            if i == 1:
                # The heading lives and dies with the first recommendation
                sections.append(Section(f"{RECOMMENDATIONS_HEADING}\n{line}", FIRST_RECOMMENDATION))
            else:
                sections.append(Section(line, EXTRA_RECOMMENDATION))
            if rec.citations:
                sections.append(
                    Section(f"   Source: {rec.citations[0].source}", RECOMMENDATION_CITATION)
                )

        if composite.failed_domains:
            failed = ", ".join(self._name(d) for d in composite.failed_domains)
            sections.append(
                Section(
                    f"Warning: analysis failed for {failed}; "
                    "the score is based on the remaining domains.",
                    REQUIRED,
                )
            )
        return sections

    def _name(self, domain: str) -> str:
        return display_name(domain, self._names)
