"""Multi-domain scoring service.

Runs every registered domain analyzer over one creative, isolates the
failure of any single analyzer, enforces the minimum number of successful
domains, and combines the results into a composite score.

The service is pure apart from logging and metrics: it holds only read-only
analyzers and weight tables, so one instance can serve concurrent callers.

Usage:
    from creative_science.knowledge import AnalysisInput, KnowledgeBaseService

    service = KnowledgeBaseService()
    composite = service.analyze_all(AnalysisInput.from_dict(payload))
    context = service.get_knowledge_context(AnalysisInput.from_dict(payload))
"""

import asyncio
import logging
import time
from collections.abc import Iterable, Mapping, Sequence

from opentelemetry.trace import Span

from creative_science.knowledge.analyzers import DomainAnalyzer, get_all_analyzers
from creative_science.knowledge.composite import build_composite_score
from creative_science.knowledge.config import KnowledgeConfig
from creative_science.knowledge.errors import InsufficientAnalysisError
from creative_science.knowledge.formatter import ContextFormatter
from creative_science.knowledge.grading import rank_recommendations
from creative_science.knowledge.schemas import (
    AnalysisInput,
    CompositeScore,
    DomainRecommendation,
    DomainScore,
)
from creative_science.knowledge.weights import (
    DEFAULT_WEIGHTS,
    OBJECTIVE_WEIGHTS,
    select_weights,
    validate_weight_table,
)
from creative_science.observability.logging import log_context
from creative_science.observability.metrics import MetricsCollector, get_metrics
from creative_science.observability.tracing import (
    analysis_span,
    get_tracer,
    record_analysis_outcome,
)

logger = logging.getLogger(__name__)

# (domain, score or None, exception class name or None)
_RunResult = tuple[str, DomainScore | None, str | None]


class KnowledgeBaseService:
    """
    Orchestrates the domain analyzers.

    Constructor: ``(analyzers?, config?, formatter?, default_weights?,
    objective_weights?, metrics?)`` with every argument optional.

    Methods:
      - ``analyze_all(input)`` - run every registered analyzer
      - ``analyze_specific(input, domains)`` - run a subset by domain id
      - ``analyze_all_async`` / ``analyze_specific_async`` - same, fanned out to threads
      - ``get_knowledge_context(input)`` - analyze_all + bounded text context
      - ``get_recommendations(input)`` - analyze_all + every recommendation, ranked
      - ``get_weights(objective)`` - weight table selected for an objective

    Args:
        analyzers: Analyzer instances in registration order (built-ins if None).
        config: Engine configuration (default from environment if None).
        formatter: Context formatter (default built from config if None).
        default_weights: Weight table used without a recognized objective.
        objective_weights: Objective -> weight table overrides.
        metrics: Metrics collector (global collector if None).

    Raises:
        ValueError: On duplicate analyzer domains or an invalid weight table.
    """

    def __init__(
        self,
        analyzers: Sequence[DomainAnalyzer] | None = None,
        config: KnowledgeConfig | None = None,
        formatter: ContextFormatter | None = None,
        default_weights: Mapping[str, float] | None = None,
        objective_weights: Mapping[str, Mapping[str, float]] | None = None,
        metrics: MetricsCollector | None = None,
    ) -> None:
        self._config = config or KnowledgeConfig()
        self._analyzers = list(analyzers) if analyzers is not None else get_all_analyzers(self._config)

        domains = [a.domain for a in self._analyzers]
        duplicates = sorted({d for d in domains if domains.count(d) > 1})
        if duplicates:
            raise ValueError(f"Duplicate analyzer domains: {duplicates}")
        self._domains = tuple(domains)

        self._default_weights = dict(default_weights or DEFAULT_WEIGHTS)
        self._objective_weights = {
            objective: dict(table)
            for objective, table in (objective_weights or OBJECTIVE_WEIGHTS).items()
        }
        # Built-in tables are validated at import; custom ones against the registered domains
        if default_weights is not None:
            self._validate_weights(self._default_weights)
        if objective_weights is not None:
            for table in self._objective_weights.values():
                self._validate_weights(table)

        self._formatter = formatter or ContextFormatter(config=self._config)
        self._metrics = (metrics or get_metrics()) if self._config.metrics_enabled else None
        self._tracer = get_tracer(__name__)

    @property
    def domains(self) -> tuple[str, ...]:
        """Registered domain ids, in registration order."""
        return self._domains

    @property
    def config(self) -> KnowledgeConfig:
        return self._config

    def _validate_weights(self, table: Mapping[str, float]) -> None:
        unknown = sorted(set(table) - set(self._domains))
        if unknown:
            raise ValueError(f"Weight table has unknown domains: {unknown}")
        validate_weight_table(table, domains=table.keys())

    def get_weights(self, objective: str | None) -> dict[str, float]:
        """Weight table for an objective; the default table when unrecognized."""
        return select_weights(objective, self._default_weights, self._objective_weights)

    # ── Synchronous analysis ─────────────────────────────

    def analyze_all(self, input: AnalysisInput) -> CompositeScore:
        """
        Run every registered analyzer and build the composite score.

        Args:
            input: Analysis input.

        Returns:
            CompositeScore over the domains that succeeded.

        Raises:
            InsufficientAnalysisError: If fewer analyzers succeeded than
                ``min_required_domains``.
        """
        return self._analyze(input, self._analyzers)

    def analyze_specific(self, input: AnalysisInput, domains: Iterable[str]) -> CompositeScore:
        """
        Run the analyzers of the given domains, in registration order.

        Unknown domain ids are ignored. The minimum-success policy still
        applies, so selecting fewer domains than ``min_required_domains``
        always raises.

        Args:
            input: Analysis input.
            domains: Domain ids to run.

        Returns:
            CompositeScore over the selected domains that succeeded.

        Raises:
            InsufficientAnalysisError: If too few selected analyzers succeeded.
        """
        return self._analyze(input, self._select(domains))

    def get_knowledge_context(self, input: AnalysisInput) -> str:
        """Run every analyzer and render the bounded knowledge context."""
        return self._formatter.format(self.analyze_all(input))

    def get_recommendations(self, input: AnalysisInput) -> list[DomainRecommendation]:
        """
        Run every analyzer and rank all of their recommendations.

        Returns:
            Every recommendation of every succeeded domain, stable-sorted by
            priority (not truncated).
        """
        composite = self.analyze_all(input)
        flattened = [rec for ds in composite.domain_scores for rec in ds.recommendations]
        return rank_recommendations(flattened)

    # ── Asynchronous analysis ────────────────────────────

    async def analyze_all_async(self, input: AnalysisInput) -> CompositeScore:
        """Like analyze_all, with analyzers running concurrently in worker threads."""
        return await self._analyze_async(input, self._analyzers)

    async def analyze_specific_async(
        self, input: AnalysisInput, domains: Iterable[str]
    ) -> CompositeScore:
        """Like analyze_specific, with analyzers running concurrently in worker threads."""
        return await self._analyze_async(input, self._select(domains))

    # ── Internals ────────────────────────────────────────

    def _select(self, domains: Iterable[str]) -> list[DomainAnalyzer]:
        wanted = set(domains)
        ignored = sorted(wanted - set(self._domains))
        if ignored:
            logger.debug("Ignoring unknown domains: %s", ignored)
        return [a for a in self._analyzers if a.domain in wanted]

    def _log_context(self, input: AnalysisInput):
        return log_context(objective=input.objective, industry=input.context.industry)

    def _run_one(self, analyzer: DomainAnalyzer, input: AnalysisInput) -> _RunResult:
        """Run one analyzer, converting any exception into a failure entry."""
        start = time.perf_counter()
        try:
            score = analyzer.analyze(input)
        except Exception as e:
            logger.warning(
                "Domain analyzer %s failed: %s: %s",
                analyzer.domain,
                type(e).__name__,
                e,
            )
            if self._metrics:
                self._metrics.record_analyzer_error(analyzer.domain, type(e).__name__)
            return analyzer.domain, None, type(e).__name__

        if self._metrics:
            self._metrics.record_analyzer_run(analyzer.domain, latency=time.perf_counter() - start)
        return analyzer.domain, score, None

    def _analyze(self, input: AnalysisInput, analyzers: list[DomainAnalyzer]) -> CompositeScore:
        with self._log_context(input), analysis_span(
            self._tracer, mode="sync", requested_domains=len(analyzers)
        ) as span:
            results = [self._run_one(a, input) for a in analyzers]
            return self._combine(input, results, span)

    async def _analyze_async(
        self, input: AnalysisInput, analyzers: list[DomainAnalyzer]
    ) -> CompositeScore:
        with self._log_context(input), analysis_span(
            self._tracer, mode="async", requested_domains=len(analyzers)
        ) as span:
            # gather preserves argument order, so results stay in registration order
            results = await asyncio.gather(
                *(asyncio.to_thread(self._run_one, a, input) for a in analyzers)
            )
            return self._combine(input, list(results), span)

    def _combine(
        self, input: AnalysisInput, results: list[_RunResult], span: Span
    ) -> CompositeScore:
        succeeded: list[DomainScore] = []
        failed: list[str] = []
        for domain, score, _error in results:
            if score is None:
                failed.append(domain)
            else:
                succeeded.append(score)

        required = self._config.min_required_domains
        if len(succeeded) < required:
            logger.warning(
                "Insufficient analysis: %d of %d required domains succeeded (failed: %s)",
                len(succeeded),
                required,
                ", ".join(failed) or "none",
            )
            record_analysis_outcome(span, len(succeeded), failed)
            if self._metrics:
                self._metrics.record_analysis("insufficient")
            raise InsufficientAnalysisError(len(succeeded), required, failed)

        composite = build_composite_score(
            succeeded,
            self.get_weights(input.objective),
            failed_domains=failed,
            top_n=self._config.top_recommendations,
        )
        record_analysis_outcome(span, len(succeeded), failed, composite)

        if self._metrics:
            self._metrics.record_analysis("success", overall=composite.overall)
        logger.info(
            "Analysis complete: overall=%d grade=%s domains=%d failed=%d",
            composite.overall,
            composite.grade,
            len(succeeded),
            len(failed),
        )
        return composite
