"""
Prometheus metrics for monitoring the scoring engine.

Defines and exposes metrics for:
- Orchestrator runs (success / insufficient analysis)
- Per-analyzer outcomes and latency
- Analyzer error rates by domain and exception type
- Distribution of composite scores

Metrics are exposed via HTTP endpoint for Prometheus scraping.
"""

import logging

from prometheus_client import (
    REGISTRY,
    Counter,
    Histogram,
    start_http_server,
)

from creative_science.config.settings import get_settings

logger = logging.getLogger(__name__)

# Buckets for analyzer latency histograms (in seconds). Analyzers are pure
# in-memory computations, so the interesting range is sub-millisecond.
LATENCY_BUCKETS = (0.0005, 0.001, 0.0025, 0.005, 0.01, 0.025, 0.05, 0.1, 0.5)

# Buckets aligned with the grade boundaries
SCORE_BUCKETS = (40, 60, 70, 80, 85, 90, 95, 100)


class MetricsCollector:
    """
    Prometheus metrics collector for the scoring engine.

    Usage:
        metrics = get_metrics()
        metrics.start_server()

        metrics.record_analyzer_run("color_psychology", latency=0.0004)
        metrics.record_analysis("success", overall=82)
    """

    def __init__(self):
        """Initialize Prometheus metrics."""

        self.analyses_total = Counter(
            "creative_science_analyses_total",
            "Total orchestrator runs",
            ["status"],  # status: success, insufficient
        )

        self.analyzer_runs = Counter(
            "creative_science_analyzer_runs_total",
            "Total domain analyzer invocations",
            ["domain", "status"],  # status: success, error
        )

        self.analyzer_errors = Counter(
            "creative_science_analyzer_errors_total",
            "Total domain analyzer failures",
            ["domain", "error_type"],
        )

        self.analyzer_latency = Histogram(
            "creative_science_analyzer_latency_seconds",
            "Time spent inside a single domain analyzer",
            ["domain"],
            buckets=LATENCY_BUCKETS,
        )

        self.composite_score = Histogram(
            "creative_science_composite_score",
            "Distribution of overall composite scores",
            buckets=SCORE_BUCKETS,
        )

    def start_server(self, port: int | None = None) -> None:
        """
        Start Prometheus metrics HTTP server.

        Args:
            port: Port to expose metrics on (default from settings)
        """
        settings = get_settings()
        port = port or settings.metrics_port

        start_http_server(port, registry=REGISTRY)
        logger.info(f"Prometheus metrics server started on port {port}")

    # Convenience methods

    def record_analyzer_run(self, domain: str, latency: float | None = None) -> None:
        """
        Record a successful analyzer invocation.

        Args:
            domain: Domain identifier of the analyzer
            latency: Optional analyzer latency in seconds
        """
        self.analyzer_runs.labels(domain=domain, status="success").inc()
        if latency is not None:
            self.analyzer_latency.labels(domain=domain).observe(latency)

    def record_analyzer_error(self, domain: str, error_type: str) -> None:
        """
        Record an analyzer that raised.

        Args:
            domain: Domain identifier of the analyzer
            error_type: Exception class name
        """
        self.analyzer_runs.labels(domain=domain, status="error").inc()
        self.analyzer_errors.labels(domain=domain, error_type=error_type).inc()

    def record_analysis(self, status: str, overall: int | None = None) -> None:
        """
        Record the outcome of one orchestrator run.

        Args:
            status: "success" or "insufficient"
            overall: Composite score when the run succeeded
        """
        self.analyses_total.labels(status=status).inc()
        if overall is not None:
            self.composite_score.observe(overall)


# Global metrics instance
_metrics: MetricsCollector | None = None


def get_metrics() -> MetricsCollector:
    """Get global metrics collector instance."""
    global _metrics
    if _metrics is None:
        _metrics = MetricsCollector()
    return _metrics
