"""Observability layer - logging, metrics, and tracing."""

from creative_science.observability.logging import log_context, setup_logging
from creative_science.observability.metrics import MetricsCollector, get_metrics
from creative_science.observability.tracing import get_tracer, setup_tracing

__all__ = ["setup_logging", "log_context", "MetricsCollector", "get_metrics", "setup_tracing", "get_tracer"]
