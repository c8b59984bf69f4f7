"""
OpenTelemetry tracing for the scoring engine.

Each orchestrator run is one ``knowledge.analyze`` span. It opens with the
run mode and the number of requested domains, and closes with the succeeded
count, the failed domains and, for a scored run, the overall score and grade.
A run rejected for insufficient analysis ends with ERROR status and the
exception recorded on the span.

Log records emitted inside a span carry its trace_id/span_id through the
add_trace_context structlog processor, so a degraded run can be followed
from its log lines to its trace.

Usage:
    from creative_science.observability.tracing import setup_tracing

    setup_tracing()  # service name and endpoint from Settings
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    SimpleSpanProcessor,
    SpanExporter,
)
from opentelemetry.trace import Span, Tracer
from opentelemetry.trace.propagation import get_current_span

from creative_science.config.settings import Settings, get_settings

if TYPE_CHECKING:
    from contextlib import AbstractContextManager

    from creative_science.knowledge.schemas import CompositeScore

logger = logging.getLogger(__name__)

ANALYZE_SPAN = "knowledge.analyze"

DEFAULT_OTLP_ENDPOINT = "http://localhost:4317"


def setup_tracing(
    settings: Settings | None = None,
    *,
    exporter: SpanExporter | None = None,
) -> TracerProvider:
    """
    Install a global TracerProvider for the engine.

    Spans are exported over OTLP gRPC in batches. A custom exporter (e.g.
    InMemorySpanExporter in tests) is flushed synchronously instead.

    Args:
        settings: Service name, environment and OTLP endpoint (default from
            environment if None)
        exporter: Optional exporter replacing OTLP

    Returns:
        The configured TracerProvider
    """
    settings = settings or get_settings()
    resource = Resource.create(
        {
            "service.name": settings.otel_service_name,
            "deployment.environment": settings.environment,
        }
    )
    provider = TracerProvider(resource=resource)

    if exporter is None:
        from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import (
            OTLPSpanExporter,
        )

        endpoint = settings.otel_exporter_otlp_endpoint or DEFAULT_OTLP_ENDPOINT
        provider.add_span_processor(
            BatchSpanProcessor(OTLPSpanExporter(endpoint=endpoint, insecure=True))
        )
    else:
        endpoint = "(custom exporter)"
        provider.add_span_processor(SimpleSpanProcessor(exporter))
    trace.set_tracer_provider(provider)

    logger.info(
        "OpenTelemetry tracing initialized: service=%s endpoint=%s",
        settings.otel_service_name,
        endpoint,
    )
    return provider


def get_tracer(name: str) -> Tracer:
    """Named tracer; a no-op tracer until setup_tracing() has run."""
    return trace.get_tracer(name)


def analysis_span(
    tracer: Tracer, *, mode: str, requested_domains: int
) -> AbstractContextManager[Span]:
    """
    Open the span covering one orchestrator run.

    Exceptions escaping the block are recorded on the span and set its
    status to ERROR.

    Args:
        tracer: Tracer to start the span with
        mode: "sync" or "async"
        requested_domains: Number of analyzers the run will invoke
    """
    return tracer.start_as_current_span(
        ANALYZE_SPAN,
        attributes={
            "knowledge.mode": mode,
            "knowledge.requested_domains": requested_domains,
        },
        record_exception=True,
        set_status_on_exception=True,
    )


def record_analysis_outcome(
    span: Span,
    succeeded: int,
    failed_domains: Sequence[str],
    composite: CompositeScore | None = None,
) -> None:
    """Attach the result of a run to its span."""
    span.set_attribute("knowledge.succeeded_domains", succeeded)
    span.set_attribute("knowledge.failed_domains", list(failed_domains))
    if composite is not None:
        span.set_attribute("knowledge.overall", composite.overall)
        span.set_attribute("knowledge.grade", composite.grade)


def add_trace_context(
    logger_: Any, method: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Structlog processor adding trace_id/span_id of the active span."""
    ctx = get_current_span().get_span_context()
    if ctx.is_valid:
        event_dict["trace_id"] = f"{ctx.trace_id:032x}"
        event_dict["span_id"] = f"{ctx.span_id:016x}"
    return event_dict
