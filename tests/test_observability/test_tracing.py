"""
Tests for OpenTelemetry tracing module.

Verifies:
- TracerProvider setup with InMemorySpanExporter
- Structlog processor adds trace_id/span_id to log entries
- analysis_span() opens the run span and records exceptions
- The orchestrator opens one knowledge.analyze span per run
"""

import pytest
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

from creative_science.config.settings import Settings
from creative_science.knowledge.config import KnowledgeConfig
from creative_science.knowledge.errors import InsufficientAnalysisError
from creative_science.knowledge.schemas import AnalysisInput, DomainScore
from creative_science.knowledge.service import KnowledgeBaseService
from creative_science.observability.tracing import (
    ANALYZE_SPAN,
    add_trace_context,
    analysis_span,
    get_tracer,
    record_analysis_outcome,
    setup_tracing,
)

# Module-level exporter shared across all tests. OTel's global TracerProvider
# can only be set once per process, so we initialize it once and clear the
# exporter between tests.
_exporter = InMemorySpanExporter()
_provider = setup_tracing(
    Settings(_env_file=None, otel_service_name="test-service", environment="staging"),
    exporter=_exporter,
)


@pytest.fixture(autouse=True)
def _clear_spans():
    """Clear exported spans before each test."""
    _exporter.clear()
    yield
    _exporter.clear()


class _Fixed:
    def __init__(self, domain: str, fail: bool = False) -> None:
        self.domain = domain
        self.fail = fail

    def analyze(self, input: AnalysisInput) -> DomainScore:
        if self.fail:
            raise RuntimeError("boom")
        return DomainScore(domain=self.domain, score=80, grade="B")


def _service(*failing: str) -> KnowledgeBaseService:
    domains = ("neuromarketing", "marketing_psychology", "crowd_psychology", "platform_best_practices")
    return KnowledgeBaseService(
        analyzers=[_Fixed(d, d in failing) for d in domains],
        config=KnowledgeConfig(metrics_enabled=False, min_required_domains=3),
    )


class TestSetupTracing:
    """Tests for setup_tracing()."""

    def test_resource_from_settings(self):
        attrs = _provider.resource.attributes
        assert attrs["service.name"] == "test-service"
        assert attrs["deployment.environment"] == "staging"

    def test_tracer_exports_to_custom_exporter(self):
        with get_tracer("test").start_as_current_span("probe"):
            pass
        assert [s.name for s in _exporter.get_finished_spans()] == ["probe"]


class TestAnalysisSpan:
    """Tests for analysis_span() and record_analysis_outcome()."""

    def test_opens_named_span_with_attributes(self):
        with analysis_span(get_tracer("test"), mode="sync", requested_domains=6):
            pass

        spans = _exporter.get_finished_spans()
        assert len(spans) == 1
        assert spans[0].name == ANALYZE_SPAN
        assert spans[0].attributes["knowledge.mode"] == "sync"
        assert spans[0].attributes["knowledge.requested_domains"] == 6

    def test_records_exception(self):
        with pytest.raises(ValueError, match="test error"):
            with analysis_span(get_tracer("test"), mode="sync", requested_domains=1):
                raise ValueError("test error")

        span = _exporter.get_finished_spans()[0]
        assert span.status.status_code.name == "ERROR"
        assert any(e.name == "exception" for e in span.events)

    def test_outcome_without_composite(self):
        with analysis_span(get_tracer("test"), mode="sync", requested_domains=3) as span:
            record_analysis_outcome(span, 1, ["neuromarketing", "color_psychology"])

        attrs = _exporter.get_finished_spans()[0].attributes
        assert attrs["knowledge.succeeded_domains"] == 1
        assert tuple(attrs["knowledge.failed_domains"]) == ("neuromarketing", "color_psychology")
        assert "knowledge.overall" not in attrs


class TestStructlogProcessor:
    """Tests for the add_trace_context structlog processor."""

    def test_adds_trace_id_with_active_span(self):
        """Processor should add trace_id and span_id when span is active."""
        tracer = get_tracer("test")

        with tracer.start_as_current_span("log_test") as span:
            result = add_trace_context(None, "info", {"event": "test message"})

            assert result["trace_id"] == f"{span.get_span_context().trace_id:032x}"
            assert result["span_id"] == f"{span.get_span_context().span_id:016x}"

    def test_no_trace_id_without_span(self):
        """Processor should not add trace fields when no span is active."""
        result = add_trace_context(None, "info", {"event": "test message"})
        assert "trace_id" not in result

    def test_preserves_existing_fields(self):
        """Processor should not overwrite existing event_dict fields."""
        tracer = get_tracer("test")

        with tracer.start_as_current_span("test"):
            result = add_trace_context(None, "info", {"event": "test", "custom_field": 42})

        assert result["custom_field"] == 42
        assert result["event"] == "test"


class TestAnalyzeSpan:
    """The orchestrator traces every run."""

    def test_successful_run(self):
        _service("crowd_psychology").analyze_all(AnalysisInput())

        spans = [s for s in _exporter.get_finished_spans() if s.name == ANALYZE_SPAN]
        assert len(spans) == 1
        attrs = spans[0].attributes
        assert attrs["knowledge.requested_domains"] == 4
        assert attrs["knowledge.mode"] == "sync"
        assert attrs["knowledge.succeeded_domains"] == 3
        assert tuple(attrs["knowledge.failed_domains"]) == ("crowd_psychology",)
        assert attrs["knowledge.overall"] == 80
        assert attrs["knowledge.grade"] == "B"

    def test_insufficient_run_marks_error(self):
        with pytest.raises(InsufficientAnalysisError):
            _service("neuromarketing", "crowd_psychology").analyze_all(AnalysisInput())

        span = next(s for s in _exporter.get_finished_spans() if s.name == ANALYZE_SPAN)
        assert span.status.status_code.name == "ERROR"
        assert span.attributes["knowledge.succeeded_domains"] == 2

    @pytest.mark.asyncio
    async def test_async_run(self):
        await _service().analyze_all_async(AnalysisInput())

        span = next(s for s in _exporter.get_finished_spans() if s.name == ANALYZE_SPAN)
        assert span.attributes["knowledge.mode"] == "async"
