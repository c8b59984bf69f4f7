"""Tests for KnowledgeBaseService orchestration."""

import pytest

from creative_science.knowledge.config import KnowledgeConfig
from creative_science.knowledge.errors import InsufficientAnalysisError
from creative_science.knowledge.schemas import ALL_KNOWLEDGE_DOMAINS, AnalysisInput, ContextInput
from creative_science.knowledge.service import KnowledgeBaseService
from creative_science.knowledge.weights import DEFAULT_WEIGHTS, OBJECTIVE_WEIGHTS


@pytest.fixture
def service(make_fleet, knowledge_config) -> KnowledgeBaseService:
    return KnowledgeBaseService(analyzers=make_fleet(), config=knowledge_config)


class TestConstruction:
    """Tests for service construction."""

    def test_default_analyzers(self, knowledge_config):
        service = KnowledgeBaseService(config=knowledge_config)
        assert service.domains == ALL_KNOWLEDGE_DOMAINS

    def test_duplicate_domains_rejected(self, make_stub, knowledge_config):
        analyzers = [make_stub("neuromarketing", 50), make_stub("neuromarketing", 60)]
        with pytest.raises(ValueError, match="Duplicate analyzer domains"):
            KnowledgeBaseService(analyzers=analyzers, config=knowledge_config)

    def test_custom_weights_validated(self, make_fleet, knowledge_config):
        with pytest.raises(ValueError, match="sum to 1.0"):
            KnowledgeBaseService(
                analyzers=make_fleet(),
                config=knowledge_config,
                default_weights={**DEFAULT_WEIGHTS, "neuromarketing": 0.9},
            )

    def test_custom_weights_unknown_domain(self, make_stub, knowledge_config):
        with pytest.raises(ValueError, match="unknown domains"):
            KnowledgeBaseService(
                analyzers=[make_stub("neuromarketing", 50)],
                config=knowledge_config,
                default_weights={"neuromarketing": 0.5, "astrology": 0.5},
            )

    def test_custom_fleet_keeps_default_tables(self, make_stub, knowledge_config):
        service = KnowledgeBaseService(
            analyzers=[make_stub("neuromarketing", 50)],
            config=knowledge_config,
        )
        assert service.get_weights(None) == DEFAULT_WEIGHTS


class TestAnalyzeAll:
    """Tests for analyze_all()."""

    def test_all_succeed(self, service, empty_input):
        composite = service.analyze_all(empty_input)

        assert composite.failed_domains == ()
        assert composite.analyzed_domains == ALL_KNOWLEDGE_DOMAINS
        # 16 + 12 + 10.5 + 18 + 5 + 7.5
        assert composite.overall == 69
        assert composite.grade == "C"
        assert composite.weights == pytest.approx(DEFAULT_WEIGHTS)

    def test_two_failures_tolerated(self, make_fleet, knowledge_config, empty_input):
        service = KnowledgeBaseService(
            analyzers=make_fleet("marketing_psychology", "color_psychology"),
            config=knowledge_config,
        )
        composite = service.analyze_all(empty_input)

        assert composite.failed_domains == ("marketing_psychology", "color_psychology")
        assert composite.analyzed_domains == (
            "neuromarketing",
            "crowd_psychology",
            "platform_best_practices",
            "copywriting_psychology",
        )
        # (16 + 10.5 + 18 + 7.5) / 0.7
        assert composite.overall == 74
        assert composite.grade == "C+"
        assert sum(composite.weights.values()) == pytest.approx(1.0)
        assert composite.weights["neuromarketing"] == pytest.approx(0.2 / 0.7)

    def test_three_failures_raise(self, make_fleet, knowledge_config, empty_input):
        service = KnowledgeBaseService(
            analyzers=make_fleet("neuromarketing", "crowd_psychology", "copywriting_psychology"),
            config=knowledge_config,
        )
        with pytest.raises(InsufficientAnalysisError) as exc_info:
            service.analyze_all(empty_input)

        err = exc_info.value
        assert err.succeeded == 3
        assert err.required == 4
        assert err.failed_domains == ("neuromarketing", "crowd_psychology", "copywriting_psychology")
        assert "3 domain(s) succeeded, 4 required" in str(err)

    def test_min_required_domains_configurable(self, make_fleet, empty_input):
        config = KnowledgeConfig(metrics_enabled=False, min_required_domains=3)
        service = KnowledgeBaseService(
            analyzers=make_fleet("neuromarketing", "crowd_psychology", "copywriting_psychology"),
            config=config,
        )
        composite = service.analyze_all(empty_input)
        assert len(composite.analyzed_domains) == 3

    def test_failure_of_any_exception_type(self, make_fleet, make_failing, knowledge_config, empty_input):
        analyzers = make_fleet()
        analyzers[0] = make_failing("neuromarketing", KeyError("missing table"))
        service = KnowledgeBaseService(analyzers=analyzers, config=knowledge_config)

        composite = service.analyze_all(empty_input)
        assert composite.failed_domains == ("neuromarketing",)

    def test_objective_selects_weights(self, service):
        input = AnalysisInput(context=ContextInput(objective="conversion"))
        composite = service.analyze_all(input)
        assert composite.weights == pytest.approx(OBJECTIVE_WEIGHTS["conversion"])

    def test_idempotent(self, knowledge_config, sample_input):
        service = KnowledgeBaseService(config=knowledge_config)
        assert service.analyze_all(sample_input) == service.analyze_all(sample_input)

    def test_real_analyzers_end_to_end(self, knowledge_config, sample_input):
        service = KnowledgeBaseService(config=knowledge_config)
        composite = service.analyze_all(sample_input)

        assert composite.failed_domains == ()
        assert 0 <= composite.overall <= 100
        assert len(composite.top_recommendations) <= 5
        assert len(composite.total_citations) == sum(len(ds.citations) for ds in composite.domain_scores)
        assert composite.get_domain_score("color_psychology").score == 80


class TestTopRecommendations:
    """Tests for cross-domain recommendation ranking."""

    def test_ranked_and_truncated(self, make_stub, make_rec, knowledge_config, empty_input):
        analyzers = [
            make_stub(d, 50, (make_rec(d, "low"), make_rec(d, "high")))
            for d in ALL_KNOWLEDGE_DOMAINS
        ]
        service = KnowledgeBaseService(analyzers=analyzers, config=knowledge_config)
        composite = service.analyze_all(empty_input)

        top = composite.top_recommendations
        assert len(top) == 5
        assert all(r.priority == "high" for r in top)
        # Ties keep registration order
        assert [r.domain for r in top] == list(ALL_KNOWLEDGE_DOMAINS[:5])

    def test_get_recommendations_not_truncated(self, make_stub, make_rec, knowledge_config, empty_input):
        analyzers = [
            make_stub(d, 50, (make_rec(d, "low"), make_rec(d, "critical")))
            for d in ALL_KNOWLEDGE_DOMAINS
        ]
        service = KnowledgeBaseService(analyzers=analyzers, config=knowledge_config)
        ranked = service.get_recommendations(empty_input)

        assert len(ranked) == 12
        assert [r.priority for r in ranked[:6]] == ["critical"] * 6
        assert [r.priority for r in ranked[6:]] == ["low"] * 6


class TestAnalyzeSpecific:
    """Tests for analyze_specific()."""

    def test_subset_in_registration_order(self, service, empty_input):
        composite = service.analyze_specific(
            empty_input,
            ["copywriting_psychology", "neuromarketing", "crowd_psychology", "color_psychology"],
        )
        assert composite.analyzed_domains == (
            "neuromarketing",
            "crowd_psychology",
            "color_psychology",
            "copywriting_psychology",
        )

    def test_unknown_domains_ignored(self, service, empty_input):
        composite = service.analyze_specific(empty_input, [*ALL_KNOWLEDGE_DOMAINS, "astrology"])
        assert composite.analyzed_domains == ALL_KNOWLEDGE_DOMAINS

    def test_too_few_selected_raises(self, service, empty_input):
        with pytest.raises(InsufficientAnalysisError) as exc_info:
            service.analyze_specific(empty_input, ["neuromarketing", "color_psychology"])
        assert exc_info.value.succeeded == 2
        assert exc_info.value.failed_domains == ()

    def test_only_selected_analyzers_run(self, make_fleet, knowledge_config, empty_input):
        analyzers = make_fleet()
        service = KnowledgeBaseService(analyzers=analyzers, config=knowledge_config)
        service.analyze_specific(empty_input, ALL_KNOWLEDGE_DOMAINS[:4])
        assert [a.calls for a in analyzers] == [1, 1, 1, 1, 0, 0]


class TestKnowledgeContext:
    """Tests for get_knowledge_context()."""

    def test_context_starts_with_header(self, service, empty_input):
        context = service.get_knowledge_context(empty_input)
        assert context.startswith("Creative science analysis: overall 69/100 (grade C)")

    def test_context_mentions_failures(self, make_fleet, knowledge_config, empty_input):
        service = KnowledgeBaseService(analyzers=make_fleet("color_psychology"), config=knowledge_config)
        context = service.get_knowledge_context(empty_input)
        assert "Warning: analysis failed for Color Psychology" in context


class TestAsync:
    """Tests for the asynchronous variants."""

    @pytest.mark.asyncio
    async def test_matches_sync(self, knowledge_config, sample_input):
        service = KnowledgeBaseService(config=knowledge_config)
        assert await service.analyze_all_async(sample_input) == service.analyze_all(sample_input)

    @pytest.mark.asyncio
    async def test_order_and_failures(self, make_fleet, knowledge_config, empty_input):
        service = KnowledgeBaseService(
            analyzers=make_fleet("marketing_psychology", "color_psychology"),
            config=knowledge_config,
        )
        composite = await service.analyze_all_async(empty_input)

        assert composite.failed_domains == ("marketing_psychology", "color_psychology")
        assert composite.overall == 74

    @pytest.mark.asyncio
    async def test_insufficient_raises(self, make_fleet, knowledge_config, empty_input):
        service = KnowledgeBaseService(
            analyzers=make_fleet("neuromarketing", "crowd_psychology", "copywriting_psychology"),
            config=knowledge_config,
        )
        with pytest.raises(InsufficientAnalysisError):
            await service.analyze_all_async(empty_input)

    @pytest.mark.asyncio
    async def test_specific(self, service, empty_input):
        composite = await service.analyze_specific_async(
            empty_input, ["copywriting_psychology", "neuromarketing", "crowd_psychology", "color_psychology", "x"]
        )
        assert composite.analyzed_domains == (
            "neuromarketing",
            "crowd_psychology",
            "color_psychology",
            "copywriting_psychology",
        )
