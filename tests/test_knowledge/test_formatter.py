"""Tests for the knowledge context formatter."""

import pytest

from creative_science.knowledge.composite import build_composite_score
from creative_science.knowledge.config import KnowledgeConfig
from creative_science.knowledge.formatter import (
    DOMAIN_LINE,
    FIRST_RECOMMENDATION,
    RECOMMENDATION_CITATION,
    REQUIRED,
    TOP_FINDING,
    ContextFormatter,
    Section,
    fit_to_budget,
    render,
    top_finding,
)
from creative_science.knowledge.schemas import (
    Citation,
    DomainRecommendation,
    DomainScore,
    ScoringFactor,
)
from creative_science.knowledge.service import KnowledgeBaseService
from creative_science.knowledge.weights import DEFAULT_WEIGHTS


def _citation(source: str) -> Citation:
    return Citation(id=source, domain="d", source=source, finding="finding", applicability="a")


@pytest.fixture
def composite(make_stub):
    """Composite over four stub domains, with two failed domains."""
    recs = {
        "neuromarketing": (
            DomainRecommendation(
                domain="neuromarketing",
                priority="critical",
                recommendation="Shorten the headline.",
                scientific_basis="b",
                expected_impact="i",
                citations=(_citation("Kahneman 2011"),),
            ),
        ),
        "crowd_psychology": (
            DomainRecommendation(
                domain="crowd_psychology",
                priority="high",
                recommendation="Add a review count.",
                scientific_basis="b",
                expected_impact="i",
                citations=(_citation("Cialdini 2009"),),
            ),
        ),
    }
    scores = [
        make_stub(d, s, recs.get(d, ())).analyze(None)
        for d, s in (
            ("neuromarketing", 80),
            ("crowd_psychology", 70),
            ("platform_best_practices", 90),
            ("copywriting_psychology", 50),
        )
    ]
    return build_composite_score(
        scores,
        DEFAULT_WEIGHTS,
        failed_domains=["marketing_psychology", "color_psychology"],
    )


@pytest.fixture
def formatter() -> ContextFormatter:
    return ContextFormatter(max_chars=100_000)


class TestContextFormatter:
    """Tests for rendering a composite score."""

    def test_header_first(self, formatter, composite):
        lines = formatter.format(composite).splitlines()
        assert lines[0] == f"Creative science analysis: overall {composite.overall}/100 (grade {composite.grade})"

    def test_domain_lines_use_display_names(self, formatter, composite):
        text = formatter.format(composite)
        assert "- Neuromarketing: 80/100 (B)" in text
        assert "- Platform Best Practices: 90/100 (A)" in text

    def test_top_finding_and_evidence(self, formatter, composite):
        text = formatter.format(composite)
        assert "  Top finding: only factor (80/100). neuromarketing explanation" in text
        assert "  Evidence: neuromarketing finding (neuromarketing source)" in text

    def test_recommendations(self, formatter, composite):
        text = formatter.format(composite)
        assert "Top recommendations:" in text
        assert "1. [CRITICAL] Neuromarketing: Shorten the headline." in text
        assert "2. [HIGH] Crowd Psychology: Add a review count." in text
        assert "   Source: Kahneman 2011" in text

    def test_failed_domain_warning_last(self, formatter, composite):
        lines = formatter.format(composite).splitlines()
        assert lines[-1] == (
            "Warning: analysis failed for Marketing Psychology, Color Psychology; "
            "the score is based on the remaining domains."
        )

    def test_no_warning_without_failures(self, formatter, make_stub):
        composite = build_composite_score([make_stub("neuromarketing", 60).analyze(None)], DEFAULT_WEIGHTS)
        assert "Warning" not in formatter.format(composite)


class TestBudget:
    """Tests for trimming to the character budget."""

    def test_default_budget_from_config(self):
        config = KnowledgeConfig(context_token_budget=2000, chars_per_token=4.0)
        assert ContextFormatter(config=config).max_chars == 8000

    def test_explicit_budget_overrides_config(self):
        assert ContextFormatter(max_chars=300).max_chars == 300

    def test_output_within_budget(self, composite):
        text = ContextFormatter(max_chars=250).format(composite)
        assert len(text) <= 250

    def test_drops_recommendation_citation_first(self, formatter, composite):
        sections = formatter.build_sections(composite)
        full = render(sections)
        trimmed = ContextFormatter(max_chars=len(full) - 1).format(composite)

        assert "   Source: Cialdini 2009" not in trimmed
        assert "   Source: Kahneman 2011" in trimmed

    def test_tiny_budget_keeps_required_sections(self, composite):
        text = ContextFormatter(max_chars=10).format(composite)
        lines = text.splitlines()
        assert len(lines) == 2
        assert lines[0].startswith("Creative science analysis:")
        assert lines[1].startswith("Warning: analysis failed")

    def test_domain_lines_outlive_findings(self, formatter, composite):
        sections = formatter.build_sections(composite)
        required = [s for s in sections if s.priority in (REQUIRED, DOMAIN_LINE)]
        budget = len(render(required)) + 5
        text = ContextFormatter(max_chars=budget).format(composite)

        assert "- Neuromarketing: 80/100 (B)" in text
        assert "Top finding" not in text
        assert "Top recommendations:" not in text

    def test_heading_never_without_first_recommendation(self, formatter, composite):
        full = formatter.format(composite)
        for budget in range(0, len(full) + 1):
            text = ContextFormatter(max_chars=budget).format(composite)
            assert ("Top recommendations:" in text) == ("1. [CRITICAL]" in text), budget

    def test_heading_shares_first_recommendation_section(self, formatter, composite):
        first = next(s for s in formatter.build_sections(composite) if s.priority == FIRST_RECOMMENDATION)
        assert first.text == "Top recommendations:\n1. [CRITICAL] Neuromarketing: Shorten the headline."

    def test_zero_budget_is_respected(self, composite):
        formatter = ContextFormatter(max_chars=0)
        assert formatter.max_chars == 0
        lines = formatter.format(composite).splitlines()
        assert len(lines) == 2
        assert lines[0].startswith("Creative science analysis:")

    def test_real_analysis_fits(self, sample_input, knowledge_config):
        service = KnowledgeBaseService(config=knowledge_config)
        text = ContextFormatter(max_chars=400).format(service.analyze_all(sample_input))
        assert len(text) <= 400
        assert text.startswith("Creative science analysis:")


class TestFitToBudget:
    """Tests for fit_to_budget()."""

    def test_no_trim_when_fits(self):
        sections = [Section("a", REQUIRED), Section("b", TOP_FINDING)]
        assert fit_to_budget(sections, 100) == sections

    def test_highest_priority_number_goes_first(self):
        sections = [
            Section("header", REQUIRED),
            Section("cite", RECOMMENDATION_CITATION),
            Section("first", FIRST_RECOMMENDATION),
            Section("finding", TOP_FINDING),
        ]
        kept = fit_to_budget(sections, len("header\nfirst\nfinding"))
        assert [s.text for s in kept] == ["header", "first", "finding"]

    def test_later_section_dropped_among_equals(self):
        sections = [
            Section("header", REQUIRED),
            Section("one", TOP_FINDING),
            Section("two", TOP_FINDING),
        ]
        kept = fit_to_budget(sections, len("header\none"))
        assert [s.text for s in kept] == ["header", "one"]

    def test_required_kept_over_budget(self):
        sections = [Section("a very long header", REQUIRED), Section("x", DOMAIN_LINE)]
        kept = fit_to_budget(sections, 3)
        assert [s.text for s in kept] == ["a very long header"]


class TestTopFinding:
    """Tests for top_finding()."""

    def test_largest_weighted_score(self):
        ds = DomainScore(
            domain="d",
            score=70,
            grade="C+",
            factors=(
                ScoringFactor("a", 100, 0.2, ""),
                ScoringFactor("b", 60, 0.5, ""),
                ScoringFactor("c", 90, 0.3, ""),
            ),
        )
        assert top_finding(ds).name == "b"

    def test_first_wins_ties(self):
        ds = DomainScore(
            domain="d",
            score=50,
            grade="D",
            factors=(ScoringFactor("a", 50, 0.5, ""), ScoringFactor("b", 50, 0.5, "")),
        )
        assert top_finding(ds).name == "a"

    def test_no_factors(self):
        assert top_finding(DomainScore(domain="d", score=50, grade="D")) is None
