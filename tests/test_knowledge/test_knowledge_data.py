"""Tests for the static knowledge tables."""

import pytest

from creative_science.knowledge.analyzers import ANALYZER_CLASSES
from creative_science.knowledge.data import INDUSTRY_BENCHMARKS, display_name, get_benchmark
from creative_science.knowledge.data.color import DEFAULT_PALETTE
from creative_science.knowledge.data.lexicon import POWER_WORD_CATEGORIES, POWER_WORDS


@pytest.mark.parametrize("cls", ANALYZER_CLASSES, ids=lambda cls: cls.__name__)
class TestDomainTables:
    """Every domain ships complete tables."""

    def test_advice_for_every_factor(self, cls):
        knowledge = cls.default_knowledge()
        assert set(cls.FACTOR_WEIGHTS) <= set(knowledge.advice)

    def test_citation_ids_unique(self, cls):
        ids = [c.id for c in cls.default_knowledge().citations]
        assert len(ids) == len(set(ids))

    def test_citations_belong_to_domain(self, cls):
        knowledge = cls.default_knowledge()
        assert all(c.domain == knowledge.domain for c in knowledge.citations)

    def test_has_missing_input_advice(self, cls):
        assert cls.default_knowledge().missing_input is not None


class TestBenchmarks:
    """Tests for industry benchmarks."""

    def test_lookup(self):
        assert get_benchmark("saas").avg_ctr == 0.9

    def test_case_insensitive(self):
        assert get_benchmark(" Beauty ").industry == "beauty"

    @pytest.mark.parametrize("industry", [None, "", "pet_supplies"])
    def test_fallback_to_ecommerce(self, industry):
        assert get_benchmark(industry).industry == "ecommerce"

    def test_all_positive(self):
        for b in INDUSTRY_BENCHMARKS.values():
            assert b.avg_ctr > 0 and b.avg_cvr > 0 and b.avg_roas > 0


class TestDisplayNames:
    """Tests for display_name()."""

    def test_known(self):
        assert display_name("platform_best_practices") == "Platform Best Practices"

    def test_fallback(self):
        assert display_name("sound_design") == "Sound Design"

    def test_custom_table(self):
        assert display_name("neuromarketing", {"neuromarketing": "Brain"}) == "Brain"


class TestColorPalette:
    """Tests for the default color palette."""

    @pytest.mark.parametrize("month", range(1, 13))
    def test_every_month_has_a_season(self, month):
        assert month in DEFAULT_PALETTE.season_for(month).months


class TestLexicon:
    """Tests for the power word lexicon."""

    def test_categories(self):
        assert POWER_WORD_CATEGORIES == (
            "urgency",
            "trust",
            "emotion",
            "social",
            "exclusivity",
            "value",
            "curiosity",
        )

    def test_words_are_lowercase(self):
        for words in POWER_WORDS.values():
            assert all(w == w.lower() for w in words)
