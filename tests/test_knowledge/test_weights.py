"""Tests for the cross-domain weight tables."""

import pytest

from creative_science.knowledge.schemas import ALL_KNOWLEDGE_DOMAINS
from creative_science.knowledge.weights import (
    DEFAULT_WEIGHTS,
    OBJECTIVE_WEIGHTS,
    renormalize_weights,
    select_weights,
    validate_weight_table,
)


class TestBuiltInTables:
    """The shipped tables are complete and sum to 1.0."""

    @pytest.mark.parametrize("objective", [None, "awareness", "consideration", "conversion"])
    def test_complete_and_normalized(self, objective):
        table = select_weights(objective)
        assert set(table) == set(ALL_KNOWLEDGE_DOMAINS)
        assert sum(table.values()) == pytest.approx(1.0)

    def test_default_values(self):
        assert DEFAULT_WEIGHTS["neuromarketing"] == 0.20
        assert DEFAULT_WEIGHTS["color_psychology"] == 0.10
        assert DEFAULT_WEIGHTS["copywriting_psychology"] == 0.15

    def test_conversion_favors_social_proof(self):
        conversion = OBJECTIVE_WEIGHTS["conversion"]
        assert conversion["crowd_psychology"] > DEFAULT_WEIGHTS["crowd_psychology"]
        assert conversion["color_psychology"] == 0.05


class TestSelectWeights:
    """Tests for select_weights()."""

    def test_unknown_objective_uses_default(self):
        assert select_weights("traffic") == DEFAULT_WEIGHTS

    def test_objective_is_case_insensitive(self):
        assert select_weights(" Awareness ") == OBJECTIVE_WEIGHTS["awareness"]

    def test_returns_copy(self):
        table = select_weights("conversion")
        table["neuromarketing"] = 0.99
        assert OBJECTIVE_WEIGHTS["conversion"]["neuromarketing"] == 0.15

    def test_custom_tables(self):
        default = {"a": 1.0}
        overrides = {"x": {"a": 0.5, "b": 0.5}}
        assert select_weights("x", default, overrides) == {"a": 0.5, "b": 0.5}
        assert select_weights("y", default, overrides) == {"a": 1.0}


class TestRenormalizeWeights:
    """Tests for renormalize_weights()."""

    def test_proportional_rescale(self):
        result = renormalize_weights(DEFAULT_WEIGHTS, ["neuromarketing", "color_psychology"])
        assert result["neuromarketing"] == pytest.approx(0.2 / 0.3)
        assert result["color_psychology"] == pytest.approx(0.1 / 0.3)
        assert sum(result.values()) == pytest.approx(1.0)

    def test_keeps_requested_order(self):
        result = renormalize_weights(DEFAULT_WEIGHTS, ["color_psychology", "neuromarketing"])
        assert list(result) == ["color_psychology", "neuromarketing"]

    def test_full_table_unchanged(self):
        result = renormalize_weights(DEFAULT_WEIGHTS, ALL_KNOWLEDGE_DOMAINS)
        for domain, weight in DEFAULT_WEIGHTS.items():
            assert result[domain] == pytest.approx(weight)

    def test_all_zero_splits_uniformly(self):
        result = renormalize_weights({"a": 0.0, "b": 0.0}, ["a", "b"])
        assert result == {"a": 0.5, "b": 0.5}

    def test_domain_missing_from_table_gets_zero(self):
        result = renormalize_weights({"a": 0.4}, ["a", "b"])
        assert result == {"a": 1.0, "b": 0.0}

    def test_empty(self):
        assert renormalize_weights(DEFAULT_WEIGHTS, []) == {}


class TestValidateWeightTable:
    """Tests for validate_weight_table()."""

    def test_valid(self):
        validate_weight_table(DEFAULT_WEIGHTS)

    def test_unknown_domain(self):
        table = {**DEFAULT_WEIGHTS, "astrology": 0.0}
        with pytest.raises(ValueError, match="unknown domains"):
            validate_weight_table(table)

    def test_missing_domain(self):
        table = {d: w for d, w in DEFAULT_WEIGHTS.items() if d != "neuromarketing"}
        with pytest.raises(ValueError, match="missing domains"):
            validate_weight_table(table)

    def test_negative_weight(self):
        table = {**DEFAULT_WEIGHTS, "neuromarketing": -0.2, "marketing_psychology": 0.6}
        with pytest.raises(ValueError, match="negative"):
            validate_weight_table(table)

    def test_bad_sum(self):
        table = {**DEFAULT_WEIGHTS, "neuromarketing": 0.5}
        with pytest.raises(ValueError, match="sum to 1.0"):
            validate_weight_table(table)
