"""Tests for the sub-score weight configuration and fixed category weights."""

import pytest

from hormone_scoring.core.weights import (
    CATEGORY_WEIGHTS,
    DEFAULT_WEIGHTS,
    FIXED_RATIO_WEIGHTS,
    SUB_SCORES,
    WeightConfig,
)


class TestDefaults:

    def test_every_sub_score_configured(self):
        assert set(DEFAULT_WEIGHTS.weights) == set(SUB_SCORES)

    def test_default_values(self):
        assert DEFAULT_WEIGHTS.weight("estrogen_balance", "Estradiol") == 3
        assert DEFAULT_WEIGHTS.weight("progesterone_sufficiency", "Pregnenolone") == 1
        assert DEFAULT_WEIGHTS.weight("adrenal_adaptability", "cortisol_to_dhea") == 3

    def test_category_weights_fixed(self):
        assert dict(CATEGORY_WEIGHTS["menstrual"]) == {
            "estrogen_balance": 3,
            "progesterone_sufficiency": 2,
            "menopause_transition": 1,
        }
        assert dict(CATEGORY_WEIGHTS["adrenal"]) == {
            "cortisol_homeostasis": 3,
            "adrenal_adaptability": 2,
        }
        with pytest.raises(TypeError):
            CATEGORY_WEIGHTS["menstrual"]["estrogen_balance"] = 10

    def test_fixed_ratio_weights_not_in_config(self):
        assert dict(FIXED_RATIO_WEIGHTS) == {"estradiol_to_estrone": 2, "hydroxyestrone_to_estrone": 2}
        for ratio_id in FIXED_RATIO_WEIGHTS:
            assert ratio_id not in DEFAULT_WEIGHTS.for_sub_score("estrogen_balance")


class TestWeightConfig:

    def test_missing_weight_reads_zero(self):
        config = WeightConfig({"estrogen_balance": {"Estradiol": 3}})
        assert config.weight("estrogen_balance", "Estrone") == 0
        assert config.weight("cortisol_homeostasis", "Cortisol") == 0

    def test_with_weight_returns_new_config(self):
        updated = DEFAULT_WEIGHTS.with_weight("estrogen_balance", "Estradiol", 5)
        assert updated.weight("estrogen_balance", "Estradiol") == 5
        assert DEFAULT_WEIGHTS.weight("estrogen_balance", "Estradiol") == 3
        assert updated.weight("estrogen_balance", "Estrone") == 2

    def test_with_sub_score_replaces_all_inputs(self):
        updated = DEFAULT_WEIGHTS.with_sub_score("cortisol_homeostasis", {"Cortisol": 1})
        assert updated.to_dict()["cortisol_homeostasis"] == {"Cortisol": 1.0}
        assert updated.weight("cortisol_homeostasis", "Cortisone") == 0

    def test_immutable(self):
        with pytest.raises(TypeError):
            DEFAULT_WEIGHTS.weights["estrogen_balance"]["Estradiol"] = 9
        with pytest.raises(AttributeError):
            DEFAULT_WEIGHTS.weights = {}

    def test_source_dict_changes_do_not_leak(self):
        raw = {"estrogen_balance": {"Estradiol": 3}}
        config = WeightConfig(raw)
        raw["estrogen_balance"]["Estradiol"] = 100
        assert config.weight("estrogen_balance", "Estradiol") == 3

    @pytest.mark.parametrize("bad", [-1, "heavy", None, float("nan"), float("inf"), True])
    def test_rejects_invalid_weights(self, bad):
        with pytest.raises(ValueError):
            WeightConfig({"estrogen_balance": {"Estradiol": bad}})
        with pytest.raises(ValueError):
            DEFAULT_WEIGHTS.with_weight("estrogen_balance", "Estradiol", bad)

    def test_rejects_non_mapping_sub_score(self):
        with pytest.raises(ValueError):
            WeightConfig({"estrogen_balance": [3, 2]})

    def test_zero_weight_allowed(self):
        config = DEFAULT_WEIGHTS.with_weight("estrogen_balance", "Estradiol", 0)
        assert config.weight("estrogen_balance", "Estradiol") == 0
