"""Tests for YAML configuration loading."""

import pytest
import yaml

from hormone_scoring.core.reference_ranges import DEFAULT_REFERENCE_RANGES
from hormone_scoring.core.weights import DEFAULT_WEIGHTS
from hormone_scoring.io.config_reader import (
    DEFAULT_CONFIG_DIR,
    load_config,
    load_reference_ranges,
    load_weights,
    parse_weight_override,
)


def _write_yaml(path, data):
    path.write_text(yaml.safe_dump(data), encoding="utf-8")
    return path


class TestPackagedConfig:

    def test_packaged_files_match_defaults(self):
        config = load_config()
        assert config.weights == DEFAULT_WEIGHTS
        assert dict(config.reference_ranges) == dict(DEFAULT_REFERENCE_RANGES)

    def test_default_dir_exists(self):
        assert (DEFAULT_CONFIG_DIR / "weights.yaml").exists()
        assert (DEFAULT_CONFIG_DIR / "reference_ranges.yaml").exists()


class TestLoadWeights:

    def test_loads(self, tmp_path):
        path = _write_yaml(tmp_path / "weights.yaml", {
            "subscore_weights": {"estrogen_balance": {"Estradiol": 5, "Estrone": 0}},
        })
        weights = load_weights(path)
        assert weights.weight("estrogen_balance", "Estradiol") == 5
        assert weights.weight("estrogen_balance", "Estrone") == 0

    def test_unknown_sub_scores_dropped(self, tmp_path):
        path = _write_yaml(tmp_path / "weights.yaml", {
            "subscore_weights": {"thyroid": {"TSH": 1}, "cortisol_homeostasis": {"Cortisol": 1}},
        })
        weights = load_weights(path)
        assert "thyroid" not in weights.weights
        assert weights.weight("cortisol_homeostasis", "Cortisol") == 1

    def test_unread_inputs_dropped(self, tmp_path, caplog):
        path = _write_yaml(tmp_path / "weights.yaml", {
            "subscore_weights": {
                "estrogen_balance": {"Estradiol": 4, "Estradoil": 5},
                "adrenal_adaptability": {"Cortisol": 2, "cortisol_to_dhea": 1},
            },
        })
        with caplog.at_level("WARNING"):
            weights = load_weights(path)
        assert dict(weights.for_sub_score("estrogen_balance")) == {"Estradiol": 4}
        assert dict(weights.for_sub_score("adrenal_adaptability")) == {"cortisol_to_dhea": 1}
        assert "Estradoil" in caplog.text
        assert "Cortisol never read by adrenal_adaptability" in caplog.text

    def test_missing_section(self, tmp_path):
        path = _write_yaml(tmp_path / "weights.yaml", {"weights": {}})
        with pytest.raises(ValueError, match="subscore_weights"):
            load_weights(path)

    def test_negative_weight(self, tmp_path):
        path = _write_yaml(tmp_path / "weights.yaml", {
            "subscore_weights": {"estrogen_balance": {"Estradiol": -1}},
        })
        with pytest.raises(ValueError):
            load_weights(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_weights(tmp_path / "nope.yaml")


class TestLoadReferenceRanges:

    def test_loads(self, tmp_path):
        path = _write_yaml(tmp_path / "reference_ranges.yaml", {
            "reference_ranges": {"Cortisol": {"low": 6, "high": 18, "unit": "ug/dL"}},
        })
        table = load_reference_ranges(path)
        assert table["Cortisol"].low == 6.0
        assert table["Cortisol"].high == 18.0
        assert table["Cortisol"].unit == "ug/dL"

    def test_degenerate_range_accepted_with_warning(self, tmp_path, caplog):
        path = _write_yaml(tmp_path / "reference_ranges.yaml", {
            "reference_ranges": {"Cortisol": {"low": 20, "high": 5}},
        })
        with caplog.at_level("WARNING"):
            table = load_reference_ranges(path)
        assert not table["Cortisol"].is_valid
        assert "degenerate" in caplog.text

    @pytest.mark.parametrize("entry", [{"low": 1}, {"low": "a", "high": 3}, "1-3"])
    def test_bad_entries(self, tmp_path, entry):
        path = _write_yaml(tmp_path / "reference_ranges.yaml", {"reference_ranges": {"Cortisol": entry}})
        with pytest.raises(ValueError):
            load_reference_ranges(path)


class TestLoadConfig:

    def test_custom_dir(self, tmp_path):
        _write_yaml(tmp_path / "weights.yaml", {"subscore_weights": {"cortisol_homeostasis": {"Cortisol": 1}}})
        _write_yaml(tmp_path / "reference_ranges.yaml", {"reference_ranges": {"Cortisol": {"low": 5, "high": 20}}})
        config = load_config(tmp_path)
        assert list(config.reference_ranges) == ["Cortisol"]
        assert config.weights.weight("cortisol_homeostasis", "Cortisol") == 1

    def test_missing_dir(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing")


class TestParseWeightOverride:

    def test_parses(self):
        assert parse_weight_override("estrogen_balance.Estradiol=5") == ("estrogen_balance", "Estradiol", 5.0)

    def test_ratio_input(self):
        assert parse_weight_override("adrenal_adaptability.cortisol_to_dhea=0") == (
            "adrenal_adaptability", "cortisol_to_dhea", 0.0
        )

    def test_key_with_dash_and_spaces(self):
        assert parse_weight_override(" estrogen_balance.2-Hydroxyestrone=0.5") == (
            "estrogen_balance", "2-Hydroxyestrone", 0.5
        )

    @pytest.mark.parametrize("text", [
        "estrogen_balance=5",
        "estrogen_balance.Estradiol",
        "thyroid.TSH=1",
        "estrogen_balance.Estradoil=5",
        "adrenal_adaptability.Cortisol=2",
        "estrogen_balance.estradiol_to_estrone=2",
        "estrogen_balance.Estradiol=heavy",
    ])
    def test_rejects(self, text):
        with pytest.raises(ValueError):
            parse_weight_override(text)
