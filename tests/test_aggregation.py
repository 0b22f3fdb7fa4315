"""Tests for weighted averaging of scores."""

import pytest

from hormone_scoring.core.aggregation import WeightedItem, weighted_average


class TestWeightedAverage:

    def test_empty_is_zero(self):
        assert weighted_average([]) == 0

    def test_all_zero_weights_is_zero(self):
        items = [WeightedItem(80, 0), WeightedItem(90, 0)]
        assert weighted_average(items) == 0

    def test_missing_weights_count_as_zero(self):
        assert weighted_average([WeightedItem(80), WeightedItem(90, None)]) == 0
        assert weighted_average([WeightedItem(80, None), WeightedItem(40, 1)]) == 40

    def test_missing_value_counts_as_zero(self):
        assert weighted_average([WeightedItem(None, 1), WeightedItem(80, 1)]) == 40

    def test_weighted(self):
        # (80*3 + 50*1) / 4 = 72.5
        assert weighted_average([WeightedItem(80, 3), WeightedItem(50, 1)]) == 73

    @pytest.mark.parametrize("value", [0, 37, 50, 100])
    @pytest.mark.parametrize("weights", [(1, 1, 1), (3, 2, 1), (0, 0, 5), (0.5, 7, 0.25)])
    def test_uniform_values_return_value(self, value, weights):
        items = [WeightedItem(value, w) for w in weights]
        assert weighted_average(items) == value

    def test_accepts_generator(self):
        assert weighted_average(WeightedItem(v, 1) for v in (60, 80)) == 70

    def test_result_stays_in_bounds(self):
        assert weighted_average([WeightedItem(150, 1)]) == 100
        assert weighted_average([WeightedItem(-20, 1)]) == 0

    def test_raising_weight_of_above_average_input_never_lowers_result(self):
        base = [WeightedItem(90, 1), WeightedItem(60, 2), WeightedItem(40, 1)]
        before = weighted_average(base)
        for extra in (1, 2, 5, 20):
            raised = [WeightedItem(90, 1 + extra)] + base[1:]
            after = weighted_average(raised)
            assert after >= before
            before = after

    def test_exact_half_survives_weight_rescaling(self):
        # (72*3 + 61*2 + 61*1) / 6 = 66.5
        items = [WeightedItem(72, 3), WeightedItem(61, 2), WeightedItem(61, 1)]
        assert weighted_average(items) == 67


class TestWeightedAverageExtremeInputs:

    def test_huge_equal_weights(self):
        assert weighted_average([WeightedItem(50, 1e308), WeightedItem(50, 1e308)]) == 50

    def test_huge_weights_keep_their_proportions(self):
        items = [WeightedItem(100, 1.5e308), WeightedItem(0, 1.5e308), WeightedItem(100, 1)]
        assert weighted_average(items) == 50

    def test_huge_values_clamp(self):
        assert weighted_average([WeightedItem(1e308, 1), WeightedItem(1e308, 1)]) == 100
        assert weighted_average([WeightedItem(-1e308, 1), WeightedItem(-1e308, 1)]) == 0

    def test_tiny_weights(self):
        assert weighted_average([WeightedItem(80, 5e-324), WeightedItem(40, 5e-324)]) == 60
