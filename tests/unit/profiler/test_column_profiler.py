"""
Unit tests for ColumnProfiler.

Tests numeric and categorical profiles, the missing percentage, the
upper-median rule and mode tie-breaking.
"""

import pytest

from datamind.core.config import AnalysisConfig
from datamind.core.exceptions import InvalidInputError
from datamind.profiler.column_profiler import ColumnProfiler
from datamind.profiler.dataset import Dataset
from datamind.profiler.profile_result import CategoricalProfile, ColumnType, NumericProfile


def column(values, name="x"):
    """Single-column dataset."""
    return Dataset.from_records([{name: value} for value in values])


@pytest.mark.unit
class TestNumericProfile:
    """Test profiles of columns holding numbers."""

    @pytest.fixture
    def profiler(self):
        return ColumnProfiler()

    def test_basic_statistics(self, profiler):
        profile = profiler.profile("x", column([4, 1, 3, 2]))

        assert isinstance(profile, NumericProfile)
        assert profile.column_type == ColumnType.NUMERIC
        assert profile.count == 4
        assert profile.mean == 2.5
        assert profile.min_value == 1.0
        assert profile.max_value == 4.0
        assert profile.mean_display == "2.50"
        assert profile.min_display == "1.00"
        assert profile.max_display == "4.00"

    @pytest.mark.parametrize("values,median", [
        ([1, 2, 3, 4], 3.0),
        ([5, 1, 3], 3.0),
        ([1, 2], 2.0),
        ([7], 7.0),
    ])
    def test_median_is_upper_middle(self, profiler, values, median):
        assert profiler.profile("x", column(values)).median == median

    def test_no_missing(self, profiler):
        assert profiler.profile("x", column([1, 2, 3])).missing_pct == "0.0%"

    @pytest.mark.parametrize("values,pct", [
        ([1, 2, 3, 4, 5, 6, 7, None], "12.5%"),
        ([1, None, None], "66.7%"),
        ([1, "", "  "], "66.7%"),
    ])
    def test_missing_pct(self, profiler, values, pct):
        assert profiler.profile("x", column(values)).missing_pct == pct

    def test_numeric_text_counts(self, profiler):
        profile = profiler.profile("x", column(["10", "20", 30]))

        assert profile.is_numeric
        assert profile.mean == 20.0

    def test_non_numeric_text_is_present_but_ignored(self, profiler):
        profile = profiler.profile("x", column([1, "abc", None, 3]))

        assert profile.is_numeric
        assert profile.count == 2
        assert profile.mean == 2.0
        assert profile.missing_count == 1
        assert profile.missing_pct == "25.0%"
        assert profile.present_count == 3

    def test_raw_statistics_kept(self, profiler):
        profile = profiler.profile("x", column([1, 2, 2]))

        assert profile.mean == pytest.approx(5 / 3)
        assert profile.mean_display == "1.67"

    def test_mean_of_huge_values_stays_finite(self, profiler):
        profile = profiler.profile("x", column([1e308, 1e308]))

        assert profile.mean == 1e308
        assert profile.mean_display != "inf"

    def test_statistics_ordered(self, profiler):
        profile = profiler.profile("x", column([3, -7, 12.5, 0, 4]))

        assert profile.min_value <= profile.median <= profile.max_value
        assert profile.min_value <= profile.mean <= profile.max_value

    def test_display_decimals_from_config(self):
        profiler = ColumnProfiler(AnalysisConfig(display_decimals=0))

        assert profiler.profile("x", column([1, 2])).mean_display == "2"


@pytest.mark.unit
class TestCategoricalProfile:
    """Test profiles of columns without numbers."""

    @pytest.fixture
    def profiler(self):
        return ColumnProfiler()

    def test_unique_and_mode(self, profiler):
        profile = profiler.profile("x", column(["red", "blue", "red", None]))

        assert isinstance(profile, CategoricalProfile)
        assert profile.column_type == ColumnType.CATEGORICAL
        assert profile.unique_count == 2
        assert profile.mode == "red"
        assert profile.mode_frequency == 2
        assert profile.missing_pct == "25.0%"

    def test_unique_bounded_by_present(self, profiler):
        profile = profiler.profile("x", column(["a", "b", None, "c"]))

        assert profile.unique_count <= profile.present_count

    def test_all_missing(self, profiler):
        profile = profiler.profile("x", column([None, "", "  "]))

        assert isinstance(profile, CategoricalProfile)
        assert profile.unique_count == 0
        assert profile.mode is None
        assert profile.missing_pct == "100.0%"

    def test_booleans(self, profiler):
        profile = profiler.profile("x", column([True, False, True]))

        assert not profile.is_numeric
        assert profile.unique_count == 2
        assert profile.mode == "true"

    def test_empty_dataset_rejected(self, profiler):
        dataset = Dataset(columns=("x",), rows=())

        with pytest.raises(InvalidInputError) as exc_info:
            profiler.profile("x", dataset)
        assert exc_info.value.operation == "profile_column"


@pytest.mark.unit
class TestModeTieBreak:
    """Test resolution of equally frequent values."""

    def test_last_seen_wins_by_default(self):
        profiler = ColumnProfiler()

        assert profiler.select_mode(["a", "b", "b", "a"]) == ("a", 2)
        assert profiler.select_mode(["b", "a", "a", "b"]) == ("b", 2)

    def test_smallest(self):
        profiler = ColumnProfiler(AnalysisConfig(mode_tie_break="smallest"))

        assert profiler.select_mode(["b", "a", "a", "b"]) == ("a", 2)

    def test_clear_winner_ignores_tie_break(self):
        profiler = ColumnProfiler()

        assert profiler.select_mode(["z", "y", "y", "x"]) == ("y", 2)

    def test_empty(self):
        assert ColumnProfiler().select_mode([]) == (None, 0)
