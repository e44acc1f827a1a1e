"""
Unit tests for InsightGenerator.

Each rule is exercised at and around its threshold with hand-built profiles.
"""

import pytest

from datamind.core.config import AnalysisConfig
from datamind.profiler.insight_engine import InsightGenerator
from datamind.profiler.insight_templates import INSIGHT_TEMPLATES, emphasize, render_template
from datamind.profiler.profile_result import (
    CategoricalProfile,
    CorrelationResult,
    InsightAgent,
    InsightSeverity,
    NumericProfile,
)


def numeric(name="value", count=10, mean=10.0, min_value=0.0, max_value=100.0, rows=None):
    rows = rows if rows is not None else count
    return NumericProfile(
        column=name, row_count=rows, missing_count=rows - count, missing_pct="0.0%",
        count=count, mean=mean, median=mean, min_value=min_value, max_value=max_value,
    )


def categorical(name="label", unique=2, rows=10):
    return CategoricalProfile(
        column=name, row_count=rows, missing_count=0, missing_pct="0.0%",
        unique_count=unique, mode="a", mode_frequency=1,
    )


@pytest.mark.unit
class TestInsightTemplates:
    """Test message rendering."""

    def test_every_template_renders(self):
        samples = {
            "wide_variance": {"column": "c"},
            "high_cardinality": {"column": "c", "unique_count": 3},
            "strong_correlation": {"direction": "positive", "column1": "a", "column2": "b", "r": "0.90"},
            "dataset_volume": {"row_count": 11, "column_count": 2},
        }
        assert set(samples) == set(INSIGHT_TEMPLATES)
        for template_id, data in samples.items():
            assert "{" not in render_template(template_id, **data)

    def test_emphasize(self):
        assert emphasize("score") == "**score**"

    def test_unknown_template(self):
        with pytest.raises(KeyError):
            render_template("nope")


@pytest.mark.unit
class TestWideVarianceRule:
    """Test the extreme variance rule."""

    @pytest.fixture
    def generator(self):
        return InsightGenerator()

    def test_fires(self, generator):
        insights = generator.generate({"value": numeric()}, [], row_count=10, column_count=1)

        assert len(insights) == 1
        insight = insights[0]
        assert insight.agent == InsightAgent.ANALYST
        assert insight.severity == InsightSeverity.WARNING
        assert insight.rule == "wide_variance"
        assert insight.message == (
            "Extreme variance detected in **value** - range is very wide compared to the mean."
        )

    def test_needs_ten_values(self, generator):
        profile = numeric(count=9)

        assert generator.generate({"value": profile}, [], row_count=9, column_count=1) == []

    def test_range_equal_to_limit_does_not_fire(self, generator):
        profile = numeric(mean=20.0, min_value=0.0, max_value=100.0)

        assert generator.generate({"value": profile}, [], row_count=10, column_count=1) == []

    def test_custom_multiplier(self):
        generator = InsightGenerator(AnalysisConfig(variance_multiplier=20.0))

        assert generator.generate({"value": numeric()}, [], row_count=10, column_count=1) == []


@pytest.mark.unit
class TestHighCardinalityRule:
    """Test the identifier-like column rule."""

    @pytest.fixture
    def generator(self):
        return InsightGenerator()

    def test_fires_above_threshold(self, generator):
        insights = generator.generate({"id": categorical("id", unique=9)}, [], row_count=10, column_count=1)

        assert len(insights) == 1
        assert insights[0].severity == InsightSeverity.INFO
        assert insights[0].rule == "high_cardinality"
        assert insights[0].message == (
            "High cardinality detected in **id** (9 unique values). "
            "This column might function as an ID or key."
        )

    def test_exact_threshold_does_not_fire(self, generator):
        profiles = {"id": categorical("id", unique=4, rows=5)}

        assert generator.generate(profiles, [], row_count=5, column_count=1) == []

    def test_numeric_columns_never_checked(self, generator):
        profile = numeric(count=3, mean=2.0, min_value=1.0, max_value=3.0)

        assert generator.generate({"value": profile}, [], row_count=3, column_count=1) == []


@pytest.mark.unit
class TestCorrelationRule:
    """Test the strong correlation rule."""

    @pytest.fixture
    def generator(self):
        return InsightGenerator()

    def test_positive(self, generator):
        correlation = CorrelationResult("a", "b", 0.8567, 5)

        insights = generator.generate({}, [correlation], row_count=5, column_count=2)

        assert insights[0].message == (
            "Strong **positive** correlation found between **a** and **b** (r = 0.86)."
        )

    def test_negative(self, generator):
        correlation = CorrelationResult("a", "b", -0.95, 5)

        insights = generator.generate({}, [correlation], row_count=5, column_count=2)

        assert "**negative**" in insights[0].message
        assert "(r = -0.95)" in insights[0].message

    def test_exact_threshold_does_not_fire(self, generator):
        correlation = CorrelationResult("a", "b", 0.8, 5)

        assert generator.generate({}, [correlation], row_count=5, column_count=2) == []


@pytest.mark.unit
class TestVolumeRule:
    """Test the dataset volume summary."""

    @pytest.fixture
    def generator(self):
        return InsightGenerator()

    def test_fires_above_ten_rows(self, generator):
        insights = generator.generate({}, [], row_count=11, column_count=2)

        assert len(insights) == 1
        assert insights[0].agent == InsightAgent.INSIGHT
        assert insights[0].message == (
            "Dataset loaded successfully: **11** records across **2** features."
        )

    def test_ten_rows_does_not_fire(self, generator):
        assert generator.generate({}, [], row_count=10, column_count=2) == []


@pytest.mark.unit
class TestRuleOrder:
    """Insights follow column order, then correlations, then volume."""

    def test_order(self):
        profiles = {
            "id": categorical("id", unique=20, rows=20),
            "amount": numeric("amount", count=20, rows=20),
            "units": numeric("units", count=20, mean=50.0, min_value=40.0, max_value=60.0, rows=20),
        }
        correlations = [CorrelationResult("amount", "units", 0.99, 20)]

        insights = InsightGenerator().generate(profiles, correlations, row_count=20, column_count=3)

        assert [i.rule for i in insights] == [
            "high_cardinality", "wide_variance", "strong_correlation", "dataset_volume"
        ]

    def test_stateless(self):
        generator = InsightGenerator()
        profiles = {"value": numeric()}

        assert generator.generate(profiles, [], 10, 1) == generator.generate(profiles, [], 10, 1)
