"""
Unit tests for the report exporters.
"""

import json
from datetime import date

import numpy as np
import pytest

from datamind.core.exceptions import ReporterError
from datamind.profiler.profile_result import AnalysisReport, InsightSeverity
from datamind.reporters.json_utils import NumpyJSONEncoder, safe_json_dumps
from datamind.reporters.markdown_reporter import ReportExporter, export_json, export_markdown


@pytest.mark.unit
class TestMarkdownExport:
    """Test the Markdown insight listing."""

    def test_layout(self, analyzer, score_dataset):
        report = analyzer.analyze(score_dataset)

        content = export_markdown(report, "scores.csv", date(2024, 3, 5))

        assert content == (
            "# DataMind Analysis Report\n"
            "\n"
            "**Dataset:** scores.csv\n"
            "**Date:** 2024-03-05\n"
            "\n"
            "## AI Insights\n"
            "\n"
            "- [Analyst] High cardinality detected in id (11 unique values). "
            "This column might function as an ID or key.\n"
            "- [Analyst] Extreme variance detected in score - range is very wide compared to the mean.\n"
            "- [Insight] Dataset loaded successfully: 11 records across 2 features.\n"
        )

    def test_no_insights(self):
        content = ReportExporter().render_markdown(AnalysisReport(), None, date(2024, 1, 1))

        assert content.endswith("## AI Insights\n\n")
        assert "**Dataset:** unnamed" in content

    def test_default_date_is_today(self):
        content = ReportExporter().render_markdown(AnalysisReport(), "x")

        assert f"**Date:** {date.today().strftime('%Y-%m-%d')}" in content


@pytest.mark.unit
class TestJsonExport:
    """Test the JSON report."""

    def test_round_trip_fields(self, analyzer, sales_dataset):
        result = json.loads(export_json(analyzer.analyze(sales_dataset)))

        assert result["row_count"] == 3
        assert list(result["profiles"]) == ["region", "amount", "units"]
        assert result["profiles"]["amount"]["mean"] == "120.50"
        assert result["profiles"]["amount"]["missing"] == "33.3%"
        assert result["correlations"][0]["correlation"] == pytest.approx(1.0)
        assert result["insights"][0]["type"] == "info"

    def test_numpy_values(self):
        payload = {
            "int": np.int64(3),
            "float": np.float32(1.5),
            "nan": np.float64("nan"),
            "flag": np.bool_(True),
            "array": np.array([1, 2]),
            "severity": InsightSeverity.WARNING,
        }

        assert json.loads(safe_json_dumps(payload)) == {
            "int": 3, "float": 1.5, "nan": None, "flag": True, "array": [1, 2], "severity": "warning"
        }

    def test_non_finite_floats_become_null(self):
        content = safe_json_dumps({"x": float("inf"), "nested": [np.nan, -np.inf, 2.0]})

        assert "NaN" not in content
        assert "Infinity" not in content
        assert json.loads(content) == {"x": None, "nested": [None, None, 2.0]}

    def test_unknown_type_still_fails(self):
        with pytest.raises(TypeError):
            json.dumps({"x": object()}, cls=NumpyJSONEncoder)


@pytest.mark.unit
class TestReportWriting:
    """Test writing exports to disk."""

    def test_write_creates_parents(self, tmp_path):
        target = tmp_path / "out" / "nested" / "report.md"

        path = ReportExporter().write("# hi\n", str(target), "markdown")

        assert path == target
        assert target.read_text(encoding="utf-8") == "# hi\n"

    def test_write_failure(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")

        with pytest.raises(ReporterError) as exc_info:
            ReportExporter().write("x", str(blocker / "report.md"), "markdown")
        assert exc_info.value.details["report_type"] == "markdown"
