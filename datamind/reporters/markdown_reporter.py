"""
Report exporters.

Renders an AnalysisReport as a Markdown insight listing (emphasis markers
stripped) or as JSON, and writes either to disk.
"""

import logging
from datetime import date
from pathlib import Path
from typing import Optional

from datamind.core.constants import (
    REPORT_DATE_FORMAT,
    REPORT_INSIGHTS_HEADER,
    REPORT_TITLE,
)
from datamind.core.exceptions import ReporterError
from datamind.profiler.profile_result import AnalysisReport
from datamind.reporters.json_utils import safe_json_dumps

logger = logging.getLogger(__name__)


class ReportExporter:
    """Render and write analysis reports."""

    def render_markdown(
        self,
        report: AnalysisReport,
        dataset_name: Optional[str] = None,
        report_date: Optional[date] = None
    ) -> str:
        """
        Render the insight listing as Markdown.

        Each insight becomes ``- [agent] message`` with emphasis markers
        stripped.

        Args:
            report: Analysis report
            dataset_name: Name shown in the header
            report_date: Date shown in the header (default: today)

        Returns:
            Markdown document
        """
        report_date = report_date or date.today()
        lines = [
            f"# {REPORT_TITLE}",
            "",
            f"**Dataset:** {dataset_name or 'unnamed'}",
            f"**Date:** {report_date.strftime(REPORT_DATE_FORMAT)}",
            "",
            f"## {REPORT_INSIGHTS_HEADER}",
            "",
        ]
        lines.extend(
            f"- [{insight.agent.value}] {insight.plain_message}"
            for insight in report.insights
        )
        return "\n".join(lines) + "\n"

    def render_json(self, report: AnalysisReport, indent: int = 2) -> str:
        """Render the full report as JSON."""
        return safe_json_dumps(report.to_dict(), indent=indent)

    def write(self, content: str, output_path: str, report_type: str) -> Path:
        """
        Write rendered content to a file, creating parent directories.

        Raises:
            ReporterError: If the file cannot be written
        """
        path = Path(output_path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise ReporterError(
                f"Failed to write {report_type} report: {e}",
                report_type=report_type,
                output_path=str(output_path),
                original_exception=e
            )
        logger.info(f"Wrote {report_type} report to {path}")
        return path


def export_markdown(
    report: AnalysisReport,
    dataset_name: Optional[str] = None,
    report_date: Optional[date] = None
) -> str:
    """Render the Markdown insight export."""
    return ReportExporter().render_markdown(report, dataset_name, report_date)


def export_json(report: AnalysisReport) -> str:
    """Render the JSON report export."""
    return ReportExporter().render_json(report)
