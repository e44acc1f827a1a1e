"""Markdown and JSON report exporters."""

from .markdown_reporter import ReportExporter, export_markdown, export_json

__all__ = ['ReportExporter', 'export_markdown', 'export_json']
