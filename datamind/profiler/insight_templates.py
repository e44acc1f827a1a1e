"""
Insight templates for analysis reports.

This module contains the text of every insight the rule engine emits.
Separated from logic for easier maintenance.

Templates use Python string formatting with named placeholders. Key terms
are wrapped in the emphasis marker; emphasize() applies it to a value.
"""

from typing import Any

from datamind.core.constants import EMPHASIS_MARKER


def emphasize(term: Any) -> str:
    """Wrap a term in the emphasis marker."""
    return f"{EMPHASIS_MARKER}{term}{EMPHASIS_MARKER}"


INSIGHT_TEMPLATES = {
    "wide_variance": (
        "Extreme variance detected in {column} - range is very wide compared to the mean."
    ),
    "high_cardinality": (
        "High cardinality detected in {column} ({unique_count} unique values). "
        "This column might function as an ID or key."
    ),
    "strong_correlation": (
        "Strong {direction} correlation found between {column1} and {column2} (r = {r})."
    ),
    "dataset_volume": (
        "Dataset loaded successfully: {row_count} records across {column_count} features."
    ),
}

# Placeholders rendered with emphasis markers
EMPHASIZED_FIELDS = {
    "wide_variance": {"column"},
    "high_cardinality": {"column"},
    "strong_correlation": {"direction", "column1", "column2"},
    "dataset_volume": {"row_count", "column_count"},
}


def render_template(template_id: str, **data: Any) -> str:
    """
    Render an insight template.

    Args:
        template_id: Key in INSIGHT_TEMPLATES
        **data: Placeholder values

    Returns:
        Rendered message with emphasis markers

    Raises:
        KeyError: If the template id is unknown
    """
    template = INSIGHT_TEMPLATES[template_id]
    emphasized = EMPHASIZED_FIELDS.get(template_id, set())
    values = {
        key: emphasize(value) if key in emphasized else value
        for key, value in data.items()
    }
    return template.format(**values)
