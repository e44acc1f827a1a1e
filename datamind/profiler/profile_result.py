"""
Data structures for storing analysis results.

Contains the column profile variants, correlation results, insights and
the analysis report that bundles them. All structures are immutable once
built; a new report replaces an old one wholesale.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Any, Optional, Tuple

from datamind.core.constants import (
    DISPLAY_DECIMALS,
    EMPHASIS_MARKER,
    MISSING_PCT_DECIMALS,
)
from datamind.core.exceptions import ColumnNotFoundError


def format_number(value: float, decimals: int = DISPLAY_DECIMALS) -> str:
    """Render a statistic with a fixed number of decimal places."""
    return f"{value:.{decimals}f}"


def format_missing_pct(missing_count: int, row_count: int) -> str:
    """Render the missing fraction as percentage text, e.g. '12.5%'."""
    return f"{missing_count / row_count * 100:.{MISSING_PCT_DECIMALS}f}%"


class ColumnType(Enum):
    """Profile variant of a column."""
    NUMERIC = "numeric"
    CATEGORICAL = "categorical"


@dataclass(frozen=True)
class ColumnProfile:
    """
    Fields shared by both profile variants.

    Attributes:
        column: Column name
        row_count: Rows in the dataset
        missing_count: Rows where the cell is missing
        missing_pct: Missing fraction as percentage text with one decimal
    """
    column: str
    row_count: int
    missing_count: int
    missing_pct: str

    column_type = None

    @property
    def present_count(self) -> int:
        """Rows where the cell is not missing."""
        return self.row_count - self.missing_count

    @property
    def is_numeric(self) -> bool:
        return self.column_type is ColumnType.NUMERIC

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "column": self.column,
            "type": self.column_type.value,
            "missing": self.missing_pct,
            "missing_count": int(self.missing_count),
        }


@dataclass(frozen=True)
class NumericProfile(ColumnProfile):
    """
    Profile of a column holding at least one numeric value.

    The raw (unrounded) statistics are kept; *_display properties give the
    values rounded for presentation.

    Attributes:
        count: Number of numeric values
        mean: Arithmetic mean of the numeric values
        median: Element at index n // 2 of the ascending numeric values
        min_value: Smallest numeric value
        max_value: Largest numeric value
        decimals: Decimal places used for display
    """
    count: int = 0
    mean: float = 0.0
    median: float = 0.0
    min_value: float = 0.0
    max_value: float = 0.0
    decimals: int = DISPLAY_DECIMALS

    column_type = ColumnType.NUMERIC

    @property
    def value_range(self) -> float:
        return self.max_value - self.min_value

    @property
    def mean_display(self) -> str:
        return format_number(self.mean, self.decimals)

    @property
    def median_display(self) -> str:
        return format_number(self.median, self.decimals)

    @property
    def min_display(self) -> str:
        return format_number(self.min_value, self.decimals)

    @property
    def max_display(self) -> str:
        return format_number(self.max_value, self.decimals)

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result.update({
            "count": int(self.count),
            "mean": self.mean_display,
            "median": self.median_display,
            "min": self.min_display,
            "max": self.max_display,
        })
        return result


@dataclass(frozen=True)
class CategoricalProfile(ColumnProfile):
    """
    Profile of a column with no numeric values.

    Attributes:
        unique_count: Distinct text values among present cells
        mode: Most frequent value (None when every cell is missing)
        mode_frequency: Occurrences of the mode
    """
    unique_count: int = 0
    mode: Optional[str] = None
    mode_frequency: int = 0

    column_type = ColumnType.CATEGORICAL

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result.update({
            "unique": int(self.unique_count),
            "mode": self.mode,
            "mode_frequency": int(self.mode_frequency),
        })
        return result


@dataclass(frozen=True)
class CorrelationResult:
    """
    Pearson correlation between two numeric columns.

    Attributes:
        column1: Column earlier in column order
        column2: Column later in column order
        coefficient: Pearson r (0 when undefined)
        pair_count: Complete-case pairs used
    """
    column1: str
    column2: str
    coefficient: float
    pair_count: int

    @property
    def direction(self) -> str:
        return "positive" if self.coefficient > 0 else "negative"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "column1": self.column1,
            "column2": self.column2,
            "correlation": float(self.coefficient),
            "pair_count": int(self.pair_count),
        }


class InsightAgent(Enum):
    """Source tag shown next to an insight."""
    ANALYST = "Analyst"
    INSIGHT = "Insight"


class InsightSeverity(Enum):
    """Insight severity levels."""
    INFO = "info"
    WARNING = "warning"


@dataclass(frozen=True)
class Insight:
    """
    A human-readable finding about the dataset.

    Key terms in the message are wrapped in ``**`` emphasis markers that the
    presentation layer renders.

    Attributes:
        agent: Source tag
        message: Finding text with emphasis markers
        severity: info or warning
        rule: Identifier of the rule that produced the insight
    """
    agent: InsightAgent
    message: str
    severity: InsightSeverity
    rule: str = ""

    @property
    def plain_message(self) -> str:
        """Message with emphasis markers stripped."""
        return self.message.replace(EMPHASIS_MARKER, "")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "agent": self.agent.value,
            "text": self.message,
            "type": self.severity.value,
            "rule": self.rule,
        }


@dataclass(frozen=True)
class AnalysisReport:
    """
    Result of one dataset analysis.

    Attributes:
        profiles: Column name -> profile, in column order
        insights: Findings in rule evaluation order
        correlations: Every numeric column pair, in column order
        row_count: Rows analysed
        column_count: Columns analysed
    """
    profiles: Dict[str, ColumnProfile] = field(default_factory=dict)
    insights: Tuple[Insight, ...] = ()
    correlations: Tuple[CorrelationResult, ...] = ()
    row_count: int = 0
    column_count: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.profiles and not self.insights

    @property
    def numeric_columns(self) -> List[str]:
        """Columns profiled as NUMERIC, in column order."""
        return [name for name, profile in self.profiles.items() if profile.is_numeric]

    def profile_for(self, column: str) -> ColumnProfile:
        """
        Look up a column profile.

        Raises:
            ColumnNotFoundError: If the column was not analysed
        """
        try:
            return self.profiles[column]
        except KeyError:
            raise ColumnNotFoundError(column, list(self.profiles))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "row_count": int(self.row_count),
            "column_count": int(self.column_count),
            "profiles": {name: profile.to_dict() for name, profile in self.profiles.items()},
            "correlations": [c.to_dict() for c in self.correlations],
            "insights": [i.to_dict() for i in self.insights],
        }
