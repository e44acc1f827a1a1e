"""
Column Profiler - Per-column statistical summary.

Architecture:
    ColumnProfiler classifies every cell of one column with ValueClassifier
    and aggregates the result into a NumericProfile (when at least one value
    is numeric) or a CategoricalProfile.

Design Decisions:
    - Median is the element at index n // 2 of the ascending numeric values.
      For even n this is the upper of the two middle elements; values are
      never averaged. [1, 2, 3, 4] has median 3.
    - Non-numeric text in a numeric column counts as present (it is not
      missing) but does not contribute to the statistics.
    - Raw statistics are stored; rounding happens only for display.
    - Mode ties are resolved by the configured rule (see constants module).
"""

import logging
import math
from collections import Counter
from typing import Dict, List, Optional, Tuple

import numpy as np

from datamind.core.config import AnalysisConfig
from datamind.core.constants import MODE_TIE_BREAK_SMALLEST
from datamind.core.exceptions import InvalidInputError
from datamind.profiler.dataset import Dataset
from datamind.profiler.profile_result import (
    CategoricalProfile,
    ColumnProfile,
    NumericProfile,
    format_missing_pct,
)
from datamind.profiler.value_classifier import ClassifiedValue, ValueClassifier

logger = logging.getLogger(__name__)


class ColumnProfiler:
    """
    Build the profile of a single column.

    Example:
        >>> profiler = ColumnProfiler()
        >>> dataset = Dataset.from_records([{"x": 1}, {"x": 2}, {"x": 3}, {"x": 4}])
        >>> profiler.profile("x", dataset).median
        3.0
    """

    def __init__(self, config: Optional[AnalysisConfig] = None, classifier: Optional[ValueClassifier] = None):
        self.config = config or AnalysisConfig()
        self.classifier = classifier or ValueClassifier()

    def classify_column(self, column: str, dataset: Dataset) -> List[ClassifiedValue]:
        """Classify every cell of a column in row order."""
        return [self.classifier.classify(value) for value in dataset.column_values(column)]

    def profile(self, column: str, dataset: Dataset) -> ColumnProfile:
        """
        Profile one column of a dataset.

        Args:
            column: Column name
            dataset: Dataset holding the column

        Returns:
            NumericProfile or CategoricalProfile

        Raises:
            InvalidInputError: If the dataset has no rows or lacks the column
        """
        row_count = dataset.row_count
        if row_count == 0:
            raise InvalidInputError(
                "Cannot profile a column of an empty dataset",
                operation="profile_column",
                column=column
            )

        classified = self.classify_column(column, dataset)
        present = [c for c in classified if not c.is_missing]
        numeric = [c.value for c in present if c.is_numeric]

        missing_count = row_count - len(present)
        missing_pct = format_missing_pct(missing_count, row_count)

        if numeric:
            profile = self._numeric_profile(column, numeric, row_count, missing_count, missing_pct)
        else:
            values = [c.value for c in present]
            profile = self._categorical_profile(column, values, row_count, missing_count, missing_pct)

        logger.debug(
            f"Profiled '{column}': type={profile.column_type.value}, "
            f"present={len(present):,}, numeric={len(numeric):,}, missing={missing_pct}"
        )
        return profile

    def _numeric_profile(
        self,
        column: str,
        numeric: List[float],
        row_count: int,
        missing_count: int,
        missing_pct: str
    ) -> NumericProfile:
        values = np.sort(np.array(numeric, dtype=np.float64))
        n = len(values)

        with np.errstate(over="ignore"):
            mean = float(np.mean(values))
        if not math.isfinite(mean):
            # Sum overflowed, average the pre-divided values instead
            mean = float(np.sum(values / n))

        return NumericProfile(
            column=column,
            row_count=row_count,
            missing_count=missing_count,
            missing_pct=missing_pct,
            count=n,
            mean=mean,
            median=float(values[n // 2]),
            min_value=float(values[0]),
            max_value=float(values[-1]),
            decimals=self.config.display_decimals,
        )

    def _categorical_profile(
        self,
        column: str,
        values: List[str],
        row_count: int,
        missing_count: int,
        missing_pct: str
    ) -> CategoricalProfile:
        counts = Counter(values)
        mode, frequency = self.select_mode(values, counts)

        return CategoricalProfile(
            column=column,
            row_count=row_count,
            missing_count=missing_count,
            missing_pct=missing_pct,
            unique_count=len(counts),
            mode=mode,
            mode_frequency=frequency,
        )

    def select_mode(self, values: List[str], counts: Optional[Counter] = None) -> Tuple[Optional[str], int]:
        """
        Pick the most frequent value.

        Ties between equally frequent values:
            last_seen: the value whose final occurrence is latest in row order
            smallest:  the smallest value by text ordering

        Args:
            values: Present values in row order
            counts: Precomputed occurrence counts (optional)

        Returns:
            Tuple of (mode, frequency); (None, 0) when values is empty
        """
        if not values:
            return None, 0

        counts = counts if counts is not None else Counter(values)
        top = max(counts.values())
        tied = [value for value, count in counts.items() if count == top]

        if self.config.mode_tie_break == MODE_TIE_BREAK_SMALLEST:
            return min(tied), top

        last_index: Dict[str, int] = {value: index for index, value in enumerate(values)}
        return max(tied, key=lambda value: last_index[value]), top
