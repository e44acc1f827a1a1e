"""
Correlation Analyzer - Pairwise Pearson correlation between numeric columns.

Rows contribute to a pair only when both cells classify as numeric
(complete-case filtering). Degenerate inputs (too few pairs, zero variance)
give a coefficient of 0 instead of an error.
"""

import logging
import math
from typing import List, Optional, Sequence, Tuple

import numpy as np

from datamind.core.config import AnalysisConfig
from datamind.profiler.dataset import Dataset
from datamind.profiler.profile_result import CorrelationResult
from datamind.profiler.value_classifier import ValueClassifier

logger = logging.getLogger(__name__)


class CorrelationAnalyzer:
    """
    Compute Pearson r for pairs of numeric columns.

    Example:
        >>> analyzer = CorrelationAnalyzer()
        >>> analyzer.pearson([1, 2, 3], [2, 4, 6])
        1.0
    """

    def __init__(self, config: Optional[AnalysisConfig] = None, classifier: Optional[ValueClassifier] = None):
        self.config = config or AnalysisConfig()
        self.classifier = classifier or ValueClassifier()

    def complete_pairs(self, dataset: Dataset, column1: str, column2: str) -> List[Tuple[float, float]]:
        """Return (a, b) for rows where both cells are numeric."""
        pairs = []
        for row in dataset.rows:
            a = self.classifier.classify(row[column1])
            b = self.classifier.classify(row[column2])
            if a.is_numeric and b.is_numeric:
                pairs.append((a.value, b.value))
        return pairs

    def pearson(self, a: Sequence[float], b: Sequence[float]) -> float:
        """
        Pearson product-moment correlation of two equally long sequences.

        Returns 0.0 with fewer than min_correlation_pairs values or when
        either sequence has zero variance. Very small or very large magnitudes
        do not underflow or overflow the sums of squares.
        """
        if len(a) < self.config.min_correlation_pairs:
            return 0.0

        x = np.asarray(a, dtype=np.float64)
        y = np.asarray(b, dtype=np.float64)
        with np.errstate(over="ignore", invalid="ignore"):
            dx = x - x.mean()
            dy = y - y.mean()
            scale_x = float(np.max(np.abs(dx)))
            scale_y = float(np.max(np.abs(dy)))
        if scale_x == 0.0 or scale_y == 0.0:
            return 0.0
        if not (math.isfinite(scale_x) and math.isfinite(scale_y)):
            return 0.0

        # Deviations are scaled into [-1, 1]; r is unchanged by scaling
        dx = dx / scale_x
        dy = dy / scale_y

        numerator = float(np.sum(dx * dy))
        denominator = float(np.sum(dx * dx)) * float(np.sum(dy * dy))
        r = numerator / math.sqrt(denominator)
        return float(r) if math.isfinite(r) else 0.0

    def correlate(self, dataset: Dataset, column1: str, column2: str) -> CorrelationResult:
        """Correlate two columns of a dataset."""
        pairs = self.complete_pairs(dataset, column1, column2)
        a = [p[0] for p in pairs]
        b = [p[1] for p in pairs]
        coefficient = self.pearson(a, b)
        return CorrelationResult(
            column1=column1,
            column2=column2,
            coefficient=coefficient,
            pair_count=len(pairs),
        )

    def correlate_all(self, dataset: Dataset, numeric_columns: Sequence[str]) -> List[CorrelationResult]:
        """
        Correlate every unordered pair of the given columns.

        Pairs are produced as (i, j) with i before j in the given order.
        Cost is O(n^2) in the number of columns.
        """
        results = []
        for i, column1 in enumerate(numeric_columns):
            for column2 in numeric_columns[i + 1:]:
                results.append(self.correlate(dataset, column1, column2))

        logger.debug(f"Computed {len(results)} pairwise correlations over {len(numeric_columns)} numeric columns")
        return results
