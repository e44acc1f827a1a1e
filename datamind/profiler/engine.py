"""
Dataset Analyzer - orchestrates a full analysis pass.

Runs the column profiler over every column, correlates every pair of numeric
columns, and feeds both to the insight generator. The analyzer keeps no state
between calls: each call returns a fresh AnalysisReport and analysing the
same dataset twice yields equal reports.
"""

import logging
import time
from typing import Dict, Optional

from datamind.core.config import AnalysisConfig
from datamind.profiler.column_profiler import ColumnProfiler
from datamind.profiler.correlation import CorrelationAnalyzer
from datamind.profiler.dataset import Dataset
from datamind.profiler.insight_engine import InsightGenerator
from datamind.profiler.profile_result import AnalysisReport, ColumnProfile
from datamind.profiler.value_classifier import ValueClassifier

logger = logging.getLogger(__name__)


class DatasetAnalyzer:
    """
    Entry point for dataset analysis.

    Example:
        >>> analyzer = DatasetAnalyzer()
        >>> report = analyzer.analyze(Dataset.from_records(records, name="sales.csv"))
        >>> report.profiles["amount"].mean_display
        '120.50'
    """

    def __init__(self, config: Optional[AnalysisConfig] = None):
        """
        Initialize the analyzer.

        Args:
            config: Detection policy (uses defaults if None)
        """
        self.config = config or AnalysisConfig()
        classifier = ValueClassifier()
        self.column_profiler = ColumnProfiler(self.config, classifier)
        self.correlation_analyzer = CorrelationAnalyzer(self.config, classifier)
        self.insight_generator = InsightGenerator(self.config)

    def analyze(self, dataset: Dataset) -> AnalysisReport:
        """
        Analyse a dataset.

        A dataset with no rows produces an empty report rather than an error.

        Args:
            dataset: Dataset snapshot to analyse

        Returns:
            AnalysisReport with profiles, correlations and insights
        """
        if dataset.row_count == 0:
            logger.warning(f"Skipping analysis of empty dataset '{dataset.name or 'unnamed'}'")
            return AnalysisReport(row_count=0, column_count=dataset.column_count)

        start_time = time.time()
        logger.info(
            f"Analysing dataset '{dataset.name or 'unnamed'}': "
            f"{dataset.row_count:,} rows x {dataset.column_count} columns"
        )

        profiles: Dict[str, ColumnProfile] = {}
        for column in dataset.columns:
            profiles[column] = self.column_profiler.profile(column, dataset)

        numeric_columns = [c for c in dataset.columns if profiles[c].is_numeric]
        correlations = self.correlation_analyzer.correlate_all(dataset, numeric_columns)

        insights = self.insight_generator.generate(
            profiles,
            correlations,
            row_count=dataset.row_count,
            column_count=dataset.column_count
        )

        duration = time.time() - start_time
        logger.info(
            f"Analysis complete: {len(numeric_columns)} numeric columns, "
            f"{len(insights)} insights ({duration:.3f}s)"
        )

        return AnalysisReport(
            profiles=profiles,
            insights=tuple(insights),
            correlations=tuple(correlations),
            row_count=dataset.row_count,
            column_count=dataset.column_count,
        )


def analyze(dataset: Dataset, config: Optional[AnalysisConfig] = None) -> AnalysisReport:
    """Analyse a dataset with a one-off DatasetAnalyzer."""
    return DatasetAnalyzer(config).analyze(dataset)
