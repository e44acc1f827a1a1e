"""
Rule-based insight engine for analysis reports.

Turns column profiles and pairwise correlations into human-readable findings.

Architecture:
    profiles + correlations -> InsightGenerator rules -> Insights

Rule order is fixed and determines report order:
    1. Per-column rules, in column order (wide variance, high cardinality)
    2. Correlation rule, over all numeric pairs in column order
    3. Volume rule, last
"""

import logging
from typing import Dict, List, Optional, Sequence

from datamind.core.config import AnalysisConfig
from datamind.profiler.insight_templates import render_template
from datamind.profiler.profile_result import (
    CategoricalProfile,
    ColumnProfile,
    CorrelationResult,
    Insight,
    InsightAgent,
    InsightSeverity,
    NumericProfile,
)

logger = logging.getLogger(__name__)


class InsightGenerator:
    """
    Apply heuristic rules to profiles and correlations.

    Each rule is evaluated independently and produces at most one insight
    per trigger. The generator holds no state between calls.
    """

    def __init__(self, config: Optional[AnalysisConfig] = None):
        """
        Initialize the generator with detection thresholds.

        Args:
            config: Custom thresholds (uses defaults if None)
        """
        self.config = config or AnalysisConfig()

    def generate(
        self,
        profiles: Dict[str, ColumnProfile],
        correlations: Sequence[CorrelationResult],
        row_count: int,
        column_count: int
    ) -> List[Insight]:
        """
        Generate insights for one analysis.

        Args:
            profiles: Column name -> profile, in column order
            correlations: Numeric pairs in column order
            row_count: Rows in the dataset
            column_count: Columns in the dataset

        Returns:
            Insights in rule evaluation order
        """
        insights: List[Insight] = []

        for profile in profiles.values():
            if isinstance(profile, NumericProfile):
                insight = self._wide_variance_rule(profile)
            elif isinstance(profile, CategoricalProfile):
                insight = self._high_cardinality_rule(profile, row_count)
            else:
                insight = None
            if insight:
                insights.append(insight)

        for correlation in correlations:
            insight = self._correlation_rule(correlation)
            if insight:
                insights.append(insight)

        insight = self._volume_rule(row_count, column_count)
        if insight:
            insights.append(insight)

        logger.debug(f"Generated {len(insights)} insights")
        return insights

    def _wide_variance_rule(self, profile: NumericProfile) -> Optional[Insight]:
        """Flag numeric columns whose range dwarfs the mean."""
        # Non-positive means are not special-cased
        if profile.count < self.config.min_values_for_variance:
            return None
        if not profile.value_range > profile.mean * self.config.variance_multiplier:
            return None

        return Insight(
            agent=InsightAgent.ANALYST,
            message=render_template("wide_variance", column=profile.column),
            severity=InsightSeverity.WARNING,
            rule="wide_variance",
        )

    def _high_cardinality_rule(self, profile: CategoricalProfile, row_count: int) -> Optional[Insight]:
        """Flag categorical columns that look like identifiers."""
        if row_count <= 0:
            return None
        if not profile.unique_count / row_count > self.config.cardinality_threshold:
            return None

        return Insight(
            agent=InsightAgent.ANALYST,
            message=render_template(
                "high_cardinality",
                column=profile.column,
                unique_count=profile.unique_count
            ),
            severity=InsightSeverity.INFO,
            rule="high_cardinality",
        )

    def _correlation_rule(self, correlation: CorrelationResult) -> Optional[Insight]:
        """Report strongly correlated numeric pairs."""
        if not abs(correlation.coefficient) > self.config.correlation_threshold:
            return None

        return Insight(
            agent=InsightAgent.ANALYST,
            message=render_template(
                "strong_correlation",
                direction=correlation.direction,
                column1=correlation.column1,
                column2=correlation.column2,
                r=f"{correlation.coefficient:.2f}"
            ),
            severity=InsightSeverity.INFO,
            rule="strong_correlation",
        )

    def _volume_rule(self, row_count: int, column_count: int) -> Optional[Insight]:
        """Summarise dataset size once it passes the volume threshold."""
        if not row_count > self.config.min_rows_for_volume:
            return None

        return Insight(
            agent=InsightAgent.INSIGHT,
            message=render_template(
                "dataset_volume",
                row_count=row_count,
                column_count=column_count
            ),
            severity=InsightSeverity.INFO,
            rule="dataset_volume",
        )
