"""
Analysis engine.

Key Components:
- ValueClassifier: numeric / missing / categorical cell classification
- ColumnProfiler: per-column statistics
- CorrelationAnalyzer: pairwise Pearson correlation
- InsightGenerator: heuristic findings
- DatasetAnalyzer: orchestrates a full analysis
"""

from .value_classifier import ValueClassifier, ValueKind, ClassifiedValue
from .column_profiler import ColumnProfiler
from .correlation import CorrelationAnalyzer
from .insight_engine import InsightGenerator
from .engine import DatasetAnalyzer, analyze

__all__ = [
    'ValueClassifier',
    'ValueKind',
    'ClassifiedValue',
    'ColumnProfiler',
    'CorrelationAnalyzer',
    'InsightGenerator',
    'DatasetAnalyzer',
    'analyze',
]
