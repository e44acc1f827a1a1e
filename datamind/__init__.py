"""
DataMind - dataset analysis engine.

Key Components:
- Dataset: immutable snapshot of records with a fixed column order
- DatasetAnalyzer / analyze: column profiles, correlations and insights
- QueryInterpreter / answer_query: rule-based questions over a report
- Conversation: ordered question/answer transcript
"""

from .profiler.dataset import Dataset
from .profiler.engine import DatasetAnalyzer, analyze
from .profiler.profile_result import AnalysisReport, Insight
from .chat.query_interpreter import QueryInterpreter, answer_query
from .chat.conversation import Conversation
from .core.config import AnalysisConfig

__version__ = "0.1.0"

__all__ = [
    'Dataset',
    'DatasetAnalyzer',
    'analyze',
    'AnalysisReport',
    'Insight',
    'QueryInterpreter',
    'answer_query',
    'Conversation',
    'AnalysisConfig',
]
