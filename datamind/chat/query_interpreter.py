"""
Query Interpreter - Deterministic question answering over an analysis report.

Answers free-text questions without any learned model:
  1. Lowercase the question
  2. Walk an ordered list of (keywords, handler) rules
  3. The first rule whose keywords appear in the question renders the answer

Intent Priority (first match wins):
  - summary:   "summary", "summarize"
  - columns:   "column", "feature", "what are"
  - extreme:   "highest", "maximum", "max", "lowest", "min"
  - mean:      "average", "mean"
  - findings:  "pattern", "trend", "anomaly"
  - help:      anything else

Keyword tests are plain substring checks, so "maximum" also contains "max"
and "minimum" contains "min". Column lookup picks the first column, in
column order, whose lowercase name occurs in the question.

The interpreter reads the dataset and report but never modifies them.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Sequence, Tuple

from datamind.chat.response_templates import (
    COLUMNS_ANSWER,
    DEFAULT_DATASET_NAME,
    EXTREME_NEEDS_COLUMN,
    FINDING_LINE,
    FINDINGS_HEADER,
    HELP_ANSWER,
    MAX_ANSWER,
    MEAN_ANSWER,
    MEAN_NEEDS_COLUMN,
    MIN_ANSWER,
    NO_FINDINGS_ANSWER,
    SUMMARY_ANSWER,
)
from datamind.profiler.dataset import Dataset
from datamind.profiler.profile_result import AnalysisReport, NumericProfile

logger = logging.getLogger(__name__)


class QueryIntent(Enum):
    """What a question asks for."""
    SUMMARY = "summary"
    COLUMNS = "columns"
    EXTREME = "extreme"
    MEAN = "mean"
    FINDINGS = "findings"
    HELP = "help"


@dataclass(frozen=True)
class QueryContext:
    """Inputs available to a rule handler."""
    query: str
    dataset: Dataset
    report: AnalysisReport


@dataclass(frozen=True)
class QueryRule:
    """
    One entry of the interpreter's priority list.

    Attributes:
        intent: Intent reported by classify()
        keywords: Lowercase substrings that trigger the rule (empty = always)
        handler: Renders the answer for a matching question
    """
    intent: QueryIntent
    keywords: Tuple[str, ...]
    handler: Callable[[QueryContext], str]

    def matches(self, query: str) -> bool:
        if not self.keywords:
            return True
        return any(keyword in query for keyword in self.keywords)


SUMMARY_KEYWORDS = ("summary", "summarize")
COLUMN_KEYWORDS = ("column", "feature", "what are")
EXTREME_KEYWORDS = ("highest", "maximum", "max", "lowest", "min")
MAX_KEYWORDS = ("max", "highest")
MEAN_KEYWORDS = ("average", "mean")
FINDINGS_KEYWORDS = ("pattern", "trend", "anomaly")


def normalize_query(text: str) -> str:
    """Lowercase a question for keyword matching."""
    return (text or "").lower()


def match_column(query: str, columns: Sequence[str]) -> Optional[str]:
    """
    Find the first column whose lowercase name occurs in the query.

    Args:
        query: Lowercased question
        columns: Column names in column order

    Returns:
        Matching column name, or None
    """
    for column in columns:
        # A blank name is a substring of every query
        if column.strip() and column.lower() in query:
            return column
    return None


class QueryInterpreter:
    """
    Keyword-priority state machine over an AnalysisReport.

    Example:
        >>> interpreter = QueryInterpreter()
        >>> interpreter.classify("Summarize the data")
        <QueryIntent.SUMMARY: 'summary'>
        >>> interpreter.answer("what is the average of score", dataset, report)
        'The average (mean) value of **score** is **120.50**.'
    """

    def __init__(self):
        self.rules: Tuple[QueryRule, ...] = (
            QueryRule(QueryIntent.SUMMARY, SUMMARY_KEYWORDS, self._answer_summary),
            QueryRule(QueryIntent.COLUMNS, COLUMN_KEYWORDS, self._answer_columns),
            QueryRule(QueryIntent.EXTREME, EXTREME_KEYWORDS, self._answer_extreme),
            QueryRule(QueryIntent.MEAN, MEAN_KEYWORDS, self._answer_mean),
            QueryRule(QueryIntent.FINDINGS, FINDINGS_KEYWORDS, self._answer_findings),
            QueryRule(QueryIntent.HELP, (), self._answer_help),
        )

    def match_rule(self, text: str) -> QueryRule:
        """Return the first rule matching the question."""
        query = normalize_query(text)
        for rule in self.rules:
            if rule.matches(query):
                return rule
        # The last rule is the catch-all
        return self.rules[-1]

    def classify(self, text: str) -> QueryIntent:
        """Return the intent the question resolves to."""
        return self.match_rule(text).intent

    def answer(self, text: str, dataset: Dataset, report: AnalysisReport) -> str:
        """
        Answer a question about the dataset.

        Args:
            text: Free-text question
            dataset: Active dataset
            report: Report produced for that dataset

        Returns:
            Answer text with emphasis markers
        """
        rule = self.match_rule(text)
        logger.debug(f"Query resolved to intent '{rule.intent.value}'")
        return rule.handler(QueryContext(normalize_query(text), dataset, report))

    def _numeric_profile(self, context: QueryContext) -> Tuple[Optional[str], Optional[NumericProfile]]:
        column = match_column(context.query, context.dataset.columns)
        if column is None:
            return None, None
        profile = context.report.profiles.get(column)
        if isinstance(profile, NumericProfile):
            return column, profile
        return column, None

    def _answer_summary(self, context: QueryContext) -> str:
        numeric_count = sum(
            1 for column in context.dataset.columns
            if column in context.report.profiles and context.report.profiles[column].is_numeric
        )
        return SUMMARY_ANSWER.format(
            row_count=context.dataset.row_count,
            column_count=context.dataset.column_count,
            numeric_count=numeric_count,
        )

    def _answer_columns(self, context: QueryContext) -> str:
        return COLUMNS_ANSWER.format(
            dataset_name=context.dataset.name or DEFAULT_DATASET_NAME,
            columns=", ".join(context.dataset.columns),
        )

    def _answer_extreme(self, context: QueryContext) -> str:
        column, profile = self._numeric_profile(context)
        if profile is None:
            return EXTREME_NEEDS_COLUMN
        if any(keyword in context.query for keyword in MAX_KEYWORDS):
            return MAX_ANSWER.format(column=column, value=profile.max_display)
        return MIN_ANSWER.format(column=column, value=profile.min_display)

    def _answer_mean(self, context: QueryContext) -> str:
        column, profile = self._numeric_profile(context)
        if profile is None:
            return MEAN_NEEDS_COLUMN
        return MEAN_ANSWER.format(column=column, value=profile.mean_display)

    def _answer_findings(self, context: QueryContext) -> str:
        insights = context.report.insights
        if not insights:
            return NO_FINDINGS_ANSWER
        lines = [
            FINDING_LINE.format(agent=insight.agent.value, message=insight.message)
            for insight in insights
        ]
        return FINDINGS_HEADER + "\n".join(lines)

    def _answer_help(self, context: QueryContext) -> str:
        return HELP_ANSWER


def answer_query(text: str, dataset: Dataset, report: AnalysisReport) -> str:
    """Answer a question with a one-off QueryInterpreter."""
    return QueryInterpreter().answer(text, dataset, report)
