"""
Value Classifier - Single-cell type detection.

Classifies one cell value as numeric, missing, or categorical text.

Design Decisions:
    - Array-like values are checked FIRST to avoid pandas "ambiguous truth
      value" errors from pd.isna()
    - Booleans are never numeric even though bool subclasses int; they are
      categorical with the text 'true'/'false'
    - decimal.Decimal is not a numbers.Real; it is classified through its
      text form
    - Text is numeric only when it is a plain decimal literal; strings such
      as 'nan', 'inf', '0x10' or '1_000' stay categorical
    - Non-finite numbers are treated as missing so NaN/Infinity never reach
      a report
    - Classification never raises; anything unrecognised is categorical

Usage:
    classifier = ValueClassifier()
    classifier.classify("42.5")   # ClassifiedValue(kind=NUMERIC, value=42.5)
    classifier.classify("  ")     # ClassifiedValue(kind=MISSING, value=None)
"""

import logging
import math
import numbers
import re
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Union

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)


class ValueKind(Enum):
    """Classification of a single cell."""
    NUMERIC = "numeric"
    MISSING = "missing"
    CATEGORICAL = "categorical"


@dataclass(frozen=True)
class ClassifiedValue:
    """
    A cell value with its classification.

    Attributes:
        kind: NUMERIC, MISSING or CATEGORICAL
        value: float for NUMERIC, text for CATEGORICAL, None for MISSING
    """
    kind: ValueKind
    value: Union[float, str, None] = None

    @property
    def is_numeric(self) -> bool:
        return self.kind is ValueKind.NUMERIC

    @property
    def is_missing(self) -> bool:
        return self.kind is ValueKind.MISSING


MISSING = ClassifiedValue(ValueKind.MISSING)


class ValueClassifier:
    """
    Classify cell values for column profiling.

    Example:
        >>> classifier = ValueClassifier()
        >>> classifier.classify(3).kind
        <ValueKind.NUMERIC: 'numeric'>
        >>> classifier.classify(True).value
        'true'
        >>> classifier.classify("").kind
        <ValueKind.MISSING: 'missing'>
    """

    NUMBER_PATTERN = r'^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$'

    def __init__(self):
        self._number_regex = re.compile(self.NUMBER_PATTERN)

    def classify(self, value: Any) -> ClassifiedValue:
        """
        Classify a single cell value.

        Args:
            value: Cell value (number, text, boolean, or absent)

        Returns:
            ClassifiedValue with kind and normalized value
        """
        if isinstance(value, (list, tuple, dict, set, np.ndarray)):
            return ClassifiedValue(ValueKind.CATEGORICAL, self.to_text(value))

        if value is None:
            return MISSING

        try:
            if pd.isna(value):
                return MISSING
        except (TypeError, ValueError):
            return ClassifiedValue(ValueKind.CATEGORICAL, self.to_text(value))

        if isinstance(value, (bool, np.bool_)):
            return ClassifiedValue(ValueKind.CATEGORICAL, self.to_text(value))

        if isinstance(value, numbers.Real):
            return self._classify_number(value)

        if isinstance(value, Decimal):
            return self._classify_decimal(value)

        if isinstance(value, str):
            return self._classify_text(value)

        return ClassifiedValue(ValueKind.CATEGORICAL, self.to_text(value))

    def _classify_number(self, value: numbers.Real) -> ClassifiedValue:
        try:
            number = float(value)
        except OverflowError:
            # Integers too large for a float are kept as their text
            return ClassifiedValue(ValueKind.CATEGORICAL, str(value))
        if not math.isfinite(number):
            return MISSING
        return ClassifiedValue(ValueKind.NUMERIC, number)

    def _classify_decimal(self, value: Decimal) -> ClassifiedValue:
        if not value.is_finite():
            return MISSING
        # Decimals beyond float range stay categorical, like overflowing text
        return self._classify_text(str(value))

    def _classify_text(self, value: str) -> ClassifiedValue:
        stripped = value.strip()
        if not stripped:
            return MISSING
        if self._number_regex.match(stripped):
            try:
                number = float(stripped)
            except (OverflowError, ValueError):
                number = math.inf
            if math.isfinite(number):
                return ClassifiedValue(ValueKind.NUMERIC, number)
        return ClassifiedValue(ValueKind.CATEGORICAL, value)

    @staticmethod
    def to_text(value: Any) -> str:
        """Text form of a non-numeric cell."""
        if isinstance(value, (bool, np.bool_)):
            return "true" if value else "false"
        return str(value)
