"""
Shared fixtures for the DataMind test suite.
"""

import logging

import pytest

from datamind.core.config import AnalysisConfig
from datamind.core.logging_config import ROOT_LOGGER_NAME
from datamind.profiler.dataset import Dataset
from datamind.profiler.engine import DatasetAnalyzer


SCORE_VALUES = [10, 20, 30, 40, 50, 60, 70, 80, 90, 100, 10000]


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo setup_logging() side effects left by CLI and logging tests."""
    yield
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def score_dataset():
    """Eleven rows: unique ids a..k and one extreme score."""
    ids = "abcdefghijk"
    records = [{"id": ident, "score": score} for ident, score in zip(ids, SCORE_VALUES)]
    return Dataset.from_records(records, name="scores.csv")


@pytest.fixture
def sales_dataset():
    """Small mixed dataset whose amount column has a mean of 120.50."""
    records = [
        {"region": "north", "amount": 100, "units": 10},
        {"region": "south", "amount": 141, "units": 20},
        {"region": "north", "amount": None, "units": 30},
    ]
    return Dataset.from_records(records, name="sales.csv")


@pytest.fixture
def analyzer():
    """DatasetAnalyzer with default thresholds."""
    return DatasetAnalyzer(AnalysisConfig())
