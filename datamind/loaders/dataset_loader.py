"""
Dataset loading collaborator.

Decoding is delegated to pandas; this module only picks the reader from the
file extension and wraps the resulting DataFrame in a Dataset.
"""

import csv
import logging
from pathlib import Path
from typing import Optional

import pandas as pd

from datamind.core.constants import FILE_EXTENSION_MAP, SUPPORTED_FILE_FORMATS
from datamind.core.exceptions import DataLoadError, UnsupportedFormatError
from datamind.profiler.dataset import Dataset

logger = logging.getLogger(__name__)


def detect_delimiter(file_path: str, sample_size: int = 8192) -> str:
    """
    Auto-detect the delimiter used in a CSV file.

    Args:
        file_path: Path to the CSV file
        sample_size: Number of characters to sample for detection

    Returns:
        Detected delimiter character, defaults to ',' if detection fails
    """
    try:
        with open(file_path, "r", newline="", encoding="utf-8") as f:
            sample = f.read(sample_size)
        return csv.Sniffer().sniff(sample, delimiters=",\t|;:").delimiter
    except (UnicodeDecodeError, csv.Error):
        return ","


def detect_format(file_path: str) -> str:
    """
    Map a file extension to a loader format.

    Raises:
        UnsupportedFormatError: If the extension is not recognised
    """
    suffix = Path(file_path).suffix.lower()
    file_format = FILE_EXTENSION_MAP.get(suffix)
    if file_format is None:
        raise UnsupportedFormatError(file_path, suffix.lstrip(".") or "unknown", SUPPORTED_FILE_FORMATS)
    return file_format


def load_dataset(file_path: str, file_format: Optional[str] = None, delimiter: Optional[str] = None) -> Dataset:
    """
    Load a CSV or JSON file into a Dataset.

    Args:
        file_path: Path to the data file
        file_format: 'csv' or 'json' (default: from the extension)
        delimiter: CSV delimiter (default: auto-detected)

    Returns:
        Dataset named after the file

    Raises:
        DataLoadError: If the file is missing or cannot be decoded
        UnsupportedFormatError: If the format is not supported
    """
    path = Path(file_path)
    if not path.exists():
        raise DataLoadError(f"File not found: {file_path}", file_path=str(file_path))

    file_format = (file_format or detect_format(file_path)).lower()
    if file_format not in SUPPORTED_FILE_FORMATS:
        raise UnsupportedFormatError(str(file_path), file_format, SUPPORTED_FILE_FORMATS)

    try:
        if file_format == "csv":
            sep = delimiter or detect_delimiter(str(path))
            if sep != ",":
                logger.info(f"Using delimiter {sep!r} for {path.name}")
            # Only empty cells are missing; literal text such as "NA" is kept
            frame = pd.read_csv(
                path, sep=sep, skip_blank_lines=True, keep_default_na=False, na_values=[""]
            )
        else:
            lines = path.suffix.lower() in (".jsonl", ".ndjson")
            # Numeric columns with date-like names (e.g. created_at) stay numeric
            frame = pd.read_json(
                path,
                lines=lines,
                orient=None if lines else "records",
                convert_dates=False,
                keep_default_dates=False,
            )
    except (ValueError, OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        raise DataLoadError(
            f"Failed to read {file_format} file: {e}",
            file_path=str(file_path),
            original_exception=e
        )

    logger.info(f"Loaded {len(frame):,} rows x {len(frame.columns)} columns from {path.name}")
    return Dataset.from_dataframe(frame, name=path.name)
