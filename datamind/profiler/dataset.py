"""
Dataset model consumed by the analysis engine.

A Dataset is an immutable snapshot: ordered, unique column names plus rows
that each carry every column. Fields a source record did not provide are
stored as the explicit absent marker ``None`` rather than dropped.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

import pandas as pd

from datamind.core.exceptions import InvalidInputError

logger = logging.getLogger(__name__)

ABSENT = None


@dataclass(frozen=True)
class Dataset:
    """
    Ordered records with a fixed column order.

    Attributes:
        columns: Column names in first-seen order
        rows: One mapping per record, keyed by every column
        name: Optional display name (e.g. the source file name)
    """
    columns: Tuple[str, ...]
    rows: Tuple[Dict[str, Any], ...]
    name: Optional[str] = None

    def __post_init__(self):
        columns = tuple(self.columns)
        if len(set(columns)) != len(columns):
            duplicates = sorted({c for c in columns if columns.count(c) > 1})
            raise InvalidInputError(
                f"Duplicate column names: {', '.join(duplicates)}",
                operation="dataset"
            )

        known = set(columns)
        rows = []
        for index, row in enumerate(self.rows):
            unknown = [key for key in row if key not in known]
            if unknown:
                raise InvalidInputError(
                    f"Row {index} has fields outside the declared columns: {', '.join(map(str, unknown))}",
                    operation="dataset"
                )
            rows.append({column: row.get(column, ABSENT) for column in columns})

        object.__setattr__(self, "columns", columns)
        object.__setattr__(self, "rows", tuple(rows))

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]], name: Optional[str] = None) -> "Dataset":
        """
        Build a dataset from parsed records.

        Column order is the order in which field names are first seen
        across all records.

        Args:
            records: Sequence of mappings from column name to cell value
            name: Optional display name

        Returns:
            Dataset instance
        """
        records = list(records)
        columns: List[str] = []
        seen = set()
        for record in records:
            for key in record:
                if key not in seen:
                    seen.add(key)
                    columns.append(key)

        logger.debug(f"Built dataset from {len(records):,} records with {len(columns)} columns")
        return cls(columns=tuple(columns), rows=tuple(dict(r) for r in records), name=name)

    @classmethod
    def from_dataframe(cls, frame: pd.DataFrame, name: Optional[str] = None) -> "Dataset":
        """
        Build a dataset from a pandas DataFrame.

        Missing cells (NaN, NA, NaT) become the absent marker.

        Args:
            frame: Source DataFrame
            name: Optional display name

        Returns:
            Dataset instance
        """
        columns = tuple(str(c) for c in frame.columns)
        cleaned = frame.astype(object).where(frame.notna(), None)
        cleaned.columns = list(columns)
        records = cleaned.to_dict(orient="records")
        return cls(columns=columns, rows=tuple(records), name=name)

    @property
    def row_count(self) -> int:
        """Number of records."""
        return len(self.rows)

    @property
    def column_count(self) -> int:
        """Number of columns."""
        return len(self.columns)

    def column_values(self, column: str) -> List[Any]:
        """Return the cells of one column in row order."""
        if column not in self.columns:
            raise InvalidInputError(
                f"Unknown column: '{column}'",
                operation="column_values",
                column=column
            )
        return [row[column] for row in self.rows]
