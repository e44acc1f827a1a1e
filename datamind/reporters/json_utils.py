"""
JSON serialization utilities for analysis reports.

Handles numpy types so report dictionaries can always be dumped.
"""

import json
import math
from enum import Enum
from typing import Any

import numpy as np


class NumpyJSONEncoder(json.JSONEncoder):
    """
    JSON encoder that handles numpy scalars and arrays.

    Converts:
    - numpy int types → Python int
    - numpy float types → Python float (NaN/inf → null)
    - numpy bool → Python bool
    - numpy arrays → Python lists
    - Enums → their value
    """

    def default(self, obj: Any) -> Any:
        if isinstance(obj, np.integer):
            return int(obj)

        if isinstance(obj, np.floating):
            if np.isnan(obj) or np.isinf(obj):
                return None
            return float(obj)

        if isinstance(obj, np.bool_):
            return bool(obj)

        if isinstance(obj, np.ndarray):
            return obj.tolist()

        if isinstance(obj, Enum):
            return obj.value

        return super().default(obj)


def convert_to_json_serializable(obj: Any) -> Any:
    """
    Recursively convert object to JSON-serializable types.

    Handles nested dicts, lists and tuples. NaN and infinity, whether numpy
    or built-in floats, become None.

    Args:
        obj: Object to convert

    Returns:
        JSON-serializable version of object
    """
    if obj is None:
        return None

    if isinstance(obj, np.bool_):
        return bool(obj)

    if isinstance(obj, np.integer):
        return int(obj)

    # np.float64 subclasses float, so both are checked here
    if isinstance(obj, (float, np.floating)):
        value = float(obj)
        return value if math.isfinite(value) else None

    if isinstance(obj, np.ndarray):
        return [convert_to_json_serializable(item) for item in obj.tolist()]

    if isinstance(obj, Enum):
        return obj.value

    if isinstance(obj, dict):
        return {
            key: convert_to_json_serializable(value)
            for key, value in obj.items()
        }

    if isinstance(obj, (list, tuple)):
        return [convert_to_json_serializable(item) for item in obj]

    return obj


def safe_json_dumps(obj: Any, **kwargs) -> str:
    """
    Serialize to JSON after converting numpy values and non-finite floats.

    The output is always strict JSON (no NaN or Infinity literals).
    """
    kwargs.setdefault("cls", NumpyJSONEncoder)
    kwargs.setdefault("allow_nan", False)
    return json.dumps(convert_to_json_serializable(obj), **kwargs)
