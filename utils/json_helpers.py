"""
JSON serialization helpers for duct-sizer.

This module provides utilities for safe JSON serialization, particularly
handling special float values (inf, nan) that are not valid in JSON per RFC 7159,
enums and pydantic result models.
"""

import math
import json
from enum import Enum
from typing import Any

from pydantic import BaseModel


def sanitize_for_json(obj: Any) -> Any:
    """
    Recursively sanitize an object for JSON serialization.

    Replaces inf and nan float values with None, which serializes to null.
    Pydantic models are dumped with their camelCase aliases and enums are
    replaced by their values.

    Also handles numpy scalar types if numpy is available.

    Args:
        obj: Any Python object to sanitize

    Returns:
        Sanitized object safe for json.dumps

    Examples:
        >>> sanitize_for_json({'value': float('inf')})
        {'value': None}
        >>> sanitize_for_json([1.0, float('nan'), 3.0])
        [1.0, None, 3.0]
    """
    if obj is None:
        return None

    if isinstance(obj, bool):
        return obj

    if isinstance(obj, Enum):
        return sanitize_for_json(obj.value)

    if isinstance(obj, (int, str)):
        return obj

    if isinstance(obj, float):
        if math.isnan(obj) or math.isinf(obj):
            return None
        return obj

    if isinstance(obj, BaseModel):
        return sanitize_for_json(obj.model_dump(by_alias=True, mode="json"))

    # Handle numpy types if available
    try:
        import numpy as np
        if isinstance(obj, (np.integer, np.floating)):
            val = float(obj)
            if math.isnan(val) or math.isinf(val):
                return None
            return val
        if isinstance(obj, np.ndarray):
            return sanitize_for_json(obj.tolist())
    except ImportError:
        pass

    if isinstance(obj, dict):
        return {(k.value if isinstance(k, Enum) else k): sanitize_for_json(v) for k, v in obj.items()}

    if isinstance(obj, (list, tuple)):
        return [sanitize_for_json(v) for v in obj]

    # Fallback: convert to string
    return str(obj)


def safe_json_dumps(obj: Any, **kwargs) -> str:
    """
    Safely serialize an object to JSON string.

    Applies sanitization before serialization to handle inf/nan values.
    Non-ASCII characters (×, ⌀, •) are kept as-is unless the caller
    overrides ensure_ascii.

    Args:
        obj: Object to serialize
        **kwargs: Additional arguments passed to json.dumps

    Returns:
        JSON string

    Examples:
        >>> safe_json_dumps({'value': float('inf')})
        '{"value": null}'
    """
    kwargs.setdefault("ensure_ascii", False)
    sanitized = sanitize_for_json(obj)
    return json.dumps(sanitized, **kwargs)
