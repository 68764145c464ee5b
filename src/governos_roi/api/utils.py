import math
from typing import Any


def sanitize_for_json(obj: Any) -> Any:
    """
    Recursively replace NaN and Infinity float values with None.

    The engine returns non-finite numbers on degenerate input (zero FTEs,
    zero spend); strict JSON has no representation for them.
    """
    if isinstance(obj, float):
        if math.isnan(obj) or math.isinf(obj):
            return None
        return obj
    elif isinstance(obj, dict):
        return {k: sanitize_for_json(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [sanitize_for_json(item) for item in obj]
    elif isinstance(obj, tuple):
        return tuple(sanitize_for_json(item) for item in obj)
    return obj
