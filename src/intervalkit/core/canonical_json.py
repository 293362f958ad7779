"""
Canonical JSON Serialization

Provides deterministic JSON serialization with sorted keys and
SHA-256 hashing for interval fingerprints.

Non-finite floats are not valid JSON, so bounds are encoded as the
strings "inf", "-inf" and "nan" before serialization.
"""

import json
import hashlib
import math
from typing import Any, Union


def encode_float(value: float) -> Union[float, str]:
    """Encode a float as a strict-JSON value."""
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return float(value)


def decode_float(value: Union[float, int, str]) -> float:
    """
    Inverse of encode_float.

    Raises:
        ValueError: If value is not a number or one of the encoded strings
    """
    if isinstance(value, str):
        if value not in ("inf", "-inf", "nan"):
            raise ValueError(f"Invalid encoded float: {value!r}")
        return float(value)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Invalid encoded float: {value!r}")
    return float(value)


def to_canonical(obj: Any) -> Any:
    """
    Reduce obj to strict-JSON data.

    Objects with a to_canonical() method (intervals) are replaced by its
    result, floats go through encode_float, and dicts, lists and tuples
    are converted element-wise.
    """
    if hasattr(obj, "to_canonical"):
        return obj.to_canonical()
    if isinstance(obj, float):
        return encode_float(obj)
    if isinstance(obj, dict):
        return {str(k): to_canonical(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [to_canonical(v) for v in obj]
    return obj


def canonical_dumps(obj: Any, indent: int = None) -> str:
    """
    Serialize intervals, or containers of intervals and floats, to JSON.

    Keys are sorted so equal inputs always give the same string. Infinite
    bounds appear as the strings "inf" and "-inf".
    """
    return json.dumps(
        to_canonical(obj),
        sort_keys=True,
        separators=(',', ':') if indent is None else None,
        indent=indent,
        allow_nan=False,
    )


def canonical_hash(obj: Any) -> str:
    """SHA-256 hex digest of canonical_dumps(obj); used for interval fingerprints."""
    return hashlib.sha256(canonical_dumps(obj).encode()).hexdigest()
