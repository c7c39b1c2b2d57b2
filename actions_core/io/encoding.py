"""
JSON encoding shared by both wire formats.

Output is compact, omits null map entries, keeps non-ASCII text as-is and
escapes the characters that are unsafe to embed in HTML, matching what
fulfillment clients of the Actions on Google libraries receive from the
Java and Node implementations.
"""

import json
from typing import Any

from pydantic import BaseModel


_HTML_SAFE = {
    ord("<"): "\\u003c",
    ord(">"): "\\u003e",
    ord("&"): "\\u0026",
    ord("="): "\\u003d",
    ord("'"): "\\u0027",
    0x2028: "\\u2028",
    0x2029: "\\u2029",
}


def _drop_nulls(value: Any) -> Any:
    """Remove None-valued map entries at every depth; list items are kept."""
    if isinstance(value, BaseModel):
        value = value.model_dump(by_alias=True, exclude_none=True, mode="json")
    if isinstance(value, dict):
        return {k: _drop_nulls(v) for k, v in value.items() if v is not None}
    if isinstance(value, (list, tuple)):
        return [_drop_nulls(item) for item in value]
    return value


def _default(value: Any) -> Any:
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_json(value: Any) -> str:
    """Encode a value as a compact JSON document.

    Pydantic models are dumped with their wire aliases and map entries whose
    value is None are left out. The escaped characters can only occur inside
    JSON strings, so translating the encoded text is equivalent to escaping
    each string.
    """
    encoded = json.dumps(
        _drop_nulls(value),
        separators=(",", ":"),
        ensure_ascii=False,
        default=_default,
    )
    return encoded.translate(_HTML_SAFE)
