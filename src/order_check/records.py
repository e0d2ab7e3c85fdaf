"""Order record decoding.

An order document is a JSON object with three optional string keys:
    {"event_id": "...", "part_number": "...", "timestamp": "..."}

Unknown keys are ignored, missing keys and nulls map to absent (None).
"""

from __future__ import annotations
import json
from dataclasses import dataclass
from typing import Optional

from .errors import ParseError


FIELDS = ("event_id", "part_number", "timestamp")


@dataclass(frozen=True)
class Order:
    event_id: Optional[str] = None
    part_number: Optional[str] = None
    timestamp: Optional[str] = None


def order_from_json(text: str) -> Order:
    """Parse one JSON document into an Order.

    Raises:
        ParseError: if the text is not JSON, not an object, or a known
            field holds something other than a string or null.
    """
    try:
        doc = json.loads(text)
    except (ValueError, RecursionError) as ex:
        raise ParseError(f"invalid JSON: {ex}") from ex

    if not isinstance(doc, dict):
        raise ParseError(f"expected a JSON object, got {type(doc).__name__}")

    values = {}
    for name in FIELDS:
        value = doc.get(name)
        if value is not None and not isinstance(value, str):
            raise ParseError(f"field {name!r} must be a string, got {type(value).__name__}")
        values[name] = value

    return Order(**values)


def order_to_dict(order: Order) -> dict[str, Optional[str]]:
    """Render an Order as a plain dict in field order."""
    return {name: getattr(order, name) for name in FIELDS}
