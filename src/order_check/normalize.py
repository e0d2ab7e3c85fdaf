"""Normalization of order records.

Every field is trimmed, the part number is uppercased, and values that are
blank after trimming collapse to absent. The result is a new Order; the
input is never mutated.
"""

from __future__ import annotations
from typing import Sequence

from .records import Order
from .rules import ORDER_RULES, Transform, compile_rules


_TRANSFORMS = compile_rules(ORDER_RULES)


def apply_transforms(o: Order, transforms: Sequence[Transform]) -> Order:
    """Apply transforms in order."""
    cur = o
    for t in transforms:
        cur = t(cur)
    return cur


def normalize_order(o: Order) -> Order:
    """Normalize one order with the built-in ruleset."""
    return apply_transforms(o, _TRANSFORMS)
