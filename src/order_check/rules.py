"""Rule definitions.

A rule transforms one field of an Order.

Rules stay data-driven and small:
- only a handful of operations
- no dynamic imports
- no eval
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Callable, Iterable, Optional

from .errors import RuleError
from .records import FIELDS, Order


Transform = Callable[[Order], Order]

_ASCII_UPPER = str.maketrans("abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ")


@dataclass(frozen=True)
class Rule:
    """A single normalization rule applied to `field`."""
    name: str
    op: str
    field: str


def _strip(value: str) -> str:
    return value.strip()


def _upper(value: str) -> str:
    # ASCII only; str.upper() would also fold e.g. "ß" to "SS"
    return value.translate(_ASCII_UPPER)


def _blank_to_none(value: str) -> Optional[str]:
    return value if value.strip() else None


_OPS: dict[str, Callable[[str], Optional[str]]] = {
    "strip": _strip,
    "upper": _upper,
    "blank_to_none": _blank_to_none,
}


def compile_rule(rule: Rule) -> Transform:
    """Compile a Rule into a callable transform.

    Supported ops:
    - "strip": trim leading/trailing whitespace
    - "upper": ASCII uppercase
    - "blank_to_none": empty or whitespace-only becomes absent

    Absent fields are passed through untouched by every op.
    """
    op = rule.op.strip()
    fn = _OPS.get(op)
    if fn is None:
        raise RuleError(f"unknown op: {rule.op!r}")
    if rule.field not in FIELDS:
        raise RuleError(f"unknown field: {rule.field!r}")

    def xform(o: Order) -> Order:
        value = getattr(o, rule.field)
        if value is None:
            return o
        return replace(o, **{rule.field: fn(value)})

    return xform


def compile_rules(rules: Iterable[Rule]) -> list[Transform]:
    """Compile many rules into transforms."""
    return [compile_rule(r) for r in rules]


ORDER_RULES: tuple[Rule, ...] = (
    *(Rule(name=f"strip_{f}", op="strip", field=f) for f in FIELDS),
    Rule(name="upper_part_number", op="upper", field="part_number"),
    *(Rule(name=f"blank_{f}", op="blank_to_none", field=f) for f in FIELDS),
)
