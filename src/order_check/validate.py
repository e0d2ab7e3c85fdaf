"""Required-field validation for orders."""

from __future__ import annotations
import enum
from dataclasses import dataclass
from typing import Iterable

from .records import FIELDS, Order


MISSING = "missing required field"
EMPTY = "must not be empty"


class Severity(enum.Enum):
    ERROR = "error"
    # Counted by the report but not produced by any check yet.
    WARNING = "warning"


@dataclass(frozen=True)
class Issue:
    field: str
    severity: Severity
    message: str


def validate_order(o: Order) -> list[Issue]:
    """Check event_id, part_number and timestamp, in that order.

    The blank check only fires for orders that did not go through
    normalize_order, which already turns blanks into absent fields.
    """
    issues: list[Issue] = []
    for name in FIELDS:
        value = getattr(o, name)
        if value is None:
            issues.append(Issue(name, Severity.ERROR, MISSING))
        elif not value.strip():
            issues.append(Issue(name, Severity.ERROR, EMPTY))
    return issues


def has_errors(issues: Iterable[Issue]) -> bool:
    return any(i.severity is Severity.ERROR for i in issues)
