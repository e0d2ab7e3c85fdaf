"""Plain-text rendering of validation issues."""

from __future__ import annotations
from typing import Sequence

from .validate import Issue, Severity


HEADER = "Validation report"


def render_issue(issue: Issue) -> str:
    return f"[{issue.severity.name}] {issue.field}: {issue.message}"


def render_report(issues: Sequence[Issue]) -> str:
    """Render the report block: header, counts, then one line per issue."""
    errors = sum(1 for i in issues if i.severity is Severity.ERROR)
    lines = [
        HEADER,
        "-" * len(HEADER),
        f"errors: {errors}",
        f"total issues: {len(issues)}",
    ]
    lines.extend(render_issue(i) for i in issues)
    return "\n".join(lines) + "\n"
