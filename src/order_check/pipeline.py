"""Read -> normalize -> validate -> report, for one file or a directory.

Failure policy: a file that cannot be read or parsed is reported and the run
continues with the next file. The overall result is failed if any file
failed to load or produced an error-severity issue.
"""

from __future__ import annotations
import enum
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, TextIO

from .errors import InputPathError, ParseError
from .normalize import normalize_order
from .records import Order, order_from_json, order_to_dict
from .report import render_report
from .validate import Issue, has_errors, validate_order


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Config:
    input: Path
    format: str = "json"
    show_normalized: bool = False


class FileStatus(enum.Enum):
    OK = "ok"
    READ_ERROR = "read_error"
    PARSE_ERROR = "parse_error"


@dataclass(frozen=True)
class FileResult:
    path: Path
    status: FileStatus
    order: Optional[Order] = None
    issues: list[Issue] = field(default_factory=list)
    message: str = ""

    @property
    def failed(self) -> bool:
        return self.status is not FileStatus.OK or has_errors(self.issues)


def resolve_inputs(path: Path) -> list[Path]:
    """Expand the input path into the files to check, in processing order.

    Raises:
        InputPathError: missing path, empty directory, or not a file/dir.
    """
    if not path.exists():
        raise InputPathError(f"input path does not exist: {path}")
    if path.is_file():
        return [path]
    if path.is_dir():
        files = sorted(p for p in path.glob("*.json") if p.is_file())
        if not files:
            raise InputPathError(f"no *.json files found in directory: {path}")
        logger.debug("resolved %d file(s) in %s", len(files), path)
        return files
    raise InputPathError(f"input path is neither a file nor a directory: {path}")


def check_file(path: Path) -> FileResult:
    """Load, normalize and validate one order file."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as ex:
        return FileResult(path, FileStatus.READ_ERROR, message=f"failed to read '{path}': {ex}")

    try:
        raw = order_from_json(text)
    except ParseError as ex:
        return FileResult(path, FileStatus.PARSE_ERROR, message=f"{ex} in '{path}'")

    order = normalize_order(raw)
    return FileResult(path, FileStatus.OK, order=order, issues=validate_order(order))


def _emit(result: FileResult, config: Config, out: TextIO, err: TextIO) -> None:
    if result.status is not FileStatus.OK:
        err.write(f"error: {result.message}\n")
        return
    if config.show_normalized:
        out.write(json.dumps(order_to_dict(result.order), indent=2) + "\n")
    out.write(render_report(result.issues))


def run(config: Config, out: TextIO, err: TextIO) -> int:
    """Check every input named by `config` and return the exit status."""
    # Input is always read as JSON; the format value is informational only.
    logger.debug("format=%s", config.format)

    try:
        paths = resolve_inputs(config.input)
    except InputPathError as ex:
        err.write(f"error: {ex}\n")
        return 1

    directory_mode = config.input.is_dir()
    failed = False
    for path in paths:
        result = check_file(path)
        logger.debug("%s: %s, %d issue(s)", path, result.status.value, len(result.issues))
        if directory_mode:
            out.write(f"==> {path} <==\n")
        _emit(result, config, out, err)
        failed = failed or result.failed

    return 1 if failed else 0
