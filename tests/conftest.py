import json
import sys
from pathlib import Path

import pytest

# Ensure `import order_check` works when running `pytest` from a plain checkout.
SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
sys.path.insert(0, str(SRC_ROOT))


@pytest.fixture
def write_order(tmp_path):
    def _write(name: str, payload, *, directory: Path | None = None) -> Path:
        target = (directory or tmp_path) / name
        text = payload if isinstance(payload, str) else json.dumps(payload)
        target.write_text(text, encoding="utf-8")
        return target

    return _write
