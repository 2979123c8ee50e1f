from __future__ import annotations

import json
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
for entry in (ROOT, ROOT / "src"):
    if str(entry) not in sys.path:
        sys.path.insert(0, str(entry))


import pytest

from annorder.validator import OrderValidator


@pytest.fixture
def validator() -> OrderValidator:
    return OrderValidator()


@pytest.fixture
def write_records():
    def _write(path: Path, records: list[object]) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            "".join(
                (entry if isinstance(entry, str) else json.dumps(entry)) + "\n"
                for entry in records
            ),
            encoding="utf-8",
        )
        return path

    return _write
