"""Shared file helpers for the JSON repositories."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any


def ensure_file(file_path: Path) -> None:
    if not file_path.exists():
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text("[]", encoding="utf-8")


def read_json(file_path: Path) -> Any:
    return json.loads(file_path.read_text(encoding="utf-8"))


def write_json(file_path: Path, data: Any) -> None:
    """Write *data* so that readers see either the old or the new file."""
    tmp_path = file_path.with_name(file_path.name + ".tmp")
    tmp_path.write_text(
        json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
    )
    os.replace(tmp_path, file_path)
