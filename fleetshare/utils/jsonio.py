from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .fs import write_json_atomic


def read_json_list_of_dicts(path: str | Path) -> list[dict[str, Any]]:
    """Load a JSON array of objects; a missing or blank file is an empty list.

    Anything else that is not an array of objects raises ``ValueError`` so a
    caller never rewrites a file it could not fully read.
    """

    try:
        with open(path, encoding="utf-8") as f:
            text = f.read()
    except FileNotFoundError:
        return []
    if not text.strip():
        return []
    loaded = json.loads(text)
    if not isinstance(loaded, list) or not all(isinstance(x, dict) for x in loaded):
        raise ValueError(f"{path} does not hold a JSON array of objects")
    return loaded


def write_json_list(path: str | Path, data: list[dict[str, Any]]) -> None:
    write_json_atomic(path, data)
