from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .commas import strip_dangling_commas
from .comments import WHITESPACE, is_escaped, strip_comments

logger = logging.getLogger("tsconfig")

_BOM = "\ufeff"


def strip_bom(text: str) -> str:
    if text.startswith(_BOM):
        return text[len(_BOM) :]
    return text


def sanitize(contents: str) -> str:
    """Turn relaxed tsconfig text into strict JSON text."""
    return strip_dangling_commas(strip_comments(strip_bom(contents)))


def _constant_pos(data: str, name: str) -> int:
    in_string = False
    for i, ch in enumerate(data):
        if ch == '"' and not is_escaped(data, i):
            in_string = not in_string
        elif not in_string and data.startswith(name, i):
            return i
    return 0


def _loads(data: str) -> Any:
    # json accepts NaN and Infinity; strict JSON does not.
    def reject_constant(name: str) -> Any:
        raise json.JSONDecodeError(f"Invalid constant {name!r}", data, _constant_pos(data, name))

    return json.loads(data, parse_constant=reject_constant)


def parse(contents: str, filename: str | Path | None = None) -> Any:
    data = sanitize(contents)

    # A tsconfig.json file is permitted to be completely empty.
    if all(ch in WHITESPACE for ch in data):
        logger.debug("parse: %s is blank, using empty object", filename or "<string>")
        return {}

    logger.debug("parse: %s (%d chars)", filename or "<string>", len(data))
    return _loads(data)
