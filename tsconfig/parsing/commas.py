from __future__ import annotations

from .comments import WHITESPACE, is_escaped


def strip_dangling_commas(text: str) -> str:
    """Replace a comma dangling before } or ] with a single space.

    The input must already be free of comments. Only the last comma before a
    closer is rewritten, so ``[1,2,,]`` becomes ``[1,2, ]``.
    """
    out: list[str] = []
    offset = 0
    in_string = False
    dangling: int | None = None

    for i, ch in enumerate(text):
        if ch == '"' and not is_escaped(text, i):
            in_string = not in_string

        if in_string:
            dangling = None
            continue

        if ch == ",":
            dangling = i
            continue

        if dangling is not None:
            if ch in "}]":
                out.append(text[offset:dangling])
                out.append(" ")
                offset = dangling + 1
                dangling = None
            elif ch not in WHITESPACE:
                dangling = None

    out.append(text[offset:])
    return "".join(out)
