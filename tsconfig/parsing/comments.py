from __future__ import annotations

# Characters matched by \s in ECMAScript regular expressions.
WHITESPACE = frozenset(
    "\t\n\v\f\r \u00a0\u1680\u2028\u2029\u202f\u205f\u3000\ufeff"
    + "".join(chr(c) for c in range(0x2000, 0x200B))
)


def is_escaped(text: str, quote_pos: int) -> bool:
    """True when the quote at quote_pos follows an odd run of backslashes."""
    index = quote_pos - 1
    backslashes = 0
    while index >= 0 and text[index] == "\\":
        backslashes += 1
        index -= 1
    return backslashes % 2 == 1


def _blank(text: str) -> str:
    return "".join(ch if ch in WHITESPACE else " " for ch in text)


def strip_comments(text: str) -> str:
    """Blank out // and /* */ comments while preserving string literals.

    Comment characters become spaces and line breaks are kept, so line and
    column numbers reported by the JSON parser still match the source.
    """
    out: list[str] = []
    offset = 0
    i = 0
    in_string = False
    in_line_comment = False
    in_block_comment = False

    while i < len(text):
        ch = text[i]
        nxt = text[i + 1] if i + 1 < len(text) else ""

        if not in_line_comment and not in_block_comment and ch == '"':
            if not is_escaped(text, i):
                in_string = not in_string

        if in_string:
            i += 1
            continue

        if not in_line_comment and not in_block_comment and ch == "/" and nxt == "/":
            out.append(text[offset:i])
            offset = i
            in_line_comment = True
            i += 2
            continue

        if in_line_comment and (ch == "\n" or (ch == "\r" and nxt == "\n")):
            out.append(_blank(text[offset:i]))
            offset = i
            in_line_comment = False
            i += 1
            continue

        if not in_line_comment and not in_block_comment and ch == "/" and nxt == "*":
            out.append(text[offset:i])
            offset = i
            in_block_comment = True
            i += 2
            continue

        if in_block_comment and ch == "*" and nxt == "/":
            out.append(_blank(text[offset : i + 2]))
            offset = i + 2
            in_block_comment = False
            i += 2
            continue

        i += 1

    tail = text[offset:]
    if in_line_comment or in_block_comment:
        tail = _blank(tail)
    out.append(tail)
    return "".join(out)
