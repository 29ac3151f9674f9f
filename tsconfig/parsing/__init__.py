from .commas import strip_dangling_commas
from .comments import strip_comments
from .parser import parse, sanitize, strip_bom

__all__ = [
    "parse",
    "sanitize",
    "strip_bom",
    "strip_comments",
    "strip_dangling_commas",
]
