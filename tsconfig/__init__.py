from .core import (
    CONFIG_FILENAME,
    ConfigNotFoundError,
    LoadResult,
    TsconfigError,
    find,
    find_async,
    load,
    load_async,
    read_file,
    read_file_async,
    resolve,
    resolve_async,
)
from .parsing import parse, strip_comments, strip_dangling_commas

__all__ = [
    "CONFIG_FILENAME",
    "ConfigNotFoundError",
    "LoadResult",
    "TsconfigError",
    "find",
    "find_async",
    "load",
    "load_async",
    "parse",
    "read_file",
    "read_file_async",
    "resolve",
    "resolve_async",
    "strip_comments",
    "strip_dangling_commas",
]
