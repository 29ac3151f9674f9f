from .errors import ConfigNotFoundError, TsconfigError
from .loader import load, load_async, read_file, read_file_async
from .resolver import CONFIG_FILENAME, find, find_async, resolve, resolve_async
from .runtime import LoadResult

__all__ = [
    "CONFIG_FILENAME",
    "ConfigNotFoundError",
    "LoadResult",
    "TsconfigError",
    "find",
    "find_async",
    "load",
    "load_async",
    "read_file",
    "read_file_async",
    "resolve",
    "resolve_async",
]
