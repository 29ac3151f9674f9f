from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

from tsconfig.parsing.parser import parse
from .resolver import CONFIG_FILENAME, resolve_steps
from .runtime import LoadResult, ReadRequest, Steps, default_config, run_async, run_sync

logger = logging.getLogger("tsconfig")


def read_file_steps(filename: str | os.PathLike[str]) -> Steps[Any]:
    path = Path(filename)
    contents = yield ReadRequest(path)
    return parse(contents, path)


def load_steps(
    cwd: str | os.PathLike[str],
    filename: str | os.PathLike[str] | None = None,
    *,
    config_filename: str = CONFIG_FILENAME,
) -> Steps[LoadResult]:
    path = yield from resolve_steps(cwd, filename, config_filename=config_filename)
    if path is None:
        logger.info("No %s found above %s, using defaults", config_filename, cwd)
        return LoadResult(path=None, config=default_config())

    config = yield from read_file_steps(path)
    return LoadResult(path=path, config=config)


def read_file(filename: str | os.PathLike[str]) -> Any:
    """Read a configuration file and return its parsed contents."""
    return run_sync(read_file_steps(filename))


async def read_file_async(filename: str | os.PathLike[str]) -> Any:
    return await run_async(read_file_steps(filename))


def load(
    cwd: str | os.PathLike[str],
    filename: str | os.PathLike[str] | None = None,
    *,
    config_filename: str = CONFIG_FILENAME,
) -> LoadResult:
    """Resolve and load a configuration file.

    When no ``filename`` is given and the upward search finds nothing, the
    result has no path and an empty ``files``/``compilerOptions`` config.
    """
    return run_sync(load_steps(cwd, filename, config_filename=config_filename))


async def load_async(
    cwd: str | os.PathLike[str],
    filename: str | os.PathLike[str] | None = None,
    *,
    config_filename: str = CONFIG_FILENAME,
) -> LoadResult:
    return await run_async(load_steps(cwd, filename, config_filename=config_filename))
