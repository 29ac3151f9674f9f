from __future__ import annotations

import logging
import os
from pathlib import Path

from .errors import ConfigNotFoundError
from .runtime import StatRequest, Steps, is_directory, is_file, run_async, run_sync

logger = logging.getLogger("tsconfig")

CONFIG_FILENAME = "tsconfig.json"


def _absolute(*parts: str | os.PathLike[str]) -> Path:
    # Lexical normalisation only; symlinks are left as given.
    return Path(os.path.abspath(os.path.join(*parts)))


def find_steps(directory: str | os.PathLike[str], *, config_filename: str = CONFIG_FILENAME) -> Steps[Path | None]:
    current = _absolute(directory)
    while True:
        config_file = current / config_filename
        stats = yield StatRequest(config_file)
        if is_file(stats):
            logger.debug("find: found %s", config_file)
            return config_file

        logger.debug("find: no %s in %s", config_filename, current)
        parent = current.parent
        if parent == current:
            return None
        current = parent


def resolve_steps(
    cwd: str | os.PathLike[str],
    filename: str | os.PathLike[str] | None = None,
    *,
    config_filename: str = CONFIG_FILENAME,
) -> Steps[Path | None]:
    if not filename:
        return (yield from find_steps(cwd, config_filename=config_filename))

    full_path = _absolute(cwd, filename)
    stats = yield StatRequest(full_path)

    if is_file(stats):
        logger.debug("resolve: %s -> %s", filename, full_path)
        return full_path

    if is_directory(stats):
        config_file = full_path / config_filename
        stats = yield StatRequest(config_file)
        if is_file(stats):
            logger.debug("resolve: %s -> %s", filename, config_file)
            return config_file

        raise ConfigNotFoundError(
            f"Cannot find a {config_filename} file at the specified directory: {filename}",
            str(filename),
        )

    raise ConfigNotFoundError(f"The specified path does not exist: {filename}", str(filename))


def find(directory: str | os.PathLike[str], *, config_filename: str = CONFIG_FILENAME) -> Path | None:
    """Search ``directory`` and its parents for the configuration file."""
    return run_sync(find_steps(directory, config_filename=config_filename))


async def find_async(directory: str | os.PathLike[str], *, config_filename: str = CONFIG_FILENAME) -> Path | None:
    return await run_async(find_steps(directory, config_filename=config_filename))


def resolve(
    cwd: str | os.PathLike[str],
    filename: str | os.PathLike[str] | None = None,
    *,
    config_filename: str = CONFIG_FILENAME,
) -> Path | None:
    """Resolve a configuration file the way ``tsc -p`` does.

    Without ``filename`` the search walks up from ``cwd`` and returns None when
    nothing is found. An explicit ``filename`` may name a file or a directory
    holding the configuration file; anything else raises ConfigNotFoundError.
    """
    return run_sync(resolve_steps(cwd, filename, config_filename=config_filename))


async def resolve_async(
    cwd: str | os.PathLike[str],
    filename: str | os.PathLike[str] | None = None,
    *,
    config_filename: str = CONFIG_FILENAME,
) -> Path | None:
    return await run_async(resolve_steps(cwd, filename, config_filename=config_filename))
