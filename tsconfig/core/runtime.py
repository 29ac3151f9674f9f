from __future__ import annotations

import asyncio
import os
from dataclasses import dataclass
from pathlib import Path
from stat import S_ISDIR, S_ISFIFO, S_ISREG
from typing import Any, Generator, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class StatRequest:
    path: Path

    def perform(self) -> os.stat_result | None:
        try:
            return os.stat(self.path)
        except (OSError, ValueError):
            return None


@dataclass(frozen=True, slots=True)
class ReadRequest:
    path: Path

    def perform(self) -> str:
        # newline="" keeps \r and \r\n as written so comment ends and offsets match the file.
        with open(self.path, encoding="utf-8", newline="") as f:
            return f.read()


IORequest = Union[StatRequest, ReadRequest]

# A step yields I/O requests, receives each result and returns its value.
Steps = Generator[IORequest, Any, T]


@dataclass(slots=True)
class LoadResult:
    path: Path | None
    config: Any


def default_config() -> dict[str, Any]:
    return {"files": [], "compilerOptions": {}}


def is_file(stats: os.stat_result | None) -> bool:
    if stats is None:
        return False
    return S_ISREG(stats.st_mode) or S_ISFIFO(stats.st_mode)


def is_directory(stats: os.stat_result | None) -> bool:
    return stats is not None and S_ISDIR(stats.st_mode)


def run_sync(steps: Steps[T]) -> T:
    """Drive a step generator, performing its I/O on the calling thread."""
    result: Any = None
    while True:
        try:
            request = steps.send(result)
        except StopIteration as stop:
            return stop.value
        result = request.perform()


async def run_async(steps: Steps[T]) -> T:
    """Drive a step generator, awaiting its I/O in the default executor."""
    loop = asyncio.get_running_loop()
    result: Any = None
    while True:
        try:
            request = steps.send(result)
        except StopIteration as stop:
            return stop.value
        result = await loop.run_in_executor(None, request.perform)
