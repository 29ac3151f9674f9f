from __future__ import annotations


class TsconfigError(Exception):
    """Base class for errors raised while locating a configuration file."""


class ConfigNotFoundError(TsconfigError, FileNotFoundError):
    """An explicit path did not lead to a usable configuration file."""

    def __init__(self, message: str, filename: str) -> None:
        super().__init__(message)
        self.filename = filename

    def __str__(self) -> str:
        return str(self.args[0])
