"""Runtime settings for caesar-cipher.

The tool reads no environment variables and no configuration files; the
settings below are fixed defaults that callers (mostly tests) may
override by passing their own :class:`Settings` to the CLI driver.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_MAX_FILENAME_LENGTH: int = 19
"""Longest accepted input/output path, in characters."""


@dataclass(frozen=True, slots=True)
class Settings:
    """Immutable settings shared by the argument parser and the driver."""

    program_name: str = "caesar-cipher"
    """Name shown in usage, version and error output."""

    max_filename_length: int = DEFAULT_MAX_FILENAME_LENGTH
    """Paths longer than this are rejected as invalid filenames."""

    def __post_init__(self) -> None:
        if self.max_filename_length < 1:
            raise ValueError("max_filename_length must be positive")


DEFAULT_SETTINGS: Settings = Settings()
