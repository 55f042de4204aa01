"""Logging switches, warnings and the error type raised by the analysis code."""

from __future__ import annotations

import sys
from typing import NoReturn


class CrabError(RuntimeError):
    """Raised when an analysis operation cannot continue."""


class _Settings:
    __slots__ = ("log_flag", "log_tags", "warnings")

    def __init__(self) -> None:
        self.log_flag = False
        self.log_tags: set[str] = set()
        self.warnings = False


_settings = _Settings()


def _render(args: tuple[object, ...]) -> str:
    return "".join(str(arg) for arg in args)


def enable_warnings(value: bool) -> None:
    """Turn warning messages on or off."""
    _settings.warnings = bool(value)


def enable_log(tag: str) -> None:
    """Turn on logging for the given tag."""
    _settings.log_flag = True
    _settings.log_tags.add(tag)


def log_enabled(tag: str) -> bool:
    """Return True if logging is on for the given tag."""
    return _settings.log_flag and tag in _settings.log_tags


def warn(*args: object) -> None:
    """Write a warning to standard error when warnings are enabled."""
    if _settings.warnings:
        print("CRAB WARNING: " + _render(args), file=sys.stderr)


def error(*args: object) -> NoReturn:
    """Raise a CrabError whose message is the concatenation of the arguments."""
    raise CrabError("CRAB ERROR: " + _render(args) + "\n")