# Filename: formatting.py
# Author: Rich Lewis @RichLewis007
# Description: Formatting helpers for user-facing trash messages. Turns exceptions and
#              batch outcomes into the plain text lines shims print.

from __future__ import annotations

from typing import Final

from ..models.outcome import MoveOutcome

_MISSING_PREFIX: Final[str] = "Missing: "


def format_trash_error(error: object) -> str:
    """Return the human-readable reason carried by an exception.

    ``OSError`` instances render their ``strerror`` (e.g. "Permission denied")
    so messages stay short; anything else uses its message, falling back to the
    class name when the message is empty.
    """
    if isinstance(error, OSError) and error.strerror:
        return error.strerror
    if isinstance(error, BaseException):
        return str(error) or type(error).__name__
    return str(error)


def format_outcome(outcome: MoveOutcome) -> list[str]:
    # Return one line per missing path followed by one line per error.
    lines = [f"{_MISSING_PREFIX}{raw}" for raw in outcome.missing]
    lines.extend(outcome.errors)
    return lines


__all__ = ["format_outcome", "format_trash_error"]
