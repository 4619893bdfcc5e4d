# Filename: outcome.py
# Author: Rich Lewis @RichLewis007
# Description: Request options and aggregated results for a trash batch. Missing paths and
#              failures are collected across the whole batch instead of raising.

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field


@dataclass(slots=True, frozen=True)
class MoveOptions:
    # Caller options for a batch.

    allow_missing: bool = False
    refuse_paths: Sequence[str] = ()

    def __post_init__(self) -> None:
        # A bare string would be iterated character by character.
        if isinstance(self.refuse_paths, str):
            raise TypeError("refuse_paths must be a sequence of paths, not a string")
        object.__setattr__(self, "refuse_paths", tuple(self.refuse_paths))


@dataclass(slots=True)
class MoveOutcome:
    # Summary of a trash request, split into missing inputs and failure messages.

    missing: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        # True when nothing was missing and nothing failed.
        return not self.missing and not self.errors

    @classmethod
    def refused(cls, raw_path: str) -> MoveOutcome:
        # Whole-batch refusal: one error, nothing reported missing.
        return cls(missing=[], errors=[f"Refusing to trash protected path: {raw_path}"])
