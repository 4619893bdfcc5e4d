# Filename: config.py
# Author: Rich Lewis @RichLewis007
# Description: Configuration helpers for trash operations. Snapshots the environment
#              variables that decide where helpers are searched for and where the
#              fallback Trash directory lives.

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Final

APP_NAME = "SafeTrash"
ORG_NAME = "Rich Lewis"

HELPER_NAMES: Final[tuple[str, ...]] = ("trash-put", "trash")
HELPER_PROBE_FLAG: Final[str] = "--help"
DEFAULT_HOMEBREW_PREFIX: Final[str] = "/opt/homebrew"
FALLBACK_HELPER_DIR: Final[str] = "/usr/local/opt/trash/bin"
TRASH_DIRNAME: Final[str] = ".Trash"


@dataclass(slots=True, frozen=True)
class TrashSettings:
    # Environment values consulted by a single trash batch.

    home: str | None = None
    path_dirs: tuple[str, ...] = field(default_factory=tuple)
    homebrew_prefix: str = DEFAULT_HOMEBREW_PREFIX

    @classmethod
    def from_environ(cls, environ: Mapping[str, str] | None = None) -> TrashSettings:
        # Build settings from environ (defaults to os.environ).
        env = os.environ if environ is None else environ
        raw_path = env.get("PATH", "")
        return cls(
            home=env.get("HOME") or None,
            path_dirs=tuple(segment for segment in raw_path.split(os.pathsep) if segment),
            homebrew_prefix=env.get("HOMEBREW_PREFIX", DEFAULT_HOMEBREW_PREFIX),
        )

    @property
    def trash_dir(self) -> str | None:
        # Return the platform Trash directory path, or None without a home.
        if not self.home:
            return None
        return os.path.join(self.home, TRASH_DIRNAME)

    def helper_search_dirs(self) -> list[str]:
        # Return directories searched for a helper, in preference order, deduplicated.
        dirs = [
            *self.path_dirs,
            os.path.join(self.homebrew_prefix, "opt", "trash", "bin"),
            FALLBACK_HELPER_DIR,
        ]
        return list(dict.fromkeys(dirs))

    def helper_candidates(self) -> list[str]:
        # Return bare names and fully-qualified helper paths to probe, in order.
        candidates: list[str] = []
        for name in HELPER_NAMES:
            candidates.append(name)
            candidates.extend(os.path.join(directory, name) for directory in self.helper_search_dirs())
        return list(dict.fromkeys(candidates))
