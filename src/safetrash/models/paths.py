# Filename: paths.py
# Author: Rich Lewis @RichLewis007
# Description: Lexical path resolution and the protected-path guard. Nothing here touches
#              the filesystem; comparisons are on normalized strings only.

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

ROOT_PATH = os.sep


def resolve_path(base_dir: str, raw_path: str) -> str:
    # Absolute inputs pass through untouched; relative ones are joined to base_dir.
    if raw_path.startswith(ROOT_PATH):
        return raw_path
    return canonical_path(os.path.join(os.path.abspath(base_dir), raw_path))


def canonical_path(path: str) -> str:
    # Lexical normal form used for protection checks (symlinks are not followed).
    normalized = os.path.normpath(path)
    # normpath keeps a leading "//" on POSIX; it names the same directory as "/".
    if normalized.startswith(ROOT_PATH):
        return ROOT_PATH + normalized.lstrip(ROOT_PATH)
    return normalized


@dataclass(slots=True, frozen=True)
class ResolvedPath:
    # A caller-supplied path paired with its absolute form.

    raw: str
    absolute: str

    @classmethod
    def from_raw(cls, base_dir: str, raw_path: str) -> ResolvedPath:
        return cls(raw=raw_path, absolute=resolve_path(base_dir, raw_path))

    @property
    def canonical(self) -> str:
        return canonical_path(self.absolute)


def build_refused_set(base_dir: str, refuse_paths: Iterable[str] = ()) -> frozenset[str]:
    """Return the canonical paths a batch may never touch.

    Always contains the filesystem root and the base directory itself. Extra
    entries are resolved against ``base_dir`` the same way inputs are, so an
    absolute entry stays absolute.
    """
    base_canonical = canonical_path(os.path.abspath(base_dir))
    refused = {canonical_path(ROOT_PATH), base_canonical}
    refused.update(
        canonical_path(os.path.join(base_canonical, extra)) for extra in refuse_paths
    )
    return frozenset(refused)


def find_refused(
    resolved: Sequence[ResolvedPath], refused: frozenset[str]
) -> ResolvedPath | None:
    # Return the first input whose canonical form is protected (exact match only).
    for item in resolved:
        if item.canonical in refused:
            return item
    return None
