# Filename: trash.py
# Author: Rich Lewis @RichLewis007
# Description: Utilities for safely moving files to the Trash instead of deleting them.
#              Delegates to an installed trash helper when one exists and otherwise
#              renames into ~/.Trash, copying across devices when a rename cannot.

from __future__ import annotations

import errno
import logging
import os
import shutil
import time
from collections.abc import Sequence

from ..models.outcome import MoveOptions, MoveOutcome
from ..models.paths import ResolvedPath, build_refused_set, find_refused
from .config import TrashSettings
from .formatting import format_trash_error
from .helper_probe import HelperProbe, default_probe
from .process import AsyncioProcessRunner, ProcessRunner

logger = logging.getLogger(__name__)

TRASH_DIR_MISSING_ERROR = "Unable to locate Trash directory (HOME/.Trash)."


async def move_paths_to_trash(
    paths: Sequence[str],
    base_dir: str,
    options: MoveOptions | None = None,
    *,
    settings: TrashSettings | None = None,
    runner: ProcessRunner | None = None,
    probe: HelperProbe | None = None,
) -> MoveOutcome:
    """Move ``paths`` (relative to ``base_dir``) into the Trash.

    The batch is refused as a whole, with nothing moved, when any input names
    the filesystem root, ``base_dir`` itself, or one of ``options.refuse_paths``.
    Otherwise every existing path is attempted and failures are collected in
    the returned outcome rather than raised.
    """
    options = options if options is not None else MoveOptions()
    settings = settings if settings is not None else TrashSettings.from_environ()
    runner = runner if runner is not None else AsyncioProcessRunner()
    probe = probe if probe is not None else default_probe

    resolved = [ResolvedPath.from_raw(base_dir, raw) for raw in paths]
    refused = find_refused(resolved, build_refused_set(base_dir, options.refuse_paths))
    if refused is not None:
        logger.warning("Refusing batch containing protected path %s", refused.raw)
        return MoveOutcome.refused(refused.raw)

    existing, missing = classify_paths(resolved, allow_missing=options.allow_missing)
    if not existing:
        return MoveOutcome(missing=missing)

    helper = await probe.find(settings, runner)
    if helper is not None:
        logger.info("Trashing %d path(s) with %s", len(existing), helper)
        errors = await _move_with_helper(helper, existing, runner)
    else:
        logger.info("Trashing %d path(s) into the Trash directory", len(existing))
        errors = _move_to_trash_dir(existing, settings)

    return MoveOutcome(missing=missing, errors=errors)


def classify_paths(
    resolved: Sequence[ResolvedPath], *, allow_missing: bool
) -> tuple[list[ResolvedPath], list[str]]:
    # Split inputs into items to move and raw strings reported missing.
    existing: list[ResolvedPath] = []
    missing: list[str] = []
    for item in resolved:
        if os.path.lexists(item.absolute):
            existing.append(item)
        elif not allow_missing:
            missing.append(item.raw)
    return existing, missing


async def _move_with_helper(
    helper: str, items: Sequence[ResolvedPath], runner: ProcessRunner
) -> list[str]:
    # One helper invocation for the whole batch; failures are never retried directly.
    argv = [helper, *(item.absolute for item in items)]
    try:
        result = await runner.run(argv, capture_stderr=True)
    except Exception as exc:  # noqa: BLE001 - surfaced to the caller as text
        logger.warning("Trash helper %s could not be run: %s", helper, exc)
        return [format_trash_error(exc)]

    if result.returncode == 0:
        return []

    message = result.stderr.strip()
    if not message:
        message = f"Trash helper {helper} exited with status {result.returncode}"
    logger.warning("Trash helper failed: %s", message)
    return [message]


def _move_to_trash_dir(items: Sequence[ResolvedPath], settings: TrashSettings) -> list[str]:
    trash_dir = settings.trash_dir
    if trash_dir is None or not os.path.isdir(trash_dir):
        logger.warning("Trash directory unavailable: %s", trash_dir)
        return [TRASH_DIR_MISSING_ERROR]

    errors: list[str] = []
    for item in items:
        try:
            target = build_trash_target(trash_dir, item.absolute)
            move_item(item.absolute, target)
            logger.debug("Moved %s to %s", item.absolute, target)
        except OSError as exc:
            logger.warning("Failed to move %s to Trash: %s", item.raw, exc)
            errors.append(f"Failed to move {item.raw} to Trash: {format_trash_error(exc)}")
    return errors


def build_trash_target(trash_dir: str, absolute_path: str) -> str:
    """Return a free destination inside ``trash_dir`` for ``absolute_path``.

    Uses the base name when free, then ``<name>-<millis>``, then
    ``<name>-<millis>-1``, ``-2`` and so on.
    """
    base_name = os.path.basename(absolute_path.rstrip(os.sep)) or absolute_path
    timestamp = int(time.time() * 1000)
    candidate = os.path.join(trash_dir, base_name)
    attempt = 0
    while os.path.lexists(candidate):
        suffix = f"-{attempt}" if attempt > 0 else ""
        candidate = os.path.join(trash_dir, f"{base_name}-{timestamp}{suffix}")
        attempt += 1
    return candidate


def move_item(source: str, target: str) -> None:
    # Rename source to target, copying then removing when they sit on different devices.
    try:
        os.rename(source, target)
    except OSError as exc:
        if exc.errno != errno.EXDEV:
            raise
        logger.debug("Cross-device move of %s; copying instead", source)
        _copy_path(source, target)
        _remove_path(source)


def _copy_path(source: str, target: str) -> None:
    if os.path.isdir(source) and not os.path.islink(source):
        shutil.copytree(source, target, symlinks=True)
    else:
        shutil.copy2(source, target, follow_symlinks=False)


def _remove_path(path: str) -> None:
    if os.path.isdir(path) and not os.path.islink(path):
        shutil.rmtree(path)
    elif os.path.lexists(path):
        os.unlink(path)
