# Filename: helper_probe.py
# Author: Rich Lewis @RichLewis007
# Description: Discovery of an installed trash helper (trash-put / trash). The answer is
#              probed once and cached for the process, with reset and override hooks.

from __future__ import annotations

import logging
from enum import Enum
from typing import Final

from .config import HELPER_PROBE_FLAG, TrashSettings
from .process import AsyncioProcessRunner, ProcessRunner

logger = logging.getLogger(__name__)

# Some helpers exit 1 for a bare --help.
_ACCEPTED_PROBE_STATUSES: Final[frozenset[int]] = frozenset({0, 1})


class _Unknown(Enum):
    UNKNOWN = "unknown"


UNKNOWN: Final = _Unknown.UNKNOWN


class HelperProbe:
    """Cached helper availability.

    ``state`` starts as ``UNKNOWN`` and moves once to either the command that
    answered the probe or ``None`` when no candidate did. It is never
    re-checked afterwards; use :meth:`reset` or :meth:`override` to change it.
    Concurrent first calls may both probe; they cache the same answer.
    """

    def __init__(self) -> None:
        self._state: str | None | _Unknown = UNKNOWN

    @property
    def state(self) -> str | None | _Unknown:
        return self._state

    def reset(self) -> None:
        self._state = UNKNOWN

    def override(self, command: str | None) -> None:
        # Pin the helper to command (or to "not found" with None) without probing.
        self._state = command

    async def find(
        self,
        settings: TrashSettings | None = None,
        runner: ProcessRunner | None = None,
    ) -> str | None:
        # Return the cached helper command, probing candidates on first use. Never raises.
        if self._state is not UNKNOWN:
            return self._state

        settings = settings if settings is not None else TrashSettings.from_environ()
        runner = runner if runner is not None else AsyncioProcessRunner()

        for candidate in settings.helper_candidates():
            if await _probe_candidate(runner, candidate):
                logger.debug("Trash helper found: %s", candidate)
                self._state = candidate
                return candidate

        logger.debug("No trash helper found; using the Trash directory directly.")
        self._state = None
        return None


async def _probe_candidate(runner: ProcessRunner, candidate: str) -> bool:
    # Return True when candidate spawns and exits with an accepted status.
    try:
        result = await runner.run([candidate, HELPER_PROBE_FLAG], capture_stderr=False)
    except Exception as exc:  # noqa: BLE001 - probing must never fail the batch
        logger.debug("Probe of %s failed: %s", candidate, exc)
        return False
    logger.debug("Probe of %s exited with status %d", candidate, result.returncode)
    return result.returncode in _ACCEPTED_PROBE_STATUSES


default_probe = HelperProbe()


async def find_helper(
    settings: TrashSettings | None = None,
    runner: ProcessRunner | None = None,
) -> str | None:
    # Process-wide helper lookup backed by default_probe.
    return await default_probe.find(settings, runner)
