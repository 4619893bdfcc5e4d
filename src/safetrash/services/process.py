# Filename: process.py
# Author: Rich Lewis @RichLewis007
# Description: Process runner abstraction used to spawn trash helpers. Returns the exit
#              status plus captured stderr so tests can swap in a fake runner.

from __future__ import annotations

import asyncio
import contextlib
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol


@dataclass(slots=True, frozen=True)
class ProcessResult:
    # Exit status and decoded stderr of a finished process.

    returncode: int
    stderr: str = ""


class ProcessRunner(Protocol):
    # Spawns a command, discards stdout, and optionally captures stderr.

    async def run(self, argv: Sequence[str], *, capture_stderr: bool = True) -> ProcessResult:
        """Run ``argv`` to completion.

        Raises ``OSError`` (usually ``FileNotFoundError``) when the program
        cannot be spawned.
        """
        ...


class AsyncioProcessRunner:
    # Default runner backed by asyncio subprocesses.

    async def run(self, argv: Sequence[str], *, capture_stderr: bool = True) -> ProcessResult:
        proc = await asyncio.create_subprocess_exec(
            *argv,
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.DEVNULL,
            stderr=asyncio.subprocess.PIPE if capture_stderr else asyncio.subprocess.DEVNULL,
        )
        try:
            _, stderr = await proc.communicate()
        except asyncio.CancelledError:
            # A caller timeout must not leave the helper running.
            if proc.returncode is None:
                with contextlib.suppress(ProcessLookupError):
                    proc.kill()
                await proc.wait()
            raise
        text = stderr.decode("utf-8", errors="replace") if stderr else ""
        return ProcessResult(returncode=proc.returncode or 0, stderr=text)
