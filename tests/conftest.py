from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pytest

from safetrash.services.config import TrashSettings
from safetrash.services.helper_probe import HelperProbe
from safetrash.services.process import ProcessResult


class FakeRunner:
    """Records invocations and answers from a table keyed by program name.

    Programs missing from the table raise ``FileNotFoundError`` like a real
    spawn of a non-existent binary.
    """

    def __init__(self, results: dict[str, ProcessResult | BaseException] | None = None) -> None:
        self.results = dict(results or {})
        self.calls: list[tuple[list[str], bool]] = []

    async def run(self, argv: Sequence[str], *, capture_stderr: bool = True) -> ProcessResult:
        self.calls.append((list(argv), capture_stderr))
        outcome = self.results.get(argv[0])
        if outcome is None:
            raise FileNotFoundError(2, "No such file or directory", argv[0])
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome

    def programs(self) -> list[str]:
        return [argv[0] for argv, _ in self.calls]


@pytest.fixture(name="runner")
def fixture_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture(name="probe")
def fixture_probe() -> HelperProbe:
    return HelperProbe()


@pytest.fixture(name="workspace")
def fixture_workspace(tmp_path: Path) -> Path:
    work = tmp_path / "work"
    work.mkdir()
    return work


@pytest.fixture(name="home")
def fixture_home(tmp_path: Path) -> Path:
    home = tmp_path / "home"
    (home / ".Trash").mkdir(parents=True)
    return home


@pytest.fixture(name="settings")
def fixture_settings(home: Path, tmp_path: Path) -> TrashSettings:
    return TrashSettings(
        home=str(home),
        path_dirs=(str(tmp_path / "bin"),),
        homebrew_prefix=str(tmp_path / "brew"),
    )
