import errno
import os
from pathlib import Path

import pytest

from safetrash.services import trash as trash_service
from safetrash.services.trash import build_trash_target, move_item


def test_target_uses_base_name_when_free(tmp_path: Path) -> None:
    trash_dir = tmp_path / ".Trash"
    trash_dir.mkdir()
    assert build_trash_target(str(trash_dir), "/work/a.txt") == str(trash_dir / "a.txt")


def test_target_appends_timestamp_then_counter(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    trash_dir = tmp_path / ".Trash"
    trash_dir.mkdir()
    monkeypatch.setattr(trash_service.time, "time", lambda: 1700000000.5)
    (trash_dir / "a.txt").write_text("old")

    assert build_trash_target(str(trash_dir), "/work/a.txt") == str(
        trash_dir / "a.txt-1700000000500"
    )

    (trash_dir / "a.txt-1700000000500").write_text("older")
    (trash_dir / "a.txt-1700000000500-1").write_text("oldest")
    assert build_trash_target(str(trash_dir), "/work/a.txt") == str(
        trash_dir / "a.txt-1700000000500-2"
    )


def test_target_for_directory_with_trailing_separator(tmp_path: Path) -> None:
    trash_dir = tmp_path / ".Trash"
    trash_dir.mkdir()
    assert build_trash_target(str(trash_dir), "/work/build/") == str(trash_dir / "build")


def _cross_device_rename(source: str, target: str) -> None:
    raise OSError(errno.EXDEV, "Invalid cross-device link", source)


def test_cross_device_file_is_copied_then_removed(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    source = tmp_path / "a.txt"
    source.write_text("payload")
    target = tmp_path / "trash" / "a.txt"
    target.parent.mkdir()
    monkeypatch.setattr(trash_service.os, "rename", _cross_device_rename)

    move_item(str(source), str(target))

    assert not source.exists()
    assert target.read_text() == "payload"


def test_cross_device_directory_is_copied_recursively(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    source = tmp_path / "project"
    (source / "nested").mkdir(parents=True)
    (source / "nested" / "file.txt").write_text("deep")
    os.symlink("nested/file.txt", source / "link")
    target = tmp_path / "trash" / "project"
    target.parent.mkdir()
    monkeypatch.setattr(trash_service.os, "rename", _cross_device_rename)

    move_item(str(source), str(target))

    assert not source.exists()
    assert (target / "nested" / "file.txt").read_text() == "deep"
    assert os.path.islink(target / "link")
    assert os.readlink(target / "link") == "nested/file.txt"


def test_other_rename_errors_propagate(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    source = tmp_path / "a.txt"
    source.write_text("payload")

    def deny(src: str, dst: str) -> None:
        raise PermissionError(errno.EACCES, "Permission denied", src)

    monkeypatch.setattr(trash_service.os, "rename", deny)

    with pytest.raises(PermissionError):
        move_item(str(source), str(tmp_path / "elsewhere"))
    assert source.exists()
