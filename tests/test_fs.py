from pathlib import Path

import pytest

from reduxrc.errors import SettingsNotFoundError
from reduxrc.utils.fs import file_exists, read_file


def test_file_exists_true_for_existing_file(tmp_path: Path) -> None:
    target = tmp_path / "tmp" / "example.js"
    target.parent.mkdir()
    target.write_text("path")
    assert file_exists(target) is True
    assert file_exists(str(target)) is True


def test_file_exists_false_for_missing_path() -> None:
    assert file_exists("tmp/some/random/path") is False


def test_read_file_accepts_relative_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / "tmp").mkdir()
    (tmp_path / "tmp" / "example.js").write_text("file to be read")
    monkeypatch.chdir(tmp_path)
    assert read_file("tmp/example.js") == "file to be read"


def test_read_file_missing_raises_not_found(tmp_path: Path) -> None:
    missing = tmp_path / "nope.json"
    with pytest.raises(SettingsNotFoundError) as excinfo:
        read_file(missing)
    assert excinfo.value.path == missing
    assert isinstance(excinfo.value, FileNotFoundError)
    assert isinstance(excinfo.value.original_error, OSError)


def test_read_file_directory_raises_not_found(tmp_path: Path) -> None:
    with pytest.raises(SettingsNotFoundError):
        read_file(tmp_path)
