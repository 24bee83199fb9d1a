from pathlib import Path

from pytest import MonkeyPatch, raises

from innosetup.components import resolving
from innosetup.components.resolving import resolve_compiler_path
from innosetup.exceptions import CompilerNotFoundError, InnoSetupError


def test_explicit_path(tmp_path: Path, monkeypatch: MonkeyPatch) -> None:
    compiler = tmp_path / "ISCC.exe"
    compiler.touch()
    monkeypatch.chdir(tmp_path)

    assert resolve_compiler_path(Path("ISCC.exe")) == compiler.resolve()


def test_explicit_path_missing(tmp_path: Path) -> None:
    with raises(CompilerNotFoundError, match="Provided ISCC.exe not found"):
        resolve_compiler_path(tmp_path / "missing" / "ISCC.exe")


def test_explicit_path_wins_over_bundled(
    tmp_path: Path, monkeypatch: MonkeyPatch
) -> None:
    bundled = tmp_path / "bundled" / "ISCC.exe"
    bundled.parent.mkdir()
    bundled.touch()
    explicit = tmp_path / "ISCC.exe"
    explicit.touch()
    monkeypatch.setattr(resolving, "BUNDLED_COMPILER", bundled)

    assert resolve_compiler_path(explicit) == explicit.resolve()


def test_bundled(tmp_path: Path, monkeypatch: MonkeyPatch) -> None:
    bundled = tmp_path / "ISCC.exe"
    bundled.touch()
    monkeypatch.setattr(resolving, "BUNDLED_COMPILER", bundled)

    assert resolve_compiler_path() == bundled


def test_bundled_missing(tmp_path: Path, monkeypatch: MonkeyPatch) -> None:
    monkeypatch.setattr(resolving, "BUNDLED_COMPILER", tmp_path / "ISCC.exe")

    with raises(CompilerNotFoundError, match="pass a compiler path") as excinfo:
        resolve_compiler_path()
    assert isinstance(excinfo.value, InnoSetupError)
    assert isinstance(excinfo.value, FileNotFoundError)


def test_bundled_location() -> None:
    assert resolving.BUNDLED_COMPILER.parts[-3:] == ("innosetup", "bin", "ISCC.exe")
