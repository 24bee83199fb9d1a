import sys
from pathlib import Path
from typing import Any

from pytest import LogCaptureFixture, MonkeyPatch, mark

from innosetup import pipelines
from innosetup.configuring.settings import Settings
from innosetup.models import CompilerOptions


def _fake_watch(calls: list[tuple[Path, ...]], changes: int) -> Any:
    def watchfiles_watch(*paths: Path, **_kwargs: Any) -> Any:
        calls.append(paths)
        for _ in range(changes):
            yield {("modified", str(paths[0]))}

    return watchfiles_watch


def test_watch_rebuilds_on_changes(tmp_path: Path, monkeypatch: MonkeyPatch) -> None:
    (tmp_path / "include").mkdir()
    (tmp_path / "Output").mkdir()
    watched: list[tuple[Path, ...]] = []
    monkeypatch.setattr(pipelines, "watchfiles_watch", _fake_watch(watched, 2))
    builds: list[str] = []

    pipelines.watch(
        frozenset([tmp_path]), frozenset([tmp_path / "Output"]), builds.append, "x"
    )

    assert builds == ["x", "x", "x"]
    assert set(watched[0]) == {tmp_path.resolve(), (tmp_path / "include").resolve()}


def test_watch_survives_failed_builds(
    tmp_path: Path, monkeypatch: MonkeyPatch, caplog: LogCaptureFixture
) -> None:
    monkeypatch.setattr(pipelines, "watchfiles_watch", _fake_watch([], 1))
    attempts: list[int] = []

    def build() -> None:
        attempts.append(len(attempts))
        msg = f"build {len(attempts)} failed"
        raise RuntimeError(msg)

    pipelines.watch(frozenset([tmp_path]), frozenset(), build)

    assert attempts == [0, 1]
    assert "build 1 failed" in caplog.text
    assert "build 2 failed" in caplog.text


def test_watch_script_ignores_outputs(
    tmp_path: Path, script: Path, monkeypatch: MonkeyPatch
) -> None:
    received: dict[str, Any] = {}

    def watch(watch: Any, avoid: Any, function: Any, *args: Any) -> None:
        received.update(watch=watch, avoid=avoid, function=function, args=args)

    monkeypatch.setattr(pipelines, "watch", watch)

    pipelines.watch_script(
        Settings(quiet=True),
        script,
        defines={"AppVersion": "1.0"},
        output_dir=tmp_path / "dist",
    )

    assert received["watch"] == {script.parent.resolve()}
    assert received["avoid"] == {(tmp_path / "dist").resolve()}
    assert (tmp_path / "dist").is_dir()
    assert not (script.parent / "Output").exists()
    assert received["function"] is pipelines.compile_sync
    (options,) = received["args"]
    assert isinstance(options, CompilerOptions)
    assert options.quiet
    assert options.defines == {"AppVersion": "1.0"}


def test_watch_script_creates_default_output(
    script: Path, monkeypatch: MonkeyPatch
) -> None:
    received: dict[str, Any] = {}

    def watch(watch: Any, avoid: Any, function: Any, *args: Any) -> None:
        received.update(avoid=avoid)

    monkeypatch.setattr(pipelines, "watch", watch)

    pipelines.watch_script(Settings(), script)

    assert received["avoid"] == {script.parent.resolve() / "Output"}
    assert (script.parent / "Output").is_dir()


@mark.skipif(sys.platform == "win32", reason="the fake compiler relies on a shebang")
def test_run(fake_compiler: Path, script: Path) -> None:
    result = pipelines.run(
        Settings(compiler_path=fake_compiler),
        script,
        defines={"Portable": True},
        extra_args=["/V9"],
    )

    assert result.success
    assert result.args == ("/DPortable", "/V9", str(script.resolve()))
