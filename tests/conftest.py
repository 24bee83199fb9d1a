import sys
from pathlib import Path
from textwrap import dedent

from pytest import fixture


_FAKE_COMPILER = dedent(
    """\
    import json
    import os
    import signal
    import sys
    import time
    from pathlib import Path

    args = sys.argv[1:]
    defines = dict(
        arg[2:].partition("=")[::2] for arg in args if arg.startswith("/D")
    )
    print(json.dumps(args), flush=True)
    print("Inno Setup 6 Command-Line Compiler", flush=True)
    if "STDERR" in defines:
        print(defines["STDERR"], file=sys.stderr, flush=True)
    if "KILL" in defines:
        os.kill(os.getpid(), signal.SIGKILL)
    if "SLEEP" in defines:
        time.sleep(float(defines["SLEEP"]))
    output_dir = next((arg[2:] for arg in args if arg.startswith("/O")), None)
    if output_dir is not None:
        base_name = next(
            (arg[2:] for arg in args if arg.startswith("/F")), Path(args[-1]).stem
        )
        (Path(output_dir) / f"{base_name}.exe").write_text("setup")
    sys.exit(int(defines.get("EXIT") or 0))
    """
)


@fixture
def fake_compiler(tmp_path: Path) -> Path:
    """Fake ISCC printing its arguments as JSON on the first line of stdout.

    Its behavior is driven by defines: `/DEXIT=<code>` sets the exit code, \
    `/DSTDERR=<text>` writes to stderr, `/DSLEEP=<seconds>` delays the exit and \
    `/DKILL` makes it kill itself.
    """
    path = tmp_path / "bin" / "ISCC"
    path.parent.mkdir()
    path.write_text(f"#!{sys.executable}\n{_FAKE_COMPILER}", encoding="utf8")
    path.chmod(0o755)
    return path


@fixture
def script(tmp_path: Path) -> Path:
    path = tmp_path / "project" / "setup.iss"
    path.parent.mkdir()
    path.write_text(
        "[Setup]\nAppName=Example\nAppVersion=1.0\nDefaultDirName={pf}\\Example\n",
        encoding="utf8",
    )
    return path
