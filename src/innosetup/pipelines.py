from collections.abc import Callable, Set
from logging import getLogger
from pathlib import Path
from typing import Any, ParamSpec

from watchfiles import watch as watchfiles_watch

from .compiling import compile_sync
from .configuring.settings import Settings
from .models import CompilerOptions, CompilerResult, DefineName, DefineValue

_logger = getLogger(__name__)

P = ParamSpec("P")


def _write_stdout(text: str) -> None:
    from sys import stdout

    stdout.write(text)
    stdout.flush()


def _write_stderr(text: str) -> None:
    from sys import stderr

    stderr.write(text)
    stderr.flush()


def _options(
    settings: Settings,
    script_path: Path,
    defines: dict[DefineName, DefineValue] | None,
    compiler_path: Path | None,
    output_dir: Path | None,
    output_base_name: str | None,
    quiet: bool | None,
    extra_args: list[str] | None,
) -> CompilerOptions:
    return settings.to_options(
        script_path,
        defines=defines,
        compiler_path=compiler_path,
        output_dir=output_dir,
        output_base_name=output_base_name,
        quiet=quiet,
        extra_args=extra_args or (),
        on_stdout=_write_stdout,
        on_stderr=_write_stderr,
    )


def run(
    settings: Settings,
    script_path: Path,
    defines: dict[DefineName, DefineValue] | None = None,
    compiler_path: Path | None = None,
    output_dir: Path | None = None,
    output_base_name: str | None = None,
    quiet: bool | None = None,
    extra_args: list[str] | None = None,
) -> CompilerResult:
    options = _options(
        settings,
        script_path,
        defines,
        compiler_path,
        output_dir,
        output_base_name,
        quiet,
        extra_args,
    )
    result = compile_sync(options)
    _logger.info("Compiled %s", options.script_path)
    return result


def watch_script(
    settings: Settings,
    script_path: Path,
    defines: dict[DefineName, DefineValue] | None = None,
    compiler_path: Path | None = None,
    output_dir: Path | None = None,
    output_base_name: str | None = None,
    quiet: bool | None = None,
    extra_args: list[str] | None = None,
) -> None:
    options = _options(
        settings,
        script_path,
        defines,
        compiler_path,
        output_dir,
        output_base_name,
        quiet,
        extra_args,
    )
    script_dir = Path(options.script_path).resolve().parent
    # ISCC writes to the "Output" directory next to the script by default
    output_dir = (
        Path(options.output_dir).resolve()
        if options.output_dir
        else script_dir / "Output"
    )
    # Must exist before the watch starts, or creating it triggers a rebuild
    output_dir.mkdir(parents=True, exist_ok=True)
    watch(
        frozenset([script_dir]),
        frozenset([output_dir]),
        compile_sync,
        options,
    )


def watch(
    watch: Set[Path],
    avoid: Set[Path],
    function: Callable[P, Any],
    *function_args: P.args,
    **function_kwargs: P.kwargs,
) -> None:
    dirs_to_avoid = {d.resolve() for d in avoid} | {
        p.resolve() for dir_to_avoid in avoid for p in dir_to_avoid.glob("**")
    }

    dirs_to_watch = {d.resolve() for d in watch} | {
        r_to_watch
        for dir_to_watch in watch
        for p in dir_to_watch.glob("**")
        if (r_to_watch := p.resolve()) not in dirs_to_avoid
    }
    _logger.info("Initial build")
    try:
        function(*function_args, **function_kwargs)
        _logger.info("Initial build finished")
    except Exception as e:
        _logger.exception(str(e))

    for _ in watchfiles_watch(*dirs_to_watch, raise_interrupt=False, recursive=False):
        _logger.info("Detected changes, starting a new build")
        try:
            function(*function_args, **function_kwargs)
            _logger.info("Build finished")
        except Exception as e:
            _logger.exception(str(e))
