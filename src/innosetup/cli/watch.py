from pathlib import Path

from . import app, parse_defines


@app.command()
def watch(
    script: Path,
    /,
    *,
    define: list[str] | None = None,
    output_dir: Path | None = None,
    output_base_name: str | None = None,
    quiet: bool | None = None,
    compiler_path: Path | None = None,
    extra_arg: list[str] | None = None,
    workdir: Path = Path(),
) -> None:
    """Compile SCRIPT on change of any file in its directory.

    Args:
        script: Inno Setup script to compile
        define: Define passed to ISCC as NAME or NAME=VALUE, can be repeated
        output_dir: Directory where ISCC writes the setup, created if missing
        output_base_name: Base name of the setup file
        quiet: Only print error messages, overrides the settings when given
        compiler_path: ISCC executable to use instead of the bundled one
        extra_arg: Raw argument passed to ISCC before the script, can be repeated
        workdir: Directory the settings are read from and relative paths are \
            resolved against

    """
    from logging import getLogger

    from ..configuring.settings import Settings
    from ..pipelines import watch_script

    logger = getLogger(__name__)

    logger.info("Watching the directory of %s", script)
    watch_script(
        settings=Settings.from_yaml(workdir),
        script_path=workdir / script,
        defines=parse_defines(define),
        compiler_path=workdir / compiler_path if compiler_path else None,
        output_dir=workdir / output_dir if output_dir else None,
        output_base_name=output_base_name,
        quiet=quiet,
        extra_args=extra_arg,
    )
