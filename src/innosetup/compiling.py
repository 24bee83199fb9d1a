"""Compile Inno Setup scripts with ISCC."""

from asyncio import run as asyncio_run
from codecs import lookup as codecs_lookup
from logging import getLogger
from pathlib import Path

from .components.arguments import build_arguments
from .components.resolving import resolve_compiler_path
from .components.running import run_compiler
from .exceptions import ScriptNotFoundError
from .models import CompilerOptions, CompilerResult

_logger = getLogger(__name__)


async def compile(options: CompilerOptions) -> CompilerResult:  # noqa: A001
    """Compile an Inno Setup script (`.iss`) with the Inno Setup Compiler.

    The script and the compiler are checked before anything is spawned. These checks \
    raise whatever the value of `options.no_throw`, since they denote a usage error \
    rather than a failed compilation.

    Args:
        options: Options of the compilation.

    Raises:
        LookupError: Raised if `options.encoding` is not a known codec.
        ScriptNotFoundError: Raised if the script does not exist.
        CompilerNotFoundError: Raised if no compiler executable could be found.
        InnoSetupCompilerError: Raised if the compiler could not start or exited \
            with a non-zero code, unless `options.no_throw` is True.

    Returns:
        Result of the compilation.
    """
    codecs_lookup(options.encoding)
    script_path = Path(options.script_path).resolve()
    if not script_path.exists():
        msg = f"Inno Setup script not found: {script_path}"
        raise ScriptNotFoundError(msg)

    compiler_path = resolve_compiler_path(options.compiler_path)
    args = build_arguments(options)

    if options.output_dir:
        Path(options.output_dir).resolve().mkdir(parents=True, exist_ok=True)

    _logger.debug("Running %s %s", compiler_path, " ".join(args))
    return await run_compiler(
        compiler_path,
        args,
        options.no_throw,
        options.on_stdout,
        options.on_stderr,
        options.encoding,
    )


def compile_sync(options: CompilerOptions) -> CompilerResult:
    """Run [`compile`][innosetup.compiling.compile] to completion in a new event loop.

    Args:
        options: Options of the compilation.

    Returns:
        Result of the compilation.
    """
    return asyncio_run(compile(options))
