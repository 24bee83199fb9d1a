import asyncio
import subprocess
import sys
from asyncio.subprocess import DEVNULL, PIPE
from codecs import getincrementaldecoder
from collections.abc import MutableSequence, Sequence
from contextlib import suppress
from logging import getLogger
from pathlib import Path

from ..exceptions import InnoSetupCompilerError
from ..models import CompilerResult, OutputSink

_CHUNK_SIZE = 64 * 1024
_logger = getLogger(__name__)

if sys.platform == "win32":
    _CREATION_FLAGS = subprocess.CREATE_NO_WINDOW
else:
    _CREATION_FLAGS = 0


async def run_compiler(
    command: Path,
    args: Sequence[str],
    no_throw: bool,
    on_stdout: OutputSink | None = None,
    on_stderr: OutputSink | None = None,
    encoding: str = "utf-8",
) -> CompilerResult:
    """Spawn the Inno Setup compiler and capture its output.

    The process is started without a shell and with its standard input disconnected. \
    Both output streams are read concurrently. Each decoded chunk is accumulated and \
    forwarded to the matching sink as soon as it arrives.

    If the awaiting task is cancelled, the compiler process is killed before the \
    cancellation propagates.

    Args:
        command: Absolute path to the `ISCC.exe` executable to run.
        args: Arguments to pass to the compiler.
        no_throw: If True, always return the result, even when the compiler could \
            not start or exited with a non-zero code.
        on_stdout: Called with every chunk of standard output.
        on_stderr: Called with every chunk of standard error.
        encoding: Encoding used to decode both streams. Undecodable bytes are \
            replaced.

    Raises:
        InnoSetupCompilerError: Raised if `no_throw` is False and the compiler could \
            not start or exited with a non-zero code.

    Returns:
        Result of the compilation.
    """
    stdout: list[str] = []
    stderr: list[str] = []
    try:
        process = await asyncio.create_subprocess_exec(
            command,
            *args,
            stdin=DEVNULL,
            stdout=PIPE,
            stderr=PIPE,
            creationflags=_CREATION_FLAGS,
        )
    except OSError as e:
        _logger.warning("Could not start %s: %s", command, e)
        result = CompilerResult(
            command=command,
            args=tuple(args),
            exit_code=None,
            stdout="".join(stdout),
            stderr="".join(stderr) or str(e),
        )
        if no_throw:
            return result
        msg = "Failed to start Inno Setup compiler."
        raise InnoSetupCompilerError(msg, result) from e

    try:
        async with asyncio.TaskGroup() as group:
            group.create_task(_pump(process.stdout, stdout, on_stdout, encoding))
            group.create_task(_pump(process.stderr, stderr, on_stderr, encoding))
        exit_code = await process.wait()
    except ExceptionGroup as e:
        # Unwrap the error raised by a sink
        if len(e.exceptions) == 1:
            raise e.exceptions[0] from e
        raise
    finally:
        if process.returncode is None:
            _logger.debug("Killing %s (pid %d)", command, process.pid)
            with suppress(ProcessLookupError):
                process.kill()
            await process.wait()

    _logger.debug("%s exited with code %d", command, exit_code)
    result = CompilerResult(
        command=command,
        args=tuple(args),
        exit_code=exit_code,
        stdout="".join(stdout),
        stderr="".join(stderr),
    )
    if result.success or no_throw:
        return result
    msg = f"Inno Setup compiler exited with code {exit_code}"
    raise InnoSetupCompilerError(msg, result)


async def _pump(
    stream: asyncio.StreamReader | None,
    chunks: MutableSequence[str],
    sink: OutputSink | None,
    encoding: str,
) -> None:
    if stream is None:
        return
    decoder = getincrementaldecoder(encoding)(errors="replace")
    while data := await stream.read(_CHUNK_SIZE):
        _emit(decoder.decode(data), chunks, sink)
    _emit(decoder.decode(b"", final=True), chunks, sink)


def _emit(text: str, chunks: MutableSequence[str], sink: OutputSink | None) -> None:
    if not text:
        return
    chunks.append(text)
    if sink is not None:
        sink(text)
