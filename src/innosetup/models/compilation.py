from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from .scalars import DefineName, DefineValue, OutputSink


@dataclass(frozen=True)
class CompilerOptions:
    script_path: Path
    compiler_path: Path | None = None
    defines: Mapping[DefineName, DefineValue] = field(default_factory=dict)
    output_dir: Path | None = None
    output_base_name: str | None = None
    quiet: bool = False
    extra_args: Sequence[str] = ()
    no_throw: bool = False
    on_stdout: OutputSink | None = None
    on_stderr: OutputSink | None = None
    encoding: str = "utf-8"


@dataclass(frozen=True)
class CompilerResult:
    command: Path
    args: tuple[str, ...]
    exit_code: int | None
    stdout: str = ""
    stderr: str = ""

    @property
    def success(self) -> bool:
        return self.exit_code == 0
