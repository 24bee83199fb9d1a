from collections.abc import Iterator, Mapping
from pathlib import Path

from ..models import CompilerOptions, DefineName, DefineValue

QUIET_FLAG = "/Q"
OUTPUT_DIR_FLAG = "/O"
OUTPUT_BASE_NAME_FLAG = "/F"
DEFINE_FLAG = "/D"


def build_arguments(options: CompilerOptions) -> list[str]:
    """Translate compilation options into the ordered ISCC command line.

    Flags and their values are concatenated into single tokens (`/Odir`, `/Fname`, \
    `/Dname=value`). Nothing is quoted: the arguments are meant to be handed to the \
    process as a list, never through a shell. The script path is always last.

    Args:
        options: Options of the compilation.

    Returns:
        Arguments to pass to ISCC, without the executable itself.
    """
    args = []
    if options.quiet:
        args.append(QUIET_FLAG)
    if options.output_dir:
        args.append(f"{OUTPUT_DIR_FLAG}{Path(options.output_dir).resolve()}")
    if options.output_base_name:
        args.append(f"{OUTPUT_BASE_NAME_FLAG}{options.output_base_name}")
    args.extend(_define_arguments(options.defines))
    args.extend(options.extra_args)
    args.append(str(Path(options.script_path).resolve()))
    return args


def _define_arguments(defines: Mapping[DefineName, DefineValue]) -> Iterator[str]:
    for name, value in defines.items():
        # Not defined at all
        if value is False:
            continue
        if value is True or value is None:
            yield f"{DEFINE_FLAG}{name}"
        else:
            yield f"{DEFINE_FLAG}{name}={value}"
