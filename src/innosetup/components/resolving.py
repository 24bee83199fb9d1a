from pathlib import Path

from ..exceptions import CompilerNotFoundError

BUNDLED_COMPILER = Path(__file__).resolve().parent.parent / "bin" / "ISCC.exe"


def resolve_compiler_path(explicit: Path | None = None) -> Path:
    """Resolve the absolute path to the Inno Setup Compiler (`ISCC.exe`).

    Args:
        explicit: Optional absolute or relative path to the executable. Takes \
            precedence over the bundled compiler when given.

    Raises:
        CompilerNotFoundError: Raised if the explicit path does not exist, or if no \
            explicit path is given and the bundled compiler is missing.

    Returns:
        Absolute path to the executable.
    """
    if explicit is not None:
        normalized_path = Path(explicit).resolve()
        if not normalized_path.exists():
            msg = f"Provided ISCC.exe not found: {normalized_path}"
            raise CompilerNotFoundError(msg)
        return normalized_path

    if BUNDLED_COMPILER.exists():
        return BUNDLED_COMPILER

    msg = (
        f"Bundled ISCC.exe not found at {BUNDLED_COMPILER}. "
        "Download Inno Setup and pass a compiler path instead"
    )
    raise CompilerNotFoundError(msg)
