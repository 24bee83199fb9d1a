from collections.abc import Iterable
from logging import INFO, basicConfig, getLogger
from sys import exit

from cyclopts import App
from rich.logging import RichHandler

from ..models import DefineName, DefineValue

app = App(help="Compile Inno Setup scripts with ISCC.")
app.register_install_completion_command()


def parse_defines(defines: Iterable[str] | None) -> dict[DefineName, DefineValue]:
    """Parse `NAME` and `NAME=VALUE` command line defines.

    Args:
        defines: Defines as given on the command line.

    Raises:
        InvalidDefineError: Raised if a define has an empty name.

    Returns:
        Mapping from define names to their value, True for valueless defines.
    """
    from ..exceptions import InvalidDefineError

    parsed: dict[DefineName, DefineValue] = {}
    for define in defines or ():
        name, separator, value = define.partition("=")
        if not name:
            msg = f"invalid define {define!r}, expected NAME or NAME=VALUE"
            raise InvalidDefineError(msg)
        parsed[DefineName(name)] = value if separator else True
    return parsed


def main() -> None:
    basicConfig(
        level=INFO,
        format="%(message)s",
        datefmt="%H:%M:%S",
        handlers=[RichHandler(rich_tracebacks=True, tracebacks_show_locals=False)],
    )
    from ..exceptions import InnoSetupError
    from ..utils import import_module_and_submodules

    import_module_and_submodules(__name__)
    try:
        app()
    except InnoSetupError as e:
        getLogger(__name__).critical(str(e))
        exit(1)
