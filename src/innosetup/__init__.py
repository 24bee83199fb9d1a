from typing import Any

__version__ = "0.1.0"

app_name = "innosetup"


def __getattr__(name: str) -> Any:
    """Lazy-load the public API of the innosetup package.

    The CLI entry point (the main function of the innosetup.cli.__init__ file) has to \
    setup logging before any other module is loaded. Loading innosetup.cli.__init__ \
    entails loading innosetup.__init__ first, so the public API cannot be imported \
    eagerly here.

    Args:
        name: Name of the attribute to load.

    Raises:
        AttributeError: Raised if the name doesn't match a lazy-loadable attribute.

    Returns:
        Lazy-loaded attribute.
    """
    match name:
        case "compile" | "compile_sync":
            from . import compiling

            return getattr(compiling, name)
        case "CompilerOptions" | "CompilerResult":
            from . import models

            return getattr(models, name)
        case (
            "InnoSetupError"
            | "InnoSetupCompilerError"
            | "ScriptNotFoundError"
            | "CompilerNotFoundError"
        ):
            from . import exceptions

            return getattr(exceptions, name)
        case _:
            msg = f"cannot find the attribute {name} in module {__name__}"
            raise AttributeError(msg)
