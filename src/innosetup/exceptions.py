from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import CompilerResult


class InnoSetupError(Exception):
    pass


class ScriptNotFoundError(InnoSetupError, FileNotFoundError):
    pass


class CompilerNotFoundError(InnoSetupError, FileNotFoundError):
    pass


class InvalidDefineError(InnoSetupError, ValueError):
    pass


class InnoSetupCompilerError(InnoSetupError):
    """Raised when the compiler could not start or exited with a non-zero code.

    The complete result of the run is attached so that the captured output is never \
    lost when the error path is taken.
    """

    def __init__(self, message: str, result: "CompilerResult") -> None:
        super().__init__(message)
        self.result = result
