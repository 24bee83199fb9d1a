"""Model classes for the data crossing the innosetup boundary.

- [`compilation`][innosetup.models.compilation] contains the options given to a \
    compilation and the result it produces
- [`scalars`][innosetup.models.scalars] contains aliases and NewTypes for \
    non-container types
"""

from .compilation import CompilerOptions, CompilerResult
from .scalars import DefineName, DefineValue, OutputSink

__all__ = [
    "CompilerOptions",
    "CompilerResult",
    "DefineName",
    "DefineValue",
    "OutputSink",
]
