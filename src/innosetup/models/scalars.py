"""Model aliases and NewTypes to disambiguate multi-usage types."""

from collections.abc import Callable
from typing import NewType

DefineName = NewType("DefineName", str)
"""Derived from str to represent the name of an ISCC `/D` define."""

DefineValue = str | int | float | bool | None
"""Value of a define.

`False` drops the define, `True` and `None` turn it into a valueless flag and any \
other value is stringified.
"""

OutputSink = Callable[[str], None]
"""Callback receiving decoded output text chunks as soon as they arrive."""
