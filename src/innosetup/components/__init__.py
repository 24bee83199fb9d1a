"""Building blocks of a compilation, composed by [`compile`][innosetup.compiling].

- [`resolving`][innosetup.components.resolving] finds the ISCC executable
- [`arguments`][innosetup.components.arguments] turns options into ISCC arguments
- [`running`][innosetup.components.running] spawns ISCC and captures its output
"""
