from codecs import lookup as codecs_lookup
from collections.abc import Mapping, Sequence
from functools import reduce
from pathlib import Path
from typing import Annotated, Any, Self

from appdirs import user_config_dir as appdirs_user_config_dir
from pydantic import AfterValidator, BaseModel, Field

from .. import app_name
from ..models import CompilerOptions, DefineName, DefineValue, OutputSink
from ..utils import dirs_hierarchy, get_git_dir, load_yaml

settings_filename = f"{app_name}.yml"
_path_fields = ("compiler_path", "output_dir")


def _check_encoding(value: str) -> str:
    try:
        codecs_lookup(value)
    except LookupError as e:
        msg = f"unknown encoding {value!r}"
        raise ValueError(msg) from e
    return value


_Path = Annotated[Path, AfterValidator(Path.resolve)]
_Encoding = Annotated[str, AfterValidator(_check_encoding)]
_user_config_dir = Path(appdirs_user_config_dir(app_name)).resolve()


def _anchor_paths(content: dict[str, Any] | None, directory: Path) -> dict[str, Any]:
    content = dict(content or {})
    for field in _path_fields:
        if isinstance(value := content.get(field), str):
            content[field] = str(directory / value)
    return content


class Settings(BaseModel):
    compiler_path: _Path | None = None
    defines: dict[DefineName, DefineValue] = Field(default_factory=dict)
    output_dir: _Path | None = None
    output_base_name: str | None = None
    quiet: bool = False
    extra_args: tuple[str, ...] = ()
    encoding: _Encoding = "utf-8"

    @classmethod
    def from_yaml(cls, path: Path) -> Self:
        """Load and merge every settings file relevant to a directory.

        Files named `innosetup.yml` are read from the root of the git work tree \
        containing `path` (if any), then from the user configuration directory, then \
        from each directory between the work tree root and `path`. A key defined in a \
        later file replaces the whole value from an earlier one. Relative paths are \
        resolved against the directory of the file defining them.

        Args:
            path: Directory the settings are loaded for.

        Returns:
            The merged settings.
        """
        resolved_path = path.resolve()
        content: dict[str, Any] = reduce(
            lambda a, b: {**a, **b},
            (
                _anchor_paths(load_yaml(d), d.parent)
                for p in dirs_hierarchy(
                    get_git_dir(resolved_path), _user_config_dir, resolved_path
                )
                if (d := p / settings_filename).is_file()
            ),
            {},
        )
        return cls.model_validate(content)

    def to_options(
        self,
        script_path: Path,
        *,
        defines: Mapping[DefineName, DefineValue] | None = None,
        compiler_path: Path | None = None,
        output_dir: Path | None = None,
        output_base_name: str | None = None,
        quiet: bool | None = None,
        extra_args: Sequence[str] = (),
        no_throw: bool = False,
        on_stdout: OutputSink | None = None,
        on_stderr: OutputSink | None = None,
    ) -> CompilerOptions:
        """Build the options of a compilation, the arguments overriding the settings.

        Defines are merged with the ones of the settings and extra arguments are \
        appended to them. `quiet` only overrides the settings when it is not None.
        """
        return CompilerOptions(
            script_path=script_path,
            compiler_path=compiler_path or self.compiler_path,
            defines={**self.defines, **(defines or {})},
            output_dir=output_dir or self.output_dir,
            output_base_name=output_base_name or self.output_base_name,
            quiet=self.quiet if quiet is None else quiet,
            extra_args=(*self.extra_args, *extra_args),
            no_throw=no_throw,
            on_stdout=on_stdout,
            on_stderr=on_stderr,
            encoding=self.encoding,
        )
