"""Provide general utility functions that would not fit in other modules."""

from collections.abc import Iterator
from pathlib import Path
from typing import Any


def import_module_and_submodules(package_name: str) -> None:
    """Import all modules and submodules from a package.

    From https://github.com/allenai/allennlp/blob/master/allennlp/common/util.py.

    Args:
        package_name: Name of the package to fully import.
    """
    from importlib import import_module, reload
    from importlib import invalidate_caches as importlib_invalidate_caches
    from pkgutil import walk_packages
    from sys import modules

    importlib_invalidate_caches()

    if package_name in modules:
        module = modules[package_name]
        reload(module)
    else:
        module = import_module(package_name)
    path = getattr(module, "__path__", [])
    path_string = "" if not path else path[0]

    for module_finder, name, _ in walk_packages(path):
        if (
            path_string
            and hasattr(module_finder, "path")
            and module_finder.path != path_string
        ):
            continue
        subpackage = f"{package_name}.{name}"
        import_module_and_submodules(subpackage)


def dirs_hierarchy(
    git_dir: Path | None, user_config_dir: Path, current_dir: Path
) -> Iterator[Path]:
    """Yield the directories that can hold settings, from lowest to highest priority.

    Args:
        git_dir: Root of the git work tree containing `current_dir`, if any.
        user_config_dir: Per-user configuration directory.
        current_dir: Directory the command is run from.

    Yields:
        The git work tree root, the user configuration directory, then every \
            directory from the git work tree root (excluded) down to `current_dir`.
    """
    from itertools import islice

    if git_dir is not None:
        yield git_dir
    yield user_config_dir
    if git_dir is not None and current_dir.is_relative_to(git_dir):
        yield from islice(intermediate_dirs(git_dir, current_dir), 1, None)
    else:
        yield current_dir


def intermediate_dirs(start: Path, end: Path) -> Iterator[Path]:
    start = start.resolve()
    yield start
    for part in end.resolve().relative_to(start).parts:
        start /= part
        yield start


def get_git_dir(path: Path) -> Path | None:
    """Search and resolve the root of the git work tree containing a path.

    Args:
        path: Path contained in the git work tree to search for.

    Returns:
        Resolved path to the work tree root, or None if the path is not inside a \
            non-bare git repository.
    """
    from pygit2 import Repository, discover_repository

    repository = discover_repository(str(path))
    if repository is None:
        return None
    workdir = Repository(repository).workdir
    if workdir is None:
        return None
    return Path(workdir).resolve()


def load_yaml(path: Path) -> Any:
    from yaml import safe_load

    return safe_load(path.read_text(encoding="utf8"))
