"""
Component sources for the setting documentation generator.

A component source lists the importable module names found in a source directory or in a
zip/wheel archive. While a source is open its location is on ``sys.path`` so that the
listed components can be imported; closing the source removes it again.
"""

import importlib
import os
import sys
import zipfile
from abc import ABC, abstractmethod
from pathlib import Path, PurePosixPath
from typing import Iterable, Iterator, Optional, Sequence, Union

from loguru import logger

from .errors import ComponentTraversalError

DEFAULT_NAMESPACE = "haven"
MODULE_SUFFIXES = (".py", ".pyc")


def module_name_from_parts(parts: Sequence[str], namespace: str = DEFAULT_NAMESPACE) -> Optional[str]:
    """
    Convert a relative file path (split into parts) to a dotted module name.

    Returns None for files that do not denote a component: non-Python files, bytecode
    caches, hidden directories, dunder modules other than ``__init__`` and modules outside
    of ``namespace``.
    """
    if not parts:
        return None

    *packages, filename = parts
    stem, suffix = os.path.splitext(filename)
    if suffix not in MODULE_SUFFIXES:
        return None

    for package in packages:
        if package == "__pycache__" or package.startswith(".") or not package.isidentifier():
            return None

    if stem == "__init__":
        names = packages
    elif stem.startswith("__") or not stem.isidentifier():
        return None
    else:
        names = [*packages, stem]

    if not names:
        return None

    module_name = ".".join(names)
    if namespace and module_name != namespace and not module_name.startswith(f"{namespace}."):
        return None
    return module_name


class ComponentSource(ABC):
    """Lists the components of one source location. Use as a context manager."""

    def __init__(self, location: Union[str, Path], namespace: str = DEFAULT_NAMESPACE):
        self.location = Path(location)
        self.namespace = namespace
        self._sys_path_entry: Optional[str] = None

    def __enter__(self) -> "ComponentSource":
        self.open()
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def open(self) -> None:
        entry = str(self.location.resolve())
        if entry not in sys.path:
            sys.path.insert(0, entry)
            self._sys_path_entry = entry
            importlib.invalidate_caches()
        logger.debug(f"Opened component source {self.location}")

    def close(self) -> None:
        if self._sys_path_entry is not None:
            if self._sys_path_entry in sys.path:
                sys.path.remove(self._sys_path_entry)
            self._sys_path_entry = None
        logger.debug(f"Closed component source {self.location}")

    @abstractmethod
    def component_names(self) -> Iterator[str]:
        """Lazily yield the module names found in this source."""
        ...

    def _unique(self, names: Iterable[Optional[str]]) -> Iterator[str]:
        seen = set()
        for name in names:
            if name is not None and name not in seen:
                seen.add(name)
                yield name


class DirectoryComponentSource(ComponentSource):
    """Components in a source directory, e.g. the checkout of a plugin project."""

    def open(self) -> None:
        if not self.location.is_dir():
            raise ComponentTraversalError(self.location, NotADirectoryError(f"Not a directory: {self.location}"))
        super().open()

    def component_names(self) -> Iterator[str]:
        return self._unique(self._walk())

    def _walk(self) -> Iterator[Optional[str]]:
        def on_error(error: OSError):
            raise error

        try:
            for dirpath, dirnames, filenames in os.walk(self.location, onerror=on_error):
                dirnames[:] = sorted(d for d in dirnames if d != "__pycache__" and not d.startswith("."))
                relative = Path(dirpath).relative_to(self.location).parts
                for filename in sorted(filenames):
                    yield module_name_from_parts((*relative, filename), self.namespace)
        except OSError as e:
            raise ComponentTraversalError(self.location, e) from e


class ArchiveComponentSource(ComponentSource):
    """Components in a zip archive or wheel. The archive is imported through zipimport."""

    def __init__(self, location: Union[str, Path], namespace: str = DEFAULT_NAMESPACE):
        super().__init__(location, namespace)
        self._archive: Optional[zipfile.ZipFile] = None

    def open(self) -> None:
        try:
            self._archive = zipfile.ZipFile(self.location)
        except (OSError, zipfile.BadZipFile) as e:
            raise ComponentTraversalError(self.location, e) from e
        try:
            super().open()
        except BaseException:
            self._close_archive()
            raise

    def close(self) -> None:
        try:
            super().close()
        finally:
            self._close_archive()

    def _close_archive(self) -> None:
        if self._archive is not None:
            self._archive.close()
            self._archive = None

    def component_names(self) -> Iterator[str]:
        if self._archive is None:
            raise RuntimeError(f"Archive source {self.location} is not open")
        return self._unique(
            module_name_from_parts(PurePosixPath(name).parts, self.namespace)
            for name in self._archive.namelist()
            if not name.endswith("/")
        )


def open_component_source(location: Union[str, Path], namespace: str = DEFAULT_NAMESPACE) -> ComponentSource:
    """Create the matching component source for a directory or an archive file."""
    path = Path(location)
    if path.is_file():
        return ArchiveComponentSource(path, namespace)
    return DirectoryComponentSource(path, namespace)
