"""Pytest configuration for haven tests."""

import os
import sys
import textwrap
import uuid
import zipfile
from pathlib import Path
from typing import Dict, Tuple

import pytest
from typer.testing import CliRunner


def pytest_configure(config):
    os.environ["HAVEN_DISABLE_CONSOLE_STYLING"] = "1"


@pytest.fixture
def cli_runner():
    return CliRunner(
        charset="utf-8",
        env={"NO_COLOR": "1", "TERM": "dumb", "TTY_COMPATIBLE": "1", "TTY_INTERACTIVE": "0"},
    )


@pytest.fixture
def plugin_factory(tmp_path):
    """
    Create a plugin package on disk.

    ``files`` maps paths relative to the package directory to module sources. The string
    ``PKG`` in a source is replaced by the (unique) package name. Returns the source root
    that contains the package, and the package name.
    """
    created = []

    def _create(files: Dict[str, str]) -> Tuple[Path, str]:
        package = f"hvplugin_{uuid.uuid4().hex[:8]}"
        root = tmp_path / f"src_{package}"
        for relative, source in files.items():
            path = root / package / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(textwrap.dedent(source).replace("PKG", package), encoding="utf-8")
        created.append(package)
        return root, package

    yield _create

    for name in list(sys.modules):
        if any(name == package or name.startswith(f"{package}.") for package in created):
            del sys.modules[name]


@pytest.fixture
def make_archive(tmp_path):
    """Zip all files below a source root, e.g. to build a wheel-like plugin archive."""

    def _make(root: Path, name: str = "plugin.zip") -> Path:
        archive = tmp_path / name
        with zipfile.ZipFile(archive, "w") as zf:
            for path in sorted(root.rglob("*")):
                if path.is_file():
                    zf.write(path, path.relative_to(root).as_posix())
        return archive

    return _make


SIMPLE_SETTINGS = '''
    from haven.core.settings import Setting, SettingType

    GREETING = Setting(key="x.y", type=SettingType.STRING, mandatory=True, description="hello")
'''


@pytest.fixture
def simple_plugin(plugin_factory):
    """Plugin with a single mandatory string setting ``x.y``."""
    return plugin_factory({"__init__.py": "", "settings.py": SIMPLE_SETTINGS})
