"""
Main setting documentation generator.

Provides the primary interface for generating ``config_template.properties`` from the
settings declared in the main infrastructure and in plugins.
"""

from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional, Union

from loguru import logger

from ..loader import import_object
from ..settings import Setting
from .inspector import SettingInspector
from .models import SectionDocumentation, SettingsDocumentation
from .sources import (
    DEFAULT_NAMESPACE,
    ArchiveComponentSource,
    ComponentSource,
    DirectoryComponentSource,
    open_component_source,
)
from .templates import render_documentation


class SettingDocumentationGenerator:
    """
    Collects settings section by section and renders them as a configuration template.

    Every ``find_settings*`` / ``scan_*`` call adds a new section, even if a section with the
    same name already exists. Sections are rendered in the order they were added.

    Example:
        generator = SettingDocumentationGenerator()
        generator.find_settings("../haven-core", "Main Infrastructure")
        generator.find_settings("dist/haven_cnf_utils-1.0-py3-none-any.whl", "CnfUtils")
        print(generator.generate_setting_text(), end="")
    """

    def __init__(self, namespace: str = DEFAULT_NAMESPACE, loader: Callable[[str], Any] = import_object):
        self.namespace = namespace
        self._sections: List[SectionDocumentation] = []
        self._enum_values: Dict[str, List[str]] = {}
        self.inspector = SettingInspector(loader=loader, enum_values=self._enum_values)

    def find_settings_in_directory(self, directory: Union[str, Path], section_name: str) -> None:
        """
        Search for settings in all modules of a source directory.

        Args:
            directory: Directory that contains the top-level package of the plugin
            section_name: Name of the section the settings should appear under

        Raises:
            ComponentTraversalError: If listing the modules fails
            ComponentLoadError: If a module cannot be imported
            EnumResolutionError: If the values of an ENUM setting cannot be resolved
        """
        self.scan_source(DirectoryComponentSource(directory, self.namespace), section_name)

    def find_settings_in_archive(self, archive: Union[str, Path], section_name: str) -> None:
        """
        Search for settings in all modules of a zip archive or wheel.

        Args:
            archive: The archive file to search in
            section_name: Name of the section the settings should appear under
        """
        self.scan_source(ArchiveComponentSource(archive, self.namespace), section_name)

    def find_settings(self, location: Union[str, Path], section_name: str) -> None:
        """Search for settings in a directory or archive, depending on what ``location`` is."""
        self.scan_source(open_component_source(location, self.namespace), section_name)

    def scan_source(self, source: ComponentSource, section_name: str) -> None:
        with source:
            self.scan_components(source.component_names(), section_name)

    def scan_components(self, component_names: Iterable[str], section_name: str) -> None:
        """
        Inspect the given components and add their settings as a new section.

        Args:
            component_names: Component identifiers, ``"module"`` or ``"module:attribute"``
            section_name: Name of the section the settings should appear under
        """
        settings = self.inspector.scan(component_names)
        self._sections.append(SectionDocumentation(name=section_name, settings=settings))
        logger.info(f"Found {len(settings)} settings for section '{section_name}'")

    @property
    def section_names(self) -> List[str]:
        return [section.name for section in self._sections]

    @property
    def settings(self) -> List[List[Setting]]:
        """Settings per section, in the same order as ``section_names``."""
        return [section.settings for section in self._sections]

    @property
    def enum_values(self) -> Dict[str, List[str]]:
        """Enum member names for ENUM settings, keyed by setting key."""
        return self._enum_values

    def get_documentation(self, generated_at: Optional[datetime] = None) -> SettingsDocumentation:
        return SettingsDocumentation(
            sections=list(self._sections),
            enum_values=dict(self._enum_values),
            generated_at=generated_at or datetime.now(),
        )

    def generate_setting_text(self, generated_at: Optional[datetime] = None) -> str:
        """
        Generate the documentation text for all settings found so far.

        Args:
            generated_at: Timestamp written to the header (defaults to now)

        Returns:
            The content for ``config_template.properties``
        """
        return render_documentation(self.get_documentation(generated_at))
