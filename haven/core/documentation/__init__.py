"""
Setting documentation generation for Haven.

This module scans the main infrastructure and plugins for declared settings and renders
them into ``config_template.properties``, the reference of all known configuration
options.
"""

from .errors import (
    ComponentLoadError,
    ComponentTraversalError,
    EnumResolutionError,
    SettingDocumentationError,
)
from .generator import SettingDocumentationGenerator
from .inspector import SettingInspector
from .job import DEFAULT_SOURCES, DocumentationJob, SourceEntry
from .models import SectionDocumentation, SettingsDocumentation
from .sources import (
    DEFAULT_NAMESPACE,
    ArchiveComponentSource,
    ComponentSource,
    DirectoryComponentSource,
    open_component_source,
)
from .templates import render_documentation, split_description

__all__ = [
    # Main generator
    "SettingDocumentationGenerator",
    # Core components
    "SettingInspector",
    "ComponentSource",
    "DirectoryComponentSource",
    "ArchiveComponentSource",
    "open_component_source",
    "render_documentation",
    "split_description",
    # Jobs
    "DocumentationJob",
    "SourceEntry",
    "DEFAULT_SOURCES",
    "DEFAULT_NAMESPACE",
    # Data models
    "SectionDocumentation",
    "SettingsDocumentation",
    # Errors
    "SettingDocumentationError",
    "ComponentTraversalError",
    "ComponentLoadError",
    "EnumResolutionError",
]
