"""
Exceptions raised while generating setting documentation.

Generation is all-or-nothing: every error aborts the run and carries the component,
source or setting key it is attributed to, chained to the underlying cause.
"""

from pathlib import Path
from typing import Union


class SettingDocumentationError(Exception):
    """Base class for all documentation generation errors."""


class ComponentTraversalError(SettingDocumentationError):
    """Listing the components of a source (directory or archive) failed."""

    def __init__(self, source: Union[str, Path], cause: BaseException):
        self.source = str(source)
        self.cause = cause
        super().__init__(f"Could not list components in '{self.source}': {cause}")


class ComponentLoadError(SettingDocumentationError):
    """A component identifier could not be resolved to a loaded component."""

    def __init__(self, component: str, cause: BaseException):
        self.component = component
        self.cause = cause
        super().__init__(f"Could not load component '{component}': {type(cause).__name__}: {cause}")


class EnumResolutionError(SettingDocumentationError):
    """The possible values of an enum setting could not be determined."""

    def __init__(self, key: str, cause: BaseException):
        self.key = key
        self.cause = cause
        super().__init__(f"Could not resolve enum values for setting '{key}': {cause}")
