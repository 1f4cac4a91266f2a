"""
Setting discovery for the documentation generator.

Loads plugin components and collects the settings they declare, either through an
explicit ``__settings__`` manifest or as public constants.
"""

import inspect
import re
from typing import Any, Callable, Dict, Iterable, List, Optional

from loguru import logger

from ..loader import import_object
from ..settings import Setting, SettingType
from .enums import resolve_enum_values
from .errors import ComponentLoadError

# Public constants, e.g. SOURCE_TREE or LOG_LEVEL
CONSTANT_NAME_REGEX = re.compile(r"^[A-Z][A-Z0-9_]*$")

MANIFEST_ATTRIBUTE = "__settings__"


class SettingInspector:
    """
    Collects the settings declared by plugin components.

    Components are inspected in sorted order of their identifiers so that the output does
    not depend on the order in which a directory or archive is traversed. For every ENUM
    setting the possible values are resolved right away and stored in ``enum_values``.
    """

    def __init__(
        self,
        loader: Callable[[str], Any] = import_object,
        enum_values: Optional[Dict[str, List[str]]] = None,
    ):
        self.loader = loader
        self.enum_values: Dict[str, List[str]] = enum_values if enum_values is not None else {}

    def scan(self, component_names: Iterable[str]) -> List[Setting]:
        """
        Inspect all given components.

        Args:
            component_names: Component identifiers (``"module"`` or ``"module:attribute"``)

        Returns:
            The settings found, in component order and declaration order within a component

        Raises:
            ComponentLoadError: If a component cannot be loaded or has an invalid manifest
            EnumResolutionError: If the values of an ENUM setting cannot be resolved
        """
        result: List[Setting] = []
        seen = set()

        for component_name in sorted(component_names):
            component = self.load_component(component_name)
            for setting in self.inspect_component(component_name, component):
                if id(setting) in seen:
                    continue
                seen.add(id(setting))

                if setting.type == SettingType.ENUM:
                    self._record_enum_values(setting)
                result.append(setting)

        return result

    def load_component(self, component_name: str) -> Any:
        logger.debug(f"Loading component {component_name}")
        try:
            return self.loader(component_name)
        except Exception as e:
            raise ComponentLoadError(component_name, e) from e

    def inspect_component(self, component_name: str, component: Any) -> List[Setting]:
        """Get the settings directly declared by a loaded module or class."""
        if isinstance(component, Setting):
            return [component]

        namespace = getattr(component, "__dict__", None)
        if namespace is None:
            return []

        manifest = namespace.get(MANIFEST_ATTRIBUTE)
        if manifest is not None:
            settings = list(manifest)
            for setting in settings:
                if not isinstance(setting, Setting):
                    raise ComponentLoadError(
                        component_name,
                        TypeError(f"{MANIFEST_ATTRIBUTE} contains {type(setting).__name__}, expected Setting"),
                    )
            return settings

        if inspect.isclass(component):
            return self._declared_settings(component)

        settings = []
        module_name = getattr(component, "__name__", None)
        for name, value in namespace.items():
            if inspect.isclass(value):
                # only classes defined at the top level of this module
                if value.__module__ == module_name and value.__qualname__ == name:
                    settings.extend(self.inspect_component(component_name, value))
            elif _is_public_constant(name) and _is_declared_setting(value, module_name):
                settings.append(value)
        return settings

    def _declared_settings(self, cls: type) -> List[Setting]:
        return [
            value
            for name, value in vars(cls).items()
            if _is_public_constant(name) and _is_declared_setting(value, cls.__module__)
        ]

    def _record_enum_values(self, setting: Setting) -> None:
        values = resolve_enum_values(setting)
        if setting.key in self.enum_values:
            logger.warning(f"Enum values for setting '{setting.key}' are defined twice, keeping the last definition")
        self.enum_values[setting.key] = values


def _is_public_constant(name: str) -> bool:
    return CONSTANT_NAME_REGEX.match(name) is not None


def _is_declared_setting(value: Any, module_name: Optional[str]) -> bool:
    # settings imported from another module belong to that module
    if not isinstance(value, Setting):
        return False
    return value.declared_in is None or value.declared_in == module_name
