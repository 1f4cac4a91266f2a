"""
Import helpers for plugin components.

Components are addressed either by a module name (``"haven.core.defaults"``) or by an
attribute inside a module (``"haven.core.defaults:DefaultSettings"``).
"""

import importlib
from typing import Any


def import_object(import_path: str) -> Any:
    """
    Import a module or a module attribute from its import path.

    Args:
        import_path: ``"module"`` or ``"module:attribute"``. Dotted attribute paths
            (``"module:Outer.Inner"``) are resolved step by step.

    Returns:
        The imported module or attribute

    Raises:
        ValueError: If the import path is malformed
        ImportError: If the module cannot be imported
        AttributeError: If the attribute does not exist in the module
    """
    module_name, _, attribute_path = import_path.partition(":")
    if not module_name or (":" in import_path and not attribute_path):
        raise ValueError(
            f"Invalid import path format: '{import_path}'. Expected format: 'module_name' or 'module_name:attribute'"
        )

    obj = importlib.import_module(module_name)
    if attribute_path:
        for part in attribute_path.split("."):
            obj = getattr(obj, part)
    return obj
