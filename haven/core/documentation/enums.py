"""
Resolution of the possible values of enum settings.
"""

from enum import Enum
from typing import List

from loguru import logger

from ..loader import import_object
from ..settings import EnumSetting, Setting
from .errors import EnumResolutionError


def resolve_enum_values(setting: Setting) -> List[str]:
    """
    Get the member names of the enum behind an ENUM-typed setting.

    Args:
        setting: The setting to resolve. Must be an ``EnumSetting``.

    Returns:
        Member names in declaration order (aliases are not listed)

    Raises:
        EnumResolutionError: If the enum class cannot be imported, is not an ``Enum``
            or has no members
    """
    if not isinstance(setting, EnumSetting):
        raise EnumResolutionError(setting.key, TypeError(f"{type(setting).__name__} does not define an enum class"))

    enum_class = setting.enum_class
    if isinstance(enum_class, str):
        try:
            enum_class = import_object(enum_class)
        except Exception as e:
            raise EnumResolutionError(setting.key, e) from e

    if not (isinstance(enum_class, type) and issubclass(enum_class, Enum)):
        raise EnumResolutionError(setting.key, TypeError(f"{enum_class!r} is not an Enum class"))

    values = [member.name for member in enum_class]
    if not values:
        raise EnumResolutionError(setting.key, ValueError(f"{enum_class.__name__} has no members"))

    logger.debug(f"Resolved {len(values)} values for enum setting '{setting.key}'")
    return values
