# ================ Setting Descriptor Types ====================================
# Defines the Setting class that plugins use to declare configuration options

import re
import sys
from enum import Enum, StrEnum
from typing import Any, Optional, Type, Union

from pydantic import BaseModel, PrivateAttr, field_validator, model_validator


class SettingType(StrEnum):
    STRING = "STRING"
    INTEGER = "INTEGER"
    BOOLEAN = "BOOLEAN"
    REGEX = "REGEX"
    PATH = "PATH"
    FILE = "FILE"
    DIRECTORY = "DIRECTORY"
    ENUM = "ENUM"
    STRING_LIST = "STRING_LIST"
    SETTING_LIST = "SETTING_LIST"


class Setting(BaseModel):
    """
    Descriptor of a single configuration option.

    Plugins declare settings as module or class level constants (or list them in a
    ``__settings__`` manifest) so that the documentation generator can find them.

    Example:
        SOURCE_TREE = Setting(
            key="source_tree",
            type=SettingType.DIRECTORY,
            description="The path to the source tree of the product line that should be analyzed.",
        )
    """

    key: str
    type: SettingType
    mandatory: bool = True
    default_value: Optional[str] = None
    description: str = ""

    _declared_in: Optional[str] = PrivateAttr(default=None)

    model_config = {
        "frozen": True,
    }

    def model_post_init(self, __context: Any) -> None:
        self._declared_in = _calling_module()

    @property
    def declared_in(self) -> Optional[str]:
        """Name of the module whose code created this setting, or None if unknown."""
        return self._declared_in

    @field_validator("key")
    @classmethod
    def validate_key(cls, v: str) -> str:
        """
        Keys end up on the left side of a properties line, so they must not contain
        whitespace or any of the properties separators.
        """
        if not v:
            raise ValueError("Setting key cannot be empty")
        if re.search(r"[\s=:#]", v):
            raise ValueError(f"Setting key '{v}' is invalid. Keys MUST NOT contain whitespace, '=', ':' or '#'.")
        return v


class EnumSetting(Setting):
    """
    Setting whose value is one of the members of an enumeration.

    ``enum_class`` is either the ``Enum`` subclass itself or a lazy import path in the
    form ``"module:ClassName"``.
    """

    type: SettingType = SettingType.ENUM
    enum_class: Union[Type[Enum], str]

    @model_validator(mode="after")
    def check_enum_type(self) -> "EnumSetting":
        if self.type != SettingType.ENUM:
            raise ValueError(f"EnumSetting '{self.key}' must have type ENUM, got {self.type}")
        return self

    @field_validator("enum_class")
    @classmethod
    def validate_enum_class(cls, v: Union[Type[Enum], str]) -> Union[Type[Enum], str]:
        if isinstance(v, str) and ":" not in v:
            raise ValueError(f"Invalid enum import path: '{v}'. Expected format: 'module_name:ClassName'")
        return v


def _calling_module() -> Optional[str]:
    """Find the first module on the call stack outside of this module and pydantic."""
    frame = sys._getframe(1)
    while frame is not None:
        module_name = frame.f_globals.get("__name__")
        if module_name != __name__ and not (module_name or "").startswith("pydantic"):
            return module_name
        frame = frame.f_back
    return None
