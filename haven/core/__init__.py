from loguru import logger

from .registry import SettingRegistry
from .settings import EnumSetting, Setting, SettingType

# Disable logger by default for library usage. If needed logger.enable("haven.core")
logger.disable("haven.core")

__all__ = [
    # Setting declarations
    "Setting",
    "EnumSetting",
    "SettingType",
    "SettingRegistry",
]
