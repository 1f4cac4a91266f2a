# ================ Definition of the SettingRegistry class =====================
# references:
# - https://github.com/open-mmlab/mmdetection/blob/main/mmdet/registry.py
# - https://mmengine.readthedocs.io/en/latest/advanced_tutorials/registry.html

from typing import Dict, Iterator, Optional

from .settings import Setting


class SettingRegistry:
    """
    Ordered collection of the settings a component declares.

    A component exposes its registry as ``__settings__`` and the documentation generator
    reports the settings in registration order.

    Example:
        __settings__ = SettingRegistry()

        OUTPUT_DIR = __settings__.register(
            Setting(key="output_dir", type=SettingType.DIRECTORY, description="Output directory.")
        )
    """

    def __init__(self):
        self._registry: Dict[str, Setting] = {}

    def register(self, setting: Setting) -> Setting:
        if not isinstance(setting, Setting):
            raise TypeError(f"Only Setting instances can be registered, got {type(setting).__name__}")
        if setting.key in self._registry:
            raise ValueError(f"Setting '{setting.key}' is already registered")
        self._registry[setting.key] = setting
        return setting

    def extend(self, other: "SettingRegistry") -> None:
        for setting in other:
            self.register(setting)

    def __contains__(self, key: str) -> bool:
        return key in self._registry

    def __getitem__(self, key: str) -> Setting:
        return self._registry[key]

    def __iter__(self) -> Iterator[Setting]:
        return iter(self._registry.values())

    def __len__(self) -> int:
        return len(self._registry)

    def get(self, key: str) -> Optional[Setting]:
        return self._registry.get(key)

    # List all the registered keys
    def __repr__(self) -> str:
        return f"SettingRegistry({list(self._registry)!r})"
