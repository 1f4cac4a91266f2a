"""
Tests for setting discovery.

Components are built in memory and handed to the inspector through a dictionary-based
loader, so these tests do not touch the file system or sys.modules.
"""

import types
from enum import Enum

import pytest

from haven.core.documentation.enums import resolve_enum_values
from haven.core.documentation.errors import ComponentLoadError, EnumResolutionError
from haven.core.documentation.inspector import SettingInspector
from haven.core.registry import SettingRegistry
from haven.core.settings import EnumSetting, Setting, SettingType


class Color(Enum):
    RED = 1
    GREEN = 2
    BLUE = 3
    CRIMSON = 1  # alias of RED


class Empty(Enum):
    pass


def _setting(key, **kwargs):
    return Setting(key=key, type=kwargs.pop("type", SettingType.STRING), description=f"Description of {key}", **kwargs)


def _declare_in(module_name, attributes):
    """Treat settings created in this file as declared by ``module_name``."""
    for value in attributes.values():
        if isinstance(value, Setting) and value.declared_in == __name__:
            value._declared_in = module_name


def _module(name, **attributes):
    _declare_in(name, attributes)
    module = types.ModuleType(name)
    for attribute, value in attributes.items():
        setattr(module, attribute, value)
    return module


def _class(module_name, class_name, bases=(), **attributes):
    _declare_in(module_name, attributes)
    return type(class_name, bases, {"__module__": module_name, **attributes})


@pytest.fixture
def make_inspector():
    def _make(components):
        def loader(name):
            try:
                return components[name]
            except KeyError:
                raise ModuleNotFoundError(f"No module named '{name}'") from None

        return SettingInspector(loader=loader)

    return _make


def _keys(settings):
    return [setting.key for setting in settings]


def test_components_are_scanned_in_sorted_order(make_inspector):
    inspector = make_inspector(
        {
            "plugin.b": _module("plugin.b", B=_setting("b")),
            "plugin.a": _module("plugin.a", A=_setting("a")),
            "plugin": _module("plugin", ROOT=_setting("root")),
        }
    )

    assert _keys(inspector.scan(iter(["plugin.b", "plugin.a", "plugin"]))) == ["root", "a", "b"]


def test_declaration_order_within_component(make_inspector):
    inspector = make_inspector(
        {"plugin": _module("plugin", ZETA=_setting("zeta"), ALPHA=_setting("alpha"), MIDDLE=_setting("middle"))}
    )

    assert _keys(inspector.scan(["plugin"])) == ["zeta", "alpha", "middle"]


def test_only_public_constants_are_collected(make_inspector):
    inspector = make_inspector(
        {
            "plugin": _module(
                "plugin",
                PUBLIC=_setting("public"),
                _PRIVATE=_setting("private"),
                lower_case=_setting("lower"),
                Mixed=_setting("mixed"),
                NOT_A_SETTING="just a string",
            )
        }
    )

    assert _keys(inspector.scan(["plugin"])) == ["public"]


def test_class_settings_at_declaration_position(make_inspector):
    settings_class = _class("plugin", "Settings", FIRST=_setting("class.first"), SECOND=_setting("class.second"))
    inspector = make_inspector(
        {"plugin": _module("plugin", BEFORE=_setting("before"), Settings=settings_class, AFTER=_setting("after"))}
    )

    assert _keys(inspector.scan(["plugin"])) == ["before", "class.first", "class.second", "after"]


def test_inherited_and_foreign_class_settings_are_skipped(make_inspector):
    base = _class("plugin", "Base", BASE=_setting("base"))
    child = _class("plugin", "Child", (base,), CHILD=_setting("child"))
    foreign = _class("other", "Foreign", FOREIGN=_setting("foreign"))
    inspector = make_inspector({"plugin": _module("plugin", Base=base, Child=child, Foreign=foreign)})

    assert _keys(inspector.scan(["plugin"])) == ["base", "child"]


def test_nested_classes_are_skipped(make_inspector):
    inner = type("Inner", (), {"__module__": "plugin", "__qualname__": "Outer.Inner", "INNER": _setting("inner")})
    outer = _class("plugin", "Outer", OUTER=_setting("outer"), Inner=inner)
    inspector = make_inspector({"plugin": _module("plugin", Outer=outer, Inner=inner)})

    assert _keys(inspector.scan(["plugin"])) == ["outer"]


def test_manifest_takes_precedence(make_inspector):
    registry = SettingRegistry()
    second = registry.register(_setting("manifest.second"))
    first = registry.register(_setting("manifest.first"))
    inspector = make_inspector(
        {"plugin": _module("plugin", __settings__=registry, FIRST=first, SECOND=second, OTHER=_setting("other"))}
    )

    assert _keys(inspector.scan(["plugin"])) == ["manifest.second", "manifest.first"]


def test_manifest_as_list(make_inspector):
    inspector = make_inspector({"plugin": _module("plugin", __settings__=[_setting("listed")])})
    assert _keys(inspector.scan(["plugin"])) == ["listed"]


def test_invalid_manifest(make_inspector):
    inspector = make_inspector({"plugin": _module("plugin", __settings__=[_setting("ok"), "not a setting"])})

    with pytest.raises(ComponentLoadError, match="plugin") as exc_info:
        inspector.scan(["plugin"])
    assert isinstance(exc_info.value.cause, TypeError)


def test_attribute_components(make_inspector):
    single = _setting("single")
    settings_class = _class("plugin", "Settings", VALUE=_setting("class.value"))
    inspector = make_inspector({"plugin:SINGLE": single, "plugin:Settings": settings_class})

    assert _keys(inspector.scan(["plugin:Settings", "plugin:SINGLE"])) == ["single", "class.value"]


def test_same_setting_is_reported_once(make_inspector):
    shared = _setting("shared")
    inspector = make_inspector(
        {
            "plugin": _module("plugin", SHARED=shared),
            "plugin.settings": _module("plugin.settings", SHARED=shared, OWN=_setting("own")),
        }
    )

    assert _keys(inspector.scan(["plugin.settings", "plugin"])) == ["shared", "own"]


def test_imported_settings_are_skipped(make_inspector):
    shared = _setting("shared")
    plugin_a = _module("plugin.a", SHARED=shared)
    settings_class = _class("plugin.b", "Settings", SHARED=shared, OWN=_setting("class.own"))
    inspector = make_inspector(
        {
            "plugin.a": plugin_a,
            "plugin.b": _module("plugin.b", SHARED=shared, OWN=_setting("own"), Settings=settings_class),
        }
    )

    assert _keys(inspector.scan(["plugin.b"])) == ["own", "class.own"]


def test_load_failure_is_attributed(make_inspector):
    inspector = make_inspector({"plugin.a": _module("plugin.a", A=_setting("a"))})

    with pytest.raises(ComponentLoadError) as exc_info:
        inspector.scan(["plugin.a", "plugin.missing"])

    error = exc_info.value
    assert error.component == "plugin.missing"
    assert isinstance(error.cause, ModuleNotFoundError)
    assert error.__cause__ is error.cause
    assert "plugin.missing" in str(error)


def test_default_loader_failure():
    with pytest.raises(ComponentLoadError, match="haven_missing_plugin"):
        SettingInspector().scan(["haven_missing_plugin.settings"])


def test_enum_values_are_resolved_during_scan(make_inspector):
    inspector = make_inspector(
        {"plugin": _module("plugin", COLOR=EnumSetting(key="color", enum_class=Color, description="A color"))}
    )

    settings = inspector.scan(["plugin"])

    assert _keys(settings) == ["color"]
    assert inspector.enum_values == {"color": ["RED", "GREEN", "BLUE"]}


def test_lazy_enum_class():
    setting = EnumSetting(key="log.level", enum_class="haven.core.defaults:LogLevel")
    assert resolve_enum_values(setting) == ["NONE", "ERROR", "WARNING", "STATUS", "INFO", "DEBUG"]


@pytest.mark.parametrize(
    "setting",
    [
        EnumSetting(key="broken", enum_class="haven_missing_module:Enum"),
        EnumSetting(key="broken", enum_class="haven.core.defaults:DefaultSettings"),
        EnumSetting(key="broken", enum_class=Empty),
        Setting(key="broken", type=SettingType.ENUM),
    ],
)
def test_enum_resolution_failures(setting):
    with pytest.raises(EnumResolutionError) as exc_info:
        resolve_enum_values(setting)
    assert exc_info.value.key == "broken"


def test_enum_resolution_failure_aborts_scan(make_inspector):
    inspector = make_inspector({"plugin": _module("plugin", BROKEN=Setting(key="broken", type=SettingType.ENUM))})

    with pytest.raises(EnumResolutionError):
        inspector.scan(["plugin"])


def test_enum_key_collision_keeps_last(make_inspector):
    class Shape(Enum):
        CIRCLE = 1
        SQUARE = 2

    inspector = make_inspector(
        {
            "plugin.a": _module("plugin.a", KIND=EnumSetting(key="kind", enum_class=Color)),
            "plugin.b": _module("plugin.b", KIND=EnumSetting(key="kind", enum_class=Shape)),
        }
    )

    settings = inspector.scan(["plugin.a", "plugin.b"])

    assert len(settings) == 2
    assert inspector.enum_values["kind"] == ["CIRCLE", "SQUARE"]


def test_main_infrastructure_settings():
    inspector = SettingInspector()
    settings = inspector.scan(["haven.core.defaults"])
    keys = _keys(settings)

    assert keys[0] == "source_tree"
    assert "log.level" in keys
    assert "code.extractor.file_regex" in keys
    assert inspector.enum_values["log.level"][0] == "NONE"
