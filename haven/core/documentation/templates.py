"""
Rendering of the configuration template.

Turns a ``SettingsDocumentation`` into the text of ``config_template.properties``: a fixed
header, then one boxed header per section and one commented entry per setting.
"""

from typing import List

from ..settings import Setting, SettingType
from .models import SettingsDocumentation

LINE_WIDTH = 78
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

HEADER = (
    "# Configuration file documentation for Haven\n"
    "#\n"
    "# This file lists all known configuration options that are available for\n"
    "# Haven. Note that some plugins may define their own settings, that are\n"
    "# not listed in this file. However, this file should cover the most common\n"
    "# plugins.\n"
    "#\n"
    "# This configuration file is a standard properties file (the format read by\n"
    "# java.util.Properties and compatible parsers). A properties file is a\n"
    "# key-value storage in the format: key = value. Lines starting with a hash (#)\n"
    "# are comments and not considered in parsing. Multiple lines can be joined\n"
    "# together with a backslash (\\) character directly in front of the line break.\n"
    "# This is useful for multi-line values or formatting. Backslash characters (\\)\n"
    "# in normal text content are used for escaping; thus a double backslash (\\\\)\n"
    "# is required to write a single backslash as a property value (this should be\n"
    "# kept in mind when writing regular expressions as property values). The\n"
    "# default values for settings are already escaped and have two backslash\n"
    "# characters (\\\\) instead of a single one.\n"
    "#\n"
    "# This file lists the keys for the settings defined in the main infrastructure,\n"
    "# followed by the settings of common plugins. Each setting has a short\n"
    "# description, that contains:\n"
    "#  * An explanation text for the setting.\n"
    "#  * The type of setting (see below for a list possible types).\n"
    "#  * For enums: The possible values.\n"
    "#  * The default value for the setting, if it specifies one.\n"
    "#  * If no default value is specified: Whether the setting is mandatory or not.\n"
    "#\n"
    "# Possible setting types are:\n"
    "#  * String: A simple text value.\n"
    "#  * Integer: An integer value. An exception is generated if this is not a valid\n"
    "#             integer.\n"
    '#  * Boolean: A boolean value. Everything except "true" (case insensitive) is\n'
    "#             considered to be the value false.\n"
    "#  * Regular Expression: A Python regular expression. See the documentation of\n"
    "#                        the re module.\n"
    "#  * Path: A path value. The file denoted by this does not have to exist.\n"
    "#  * Existing File: A path value for an existing file. If the specified file\n"
    "#                   does not exist, then an exception is thrown. This can either\n"
    "#                   be absolute, relative to the current working directory or\n"
    "#                   relative to the source_tree setting (first file found in\n"
    "#                   this order is used).\n"
    "#  * Existing Directory: A path value for an existing directory. If the\n"
    "#                        specified directory does not exist, then an exception\n"
    "#                        is thrown. This can either be relative to the current\n"
    "#                        working directory or an absolute path.\n"
    "#  * Enum: One value of an enumeration of possible values. Not case sensitive.\n"
    "#  * Comma separated list of strings: A comma separated list of string values.\n"
    "#  * List of setting keys: A list of string values created from multiple setting\n"
    "#                          keys. The base key is appended by a .0 for the first\n"
    "#                          value. The following values increase this integer.\n"
    "#                          For example:\n"
    "#                            key.0 = a\n"
    "#                            key.1 = b\n"
    "#                            key.2 = c\n"
    '#                          Defines the list ["a", "b", "c"].\n'
    "#\n"
    "# This was automatically generated on: "
)

TYPE_NAMES = {
    SettingType.STRING: "String",
    SettingType.INTEGER: "Integer",
    SettingType.BOOLEAN: "Boolean",
    SettingType.REGEX: "Regular Expression",
    SettingType.PATH: "Path",
    SettingType.FILE: "Existing File",
    SettingType.DIRECTORY: "Existing Directory",
    SettingType.ENUM: "Enum",
    SettingType.STRING_LIST: "Comma separated list of strings",
    SettingType.SETTING_LIST: "List of setting keys",
}


def split_description(description: str, width: int = LINE_WIDTH) -> List[str]:
    """
    Split a description into lines of at most ``width`` characters.

    Lines are broken at spaces. Existing line breaks are kept and restart the count. A
    single word longer than ``width`` is not split up; its line extends up to the next
    space or line break instead.
    """
    lines = []
    length = len(description)
    current_length = 0
    previous_end = -1

    i = 0
    while i < length:
        if description[i] == "\n":
            lines.append(description[previous_end + 1 : i])
            previous_end = i
            current_length = 0
            i += 1
            continue

        current_length += 1
        if current_length > width:
            # search previous space
            j = i
            while j > previous_end + 1 and description[j] not in " \n":
                j -= 1
            if j == previous_end + 1:
                while j < length and description[j] not in " \n":
                    j += 1
            lines.append(description[previous_end + 1 : j])
            previous_end = j
            current_length = 0
            i = j
        i += 1

    if previous_end + 1 < length:
        lines.append(description[previous_end + 1 :])

    return lines


def type_to_string(setting_type: SettingType) -> str:
    """Get the human-readable name of a setting type."""
    return TYPE_NAMES.get(setting_type, getattr(setting_type, "name", str(setting_type)))


def escape_setting_value(value: str) -> str:
    """Escapes \\ characters to \\\\."""
    return value.replace("\\", "\\\\")


def render_section_header(text: str) -> str:
    """
    Render a boxed section header::

        #############
        # Some Text #
        #############
    """
    line = "#" * (len(text) + 4)
    return f"{line}\n# {text} #\n{line}\n\n"


def render_setting(setting: Setting, enum_values: List[str]) -> str:
    """Render the comment block and the key line of a single setting."""
    lines = [f"# {line}" for line in split_description(setting.description)]
    lines.append("#")
    lines.append(f"# Type: {type_to_string(setting.type)}")

    if setting.type == SettingType.ENUM:
        lines.append(f"# Possible values: {', '.join(enum_values)}")

    if setting.default_value is not None:
        default_value = escape_setting_value(setting.default_value) if setting.default_value else "(empty string)"
        lines.append(f"# Default value: {default_value}")
    else:
        lines.append(f"# Mandatory: {'Yes' if setting.mandatory else 'No'}")

    key = setting.key
    if setting.type == SettingType.SETTING_LIST:
        key += ".0"
    lines.append(f"{key} =")

    return "\n".join(lines) + "\n\n"


def render_documentation(documentation: SettingsDocumentation) -> str:
    """
    Render the complete configuration template.

    Sections without settings are left out entirely. The result ends with a single line
    break after the last key line.
    """
    parts = [HEADER, documentation.generated_at.strftime(TIMESTAMP_FORMAT), "\n\n"]

    for section in documentation.sections:
        if not section.settings:
            continue

        parts.append(render_section_header(section.name))
        for setting in section.settings:
            parts.append(render_setting(setting, documentation.enum_values.get(setting.key, [])))

    # remove one trailing \n
    return "".join(parts)[:-1]
