"""
Settings of the main infrastructure.

These are documented in the "Main Infrastructure" section of the configuration template.
"""

from enum import Enum

from .settings import EnumSetting, Setting, SettingType


class LogLevel(Enum):
    NONE = 0
    ERROR = 1
    WARNING = 2
    STATUS = 3
    INFO = 4
    DEBUG = 5


class DefaultSettings:
    """Settings that every run of the infrastructure understands."""

    SOURCE_TREE = Setting(
        key="source_tree",
        type=SettingType.DIRECTORY,
        mandatory=True,
        description="The path to the source tree of the product line that should be analyzed.",
    )

    RESOURCE_DIR = Setting(
        key="resource_dir",
        type=SettingType.DIRECTORY,
        mandatory=True,
        description=(
            "The path where extractors can store their resources. The extractors create sub-folders in this "
            "called the same as their fully qualified name."
        ),
    )

    OUTPUT_DIR = Setting(
        key="output_dir",
        type=SettingType.DIRECTORY,
        mandatory=True,
        description="The path where the output files of the analysis will be stored.",
    )

    PLUGINS_DIR = Setting(
        key="plugins_dir",
        type=SettingType.DIRECTORY,
        mandatory=True,
        description="The path where plugin packages are located. All packages found there are put on the import path.",
    )

    LOG_DIR = Setting(
        key="log.dir",
        type=SettingType.DIRECTORY,
        mandatory=False,
        default_value=".",
        description="The path where the log files will be stored.",
    )

    LOG_CONSOLE = Setting(
        key="log.console",
        type=SettingType.BOOLEAN,
        mandatory=False,
        default_value="true",
        description="Defines whether the log should be written to the console.",
    )

    LOG_FILE = Setting(
        key="log.file",
        type=SettingType.BOOLEAN,
        mandatory=False,
        default_value="false",
        description="Defines whether the log should be written to a file in log.dir.",
    )

    LOG_LEVEL = EnumSetting(
        key="log.level",
        enum_class=LogLevel,
        mandatory=False,
        default_value="INFO",
        description=(
            "Defines the log level for the logger. Messages of this level and all levels above it are shown.\n"
            "NONE disables logging completely."
        ),
    )

    PREPARATION_CLASSES = Setting(
        key="preparation.class",
        type=SettingType.SETTING_LIST,
        mandatory=False,
        description=(
            "Specifies the import paths of the preparations that are executed before the analysis starts. "
            "They are executed in the order of the list."
        ),
    )

    ANALYSIS_CLASS = Setting(
        key="analysis.class",
        type=SettingType.STRING,
        mandatory=True,
        description="The import path of the analysis that should be run, in the form module:ClassName.",
    )

    CODE_EXTRACTOR_FILES = Setting(
        key="code.extractor.files",
        type=SettingType.STRING_LIST,
        mandatory=False,
        default_value="",
        description=(
            "Defines which files the code extractor should run on. Comma separated list of paths relative to "
            "the source tree. If directories are listed, then they are searched recursively for files that "
            "match the regular expression specified in code.extractor.file_regex. Set to an empty string to "
            "specify the complete source tree."
        ),
    )

    CODE_EXTRACTOR_FILE_REGEX = Setting(
        key="code.extractor.file_regex",
        type=SettingType.REGEX,
        mandatory=False,
        default_value=r".*\.c",
        description=(
            "A Python regular expression defining which files are considered to be source files for "
            "parsing. See code.extractor.files for a description on which files this expression is tested on."
        ),
    )

    CODE_EXTRACTOR_THREADS = Setting(
        key="code.extractor.threads",
        type=SettingType.INTEGER,
        mandatory=False,
        default_value="1",
        description="The number of threads the code extractor should use.",
    )
