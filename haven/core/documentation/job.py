"""
Documentation jobs: which sources are scanned under which section names.

A job can be written as YAML::

    namespace: haven
    output: config_template.properties
    sources:
      - path: ../haven-core
        section: Main Infrastructure
      - path: dist/haven_cnf_utils-1.0-py3-none-any.whl
        section: CnfUtils
"""

from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

import yaml
from pydantic import BaseModel, field_validator

from .sources import DEFAULT_NAMESPACE

# Sibling checkouts of the main infrastructure and the public plugins, used when no
# sources are given on the command line.
DEFAULT_SOURCES: Tuple[Tuple[str, str], ...] = (
    ("../haven-core", "Main Infrastructure"),
    # Utilities
    ("../haven-cnf-utils", "CnfUtils"),
    ("../haven-io-utils", "IOUtils"),
    ("../haven-non-boolean-utils", "NonBooleanUtils"),
    ("../haven-db-utils", "DBUtils"),
    ("../haven-busybox-preparation", "BusyboxPreparation"),
    # analyses
    ("../haven-feature-effect-analysis", "FeatureEffectAnalysis"),
    ("../haven-metrics", "MetricHaven"),
    ("../haven-undead-analyzer", "UnDeadAnalyzer"),
    ("../haven-configuration-mismatch-analysis", "ConfigurationMismatchAnalysis"),
    # extractors
    ("../haven-kbuildminer-extractor", "KbuildMinerExtractor"),
    ("../haven-kconfigreader-extractor", "KconfigReaderExtractor"),
    ("../haven-srcml-extractor", "SrcMlExtractor"),
    ("../haven-typechef-extractor", "TypeChefExtractor"),
    ("../haven-undertaker-extractor", "UndertakerExtractor"),
    ("../haven-code-block-extractor", "CodeBlockExtractor"),
)


class SourceEntry(BaseModel):
    """A directory or archive and the section its settings are listed under."""

    path: str
    section: str

    model_config = {
        "extra": "forbid",
        "str_strip_whitespace": True,
    }

    @field_validator("path", "section")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("Source path and section name cannot be empty")
        return v


class DocumentationJob(BaseModel):
    """Complete description of one documentation run."""

    namespace: str = DEFAULT_NAMESPACE
    output: Optional[str] = None
    sources: List[SourceEntry]

    model_config = {
        "extra": "forbid",
        "str_strip_whitespace": True,
    }

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "DocumentationJob":
        """
        Load a job from a YAML file.

        Raises:
            OSError: If the file cannot be read
            yaml.YAMLError: If the file is not valid YAML
            pydantic.ValidationError: If the content does not describe a job
        """
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return cls.model_validate(data or {})

    @classmethod
    def from_pairs(cls, pairs: Sequence[Tuple[str, str]], namespace: str = DEFAULT_NAMESPACE) -> "DocumentationJob":
        return cls(
            namespace=namespace,
            sources=[SourceEntry(path=path, section=section) for path, section in pairs],
        )

    @classmethod
    def default(cls, namespace: str = DEFAULT_NAMESPACE) -> "DocumentationJob":
        return cls.from_pairs(DEFAULT_SOURCES, namespace=namespace)
