"""
Data models for the setting documentation generator.

These models hold the settings collected from the scanned sources until they are
rendered into the configuration template.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List

from ..settings import Setting


@dataclass
class SectionDocumentation:
    """Settings found in one scanned source, in discovery order."""

    name: str
    settings: List[Setting] = field(default_factory=list)


@dataclass
class SettingsDocumentation:
    """Complete documentation model for one generator run."""

    sections: List[SectionDocumentation]
    enum_values: Dict[str, List[str]]  # setting key -> enum member names
    generated_at: datetime
