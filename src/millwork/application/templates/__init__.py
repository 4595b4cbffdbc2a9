"""Archetype presets and configuration templates.

This package provides the default size and configuration of every
archetype and a TemplateManager that renders them as configuration files.
"""

from millwork.application.templates.manager import (
    TEMPLATE_METADATA,
    TemplateManager,
    TemplateNotFoundError,
)
from millwork.application.templates.presets import (
    DEFAULT_COMPONENTS,
    PRESETS,
    ModulePreset,
    get_preset,
)

__all__ = [
    "DEFAULT_COMPONENTS",
    "ModulePreset",
    "PRESETS",
    "TEMPLATE_METADATA",
    "TemplateManager",
    "TemplateNotFoundError",
    "get_preset",
]
