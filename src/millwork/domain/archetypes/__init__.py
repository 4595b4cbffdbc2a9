"""Archetype rules for every supported module type.

Importing this package registers all rules with ``archetype_registry``
and checks that every module type has one.
"""

from __future__ import annotations

from . import bedroom, kitchen, living  # noqa: F401
from .layout import ArchetypeLayout, PanelDescriptor
from .protocol import ArchetypeBuilder
from .registry import ArchetypeRegistry, ArchetypeRule, archetype_registry

archetype_registry.verify_complete()

__all__ = [
    "ArchetypeBuilder",
    "ArchetypeLayout",
    "ArchetypeRegistry",
    "ArchetypeRule",
    "PanelDescriptor",
    "archetype_registry",
]
