"""Value objects for the furniture module domain.

This module provides immutable data types used throughout the engine.
All classes are re-exported from sub-modules for convenience.
"""

from __future__ import annotations

# Module archetypes and input counts
from ._module import (
    Dimensions,
    DoorType,
    Feature,
    ModuleConfig,
    ModuleType,
)

# Panel roles and edge topology
from ._panels import (
    ALL_EDGES,
    END_EDGES,
    FRONT_AND_ENDS,
    FRONT_EDGE,
    HIDDEN,
    LONG_EDGES,
    EdgeExposure,
    FrontLayout,
    JointConvention,
    PanelRole,
    ThicknessClass,
)

# Materials and usage
from ._materials import (
    BOARD_ROLES,
    ComponentSelection,
    ExtraHardwareLine,
    Material,
    MaterialCatalog,
    MaterialRole,
    MaterialUsageRow,
)

__all__ = [
    "ALL_EDGES",
    "BOARD_ROLES",
    "ComponentSelection",
    "Dimensions",
    "DoorType",
    "END_EDGES",
    "EdgeExposure",
    "ExtraHardwareLine",
    "FRONT_AND_ENDS",
    "FRONT_EDGE",
    "Feature",
    "FrontLayout",
    "HIDDEN",
    "JointConvention",
    "LONG_EDGES",
    "Material",
    "MaterialCatalog",
    "MaterialRole",
    "MaterialUsageRow",
    "ModuleConfig",
    "ModuleType",
    "PanelRole",
    "ThicknessClass",
]
