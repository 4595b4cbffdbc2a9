"""Domain layer - module decomposition engine."""

from .archetypes import ArchetypeRegistry, ArchetypeRule, archetype_registry
from .constants import DEFAULT_CONSTANTS, ConstructionConstants
from .entities import CalculationResult, ModuleSpec, Panel
from .errors import (
    ConfigurationError,
    ModuleCalculationError,
    UnknownModuleType,
    ValidationError,
)
from .services import (
    ConfigNormalizer,
    EdgeBandAssignor,
    HardwareEstimator,
    MaterialAggregator,
    ModuleCalculator,
    PanelDecomposer,
    calculate_module,
)
from .value_objects import (
    ComponentSelection,
    Dimensions,
    DoorType,
    ExtraHardwareLine,
    Feature,
    Material,
    MaterialCatalog,
    MaterialRole,
    MaterialUsageRow,
    ModuleConfig,
    ModuleType,
)

__all__ = [
    "ArchetypeRegistry",
    "ArchetypeRule",
    "CalculationResult",
    "ComponentSelection",
    "ConfigNormalizer",
    "ConfigurationError",
    "ConstructionConstants",
    "DEFAULT_CONSTANTS",
    "Dimensions",
    "DoorType",
    "EdgeBandAssignor",
    "ExtraHardwareLine",
    "Feature",
    "HardwareEstimator",
    "Material",
    "MaterialAggregator",
    "MaterialCatalog",
    "MaterialRole",
    "MaterialUsageRow",
    "ModuleCalculationError",
    "ModuleCalculator",
    "ModuleConfig",
    "ModuleSpec",
    "ModuleType",
    "Panel",
    "PanelDecomposer",
    "UnknownModuleType",
    "ValidationError",
    "archetype_registry",
    "calculate_module",
]
