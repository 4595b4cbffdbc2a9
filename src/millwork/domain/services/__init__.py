"""Domain services of the module calculation pipeline."""

from .edge_banding import EdgeBandAssignor
from .hardware_estimator import HardwareEstimator, HardwareItem
from .material_aggregator import MaterialAggregator
from .module_calculator import ModuleCalculator, calculate_module
from .normalizer import ConfigNormalizer
from .panel_decomposer import (
    Decomposition,
    DrawerSlot,
    FrontSize,
    PanelDecomposer,
    round_mm,
)

__all__ = [
    "ConfigNormalizer",
    "Decomposition",
    "DrawerSlot",
    "EdgeBandAssignor",
    "FrontSize",
    "HardwareEstimator",
    "HardwareItem",
    "MaterialAggregator",
    "ModuleCalculator",
    "PanelDecomposer",
    "calculate_module",
    "round_mm",
]
