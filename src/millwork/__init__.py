"""Parametric furniture module decomposition.

Turns a module archetype, its dimensions and feature counts into a cut
list of edge-banded panels and a bill of materials.
"""

from .domain import (
    CalculationResult,
    ModuleCalculator,
    ModuleSpec,
    calculate_module,
)

__version__ = "0.1.0"

__all__ = [
    "CalculationResult",
    "ModuleCalculator",
    "ModuleSpec",
    "__version__",
    "calculate_module",
]
