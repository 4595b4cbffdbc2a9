"""Module calculation facade.

Runs the full pipeline for one module:

    normalize -> decompose -> assign edge banding -> estimate hardware
    -> aggregate materials

Every stage is deterministic; the same spec and extra lines always yield
an identical result. Any failure aborts the whole calculation.
"""

from __future__ import annotations

import logging
from typing import Iterable

from ..archetypes import ArchetypeRegistry, archetype_registry
from ..constants import DEFAULT_CONSTANTS, ConstructionConstants
from ..entities import CalculationResult, ModuleSpec
from ..value_objects import ExtraHardwareLine, MaterialCatalog
from .edge_banding import EdgeBandAssignor
from .hardware_estimator import HardwareEstimator
from .material_aggregator import MaterialAggregator
from .normalizer import ConfigNormalizer
from .panel_decomposer import PanelDecomposer

logger = logging.getLogger(__name__)


class ModuleCalculator:
    """Computes the cut list and bill of materials of a module.

    Args:
        constants: Construction constants shared by all stages.
        registry: Archetype registry used for dispatch.
    """

    def __init__(
        self,
        constants: ConstructionConstants | None = None,
        registry: ArchetypeRegistry | None = None,
    ) -> None:
        self.constants = constants or DEFAULT_CONSTANTS
        self.registry = registry or archetype_registry
        self.normalizer = ConfigNormalizer(self.registry)
        self.decomposer = PanelDecomposer(self.constants)
        self.edge_banding = EdgeBandAssignor()
        self.hardware = HardwareEstimator(self.constants)
        self.aggregator = MaterialAggregator()

    def calculate(
        self,
        spec: ModuleSpec,
        extra_hardware: Iterable[ExtraHardwareLine] = (),
        catalog: MaterialCatalog | None = None,
    ) -> CalculationResult:
        """Calculate a module.

        Args:
            spec: Module specification.
            extra_hardware: Hardware lines merged into the bill of materials.
            catalog: Catalog used for material units.

        Returns:
            CalculationResult with merged panels and material rows.

        Raises:
            ValidationError: If the module spec is not physically valid.
            UnknownModuleType: If the module type has no archetype rule.
            ConfigurationError: If a mandatory material role is unset.
        """
        normalized = self.normalizer.normalize(spec)
        rule = self.registry.get(normalized.module_type)
        logger.debug(f"Calculating {rule.module_type.value}: {rule.description}")

        decomposition = self.decomposer.decompose(normalized, rule)
        self.edge_banding.assign(decomposition.panels)
        hardware = self.hardware.estimate(normalized, decomposition, rule.floor_standing)
        materials = self.aggregator.aggregate(
            decomposition.panels,
            normalized.components,
            hardware,
            extra_hardware,
            catalog,
        )
        return CalculationResult(
            pieces=tuple(decomposition.panels),
            materials=materials,
        )


def calculate_module(
    spec: ModuleSpec,
    extra_hardware: Iterable[ExtraHardwareLine] = (),
    catalog: MaterialCatalog | None = None,
    constants: ConstructionConstants | None = None,
) -> CalculationResult:
    """Calculate a module with a default-configured calculator."""
    return ModuleCalculator(constants).calculate(spec, extra_hardware, catalog)
