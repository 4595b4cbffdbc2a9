"""Application commands orchestrating the module calculation engine."""

from __future__ import annotations

import logging
from typing import Iterable

from millwork.application.config import (
    ModuleConfiguration,
    config_to_constants,
    config_to_extra_hardware,
    config_to_module_spec,
)
from millwork.application.dtos import ModuleOutput
from millwork.domain import (
    ConstructionConstants,
    ExtraHardwareLine,
    MaterialCatalog,
    ModuleCalculationError,
    ModuleCalculator,
    ModuleSpec,
)

logger = logging.getLogger(__name__)


class CalculateModuleCommand:
    """Command to calculate the cut list and materials of one module.

    Calculation errors are returned in the output DTO instead of raised,
    so callers can report them without handling domain exceptions.
    """

    def __init__(self, calculator: ModuleCalculator | None = None) -> None:
        self.calculator = calculator or ModuleCalculator()

    def execute(
        self,
        spec: ModuleSpec,
        extra_hardware: Iterable[ExtraHardwareLine] = (),
        catalog: MaterialCatalog | None = None,
    ) -> ModuleOutput:
        """Execute the calculation.

        Args:
            spec: Module specification.
            extra_hardware: Hardware lines merged into the bill of materials.
            catalog: Catalog used for material units.

        Returns:
            ModuleOutput with the result, or with errors if it failed.
        """
        try:
            result = self.calculator.calculate(spec, tuple(extra_hardware), catalog)
        except ModuleCalculationError as e:
            logger.debug(f"Calculation failed: {e}")
            return ModuleOutput(spec=spec, catalog=catalog, errors=[str(e)])
        return ModuleOutput(spec=spec, result=result, catalog=catalog)

    @classmethod
    def from_constants(cls, constants: ConstructionConstants) -> CalculateModuleCommand:
        return cls(ModuleCalculator(constants))


def calculate_from_config(
    config: ModuleConfiguration,
    catalog: MaterialCatalog | None = None,
) -> ModuleOutput:
    """Calculate a module described by a validated configuration.

    The configuration's construction overrides, extra hardware and
    components are all applied.
    """
    command = CalculateModuleCommand.from_constants(config_to_constants(config))
    return command.execute(
        config_to_module_spec(config),
        config_to_extra_hardware(config),
        catalog,
    )
