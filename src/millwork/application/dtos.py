"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from millwork.domain import CalculationResult, MaterialCatalog, ModuleSpec


@dataclass
class ModuleOutput:
    """Output DTO of a module calculation.

    Attributes:
        spec: Module specification that was calculated.
        result: Cut list and bill of materials, or None if the calculation
            failed.
        catalog: Catalog used for units and descriptions, if any.
        errors: Error messages if the calculation failed.
    """

    spec: ModuleSpec
    result: CalculationResult | None = None
    catalog: MaterialCatalog | None = None
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the module was calculated successfully."""
        return len(self.errors) == 0 and self.result is not None
