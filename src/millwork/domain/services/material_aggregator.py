"""Material aggregation service."""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from ..entities import Panel
from ..errors import ValidationError
from ..value_objects import (
    BOARD_ROLES,
    ComponentSelection,
    ExtraHardwareLine,
    MaterialCatalog,
    MaterialRole,
    MaterialUsageRow,
)
from .edge_banding import EdgeBandAssignor
from .hardware_estimator import HardwareItem

logger = logging.getLogger(__name__)


class MaterialAggregator:
    """Collapses panel, edge and hardware usage into one row per material.

    Rows appear in order of first contribution: board area, then edge
    band, then hardware, then extra lines that match no existing row.
    """

    def aggregate(
        self,
        panels: Sequence[Panel],
        components: ComponentSelection,
        hardware: Iterable[HardwareItem] = (),
        extra_hardware: Iterable[ExtraHardwareLine] = (),
        catalog: MaterialCatalog | None = None,
    ) -> tuple[MaterialUsageRow, ...]:
        """Aggregate usage of every material.

        Args:
            panels: Banded panels of the cut list.
            components: Material bound to each role.
            hardware: Hardware and consumable items.
            extra_hardware: Externally supplied lines, summed into matching
                rows or appended as new rows.
            catalog: Catalog used to look up material units.

        Returns:
            One usage row per distinct material id.

        Raises:
            ValidationError: If an extra line has no material id or a
                negative quantity.
        """
        quantities: dict[str, float] = {}
        units: dict[str, str] = {}

        def add(material_id: str, quantity: float, default_unit: str) -> None:
            if material_id not in quantities:
                quantities[material_id] = 0.0
                units[material_id] = (
                    catalog.unit_for(material_id, default_unit)
                    if catalog is not None
                    else default_unit
                )
            quantities[material_id] += quantity

        for panel in panels:
            role = BOARD_ROLES[panel.thickness_class]
            material_id = components.get(role)
            if material_id is None:
                continue
            add(material_id, panel.area_m2, role.default_unit)

        edge_id = components.get(MaterialRole.EDGE)
        if edge_id is not None:
            banded = EdgeBandAssignor.consumption_m(panels)
            if banded > 0:
                add(edge_id, banded, MaterialRole.EDGE.default_unit)

        for item in hardware:
            add(item.material_id, item.quantity, item.role.default_unit)

        for line in extra_hardware:
            material_id = (line.material_id or "").strip()
            if not material_id:
                raise ValidationError("Extra hardware line has no material id")
            if line.quantity < 0:
                raise ValidationError(
                    f"Extra hardware quantity for '{material_id}' cannot be negative"
                )
            if material_id in quantities:
                logger.debug(f"Merging extra {line.quantity} into {material_id}")
            add(material_id, line.quantity, "u")

        return tuple(
            MaterialUsageRow(material_id, quantity, units[material_id])
            for material_id, quantity in quantities.items()
        )
