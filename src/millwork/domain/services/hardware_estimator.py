"""Hardware and consumables estimation service."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..constants import DEFAULT_CONSTANTS, ConstructionConstants
from ..entities import ModuleSpec
from ..errors import ConfigurationError
from ..value_objects import MaterialRole
from .panel_decomposer import Decomposition

__all__ = ["HardwareItem", "HardwareEstimator"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HardwareItem:
    """Hardware or consumable required by a module.

    Attributes:
        role: Material role the item is bound to.
        material_id: Material selected for the role.
        quantity: Quantity in the role's unit (units, metres, kg, m²).
    """

    role: MaterialRole
    material_id: str
    quantity: float


class HardwareEstimator:
    """Estimates discrete hardware and scaled consumables of a module.

    Discrete hardware (hinges, slides, legs, handles, rods and supports,
    glass door kits) follows from the normalized configuration; screws,
    glue and film scale with the piece count and board area.

    A role that is unset in the component selection produces no item,
    except for the roles a requested feature cannot be built without:
    hinges for doors, slides for drawers, rods and supports for hanging
    rods, and the profile and glass of glass doors. Those raise
    ConfigurationError.

    Args:
        constants: Construction constants (hardware coefficients).
    """

    def __init__(self, constants: ConstructionConstants | None = None) -> None:
        self.constants = constants or DEFAULT_CONSTANTS

    def estimate(
        self,
        spec: ModuleSpec,
        decomposition: Decomposition,
        floor_standing: bool,
    ) -> list[HardwareItem]:
        """Estimate hardware for a normalized spec and its decomposition.

        Args:
            spec: Normalized module spec.
            decomposition: Panels and front geometry of the module.
            floor_standing: Whether the archetype stands on legs.

        Returns:
            Hardware items in a stable order.

        Raises:
            ConfigurationError: If a mandatory role is unset.
        """
        k = self.constants
        config = spec.config
        components = spec.components
        items: list[HardwareItem] = []

        def add(role: MaterialRole, quantity: float, basis: str | None = None) -> None:
            material_id = components.get(role)
            if material_id is None:
                logger.debug(f"No material selected for {role.value}; skipping")
                return
            if basis:
                logger.debug(f"{role.value} {material_id}: {quantity:g} ({basis})")
            items.append(HardwareItem(role, material_id, quantity))

        def require(role: MaterialRole, reason: str) -> None:
            if not components.is_set(role):
                raise ConfigurationError(role.value, reason)

        doors = len(decomposition.doors)
        drawers = decomposition.drawer_count

        if doors:
            require(MaterialRole.HINGE, f"{doors} doors need hinges")
            hinges = sum(
                k.hinges_per_tall_door if door.height > k.tall_door_threshold else k.hinges_per_door
                for door in decomposition.doors
            )
            add(MaterialRole.HINGE, hinges, f"{doors} doors")

        if drawers:
            require(MaterialRole.SLIDE, f"{drawers} drawers need slides")
            add(MaterialRole.SLIDE, drawers, "one pair per drawer")

        if floor_standing:
            add(MaterialRole.LEG, k.legs_per_module)

        if doors + drawers:
            add(MaterialRole.HANDLE, doors + drawers)

        rods = config.hanging_rods
        if rods:
            require(MaterialRole.ROD, f"{rods} hanging rods need rod material")
            require(MaterialRole.ROD_SUPPORT, f"{rods} hanging rods need supports")
            add(
                MaterialRole.ROD,
                rods * decomposition.rod_length / 1000,
                f"{rods} x {decomposition.rod_length} mm",
            )
            add(MaterialRole.ROD_SUPPORT, 2 * rods)

        if decomposition.glass_doors:
            count = len(decomposition.glass_doors)
            require(MaterialRole.GLASS_PROFILE, f"{count} glass doors need a profile")
            require(MaterialRole.GLASS_PANEL, f"{count} glass doors need glass")
            margin = 2 * k.glass_frame_margin
            profile_m = sum(2 * (d.width + d.height) for d in decomposition.glass_doors) / 1000
            glass_m2 = sum(
                max(d.width - margin, 0) * max(d.height - margin, 0)
                for d in decomposition.glass_doors
            ) / 1_000_000
            add(MaterialRole.GLASS_PROFILE, profile_m, "door perimeters")
            add(MaterialRole.GLASS_PANEL, glass_m2, "door areas inside the frame")

        pieces = decomposition.piece_count
        area = decomposition.board_area_m2
        add(MaterialRole.SCREW_LONG, pieces * k.long_screws_per_panel, f"{pieces} pieces")
        add(MaterialRole.SCREW_SHORT, pieces * k.short_screws_per_panel, f"{pieces} pieces")
        add(MaterialRole.GLUE, area * k.glue_kg_per_m2, f"{area:.3f} m² of board")
        add(MaterialRole.FILM, area * k.film_m_per_m2, f"{area:.3f} m² of board")

        logger.debug(f"Estimated {len(items)} hardware lines")
        return items
