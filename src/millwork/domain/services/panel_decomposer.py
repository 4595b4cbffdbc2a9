"""Panel decomposition service.

Resolves the panel descriptors of an archetype layout into concrete,
millimetre-sized panels: applies the archetype's joint convention to the
carcass, splits the interior into compartments, apportions doors and
drawers over the front opening, and merges identical panels.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

from ..archetypes import ArchetypeLayout, ArchetypeRule, PanelDescriptor
from ..constants import DEFAULT_CONSTANTS, ConstructionConstants
from ..entities import ModuleSpec, Panel
from ..errors import ValidationError
from ..value_objects import DoorType, FrontLayout, PanelRole, ThicknessClass

logger = logging.getLogger(__name__)


def round_mm(value: float) -> int:
    """Round a length to whole millimetres, halves away from zero."""
    return int(math.floor(value + 0.5))


@dataclass(frozen=True)
class FrontSize:
    """Size of one door leaf in millimetres."""

    width: int
    height: int


@dataclass(frozen=True)
class DrawerSlot:
    """Geometry shared by the drawers of one drawer column.

    Attributes:
        count: Drawers in the column.
        front_width: Width of each drawer front.
        front_height: Height of each drawer front.
        box_width: Outside width of each drawer box.
        box_depth: Depth of each drawer box.
        side_height: Height of the box sides and back.
    """

    count: int
    front_width: float
    front_height: float
    box_width: float
    box_depth: float
    side_height: float


@dataclass
class Decomposition:
    """Panels plus the non-panel geometry the estimator needs.

    Attributes:
        panels: Merged panels in generation order.
        doors: Size of every door leaf, board or glass.
        glass_doors: Size of every glass door leaf.
        drawer_count: Total number of drawers.
        rod_length: Length of one hanging rod in mm (0 without rods).
    """

    panels: list[Panel] = field(default_factory=list)
    doors: tuple[FrontSize, ...] = ()
    glass_doors: tuple[FrontSize, ...] = ()
    drawer_count: int = 0
    rod_length: int = 0

    @property
    def piece_count(self) -> int:
        return sum(panel.quantity for panel in self.panels)

    @property
    def board_area_m2(self) -> float:
        return sum(panel.area_m2 for panel in self.panels)


@dataclass(frozen=True)
class _Carcass:
    """Resolved carcass geometry of one layout."""

    side_length: float
    top_length: float
    bottom_length: float
    depth: float
    interior_height: float
    compartments: int
    compartment_width: float


class PanelDecomposer:
    """Turns an archetype layout into concrete panels.

    Args:
        constants: Construction constants (thicknesses and allowances).
    """

    def __init__(self, constants: ConstructionConstants | None = None) -> None:
        self.constants = constants or DEFAULT_CONSTANTS

    def decompose(self, spec: ModuleSpec, rule: ArchetypeRule) -> Decomposition:
        """Decompose a normalized module spec.

        Args:
            spec: Normalized module spec.
            rule: Archetype rule of the module type.

        Returns:
            Decomposition with merged panels and front geometry.

        Raises:
            ValidationError: If the module is too small for one of its panels.
        """
        k = self.constants
        dims = spec.dimensions
        config = spec.config
        layout = rule.build(dims, config, k)
        carcass = self._resolve_carcass(spec, layout)

        door_size: FrontSize | None = None
        slots: list[DrawerSlot] = []
        if layout.front_opening is not None and (config.doors or config.drawers):
            door_size, slots = self._apportion_fronts(spec, layout, carcass)

        panels: list[Panel] = []
        for descriptor in layout.descriptors:
            panels.extend(
                self._resolve(descriptor, spec, carcass, door_size, slots)
            )

        doors: tuple[FrontSize, ...] = ()
        if door_size is not None:
            doors = (door_size,) * config.doors
        glass_doors = doors if spec.door_type is DoorType.GLASS else ()

        rod_length = 0
        if config.hanging_rods > 0:
            rod_length = self._round(
                "Hanging Rod", carcass.compartment_width - 2 * k.rod_support_offset
            )

        merged = self._merge(panels)
        logger.debug(
            f"Decomposed {rule.module_type.value} "
            f"{dims.width}x{dims.height}x{dims.depth} into "
            f"{len(merged)} panel rows ({sum(p.quantity for p in merged)} pieces)"
        )
        return Decomposition(
            panels=merged,
            doors=doors,
            glass_doors=glass_doors,
            drawer_count=sum(slot.count for slot in slots),
            rod_length=rod_length,
        )

    def _resolve_carcass(self, spec: ModuleSpec, layout: ArchetypeLayout) -> _Carcass:
        k = self.constants
        dims = spec.dimensions
        config = spec.config

        side = layout.first(PanelRole.SIDE)
        top = layout.first(PanelRole.TOP)
        bottom = layout.first(PanelRole.BOTTOM)
        side_t = k.thickness(side.thickness_class) if side else k.structural_thickness
        top_t = k.thickness(top.thickness_class) if top else 0
        bottom_t = k.thickness(bottom.thickness_class) if bottom else 0
        top_caps = top is not None and layout.joints.top_caps_sides
        bottom_caps = bottom is not None and layout.joints.bottom_caps_sides

        side_length = dims.height
        if top_caps:
            side_length -= top_t
        if bottom_caps:
            side_length -= bottom_t

        between_sides = dims.width - 2 * side_t
        interior_width = (
            layout.interior_width if layout.interior_width is not None else between_sides
        )
        compartments = config.divisions + 1
        compartment_width = (
            interior_width - config.divisions * k.structural_thickness
        ) / compartments

        return _Carcass(
            side_length=side_length,
            top_length=dims.width if top_caps else between_sides,
            bottom_length=dims.width if bottom_caps else between_sides,
            depth=dims.depth - layout.depth_inset,
            interior_height=dims.height - top_t - bottom_t,
            compartments=compartments,
            compartment_width=compartment_width,
        )

    def _apportion_fronts(
        self, spec: ModuleSpec, layout: ArchetypeLayout, carcass: _Carcass
    ) -> tuple[FrontSize | None, list[DrawerSlot]]:
        """Split the front opening between drawer columns and door leaves.

        Drawers are dealt round-robin over the drawer columns. Stacked
        drawers take a zone at the top of the opening: the whole opening
        when there are no doors, else one standard front height per drawer
        in the fullest column, capped at half the opening. Doors share the
        rest of the opening height across the full opening width.
        """
        k = self.constants
        config = spec.config
        opening_width, opening_height = layout.front_opening

        columns = layout.drawer_columns or carcass.compartments
        per_column = [
            config.drawers // columns + (1 if i < config.drawers % columns else 0)
            for i in range(columns)
        ]
        per_column = [count for count in per_column if count > 0]

        slots: list[DrawerSlot] = []
        zone = 0.0
        if layout.front_layout is FrontLayout.SIDE_BY_SIDE:
            for count in per_column:
                front_width = opening_width / count
                slots.append(
                    DrawerSlot(
                        count=count,
                        front_width=front_width - k.door_gap,
                        front_height=opening_height,
                        box_width=front_width - 2 * k.drawer_side_clearance,
                        box_depth=carcass.compartment_width - k.drawer_slide_clearance,
                        side_height=opening_height * k.drawer_box_height_ratio,
                    )
                )
        elif per_column:
            fullest = max(per_column)
            band = fullest * k.drawer_front_height
            if layout.drawer_band_only:
                zone = min(band, opening_height)
            elif config.doors == 0:
                zone = opening_height
            else:
                zone = min(band, opening_height / 2)
            drawer_depth = (
                layout.drawer_depth if layout.drawer_depth is not None else carcass.depth
            )
            for count in per_column:
                front_height = zone / count
                slots.append(
                    DrawerSlot(
                        count=count,
                        front_width=opening_width / columns - k.door_gap,
                        front_height=front_height,
                        box_width=carcass.compartment_width - 2 * k.drawer_side_clearance,
                        box_depth=drawer_depth - k.drawer_slide_clearance,
                        side_height=front_height * k.drawer_box_height_ratio,
                    )
                )

        door_size = None
        if config.doors > 0:
            door_size = FrontSize(
                width=self._round("Door", opening_width / config.doors - k.door_gap),
                height=self._round("Door", opening_height - zone),
            )
        return door_size, slots

    def _resolve(
        self,
        descriptor: PanelDescriptor,
        spec: ModuleSpec,
        carcass: _Carcass,
        door_size: FrontSize | None,
        slots: list[DrawerSlot],
    ) -> list[Panel]:
        k = self.constants
        dims = spec.dimensions
        role = descriptor.role

        if role is PanelRole.SIDE:
            return [self._panel(descriptor, carcass.side_length, carcass.depth)]
        if role is PanelRole.TOP:
            return [self._panel(descriptor, carcass.top_length, carcass.depth)]
        if role is PanelRole.BOTTOM:
            return [self._panel(descriptor, carcass.bottom_length, carcass.depth)]
        if role is PanelRole.BACK:
            return [
                self._panel(
                    descriptor,
                    dims.width - 2 * k.back_inset,
                    dims.height - 2 * k.back_inset,
                )
            ]
        if role is PanelRole.DIVISION:
            return [self._panel(descriptor, carcass.interior_height, carcass.depth)]
        if role is PanelRole.SHELF:
            return [
                self._panel(
                    descriptor,
                    carcass.compartment_width,
                    carcass.depth - k.shelf_front_clearance,
                )
            ]
        if role is PanelRole.FIXED:
            return [self._panel(descriptor, descriptor.length, descriptor.width)]
        if role is PanelRole.DOOR:
            if door_size is None or spec.door_type is DoorType.GLASS:
                return []
            return [
                self._panel(
                    descriptor, door_size.height, door_size.width, spec.config.doors
                )
            ]

        panels = []
        drawer_t = k.thickness(ThicknessClass.DRAWER)
        for slot in slots:
            if role is PanelRole.DRAWER_FRONT:
                panel = self._panel(descriptor, slot.front_width, slot.front_height, slot.count)
            elif role is PanelRole.DRAWER_SIDE:
                panel = self._panel(descriptor, slot.box_depth, slot.side_height, 2 * slot.count)
            elif role is PanelRole.DRAWER_BACK:
                panel = self._panel(
                    descriptor, slot.box_width - 2 * drawer_t, slot.side_height, slot.count
                )
            else:
                panel = self._panel(descriptor, slot.box_width, slot.box_depth, slot.count)
            panels.append(panel)
        return panels

    def _panel(
        self,
        descriptor: PanelDescriptor,
        length: float,
        width: float,
        quantity: int | None = None,
    ) -> Panel:
        return Panel(
            name=descriptor.name,
            length=self._round(descriptor.name, length),
            width=self._round(descriptor.name, width),
            quantity=descriptor.quantity if quantity is None else quantity,
            thickness_class=descriptor.thickness_class,
            exposure=descriptor.exposure,
        )

    @staticmethod
    def _round(name: str, value: float) -> int:
        rounded = round_mm(value)
        if rounded <= 0:
            raise ValidationError(
                f"Module is too small: '{name}' would measure {rounded} mm"
            )
        return rounded

    @staticmethod
    def _merge(panels: list[Panel]) -> list[Panel]:
        """Merge panels with the same name, size, edges and board class."""
        merged: dict[tuple, Panel] = {}
        for panel in panels:
            key = (
                panel.name,
                panel.length,
                panel.width,
                panel.exposure,
                panel.thickness_class,
            )
            existing = merged.get(key)
            if existing is None:
                merged[key] = panel
            else:
                existing.quantity += panel.quantity
        return list(merged.values())
