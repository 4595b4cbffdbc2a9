"""Panel descriptors and archetype layouts produced by archetype rules."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..value_objects import (
    EdgeExposure,
    FrontLayout,
    JointConvention,
    PanelRole,
    ThicknessClass,
)


@dataclass(frozen=True)
class PanelDescriptor:
    """An unpositioned, unsized panel emitted by an archetype rule.

    The decomposer turns descriptors into concrete panels. Carcass roles
    (SIDE, TOP, BOTTOM, BACK, SHELF, DIVISION) are sized from the module
    dimensions and the layout's joint convention, and repeated
    ``quantity`` times. Front roles (DOOR, DRAWER_*) are sized and counted
    from the configuration. FIXED descriptors carry their own size.

    Attributes:
        name: Label of the resulting panel.
        role: How the panel is sized.
        thickness_class: Board class the panel is cut from.
        exposure: Edges exposed in the assembled module.
        quantity: Number of pieces (carcass and FIXED roles).
        length: Explicit length in mm (FIXED role only).
        width: Explicit width in mm (FIXED role only).
    """

    name: str
    role: PanelRole
    thickness_class: ThicknessClass
    exposure: EdgeExposure
    quantity: int = 1
    length: float | None = None
    width: float | None = None

    def __post_init__(self) -> None:
        if self.role is PanelRole.FIXED and (self.length is None or self.width is None):
            raise ValueError(f"Fixed panel '{self.name}' needs a length and a width")


@dataclass(frozen=True)
class ArchetypeLayout:
    """Topology of one archetype for a given size and configuration.

    Attributes:
        descriptors: Panels that exist in this archetype, in cut-list order.
        joints: Which members win the carcass butt joints.
        depth_inset: Depth taken by a back or front panel fitted over or
            between the carcass edges.
        front_opening: (width, height) covered by doors and drawer fronts,
            or None for archetypes without fronts.
        front_layout: Arrangement of drawers within a drawer column.
        interior_width: Width split into compartments by the divisions.
            Defaults to the width between the two sides.
        drawer_columns: Number of drawer columns. Defaults to one column
            per compartment.
        drawer_band_only: When True drawers always use the standard front
            height instead of sharing the whole opening.
        drawer_depth: Depth available to stacked drawer boxes. Defaults to
            the carcass depth.
    """

    descriptors: tuple[PanelDescriptor, ...] = field(default_factory=tuple)
    joints: JointConvention = JointConvention.SIDES_OUTER
    depth_inset: int = 0
    front_opening: tuple[float, float] | None = None
    front_layout: FrontLayout = FrontLayout.STACKED
    interior_width: float | None = None
    drawer_columns: int | None = None
    drawer_band_only: bool = False
    drawer_depth: float | None = None

    def first(self, role: PanelRole) -> PanelDescriptor | None:
        for descriptor in self.descriptors:
            if descriptor.role is role:
                return descriptor
        return None
