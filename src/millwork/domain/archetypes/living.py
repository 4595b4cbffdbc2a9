"""Living room, office and shop archetypes."""

from __future__ import annotations

from ..constants import ConstructionConstants
from ..value_objects import (
    ALL_EDGES,
    FRONT_EDGE,
    HIDDEN,
    Dimensions,
    Feature,
    JointConvention,
    ModuleConfig,
    ModuleType,
    PanelRole,
    ThicknessClass,
)
from .carcass import carcass, fixed, fronts, interior
from .layout import ArchetypeLayout, PanelDescriptor
from .registry import archetype_registry


def _visible_top() -> PanelDescriptor:
    return PanelDescriptor("Top", PanelRole.TOP, ThicknessClass.VISIBLE, ALL_EDGES)


def _sides() -> PanelDescriptor:
    return PanelDescriptor(
        "Side", PanelRole.SIDE, ThicknessClass.STRUCTURAL, FRONT_EDGE, quantity=2
    )


def _table_frame(dimensions: Dimensions, constants: ConstructionConstants) -> list[PanelDescriptor]:
    """Visible top over two panel legs braced by a back apron."""
    return [
        _visible_top(),
        _sides(),
        fixed(
            "Back Apron",
            dimensions.width - 2 * constants.structural_thickness,
            constants.apron_height,
            exposure=FRONT_EDGE,
        ),
    ]


@archetype_registry.register(
    ModuleType.TV_RACK,
    features=(Feature.DOORS, Feature.DRAWERS, Feature.SHELVES, Feature.DIVISIONS),
)
def tv_rack(
    dimensions: Dimensions, config: ModuleConfig, constants: ConstructionConstants
) -> ArchetypeLayout:
    """Low media unit with top and bottom capping the sides."""
    joints = JointConvention.PANELS_OUTER
    t = constants.structural_thickness
    return ArchetypeLayout(
        descriptors=tuple(carcass(joints) + interior(config) + fronts(config)),
        joints=joints,
        depth_inset=constants.back_thickness,
        front_opening=(dimensions.width, dimensions.height - 2 * t),
    )


@archetype_registry.register(ModuleType.DESK)
def desk(
    dimensions: Dimensions, config: ModuleConfig, constants: ConstructionConstants
) -> ArchetypeLayout:
    """Writing desk on panel legs."""
    return ArchetypeLayout(
        descriptors=tuple(_table_frame(dimensions, constants)),
        joints=JointConvention.TOP_OUTER,
    )


@archetype_registry.register(ModuleType.TABLE)
def table(
    dimensions: Dimensions, config: ModuleConfig, constants: ConstructionConstants
) -> ArchetypeLayout:
    """Table on panel legs."""
    return ArchetypeLayout(
        descriptors=tuple(_table_frame(dimensions, constants)),
        joints=JointConvention.TOP_OUTER,
    )


@archetype_registry.register(
    ModuleType.WORKSTATION,
    features=(Feature.DOORS, Feature.DRAWERS, Feature.SHELVES, Feature.DIVISIONS),
)
def workstation(
    dimensions: Dimensions, config: ModuleConfig, constants: ConstructionConstants
) -> ArchetypeLayout:
    """Desk with storage below the worktop.

    Drawers always take the standard front height at the top of their
    column, leaving knee room below when there are no doors.
    """
    return ArchetypeLayout(
        descriptors=tuple(
            _table_frame(dimensions, constants) + interior(config) + fronts(config)
        ),
        joints=JointConvention.TOP_OUTER,
        front_opening=(
            dimensions.width,
            dimensions.height - constants.visible_thickness,
        ),
        drawer_band_only=True,
    )


@archetype_registry.register(
    ModuleType.SERVICE_COUNTER,
    features=(Feature.DOORS, Feature.DRAWERS, Feature.SHELVES, Feature.DIVISIONS),
)
def service_counter(
    dimensions: Dimensions, config: ModuleConfig, constants: ConstructionConstants
) -> ArchetypeLayout:
    """Reception counter, closed on the customer side.

    The front panel fits between the sides under the top; storage opens
    towards the staff side.
    """
    t = constants.structural_thickness
    tv = constants.visible_thickness
    descriptors = [
        _visible_top(),
        _sides(),
        PanelDescriptor("Bottom", PanelRole.BOTTOM, ThicknessClass.STRUCTURAL, FRONT_EDGE),
        fixed(
            "Front Panel",
            dimensions.width - 2 * t,
            dimensions.height - tv,
            thickness_class=ThicknessClass.VISIBLE,
            exposure=HIDDEN,
        ),
    ]
    return ArchetypeLayout(
        descriptors=tuple(descriptors + interior(config) + fronts(config)),
        joints=JointConvention.TOP_OUTER,
        depth_inset=tv,
        front_opening=(dimensions.width, dimensions.height - tv),
    )
