"""Kitchen and bathroom archetypes.

Base, wall, corner and tall cabinets, the microwave stand and the hanging
vanity. All of them are SIDES_OUTER carcasses with a back nailed over the
rear edges.
"""

from __future__ import annotations

from ..constants import ConstructionConstants
from ..errors import ValidationError
from ..value_objects import (
    FRONT_EDGE,
    HIDDEN,
    Dimensions,
    Feature,
    JointConvention,
    ModuleConfig,
    ModuleType,
    ThicknessClass,
)
from .carcass import carcass, fixed, fronts, interior
from .layout import ArchetypeLayout
from .registry import archetype_registry

_JOINTS = JointConvention.SIDES_OUTER


@archetype_registry.register(
    ModuleType.BASE_CABINET,
    features=(Feature.DOORS, Feature.DRAWERS, Feature.SHELVES),
)
def base_cabinet(
    dimensions: Dimensions, config: ModuleConfig, constants: ConstructionConstants
) -> ArchetypeLayout:
    """Under-counter cabinet, open top for the countertop."""
    return ArchetypeLayout(
        descriptors=tuple(
            carcass(_JOINTS, top=False) + interior(config) + fronts(config)
        ),
        joints=_JOINTS,
        depth_inset=constants.back_thickness,
        front_opening=(dimensions.width, dimensions.height),
    )


@archetype_registry.register(
    ModuleType.WALL_CABINET,
    features=(Feature.DOORS, Feature.DRAWERS, Feature.SHELVES),
    floor_standing=False,
)
def wall_cabinet(
    dimensions: Dimensions, config: ModuleConfig, constants: ConstructionConstants
) -> ArchetypeLayout:
    """Wall-hung cabinet with top and bottom between the sides."""
    return ArchetypeLayout(
        descriptors=tuple(carcass(_JOINTS) + interior(config) + fronts(config)),
        joints=_JOINTS,
        depth_inset=constants.back_thickness,
        front_opening=(dimensions.width, dimensions.height),
    )


def _corner(
    dimensions: Dimensions,
    config: ModuleConfig,
    constants: ConstructionConstants,
    leg_depth: int,
    closed_top: bool,
) -> ArchetypeLayout:
    """L-shaped corner carcass with two legs of depth ``leg_depth``.

    The module width and depth are the outer extents of the two legs. The
    sides close the free end of each leg; the bottom (and top) are cut as a
    full rectangle and notched, and the two backs run along the walls.
    The door opening spans the inside faces of both legs. Drawer boxes
    run across that opening and are limited to the depth of one leg.
    """
    t = constants.structural_thickness
    bt = constants.back_thickness
    inset = constants.back_inset
    width, height, depth = dimensions.width, dimensions.height, dimensions.depth

    if width <= leg_depth or depth <= leg_depth:
        raise ValidationError(
            f"Corner module width and depth must exceed the leg depth of {leg_depth} mm"
        )

    descriptors = [
        fixed("Side", height, leg_depth - bt, exposure=FRONT_EDGE, quantity=2),
        fixed("Bottom", width - bt - t, depth - bt - t, exposure=FRONT_EDGE),
    ]
    if closed_top:
        descriptors.append(fixed("Top", width - bt - t, depth - bt - t, exposure=FRONT_EDGE))
    descriptors.extend(
        [
            fixed("Back", width - 2 * inset, height - 2 * inset, thickness_class=ThicknessClass.BACK),
            fixed(
                "Back",
                depth - bt - 2 * inset,
                height - 2 * inset,
                thickness_class=ThicknessClass.BACK,
            ),
        ]
    )
    if config.shelves > 0:
        clearance = constants.shelf_front_clearance
        descriptors.append(
            fixed(
                "Shelf",
                width - bt - t - clearance,
                depth - bt - t - clearance,
                exposure=FRONT_EDGE,
                quantity=config.shelves,
            )
        )
    descriptors.extend(fronts(config))

    opening_width = (width - leg_depth) + (depth - leg_depth)
    return ArchetypeLayout(
        descriptors=tuple(descriptors),
        joints=_JOINTS,
        depth_inset=bt,
        front_opening=(opening_width, height),
        interior_width=opening_width,
        drawer_depth=leg_depth - bt,
    )


@archetype_registry.register(
    ModuleType.CORNER_BASE_CABINET,
    features=(Feature.DOORS, Feature.DRAWERS, Feature.SHELVES),
)
def corner_base_cabinet(
    dimensions: Dimensions, config: ModuleConfig, constants: ConstructionConstants
) -> ArchetypeLayout:
    """L-shaped under-counter corner cabinet."""
    return _corner(
        dimensions, config, constants, constants.corner_base_leg_depth, closed_top=False
    )


@archetype_registry.register(
    ModuleType.CORNER_WALL_CABINET,
    features=(Feature.DOORS, Feature.DRAWERS, Feature.SHELVES),
    floor_standing=False,
)
def corner_wall_cabinet(
    dimensions: Dimensions, config: ModuleConfig, constants: ConstructionConstants
) -> ArchetypeLayout:
    """L-shaped wall-hung corner cabinet."""
    return _corner(
        dimensions, config, constants, constants.corner_wall_leg_depth, closed_top=True
    )


@archetype_registry.register(
    ModuleType.TALL_CABINET,
    features=(Feature.DOORS, Feature.DRAWERS, Feature.SHELVES),
)
def tall_cabinet(
    dimensions: Dimensions, config: ModuleConfig, constants: ConstructionConstants
) -> ArchetypeLayout:
    """Full-height column with an open appliance niche."""
    t = constants.structural_thickness
    niche = constants.oven_niche_height
    if dimensions.height <= niche:
        raise ValidationError(
            f"Tall cabinet height must exceed the oven niche height of {niche} mm"
        )

    oven_shelves = fixed(
        "Oven Shelf",
        dimensions.width - 2 * t,
        dimensions.depth - constants.back_thickness,
        exposure=FRONT_EDGE,
        quantity=2,
    )
    return ArchetypeLayout(
        descriptors=tuple(
            carcass(_JOINTS) + [oven_shelves] + interior(config) + fronts(config)
        ),
        joints=_JOINTS,
        depth_inset=constants.back_thickness,
        front_opening=(dimensions.width, dimensions.height - niche),
    )


@archetype_registry.register(
    ModuleType.MICROWAVE_STAND,
    features=(Feature.DOORS, Feature.DRAWERS, Feature.SHELVES),
    floor_standing=False,
)
def microwave_stand(
    dimensions: Dimensions, config: ModuleConfig, constants: ConstructionConstants
) -> ArchetypeLayout:
    """Wall-hung box for a microwave oven."""
    return ArchetypeLayout(
        descriptors=tuple(carcass(_JOINTS) + interior(config) + fronts(config)),
        joints=_JOINTS,
        depth_inset=constants.back_thickness,
        front_opening=(dimensions.width, dimensions.height),
    )


@archetype_registry.register(
    ModuleType.HANGING_VANITY,
    features=(Feature.DOORS, Feature.DRAWERS),
    floor_standing=False,
)
def hanging_vanity(
    dimensions: Dimensions, config: ModuleConfig, constants: ConstructionConstants
) -> ArchetypeLayout:
    """Wall-hung vanity with rails under the basin top."""
    t = constants.structural_thickness
    rail_length = dimensions.width - 2 * t
    rails = [
        fixed("Front Rail", rail_length, constants.rail_width, exposure=FRONT_EDGE),
        fixed("Rear Rail", rail_length, constants.rail_width, exposure=HIDDEN),
    ]
    return ArchetypeLayout(
        descriptors=tuple(carcass(_JOINTS, top=False) + rails + fronts(config)),
        joints=_JOINTS,
        depth_inset=constants.back_thickness,
        front_opening=(dimensions.width, dimensions.height),
    )
