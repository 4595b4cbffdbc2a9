"""Bedroom and hall archetypes."""

from __future__ import annotations

import math

from ..constants import ConstructionConstants
from ..value_objects import (
    ALL_EDGES,
    END_EDGES,
    HIDDEN,
    LONG_EDGES,
    Dimensions,
    Feature,
    FrontLayout,
    JointConvention,
    ModuleConfig,
    ModuleType,
    ThicknessClass,
)
from .carcass import carcass, fixed, fronts, interior
from .layout import ArchetypeLayout
from .registry import archetype_registry


@archetype_registry.register(
    ModuleType.WARDROBE,
    features=tuple(Feature),
)
def wardrobe(
    dimensions: Dimensions, config: ModuleConfig, constants: ConstructionConstants
) -> ArchetypeLayout:
    """Full-height wardrobe with hanging rods."""
    joints = JointConvention.SIDES_OUTER
    return ArchetypeLayout(
        descriptors=tuple(carcass(joints) + interior(config) + fronts(config)),
        joints=joints,
        depth_inset=constants.back_thickness,
        front_opening=(dimensions.width, dimensions.height),
    )


@archetype_registry.register(
    ModuleType.DRAWER_CHEST,
    features=(Feature.DRAWERS,),
)
def drawer_chest(
    dimensions: Dimensions, config: ModuleConfig, constants: ConstructionConstants
) -> ArchetypeLayout:
    """Chest of stacked drawers under a capping top."""
    joints = JointConvention.TOP_OUTER
    return ArchetypeLayout(
        descriptors=tuple(carcass(joints) + fronts(config)),
        joints=joints,
        depth_inset=constants.back_thickness,
        front_opening=(
            dimensions.width,
            dimensions.height - constants.structural_thickness,
        ),
    )


@archetype_registry.register(
    ModuleType.SHOE_CABINET,
    features=(Feature.DOORS, Feature.SHELVES),
)
def shoe_cabinet(
    dimensions: Dimensions, config: ModuleConfig, constants: ConstructionConstants
) -> ArchetypeLayout:
    """Shallow shoe cabinet under a capping top."""
    joints = JointConvention.TOP_OUTER
    return ArchetypeLayout(
        descriptors=tuple(carcass(joints) + interior(config) + fronts(config)),
        joints=joints,
        depth_inset=constants.back_thickness,
        front_opening=(
            dimensions.width,
            dimensions.height - constants.structural_thickness,
        ),
    )


@archetype_registry.register(
    ModuleType.DRAWER_BED_BASE,
    features=(Feature.DRAWERS, Feature.DIVISIONS),
)
def drawer_bed_base(
    dimensions: Dimensions, config: ModuleConfig, constants: ConstructionConstants
) -> ArchetypeLayout:
    """Bed base with drawers opening along the long sides.

    The module width runs across the bed and the depth along it. End
    panels close the head and foot; a central spine (one division) lets
    drawers open from both sides. Drawers sit side by side along the bed
    length.
    """
    t = constants.structural_thickness
    width, height, depth = dimensions.width, dimensions.height, dimensions.depth
    descriptors = [
        fixed("Platform", width, depth, exposure=ALL_EDGES),
        fixed("End Panel", width, height - t, exposure=END_EDGES, quantity=2),
    ]
    if config.divisions > 0:
        descriptors.append(
            fixed("Division", depth - 2 * t, height - t, quantity=config.divisions)
        )
    descriptors.extend(fronts(config))
    return ArchetypeLayout(
        descriptors=tuple(descriptors),
        joints=JointConvention.TOP_OUTER,
        front_opening=(depth - 2 * t, height - t),
        front_layout=FrontLayout.SIDE_BY_SIDE,
        interior_width=width,
        drawer_columns=2 if config.divisions > 0 else 1,
    )


@archetype_registry.register(
    ModuleType.HEADBOARD,
    floor_standing=False,
)
def headboard(
    dimensions: Dimensions, config: ModuleConfig, constants: ConstructionConstants
) -> ArchetypeLayout:
    """Wall-mounted headboard panel on two cleats."""
    return ArchetypeLayout(
        descriptors=(
            fixed(
                "Headboard",
                dimensions.width,
                dimensions.height,
                thickness_class=ThicknessClass.VISIBLE,
                exposure=ALL_EDGES,
            ),
            fixed(
                "Mounting Cleat",
                dimensions.width - 2 * constants.cleat_inset,
                constants.cleat_width,
                quantity=2,
            ),
        ),
    )


@archetype_registry.register(ModuleType.CRIB)
def crib(
    dimensions: Dimensions, config: ModuleConfig, constants: ConstructionConstants
) -> ArchetypeLayout:
    """Baby crib with slatted long sides.

    Each long side has a top and a bottom rail with slats between them.
    The slat count keeps every gap at or below the maximum slat gap.
    """
    t = constants.visible_thickness
    width, height, depth = dimensions.width, dimensions.height, dimensions.depth
    inner = width - 2 * t
    rail = constants.crib_rail_width
    slat = constants.crib_slat_width
    gap = constants.crib_slat_max_gap
    slats_per_side = max(1, math.ceil((inner - gap) / (slat + gap)))

    return ArchetypeLayout(
        descriptors=(
            fixed(
                "End Panel",
                depth,
                height,
                thickness_class=ThicknessClass.VISIBLE,
                exposure=ALL_EDGES,
                quantity=2,
            ),
            fixed(
                "Rail",
                inner,
                rail,
                thickness_class=ThicknessClass.VISIBLE,
                exposure=LONG_EDGES,
                quantity=4,
            ),
            fixed(
                "Slat",
                height - constants.crib_base_height - 2 * rail,
                slat,
                thickness_class=ThicknessClass.VISIBLE,
                exposure=LONG_EDGES,
                quantity=2 * slats_per_side,
            ),
            fixed("Mattress Base", inner, depth - 2 * t, exposure=HIDDEN),
        ),
    )
