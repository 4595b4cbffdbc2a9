"""Construction constants for panel decomposition and hardware estimation.

All lengths are in millimetres. The defaults describe 18 mm melamine
carcasses with a 3 mm hardboard back nailed over the rear edges.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Mapping

from .value_objects import ThicknessClass


@dataclass(frozen=True)
class ConstructionConstants:
    """Fixed allowances and coefficients used by the engine.

    Attributes:
        structural_thickness: Carcass board thickness.
        visible_thickness: Front and exposed board thickness.
        back_thickness: Back board thickness.
        drawer_thickness: Drawer box board thickness.
        door_gap: Width taken off each door leaf and drawer front.
        shelf_front_clearance: Setback of shelves from the front edge.
        back_inset: Rebate inset taken off each edge of the back.
        drawer_slide_clearance: Depth taken off drawer boxes for the slides.
        drawer_side_clearance: Gap per side between box and carcass.
        drawer_box_height_ratio: Box side height as a fraction of the front.
        drawer_front_height: Front height of one drawer sharing a front
            opening with doors.
        rod_support_offset: Space taken by each rod support.
        tall_door_threshold: Door height above which a third hinge is fitted.
        hinges_per_door: Hinges on a standard door.
        hinges_per_tall_door: Hinges on a door above the threshold.
        legs_per_module: Legs under a floor-standing module.
        glass_frame_margin: Overlap of the aluminium frame on each glass edge.
        long_screws_per_panel: Long screws per cut piece.
        short_screws_per_panel: Short screws per cut piece.
        glue_kg_per_m2: Glue per square metre of board.
        film_m_per_m2: Packaging film per square metre of board.
        corner_base_leg_depth: Depth of each leg of a corner base cabinet.
        corner_wall_leg_depth: Depth of each leg of a corner wall cabinet.
        oven_niche_height: Height of the appliance niche of a tall cabinet.
        rail_width: Width of vanity rails.
        apron_height: Height of desk and table aprons.
        cleat_width: Width of headboard mounting cleats.
        cleat_inset: Distance from each headboard end to its cleats.
        crib_rail_width: Width of crib rails.
        crib_base_height: Height of the crib mattress base above the floor.
        crib_slat_width: Width of one crib slat.
        crib_slat_max_gap: Maximum gap between crib slats.
    """

    structural_thickness: int = 18
    visible_thickness: int = 18
    back_thickness: int = 3
    drawer_thickness: int = 18

    door_gap: int = 3
    shelf_front_clearance: int = 20
    back_inset: int = 2

    drawer_slide_clearance: int = 12
    drawer_side_clearance: int = 13
    drawer_box_height_ratio: float = 0.7
    drawer_front_height: int = 180

    rod_support_offset: int = 10

    tall_door_threshold: int = 1200
    hinges_per_door: int = 2
    hinges_per_tall_door: int = 3
    legs_per_module: int = 4
    glass_frame_margin: int = 20

    long_screws_per_panel: int = 4
    short_screws_per_panel: int = 6
    glue_kg_per_m2: float = 0.05
    film_m_per_m2: float = 1.5

    corner_base_leg_depth: int = 580
    corner_wall_leg_depth: int = 320
    oven_niche_height: int = 600
    rail_width: int = 100
    apron_height: int = 300
    cleat_width: int = 80
    cleat_inset: int = 100
    crib_rail_width: int = 80
    crib_base_height: int = 200
    crib_slat_width: int = 40
    crib_slat_max_gap: int = 60

    def thickness(self, thickness_class: ThicknessClass) -> int:
        """Return the board thickness of a thickness class."""
        return {
            ThicknessClass.STRUCTURAL: self.structural_thickness,
            ThicknessClass.VISIBLE: self.visible_thickness,
            ThicknessClass.BACK: self.back_thickness,
            ThicknessClass.DRAWER: self.drawer_thickness,
        }[thickness_class]

    def with_overrides(self, overrides: Mapping[str, Any]) -> ConstructionConstants:
        """Return a copy with some constants replaced.

        Raises:
            ValueError: If an override names an unknown constant.
        """
        known = {f.name for f in fields(self)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise ValueError(f"Unknown construction constants: {', '.join(unknown)}")
        return replace(self, **dict(overrides))


DEFAULT_CONSTANTS = ConstructionConstants()
