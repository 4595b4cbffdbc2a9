"""Starting dimensions and feature counts for each archetype."""

from dataclasses import dataclass

from millwork.domain.value_objects import Dimensions, ModuleConfig, ModuleType


@dataclass(frozen=True)
class ModulePreset:
    """Typical size and configuration of an archetype.

    Attributes:
        description: One-line description shown by ``templates list``.
        dimensions: Default width, height and depth in millimetres.
        config: Default feature counts.
    """

    description: str
    dimensions: Dimensions
    config: ModuleConfig


def _preset(
    description: str,
    width: int,
    height: int,
    depth: int,
    doors: int = 0,
    drawers: int = 0,
    shelves: int = 0,
    divisions: int = 0,
    hanging_rods: int = 0,
) -> ModulePreset:
    return ModulePreset(
        description=description,
        dimensions=Dimensions(width, height, depth),
        config=ModuleConfig(doors, drawers, shelves, divisions, hanging_rods),
    )


PRESETS: dict[ModuleType, ModulePreset] = {
    ModuleType.BASE_CABINET: _preset(
        "Kitchen base cabinet with two doors and a shelf", 800, 720, 580, doors=2, shelves=1
    ),
    ModuleType.CORNER_BASE_CABINET: _preset(
        "L-shaped kitchen corner base cabinet", 900, 720, 900, doors=2, shelves=1
    ),
    ModuleType.WALL_CABINET: _preset(
        "Kitchen wall cabinet with two doors", 800, 720, 320, doors=2, shelves=1
    ),
    ModuleType.CORNER_WALL_CABINET: _preset(
        "L-shaped kitchen corner wall cabinet", 600, 720, 600, doors=2, shelves=2
    ),
    ModuleType.WARDROBE: _preset(
        "Wardrobe with drawers and hanging rods",
        1800, 2200, 550, doors=2, drawers=4, shelves=4, divisions=1, hanging_rods=2,
    ),
    ModuleType.TALL_CABINET: _preset(
        "Tall oven column", 600, 2100, 580, doors=2, shelves=2
    ),
    ModuleType.HANGING_VANITY: _preset(
        "Wall-hung bathroom vanity", 800, 500, 450, doors=2
    ),
    ModuleType.DRAWER_CHEST: _preset(
        "Chest of four drawers", 800, 720, 450, drawers=4
    ),
    ModuleType.TV_RACK: _preset(
        "Low TV rack", 1600, 500, 400, doors=2, drawers=1, shelves=1, divisions=1
    ),
    ModuleType.DESK: _preset("Writing desk", 1200, 750, 600),
    ModuleType.DRAWER_BED_BASE: _preset(
        "Bed base with drawers on both sides", 1400, 350, 1900, drawers=4, divisions=1
    ),
    ModuleType.SHOE_CABINET: _preset(
        "Shoe cabinet", 800, 1200, 350, doors=2, shelves=5
    ),
    ModuleType.TABLE: _preset("Dining table", 1400, 750, 800),
    ModuleType.HEADBOARD: _preset("Wall-mounted headboard", 1500, 1200, 40),
    ModuleType.CRIB: _preset("Baby crib", 1240, 900, 640),
    ModuleType.MICROWAVE_STAND: _preset(
        "Wall-hung microwave stand", 600, 400, 400, shelves=1
    ),
    ModuleType.WORKSTATION: _preset(
        "Desk with a drawer column", 1400, 750, 600, drawers=1, divisions=1
    ),
    ModuleType.SERVICE_COUNTER: _preset(
        "Reception counter", 1800, 1100, 700, shelves=1, divisions=1
    ),
}

# Catalog ids from the bundled materials.json
DEFAULT_COMPONENTS: dict[str, str] = {
    "structural": "mat-1",
    "visible": "mat-1",
    "back": "mat-8",
    "drawer": "mat-1",
    "edge": "mat-12",
    "hinge": "mat-17",
    "slide": "mat-16",
    "rod": "mat-36",
    "rod-support": "mat-38",
    "handle": "mat-19",
    "glass-profile": "mat-63",
    "glass-panel": "mat-67",
    "screw-long": "mat-22",
    "screw-short": "mat-23",
    "glue": "mat-26",
    "film": "mat-66",
    "leg": "mat-21",
}


def get_preset(module_type: ModuleType) -> ModulePreset:
    return PRESETS[module_type]
