"""Module type, dimensions and configuration counts."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping


class ModuleType(str, Enum):
    """Closed set of furniture archetypes.

    Values are the tags used by module specifications and config files.
    """

    BASE_CABINET = "bajo-mesada"
    CORNER_BASE_CABINET = "bajo-mesada-esquinero"
    WALL_CABINET = "alacena"
    CORNER_WALL_CABINET = "alacena-esquinera"
    WARDROBE = "placard"
    TALL_CABINET = "columna-horno"
    HANGING_VANITY = "vanitory-colgante"
    DRAWER_CHEST = "cajonera"
    TV_RACK = "rack-tv"
    DESK = "escritorio"
    DRAWER_BED_BASE = "cama-cajones"
    SHOE_CABINET = "zapatero"
    TABLE = "mesa"
    HEADBOARD = "respaldo-cama"
    CRIB = "cuna-bebe"
    MICROWAVE_STAND = "porta-microondas"
    WORKSTATION = "estacion-trabajo"
    SERVICE_COUNTER = "barra-atencion"

    @property
    def label(self) -> str:
        """Human-readable archetype name."""
        return self.name.replace("_", " ").title()


class DoorType(str, Enum):
    """Construction of door leaves.

    Attributes:
        BOARD: Door cut from the visible board, edge banded on all sides.
        GLASS: Aluminium profile frame holding a glass pane.
    """

    BOARD = "board"
    GLASS = "glass"


class Feature(str, Enum):
    """Optional features an archetype may support."""

    DOORS = "doors"
    DRAWERS = "drawers"
    SHELVES = "shelves"
    DIVISIONS = "divisions"
    HANGING_RODS = "hanging_rods"


@dataclass(frozen=True)
class Dimensions:
    """Overall module size in millimetres."""

    width: int
    height: int
    depth: int


@dataclass(frozen=True)
class ModuleConfig:
    """Feature counts requested for a module."""

    doors: int = 0
    drawers: int = 0
    shelves: int = 0
    divisions: int = 0
    hanging_rods: int = 0

    def count(self, feature: Feature) -> int:
        """Return the requested count for a feature."""
        return getattr(self, feature.value)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ModuleConfig:
        """Build a config from a mapping, accepting ``hangingRods`` as an alias."""
        return cls(
            doors=data.get("doors", 0),
            drawers=data.get("drawers", 0),
            shelves=data.get("shelves", 0),
            divisions=data.get("divisions", 0),
            hanging_rods=data.get("hanging_rods", data.get("hangingRods", 0)),
        )
