"""Domain entities for module calculation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .value_objects import (
    HIDDEN,
    ComponentSelection,
    Dimensions,
    DoorType,
    EdgeExposure,
    MaterialUsageRow,
    ModuleConfig,
    ModuleType,
    ThicknessClass,
)


@dataclass(frozen=True)
class ModuleSpec:
    """Everything needed to decompose one furniture module.

    Attributes:
        module_type: Archetype tag. Plain strings are accepted and resolved
            by the normalizer.
        dimensions: Overall width, height and depth in millimetres.
        config: Requested feature counts.
        components: Material bound to each role.
        door_type: Board or glass doors.
        open_module: When True the module has no fronts at all.
    """

    module_type: ModuleType | str
    dimensions: Dimensions
    config: ModuleConfig = field(default_factory=ModuleConfig)
    components: ComponentSelection = field(default_factory=ComponentSelection)
    door_type: DoorType = DoorType.BOARD
    open_module: bool = False


@dataclass
class Panel:
    """One rectangular board piece of the cut list.

    Attributes:
        name: Label of the piece (e.g. "Side", "Door").
        length: Length in millimetres.
        width: Width in millimetres.
        quantity: Number of identical pieces.
        thickness_class: Board class the piece is cut from.
        exposure: Edge topology declared by the archetype.
        edge_l1: First length edge is banded.
        edge_l2: Second length edge is banded.
        edge_w1: First width edge is banded.
        edge_w2: Second width edge is banded.
    """

    name: str
    length: int
    width: int
    quantity: int = 1
    thickness_class: ThicknessClass = ThicknessClass.STRUCTURAL
    exposure: EdgeExposure = HIDDEN
    edge_l1: bool = False
    edge_l2: bool = False
    edge_w1: bool = False
    edge_w2: bool = False

    def __post_init__(self) -> None:
        if self.length <= 0 or self.width <= 0:
            raise ValueError("Panel dimensions must be positive")
        if self.quantity < 1:
            raise ValueError("Quantity must be at least 1")

    @property
    def edge_pattern(self) -> tuple[bool, bool, bool, bool]:
        return (self.edge_l1, self.edge_l2, self.edge_w1, self.edge_w2)

    @property
    def area_m2(self) -> float:
        """Board area of all pieces in square metres."""
        return self.length * self.width * self.quantity / 1_000_000

    @property
    def banded_length_m(self) -> float:
        """Edge band needed by all pieces in linear metres."""
        per_piece = (
            self.length * (int(self.edge_l1) + int(self.edge_l2))
            + self.width * (int(self.edge_w1) + int(self.edge_w2))
        )
        return per_piece * self.quantity / 1000

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "quantity": self.quantity,
            "length": self.length,
            "width": self.width,
            "thickness_class": self.thickness_class.value,
            "edge_l1": self.edge_l1,
            "edge_l2": self.edge_l2,
            "edge_w1": self.edge_w1,
            "edge_w2": self.edge_w2,
        }


@dataclass(frozen=True)
class CalculationResult:
    """Cut list and bill of materials of one module.

    Attributes:
        pieces: Panels in generation order, duplicates merged.
        materials: One usage row per distinct material id.
    """

    pieces: tuple[Panel, ...] = field(default_factory=tuple)
    materials: tuple[MaterialUsageRow, ...] = field(default_factory=tuple)

    def material(self, material_id: str) -> MaterialUsageRow | None:
        """Return the usage row for a material, if present."""
        for row in self.materials:
            if row.material_id == material_id:
                return row
        return None

    @property
    def piece_count(self) -> int:
        return sum(piece.quantity for piece in self.pieces)

    @property
    def board_area_m2(self) -> float:
        return sum(piece.area_m2 for piece in self.pieces)

    def to_dict(self) -> dict[str, Any]:
        return {
            "pieces": [piece.to_dict() for piece in self.pieces],
            "materials": [
                {
                    "material_id": row.material_id,
                    "quantity": row.quantity,
                    "unit": row.unit,
                }
                for row in self.materials
            ],
        }
