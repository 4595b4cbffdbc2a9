"""Material roles, catalog entries and usage rows."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Iterator, Mapping

from ..errors import ValidationError
from ._panels import ThicknessClass


class MaterialRole(str, Enum):
    """Roles a material can be bound to in a component selection."""

    STRUCTURAL = "structural"
    VISIBLE = "visible"
    BACK = "back"
    DRAWER = "drawer"
    EDGE = "edge"
    HINGE = "hinge"
    SLIDE = "slide"
    ROD = "rod"
    ROD_SUPPORT = "rod-support"
    HANDLE = "handle"
    GLASS_PROFILE = "glass-profile"
    GLASS_PANEL = "glass-panel"
    SCREW_LONG = "screw-long"
    SCREW_SHORT = "screw-short"
    GLUE = "glue"
    FILM = "film"
    LEG = "leg"

    @property
    def default_unit(self) -> str:
        """Unit used when the bound material is not in the catalog."""
        return _DEFAULT_UNITS.get(self, "u")

    @classmethod
    def parse(cls, value: str | MaterialRole) -> MaterialRole:
        """Parse a role name, accepting underscores and a few aliases."""
        if isinstance(value, MaterialRole):
            return value
        key = value.strip().lower().replace("_", "-")
        key = _ROLE_ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            valid = ", ".join(role.value for role in cls)
            raise ValidationError(
                f"Unknown material role '{value}'. Must be one of: {valid}"
            ) from None


_DEFAULT_UNITS: dict[MaterialRole, str] = {
    MaterialRole.STRUCTURAL: "m²",
    MaterialRole.VISIBLE: "m²",
    MaterialRole.BACK: "m²",
    MaterialRole.DRAWER: "m²",
    MaterialRole.GLASS_PANEL: "m²",
    MaterialRole.EDGE: "ml",
    MaterialRole.ROD: "ml",
    MaterialRole.GLASS_PROFILE: "ml",
    MaterialRole.FILM: "ml",
    MaterialRole.GLUE: "kg",
}

_ROLE_ALIASES: dict[str, str] = {
    "drawer-board": "drawer",
    "hanging-rod": "rod",
    "hangingrod": "rod",
    "hanging-rod-support": "rod-support",
    "hangingrodsupport": "rod-support",
    "glassdoorprofile": "glass-profile",
    "glasspanel": "glass-panel",
    "screwfix50": "screw-long",
    "screwfix30": "screw-short",
    "woodglue": "glue",
    "packagingfilm": "film",
}

BOARD_ROLES: dict[ThicknessClass, MaterialRole] = {
    ThicknessClass.STRUCTURAL: MaterialRole.STRUCTURAL,
    ThicknessClass.VISIBLE: MaterialRole.VISIBLE,
    ThicknessClass.BACK: MaterialRole.BACK,
    ThicknessClass.DRAWER: MaterialRole.DRAWER,
}


@dataclass(frozen=True)
class ComponentSelection:
    """Binding of material roles to material identifiers.

    Roles that are missing or bound to an empty identifier are unset.
    """

    materials: Mapping[MaterialRole, str] = field(default_factory=dict)

    def get(self, role: MaterialRole) -> str | None:
        """Return the material id bound to a role, or None if unset."""
        material_id = self.materials.get(role)
        if material_id is None:
            return None
        material_id = material_id.strip()
        return material_id or None

    def is_set(self, role: MaterialRole) -> bool:
        return self.get(role) is not None

    def board_for(self, thickness_class: ThicknessClass) -> str | None:
        """Return the board material bound to a thickness class."""
        return self.get(BOARD_ROLES[thickness_class])

    def __iter__(self) -> Iterator[tuple[MaterialRole, str]]:
        for role in MaterialRole:
            material_id = self.get(role)
            if material_id is not None:
                yield role, material_id

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ComponentSelection:
        """Build a selection from role names to material ids."""
        materials: dict[MaterialRole, str] = {}
        for key, value in data.items():
            role = MaterialRole.parse(key)
            materials[role] = "" if value is None else str(value)
        return cls(materials=materials)


@dataclass(frozen=True)
class Material:
    """A catalog material.

    Attributes:
        id: Unique material identifier.
        code: Short commercial code (e.g. "TAB-001").
        description: Human-readable description.
        type: Material family (board, edge band, hardware, ...).
        unit: Unit of measure quantities are expressed in (m², ml, u, kg).
    """

    id: str
    code: str = ""
    description: str = ""
    type: str = ""
    unit: str = "u"


class MaterialCatalog:
    """Lookup of catalog materials by identifier."""

    def __init__(self, materials: Iterable[Material] = ()) -> None:
        self._materials: dict[str, Material] = {}
        for material in materials:
            self._materials[material.id] = material

    def get(self, material_id: str) -> Material | None:
        return self._materials.get(material_id)

    def unit_for(self, material_id: str, default: str = "u") -> str:
        """Return the declared unit of a material, or ``default`` if unknown."""
        material = self._materials.get(material_id)
        return material.unit if material is not None else default

    def describe(self, material_id: str) -> str:
        material = self._materials.get(material_id)
        if material is None or not material.description:
            return material_id
        return material.description

    def __contains__(self, material_id: object) -> bool:
        return material_id in self._materials

    def __iter__(self) -> Iterator[Material]:
        return iter(self._materials.values())

    def __len__(self) -> int:
        return len(self._materials)


@dataclass(frozen=True)
class ExtraHardwareLine:
    """Externally supplied hardware merged into a result."""

    material_id: str
    quantity: float


@dataclass(frozen=True)
class MaterialUsageRow:
    """Aggregated usage of one material."""

    material_id: str
    quantity: float
    unit: str

    def __post_init__(self) -> None:
        if self.quantity < 0:
            raise ValueError("Material quantity cannot be negative")
