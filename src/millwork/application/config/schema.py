"""Pydantic configuration schema models for module specifications.

This module defines the configuration schema for JSON-based module
configuration files. It uses Pydantic v2 for validation and serialization.

The ModuleType and DoorType enums are reused from the domain layer to
ensure consistency and avoid duplication.
"""

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from millwork.domain.errors import ValidationError as DomainValidationError
from millwork.domain.value_objects import DoorType, MaterialRole, ModuleType

# Supported schema versions for configuration files
# Version 1.0: Initial schema with module, components and construction overrides
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class DimensionsConfig(BaseModel):
    """Overall module size in millimetres.

    Attributes:
        width: Module width, must be positive.
        height: Module height, must be positive.
        depth: Module depth, must be positive.
    """

    model_config = ConfigDict(extra="forbid")

    width: int = Field(..., gt=0, le=10000)
    height: int = Field(..., gt=0, le=10000)
    depth: int = Field(..., gt=0, le=10000)


class FeatureCountsConfig(BaseModel):
    """Requested feature counts.

    ``hangingRods`` is accepted as an alias of ``hanging_rods``.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    doors: int = Field(default=0, ge=0, le=20)
    drawers: int = Field(default=0, ge=0, le=40)
    shelves: int = Field(default=0, ge=0, le=40)
    divisions: int = Field(default=0, ge=0, le=20)
    hanging_rods: int = Field(
        default=0,
        ge=0,
        le=10,
        validation_alias=AliasChoices("hanging_rods", "hangingRods"),
    )


class ExtraHardwareConfig(BaseModel):
    """Hardware line merged into the bill of materials.

    Attributes:
        material_id: Catalog material identifier.
        quantity: Quantity in the material's unit.
    """

    model_config = ConfigDict(extra="forbid")

    material_id: str = Field(..., min_length=1)
    quantity: float = Field(..., ge=0)


class ConstructionConfig(BaseModel):
    """Overrides for construction constants.

    Every field is optional; unset fields keep their default value.
    Lengths are in millimetres.
    """

    model_config = ConfigDict(extra="forbid")

    structural_thickness: int | None = Field(default=None, gt=0, le=50)
    visible_thickness: int | None = Field(default=None, gt=0, le=50)
    back_thickness: int | None = Field(default=None, gt=0, le=25)
    drawer_thickness: int | None = Field(default=None, gt=0, le=50)

    door_gap: int | None = Field(default=None, ge=0, le=20)
    shelf_front_clearance: int | None = Field(default=None, ge=0, le=200)
    back_inset: int | None = Field(default=None, ge=0, le=20)

    drawer_slide_clearance: int | None = Field(default=None, ge=0, le=100)
    drawer_side_clearance: int | None = Field(default=None, ge=0, le=50)
    drawer_box_height_ratio: float | None = Field(default=None, gt=0, le=1)
    drawer_front_height: int | None = Field(default=None, gt=0, le=1000)

    rod_support_offset: int | None = Field(default=None, ge=0, le=100)

    tall_door_threshold: int | None = Field(default=None, gt=0)
    hinges_per_door: int | None = Field(default=None, gt=0, le=10)
    hinges_per_tall_door: int | None = Field(default=None, gt=0, le=10)
    legs_per_module: int | None = Field(default=None, ge=0, le=12)
    glass_frame_margin: int | None = Field(default=None, ge=0, le=100)

    long_screws_per_panel: int | None = Field(default=None, ge=0)
    short_screws_per_panel: int | None = Field(default=None, ge=0)
    glue_kg_per_m2: float | None = Field(default=None, ge=0)
    film_m_per_m2: float | None = Field(default=None, ge=0)

    corner_base_leg_depth: int | None = Field(default=None, gt=0)
    corner_wall_leg_depth: int | None = Field(default=None, gt=0)
    oven_niche_height: int | None = Field(default=None, gt=0)
    rail_width: int | None = Field(default=None, gt=0)
    apron_height: int | None = Field(default=None, gt=0)
    cleat_width: int | None = Field(default=None, gt=0)
    cleat_inset: int | None = Field(default=None, ge=0)
    crib_rail_width: int | None = Field(default=None, gt=0)
    crib_base_height: int | None = Field(default=None, ge=0)
    crib_slat_width: int | None = Field(default=None, gt=0)
    crib_slat_max_gap: int | None = Field(default=None, gt=0)

    def overrides(self) -> dict[str, Any]:
        """Return only the constants that were set."""
        return self.model_dump(exclude_none=True)


class ModuleConfiguration(BaseModel):
    """Root configuration model for a module specification.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        module_type: Archetype tag (e.g., "bajo-mesada")
        dimensions: Overall module size
        config: Requested feature counts
        components: Material id bound to each material role
        door_type: Board or glass doors
        open_module: When true the module has no doors or drawers
        extra_hardware: Hardware lines merged into the bill of materials
        construction: Optional construction constant overrides

    Example:
        >>> config = ModuleConfiguration(
        ...     schema_version="1.0",
        ...     module_type="alacena",
        ...     dimensions=DimensionsConfig(width=800, height=720, depth=320),
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    module_type: ModuleType
    dimensions: DimensionsConfig
    config: FeatureCountsConfig = Field(default_factory=FeatureCountsConfig)
    components: dict[str, str] = Field(default_factory=dict)
    door_type: DoorType = DoorType.BOARD
    open_module: bool = False
    extra_hardware: list[ExtraHardwareConfig] = Field(default_factory=list)
    construction: ConstructionConfig | None = Field(
        default=None, description="Construction constant overrides (optional)"
    )

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported.

        Newer minor versions within a supported major version are accepted.
        """
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )

    @field_validator("components")
    @classmethod
    def validate_component_roles(cls, v: dict[str, str]) -> dict[str, str]:
        """Validate that every key names a material role."""
        for role in v:
            try:
                MaterialRole.parse(role)
            except DomainValidationError as e:
                raise ValueError(str(e)) from None
        return v
