"""Adapter to convert ModuleConfiguration to domain objects.

The configuration schema mirrors the JSON file; the domain works with
frozen value objects. These functions translate one into the other.
"""

from millwork.application.config.schema import ModuleConfiguration
from millwork.domain.constants import DEFAULT_CONSTANTS, ConstructionConstants
from millwork.domain.entities import ModuleSpec
from millwork.domain.value_objects import (
    ComponentSelection,
    Dimensions,
    ExtraHardwareLine,
    ModuleConfig,
)


def config_to_module_spec(config: ModuleConfiguration) -> ModuleSpec:
    """Convert a ModuleConfiguration to a domain ModuleSpec.

    Example:
        >>> config = load_config(Path("base-cabinet.json"))
        >>> spec = config_to_module_spec(config)
        >>> result = ModuleCalculator().calculate(spec)
    """
    counts = config.config
    return ModuleSpec(
        module_type=config.module_type,
        dimensions=Dimensions(
            width=config.dimensions.width,
            height=config.dimensions.height,
            depth=config.dimensions.depth,
        ),
        config=ModuleConfig(
            doors=counts.doors,
            drawers=counts.drawers,
            shelves=counts.shelves,
            divisions=counts.divisions,
            hanging_rods=counts.hanging_rods,
        ),
        components=ComponentSelection.from_mapping(config.components),
        door_type=config.door_type,
        open_module=config.open_module,
    )


def config_to_constants(config: ModuleConfiguration) -> ConstructionConstants:
    """Return the default constants with the config's overrides applied."""
    if config.construction is None:
        return DEFAULT_CONSTANTS
    return DEFAULT_CONSTANTS.with_overrides(config.construction.overrides())


def config_to_extra_hardware(config: ModuleConfiguration) -> tuple[ExtraHardwareLine, ...]:
    return tuple(
        ExtraHardwareLine(material_id=line.material_id, quantity=line.quantity)
        for line in config.extra_hardware
    )
