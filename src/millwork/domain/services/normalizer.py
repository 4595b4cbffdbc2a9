"""Validation and normalization of module specifications."""

from __future__ import annotations

import logging
from dataclasses import replace

from ..archetypes import ArchetypeRegistry, archetype_registry
from ..entities import ModuleSpec
from ..errors import ValidationError
from ..value_objects import Dimensions, DoorType, Feature, ModuleConfig

logger = logging.getLogger(__name__)


def _is_whole_number(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class ConfigNormalizer:
    """Validates a module spec and clamps its configuration to the archetype.

    Normalization resolves the module type tag, rejects physically invalid
    input, zeroes the fronts of open modules, and zeroes every requested
    feature the archetype does not support. Unsupported features are
    ignored rather than rejected; a warning is logged for each.

    Args:
        registry: Registry used to resolve module types and features.
    """

    def __init__(self, registry: ArchetypeRegistry | None = None) -> None:
        self.registry = registry or archetype_registry

    def normalize(self, spec: ModuleSpec) -> ModuleSpec:
        """Return a normalized copy of ``spec``.

        Raises:
            UnknownModuleType: If the module type has no archetype rule.
            ValidationError: If a dimension or count is invalid.
        """
        rule = self.registry.get(spec.module_type)
        self._validate_dimensions(spec.dimensions)
        self._validate_counts(spec.config)
        door_type = self._resolve_door_type(spec.door_type)

        config = spec.config
        if spec.open_module and (config.doors or config.drawers):
            logger.debug(
                f"Open {rule.module_type.value} module: ignoring "
                f"{config.doors} doors and {config.drawers} drawers"
            )
            config = replace(config, doors=0, drawers=0)

        clamped = {}
        for feature in Feature:
            requested = config.count(feature)
            if requested and not rule.supports(feature):
                logger.warning(
                    f"{rule.module_type.value} does not support {feature.value}; "
                    f"ignoring {requested} requested"
                )
                clamped[feature.value] = 0
        if clamped:
            config = replace(config, **clamped)

        return replace(
            spec,
            module_type=rule.module_type,
            config=config,
            door_type=door_type,
        )

    def _validate_dimensions(self, dimensions: Dimensions) -> None:
        for name in ("width", "height", "depth"):
            value = getattr(dimensions, name)
            if not _is_whole_number(value):
                raise ValidationError(
                    f"Module {name} must be a whole number of millimetres, got {value!r}"
                )
            if value <= 0:
                raise ValidationError(f"Module {name} must be positive, got {value}")

    def _validate_counts(self, config: ModuleConfig) -> None:
        for feature in Feature:
            value = config.count(feature)
            if not _is_whole_number(value):
                raise ValidationError(
                    f"Number of {feature.value} must be a whole number, got {value!r}"
                )
            if value < 0:
                raise ValidationError(f"Number of {feature.value} cannot be negative, got {value}")

    def _resolve_door_type(self, door_type: DoorType | str) -> DoorType:
        if isinstance(door_type, DoorType):
            return door_type
        try:
            return DoorType(str(door_type).strip().lower())
        except ValueError:
            valid = ", ".join(d.value for d in DoorType)
            raise ValidationError(
                f"Unknown door type '{door_type}'. Must be one of: {valid}"
            ) from None
