"""Protocol definition for archetype rules."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from ..value_objects import Dimensions, ModuleConfig

if TYPE_CHECKING:
    from ..constants import ConstructionConstants
    from .layout import ArchetypeLayout


class ArchetypeBuilder(Protocol):
    """Protocol for archetype rule functions.

    A rule is a pure function from the module dimensions and the normalized
    configuration to the archetype's layout: which panels exist, their
    thickness class, their exposed edges, and the joint convention. Rules
    never compute final panel sizes for carcass members; that is left to
    the panel decomposer so every archetype shares one set of joint and
    clearance conventions.

    Rules are registered with the ArchetypeRegistry under a ModuleType.

    Example:
        @archetype_registry.register(
            ModuleType.BASE_CABINET,
            features=(Feature.DOORS, Feature.SHELVES),
        )
        def base_cabinet(dimensions, config, constants):
            return ArchetypeLayout(descriptors=(...,))
    """

    def __call__(
        self,
        dimensions: Dimensions,
        config: ModuleConfig,
        constants: "ConstructionConstants",
    ) -> "ArchetypeLayout":
        """Describe the panels of the archetype.

        Args:
            dimensions: Overall module size in millimetres.
            config: Normalized feature counts (unsupported features are 0).
            constants: Construction constants (thicknesses, allowances).

        Returns:
            ArchetypeLayout with panel descriptors and joint topology.
        """
        ...
