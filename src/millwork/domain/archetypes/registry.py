"""Archetype registry mapping module types to their rules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable

from ..errors import UnknownModuleType
from ..value_objects import Feature, ModuleType
from .protocol import ArchetypeBuilder


@dataclass(frozen=True)
class ArchetypeRule:
    """A registered archetype rule.

    Attributes:
        module_type: Archetype the rule builds.
        build: Rule function returning the archetype layout.
        features: Features the archetype supports. Requested counts for any
            other feature are ignored.
        floor_standing: Whether the module stands on legs.
        description: One-line summary shown by the CLI.
    """

    module_type: ModuleType
    build: ArchetypeBuilder
    features: frozenset[Feature]
    floor_standing: bool = True
    description: str = ""

    def supports(self, feature: Feature) -> bool:
        return feature in self.features


class ArchetypeRegistry:
    """Registry of archetype rules keyed by module type.

    Rules register themselves with a decorator when their module is
    imported. The set of module types is closed, so a registry can be
    checked for completeness once all rule modules are loaded.

    Example:
        @archetype_registry.register(
            ModuleType.WALL_CABINET,
            features=(Feature.DOORS, Feature.SHELVES),
            floor_standing=False,
        )
        def wall_cabinet(dimensions, config, constants):
            ...

        rule = archetype_registry.get(ModuleType.WALL_CABINET)
        layout = rule.build(dimensions, config, constants)
    """

    def __init__(self) -> None:
        self._rules: dict[ModuleType, ArchetypeRule] = {}

    def register(
        self,
        module_type: ModuleType,
        *,
        features: Iterable[Feature] = (),
        floor_standing: bool = True,
    ) -> Callable[[ArchetypeBuilder], ArchetypeBuilder]:
        """Decorator to register an archetype rule function.

        The first line of the function's docstring becomes the rule
        description.

        Args:
            module_type: Archetype the rule builds.
            features: Features the archetype supports.
            floor_standing: Whether the module stands on legs.

        Returns:
            A decorator that registers the function and returns it unchanged.

        Raises:
            ValueError: If a rule is already registered for the module type.
        """

        def decorator(build: ArchetypeBuilder) -> ArchetypeBuilder:
            if module_type in self._rules:
                raise ValueError(f"Archetype '{module_type.value}' already registered")
            doc = (build.__doc__ or "").strip()
            self._rules[module_type] = ArchetypeRule(
                module_type=module_type,
                build=build,
                features=frozenset(features),
                floor_standing=floor_standing,
                description=doc.splitlines()[0] if doc else "",
            )
            return build

        return decorator

    def resolve(self, tag: ModuleType | str) -> ModuleType:
        """Resolve a module type tag to a ModuleType.

        Raises:
            UnknownModuleType: If the tag is not a known module type.
        """
        if isinstance(tag, ModuleType):
            return tag
        try:
            return ModuleType(str(tag).strip())
        except ValueError:
            raise UnknownModuleType(tag, [t.value for t in self.list()]) from None

    def get(self, module_type: ModuleType | str) -> ArchetypeRule:
        """Get the rule registered for a module type.

        Raises:
            UnknownModuleType: If no rule is registered for the module type.
        """
        resolved = self.resolve(module_type)
        if resolved not in self._rules:
            raise UnknownModuleType(module_type, [t.value for t in self.list()])
        return self._rules[resolved]

    def list(self) -> list[ModuleType]:
        """List registered module types in declaration order."""
        return [module_type for module_type in ModuleType if module_type in self._rules]

    def missing(self) -> list[ModuleType]:
        """List module types that have no registered rule."""
        return [module_type for module_type in ModuleType if module_type not in self._rules]

    def verify_complete(self) -> None:
        """Check that every module type has a rule.

        Raises:
            RuntimeError: If any module type is missing a rule.
        """
        missing = self.missing()
        if missing:
            names = ", ".join(module_type.value for module_type in missing)
            raise RuntimeError(f"No archetype rule registered for: {names}")


archetype_registry = ArchetypeRegistry()
