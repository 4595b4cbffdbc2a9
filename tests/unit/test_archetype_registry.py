"""Tests for the archetype registry."""

from __future__ import annotations

import pytest

from millwork.domain import UnknownModuleType
from millwork.domain.archetypes import (
    ArchetypeLayout,
    ArchetypeRegistry,
    archetype_registry,
)
from millwork.domain.value_objects import Feature, ModuleType


def _empty_layout(dimensions, config, constants) -> ArchetypeLayout:
    """Layout with no panels."""
    return ArchetypeLayout()


class TestArchetypeRegistry:
    """Tests for a registry built from scratch."""

    @pytest.fixture
    def registry(self) -> ArchetypeRegistry:
        return ArchetypeRegistry()

    def test_register_returns_function_unchanged(self, registry: ArchetypeRegistry) -> None:
        decorated = registry.register(ModuleType.DESK)(_empty_layout)
        assert decorated is _empty_layout

    def test_rule_metadata(self, registry: ArchetypeRegistry) -> None:
        registry.register(
            ModuleType.WALL_CABINET,
            features=(Feature.DOORS, Feature.SHELVES),
            floor_standing=False,
        )(_empty_layout)

        rule = registry.get(ModuleType.WALL_CABINET)
        assert rule.module_type is ModuleType.WALL_CABINET
        assert rule.build is _empty_layout
        assert rule.features == frozenset({Feature.DOORS, Feature.SHELVES})
        assert rule.supports(Feature.DOORS)
        assert not rule.supports(Feature.DRAWERS)
        assert rule.floor_standing is False
        assert rule.description == "Layout with no panels."

    def test_duplicate_registration_raises(self, registry: ArchetypeRegistry) -> None:
        registry.register(ModuleType.DESK)(_empty_layout)
        with pytest.raises(ValueError, match="already registered"):
            registry.register(ModuleType.DESK)(_empty_layout)

    def test_get_by_tag(self, registry: ArchetypeRegistry) -> None:
        registry.register(ModuleType.TABLE)(_empty_layout)
        assert registry.get("mesa").module_type is ModuleType.TABLE
        assert registry.get(" mesa ").module_type is ModuleType.TABLE

    def test_get_unknown_tag(self, registry: ArchetypeRegistry) -> None:
        registry.register(ModuleType.TABLE)(_empty_layout)
        with pytest.raises(UnknownModuleType) as exc_info:
            registry.get("sofa")
        assert exc_info.value.module_type == "sofa"
        assert exc_info.value.available == ["mesa"]

    def test_get_known_but_unregistered_type(self, registry: ArchetypeRegistry) -> None:
        with pytest.raises(UnknownModuleType):
            registry.get(ModuleType.CRIB)

    def test_list_follows_declaration_order(self, registry: ArchetypeRegistry) -> None:
        registry.register(ModuleType.TABLE)(_empty_layout)
        registry.register(ModuleType.BASE_CABINET)(_empty_layout)
        assert registry.list() == [ModuleType.BASE_CABINET, ModuleType.TABLE]

    def test_verify_complete_reports_missing_types(self, registry: ArchetypeRegistry) -> None:
        registry.register(ModuleType.TABLE)(_empty_layout)
        assert ModuleType.TABLE not in registry.missing()
        assert len(registry.missing()) == len(ModuleType) - 1
        with pytest.raises(RuntimeError, match="bajo-mesada"):
            registry.verify_complete()


class TestDefaultRegistry:
    """Tests for the registry populated by the archetype modules."""

    def test_every_module_type_has_a_rule(self) -> None:
        assert archetype_registry.missing() == []
        assert archetype_registry.list() == list(ModuleType)

    def test_every_rule_has_a_description(self) -> None:
        for module_type in ModuleType:
            assert archetype_registry.get(module_type).description

    @pytest.mark.parametrize(
        "module_type",
        [
            ModuleType.WALL_CABINET,
            ModuleType.CORNER_WALL_CABINET,
            ModuleType.HANGING_VANITY,
            ModuleType.HEADBOARD,
            ModuleType.MICROWAVE_STAND,
        ],
    )
    def test_wall_mounted_archetypes(self, module_type: ModuleType) -> None:
        assert archetype_registry.get(module_type).floor_standing is False

    def test_floor_standing_archetype(self) -> None:
        assert archetype_registry.get(ModuleType.BASE_CABINET).floor_standing is True

    def test_wardrobe_supports_every_feature(self) -> None:
        assert archetype_registry.get(ModuleType.WARDROBE).features == frozenset(Feature)

    def test_hanging_rods_are_wardrobe_only(self) -> None:
        supporting = [
            t for t in ModuleType
            if archetype_registry.get(t).supports(Feature.HANGING_RODS)
        ]
        assert supporting == [ModuleType.WARDROBE]

    @pytest.mark.parametrize(
        "module_type",
        [ModuleType.DESK, ModuleType.TABLE, ModuleType.HEADBOARD, ModuleType.CRIB],
    )
    def test_archetypes_without_features(self, module_type: ModuleType) -> None:
        assert archetype_registry.get(module_type).features == frozenset()
