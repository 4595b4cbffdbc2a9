"""Tests for PanelDecomposer.

Expected sizes follow the default construction constants: 18 mm boards,
3 mm back, 3 mm door gap, 20 mm shelf setback.
"""

from __future__ import annotations

import pytest

from millwork.domain import (
    ConfigNormalizer,
    ModuleSpec,
    PanelDecomposer,
    ValidationError,
    archetype_registry,
)
from millwork.domain.archetypes import ArchetypeLayout, ArchetypeRegistry
from millwork.domain.archetypes.carcass import fixed
from millwork.domain.services.panel_decomposer import Decomposition, FrontSize, round_mm
from millwork.domain.value_objects import (
    ALL_EDGES,
    FRONT_EDGE,
    HIDDEN,
    Dimensions,
    DoorType,
    ModuleConfig,
    ModuleType,
    ThicknessClass,
)


def decompose(
    module_type: ModuleType,
    dimensions: Dimensions,
    config: ModuleConfig | None = None,
    **kwargs,
) -> Decomposition:
    spec = ConfigNormalizer().normalize(
        ModuleSpec(module_type, dimensions, config or ModuleConfig(), **kwargs)
    )
    return PanelDecomposer().decompose(spec, archetype_registry.get(spec.module_type))


def sizes(decomposition: Decomposition) -> list[tuple[str, int, int, int]]:
    return [(p.name, p.length, p.width, p.quantity) for p in decomposition.panels]


class TestRoundMm:
    """Tests for millimetre rounding."""

    @pytest.mark.parametrize(
        "value,expected",
        [(175.5, 176), (175.49, 175), (122.85, 123), (396.5, 397), (2.5, 3), (764.0, 764)],
    )
    def test_halves_round_up(self, value: float, expected: int) -> None:
        assert round_mm(value) == expected


class TestCarcassSizing:
    """Tests for joint conventions and carcass sizing."""

    def test_base_cabinet(self) -> None:
        result = decompose(
            ModuleType.BASE_CABINET, Dimensions(800, 720, 580), ModuleConfig(doors=2, shelves=1)
        )
        assert sizes(result) == [
            ("Side", 720, 577, 2),
            ("Bottom", 764, 577, 1),
            ("Back", 796, 716, 1),
            ("Shelf", 764, 557, 1),
            ("Door", 720, 397, 2),
        ]
        assert result.piece_count == 7

    def test_sides_outer_top_and_bottom_fit_between_sides(self) -> None:
        result = decompose(
            ModuleType.WALL_CABINET, Dimensions(800, 720, 320), ModuleConfig(doors=2, shelves=1)
        )
        assert sizes(result) == [
            ("Side", 720, 317, 2),
            ("Top", 764, 317, 1),
            ("Bottom", 764, 317, 1),
            ("Back", 796, 716, 1),
            ("Shelf", 764, 297, 1),
            ("Door", 720, 397, 2),
        ]

    def test_top_outer_top_caps_sides(self) -> None:
        result = decompose(ModuleType.DRAWER_CHEST, Dimensions(800, 720, 450))
        assert sizes(result) == [
            ("Side", 702, 447, 2),
            ("Top", 800, 447, 1),
            ("Bottom", 764, 447, 1),
            ("Back", 796, 716, 1),
        ]

    def test_panels_outer_top_and_bottom_cap_sides(self) -> None:
        result = decompose(ModuleType.TV_RACK, Dimensions(1600, 500, 400))
        assert sizes(result)[:3] == [
            ("Side", 464, 397, 2),
            ("Top", 1600, 397, 1),
            ("Bottom", 1600, 397, 1),
        ]

    def test_table_frame_without_back(self) -> None:
        result = decompose(ModuleType.DESK, Dimensions(1200, 750, 600))
        assert sizes(result) == [
            ("Top", 1200, 600, 1),
            ("Side", 732, 600, 2),
            ("Back Apron", 1164, 300, 1),
        ]
        assert result.panels[0].thickness_class is ThicknessClass.VISIBLE


class TestInterior:
    """Tests for divisions, shelves and hanging rods."""

    def test_divisions_split_the_interior(self) -> None:
        result = decompose(
            ModuleType.TV_RACK,
            Dimensions(1600, 500, 400),
            ModuleConfig(shelves=1, divisions=1),
        )
        by_name = {p.name: p for p in result.panels}
        assert (by_name["Division"].length, by_name["Division"].width) == (464, 397)
        # (1564 - 18) / 2 compartments
        assert (by_name["Shelf"].length, by_name["Shelf"].width) == (773, 377)

    def test_rod_spans_one_compartment(self) -> None:
        result = decompose(
            ModuleType.WARDROBE,
            Dimensions(1800, 2200, 550),
            ModuleConfig(divisions=1, hanging_rods=2),
        )
        # (1764 - 18) / 2 - 2 * 10
        assert result.rod_length == 853

    def test_no_rod_without_rods(self) -> None:
        result = decompose(ModuleType.WARDROBE, Dimensions(1800, 2200, 550))
        assert result.rod_length == 0


class TestFronts:
    """Tests for door and drawer apportioning."""

    def test_drawers_fill_opening_without_doors(self) -> None:
        result = decompose(
            ModuleType.DRAWER_CHEST, Dimensions(800, 720, 450), ModuleConfig(drawers=4)
        )
        assert sizes(result)[4:] == [
            ("Drawer Front", 797, 176, 4),
            ("Drawer Side", 435, 123, 8),
            ("Drawer Back", 702, 123, 4),
            ("Drawer Bottom", 738, 435, 4),
        ]
        assert result.drawer_count == 4

    def test_drawers_above_doors_take_standard_height(self) -> None:
        result = decompose(
            ModuleType.BASE_CABINET,
            Dimensions(800, 720, 580),
            ModuleConfig(doors=2, drawers=1),
        )
        by_name = {p.name: p for p in result.panels}
        assert (by_name["Drawer Front"].length, by_name["Drawer Front"].width) == (797, 180)
        assert (by_name["Door"].length, by_name["Door"].width) == (540, 397)
        assert result.doors == (FrontSize(397, 540), FrontSize(397, 540))

    def test_drawers_dealt_over_columns(self) -> None:
        result = decompose(
            ModuleType.TV_RACK,
            Dimensions(1600, 500, 400),
            ModuleConfig(doors=2, drawers=1, divisions=1),
        )
        by_name = {p.name: p for p in result.panels}
        front = by_name["Drawer Front"]
        assert (front.length, front.width, front.quantity) == (797, 180, 1)
        assert (by_name["Drawer Bottom"].length, by_name["Drawer Bottom"].width) == (747, 385)
        assert (by_name["Door"].length, by_name["Door"].width) == (284, 797)

    def test_drawer_band_only(self) -> None:
        result = decompose(
            ModuleType.WORKSTATION,
            Dimensions(1400, 750, 600),
            ModuleConfig(drawers=1, divisions=1),
        )
        front = next(p for p in result.panels if p.name == "Drawer Front")
        assert (front.length, front.width) == (697, 180)

    def test_side_by_side_drawers(self) -> None:
        result = decompose(
            ModuleType.DRAWER_BED_BASE,
            Dimensions(1400, 350, 1900),
            ModuleConfig(drawers=4, divisions=1),
        )
        assert sizes(result) == [
            ("Platform", 1400, 1900, 1),
            ("End Panel", 1400, 332, 2),
            ("Division", 1864, 332, 1),
            ("Drawer Front", 929, 332, 4),
            ("Drawer Side", 679, 232, 8),
            ("Drawer Back", 870, 232, 4),
            ("Drawer Bottom", 906, 679, 4),
        ]

    def test_corner_drawers_fit_one_leg(self) -> None:
        result = decompose(
            ModuleType.CORNER_BASE_CABINET,
            Dimensions(900, 720, 900),
            ModuleConfig(doors=2, drawers=2, shelves=1),
        )
        assert sizes(result)[-5:] == [
            ("Door", 360, 317, 2),
            ("Drawer Front", 637, 180, 2),
            # leg depth 580 - 3 back - 12 slide clearance
            ("Drawer Side", 565, 126, 4),
            ("Drawer Back", 578, 126, 2),
            ("Drawer Bottom", 614, 565, 2),
        ]
        assert result.drawer_count == 2

    def test_glass_doors_have_no_panel(self) -> None:
        result = decompose(
            ModuleType.BASE_CABINET,
            Dimensions(800, 720, 580),
            ModuleConfig(doors=2),
            door_type=DoorType.GLASS,
        )
        assert "Door" not in [p.name for p in result.panels]
        assert result.glass_doors == (FrontSize(397, 720), FrontSize(397, 720))
        assert result.doors == result.glass_doors

    def test_open_module_has_no_fronts(self) -> None:
        result = decompose(
            ModuleType.BASE_CABINET,
            Dimensions(800, 720, 580),
            ModuleConfig(doors=2, drawers=2),
            open_module=True,
        )
        assert result.doors == ()
        assert result.drawer_count == 0
        assert [p.name for p in result.panels] == ["Side", "Bottom", "Back"]


class TestMergeAndLimits:
    """Tests for merging identical panels and undersized modules."""

    @pytest.fixture
    def registry(self) -> ArchetypeRegistry:
        registry = ArchetypeRegistry()

        @registry.register(ModuleType.HEADBOARD)
        def cleats(dimensions, config, constants) -> ArchetypeLayout:
            return ArchetypeLayout(
                descriptors=(
                    fixed("Cleat", 100, 50),
                    fixed("Cleat", 100, 50, quantity=2),
                    fixed("Cleat", 100, 50, exposure=FRONT_EDGE),
                    fixed("Cleat", 100, 50, thickness_class=ThicknessClass.VISIBLE),
                    fixed("Cleat", 100.4, 50, exposure=ALL_EDGES),
                    fixed("Cleat", 99.6, 50, exposure=ALL_EDGES),
                ),
            )

        return registry

    def test_identical_panels_are_merged(self, registry: ArchetypeRegistry) -> None:
        spec = ModuleSpec(ModuleType.HEADBOARD, Dimensions(100, 100, 100))
        result = PanelDecomposer().decompose(spec, registry.get(ModuleType.HEADBOARD))
        assert [(p.quantity, p.exposure, p.thickness_class) for p in result.panels] == [
            (3, HIDDEN, ThicknessClass.STRUCTURAL),
            (1, FRONT_EDGE, ThicknessClass.STRUCTURAL),
            (1, HIDDEN, ThicknessClass.VISIBLE),
            (2, ALL_EDGES, ThicknessClass.STRUCTURAL),
        ]
        assert all(p.length == 100 for p in result.panels)
        assert result.piece_count == 7

    def test_too_small_module_raises(self) -> None:
        with pytest.raises(ValidationError, match="too small: 'Bottom'"):
            decompose(ModuleType.BASE_CABINET, Dimensions(30, 720, 580))

    def test_door_gap_larger_than_leaf_raises(self) -> None:
        with pytest.raises(ValidationError, match="'Door'"):
            decompose(ModuleType.WARDROBE, Dimensions(60, 2200, 550), ModuleConfig(doors=20))
