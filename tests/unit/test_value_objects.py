"""Tests for domain value objects."""

from __future__ import annotations

import pytest

from millwork.domain.errors import ValidationError
from millwork.domain.value_objects import (
    ALL_EDGES,
    FRONT_AND_ENDS,
    FRONT_EDGE,
    HIDDEN,
    ComponentSelection,
    EdgeExposure,
    Feature,
    JointConvention,
    Material,
    MaterialCatalog,
    MaterialRole,
    MaterialUsageRow,
    ModuleConfig,
    ModuleType,
    ThicknessClass,
)


class TestModuleType:
    """Tests for the ModuleType enum."""

    def test_has_eighteen_archetypes(self) -> None:
        assert len(ModuleType) == 18

    def test_values_are_tags(self) -> None:
        assert ModuleType("bajo-mesada") is ModuleType.BASE_CABINET
        assert ModuleType("barra-atencion") is ModuleType.SERVICE_COUNTER

    def test_label(self) -> None:
        assert ModuleType.CORNER_WALL_CABINET.label == "Corner Wall Cabinet"


class TestModuleConfig:
    """Tests for ModuleConfig."""

    def test_defaults_are_zero(self) -> None:
        config = ModuleConfig()
        assert all(config.count(feature) == 0 for feature in Feature)

    def test_count(self) -> None:
        config = ModuleConfig(doors=2, hanging_rods=1)
        assert config.count(Feature.DOORS) == 2
        assert config.count(Feature.HANGING_RODS) == 1

    def test_from_mapping_accepts_camel_case_rods(self) -> None:
        config = ModuleConfig.from_mapping({"doors": 1, "hangingRods": 2})
        assert config.doors == 1
        assert config.hanging_rods == 2


class TestJointConvention:
    """Tests for joint convention properties."""

    def test_sides_outer_caps_nothing(self) -> None:
        assert not JointConvention.SIDES_OUTER.top_caps_sides
        assert not JointConvention.SIDES_OUTER.bottom_caps_sides

    def test_top_outer_caps_top_only(self) -> None:
        assert JointConvention.TOP_OUTER.top_caps_sides
        assert not JointConvention.TOP_OUTER.bottom_caps_sides

    def test_panels_outer_caps_both(self) -> None:
        assert JointConvention.PANELS_OUTER.top_caps_sides
        assert JointConvention.PANELS_OUTER.bottom_caps_sides


class TestEdgeExposure:
    """Tests for EdgeExposure."""

    def test_edge_count(self) -> None:
        assert HIDDEN.edge_count == 0
        assert FRONT_EDGE.edge_count == 1
        assert FRONT_AND_ENDS.edge_count == 3
        assert ALL_EDGES.edge_count == 4

    def test_codes(self) -> None:
        assert EdgeExposure(l1=True, w2=True).codes() == ["L1", "W2"]
        assert HIDDEN.codes() == []

    def test_is_hashable(self) -> None:
        assert {FRONT_EDGE: 1}[EdgeExposure(l1=True)] == 1


class TestMaterialRole:
    """Tests for MaterialRole parsing and units."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("structural", MaterialRole.STRUCTURAL),
            ("rod_support", MaterialRole.ROD_SUPPORT),
            ("drawer-board", MaterialRole.DRAWER),
            ("screwFix50", MaterialRole.SCREW_LONG),
            ("hangingRod", MaterialRole.ROD),
            ("  Glass-Panel ", MaterialRole.GLASS_PANEL),
        ],
    )
    def test_parse(self, name: str, expected: MaterialRole) -> None:
        assert MaterialRole.parse(name) is expected

    def test_parse_unknown_role(self) -> None:
        with pytest.raises(ValidationError, match="Unknown material role 'screws'"):
            MaterialRole.parse("screws")

    def test_default_units(self) -> None:
        assert MaterialRole.STRUCTURAL.default_unit == "m²"
        assert MaterialRole.GLASS_PANEL.default_unit == "m²"
        assert MaterialRole.EDGE.default_unit == "ml"
        assert MaterialRole.ROD.default_unit == "ml"
        assert MaterialRole.GLUE.default_unit == "kg"
        assert MaterialRole.HINGE.default_unit == "u"


class TestComponentSelection:
    """Tests for ComponentSelection."""

    def test_missing_and_blank_roles_are_unset(self) -> None:
        selection = ComponentSelection(
            materials={MaterialRole.HINGE: "  ", MaterialRole.SLIDE: "s-1"}
        )
        assert selection.get(MaterialRole.HINGE) is None
        assert selection.get(MaterialRole.HANDLE) is None
        assert selection.get(MaterialRole.SLIDE) == "s-1"
        assert not selection.is_set(MaterialRole.HINGE)

    def test_board_for_thickness_class(self) -> None:
        selection = ComponentSelection(
            materials={MaterialRole.BACK: "mdf-3", MaterialRole.DRAWER: "mel-15"}
        )
        assert selection.board_for(ThicknessClass.BACK) == "mdf-3"
        assert selection.board_for(ThicknessClass.DRAWER) == "mel-15"
        assert selection.board_for(ThicknessClass.STRUCTURAL) is None

    def test_from_mapping(self) -> None:
        selection = ComponentSelection.from_mapping(
            {"structural": "mat-1", "drawer-board": "mat-7", "handle": None}
        )
        assert selection.get(MaterialRole.STRUCTURAL) == "mat-1"
        assert selection.get(MaterialRole.DRAWER) == "mat-7"
        assert selection.get(MaterialRole.HANDLE) is None

    def test_iterates_set_roles_only(self) -> None:
        selection = ComponentSelection(
            materials={MaterialRole.GLUE: "g", MaterialRole.EDGE: ""}
        )
        assert list(selection) == [(MaterialRole.GLUE, "g")]


class TestMaterialCatalog:
    """Tests for MaterialCatalog lookups."""

    @pytest.fixture
    def catalog(self) -> MaterialCatalog:
        return MaterialCatalog(
            [
                Material("mat-1", "TAB-001", "Melamina Blanca 18mm", "Tablero", "m²"),
                Material("mat-17", "HER-002", "Bisagra Codo 0", "Herraje", "u"),
            ]
        )

    def test_unit_for_known_material(self, catalog: MaterialCatalog) -> None:
        assert catalog.unit_for("mat-1") == "m²"

    def test_unit_for_unknown_material_uses_default(self, catalog: MaterialCatalog) -> None:
        assert catalog.unit_for("mat-99", "ml") == "ml"

    def test_describe(self, catalog: MaterialCatalog) -> None:
        assert catalog.describe("mat-17") == "Bisagra Codo 0"
        assert catalog.describe("mat-99") == "mat-99"

    def test_container_protocol(self, catalog: MaterialCatalog) -> None:
        assert "mat-1" in catalog
        assert len(catalog) == 2
        assert [m.id for m in catalog] == ["mat-1", "mat-17"]


class TestMaterialUsageRow:
    """Tests for MaterialUsageRow."""

    def test_rejects_negative_quantity(self) -> None:
        with pytest.raises(ValueError, match="negative"):
            MaterialUsageRow("mat-1", -0.1, "m²")

    def test_zero_is_allowed(self) -> None:
        assert MaterialUsageRow("mat-1", 0.0, "m²").quantity == 0.0
