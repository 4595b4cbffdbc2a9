"""Tests for the cut list, bill of materials and JSON output formatters."""

import json

from millwork.application import ModuleOutput
from millwork.domain import (
    CalculationResult,
    Dimensions,
    Material,
    MaterialCatalog,
    MaterialUsageRow,
    ModuleSpec,
    ModuleType,
    Panel,
)
from millwork.infrastructure import CutListFormatter, JsonExporter, MaterialReportFormatter


def sample_pieces() -> list[Panel]:
    return [
        Panel("Side", 720, 577, quantity=2, edge_l1=True),
        Panel("Door", 720, 397, quantity=2, edge_l1=True, edge_l2=True, edge_w1=True, edge_w2=True),
        Panel("Back", 796, 716),
    ]


class TestCutListFormatter:
    """Tests for CutListFormatter."""

    def test_empty(self) -> None:
        assert CutListFormatter().format([]) == "No pieces in cut list."

    def test_table(self) -> None:
        output = CutListFormatter().format(sample_pieces())
        lines = output.splitlines()
        assert lines[0] == "CUT LIST"
        assert "Side" in lines[4] and "L1" in lines[4]
        assert "L1,L2,W1,W2" in lines[5]
        assert lines[6].split()[-2] == "-"

    def test_totals(self) -> None:
        output = CutListFormatter().format(sample_pieces())
        total_line = next(line for line in output.splitlines() if line.startswith("TOTAL"))
        assert total_line.split()[1] == "5"
        # 2 * 720 + 2 * (2 * 720 + 2 * 397) mm
        assert output.endswith("Edge banding: 5.908 m")


class TestMaterialReportFormatter:
    """Tests for MaterialReportFormatter."""

    def test_empty(self) -> None:
        output = MaterialReportFormatter().format([])
        assert output.splitlines()[-1] == "No materials selected."

    def test_rows_with_catalog(self) -> None:
        catalog = MaterialCatalog(
            [Material("mat-17", "HER-002", "Bisagra Codo 0 (recta)", "Herraje", "u")]
        )
        rows = [
            MaterialUsageRow("mat-1", 2.268936, "m²"),
            MaterialUsageRow("mat-17", 4, "u"),
        ]
        lines = MaterialReportFormatter().format(rows, catalog).splitlines()
        assert lines[0] == "BILL OF MATERIALS"
        assert "2.269" in lines[4]
        assert "HER-002" in lines[5]
        assert "Bisagra Codo 0 (recta)" in lines[5]
        assert lines[5].split()[-2] == "4"

    def test_fractional_units(self) -> None:
        rows = [MaterialUsageRow("mat-16", 2.5, "u")]
        output = MaterialReportFormatter().format(rows)
        assert "2.500" in output


class TestJsonExporter:
    """Tests for JsonExporter."""

    def _spec(self) -> ModuleSpec:
        return ModuleSpec(ModuleType.BASE_CABINET, Dimensions(800, 720, 580))

    def test_export_result(self) -> None:
        result = CalculationResult(
            pieces=tuple(sample_pieces()),
            materials=(MaterialUsageRow("X", 1.5, "m²"),),
        )
        data = json.loads(JsonExporter().export(ModuleOutput(spec=self._spec(), result=result)))
        assert data["module"] == {
            "module_type": "bajo-mesada",
            "width": 800,
            "height": 720,
            "depth": 580,
            "open_module": False,
        }
        assert [p["name"] for p in data["pieces"]] == ["Side", "Door", "Back"]
        assert data["materials"] == [{"material_id": "X", "quantity": 1.5, "unit": "m²"}]
        assert data["totals"]["pieces"] == 5

    def test_export_errors(self) -> None:
        output = ModuleOutput(spec=self._spec(), errors=["Module is too small"])
        data = json.loads(JsonExporter().export(output))
        assert data == {"errors": ["Module is too small"]}
