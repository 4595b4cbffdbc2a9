"""Output formatters and exporters for module calculations."""

from __future__ import annotations

import json
from typing import Any

from millwork.application.dtos import ModuleOutput
from millwork.domain import MaterialCatalog, MaterialUsageRow, Panel
from millwork.domain.value_objects import EdgeExposure


def _format_quantity(quantity: float, unit: str) -> str:
    if unit == "u" and float(quantity).is_integer():
        return str(int(quantity))
    return f"{quantity:.3f}"


class CutListFormatter:
    """Formats cut lists for display.

    Edge banding is shown as the codes of the banded edges: L1 and L2 run
    along the panel length, W1 and W2 along its width.
    """

    def format(self, pieces: list[Panel] | tuple[Panel, ...]) -> str:
        """Format a cut list as a table."""
        if not pieces:
            return "No pieces in cut list."

        lines = [
            "CUT LIST",
            "=" * 78,
            f"{'Piece':<18} {'Length':>7} {'Width':>7} {'Qty':>4}  {'Board':<11} {'Edges':<12} {'m²':>7}",
            "-" * 78,
        ]

        total_area = 0.0
        total_edge = 0.0
        for piece in pieces:
            edges = self._edge_codes(piece)
            lines.append(
                f"{piece.name:<18} {piece.length:>7} {piece.width:>7} {piece.quantity:>4}  "
                f"{piece.thickness_class.value:<11} {edges:<12} {piece.area_m2:>7.3f}"
            )
            total_area += piece.area_m2
            total_edge += piece.banded_length_m

        lines.append("-" * 78)
        lines.append(
            f"{'TOTAL':<18} {'':>7} {'':>7} {sum(p.quantity for p in pieces):>4}  "
            f"{'':<11} {'':<12} {total_area:>7.3f}"
        )
        lines.append(f"Edge banding: {total_edge:.3f} m")

        return "\n".join(lines)

    @staticmethod
    def _edge_codes(piece: Panel) -> str:
        return ",".join(EdgeExposure(*piece.edge_pattern).codes()) or "-"


class MaterialReportFormatter:
    """Formats the bill of materials."""

    def format(
        self,
        materials: list[MaterialUsageRow] | tuple[MaterialUsageRow, ...],
        catalog: MaterialCatalog | None = None,
    ) -> str:
        """Format material usage rows as a report.

        Descriptions and codes come from the catalog when one is given.
        """
        lines = [
            "BILL OF MATERIALS",
            "=" * 78,
        ]
        if not materials:
            lines.append("No materials selected.")
            return "\n".join(lines)

        lines.append(f"{'Material':<14} {'Code':<13} {'Description':<34} {'Qty':>10} {'Unit':<4}")
        lines.append("-" * 78)
        for row in materials:
            material = catalog.get(row.material_id) if catalog is not None else None
            code = material.code if material is not None else ""
            description = material.description if material is not None else ""
            lines.append(
                f"{row.material_id:<14} {code:<13} {description[:34]:<34} "
                f"{_format_quantity(row.quantity, row.unit):>10} {row.unit:<4}"
            )
        return "\n".join(lines)


class JsonExporter:
    """Exports module calculations as JSON."""

    def export(self, output: ModuleOutput) -> str:
        """Export a module output as a JSON string."""
        if not output.is_valid:
            return json.dumps({"errors": output.errors}, indent=2)

        spec = output.spec
        dims = spec.dimensions
        data: dict[str, Any] = {
            "module": {
                "module_type": getattr(spec.module_type, "value", spec.module_type),
                "width": dims.width,
                "height": dims.height,
                "depth": dims.depth,
                "open_module": spec.open_module,
            },
        }
        data.update(output.result.to_dict())
        data["totals"] = {
            "pieces": output.result.piece_count,
            "board_area_m2": round(output.result.board_area_m2, 6),
        }
        return json.dumps(data, indent=2, ensure_ascii=False)
