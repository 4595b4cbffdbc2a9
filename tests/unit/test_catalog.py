"""Tests for material catalog loading."""

import json
from pathlib import Path

import pytest

from millwork.application.catalog import (
    CatalogError,
    default_catalog,
    load_catalog,
    load_catalog_from_data,
)
from millwork.application.templates import DEFAULT_COMPONENTS


class TestLoadCatalogFromData:
    """Tests for building catalogs from parsed JSON."""

    def test_object_with_materials(self) -> None:
        catalog = load_catalog_from_data(
            {"materials": [{"id": "mat-1", "description": "Melamina", "unit": "m²"}]}
        )
        assert catalog.get("mat-1").description == "Melamina"
        assert catalog.unit_for("mat-1") == "m²"

    def test_bare_list(self) -> None:
        catalog = load_catalog_from_data([{"id": "a"}, {"id": "b"}])
        assert len(catalog) == 2
        assert catalog.get("a").unit == "u"

    def test_extra_fields_are_ignored(self) -> None:
        catalog = load_catalog_from_data([{"id": "a", "price": 1200.5, "currency": "ARS"}])
        assert "a" in catalog

    def test_duplicate_id(self) -> None:
        with pytest.raises(CatalogError, match="Duplicate material id in catalog: a"):
            load_catalog_from_data([{"id": "a"}, {"id": "a"}])

    def test_object_without_materials_key(self) -> None:
        with pytest.raises(CatalogError) as exc_info:
            load_catalog_from_data({"material": [{"id": "a"}]})
        assert exc_info.value.details[0]["path"] == "materials"
        assert exc_info.value.details[0]["error_type"] == "missing"

    def test_empty_materials_list(self) -> None:
        assert len(load_catalog_from_data({"materials": []})) == 0

    def test_missing_id(self) -> None:
        with pytest.raises(CatalogError) as exc_info:
            load_catalog_from_data([{"description": "no id"}])
        assert exc_info.value.details[0]["path"] == "materials[0].id"


class TestLoadCatalog:
    """Tests for loading catalog files."""

    def test_load_file(self, tmp_path: Path) -> None:
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps([{"id": "mat-1", "unit": "m²"}]), encoding="utf-8")
        assert load_catalog(path).unit_for("mat-1") == "m²"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(CatalogError, match="Catalog file not found"):
            load_catalog(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "catalog.json"
        path.write_text("[{", encoding="utf-8")
        with pytest.raises(CatalogError, match="Invalid JSON in catalog file"):
            load_catalog(path)


class TestDefaultCatalog:
    """Tests for the bundled catalog."""

    def test_bundled_catalog_loads(self) -> None:
        catalog = default_catalog()
        assert len(catalog) == 22
        assert catalog.describe("mat-17") == "Bisagra Codo 0 (recta)"

    def test_default_components_exist_in_catalog(self) -> None:
        catalog = default_catalog()
        for role, material_id in DEFAULT_COMPONENTS.items():
            assert material_id in catalog, f"{role} -> {material_id}"

    def test_units(self) -> None:
        catalog = default_catalog()
        assert catalog.unit_for("mat-1") == "m²"
        assert catalog.unit_for("mat-12") == "ml"
        assert catalog.unit_for("mat-26") == "kg"
