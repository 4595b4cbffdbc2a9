"""Material catalog loading.

A catalog file is JSON, either a list of materials or an object with a
required ``materials`` list. Each material needs an ``id``; ``code``,
``description``, ``type`` and ``unit`` are optional. Unrelated fields
such as prices are ignored so shop catalog exports load unchanged.
"""

import json
import logging
from importlib import resources
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from millwork.application.config.loader import (
    ConfigError,
    extract_validation_errors,
    format_validation_message,
    read_json,
)
from millwork.domain.value_objects import Material, MaterialCatalog

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PACKAGE = "millwork.application.data"
DEFAULT_CATALOG_FILE = "materials.json"


class CatalogError(Exception):
    """Raised when a material catalog cannot be loaded.

    Attributes:
        message: The primary error message
        path: Path to the catalog file (if applicable)
        details: Failing fields for validation errors
    """

    def __init__(
        self,
        message: str,
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class MaterialEntry(BaseModel):
    """One material of a catalog file."""

    model_config = ConfigDict(extra="ignore")

    id: str = Field(..., min_length=1)
    code: str = ""
    description: str = ""
    type: str = ""
    unit: str = "u"


class CatalogFile(BaseModel):
    model_config = ConfigDict(extra="ignore")

    materials: list[MaterialEntry]


def load_catalog_from_data(data: Any, path: Path | None = None) -> MaterialCatalog:
    """Build a catalog from parsed JSON data.

    Raises:
        CatalogError: If the data does not describe a list of materials or
            two materials share an id.
    """
    if isinstance(data, list):
        data = {"materials": data}
    try:
        parsed = CatalogFile.model_validate(data)
    except PydanticValidationError as e:
        details = extract_validation_errors(e)
        raise CatalogError(
            format_validation_message(details, "Catalog validation failed:"),
            path=path,
            details=details,
        )

    seen: set[str] = set()
    materials: list[Material] = []
    for entry in parsed.materials:
        if entry.id in seen:
            raise CatalogError(f"Duplicate material id in catalog: {entry.id}", path=path)
        seen.add(entry.id)
        materials.append(
            Material(
                id=entry.id,
                code=entry.code,
                description=entry.description,
                type=entry.type,
                unit=entry.unit,
            )
        )
    return MaterialCatalog(materials)


def load_catalog(path: Path) -> MaterialCatalog:
    """Load a material catalog from a JSON file.

    Raises:
        CatalogError: If the file cannot be read, parsed or validated.
    """
    try:
        data = read_json(path, kind="catalog")
    except ConfigError as e:
        raise CatalogError(e.message, path=path, details=e.details) from e
    catalog = load_catalog_from_data(data, path)
    logger.debug(f"Loaded {len(catalog)} materials from {path}")
    return catalog


def default_catalog() -> MaterialCatalog:
    """Load the catalog bundled with the package."""
    content = (
        resources.files(DEFAULT_CATALOG_PACKAGE)
        .joinpath(DEFAULT_CATALOG_FILE)
        .read_text(encoding="utf-8")
    )
    return load_catalog_from_data(json.loads(content))
