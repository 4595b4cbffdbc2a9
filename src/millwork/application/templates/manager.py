"""Template manager for archetype configuration templates.

Templates are complete configuration files built from the archetype
presets and the default component selection of the bundled catalog.
"""

import json
from pathlib import Path
from typing import Any

from millwork.application.config.schema import SUPPORTED_VERSIONS
from millwork.application.templates.presets import (
    DEFAULT_COMPONENTS,
    PRESETS,
    ModulePreset,
    get_preset,
)
from millwork.domain.value_objects import ModuleType


class TemplateNotFoundError(Exception):
    """Raised when a requested template does not exist."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Template not found: {name}")


# Template metadata: name -> description
TEMPLATE_METADATA: dict[str, str] = {
    module_type.value: preset.description for module_type, preset in PRESETS.items()
}


class TemplateManager:
    """Manager for archetype configuration templates.

    Template names are module type tags.

    Example:
        manager = TemplateManager()
        for name, description in manager.list_templates():
            print(f"{name}: {description}")

        manager.init_template("placard", Path("wardrobe.json"))
    """

    def list_templates(self) -> list[tuple[str, str]]:
        """List all available templates with their descriptions.

        Returns:
            List of (name, description) tuples in module type order.
        """
        return [(name, desc) for name, desc in TEMPLATE_METADATA.items()]

    def get_preset(self, name: str) -> ModulePreset:
        """Get the preset size and counts behind a template.

        Raises:
            TemplateNotFoundError: If the template does not exist.
        """
        if name not in TEMPLATE_METADATA:
            raise TemplateNotFoundError(name)
        return get_preset(ModuleType(name))

    def get_config(self, name: str) -> dict[str, Any]:
        """Get a template as a configuration dictionary.

        Raises:
            TemplateNotFoundError: If the template does not exist.
        """
        preset = self.get_preset(name)
        dims = preset.dimensions
        counts = preset.config
        return {
            "schema_version": max(SUPPORTED_VERSIONS),
            "module_type": name,
            "dimensions": {"width": dims.width, "height": dims.height, "depth": dims.depth},
            "config": {
                "doors": counts.doors,
                "drawers": counts.drawers,
                "shelves": counts.shelves,
                "divisions": counts.divisions,
                "hanging_rods": counts.hanging_rods,
            },
            "components": dict(DEFAULT_COMPONENTS),
            "door_type": "board",
            "open_module": False,
            "extra_hardware": [],
        }

    def get_template(self, name: str) -> str:
        """Get the JSON content of a template.

        Raises:
            TemplateNotFoundError: If the template does not exist.
        """
        return json.dumps(self.get_config(name), indent=2, ensure_ascii=False) + "\n"

    def init_template(self, name: str, output_path: Path, force: bool = False) -> None:
        """Write a template to the specified output path.

        Raises:
            TemplateNotFoundError: If the template does not exist.
            FileExistsError: If the output file exists and ``force`` is False.
        """
        content = self.get_template(name)
        if output_path.exists() and not force:
            raise FileExistsError(str(output_path))
        output_path.write_text(content, encoding="utf-8")

    def template_exists(self, name: str) -> bool:
        return name in TEMPLATE_METADATA
