"""Configuration file loader with error reporting.

Loads JSON module configuration files. File system errors, JSON syntax
errors and schema violations are all reported as ConfigError with a
category and, for schema violations, one detail entry per failing field.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from millwork.application.config.schema import ModuleConfiguration


class ConfigError(Exception):
    """Exception raised for configuration-related errors.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, permission_denied,
            file_read_error, json_parse, validation)
        path: Path to the configuration file (if applicable)
        details: Additional error details (line/column for JSON, failing
            fields for validation)
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as a JSON path string.

    Examples:
        >>> format_json_path(("dimensions", "width"))
        'dimensions.width'
        >>> format_json_path(("extra_hardware", 0, "quantity"))
        'extra_hardware[0].quantity'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts)


def extract_validation_errors(error: PydanticValidationError) -> list[dict[str, Any]]:
    """Flatten a Pydantic ValidationError into path/message/value entries."""
    return [
        {
            "path": format_json_path(err["loc"]),
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        for err in error.errors()
    ]


def format_validation_message(details: list[dict[str, Any]], title: str) -> str:
    """Render validation details as a multi-line message under ``title``."""
    lines = [title]
    for detail in details:
        value = detail.get("value")
        if value is not None and not isinstance(value, (dict, list)):
            lines.append(f"  - {detail['path']}: {detail['message']} (got: {value!r})")
        else:
            lines.append(f"  - {detail['path']}: {detail['message']}")
    return "\n".join(lines)


def read_json(path: Path, kind: str = "config") -> Any:
    """Read and parse a JSON file.

    Args:
        path: File to read.
        kind: Word used in error messages ("config", "catalog", ...).

    Raises:
        ConfigError: If the file is missing, unreadable or not valid JSON.
    """
    if not path.exists():
        raise ConfigError(
            message=f"{kind.capitalize()} file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            message=f"Permission denied reading {kind} file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            message=f"Error reading {kind} file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )

    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=(
                f"Invalid JSON in {kind} file: {path} "
                f"(line {e.lineno}, column {e.colno}): {e.msg}"
            ),
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        )


def load_config(path: Path) -> ModuleConfiguration:
    """Load and validate a module configuration from a JSON file.

    Args:
        path: Path to the JSON configuration file

    Returns:
        A validated ModuleConfiguration instance

    Raises:
        ConfigError: If the file cannot be loaded or validated. The
            error_type attribute holds the error category.

    Example:
        >>> try:
        ...     config = load_config(Path("base-cabinet.json"))
        ... except ConfigError as e:
        ...     for detail in e.details:
        ...         print(f"  {detail['path']}: {detail['message']}")
    """
    data = read_json(path)
    try:
        return ModuleConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = extract_validation_errors(e)
        raise ConfigError(
            message=format_validation_message(details, "Configuration validation failed:"),
            error_type="validation",
            path=path,
            details=details,
        )


def load_config_from_dict(data: dict[str, Any]) -> ModuleConfiguration:
    """Load and validate a module configuration from a dictionary.

    Raises:
        ConfigError: If the data fails validation.
    """
    try:
        return ModuleConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = extract_validation_errors(e)
        raise ConfigError(
            message=format_validation_message(details, "Configuration validation failed:"),
            error_type="validation",
            details=details,
        )
