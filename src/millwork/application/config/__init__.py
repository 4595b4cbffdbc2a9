"""Configuration schema and loading for module specifications.

Public API:
    - ModuleConfiguration: Root configuration model
    - DimensionsConfig: Module size model
    - FeatureCountsConfig: Feature counts model
    - ExtraHardwareConfig: Extra hardware line model
    - ConstructionConfig: Construction constant overrides
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - config_to_module_spec: Convert a configuration to a domain ModuleSpec
    - config_to_constants: Build construction constants from a configuration
    - config_to_extra_hardware: Convert extra hardware lines

Example:
    >>> from pathlib import Path
    >>> from millwork.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("base-cabinet.json"))
    ...     print(config.module_type.value)
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from millwork.application.config.adapter import (
    config_to_constants,
    config_to_extra_hardware,
    config_to_module_spec,
)
from millwork.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
    read_json,
)
from millwork.application.config.schema import (
    SUPPORTED_VERSIONS,
    ConstructionConfig,
    DimensionsConfig,
    ExtraHardwareConfig,
    FeatureCountsConfig,
    ModuleConfiguration,
)

__all__ = [
    "ConfigError",
    "ConstructionConfig",
    "DimensionsConfig",
    "ExtraHardwareConfig",
    "FeatureCountsConfig",
    "ModuleConfiguration",
    "SUPPORTED_VERSIONS",
    "config_to_constants",
    "config_to_extra_hardware",
    "config_to_module_spec",
    "load_config",
    "load_config_from_dict",
    "read_json",
]
