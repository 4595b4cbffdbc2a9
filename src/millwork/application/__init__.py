"""Application layer - use cases and orchestration."""

from .commands import CalculateModuleCommand, calculate_from_config
from .dtos import ModuleOutput

__all__ = [
    "CalculateModuleCommand",
    "ModuleOutput",
    "calculate_from_config",
]
