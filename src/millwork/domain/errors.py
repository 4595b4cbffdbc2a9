"""Exceptions raised by the module calculation engine.

Every failure aborts the whole calculation; no partial result is ever
returned to the caller.
"""


class ModuleCalculationError(Exception):
    """Base class for all fatal calculation errors."""

    pass


class ValidationError(ModuleCalculationError):
    """Raised when a module specification is not physically valid.

    Covers non-positive dimensions, negative or non-integer counts, and
    dimensions too small to fit the requested panels.
    """

    pass


class UnknownModuleType(ModuleCalculationError):
    """Raised when a module type tag has no registered archetype rule."""

    def __init__(self, module_type: object, available: list[str] | None = None) -> None:
        self.module_type = module_type
        self.available = available or []
        message = f"Unknown module type: {module_type!r}"
        if self.available:
            message += f". Available: {', '.join(self.available)}"
        super().__init__(message)


class ConfigurationError(ModuleCalculationError):
    """Raised when a mandatory material role is unset.

    For example, doors are requested but no hinge material is selected.
    """

    def __init__(self, role: str, reason: str) -> None:
        self.role = role
        self.reason = reason
        super().__init__(f"Material role '{role}' is required: {reason}")
