"""Pytest configuration and shared fixtures for module calculation tests."""

from __future__ import annotations

import pytest

from millwork.domain import (
    ComponentSelection,
    Dimensions,
    MaterialRole,
    ModuleCalculator,
    ModuleConfig,
    ModuleSpec,
    ModuleType,
)


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def full_components() -> ComponentSelection:
    """A selection binding every material role to a distinct material id."""
    return ComponentSelection(
        materials={
            MaterialRole.STRUCTURAL: "board-x",
            MaterialRole.VISIBLE: "board-x",
            MaterialRole.BACK: "board-y",
            MaterialRole.DRAWER: "board-d",
            MaterialRole.EDGE: "edge-z",
            MaterialRole.HINGE: "hinge-h",
            MaterialRole.SLIDE: "slide-s",
            MaterialRole.ROD: "rod-r",
            MaterialRole.ROD_SUPPORT: "support-r",
            MaterialRole.HANDLE: "handle-k",
            MaterialRole.GLASS_PROFILE: "profile-p",
            MaterialRole.GLASS_PANEL: "glass-g",
            MaterialRole.SCREW_LONG: "screw-50",
            MaterialRole.SCREW_SHORT: "screw-30",
            MaterialRole.GLUE: "glue-1",
            MaterialRole.FILM: "film-1",
            MaterialRole.LEG: "leg-1",
        }
    )


@pytest.fixture
def base_components() -> ComponentSelection:
    """Boards, edge band and hinges only."""
    return ComponentSelection(
        materials={
            MaterialRole.STRUCTURAL: "X",
            MaterialRole.VISIBLE: "X",
            MaterialRole.BACK: "Y",
            MaterialRole.EDGE: "Z",
            MaterialRole.HINGE: "H",
        }
    )


@pytest.fixture
def base_cabinet_spec(base_components: ComponentSelection) -> ModuleSpec:
    """800 x 720 x 580 base cabinet with two doors and one shelf."""
    return ModuleSpec(
        module_type=ModuleType.BASE_CABINET,
        dimensions=Dimensions(800, 720, 580),
        config=ModuleConfig(doors=2, shelves=1),
        components=base_components,
    )


@pytest.fixture
def calculator() -> ModuleCalculator:
    return ModuleCalculator()
