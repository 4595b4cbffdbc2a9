"""Descriptor builders shared by the archetype rules."""

from __future__ import annotations

from ..value_objects import (
    ALL_EDGES,
    FRONT_AND_ENDS,
    FRONT_EDGE,
    HIDDEN,
    JointConvention,
    ModuleConfig,
    PanelRole,
    ThicknessClass,
)
from .layout import PanelDescriptor


def carcass(
    joints: JointConvention,
    *,
    top: bool = True,
    bottom: bool = True,
    back: bool = True,
) -> list[PanelDescriptor]:
    """Sides plus the optional top, bottom and back of a box carcass.

    A top or bottom that caps the sides shows its two ends as well as its
    front edge.
    """
    descriptors = [
        PanelDescriptor("Side", PanelRole.SIDE, ThicknessClass.STRUCTURAL, FRONT_EDGE, quantity=2)
    ]
    if top:
        exposure = FRONT_AND_ENDS if joints.top_caps_sides else FRONT_EDGE
        descriptors.append(
            PanelDescriptor("Top", PanelRole.TOP, ThicknessClass.STRUCTURAL, exposure)
        )
    if bottom:
        exposure = FRONT_AND_ENDS if joints.bottom_caps_sides else FRONT_EDGE
        descriptors.append(
            PanelDescriptor("Bottom", PanelRole.BOTTOM, ThicknessClass.STRUCTURAL, exposure)
        )
    if back:
        descriptors.append(back_panel())
    return descriptors


def back_panel() -> PanelDescriptor:
    return PanelDescriptor("Back", PanelRole.BACK, ThicknessClass.BACK, HIDDEN)


def interior(config: ModuleConfig) -> list[PanelDescriptor]:
    """Vertical divisions and shelves requested by the configuration."""
    descriptors = []
    if config.divisions > 0:
        descriptors.append(
            PanelDescriptor(
                "Division",
                PanelRole.DIVISION,
                ThicknessClass.STRUCTURAL,
                FRONT_EDGE,
                quantity=config.divisions,
            )
        )
    if config.shelves > 0:
        descriptors.append(
            PanelDescriptor(
                "Shelf",
                PanelRole.SHELF,
                ThicknessClass.STRUCTURAL,
                FRONT_EDGE,
                quantity=config.shelves,
            )
        )
    return descriptors


def fronts(config: ModuleConfig) -> list[PanelDescriptor]:
    """Door leaves and drawer boxes requested by the configuration.

    Door and drawer counts and sizes are resolved by the decomposer from
    the layout's front opening. Drawer box sides and backs show their top
    edge only.
    """
    descriptors = []
    if config.doors > 0:
        descriptors.append(
            PanelDescriptor("Door", PanelRole.DOOR, ThicknessClass.VISIBLE, ALL_EDGES)
        )
    if config.drawers > 0:
        descriptors.extend(
            [
                PanelDescriptor(
                    "Drawer Front", PanelRole.DRAWER_FRONT, ThicknessClass.VISIBLE, ALL_EDGES
                ),
                PanelDescriptor(
                    "Drawer Side", PanelRole.DRAWER_SIDE, ThicknessClass.DRAWER, FRONT_EDGE
                ),
                PanelDescriptor(
                    "Drawer Back", PanelRole.DRAWER_BACK, ThicknessClass.DRAWER, FRONT_EDGE
                ),
                PanelDescriptor(
                    "Drawer Bottom", PanelRole.DRAWER_BOTTOM, ThicknessClass.DRAWER, HIDDEN
                ),
            ]
        )
    return descriptors


def fixed(
    name: str,
    length: float,
    width: float,
    *,
    thickness_class: ThicknessClass = ThicknessClass.STRUCTURAL,
    exposure=HIDDEN,
    quantity: int = 1,
) -> PanelDescriptor:
    """A panel whose size the archetype computes itself."""
    return PanelDescriptor(
        name,
        PanelRole.FIXED,
        thickness_class,
        exposure,
        quantity=quantity,
        length=length,
        width=width,
    )
