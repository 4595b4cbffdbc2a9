"""Panel roles, thickness classes, joints and edge topology."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ThicknessClass(str, Enum):
    """Board class a panel is cut from.

    Each class is bound to one board material role in the component
    selection and has its own nominal thickness.
    """

    STRUCTURAL = "structural"
    VISIBLE = "visible"
    BACK = "back"
    DRAWER = "drawer"


class PanelRole(str, Enum):
    """How the decomposer sizes a panel descriptor.

    FIXED descriptors carry their own length and width; every other role
    is resolved from the module dimensions and the archetype's joints.
    """

    SIDE = "side"
    TOP = "top"
    BOTTOM = "bottom"
    BACK = "back"
    SHELF = "shelf"
    DIVISION = "division"
    DOOR = "door"
    DRAWER_FRONT = "drawer_front"
    DRAWER_SIDE = "drawer_side"
    DRAWER_BACK = "drawer_back"
    DRAWER_BOTTOM = "drawer_bottom"
    FIXED = "fixed"


class JointConvention(str, Enum):
    """Which members win the butt joints of a carcass.

    Attributes:
        SIDES_OUTER: Top and bottom fit between the sides; sides run the
            full height.
        TOP_OUTER: The top caps the sides and runs the full width; the
            bottom fits between the sides.
        PANELS_OUTER: Top and bottom both cap the sides; sides fit between
            them.
    """

    SIDES_OUTER = "sides_outer"
    TOP_OUTER = "top_outer"
    PANELS_OUTER = "panels_outer"

    @property
    def top_caps_sides(self) -> bool:
        return self in (JointConvention.TOP_OUTER, JointConvention.PANELS_OUTER)

    @property
    def bottom_caps_sides(self) -> bool:
        return self is JointConvention.PANELS_OUTER


class FrontLayout(str, Enum):
    """Arrangement of drawer fronts within a drawer column.

    Attributes:
        STACKED: Drawers stacked vertically, sharing the drawer zone height.
        SIDE_BY_SIDE: Drawers in a row, sharing the opening width
            (bed bases, with drawers opening sideways).
    """

    STACKED = "stacked"
    SIDE_BY_SIDE = "side_by_side"


@dataclass(frozen=True)
class EdgeExposure:
    """Which of a panel's four edges are exposed in the assembled module.

    The two "length" edges run along the panel length, the two "width"
    edges along the panel width. By convention l1 is the front edge of
    carcass members.
    """

    l1: bool = False
    l2: bool = False
    w1: bool = False
    w2: bool = False

    @property
    def edge_count(self) -> int:
        return sum((self.l1, self.l2, self.w1, self.w2))

    def as_tuple(self) -> tuple[bool, bool, bool, bool]:
        return (self.l1, self.l2, self.w1, self.w2)

    def codes(self) -> list[str]:
        """Short codes of the exposed edges (L1, L2, W1, W2)."""
        names = ("L1", "L2", "W1", "W2")
        return [name for name, flag in zip(names, self.as_tuple()) if flag]


# Common exposure patterns
HIDDEN = EdgeExposure()
FRONT_EDGE = EdgeExposure(l1=True)
LONG_EDGES = EdgeExposure(l1=True, l2=True)
END_EDGES = EdgeExposure(w1=True, w2=True)
FRONT_AND_ENDS = EdgeExposure(l1=True, w1=True, w2=True)
ALL_EDGES = EdgeExposure(l1=True, l2=True, w1=True, w2=True)
