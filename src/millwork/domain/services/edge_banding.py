"""Edge-band assignment and consumption."""

from __future__ import annotations

import logging
from typing import Iterable

from ..entities import Panel

logger = logging.getLogger(__name__)


class EdgeBandAssignor:
    """Flags the exposed edges of each panel for banding.

    Flags are copied from the exposure topology the archetype declared for
    the panel; they are never inferred from the panel's dimensions.
    """

    def assign(self, panels: Iterable[Panel]) -> None:
        """Set the four banding flags of every panel in place."""
        for panel in panels:
            exposure = panel.exposure
            panel.edge_l1 = exposure.l1
            panel.edge_l2 = exposure.l2
            panel.edge_w1 = exposure.w1
            panel.edge_w2 = exposure.w2
            logger.debug(
                f"{panel.name} {panel.length}x{panel.width}: "
                f"banded edges {','.join(exposure.codes()) or 'none'}"
            )

    @staticmethod
    def consumption_m(panels: Iterable[Panel]) -> float:
        """Total banded length in linear metres.

        Length edges consume the panel length and width edges the panel
        width, each times the panel quantity.
        """
        return sum(panel.banded_length_m for panel in panels)
