"""Support structure checks for a panel chain."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from ...value_objects import PanelSegment
from .models import SupportCheck
from .rules import DEFAULT_RULES, FabricationRules

if TYPE_CHECKING:
    from ...entities import PanelChain


class SupportChecker:
    """Decides whether a chain needs a support panel or a support bar.

    A narrow fixed panel beside a door cannot carry the door's movement on
    its own and is tied in with a glass support panel over the door. A wide
    return panel standing on its own needs a metal support bar, unless a
    support panel already ties the structure together.
    """

    def __init__(self, rules: FabricationRules = DEFAULT_RULES) -> None:
        self.rules = rules

    def check(
        self, chain: PanelChain, segments: Sequence[PanelSegment]
    ) -> SupportCheck:
        """Check the support requirements of a traced chain.

        Args:
            chain: The panel chain.
            segments: Segments from ChainGeometryResolver, in chain order.

        Returns:
            SupportCheck describing any required support structures.
        """
        panel_reason = self._support_panel_reason(chain)
        support_panel_required = panel_reason is not None

        bar_reason = None
        bar_panel_id = None
        if not support_panel_required:
            for panel_id in self._return_panel_ids(chain, segments):
                panel = chain.panel(panel_id)
                if panel.width_mm >= self.rules.wide_return_panel_mm:
                    bar_reason = (
                        f"Return panel {panel.id} is {panel.width_mm:g}mm and free-standing"
                    )
                    bar_panel_id = panel.id
                    break

        return SupportCheck(
            support_panel_required=support_panel_required,
            support_panel_reason=panel_reason,
            support_bar_required=bar_panel_id is not None,
            support_bar_reason=bar_reason,
            support_bar_panel_id=bar_panel_id,
        )

    def _support_panel_reason(self, chain: PanelChain) -> str | None:
        panels = chain.ordered_panels()
        for index, door in enumerate(panels):
            if not door.is_door:
                continue
            neighbours = panels[max(index - 1, 0):index] + panels[index + 1:index + 2]
            for neighbour in neighbours:
                if neighbour.is_door:
                    continue
                if neighbour.width_mm <= self.rules.narrow_fixed_panel_mm:
                    return (
                        f"Narrow fixed panel {neighbour.id} "
                        f"({neighbour.width_mm:g}mm) adjacent to door"
                    )
        return None

    @staticmethod
    def _return_panel_ids(
        chain: PanelChain, segments: Sequence[PanelSegment]
    ) -> list[str]:
        """Ids of panels that do not run along the anchor's line."""
        by_id = {segment.panel_id: segment for segment in segments}
        anchor = by_id.get(chain.anchor_id or "")
        if anchor is None:
            return []
        return [
            segment.panel_id
            for segment in segments
            if not segment.is_collinear_with(anchor)
        ]
