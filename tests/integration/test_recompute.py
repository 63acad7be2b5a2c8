"""Integration tests for the full chain recompute.

These tests run RecomputeDesignCommand end to end:
- Chain tracing, notch outlines and perspective faces
- Cut sizes, weights and door hardware per panel
- Support warnings
- Configuration problems reported as errors
"""

import pytest

from showers.application import DesignState, RecomputeDesignCommand, recompute
from showers.domain.entities import Panel, PanelChain
from showers.domain.services import Viewport
from showers.domain.services.fabrication import DeductionOptions
from showers.domain.value_objects import HingeFamily, HingeSide, MountingStyle

pytestmark = pytest.mark.integration


class TestInlineChain:
    """Recompute of a straight Fixed | Door | Fixed run."""

    def test_segments(
        self, recompute_command: RecomputeDesignCommand, inline_chain: PanelChain
    ) -> None:
        derived = recompute_command.execute(DesignState(chain=inline_chain))
        assert derived.is_valid
        assert [s.panel_id for s in derived.segments] == ["left", "door", "right"]

        door = derived.segment_for("door")
        assert (door.x1, door.y1, door.x2, door.y2) == pytest.approx((0, 0, 700, 0))
        assert sum(s.length for s in derived.segments) == pytest.approx(1800)

    def test_cut_sizes(
        self, recompute_command: RecomputeDesignCommand, inline_chain: PanelChain
    ) -> None:
        derived = recompute_command.execute(DesignState(chain=inline_chain))
        fabrication = derived.fabrication

        assert fabrication["left"].deductions.cut_width == 595
        assert fabrication["left"].deductions.cut_height == 2080
        assert fabrication["door"].deductions.cut_width == 683
        assert fabrication["door"].deductions.cut_height == 2090
        assert fabrication["right"].deductions.cut_width == 495

    def test_door_hardware(
        self, recompute_command: RecomputeDesignCommand, inline_chain: PanelChain
    ) -> None:
        door = recompute_command.execute(DesignState(chain=inline_chain)).fabrication["door"]
        assert door.weight_kg == pytest.approx(0.683 * 2.09 * 25)
        assert door.hinge_placement.top_offset_mm == 293
        assert door.hinge_selection.family == HingeFamily.GENEVA
        assert door.handle_placement.is_valid
        assert door.warnings == []

    def test_fixed_panels_have_no_hardware(
        self, recompute_command: RecomputeDesignCommand, inline_chain: PanelChain
    ) -> None:
        left = recompute_command.execute(DesignState(chain=inline_chain)).fabrication["left"]
        assert left.hinge_placement is None
        assert left.hinge_selection is None
        assert left.handle_placement is None

    def test_projection(
        self, recompute_command: RecomputeDesignCommand, inline_chain: PanelChain
    ) -> None:
        derived = recompute_command.execute(
            DesignState(chain=inline_chain, view_angle_deg=0, viewport=Viewport())
        )
        projection = derived.projection
        assert [p.panel_id for p in projection.panels] == ["left", "door", "right"]
        assert projection.for_panel("door").is_door
        for projected in projection.panels:
            assert len(projected.face) == 4
            for point in projected.screen_face:
                assert 0 <= point.x <= 1200
                assert 0 <= point.y <= 800

    def test_clamps(
        self, recompute_command: RecomputeDesignCommand, inline_chain: PanelChain
    ) -> None:
        derived = recompute_command.execute(
            DesignState(chain=inline_chain, mounting_style=MountingStyle.CLAMPS)
        )
        assert derived.fabrication["left"].deductions.cut_width == 597
        assert derived.fabrication["left"].deductions.cut_height == 2094
        # Doors ignore the mounting style
        assert derived.fabrication["door"].deductions.cut_width == 683

    def test_seal_options(
        self, recompute_command: RecomputeDesignCommand, inline_chain: PanelChain
    ) -> None:
        derived = recompute_command.execute(
            DesignState(
                chain=inline_chain,
                options=DeductionOptions(seals_required=False),
            )
        )
        assert derived.fabrication["door"].deductions.cut_width == 690
        assert derived.fabrication["door"].deductions.cut_height == 2092


class TestCornerChain:
    """Recompute of a chain with a 90 degree return."""

    def test_return_runs_back_from_the_door(
        self, recompute_command: RecomputeDesignCommand, corner_chain: PanelChain
    ) -> None:
        derived = recompute_command.execute(DesignState(chain=corner_chain))
        ret = derived.segment_for("right")
        assert (ret.x1, ret.y1) == pytest.approx((700, 0))
        assert (ret.x2, ret.y2) == pytest.approx((700, -500))

    def test_return_panel_corner_deduction(
        self, recompute_command: RecomputeDesignCommand, corner_chain: PanelChain
    ) -> None:
        derived = recompute_command.execute(DesignState(chain=corner_chain))
        right = derived.fabrication["right"]
        assert not right.corner_config.is_long_panel
        assert right.deductions.cut_width == 482
        assert derived.fabrication["left"].deductions.cut_width == 595

    def test_wide_return_adds_support_bar_warning(
        self, recompute_command: RecomputeDesignCommand
    ) -> None:
        chain = PanelChain.from_panels(
            [Panel.door("door", 700), Panel.fixed("return", 1300)], angles=[90]
        )
        derived = recompute_command.execute(DesignState(chain=chain))
        assert derived.is_valid
        assert derived.support.support_bar_required
        assert "Return panel return is 1300mm and free-standing" in derived.warnings


class TestSupportPanel:
    def test_narrow_panel_adds_door_head_clearance(
        self, recompute_command: RecomputeDesignCommand
    ) -> None:
        chain = PanelChain.from_panels(
            [Panel.fixed("narrow", 180), Panel.door("door", 700)]
        )
        derived = recompute_command.execute(DesignState(chain=chain))
        assert derived.support.support_panel_required
        assert derived.fabrication["door"].deductions.cut_height == 2086
        assert derived.fabrication["narrow"].deductions.cut_height == 2080
        assert derived.support.support_panel_reason in derived.warnings


class TestNotches:
    def test_notch_outlines_for_every_panel(
        self, recompute_command: RecomputeDesignCommand, inline_chain: PanelChain
    ) -> None:
        panel = inline_chain.panel("left")
        panel.set_notch_size(100, 30)
        panel.set_notches(bottom_left=True, bottom_right=False)

        derived = recompute_command.execute(
            DesignState(chain=inline_chain, view_angle_deg=0)
        )
        assert set(derived.notch_outlines) == {"left", "door", "right"}
        assert derived.notch_outlines["left"].is_notched
        assert not derived.notch_outlines["door"].is_notched

        # The left panel runs from the door at x=0 out to x=-600; the plan
        # centre sits at x=300
        face = derived.projection.for_panel("left").face
        assert [c for p in face for c in (p.x, p.y)] == pytest.approx(
            [
                -300, -30,
                -400, -30,
                -400, 0,
                -900, 0,
                -900, -2100,
                -300, -2100,
            ]
        )

    def test_overlapping_notches_are_reported(
        self, recompute_command: RecomputeDesignCommand, inline_chain: PanelChain
    ) -> None:
        panel = inline_chain.panel("left")
        panel.set_notch_size(300, 30)
        panel.set_notches(bottom_left=True, bottom_right=True)

        derived = recompute_command.execute(DesignState(chain=inline_chain))
        assert not derived.is_valid
        assert derived.errors == (
            "Panel left: Notches of 300mm on 2 corner(s) do not fit a 600mm panel",
        )
        # Everything else is still computed
        assert "left" in derived.fabrication


class TestErrors:
    """Configuration problems are reported rather than raised."""

    def test_chain_without_door(
        self, recompute_command: RecomputeDesignCommand
    ) -> None:
        chain = PanelChain.from_panels([Panel.fixed("a", 600), Panel.fixed("b", 600)])
        derived = recompute_command.execute(DesignState(chain=chain))
        assert derived.errors == ("Chain has no anchor door panel",)
        assert derived.segments == ()
        assert derived.projection is None

    def test_invalid_view_angle(
        self, recompute_command: RecomputeDesignCommand, inline_chain: PanelChain
    ) -> None:
        derived = recompute_command.execute(
            DesignState(chain=inline_chain, view_angle_deg=120)
        )
        assert derived.errors == ("View angle must be between -90 and 90 degrees",)

    def test_cut_size_not_positive(
        self, recompute_command: RecomputeDesignCommand
    ) -> None:
        chain = PanelChain.from_panels([Panel.door("door", 10)])
        derived = recompute_command.execute(DesignState(chain=chain))
        assert derived.errors == (
            "Panel door: cut size is not positive after deductions",
        )
        assert "door" not in derived.fabrication

    def test_unlisted_glass_thickness(self) -> None:
        chain = PanelChain.from_panels([Panel.door("door", 700)])
        derived = recompute(DesignState(chain=chain, glass_thickness_mm=12))
        assert derived.errors == (
            "No glass weight defined for 12mm glass (accepted: 6mm, 8mm, 10mm)",
        )

    def test_fractional_glass_thickness(self) -> None:
        chain = PanelChain.from_panels([Panel.door("door", 700)])
        derived = recompute(DesignState(chain=chain, glass_thickness_mm=10.5))
        assert derived.errors == (
            "No glass weight defined for 10.5mm glass (accepted: 6mm, 8mm, 10mm)",
        )

    def test_notch_taller_than_panel(
        self, recompute_command: RecomputeDesignCommand, inline_chain: PanelChain
    ) -> None:
        panel = inline_chain.panel("left")
        panel.set_notch_size(100, 3000)
        panel.set_notches(bottom_left=True, bottom_right=False)

        derived = recompute_command.execute(
            DesignState(chain=inline_chain, panel_height_mm=2000)
        )
        assert derived.errors == (
            "Panel left: Notch height of 3000mm does not fit under the 2000mm left edge",
        )
        assert "left" in derived.fabrication

    def test_notch_under_sloped_top(
        self, recompute_command: RecomputeDesignCommand, inline_chain: PanelChain
    ) -> None:
        panel = inline_chain.panel("right")
        panel.set_drop(HingeSide.RIGHT, 500)
        panel.set_notch_size(100, 1600)
        panel.set_notches(bottom_left=True, bottom_right=True)

        derived = recompute_command.execute(
            DesignState(chain=inline_chain, panel_height_mm=2000)
        )
        assert derived.errors == (
            "Panel right: Notch height of 1600mm does not fit under the 1500mm right edge",
        )

    def test_drop_deeper_than_panel(
        self, recompute_command: RecomputeDesignCommand, inline_chain: PanelChain
    ) -> None:
        inline_chain.panel("door").set_drop(HingeSide.LEFT, 5000)

        derived = recompute_command.execute(
            DesignState(chain=inline_chain, panel_height_mm=2000)
        )
        assert derived.errors == (
            "Panel door: Top edge drop of 5000mm does not fit a 2000mm panel",
        )


class TestRecomputeFunction:
    def test_recompute_is_repeatable(self, inline_chain: PanelChain) -> None:
        state = DesignState(chain=inline_chain)
        first = recompute(state)
        second = recompute(state)
        assert first == second

    def test_recompute_follows_chain_edits(self, inline_chain: PanelChain) -> None:
        state = DesignState(chain=inline_chain)
        before = recompute(state)

        inline_chain.panel("door").set_width(800)
        inline_chain.set_junction_angle("door", "right", 90)
        after = recompute(state)

        assert before.fabrication["door"].deductions.cut_width == 683
        assert after.fabrication["door"].deductions.cut_width == 783
        assert after.segment_for("right").y2 == pytest.approx(-500)
