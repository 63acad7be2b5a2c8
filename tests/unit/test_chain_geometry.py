"""Unit tests for ChainGeometryResolver."""

import pytest

from showers.domain.entities import ChainConfigurationError, Panel, PanelChain
from showers.domain.services import ChainGeometryResolver
from showers.domain.value_objects import Junction, Point2D


def _xy(point: Point2D) -> tuple[float, float]:
    return (point.x, point.y)


class TestAnchorPlacement:
    """Tests for the anchor door at the origin."""

    def test_single_door_runs_along_x(self, door_only_chain: PanelChain) -> None:
        segments = ChainGeometryResolver().resolve_chain(door_only_chain)
        assert len(segments) == 1
        assert _xy(segments[0].start) == (0.0, 0.0)
        assert _xy(segments[0].end) == (800.0, 0.0)
        assert segments[0].length == pytest.approx(800.0)

    def test_segments_are_returned_in_chain_order(
        self, inline_chain: PanelChain
    ) -> None:
        segments = ChainGeometryResolver().resolve_chain(inline_chain)
        assert [s.panel_id for s in segments] == ["left", "door", "right"]


class TestCollinearChains:
    """Tests for chains whose junctions are all 180 degrees."""

    def test_inline_chain_stays_on_x_axis(self, inline_chain: PanelChain) -> None:
        segments = ChainGeometryResolver().resolve_chain(inline_chain)
        for segment in segments:
            assert segment.y1 == pytest.approx(0.0)
            assert segment.y2 == pytest.approx(0.0)
            assert segment.direction.dy == pytest.approx(0.0)

    def test_inline_total_length_equals_sum_of_widths(
        self, inline_chain: PanelChain
    ) -> None:
        resolver = ChainGeometryResolver()
        segments = resolver.resolve_chain(inline_chain)
        assert resolver.total_length(segments) == pytest.approx(
            inline_chain.total_width_mm
        )
        bounds = resolver.bounds(segments)
        assert bounds.width == pytest.approx(inline_chain.total_width_mm)
        assert bounds.depth == pytest.approx(0.0)

    def test_anchor_in_the_middle_walks_both_ways(self) -> None:
        chain = PanelChain.from_panels(
            [
                Panel.fixed("a", 300),
                Panel.fixed("b", 400),
                Panel.door("door", 700),
                Panel.fixed("c", 500),
                Panel.fixed("d", 200),
            ]
        )
        segments = {s.panel_id: s for s in ChainGeometryResolver().resolve_chain(chain)}

        assert _xy(segments["b"].start) == pytest.approx((0.0, 0.0))
        assert _xy(segments["b"].end) == pytest.approx((-400.0, 0.0))
        assert _xy(segments["a"].start) == pytest.approx((-400.0, 0.0))
        assert _xy(segments["a"].end) == pytest.approx((-700.0, 0.0))
        assert _xy(segments["c"].start) == pytest.approx((700.0, 0.0))
        assert _xy(segments["c"].end) == pytest.approx((1200.0, 0.0))
        assert _xy(segments["d"].end) == pytest.approx((1400.0, 0.0))

    def test_segments_are_contiguous(self) -> None:
        chain = PanelChain.from_panels(
            [Panel.fixed("a", 300), Panel.door("door", 700), Panel.fixed("c", 500)]
        )
        segments = ChainGeometryResolver().resolve_chain(chain)
        # The left walk runs from the anchor outwards
        assert segments[0].start == segments[1].start
        assert segments[1].end == segments[2].start


class TestCorners:
    """Tests for 90 degree junctions."""

    def test_right_return_runs_towards_negative_y(
        self, corner_chain: PanelChain
    ) -> None:
        segments = {
            s.panel_id: s for s in ChainGeometryResolver().resolve_chain(corner_chain)
        }
        assert _xy(segments["door"].start) == (0.0, 0.0)
        assert _xy(segments["door"].end) == (700.0, 0.0)
        assert _xy(segments["left"].start) == pytest.approx((0.0, 0.0))
        assert _xy(segments["left"].end) == pytest.approx((-600.0, 0.0))
        assert _xy(segments["right"].start) == pytest.approx((700.0, 0.0))
        assert _xy(segments["right"].end) == pytest.approx((700.0, -500.0))

    def test_left_return_runs_towards_negative_y(self) -> None:
        chain = PanelChain.from_panels(
            [Panel.fixed("left", 600), Panel.door("door", 700)], angles=[90]
        )
        segments = ChainGeometryResolver().resolve_chain(chain)
        assert _xy(segments[0].start) == pytest.approx((0.0, 0.0))
        assert _xy(segments[0].end) == pytest.approx((0.0, -600.0))

    def test_direction_after_corner_is_perpendicular(
        self, corner_chain: PanelChain
    ) -> None:
        segments = ChainGeometryResolver().resolve_chain(corner_chain)
        door, right = segments[1], segments[2]
        assert door.direction.dot(right.direction) == pytest.approx(0.0)
        assert right.length == pytest.approx(500.0)

    def test_u_shape_returns_are_parallel(self) -> None:
        chain = PanelChain.from_panels(
            [Panel.fixed("l", 500), Panel.door("door", 700), Panel.fixed("r", 500)],
            angles=[90, 90],
        )
        segments = ChainGeometryResolver().resolve_chain(chain)
        assert _xy(segments[0].end) == pytest.approx((0.0, -500.0))
        assert _xy(segments[2].end) == pytest.approx((700.0, -500.0))
        assert segments[0].direction.dot(segments[2].direction) == pytest.approx(1.0)

    def test_two_corners_turn_twice(self) -> None:
        chain = PanelChain.from_panels(
            [Panel.door("door", 700), Panel.fixed("r1", 500), Panel.fixed("r2", 400)],
            angles=[90, 90],
        )
        segments = ChainGeometryResolver().resolve_chain(chain)
        assert _xy(segments[2].start) == pytest.approx((700.0, -500.0))
        assert _xy(segments[2].end) == pytest.approx((300.0, -500.0))
        assert segments[1].direction.dot(segments[2].direction) == pytest.approx(0.0)

    def test_bounds_of_corner_chain(self, corner_chain: PanelChain) -> None:
        resolver = ChainGeometryResolver()
        bounds = resolver.bounds(resolver.resolve_chain(corner_chain))
        assert bounds.min_x == pytest.approx(-600.0)
        assert bounds.max_x == pytest.approx(700.0)
        assert bounds.min_y == pytest.approx(-500.0)
        assert bounds.max_y == pytest.approx(0.0)

    def test_tracing_is_deterministic(self, corner_chain: PanelChain) -> None:
        resolver = ChainGeometryResolver()
        assert resolver.resolve_chain(corner_chain) == resolver.resolve_chain(
            corner_chain
        )


class TestErrors:
    """Tests for invalid chains."""

    def test_missing_anchor_raises_error(self) -> None:
        panels = [Panel.fixed("f", 500)]
        with pytest.raises(ChainConfigurationError, match="no anchor"):
            ChainGeometryResolver().resolve(panels, [], None)

    def test_anchor_out_of_range_raises_error(self) -> None:
        panels = [Panel.door("d", 700)]
        with pytest.raises(ChainConfigurationError, match="out of range"):
            ChainGeometryResolver().resolve(panels, [], 3)

    def test_wrong_junction_count_raises_error(self) -> None:
        panels = [Panel.door("d", 700), Panel.fixed("f", 500)]
        with pytest.raises(ChainConfigurationError, match="needs 1 junctions"):
            ChainGeometryResolver().resolve(panels, [], 0)

    def test_chain_without_door_raises_error(self) -> None:
        chain = PanelChain.from_panels([Panel.fixed("f", 500)])
        with pytest.raises(ChainConfigurationError):
            ChainGeometryResolver().resolve_chain(chain)

    def test_bounds_of_nothing_raises_error(self) -> None:
        with pytest.raises(ValueError, match="empty chain"):
            ChainGeometryResolver.bounds([])

    def test_positional_resolve_matches_chain(self, corner_chain: PanelChain) -> None:
        resolver = ChainGeometryResolver()
        panels = corner_chain.ordered_panels()
        junctions = [
            Junction("left", "door", 180),
            Junction("door", "right", 90),
        ]
        assert resolver.resolve(panels, junctions, 1) == resolver.resolve_chain(
            corner_chain
        )
