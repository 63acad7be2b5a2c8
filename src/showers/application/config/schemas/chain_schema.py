"""Panel chain configuration schemas.

This module contains the models describing a chain of glass panels:
PanelConfigSchema with its notch, top edge and door sub-models,
JunctionConfigSchema, and the ChainConfigSchema that ties them together.
"""

from typing import Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    model_validator,
)

from showers.application.config.schemas.base import (
    HingeSide,
    PanelKind,
    SwingDirection,
    TopEdgeType,
)


class NotchConfigSchema(BaseModel):
    """Bottom-corner notch configuration.

    Attributes:
        bottom_left: Notch the bottom-left corner.
        bottom_right: Notch the bottom-right corner.
        width_mm: Notch width along the panel.
        height_mm: Notch height up from the bottom edge.
    """

    model_config = ConfigDict(extra="forbid")

    bottom_left: bool = False
    bottom_right: bool = False
    width_mm: float | None = Field(default=None, gt=0, le=1000)
    height_mm: float | None = Field(default=None, gt=0, le=1000)

    @model_validator(mode="after")
    def validate_dimensions_when_notched(self) -> "NotchConfigSchema":
        """Require both dimensions when either corner is notched."""
        if (self.bottom_left or self.bottom_right) and (
            self.width_mm is None or self.height_mm is None
        ):
            raise ValueError("width_mm and height_mm are required for notched corners")
        return self


class TopEdgeConfigSchema(BaseModel):
    """Top edge configuration."""

    model_config = ConfigDict(extra="forbid")

    type: TopEdgeType = TopEdgeType.LEVEL
    direction: HingeSide | None = None
    drop_mm: float | None = Field(default=None, gt=0, le=2000)

    @model_validator(mode="after")
    def validate_sloped_top(self) -> "TopEdgeConfigSchema":
        """Require a direction and drop for sloped tops."""
        if self.type == TopEdgeType.SLOPED and (
            self.direction is None or self.drop_mm is None
        ):
            raise ValueError("direction and drop_mm are required for a sloped top edge")
        return self


class DoorPropertiesConfigSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    hinge_side: HingeSide = HingeSide.RIGHT
    swing_direction: SwingDirection = SwingDirection.OUT


class PanelConfigSchema(BaseModel):
    """Configuration for one glass panel.

    Attributes:
        id: Stable panel identifier.
        kind: Fixed panel or door.
        width_mm: Tight width in millimetres (10 to 3000).
        door: Door properties (doors only).
        notches: Bottom-corner notches.
        top_edge: Level or sloped top edge.
    """

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1, max_length=64)
    kind: PanelKind
    width_mm: float = Field(..., ge=10.0, le=3000.0)
    door: DoorPropertiesConfigSchema | None = None
    notches: NotchConfigSchema = Field(default_factory=NotchConfigSchema)
    top_edge: TopEdgeConfigSchema = Field(default_factory=TopEdgeConfigSchema)

    @model_validator(mode="after")
    def validate_door_properties(self) -> "PanelConfigSchema":
        """Door properties only apply to door panels."""
        if self.door is not None and self.kind != PanelKind.DOOR:
            raise ValueError("door properties are only valid for door panels")
        return self


class JunctionConfigSchema(BaseModel):
    """Junction between two adjacent panels, by panel id."""

    model_config = ConfigDict(extra="forbid")

    left: str = Field(..., min_length=1)
    right: str = Field(..., min_length=1)
    angle_deg: Literal[90, 180] = 180


class ChainConfigSchema(BaseModel):
    """Configuration for a chain of panels.

    Panels are listed left to right. Junctions may be omitted, in which case
    every pair of neighbours is joined at 180 degrees.

    Attributes:
        panels: Panels from left to right (1 to 20).
        junctions: Junctions between neighbours, by id.
        anchor: Id of the door panel tracing starts from. Defaults to the
            first door.
        left_wall: Whether the leftmost panel is fixed to a wall.
        right_wall: Whether the rightmost panel is fixed to a wall.
    """

    model_config = ConfigDict(extra="forbid")

    panels: list[PanelConfigSchema] = Field(..., min_length=1, max_length=20)
    junctions: list[JunctionConfigSchema] | None = None
    anchor: str | None = None
    left_wall: bool = True
    right_wall: bool = True

    @model_validator(mode="after")
    def validate_topology(self) -> "ChainConfigSchema":
        """Check ids, junction adjacency and the anchor door."""
        ids = [panel.id for panel in self.panels]
        duplicates = sorted({pid for pid in ids if ids.count(pid) > 1})
        if duplicates:
            raise ValueError(f"Duplicate panel ids: {', '.join(duplicates)}")

        if self.junctions is not None:
            if len(self.junctions) != len(ids) - 1:
                raise ValueError(
                    f"A chain of {len(ids)} panels needs {len(ids) - 1} junctions, "
                    f"got {len(self.junctions)}"
                )
            expected = set(zip(ids, ids[1:]))
            for junction in self.junctions:
                if (junction.left, junction.right) not in expected:
                    raise ValueError(
                        f"Junction {junction.left}-{junction.right} does not join "
                        "adjacent panels"
                    )

        doors = [panel.id for panel in self.panels if panel.kind == PanelKind.DOOR]
        if not doors:
            raise ValueError("A chain needs at least one door panel as its anchor")
        if self.anchor is not None and self.anchor not in doors:
            raise ValueError(f"Anchor '{self.anchor}' is not a door panel in the chain")
        return self

    def angles(self) -> list[int]:
        """Junction angles in chain order."""
        if self.junctions is None:
            return [180] * (len(self.panels) - 1)
        by_left = {junction.left: junction.angle_deg for junction in self.junctions}
        return [by_left[panel.id] for panel in self.panels[:-1]]
