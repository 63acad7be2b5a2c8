"""Single-door configurator.

DoorConfigurator walks the user through four screens (options, dimensions,
technical, confirmation) and keeps the door's derived numbers current by
re-running the full derivation after every change.
"""

from __future__ import annotations

import logging
import math
from dataclasses import replace

from showers.domain.entities import coerce_positive
from showers.domain.services.fabrication import (
    DEFAULT_RULES,
    DoorConfiguration,
    DoorDerivationEngine,
    DoorResult,
    FabricationRules,
)
from showers.domain.value_objects import (
    DoorConfigType,
    DoorMeasurements,
    GlassType,
    HandleType,
    HardwareFinish,
    HeightMode,
    HingeFamily,
    ThresholdType,
)

from .dtos import DoorScreen, DoorState

logger = logging.getLogger(__name__)

SCREEN_ORDER: tuple[DoorScreen, ...] = (
    DoorScreen.OPTIONS,
    DoorScreen.DIMENSIONS,
    DoorScreen.TECHNICAL,
    DoorScreen.CONFIRMATION,
)


class InvalidScreenTransitionError(ValueError):
    """Raised when navigation would skip a screen or leave the sequence."""

    pass


class DoorConfigurator:
    """In-memory state machine for configuring one door.

    Forward navigation moves one screen at a time; back navigation may return
    to any earlier screen. Every mutator re-runs the door derivation so that
    ``state`` always reflects the latest inputs.

    Example:
        >>> configurator = DoorConfigurator()
        >>> configurator.update_measurement("left_wall_to_vertical_laser_bottom", 450)
        True
        >>> configurator.next_screen()
        <DoorScreen.DIMENSIONS: 'dimensions'>
    """

    def __init__(
        self,
        engine: DoorDerivationEngine | None = None,
        configuration: DoorConfiguration | None = None,
        rules: FabricationRules = DEFAULT_RULES,
    ) -> None:
        self.rules = rules
        self.engine = engine or DoorDerivationEngine(rules)
        self._configuration = configuration or DoorConfiguration(
            ceiling_air_gap_mm=rules.ceiling_air_gap_mm,
            glass_thickness_mm=rules.glass_thickness_mm,
        )
        self._screen = DoorScreen.OPTIONS
        self._result: DoorResult = self.engine.calculate(self._configuration)

    @property
    def screen(self) -> DoorScreen:
        return self._screen

    @property
    def configuration(self) -> DoorConfiguration:
        return self._configuration

    @property
    def result(self) -> DoorResult:
        return self._result

    @property
    def state(self) -> DoorState:
        return DoorState(
            screen=self._screen,
            configuration=self._configuration,
            result=self._result,
        )

    def next_required_inputs(self) -> tuple[str, ...]:
        return self._result.next_required_inputs

    # Navigation

    def next_screen(self) -> DoorScreen:
        """Advance to the following screen.

        Raises:
            InvalidScreenTransitionError: On the last screen.
        """
        index = SCREEN_ORDER.index(self._screen)
        if index == len(SCREEN_ORDER) - 1:
            raise InvalidScreenTransitionError("Already on the confirmation screen")
        self._screen = SCREEN_ORDER[index + 1]
        return self._screen

    def previous_screen(self) -> DoorScreen:
        """Return to the preceding screen.

        Raises:
            InvalidScreenTransitionError: On the first screen.
        """
        index = SCREEN_ORDER.index(self._screen)
        if index == 0:
            raise InvalidScreenTransitionError("Already on the options screen")
        self._screen = SCREEN_ORDER[index - 1]
        return self._screen

    def go_to(self, screen: DoorScreen | str) -> DoorScreen:
        """Jump to a screen, one step forward or any number back.

        Raises:
            InvalidScreenTransitionError: If the move would skip a screen.
        """
        target = DoorScreen(screen)
        current = SCREEN_ORDER.index(self._screen)
        wanted = SCREEN_ORDER.index(target)
        if wanted > current + 1:
            raise InvalidScreenTransitionError(
                f"Cannot skip from {self._screen.value} to {target.value}"
            )
        self._screen = target
        return self._screen

    # Mutators

    def update_measurement(self, name: str, value: object) -> bool:
        """Record a laser reading.

        Non-numeric and non-positive values are ignored and the previous
        reading is kept.

        Returns:
            True if the reading was applied.

        Raises:
            KeyError: If ``name`` is not a measurement field.
        """
        if name not in DoorMeasurements.field_names():
            raise KeyError(f"Unknown measurement: {name}")
        reading = coerce_positive(value)
        if reading is None:
            logger.debug("Ignoring invalid value %r for %s", value, name)
            return False
        measurements = self._configuration.measurements.with_value(name, reading)
        self._update(measurements=measurements)
        return True

    def clear_measurement(self, name: str) -> None:
        """Forget a reading so it is reported as required again."""
        measurements = self._configuration.measurements.with_value(name, None)
        self._update(measurements=measurements)

    def set_height_mode(self, mode: HeightMode | str) -> None:
        self._update(height_mode=HeightMode(mode))

    def set_seals_required(self, required: bool) -> None:
        self._update(seals_required=bool(required))

    def set_threshold(self, threshold: ThresholdType | str) -> None:
        self._update(threshold=ThresholdType(threshold))

    def set_ceiling_air_gap(self, value: object) -> bool:
        """Move the air-gap slider.

        Values outside 0 to the rules' maximum, or non-numeric values, are
        ignored.

        Returns:
            True if the gap was applied.
        """
        if isinstance(value, bool):
            return False
        try:
            gap = float(value)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return False
        if not math.isfinite(gap) or not 0 <= gap <= self.rules.max_ceiling_air_gap_mm:
            return False
        self._update(ceiling_air_gap_mm=gap)
        return True

    def set_requested_hinge(self, family: HingeFamily | str | None) -> None:
        self._update(requested_hinge=None if family is None else HingeFamily(family))

    def set_door_type(self, door_type: DoorConfigType | str) -> None:
        self._update(door_type=DoorConfigType(door_type))

    def set_handle_type(self, handle_type: HandleType | str) -> None:
        self._update(handle_type=HandleType(handle_type))

    def set_glass_type(self, glass_type: GlassType | str) -> None:
        self._update(glass_type=GlassType(glass_type))

    def set_hardware_finish(self, finish: HardwareFinish | str) -> None:
        self._update(hardware_finish=HardwareFinish(finish))

    def _update(self, **changes: object) -> None:
        self._configuration = replace(self._configuration, **changes)
        self._result = self.engine.calculate(self._configuration)
