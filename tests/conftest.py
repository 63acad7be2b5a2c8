"""Pytest configuration and shared fixtures for shower configurator tests."""

from __future__ import annotations

import pytest
from typing import TYPE_CHECKING

from showers.domain.entities import Panel, PanelChain

if TYPE_CHECKING:
    from showers.application.commands import RecomputeDesignCommand
    from showers.application.door_configurator import DoorConfigurator


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: tests running the full recompute pipeline"
    )


@pytest.fixture(autouse=True)
def _reset_default_factory():
    """Give every test a fresh default ServiceFactory."""
    from showers.application.factory import reset_factory

    reset_factory()
    yield
    reset_factory()


# =============================================================================
# Panel chains
# =============================================================================


@pytest.fixture
def door_only_chain() -> PanelChain:
    """A single 800mm door fixed between two walls."""
    return PanelChain.from_panels([Panel.door("door", 800)])


@pytest.fixture
def inline_chain() -> PanelChain:
    """Fixed 600 | Door 700 | Fixed 500, all inline."""
    return PanelChain.from_panels(
        [
            Panel.fixed("left", 600),
            Panel.door("door", 700),
            Panel.fixed("right", 500),
        ]
    )


@pytest.fixture
def corner_chain() -> PanelChain:
    """Fixed 600 | Door 700 | Fixed 500 with a 90 degree corner on the right."""
    return PanelChain.from_panels(
        [
            Panel.fixed("left", 600),
            Panel.door("door", 700),
            Panel.fixed("right", 500),
        ],
        angles=[180, 90],
    )


# =============================================================================
# Application services
# =============================================================================


@pytest.fixture
def recompute_command() -> "RecomputeDesignCommand":
    """Create a RecomputeDesignCommand using the default factory."""
    from showers.application.factory import get_factory

    return get_factory().create_recompute_command()


@pytest.fixture
def door_configurator() -> "DoorConfigurator":
    """Create a DoorConfigurator using the default factory."""
    from showers.application.factory import get_factory

    return get_factory().create_door_configurator()
