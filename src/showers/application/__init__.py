"""Application layer - use cases and orchestration."""

from .commands import RecomputeDesignCommand, recompute
from .door_configurator import DoorConfigurator, InvalidScreenTransitionError
from .dtos import DerivedState, DesignState, DoorScreen, DoorState, PanelFabrication
from .factory import ServiceFactory, get_factory, reset_factory

__all__ = [
    "DerivedState",
    "DesignState",
    "DoorConfigurator",
    "DoorScreen",
    "DoorState",
    "InvalidScreenTransitionError",
    "PanelFabrication",
    "RecomputeDesignCommand",
    "ServiceFactory",
    "get_factory",
    "recompute",
    "reset_factory",
]
