"""Service factory for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, cast

from showers.domain.services.fabrication import DEFAULT_RULES, FabricationRules

if TYPE_CHECKING:
    from showers.contracts.protocols import (
        ChainGeometryResolverProtocol,
        DoorDerivationEngineProtocol,
        FabricationServiceProtocol,
        NotchGeometryResolverProtocol,
        PerspectiveProjectorProtocol,
    )
    from showers.application.commands import RecomputeDesignCommand
    from showers.application.door_configurator import DoorConfigurator


@dataclass
class ServiceFactory:
    """Factory for creating service instances.

    Centralizes service instantiation around one FabricationRules table so
    that every service sees the same constants, and supports injecting
    replacements for testing.

    Example:
        ```python
        factory = ServiceFactory(rules=FabricationRules(ceiling_air_gap_mm=30))
        command = factory.create_recompute_command()
        derived = command.execute(state)
        ```
    """

    rules: FabricationRules = DEFAULT_RULES

    # Cached instances
    _chain_resolver: "ChainGeometryResolverProtocol | None" = field(
        default=None, init=False, repr=False
    )
    _notch_resolver: "NotchGeometryResolverProtocol | None" = field(
        default=None, init=False, repr=False
    )
    _projector: "PerspectiveProjectorProtocol | None" = field(
        default=None, init=False, repr=False
    )
    _fabrication_service: "FabricationServiceProtocol | None" = field(
        default=None, init=False, repr=False
    )
    _door_engine: "DoorDerivationEngineProtocol | None" = field(
        default=None, init=False, repr=False
    )

    def get_chain_resolver(self) -> "ChainGeometryResolverProtocol":
        """Get or create chain geometry resolver instance."""
        if self._chain_resolver is None:
            from showers.domain.services import ChainGeometryResolver

            self._chain_resolver = cast(
                "ChainGeometryResolverProtocol", ChainGeometryResolver()
            )
        assert self._chain_resolver is not None
        return self._chain_resolver

    def get_notch_resolver(self) -> "NotchGeometryResolverProtocol":
        """Get or create notch geometry resolver instance."""
        if self._notch_resolver is None:
            from showers.domain.services import NotchGeometryResolver

            self._notch_resolver = cast(
                "NotchGeometryResolverProtocol",
                NotchGeometryResolver(self.rules.glass_thickness_mm),
            )
        assert self._notch_resolver is not None
        return self._notch_resolver

    def get_projector(self) -> "PerspectiveProjectorProtocol":
        """Get or create perspective projector instance."""
        if self._projector is None:
            from showers.domain.services import PerspectiveProjector

            self._projector = cast(
                "PerspectiveProjectorProtocol",
                PerspectiveProjector(self.rules.panel_height_mm),
            )
        assert self._projector is not None
        return self._projector

    def get_fabrication_service(self) -> "FabricationServiceProtocol":
        """Get or create fabrication service instance."""
        if self._fabrication_service is None:
            from showers.domain.services import FabricationService

            self._fabrication_service = cast(
                "FabricationServiceProtocol", FabricationService(self.rules)
            )
        assert self._fabrication_service is not None
        return self._fabrication_service

    def get_door_engine(self) -> "DoorDerivationEngineProtocol":
        """Get or create door derivation engine instance."""
        if self._door_engine is None:
            from showers.domain.services import DoorDerivationEngine

            self._door_engine = cast(
                "DoorDerivationEngineProtocol", DoorDerivationEngine(self.rules)
            )
        assert self._door_engine is not None
        return self._door_engine

    def set_chain_resolver(self, resolver: "ChainGeometryResolverProtocol") -> None:
        """Override chain geometry resolver (for testing)."""
        self._chain_resolver = resolver

    def set_fabrication_service(self, service: "FabricationServiceProtocol") -> None:
        """Override fabrication service (for testing)."""
        self._fabrication_service = service

    def set_door_engine(self, engine: "DoorDerivationEngineProtocol") -> None:
        """Override door derivation engine (for testing)."""
        self._door_engine = engine

    def create_recompute_command(self) -> "RecomputeDesignCommand":
        """Create a RecomputeDesignCommand wired with this factory's services."""
        from showers.application.commands import RecomputeDesignCommand

        return RecomputeDesignCommand(
            chain_resolver=self.get_chain_resolver(),  # type: ignore[arg-type]
            notch_resolver=self.get_notch_resolver(),  # type: ignore[arg-type]
            projector=self.get_projector(),  # type: ignore[arg-type]
            fabrication_service=self.get_fabrication_service(),  # type: ignore[arg-type]
        )

    def create_door_configurator(self) -> "DoorConfigurator":
        """Create a DoorConfigurator sharing this factory's rules."""
        from showers.application.door_configurator import DoorConfigurator

        return DoorConfigurator(
            engine=self.get_door_engine(),  # type: ignore[arg-type]
            rules=self.rules,
        )


_default_factory: ServiceFactory | None = None


def get_factory() -> ServiceFactory:
    """Get the default service factory instance."""
    global _default_factory
    if _default_factory is None:
        _default_factory = ServiceFactory()
    return _default_factory


def reset_factory() -> None:
    """Reset the default factory (for testing)."""
    global _default_factory
    _default_factory = None
