"""Contracts module - protocols for cross-layer communication.

By depending on protocols rather than concrete implementations, the
application layer stays loosely coupled and testable.

Example:
    ```python
    from showers.contracts import ChainGeometryResolverProtocol

    def trace(resolver: ChainGeometryResolverProtocol, chain) -> list:
        return resolver.resolve_chain(chain)
    ```
"""

from .protocols import (
    ChainGeometryResolverProtocol as ChainGeometryResolverProtocol,
    DoorDerivationEngineProtocol as DoorDerivationEngineProtocol,
    FabricationServiceProtocol as FabricationServiceProtocol,
    NotchGeometryResolverProtocol as NotchGeometryResolverProtocol,
    PerspectiveProjectorProtocol as PerspectiveProjectorProtocol,
)

__all__ = [
    "ChainGeometryResolverProtocol",
    "DoorDerivationEngineProtocol",
    "FabricationServiceProtocol",
    "NotchGeometryResolverProtocol",
    "PerspectiveProjectorProtocol",
]
