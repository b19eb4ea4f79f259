"""Distance port - Abstraction for the distance/duration service.

This protocol defines the contract for distance lookups, allowing the
HTTP client to be swapped for a deterministic stub in tests.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.models import DistanceQueryResult


class DistanceQueryPort(Protocol):
    """Port for distance queries between two postal codes.

    Implementations:
    - adapters/distance/http_adapter.py (DistanceMatrixHttpAdapter) - Production
    - adapters/distance/static_adapter.py (StaticDistanceAdapter) - Testing, offline
    """

    def query_distance(self, source: str, destination: str) -> DistanceQueryResult:
        """Query distance and duration from *source* to *destination*.

        Args:
            source: Origin postal code, already trimmed.
            destination: Destination postal code, already trimmed.

        Returns:
            DistanceQueryResult with km, miles and minutes.

        Raises:
            RouteNotFoundError: If the service reports no usable route.
            TransportOrParseError: On network or response-format failure.
        """
        ...
