"""Distance adapters - Implementations of DistanceQueryPort.

Available implementations:
- DistanceMatrixHttpAdapter: HTTP client for the distance-matrix endpoint
- StaticDistanceAdapter: In-memory canned responses (tests, offline demo)
"""

from .http_adapter import (
    DistanceMatrixHttpAdapter,
    parse_distance_payload,
    round_half_away,
)
from .static_adapter import StaticDistanceAdapter, ok_payload

__all__ = [
    "DistanceMatrixHttpAdapter",
    "StaticDistanceAdapter",
    "ok_payload",
    "parse_distance_payload",
    "round_half_away",
]
