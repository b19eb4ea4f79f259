"""ZIP distance finder.

Queries a distance/duration service for up to four source postal codes
against one destination and highlights the nearest source.
"""

from .domain.errors import RouteNotFoundError, TransportOrParseError, ZipDistanceError
from .domain.models import BatchResult, DistanceQueryResult, OutcomeRecord
from .services.batch_service import DistanceBatchService

__all__ = [
    "DistanceBatchService",
    "BatchResult",
    "DistanceQueryResult",
    "OutcomeRecord",
    "ZipDistanceError",
    "RouteNotFoundError",
    "TransportOrParseError",
]
