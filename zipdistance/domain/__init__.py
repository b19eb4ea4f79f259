"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    RouteNotFoundError,
    TransportOrParseError,
    ZipDistanceError,
)
from .models import BatchResult, DistanceQueryResult, OutcomeRecord, Theme

__all__ = [
    # Models
    "DistanceQueryResult",
    "OutcomeRecord",
    "BatchResult",
    "Theme",
    # Errors
    "ZipDistanceError",
    "RouteNotFoundError",
    "TransportOrParseError",
    "ConfigurationError",
]
