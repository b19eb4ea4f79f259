"""Typed domain errors for the ZIP distance finder.

All errors inherit from ZipDistanceError and can optionally
wrap a root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class ZipDistanceError(Exception):
    """Base error for the ZIP distance domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass(init=False)
class RouteNotFoundError(ZipDistanceError):
    """The upstream service reported no usable route for a pair.

    Raised for both a top-level and an element-level non-OK status;
    the two cases share one message.

    Attributes:
        source: Origin postal code as sent upstream
        destination: Destination postal code as sent upstream
    """

    source: str = ""
    destination: str = ""

    def __init__(self, source: str, destination: str) -> None:
        self.source = source
        self.destination = destination
        self.message = f"No route found from {source} to {destination}"
        self.cause = None
        self.__post_init__()


@dataclass
class TransportOrParseError(ZipDistanceError):
    """Network failure or malformed upstream response.

    The message is the underlying exception's text, unchanged.

    Attributes:
        url: Endpoint that was being queried, if known
    """

    url: Optional[str] = None

    def __str__(self) -> str:
        return self.message

    @classmethod
    def wrap(cls, exc: Exception, url: Optional[str] = None) -> TransportOrParseError:
        """Build an error carrying *exc*'s message verbatim."""
        return cls(str(exc), cause=exc, url=url)


@dataclass
class ConfigurationError(ZipDistanceError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
