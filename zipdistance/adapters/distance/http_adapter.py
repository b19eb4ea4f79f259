"""Distance-matrix HTTP adapter.

This adapter queries the external distance service over HTTP with:
- Configuration injection (endpoint, timeout, user agent)
- A shared requests.Session
- Typed errors for "no route" and transport/parse failures
- Structured logging

No caching and no retry: every call is exactly one GET.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Mapping, Optional

import requests

from ...config import DistanceApiConfig, get_config
from ...domain.errors import RouteNotFoundError, TransportOrParseError
from ...domain.models import DistanceQueryResult

KM_TO_MILES = 0.621371


def round_half_away(value: float, places: int = 2) -> float:
    """Round *value* to *places* decimals, ties away from zero.

    The float's shortest decimal representation is rounded, so
    12.345 gives 12.35 even though its binary value is slightly below.

    Raises:
        ValueError: If *value* is not finite or too large to quantize.
    """
    quantum = Decimal(1).scaleb(-places)
    try:
        rounded = Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP)
    except InvalidOperation as e:
        raise ValueError(f"Cannot round {value!r} to {places} decimals") from e
    return float(rounded)


def parse_distance_payload(
    payload: Mapping[str, Any], source: str, destination: str
) -> DistanceQueryResult:
    """Validate a decoded upstream payload and derive the result.

    Only ``rows[0].elements[0]`` is consulted.

    Args:
        payload: Decoded JSON body of the distance service.
        source: Origin postal code (used in the error message).
        destination: Destination postal code (used in the error message).

    Returns:
        DistanceQueryResult rounded to 2 decimals.

    Raises:
        RouteNotFoundError: If the top-level or element status is not "OK".
        KeyError, IndexError, TypeError: If the payload is malformed.
        ValueError: If a distance or duration cannot be rounded.
    """
    if payload["status"] != "OK" or payload["rows"][0]["elements"][0]["status"] != "OK":
        raise RouteNotFoundError(source, destination)

    element = payload["rows"][0]["elements"][0]
    distance_km = element["distance"]["value"] / 1000
    distance_miles = distance_km * KM_TO_MILES
    duration_mins = element["duration"]["value"] / 60

    return DistanceQueryResult(
        distance_km=round_half_away(distance_km),
        distance_miles=round_half_away(distance_miles),
        duration_mins=round_half_away(duration_mins),
    )


@dataclass
class DistanceMatrixHttpAdapter:
    """HTTP client for the distance-matrix style endpoint.

    This adapter implements DistanceQueryPort.

    Attributes:
        config: Distance API configuration
        session: HTTP session used for every request
    """

    config: DistanceApiConfig = field(default_factory=lambda: get_config().api)
    session: requests.Session = field(default_factory=requests.Session, repr=False)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        self.session.headers["User-Agent"] = self.config.user_agent

    def query_distance(self, source: str, destination: str) -> DistanceQueryResult:
        """Query distance and duration from *source* to *destination*.

        Args:
            source: Origin postal code, passed verbatim.
            destination: Destination postal code, passed verbatim.

        Returns:
            DistanceQueryResult with km, miles and minutes.

        Raises:
            RouteNotFoundError: If the service reports no usable route.
            TransportOrParseError: On network failure or malformed body.
        """
        url = self.config.base_url
        self._logger.debug(
            "Querying distance service",
            extra={"source": source, "destination": destination, "url": url},
        )

        try:
            response = self.session.get(
                url,
                params={"origins": source, "destinations": destination},
                timeout=self.config.timeout_seconds,
            )
            payload = response.json()
        except (requests.RequestException, ValueError) as e:
            self._logger.warning(
                "Distance service request failed",
                extra={"source": source, "destination": destination, "error": str(e)},
            )
            raise TransportOrParseError.wrap(e, url=url) from e

        try:
            result = parse_distance_payload(payload, source, destination)
        except RouteNotFoundError:
            self._logger.info(
                "Distance service found no route",
                extra={"source": source, "destination": destination},
            )
            raise
        except (KeyError, IndexError, TypeError, ValueError) as e:
            self._logger.warning(
                "Malformed distance service response",
                extra={"source": source, "destination": destination, "error": str(e)},
            )
            raise TransportOrParseError.wrap(e, url=url) from e

        self._logger.debug(
            "Distance query success",
            extra={
                "source": source,
                "destination": destination,
                "distance_km": result.distance_km,
            },
        )
        return result

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()
