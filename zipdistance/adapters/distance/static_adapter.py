"""Static distance adapter for tests and offline runs.

Answers from an in-memory table of upstream payloads instead of the
network. Payloads go through the same parsing as the HTTP adapter, so
rounding and "no route" handling are identical.

Example:
    @pytest.fixture
    def adapter():
        return StaticDistanceAdapter(
            responses={("95131", "60601"): ok_payload(3400000, 112000)}
        )
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Tuple, Union

from ...domain.errors import RouteNotFoundError, TransportOrParseError
from ...domain.models import DistanceQueryResult
from .http_adapter import parse_distance_payload

Pair = Tuple[str, str]
StaticResponse = Union[Mapping[str, Any], Exception]

NOT_FOUND_PAYLOAD: Dict[str, Any] = {
    "status": "OK",
    "rows": [{"elements": [{"status": "NOT_FOUND"}]}],
}


def ok_payload(distance_meters: float, duration_seconds: float) -> Dict[str, Any]:
    """Build a successful upstream payload for one pair."""
    return {
        "status": "OK",
        "rows": [
            {
                "elements": [
                    {
                        "status": "OK",
                        "distance": {"value": distance_meters},
                        "duration": {"value": duration_seconds},
                    }
                ]
            }
        ],
    }


@dataclass
class StaticDistanceAdapter:
    """Deterministic stand-in for the distance service.

    This adapter implements DistanceQueryPort without any I/O.
    Unknown pairs behave like an upstream NOT_FOUND element.

    Attributes:
        responses: Payload (or exception to raise) per (source, destination)
        calls: Every (source, destination) queried, in call order
    """

    responses: Dict[Pair, StaticResponse] = field(default_factory=dict)
    calls: List[Pair] = field(default_factory=list, init=False)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def add(self, source: str, destination: str, response: StaticResponse) -> None:
        """Register the response for one pair."""
        self.responses[(source, destination)] = response

    def query_distance(self, source: str, destination: str) -> DistanceQueryResult:
        """Answer from the static table.

        Raises:
            RouteNotFoundError: If the stored payload reports no route.
            TransportOrParseError: If the stored payload is malformed.
            Exception: Whatever exception instance was stored for the pair.
        """
        self.calls.append((source, destination))
        response = self.responses.get((source, destination), NOT_FOUND_PAYLOAD)

        if isinstance(response, Exception):
            self._logger.debug(
                "Static adapter raising stored error",
                extra={"source": source, "destination": destination},
            )
            raise response

        try:
            return parse_distance_payload(response, source, destination)
        except RouteNotFoundError:
            raise
        except (KeyError, IndexError, TypeError, ValueError) as e:
            raise TransportOrParseError.wrap(e) from e

    def reset(self) -> int:
        """Forget recorded calls.

        Returns:
            Number of calls that were cleared.
        """
        count = len(self.calls)
        self.calls.clear()
        return count
