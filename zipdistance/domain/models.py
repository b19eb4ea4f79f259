"""Immutable domain models for the ZIP distance finder.

All models are frozen dataclasses with slots. They have no external
dependencies and represent the core concepts of a distance batch:
the per-pair result, the per-source outcome and the batch itself.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, Optional


class Theme(Enum):
    """Colour theme of the form. Purely cosmetic."""

    LIGHT = "light"
    DARK = "dark"

    def toggled(self) -> Theme:
        """Return the other theme."""
        return Theme.DARK if self is Theme.LIGHT else Theme.LIGHT


@dataclass(frozen=True, slots=True)
class DistanceQueryResult:
    """Distance and duration between one source and the destination.

    Attributes:
        distance_km: Road distance in kilometers, 2 decimals
        distance_miles: Road distance in miles, 2 decimals
        duration_mins: Travel time in minutes, 2 decimals
    """

    distance_km: float
    distance_miles: float
    duration_mins: float

    def to_dict(self) -> Dict[str, float]:
        """Convert to a plain dictionary (useful for JSON serialisation)."""
        return {
            "distance_km": self.distance_km,
            "distance_miles": self.distance_miles,
            "duration_mins": self.duration_mins,
        }


@dataclass(frozen=True, slots=True)
class OutcomeRecord:
    """Outcome of querying one source against the destination.

    Exactly one of ``result`` and ``error`` is set.

    Attributes:
        source: Source postal code exactly as entered (untrimmed)
        result: Distance figures when the query succeeded
        error: Failure message when the query failed
        is_min: True when this record holds the smallest distance of its batch
    """

    source: str
    result: Optional[DistanceQueryResult] = None
    error: Optional[str] = None
    is_min: bool = False

    def __post_init__(self) -> None:
        if (self.result is None) == (self.error is None):
            raise ValueError(
                f"OutcomeRecord for {self.source!r} needs exactly one of result or error"
            )
        if self.is_min and self.result is None:
            raise ValueError(
                f"OutcomeRecord for {self.source!r} cannot be the minimum without a result"
            )

    @property
    def is_success(self) -> bool:
        """Check if the query for this source succeeded."""
        return self.result is not None

    @property
    def distance_km(self) -> Optional[float]:
        """Return the distance in km, or None for a failed source."""
        return self.result.distance_km if self.result is not None else None

    def to_dict(self) -> Dict[str, Any]:
        """Flatten the record into a plain dictionary."""
        data: Dict[str, Any] = {
            "source": self.source,
            "is_min": self.is_min,
            "error": self.error,
        }
        if self.result is not None:
            data.update(self.result.to_dict())
        return data


@dataclass(frozen=True, slots=True)
class BatchResult:
    """All outcomes produced by one form submission, in input order.

    Attributes:
        destination: Destination postal code as entered
        records: One outcome per source, same order as the sources
        min_distance_km: Smallest successful distance, None if all failed
    """

    destination: str
    records: tuple[OutcomeRecord, ...] = field(default_factory=tuple)
    min_distance_km: Optional[float] = None

    def __iter__(self) -> Iterator[OutcomeRecord]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)

    @property
    def successes(self) -> tuple[OutcomeRecord, ...]:
        return tuple(r for r in self.records if r.is_success)

    @property
    def failures(self) -> tuple[OutcomeRecord, ...]:
        return tuple(r for r in self.records if not r.is_success)

    @property
    def nearest(self) -> tuple[OutcomeRecord, ...]:
        """Records flagged as the minimum (several on a tie)."""
        return tuple(r for r in self.records if r.is_min)

    @property
    def all_failed(self) -> bool:
        return not self.successes
