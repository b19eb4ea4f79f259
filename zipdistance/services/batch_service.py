"""Distance batch service - Main orchestrator.

Queries one destination against a fixed list of sources, one call at a
time, and ranks the successful answers by distance.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import List, Optional, Sequence

from ..domain.errors import ZipDistanceError
from ..domain.models import BatchResult, OutcomeRecord
from ..ports.distance import DistanceQueryPort


def mark_nearest(
    records: Sequence[OutcomeRecord],
) -> tuple[tuple[OutcomeRecord, ...], Optional[float]]:
    """Flag the record(s) holding the smallest successful distance.

    Ties are all flagged. With no successful record nothing is flagged
    and the minimum is None.

    Args:
        records: Unflagged outcomes in input order.

    Returns:
        Tuple of (records in the same order, minimum distance in km or None).
    """
    distances = [r.distance_km for r in records if r.distance_km is not None]
    if not distances:
        return tuple(records), None

    min_distance = min(distances)
    flagged = tuple(
        replace(r, is_min=r.distance_km == min_distance) for r in records
    )
    return flagged, min_distance


@dataclass
class DistanceBatchService:
    """Main service for computing a batch of distances.

    The sources are queried strictly in order; each query completes
    before the next one starts. A failing source never aborts the batch.

    Attributes:
        distance_query: Distance lookup collaborator
    """

    distance_query: DistanceQueryPort

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def compute_batch(self, sources: Sequence[str], destination: str) -> BatchResult:
        """Query every source against *destination* and rank the results.

        Args:
            sources: Source postal codes as entered (may carry whitespace).
            destination: Destination postal code as entered.

        Returns:
            BatchResult with one record per source, in input order.
        """
        dest = destination.strip()
        self._logger.info(
            "Starting distance batch",
            extra={"sources": len(sources), "destination": dest},
        )

        records: List[OutcomeRecord] = []
        for source in sources:
            records.append(self._query_one(source, dest))

        flagged, min_distance = mark_nearest(records)
        batch = BatchResult(
            destination=destination,
            records=flagged,
            min_distance_km=min_distance,
        )

        self._logger.info(
            "Distance batch complete",
            extra={
                "succeeded": len(batch.successes),
                "failed": len(batch.failures),
                "min_distance_km": min_distance,
            },
        )
        return batch

    def _query_one(self, source: str, destination: str) -> OutcomeRecord:
        """Query a single source and capture the outcome as a record."""
        try:
            result = self.distance_query.query_distance(source.strip(), destination)
        except ZipDistanceError as e:
            self._logger.warning(
                "Distance query failed",
                extra={
                    "source": source,
                    "destination": destination,
                    "error_type": type(e).__name__,
                    "error": e.message,
                },
            )
            return OutcomeRecord(source=source, error=e.message)
        except Exception as e:
            self._logger.exception(
                "Unexpected error in distance query",
                extra={"source": source, "destination": destination},
            )
            return OutcomeRecord(source=source, error=str(e))

        return OutcomeRecord(source=source, result=result)

    def format_batch(self, batch: BatchResult) -> str:
        """Format a batch as human-readable text, one line per source.

        Args:
            batch: The computed batch.

        Returns:
            Formatted result string.
        """
        lines = [f"Destination: {batch.destination.strip()}"]
        for record in batch:
            if record.result is None:
                lines.append(f"From {record.source}: {record.error}")
                continue
            marker = " (nearest)" if record.is_min else ""
            lines.append(
                f"From {record.source}: {record.result.distance_km} km / "
                f"{record.result.distance_miles} miles, "
                f"{record.result.duration_mins} minutes{marker}"
            )
        return "\n".join(lines)
