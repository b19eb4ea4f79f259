"""Per-session form state for the Gradio front-end.

Holds the transient UI state of one browser session: the busy flag that
locks the form while a batch runs, the form-level error text, the last
published batch and the colour theme. Nothing here is process-wide.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence

from ..domain.models import BatchResult, Theme
from ..services.batch_service import DistanceBatchService

REQUIRED_FIELDS_MESSAGE = "All ZIP code fields are required."


def missing_fields(sources: Sequence[str], destination: str) -> bool:
    """Return True if any field is blank once trimmed."""
    return any(not s.strip() for s in sources) or not destination.strip()


@dataclass
class FormSession:
    """State of one form session.

    Attributes:
        busy: True while a batch is outstanding
        error: Form-level error text, empty when there is none
        batch: Last published batch, None before the first one
        theme: Current colour theme
    """

    busy: bool = False
    error: str = ""
    batch: Optional[BatchResult] = None
    theme: Theme = Theme.LIGHT

    _logger: logging.Logger = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def begin(self) -> None:
        """Start a submission: clear previous output and set the busy flag.

        Raises:
            RuntimeError: If a batch is already outstanding.
        """
        if self.busy:
            raise RuntimeError("A distance batch is already running")
        self.error = ""
        self.batch = None
        self.busy = True

    def finish(self, batch: BatchResult) -> None:
        """Publish a completed batch and release the form."""
        self.batch = batch
        self.busy = False

    def toggle_theme(self) -> Theme:
        self.theme = self.theme.toggled()
        return self.theme

    def submit(
        self,
        service: DistanceBatchService,
        sources: Sequence[str],
        destination: str,
    ) -> Optional[BatchResult]:
        """Validate the fields, run one batch and publish it.

        Args:
            service: Batch service to run the queries with.
            sources: Source fields as entered.
            destination: Destination field as entered.

        Returns:
            The published batch, or None if a field was blank.
        """
        if missing_fields(sources, destination):
            self.error = REQUIRED_FIELDS_MESSAGE
            self.batch = None
            self._logger.info("Form submitted with blank fields")
            return None

        self.begin()
        try:
            batch = service.compute_batch(list(sources), destination)
        finally:
            self.busy = False
        self.finish(batch)
        return batch
