"""
Selection store service.

Holds the telemetry batch of the currently selected location as an
immutable snapshot that is swapped, never mutated.
"""

import logging
import threading
from collections.abc import Mapping
from typing import Any, Iterable, Optional, TYPE_CHECKING

import requests  # type: ignore

from ..models.profile import SelectedLocation
from ..models.telemetry import TelemetryRecord
from ..models.view import SelectionSnapshot

if TYPE_CHECKING:
    from ..api import WeatherProfilesAPI


class SelectionStore:
    """
    Process-wide selection state.

    Every selection is tagged with a generation number. A fetch that
    completes after a newer selection was started is discarded, so the
    snapshot always reflects the most recent selection that succeeded.
    """

    def __init__(
        self,
        api_client: "WeatherProfilesAPI",
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize selection store.

        Args:
            api_client: API client instance
            logger: Logger instance
        """
        self.api_client = api_client
        self.logger = logger or logging.getLogger(__name__)
        self._snapshot = SelectionSnapshot.empty()
        self._generation = 0
        self._lock = threading.Lock()

    @property
    def snapshot(self) -> SelectionSnapshot:
        """Latest snapshot; readers keep it as long as they like."""
        return self._snapshot

    @property
    def generation(self) -> int:
        """Generation of the most recently started selection."""
        return self._generation

    def begin_selection(self) -> int:
        """Start a selection and return its generation."""
        with self._lock:
            self._generation += 1
            return self._generation

    def complete_selection(
        self,
        generation: int,
        location_id: Any,
        display_name: str,
        payload: Iterable[Any]
    ) -> Optional[SelectionSnapshot]:
        """
        Publish a fetched batch.

        Args:
            generation: Value returned by begin_selection()
            location_id: Selected location ID
            display_name: Selected location display name
            payload: Telemetry records from the backend

        Returns:
            The new snapshot, or None if a newer selection has started
        """
        batch = []
        for item in payload:
            if isinstance(item, TelemetryRecord):
                batch.append(item)
            elif isinstance(item, Mapping):
                batch.append(TelemetryRecord.from_dict(item))
            else:
                self.logger.warning(f"Skipping malformed telemetry entry: {item!r}")

        snapshot = SelectionSnapshot(
            location=SelectedLocation(id=location_id, display_name=display_name),
            batch=tuple(batch),
            generation=generation,
        )

        with self._lock:
            if generation != self._generation:
                self.logger.debug(
                    f"Discarding stale data for {location_id} "
                    f"(generation {generation}, latest {self._generation})"
                )
                return None
            self._snapshot = snapshot

        self.logger.info(f"Data loaded for ID {location_id}: {len(batch)} records")
        return snapshot

    def select(self, location_id: Any, display_name: str) -> Optional[SelectionSnapshot]:
        """
        Handle a location-selection event.

        Fetches the location's telemetry and replaces the snapshot on success.
        Failures are logged and leave the current snapshot untouched; they are
        neither retried nor raised.

        Args:
            location_id: Location (profile) ID
            display_name: Name shown for the selection

        Returns:
            The new snapshot, or None if the fetch failed or was superseded
        """
        generation = self.begin_selection()

        try:
            payload = self.api_client.get_profile_data(location_id)
        except (requests.exceptions.RequestException, ValueError) as e:
            self.logger.error(f"Error loading data for profile {location_id}: {e}")
            return None

        return self.complete_selection(generation, location_id, display_name, payload)
