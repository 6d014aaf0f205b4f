"""
Profile directory service.

Loads the profile list and decides which profiles can be placed on the map.
"""

import logging
from typing import Any, Dict, List, Optional, TYPE_CHECKING

import requests  # type: ignore

from ..models.profile import Profile

if TYPE_CHECKING:
    from ..api import WeatherProfilesAPI


class ProfileDirectory:
    """Keep the most recently loaded list of profiles."""

    def __init__(
        self,
        api_client: "WeatherProfilesAPI",
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize profile directory.

        Args:
            api_client: API client instance
            logger: Logger instance
        """
        self.api_client = api_client
        self.logger = logger or logging.getLogger(__name__)
        self._profiles: List[Profile] = []

    @property
    def profiles(self) -> List[Profile]:
        return list(self._profiles)

    def load(self) -> List[Profile]:
        """
        Fetch the profile list from the backend.

        A failed fetch is logged and leaves the previously loaded list in place.

        Returns:
            All profiles currently known
        """
        try:
            payload = self.api_client.get_profiles()
        except (requests.exceptions.RequestException, ValueError) as e:
            self.logger.error(f"Error loading profiles: {e}")
            return self.profiles

        self._profiles = self._parse(payload)
        self.logger.info(f"Profiles loaded: {len(self._profiles)}")
        return self.profiles

    def _parse(self, payload: List[Dict[str, Any]]) -> List[Profile]:
        profiles = []
        for item in payload:
            if not isinstance(item, dict):
                self.logger.warning(f"Skipping malformed profile entry: {item!r}")
                continue
            profiles.append(Profile.from_dict(item))
        return profiles

    def placeable_profiles(self) -> List[Profile]:
        """Profiles with a valid ``[lat, lon]`` pair; the rest are skipped silently."""
        placeable = []
        for profile in self._profiles:
            if profile.is_placeable:
                placeable.append(profile)
            else:
                self.logger.debug(f"Skipping profile {profile.id}: no usable coordinates")
        return placeable

    def find(self, profile_id: Any) -> Optional[Profile]:
        """Look up a loaded profile by ID (compared as strings)."""
        for profile in self._profiles:
            if str(profile.id) == str(profile_id):
                return profile
        return None
