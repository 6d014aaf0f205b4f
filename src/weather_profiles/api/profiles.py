"""
Profile operations for the weather profiles backend.

Handles retrieval of the profile list and per-profile telemetry.
"""

import logging
from typing import List, Dict, Any, Optional


class ProfilesAPI:
    """Mixin for profile-related API operations."""

    logger: logging.Logger

    def get(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """Method provided by APIClient base class."""
        ...

    def get_profiles(self) -> List[Dict[str, Any]]:
        """
        Get list of all weather profiles.

        Returns:
            List of profile objects ``{id, name|profileName, latestCoords}``
        """
        self.logger.info("Fetching profiles")
        result = self.get("/profiles")

        # API might return a list or dict with profiles
        if isinstance(result, list):
            return result
        if isinstance(result, dict):
            return result.get("profiles", [])
        return []

    def get_profile_data(self, profile_id: Any) -> List[Dict[str, Any]]:
        """
        Get telemetry records for one profile.

        Args:
            profile_id: Profile ID

        Returns:
            List of telemetry records, in no particular order

        Raises:
            ValueError: If the response body is not a list of records
        """
        self.logger.info(f"Fetching data for profile {profile_id}")
        result = self.get(f"/profiles/{profile_id}/data")

        if isinstance(result, dict) and "data" in result:
            result = result["data"]
        if not isinstance(result, list):
            raise ValueError(
                f"Unexpected telemetry payload for profile {profile_id}: {type(result).__name__}"
            )
        return result
