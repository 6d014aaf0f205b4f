"""
Profile data models.

Contains DTOs for weather profiles (map locations) and the current selection.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Optional, Any, Tuple

from ..core.constants import UNNAMED_PROFILE


def _parse_coords(raw: Any) -> Optional[Tuple[float, float]]:
    """Return ``(lat, lon)`` when ``raw`` is a two-element numeric sequence."""
    if not isinstance(raw, (list, tuple)) or len(raw) != 2:
        return None
    lat, lon = raw
    for value in (lat, lon):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return None
    return float(lat), float(lon)


@dataclass(frozen=True)
class Profile:
    """A weather profile as listed by the backend."""

    id: Any
    display_name: str
    latest_coords: Optional[Tuple[float, float]] = None

    @classmethod
    def from_dict(cls, data: Mapping) -> "Profile":
        """Build a profile from ``{id, name|profileName, latestCoords}``."""
        name = data.get("name") or data.get("profileName") or UNNAMED_PROFILE
        return cls(
            id=data.get("id"),
            display_name=name,
            latest_coords=_parse_coords(data.get("latestCoords")),
        )

    @property
    def is_placeable(self) -> bool:
        return self.latest_coords is not None

    @property
    def coordinates_label(self) -> Optional[str]:
        """Marker popup text, e.g. ``"7.8731, 80.7718"``."""
        if self.latest_coords is None:
            return None
        lat, lon = self.latest_coords
        return f"{lat:.4f}, {lon:.4f}"


@dataclass(frozen=True)
class SelectedLocation:
    """Location picked on the map."""

    id: Any
    display_name: str
