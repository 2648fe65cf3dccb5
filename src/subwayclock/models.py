"""Data models for the station-centric feed view."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List


@dataclass(frozen=True)
class StationUpdate:
    """Represents one predicted stop of a trip at a (directional) stop."""
    trip_id: str
    arrival: datetime  # UTC
    departure: datetime  # UTC

    def to_dict(self) -> dict:
        return {
            "tripID": self.trip_id,
            "arrival": self.arrival.isoformat(),
            "departure": self.departure.isoformat(),
        }


@dataclass
class StationStatus:
    """All updates for one physical stop, keyed by raw (directional) stop ID."""
    stop_id: str = ""
    updates_by_stop_id: Dict[str, List[StationUpdate]] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "stopID": self.stop_id,
            "stopIDToUpdates": {
                raw_id: [update.to_dict() for update in updates]
                for raw_id, updates in self.updates_by_stop_id.items()
            },
        }


@dataclass(frozen=True)
class Alert:
    """Represents a service alert reduced to display text."""
    effect: str  # e.g., "SIGNIFICANT_DELAYS", "DETOUR"
    header: str

    def to_dict(self) -> dict:
        return {"effect": self.effect, "header": self.header}


@dataclass(frozen=True)
class FeedUpdate:
    """Station statuses and alerts extracted from a single feed snapshot."""
    station_status: Dict[str, StationStatus]  # physical stop ID -> status
    alerts: List[Alert]

    def to_dict(self) -> dict:
        """
        Render the update as JSON-ready primitives.

        Returns:
            Dictionary with ``stationStatus`` and ``alerts`` keys; timestamps
            are ISO-8601 strings.
        """
        return {
            "stationStatus": {
                stop_id: status.to_dict()
                for stop_id, status in self.station_status.items()
            },
            "alerts": [alert.to_dict() for alert in self.alerts],
        }
