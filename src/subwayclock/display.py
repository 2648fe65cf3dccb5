"""Flatten a FeedUpdate for rendering."""

from typing import Dict, List, Optional

import pandas as pd

from .feed_parser import physical_stop_id
from .models import FeedUpdate, StationUpdate

COLUMNS = ["stop_id", "raw_stop_id", "direction", "trip_id", "arrival", "departure"]


def _direction(raw_stop_id: str) -> str:
    if physical_stop_id(raw_stop_id) != raw_stop_id:
        return raw_stop_id[-1]
    return ""


def to_dataframe(update: FeedUpdate) -> pd.DataFrame:
    """
    Build a table with one row per predicted stop.

    Args:
        update: Result of ``parse_status``.

    Returns:
        DataFrame with columns stop_id, raw_stop_id, direction, trip_id,
        arrival and departure, sorted by station, raw stop ID and arrival.
    """
    rows = []
    for stop_id, status in update.station_status.items():
        for raw_stop_id, updates in status.updates_by_stop_id.items():
            direction = _direction(raw_stop_id)
            for station_update in updates:
                rows.append({
                    "stop_id": stop_id,
                    "raw_stop_id": raw_stop_id,
                    "direction": direction,
                    "trip_id": station_update.trip_id,
                    "arrival": station_update.arrival,
                    "departure": station_update.departure,
                })

    df = pd.DataFrame(rows, columns=COLUMNS)
    if df.empty:
        return df
    return df.sort_values(
        ["stop_id", "raw_stop_id", "arrival"], kind="stable"
    ).reset_index(drop=True)


def next_arrivals(
    update: FeedUpdate,
    stop_id: str,
    limit: Optional[int] = None,
) -> Dict[str, List[StationUpdate]]:
    """
    Get upcoming updates for a station, per raw (directional) stop ID.

    Args:
        update: Result of ``parse_status``.
        stop_id: Physical stop ID (e.g., "723").
        limit: Optional maximum number of updates per direction.

    Returns:
        Raw stop ID -> updates sorted by arrival; empty if the stop is unknown.

    Raises:
        ValueError: If limit is negative.
    """
    if limit is not None and limit < 0:
        raise ValueError(f"limit must not be negative, got {limit}")

    status = update.station_status.get(stop_id)
    if status is None:
        return {}
    return {
        raw_stop_id: list(updates[:limit]) if limit is not None else list(updates)
        for raw_stop_id, updates in status.updates_by_stop_id.items()
    }
