"""Reshape a GTFS-Realtime snapshot into per-station arrivals and alerts."""

import logging
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Tuple

from google.transit import gtfs_realtime_pb2

from .models import Alert, FeedUpdate, StationStatus, StationUpdate

logger = logging.getLogger(__name__)

# The MTA models one physical station as several stop IDs, one per direction of
# travel. Grand Central on the 7 line is both 723N (towards Queens) and 723S.
DIRECTION_SUFFIXES = frozenset({"N", "S"})

StopBuckets = Dict[str, List[StationUpdate]]


def _has_time(stop_time_update, event_name: str) -> bool:
    """Return True if the stop time event exists and carries a timestamp."""
    if not stop_time_update.HasField(event_name):
        return False
    return getattr(stop_time_update, event_name).HasField("time")


def _to_datetime(epoch_seconds: int) -> datetime:
    return datetime.fromtimestamp(epoch_seconds, tz=timezone.utc)


def aggregate_stop_updates(
    feed_message: gtfs_realtime_pb2.FeedMessage,
) -> Tuple[StopBuckets, List[gtfs_realtime_pb2.Alert]]:
    """
    Bucket stop time updates by raw stop ID and collect alerts.

    Entities without a trip ID and stop time updates missing a stop ID, an
    arrival time or a departure time are skipped, as are updates whose
    timestamps cannot be represented as a datetime.

    Args:
        feed_message: Decoded GTFS-Realtime feed.

    Returns:
        Tuple of (raw stop ID -> updates sorted by arrival, alerts in feed order).
    """
    buckets: StopBuckets = {}
    alerts: List[gtfs_realtime_pb2.Alert] = []
    skipped = 0

    for entity in feed_message.entity:
        if entity.HasField("alert"):
            alerts.append(entity.alert)

        if not entity.HasField("trip_update"):
            continue

        trip_update = entity.trip_update
        if not trip_update.HasField("trip") or not trip_update.trip.trip_id:
            continue
        trip_id = trip_update.trip.trip_id

        for stop_time_update in trip_update.stop_time_update:
            if (
                not stop_time_update.stop_id
                or not _has_time(stop_time_update, "arrival")
                or not _has_time(stop_time_update, "departure")
            ):
                skipped += 1
                continue

            # Timestamps outside datetime range (e.g. epoch milliseconds)
            try:
                arrival = _to_datetime(stop_time_update.arrival.time)
                departure = _to_datetime(stop_time_update.departure.time)
            except (OverflowError, OSError, ValueError):
                skipped += 1
                continue

            buckets.setdefault(stop_time_update.stop_id, []).append(
                StationUpdate(trip_id=trip_id, arrival=arrival, departure=departure)
            )

    # list.sort is stable, so equal arrivals keep feed order
    for updates in buckets.values():
        updates.sort(key=lambda update: update.arrival)

    if skipped:
        logger.debug(f"Skipped {skipped} incomplete stop time updates")

    return buckets, alerts


def physical_stop_id(raw_stop_id: str) -> str:
    """
    Strip the direction suffix from a raw stop ID.

    Args:
        raw_stop_id: Stop ID as it appears in the feed (e.g., "723N").

    Returns:
        The physical stop ID (e.g., "723"). IDs without a known suffix, or of a
        single character, are returned unchanged.
    """
    if len(raw_stop_id) > 1 and raw_stop_id[-1] in DIRECTION_SUFFIXES:
        return raw_stop_id[:-1]
    return raw_stop_id


def normalize_stop_ids(buckets: StopBuckets) -> Dict[str, StationStatus]:
    """
    Group directional buckets under their physical stop.

    Each raw stop ID keeps its own update list inside the station, so "723N"
    and "723S" both end up in ``result["723"].updates_by_stop_id``.

    Args:
        buckets: Raw stop ID -> sorted updates.

    Returns:
        Physical stop ID -> StationStatus.
    """
    station_status: Dict[str, StationStatus] = {}

    for raw_stop_id, updates in buckets.items():
        stop_id = physical_stop_id(raw_stop_id)
        status = station_status.setdefault(stop_id, StationStatus(stop_id=stop_id))
        status.updates_by_stop_id[raw_stop_id] = updates

    return station_status


def effect_name(effect: int) -> str:
    """Return the enum name of an alert effect, or its number if unknown."""
    try:
        return gtfs_realtime_pb2.Alert.Effect.Name(effect)
    except ValueError:
        return str(effect)


def alert_header(alert: gtfs_realtime_pb2.Alert) -> str:
    """Return the first non-empty header translation, or an empty string."""
    for translation in alert.header_text.translation:
        if translation.text:
            return translation.text
    return ""


def project_alerts(alerts: Iterable[gtfs_realtime_pb2.Alert]) -> List[Alert]:
    """Reduce raw alerts to (effect, header) pairs, preserving order."""
    return [
        Alert(effect=effect_name(alert.effect), header=alert_header(alert))
        for alert in alerts
    ]


def parse_status(feed_message: gtfs_realtime_pb2.FeedMessage) -> FeedUpdate:
    """
    Build the station-centric view of a feed snapshot.

    Args:
        feed_message: Decoded GTFS-Realtime feed.

    Returns:
        FeedUpdate with stations keyed by physical stop ID and alerts in feed order.
    """
    buckets, raw_alerts = aggregate_stop_updates(feed_message)
    update = FeedUpdate(
        station_status=normalize_stop_ids(buckets),
        alerts=project_alerts(raw_alerts),
    )

    logger.debug(
        f"Parsed {len(update.station_status)} stations "
        f"({len(buckets)} stop IDs) and {len(update.alerts)} alerts"
    )
    return update
