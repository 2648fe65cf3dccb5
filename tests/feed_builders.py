"""Helpers for building GTFS-Realtime snapshots in tests."""

from google.transit import gtfs_realtime_pb2

# Fixed reference time (2023-11-14T22:13:20Z)
T = 1700000000


def new_feed() -> gtfs_realtime_pb2.FeedMessage:
    feed = gtfs_realtime_pb2.FeedMessage()
    feed.header.gtfs_realtime_version = "2.0"
    feed.header.timestamp = T
    return feed


def add_trip(feed, trip_id, stops):
    """
    Add a trip update entity.

    Args:
        feed: FeedMessage to extend.
        trip_id: Trip ID, or None to leave the trip descriptor unset.
        stops: List of (stop_id, arrival, departure); None leaves a field unset.
    """
    entity = feed.entity.add()
    entity.id = str(len(feed.entity))
    trip_update = entity.trip_update
    if trip_id is not None:
        trip_update.trip.trip_id = trip_id

    for stop_id, arrival, departure in stops:
        stop_time_update = trip_update.stop_time_update.add()
        if stop_id is not None:
            stop_time_update.stop_id = stop_id
        if arrival is not None:
            stop_time_update.arrival.time = arrival
        if departure is not None:
            stop_time_update.departure.time = departure
    return entity


def add_alert(feed, effect, texts):
    entity = feed.entity.add()
    entity.id = str(len(feed.entity))
    entity.alert.effect = effect
    for text in texts:
        translation = entity.alert.header_text.translation.add()
        if text is not None:
            translation.text = text
        translation.language = "en"
    return entity
