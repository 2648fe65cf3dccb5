"""MTA GTFS-Realtime feed fetcher."""

import logging
from typing import Optional

import requests
from google.protobuf.message import DecodeError
from google.transit import gtfs_realtime_pb2

from .config import Config
from .errors import ConfigError, FeedError
from .feed_parser import parse_status
from .models import FeedUpdate

logger = logging.getLogger(__name__)

BASE_URL = "https://api-endpoint.mta.info/Dataservice/mtagtfsfeeds/nyct%2Fgtfs-"


class MTAClient:
    """Client for the New York City Transit realtime feed."""

    def __init__(
        self,
        config: Config,
        session: Optional[requests.Session] = None,
        timeout: float = 10,
    ):
        """
        Initialize the MTA client.

        Args:
            config: API key and feed ID. The feed URL is always BASE_URL plus
                the feed ID, so only suffixed feeds (e.g., "ace", "l") are
                reachable; the unsuffixed numbered-lines feed is not.
            session: Optional requests session to reuse. A session passed in
                stays open on close(); the caller owns it.
            timeout: Request timeout in seconds.

        Raises:
            ConfigError: If the config has no feed ID.
        """
        if not config.feed_id:
            raise ConfigError("feed_id must not be empty")

        self.config = config
        self.url = BASE_URL + config.feed_id
        self.timeout = timeout
        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()

    def fetch_feed(self) -> gtfs_realtime_pb2.FeedMessage:
        """
        Fetch and decode the current feed snapshot.

        Returns:
            Decoded FeedMessage.

        Raises:
            FeedError: If the request fails or the body is not a valid feed.
        """
        logger.debug(f"Fetching {self.url}")
        try:
            response = self._session.get(
                self.url,
                headers={"x-api-key": self.config.api_key},
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error(f"Failed to fetch {self.url}: {e}")
            raise FeedError(f"Failed to fetch {self.url}: {e}") from e

        feed = gtfs_realtime_pb2.FeedMessage()
        try:
            feed.ParseFromString(response.content)
        except DecodeError as e:
            logger.error(f"Failed to decode feed from {self.url}: {e}")
            raise FeedError(f"Failed to decode feed from {self.url}: {e}") from e

        return feed

    def get_feed(self) -> FeedUpdate:
        """Retrieve the current feed as per-station arrivals and alerts."""
        return parse_status(self.fetch_feed())

    def close(self) -> None:
        """Release the HTTP session if this client created it."""
        if self._owns_session:
            self._session.close()
