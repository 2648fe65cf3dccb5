"""SubwayClock - station-centric view of the MTA subway realtime feed."""

__version__ = "0.1.0"

from .models import StationUpdate, StationStatus, Alert, FeedUpdate
from .errors import SubwayClockError, ConfigError, FeedError
from .config import Config
from .feed_parser import parse_status
from .mta_client import MTAClient

__all__ = [
    "parse_status",
    "MTAClient",
    "Config",
    "StationUpdate",
    "StationStatus",
    "Alert",
    "FeedUpdate",
    "SubwayClockError",
    "ConfigError",
    "FeedError",
]
