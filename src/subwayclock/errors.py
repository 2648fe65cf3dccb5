"""Exceptions raised by SubwayClock."""


class SubwayClockError(Exception):
    """Base class for all SubwayClock errors."""


class ConfigError(SubwayClockError):
    """Raised when the client configuration is missing or invalid."""


class FeedError(SubwayClockError):
    """Raised when the realtime feed cannot be fetched or decoded."""
