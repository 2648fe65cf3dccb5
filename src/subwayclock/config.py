"""Configuration for the MTA realtime feed client."""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Union

import yaml

from .errors import ConfigError

logger = logging.getLogger(__name__)

API_KEY_ENV = "MTA_API_KEY"
FEED_ID_ENV = "MTA_FEED_ID"


@dataclass
class Config:
    """Defines how to configure the subway client."""
    api_key: str
    feed_id: str  # e.g., "ace", "bdfm", "l"

    @classmethod
    def from_mapping(cls, data: Mapping) -> "Config":
        """
        Build a Config from a parsed document.

        Args:
            data: Mapping with ``api_key`` and ``feed_id`` keys.

        Raises:
            ConfigError: If the document is not a mapping or a key is missing.
        """
        if not isinstance(data, Mapping):
            raise ConfigError(f"Expected a mapping, got {type(data).__name__}")

        missing = [key for key in ("api_key", "feed_id") if not data.get(key)]
        if missing:
            raise ConfigError(f"Missing config keys: {', '.join(missing)}")

        return cls(api_key=str(data["api_key"]), feed_id=str(data["feed_id"]))

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "Config":
        """
        Load configuration from a YAML or JSON file.

        Args:
            path: Path to a .yaml, .yml or .json file.

        Raises:
            ConfigError: If the file is missing, unreadable or incomplete.
        """
        path = Path(path)
        suffix = path.suffix.lower()
        if suffix not in (".yaml", ".yml", ".json"):
            raise ConfigError(f"Unsupported config format: {path.name}")

        logger.info(f"Loading config from {path}")
        try:
            with open(path, "r", encoding="utf-8") as f:
                if suffix == ".json":
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except FileNotFoundError as e:
            raise ConfigError(f"Config file not found: {path}") from e
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to parse {path}: {e}") from e

        return cls.from_mapping(data)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
        """Load configuration from MTA_API_KEY and MTA_FEED_ID."""
        if environ is None:
            environ = os.environ
        try:
            return cls.from_mapping({
                "api_key": environ.get(API_KEY_ENV),
                "feed_id": environ.get(FEED_ID_ENV),
            })
        except ConfigError as e:
            raise ConfigError(f"{e} (set {API_KEY_ENV} and {FEED_ID_ENV})") from e
