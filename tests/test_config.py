"""Tests for Config loading."""

import json
import tempfile
import unittest
import sys
from pathlib import Path

# Add src to path so we can import subwayclock
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from subwayclock.config import Config
from subwayclock.errors import ConfigError


class TestConfig(unittest.TestCase):
    """Test loading configuration from files and the environment."""

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def test_from_yaml(self):
        path = self.tmp / "config.yaml"
        path.write_text("api_key: secret\nfeed_id: bdfm\n", encoding="utf-8")

        config = Config.from_file(path)

        self.assertEqual(config, Config(api_key="secret", feed_id="bdfm"))

    def test_from_json(self):
        path = self.tmp / "config.json"
        path.write_text(json.dumps({"api_key": "secret", "feed_id": "l"}), encoding="utf-8")

        self.assertEqual(Config.from_file(str(path)), Config(api_key="secret", feed_id="l"))

    def test_missing_key(self):
        path = self.tmp / "config.yml"
        path.write_text("api_key: secret\n", encoding="utf-8")

        with self.assertRaises(ConfigError) as ctx:
            Config.from_file(path)
        self.assertIn("feed_id", str(ctx.exception))

    def test_not_a_mapping(self):
        path = self.tmp / "config.yaml"
        path.write_text("- ace\n- l\n", encoding="utf-8")

        with self.assertRaises(ConfigError):
            Config.from_file(path)

    def test_invalid_yaml(self):
        path = self.tmp / "config.yaml"
        path.write_text("api_key: [unclosed\n", encoding="utf-8")

        with self.assertRaises(ConfigError):
            Config.from_file(path)

    def test_missing_file(self):
        with self.assertRaises(ConfigError):
            Config.from_file(self.tmp / "nope.yaml")

    def test_unsupported_extension(self):
        path = self.tmp / "config.toml"
        path.write_text("api_key = 'x'\n", encoding="utf-8")

        with self.assertRaises(ConfigError):
            Config.from_file(path)

    def test_from_env(self):
        config = Config.from_env({"MTA_API_KEY": "secret", "MTA_FEED_ID": "g"})

        self.assertEqual(config, Config(api_key="secret", feed_id="g"))

    def test_from_env_missing(self):
        with self.assertRaises(ConfigError) as ctx:
            Config.from_env({"MTA_API_KEY": "secret"})
        self.assertIn("MTA_FEED_ID", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
