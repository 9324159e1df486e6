import os
import unittest
from unittest import mock

from vwaper.config import get_settings


class TestConfig(unittest.TestCase):
    def test_defaults(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            s = get_settings()

        self.assertEqual(s.source, "FILE")
        self.assertEqual(s.input_path, "data/market.txt")
        self.assertEqual(s.delimiter, "#")
        self.assertEqual(s.log_level, "INFO")
        self.assertFalse(s.preload_source)

    def test_http_source_requires_url(self):
        with mock.patch.dict(os.environ, {"VWAPER_SOURCE": "http"}, clear=True):
            with self.assertRaises(RuntimeError):
                get_settings()

    def test_overrides(self):
        env = {
            "VWAPER_SOURCE": "HTTP",
            "VWAPER_INPUT_URL": "https://example.test/m.txt",
            "VWAPER_HTTP_TIMEOUT_SECONDS": "3.5",
            "VWAPER_DELIMITER": "###",
            "PRELOAD_SOURCE": "true",
            "LOG_LEVEL": "debug",
        }
        with mock.patch.dict(os.environ, env, clear=True):
            s = get_settings()

        self.assertEqual(s.source, "HTTP")
        self.assertEqual(s.http_timeout_seconds, 3.5)
        self.assertEqual(s.delimiter, "###")
        self.assertTrue(s.preload_source)
        self.assertEqual(s.log_level, "DEBUG")

    def test_empty_delimiter_rejected(self):
        with mock.patch.dict(os.environ, {"VWAPER_DELIMITER": "  "}, clear=True):
            with self.assertRaises(RuntimeError):
                get_settings()

    def test_unknown_log_level_rejected(self):
        with mock.patch.dict(os.environ, {"LOG_LEVEL": "verbose"}, clear=True):
            with self.assertRaises(RuntimeError):
                get_settings()


if __name__ == "__main__":
    unittest.main()
