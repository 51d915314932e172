"""Tests for client configuration and process-wide auth settings."""

import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import MagicMock, patch

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from BvbrcApi.client.context import DEFAULT_BASE_URL, RQL_CONTENT_TYPE
from BvbrcApi.config import (
    get_auth_token,
    get_config,
    load_client_config,
    load_config_file,
    parse_config_dict,
    reset_config,
    set_auth_token,
    set_config,
)
from BvbrcApi.services import create_client_from_config, get_client, query, reset_client


_CONFIG_YAML = """
api:
  base_url: https://example.org/api
  auth_token_env: TEST_BVBRC_TOKEN
  timeout: 20
  headers:
    X-Client: test-suite

log:
  level: debug
  to_file: false
  dir: log
"""


class TestClientConfig(unittest.TestCase):
    def test_defaults_without_file(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            cfg = load_client_config(None, dotenv=False)

        self.assertEqual(cfg.api.base_url, DEFAULT_BASE_URL)
        self.assertIsNone(cfg.api.auth_token)
        self.assertIsNone(cfg.api.timeout)
        self.assertEqual(cfg.runtime.level, "INFO")

    def test_yaml_file_and_env_token(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            path = Path(tmp_dir) / "client.yml"
            path.write_text(_CONFIG_YAML, encoding="utf-8")
            with patch.dict(os.environ, {"TEST_BVBRC_TOKEN": " secret "}, clear=True):
                cfg = load_client_config(path, dotenv=False)

        self.assertEqual(cfg.api.base_url, "https://example.org/api")
        self.assertEqual(cfg.api.auth_token, "secret")
        self.assertEqual(cfg.api.timeout, 20.0)
        self.assertEqual(cfg.runtime.level, "DEBUG")

        context = cfg.to_context()
        self.assertEqual(context.headers["Authorization"], "secret")
        self.assertEqual(context.headers["X-Client"], "test-suite")
        self.assertEqual(context.headers["Content-Type"], RQL_CONTENT_TYPE)
        self.assertEqual(context.timeout, 20.0)

    def test_repository_default_config(self) -> None:
        with patch.dict(os.environ, {"BVBRC_AUTH_TOKEN": "env-token"}, clear=True):
            cfg = load_client_config(REPO_ROOT / "config" / "default.yml", dotenv=False)

        self.assertEqual(cfg.api.base_url, DEFAULT_BASE_URL)
        self.assertEqual(cfg.api.auth_token, "env-token")
        self.assertEqual(cfg.api.timeout, 60.0)
        self.assertEqual(dict(cfg.api.headers), {})
        self.assertFalse(cfg.runtime.to_file)

    def test_explicit_token_overrides_env_token(self) -> None:
        with patch.dict(os.environ, {"BVBRC_AUTH_TOKEN": "from-env"}, clear=True):
            cfg = parse_config_dict({})
        self.assertEqual(cfg.to_context(auth_token="explicit").headers["Authorization"], "explicit")
        self.assertEqual(cfg.to_context().headers["Authorization"], "from-env")

    def test_invalid_values(self) -> None:
        with self.assertRaises(ValueError):
            parse_config_dict({"api": {"base_url": "ftp://example.org"}})
        with self.assertRaises(ValueError):
            parse_config_dict({"api": {"timeout": 0}})
        with self.assertRaises(TypeError):
            parse_config_dict({"api": {"headers": {"X-Num": 1}}})
        with self.assertRaises(TypeError):
            parse_config_dict({"api": "https://example.org"})
        with self.assertRaises(ValueError):
            parse_config_dict({"log": {"level": "LOUD"}})

    def test_client_from_config(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            cfg = parse_config_dict({"api": {"base_url": "https://example.org/api"}})
        client = create_client_from_config(cfg, setup_logging=False)
        self.addCleanup(client.close)
        self.assertEqual(client.context.url_for("genome"), "https://example.org/api/genome/")


class TestAuthSettings(unittest.TestCase):
    def setUp(self) -> None:
        reset_config()
        reset_client()
        self.addCleanup(reset_config)
        self.addCleanup(reset_client)

    def test_set_get_token(self) -> None:
        self.assertIsNone(get_auth_token())
        set_auth_token("abc")
        self.assertEqual(get_auth_token(), "abc")
        set_auth_token(None)
        self.assertIsNone(get_auth_token())

    def test_set_config_merges(self) -> None:
        set_config({"auth_token": "t1", "user": "me"})
        set_config({"auth_token": "t2"})
        self.assertEqual(get_config(), {"auth_token": "t2", "user": "me"})
        snapshot = get_config()
        snapshot["auth_token"] = "mutated"
        self.assertEqual(get_auth_token(), "t2")

    def test_load_config_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            path = Path(tmp_dir) / "config.json"
            path.write_text('{"auth_token": "from-file"}', encoding="utf-8")
            merged = load_config_file(path)

        self.assertEqual(merged["auth_token"], "from-file")
        self.assertEqual(get_auth_token(), "from-file")

    def test_load_missing_file_raises(self) -> None:
        with self.assertRaises(FileNotFoundError):
            load_config_file(Path(tempfile.gettempdir()) / "does-not-exist-bvbrc.json")

    def test_default_client_follows_token(self) -> None:
        first = get_client()
        self.assertNotIn("Authorization", first.context.headers)
        self.assertIs(get_client(), first)

        set_auth_token("tok")
        second = get_client()
        self.assertIsNot(second, first)
        self.assertEqual(second.context.headers["Authorization"], "tok")

    def test_token_change_keeps_previous_client_open(self) -> None:
        first = get_client()
        self.addCleanup(first.close)
        with patch.object(first.api._session, "close") as close:
            set_auth_token("rotated")
            get_client()
        close.assert_not_called()

    def test_module_query_uses_default_client(self) -> None:
        set_auth_token("tok")
        client = get_client()
        response = MagicMock(status_code=200, reason="OK", content=b"[]")
        response.json.return_value = [{"taxon_id": "2"}]
        with patch.object(client.api._session, "post", return_value=response) as post:
            rows = query("taxonomy", "eq(taxon_id,2)", {"limit": 1})

        self.assertEqual(rows, [{"taxon_id": "2"}])
        self.assertEqual(post.call_args.kwargs["data"], b"eq(taxon_id,2)&limit(1)")
        self.assertEqual(post.call_args.kwargs["headers"]["Authorization"], "tok")


if __name__ == "__main__":
    unittest.main()
