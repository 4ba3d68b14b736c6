"""Tests for config (YAML + env overrides) and logging setup."""

import io
import logging
from unittest.mock import patch

import pytest

from clarifai_v1.core.config import DEFAULT_API_ROOT, ConfigLoader, Settings, get_config, reset_config
from clarifai_v1.core.logging import PACKAGE_LOGGER, setup_logging

pytestmark = [pytest.mark.fast]


def test_settings_loads_from_yaml(tmp_path):
    """Settings loads correctly from a sample YAML."""
    yaml_path = tmp_path / "clarifai_config.yml"
    yaml_path.write_text("""
api_root: http://localhost:2020/v1/
access_token: abc123
timeout_seconds: 30
log_level: DEBUG
unknown_key: ignored
""")
    reset_config()
    cfg = get_config(config_path=yaml_path)
    assert cfg.api_root == "http://localhost:2020/v1"
    assert cfg.access_token == "abc123"
    assert cfg.timeout_seconds == 30.0
    assert cfg.log_level == "DEBUG"


def test_settings_defaults_from_empty_yaml(tmp_path):
    yaml_path = tmp_path / "clarifai_config.yml"
    yaml_path.write_text("")
    cfg = get_config(config_path=yaml_path)
    assert cfg.api_root == DEFAULT_API_ROOT
    assert cfg.access_token is None
    assert cfg.timeout_seconds == 120.0


def test_blank_values_fall_back_to_defaults():
    cfg = Settings(api_root="  ", access_token="")
    assert cfg.api_root == DEFAULT_API_ROOT
    assert cfg.access_token is None


def test_explicit_config_path_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError, match="Config file not found"):
        get_config(config_path=tmp_path / "missing.yml")


def test_explicit_config_path_ignores_env(tmp_path):
    """An explicit config_path is used as-is; env overrides apply only to the default config."""
    yaml_path = tmp_path / "clarifai_config.yml"
    yaml_path.write_text("access_token: from-file\n")
    with patch.dict("os.environ", {"CLARIFAI_ACCESS_TOKEN": "from-env"}):
        cfg = get_config(config_path=yaml_path)
    assert cfg.access_token == "from-file"


def test_load_default_applies_env_over_yaml(tmp_path):
    yaml_path = tmp_path / "custom.yml"
    yaml_path.write_text("api_root: http://file/v1\naccess_token: from-file\nlog_level: WARNING\n")
    loader = ConfigLoader(
        env={
            "CLARIFAI_CONFIG": str(yaml_path),
            "CLARIFAI_ACCESS_TOKEN": "from-env",
        }
    )
    cfg = loader.load_default()
    assert cfg.access_token == "from-env"
    assert cfg.api_root == "http://file/v1"
    assert cfg.log_level == "WARNING"


def test_load_default_without_file_uses_env(tmp_path):
    loader = ConfigLoader(
        env={
            "CLARIFAI_CONFIG": str(tmp_path / "absent.yml"),
            "CLARIFAI_API_ROOT": "http://env/v1",
        }
    )
    cfg = loader.load_default()
    assert cfg.api_root == "http://env/v1"
    assert cfg.access_token is None


def test_get_config_is_cached(tmp_path):
    yaml_path = tmp_path / "clarifai_config.yml"
    yaml_path.write_text("access_token: first\n")
    first = get_config(config_path=yaml_path)
    assert get_config() is first
    reset_config()
    with patch.dict("os.environ", {"CLARIFAI_CONFIG": str(tmp_path / "absent.yml")}):
        assert get_config() is not first


def test_setup_logging_attaches_single_console_handler():
    """Repeated setup_logging calls replace the console handler; records below level are dropped."""
    stream = io.StringIO()
    logger = logging.getLogger(PACKAGE_LOGGER)
    before = list(logger.handlers)
    try:
        setup_logging("warning", stream=stream)
        setup_logging("INFO", stream=stream)
        added = [h for h in logger.handlers if h not in before]
        assert len(added) == 1
        assert logger.level == logging.INFO

        logging.getLogger("clarifai_v1.api.client").debug("msg-debug")
        logging.getLogger("clarifai_v1.api.client").info("msg-info")
        content = stream.getvalue()
        assert "msg-info" in content
        assert "msg-debug" not in content
        assert "[INFO] clarifai_v1.api.client: msg-info" in content
    finally:
        for h in logger.handlers[:]:
            if h not in before:
                logger.removeHandler(h)
        logger.setLevel(logging.NOTSET)


def test_setup_logging_defaults_to_config_level(tmp_path):
    yaml_path = tmp_path / "clarifai_config.yml"
    yaml_path.write_text("log_level: ERROR\n")
    get_config(config_path=yaml_path)
    logger = logging.getLogger(PACKAGE_LOGGER)
    before = list(logger.handlers)
    try:
        setup_logging(stream=io.StringIO())
        assert logger.level == logging.ERROR
    finally:
        for h in logger.handlers[:]:
            if h not in before:
                logger.removeHandler(h)
        logger.setLevel(logging.NOTSET)
