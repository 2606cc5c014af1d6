"""Tests for SketchConfig and logging helpers."""
from __future__ import annotations

import logging
import math

import pytest

from histosketch_lite import logging_config
from histosketch_lite.config import SketchConfig
from histosketch_lite.domain.errors import ConfigError


class TestSketchConfig:
    def test_defaults(self):
        cfg = SketchConfig()
        assert cfg.sketch_size == 2000
        assert cfg.decay_interval == 500
        assert cfg.decay_lambda == 0.02
        assert cfg.seed == 42
        assert cfg.decay_factor == pytest.approx(math.exp(-0.02))

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"sketch_size": 0},
            {"decay_interval": 0},
            {"decay_lambda": -0.1},
            {"decay_lambda": float("inf")},
            {"decay_lambda": float("nan")},
            {"decay_lambda": 1e6},
            {"sketch_size": 2.5},
            {"sketch_size": True},
            {"sketch_size": "8"},
            {"decay_interval": 1.5},
            {"decay_interval": "10"},
            {"seed": 1.0},
            {"decay_lambda": "0.1"},
        ],
    )
    def test_invalid(self, kwargs):
        with pytest.raises(ConfigError):
            SketchConfig(**kwargs)

    def test_config_error_is_value_error(self):
        with pytest.raises(ValueError):
            SketchConfig(sketch_size=-1)

    def test_frozen(self):
        cfg = SketchConfig()
        with pytest.raises(AttributeError):
            cfg.sketch_size = 3

    def test_from_env(self):
        env = {
            "HISTOSKETCH_SIZE": "64",
            "HISTOSKETCH_DECAY": "10",
            "HISTOSKETCH_LAMBDA": "0.5",
            "HISTOSKETCH_SEED": "7",
        }
        cfg = SketchConfig.from_env(env)
        assert cfg == SketchConfig(sketch_size=64, decay_interval=10, decay_lambda=0.5, seed=7)

    def test_from_env_defaults(self):
        assert SketchConfig.from_env({}) == SketchConfig()
        assert SketchConfig.from_env({"HISTOSKETCH_SIZE": " "}) == SketchConfig()

    def test_from_env_bad_value(self):
        with pytest.raises(ConfigError, match="HISTOSKETCH_SIZE"):
            SketchConfig.from_env({"HISTOSKETCH_SIZE": "big"})

    def test_from_os_environ(self, monkeypatch):
        monkeypatch.setenv("HISTOSKETCH_SIZE", "12")
        assert SketchConfig.from_env().sketch_size == 12

    def test_replace_skips_none(self):
        cfg = SketchConfig(sketch_size=5).replace(sketch_size=None, seed=3)
        assert cfg.sketch_size == 5
        assert cfg.seed == 3

    def test_replace_validates(self):
        with pytest.raises(ConfigError):
            SketchConfig().replace(decay_interval=0)


class TestLoggingConfig:
    @pytest.fixture(autouse=True)
    def _reset(self):
        yield
        logging_config.disable_logging()

    def test_silent_by_default(self):
        logger = logging.getLogger(logging_config.LOGGER_NAME)
        assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)

    def test_enable_console_replaces_handler(self):
        logging_config.enable_console_logging("DEBUG")
        logging_config.enable_console_logging("INFO")
        logger = logging.getLogger(logging_config.LOGGER_NAME)
        streams = [
            h for h in logger.handlers
            if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.NullHandler)
        ]
        assert len(streams) == 1
        assert logger.level == logging.INFO

    def test_configure_from_env(self, monkeypatch):
        monkeypatch.delenv(logging_config.ENV_LEVEL, raising=False)
        assert logging_config.configure_from_env() is None
        monkeypatch.setenv(logging_config.ENV_LEVEL, "warning")
        handler = logging_config.configure_from_env()
        assert handler is not None
        assert handler.level == logging.WARNING
