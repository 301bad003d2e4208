import logging

import pytest

from pathtracer.config import ConfigurationError, RenderSettings
from pathtracer.logging_config import setup_logging


def test_defaults_are_valid():
    settings = RenderSettings()
    assert settings.workers >= 1
    assert settings.executor == "thread"
    assert settings.gamma_correct


@pytest.mark.parametrize("kwargs", [
    {"workers": 0},
    {"executor": "gpu"},
    {"seed": -1},
])
def test_invalid_settings(kwargs):
    with pytest.raises(ConfigurationError):
        RenderSettings(**kwargs)


def test_settings_are_frozen():
    settings = RenderSettings(workers=2)
    with pytest.raises(AttributeError):
        settings.workers = 3


def test_setup_logging_adds_one_handler():
    logger = setup_logging("pathtracer.test_config", "debug")
    setup_logging("pathtracer.test_config", "debug")
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1


def test_setup_logging_unknown_level_falls_back_to_info():
    logger = setup_logging("pathtracer.test_config_unknown", "chatty")
    assert logger.level == logging.INFO
