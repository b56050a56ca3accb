from __future__ import annotations

import logging

import pytest

from zeldabread.logging_config import configure_logging, level_for


@pytest.mark.parametrize(
    "verbosity,expected",
    [(0, logging.WARNING), (1, logging.INFO), (2, logging.DEBUG), (5, logging.DEBUG)],
)
def test_verbosity_maps_to_level(verbosity, expected):
    assert level_for(verbosity, env={}) == expected


def test_env_level_wins_over_verbosity():
    assert level_for(0, env={"ZB_LOG_LEVEL": "debug"}) == logging.DEBUG
    assert level_for(2, env={"ZB_LOG_LEVEL": "ERROR"}) == logging.ERROR


def test_unknown_env_level_is_ignored():
    assert level_for(1, env={"ZB_LOG_LEVEL": "chatty"}) == logging.INFO


def test_configure_logging_returns_level():
    assert configure_logging(1, env={}) == logging.INFO
