"""Tests for structlog configuration."""

import json

import pytest
import structlog

from imagehost.utils.logging import setup_logging


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()


def test_json_output(capsys):
    setup_logging(level="INFO", json_format=True)

    structlog.get_logger("test").info("Image uploaded", image_id="abc")

    line = capsys.readouterr().out.strip().splitlines()[-1]
    event = json.loads(line)
    assert event["event"] == "Image uploaded"
    assert event["image_id"] == "abc"
    assert event["level"] == "info"
    assert event["service"] == "imagehost"


def test_level_filtering(capsys):
    setup_logging(level="WARNING", json_format=True)

    structlog.get_logger("test").info("hidden")

    assert capsys.readouterr().out == ""


def test_invalid_level():
    with pytest.raises(AttributeError):
        setup_logging(level="LOUD")


def test_custom_service_name(capsys):
    setup_logging(level="INFO", json_format=True, service_name="imagehost-worker")

    structlog.get_logger("test").info("started")

    event = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert event["service"] == "imagehost-worker"


def test_explicit_service_field_wins(capsys):
    setup_logging(level="INFO", json_format=True)

    structlog.get_logger("test").info("proxied", service="upstream")

    event = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert event["service"] == "upstream"
