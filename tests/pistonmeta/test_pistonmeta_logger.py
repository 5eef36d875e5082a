"""
Tests for the pistonmeta logger.
"""

import json
import logging

from pistonmeta.pistonmeta_logger import PistonMetaLogger


def test_log_line_is_json(caplog):
    """Test that a log call emits one JSON line with caller details."""
    logger = PistonMetaLogger()
    with caplog.at_level(logging.INFO, logger="pistonmeta"):
        logger.log("Fetching\nmanifest", logging.INFO)

    record = json.loads(caplog.records[-1].getMessage())
    assert record["message"] == "Fetching manifest"
    assert record["level"] == "INFO"
    assert record["caller_file"] == "test_pistonmeta_logger.py"
    assert record["caller_name"] == "test_log_line_is_json"


def test_disabled_level_is_not_logged(caplog):
    """Test that disabled levels are not logged."""
    logger = PistonMetaLogger()
    with caplog.at_level(logging.WARNING, logger="pistonmeta"):
        logger.log("quiet", logging.DEBUG)

    assert not caplog.records
