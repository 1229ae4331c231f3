import logging

import pytest

from infralib.utils.logging import configure_root, parse_level, resolve_level


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("debug", logging.DEBUG),
        (" WARNING ", logging.WARNING),
        ("15", 15),
        ("", None),
        (None, None),
        ("verbose", None),
        ("²", None),
    ],
)
def test_parse_level(raw, expected) -> None:
    assert parse_level(raw) == expected


def test_debug_setting_decides_without_pinned_level() -> None:
    assert resolve_level(True, {}) == logging.DEBUG
    assert resolve_level(False, {}) == logging.INFO


def test_pinned_level_wins_over_setting() -> None:
    assert resolve_level(True, {"INFRALIB_LOG_LEVEL": "error"}) == logging.ERROR


def test_unparseable_pinned_level_falls_back_to_setting() -> None:
    assert resolve_level(False, {"INFRALIB_LOG_LEVEL": "²"}) == logging.INFO


def test_configure_root_applies_level() -> None:
    root = logging.getLogger()
    previous = root.level
    urllib3_previous = logging.getLogger("urllib3").level
    try:
        assert configure_root(True, {}) == logging.DEBUG
        assert root.level == logging.DEBUG
        assert logging.getLogger("urllib3").level == logging.DEBUG
    finally:
        root.setLevel(previous)
        logging.getLogger("urllib3").setLevel(urllib3_previous)
