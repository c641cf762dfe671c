"""Localized message catalog tests."""

from __future__ import annotations

import logging

import pytest

from approach_engine.services.optimization.messages import (
    DAY_NAMES,
    MESSAGES,
    as_percent,
    day_name,
    format_message,
    resolve_locale,
)


def test_catalogs_have_same_keys() -> None:
    assert set(MESSAGES["en"]) == set(MESSAGES["ja"])
    assert all(len(names) == 7 for names in DAY_NAMES.values())


def test_resolve_locale_normalizes() -> None:
    assert resolve_locale(" JA ") == "ja"
    assert resolve_locale(None) == "en"


def test_unknown_locale_falls_back_with_warning(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        assert resolve_locale("fr") == "en"
    assert "Unsupported locale" in caplog.text


def test_day_name() -> None:
    assert day_name(0) == "Sunday"
    assert day_name(2, "ja") == "火"


@pytest.mark.parametrize(
    ("rate", "percent"),
    [(0.0, 0), (0.125, 13), (0.5, 50), (2 / 3, 67), (1.0, 100)],
)
def test_as_percent_rounds_half_up(rate: float, percent: int) -> None:
    assert as_percent(rate) == percent


def test_format_message() -> None:
    assert format_message("recently_approached", "en", days=4) == "Approached 4 days ago"
    assert format_message("experience", "ja", years=5.0) == "経験年数: 5年"
