"""Tests for write-boundary coercion."""

from datetime import UTC, datetime

import pytest

from life_tracker.domain.errors import ValidationError
from life_tracker.domain.values import (
    format_timestamp,
    parse_timestamp,
    to_bool,
    to_int,
    to_number,
    to_optional_positive,
)


def test_to_number_coerces_loose_input() -> None:
    assert to_number("12.5") == 12.5
    assert to_number(" 7 ") == 7
    assert to_number("abc") == 0
    assert to_number(None, default=3) == 3
    assert to_number(float("nan")) == 0
    assert to_number(True) == 1
    assert isinstance(to_number(4.0), int)


def test_to_optional_positive_drops_non_positive_values() -> None:
    assert to_optional_positive("150") == 150
    assert to_optional_positive(0) is None
    assert to_optional_positive(-5) is None
    assert to_optional_positive("") is None


def test_to_int_and_to_bool() -> None:
    assert to_int("9.7") == 9
    assert to_bool("yes") is True
    assert to_bool("off") is False
    assert to_bool(1) is True


def test_format_timestamp_uses_z_suffix() -> None:
    moment = datetime(2024, 1, 2, 3, 4, 5, 678000, tzinfo=UTC)
    assert format_timestamp(moment) == "2024-01-02T03:04:05.678Z"


def test_parse_timestamp_round_trips_z_suffix() -> None:
    parsed = parse_timestamp("2024-01-02T03:04:05.678Z")
    assert parsed == datetime(2024, 1, 2, 3, 4, 5, 678000, tzinfo=UTC)
    with pytest.raises(ValidationError):
        parse_timestamp("")
    with pytest.raises(ValidationError):
        parse_timestamp(42)
