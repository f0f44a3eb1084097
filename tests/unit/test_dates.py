"""Tests for sundries.dates."""
from datetime import UTC, date, datetime, timedelta, timezone

import pytest

from sundries.core.exceptions import InvalidArgumentError
from sundries.core.types import MISSING
from sundries.dates import unix


class TestUnix:
    """Conversion to whole epoch seconds."""

    def test_aware_datetime(self) -> None:
        assert unix(datetime(2024, 1, 1, tzinfo=UTC)) == 1704067200

    def test_naive_datetime_is_utc(self) -> None:
        assert unix(datetime(2024, 1, 1)) == 1704067200

    def test_offset_datetime(self) -> None:
        moment = datetime(2024, 1, 1, 2, tzinfo=timezone(timedelta(hours=2)))
        assert unix(moment) == 1704067200

    def test_plain_date(self) -> None:
        assert unix(date(2024, 1, 1)) == 1704067200

    def test_iso_string(self) -> None:
        assert unix("2024-01-01T00:00:00Z") == 1704067200
        assert unix("2024-01-01T00:00:00.999+00:00") == 1704067200

    def test_milliseconds(self) -> None:
        assert unix(1704067200999) == 1704067200
        assert unix(0) == 0

    def test_negative_milliseconds_round_down(self) -> None:
        assert unix(-1) == -1

    @pytest.mark.parametrize("value", [None, MISSING])
    def test_rejects_absent(self, value: object) -> None:
        with pytest.raises(InvalidArgumentError, match="Date must not be null or undefined"):
            unix(value)  # type: ignore[arg-type]

    @pytest.mark.parametrize("value", [True, [2024], {"y": 2024}])
    def test_rejects_other_types(self, value: object) -> None:
        with pytest.raises(TypeError, match="Invalid date type"):
            unix(value)  # type: ignore[arg-type]

    def test_rejects_malformed_string(self) -> None:
        with pytest.raises(ValueError):
            unix("not a date")
