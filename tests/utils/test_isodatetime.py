"""Tests for isodatetime module."""

import time
from datetime import UTC, datetime, timedelta, timezone

from bloglist.utils import isodatetime


class TestToTimestamp:

    def test_utc_datetime_uses_z_suffix(self):
        dt = datetime(2025, 1, 2, 3, 4, 5, tzinfo=UTC)

        assert isodatetime.to_timestamp(dt) == "2025-01-02T03:04:05Z"

    def test_naive_datetime_treated_as_utc(self):
        assert isodatetime.to_timestamp(datetime(2025, 1, 2, 3, 4, 5)) == "2025-01-02T03:04:05Z"

    def test_other_offsets_kept(self):
        dt = datetime(2025, 1, 2, 3, 4, 5, tzinfo=timezone(timedelta(hours=8)))

        assert isodatetime.to_timestamp(dt) == "2025-01-02T03:04:05+08:00"


class TestNow:

    def test_now_is_utc_timestamp(self):
        value = isodatetime.now()

        assert value.endswith("Z")
        assert datetime.fromisoformat(value).tzinfo is not None

    def test_now_unix_is_epoch_seconds(self):
        value = isodatetime.now_unix()

        assert isinstance(value, int)
        assert abs(value - time.time()) < 5
