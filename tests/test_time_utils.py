from datetime import UTC, datetime, timedelta, timezone

from postfeed.utils.time_utils import EPOCH, format_timestamp, is_after


def test_format_timestamp_uses_numeric_utc_offset() -> None:
    assert format_timestamp(datetime(2023, 1, 1, tzinfo=UTC)) == "2023-01-01T00:00:00+00:00"


def test_format_timestamp_keeps_own_offset() -> None:
    tz = timezone(timedelta(hours=-7))
    assert format_timestamp(datetime(2024, 3, 9, 18, 5, 7, tzinfo=tz)) == "2024-03-09T18:05:07-07:00"


def test_format_timestamp_half_hour_offset() -> None:
    tz = timezone(timedelta(hours=5, minutes=30))
    assert format_timestamp(datetime(2024, 12, 31, 23, 59, 59, tzinfo=tz)) == "2024-12-31T23:59:59+05:30"


def test_format_timestamp_drops_subseconds() -> None:
    value = datetime(2023, 6, 1, 12, 0, 0, 999999, tzinfo=UTC)
    assert format_timestamp(value) == "2023-06-01T12:00:00+00:00"


def test_format_timestamp_treats_naive_as_utc() -> None:
    assert format_timestamp(datetime(2023, 6, 1, 8, 30)) == "2023-06-01T08:30:00+00:00"


def test_format_timestamp_pads_early_years() -> None:
    assert format_timestamp(datetime(999, 1, 2, 3, 4, 5, tzinfo=UTC)) == "0999-01-02T03:04:05+00:00"


def test_epoch_formats_as_unix_epoch() -> None:
    assert format_timestamp(EPOCH) == "1970-01-01T00:00:00+00:00"


def test_is_after_compares_instants_across_offsets() -> None:
    utc_noon = datetime(2023, 1, 1, 12, 0, tzinfo=UTC)
    same_instant = datetime(2023, 1, 1, 14, 0, tzinfo=timezone(timedelta(hours=2)))

    assert not is_after(same_instant, utc_noon)
    assert is_after(utc_noon + timedelta(seconds=1), same_instant)
    assert is_after(datetime(2023, 1, 1, 12, 0, 1), utc_noon)
