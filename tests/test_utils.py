import datetime as dt
import time

import pytest
from wp_client.utils import as_list, cutoff_to_timestamp, date_to_timestamp


def test_timestamp_utc_midnight():
    moment = dt.datetime(2011, 6, 15, tzinfo=dt.timezone.utc)
    assert date_to_timestamp(moment) == "20110615000000"


def test_timestamp_converts_other_zones_to_gmt():
    cest = dt.timezone(dt.timedelta(hours=2))
    moment = dt.datetime(2011, 6, 15, 1, 30, 5, tzinfo=cest)
    assert date_to_timestamp(moment) == "20110614233005"


def test_timestamp_plain_date_is_midnight_gmt():
    assert date_to_timestamp(dt.date(2020, 1, 2)) == "20200102000000"


def test_timestamp_is_fourteen_digits():
    stamp = date_to_timestamp(dt.datetime(2009, 12, 31, 23, 59, 59, tzinfo=dt.timezone.utc))
    assert len(stamp) == 14 and stamp.isdigit()


def test_timestamp_rejects_strings():
    with pytest.raises(TypeError):
        date_to_timestamp("2011-06-15")


def test_missing_cutoff_means_beginning_of_time():
    assert cutoff_to_timestamp(None) == "0"
    assert cutoff_to_timestamp(dt.date(2011, 6, 15)) == "20110615000000"


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, []),
        ([], []),
        (["a", "b"], ["a", "b"]),
        (("a",), ["a"]),
        ({"id": "WP1"}, [{"id": "WP1"}]),
        ("Homo sapiens", ["Homo sapiens"]),
    ],
)
def test_as_list(value, expected):
    assert as_list(value) == expected


def test_timestamp_pads_early_years():
    assert date_to_timestamp(dt.datetime(999, 1, 1, tzinfo=dt.timezone.utc)) == "09990101000000"


@pytest.fixture
def local_tz(monkeypatch):
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")

    def _set(name):
        monkeypatch.setenv("TZ", name)
        time.tzset()

    yield _set
    monkeypatch.undo()
    time.tzset()


@pytest.mark.parametrize(
    "zone, expected",
    [
        ("UTC0", "20110615000000"),
        ("EST+05", "20110615050000"),
        ("JST-09", "20110614150000"),
    ],
)
def test_naive_datetime_is_read_as_local_time(local_tz, zone, expected):
    local_tz(zone)
    assert date_to_timestamp(dt.datetime(2011, 6, 15)) == expected
