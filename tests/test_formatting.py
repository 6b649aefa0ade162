from datetime import timedelta

import pytest

from restic.formatting import (
    format_bytes,
    format_duration,
    format_percent,
    format_rate,
    format_seconds,
    parse_time,
    same_paths,
)


def test_format_bytes_kib():
    assert format_bytes(2048) == "2.000 KiB"


def test_format_bytes_boundary_is_strict():
    result = format_bytes(1 << 10)
    assert result.endswith("B")
    assert "KiB" not in result
    assert format_bytes((1 << 20) + 1).endswith(" MiB")


@pytest.mark.parametrize(
    "count,unit", [((1 << 30) + 1, "GiB"), ((1 << 40) + 1, "TiB")]
)
def test_format_bytes_units(count, unit):
    assert format_bytes(count).endswith(" " + unit)


def test_format_seconds_with_hours():
    assert format_seconds(3661) == "1:01:01"


def test_format_seconds_without_hours():
    result = format_seconds(59)
    assert result.startswith("0:")
    assert result.count(":") == 1
    assert format_seconds(7200).count(":") == 2


def test_format_percent():
    assert format_percent(1, 2) == "50.00%"
    assert format_percent(5, 0) == ""


def test_format_percent_capped():
    assert format_percent(300, 100) == format_percent(100, 100)


def test_format_rate():
    result = format_rate(2 * (1 << 20), timedelta(seconds=1))
    assert result.endswith("MiB/s")
    assert float(result[: -len("MiB/s")]) == 2.0


def test_format_duration_truncates():
    assert format_duration(timedelta(seconds=3661.9)) == format_seconds(3661)


def test_same_paths():
    assert same_paths(None, ["/a"]) is True
    assert same_paths(["/a"], None) is True
    assert same_paths(["/a", "/b"], ["/a", "/b"]) is True
    assert same_paths(["/a", "/b"], ["/b", "/a"]) is False
    assert same_paths(["/a"], ["/a", "/b"]) is False


@pytest.mark.parametrize("text", ["2015-06-01", "01.06.2015 10:20", "2015-06-01 10:20:30"])
def test_parse_time_local(text):
    parsed = parse_time(text)
    assert (parsed.year, parsed.month, parsed.day) == (2015, 6, 1)
    assert parsed.tzinfo is not None


def test_parse_time_with_offset():
    parsed = parse_time("2015-06-01 10:20:30 -0700")
    assert parsed.utcoffset() == timedelta(hours=-7)
    assert parsed.hour == 10


def test_parse_time_invalid():
    with pytest.raises(ValueError, match="unable to parse time"):
        parse_time("not a time")