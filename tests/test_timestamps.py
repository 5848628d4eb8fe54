import pytest
from datetime import datetime, timedelta, timezone
from objstore_sdk.client.exceptions import InvalidInputError
from objstore_sdk.client.timestamps import format_rfc822, parse_timestamp

def test_datetime_passes_through():
    when = datetime(2024, 1, 2, tzinfo=timezone.utc)
    assert parse_timestamp(when) is when

@pytest.mark.parametrize("text,expected", [
    ("2024-01-02T03:04:05Z", datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)),
    ("2024-01-02T03:04:05+02:00", datetime(2024, 1, 2, 1, 4, 5, tzinfo=timezone.utc)),
    ("Tue, 02 Jan 2024 03:04:05 GMT", datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)),
    ("@0", datetime(1970, 1, 1, tzinfo=timezone.utc)),
])
def test_parse_strings(text, expected):
    assert parse_timestamp(text) == expected

@pytest.mark.parametrize("text", ["", "   ", "yesterday", "now", "+1 day", "@soon", "2024-13-45"])
def test_parse_failures(text):
    with pytest.raises(InvalidInputError):
        parse_timestamp(text)

def test_format_rfc822():
    when = datetime(2005, 8, 15, 15, 52, 1, tzinfo=timezone.utc)
    assert format_rfc822(when) == "Mon, 15 Aug 05 15:52:01 +0000"

def test_format_keeps_offset():
    when = datetime(2024, 12, 1, 8, 0, 0, tzinfo=timezone(timedelta(hours=-5)))
    assert format_rfc822(when) == "Sun, 01 Dec 24 08:00:00 -0500"

def test_format_naive_as_utc():
    assert format_rfc822(datetime(2024, 1, 2, 3, 4, 5)) == "Tue, 02 Jan 24 03:04:05 +0000"
