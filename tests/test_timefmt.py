import json
from datetime import datetime, timedelta, timezone

import pytest

from ariclient.timefmt import (
    decode_duration,
    encode_duration,
    format_datetime,
    parse_datetime,
)

COMPACT = (",", ":")


def test_datetime_marshal():
    value = datetime(2005, 2, 4, 13, 12, 6, tzinfo=timezone.utc)
    out = json.dumps({"dt": format_datetime(value)}, separators=COMPACT)
    assert out == '{"dt":"2005-02-04T13:12:06.000+0000"}'


def test_datetime_unmarshal():
    doc = json.loads('{"dt":"2005-02-04T13:12:06.000+0000"}')
    assert parse_datetime(doc["dt"]) == datetime(2005, 2, 4, 13, 12, 6, tzinfo=timezone.utc)


def test_datetime_unmarshal_bad_text():
    doc = json.loads('{"dt":"2x05-02-04T13:12:06.000+0000"}')
    with pytest.raises(ValueError):
        parse_datetime(doc["dt"])


def test_datetime_unmarshal_number():
    doc = json.loads('{"dt": 0 }')
    with pytest.raises(TypeError):
        parse_datetime(doc["dt"])


def test_datetime_round_trip_with_offset():
    text = "2019-11-30T23:59:58.123-0530"
    parsed = parse_datetime(text)
    assert format_datetime(parsed) == text
    assert parsed.utcoffset() == -timedelta(hours=5, minutes=30)


def test_naive_datetime_formats_as_utc():
    naive = datetime(2005, 2, 4, 13, 12, 6)
    aware = naive.replace(tzinfo=timezone.utc)
    assert format_datetime(naive) == format_datetime(aware)


@pytest.mark.parametrize(
    "doc, expected",
    [('{"ds":4}', timedelta(seconds=4)), ('{"ds":40}', timedelta(seconds=40))],
)
def test_duration_unmarshal(doc, expected):
    assert decode_duration(json.loads(doc)["ds"]) == expected


@pytest.mark.parametrize("doc", ['{"ds":"4"}', '{"ds":""}', '{"ds":"xzsad"}'])
def test_duration_unmarshal_errors(doc):
    with pytest.raises(TypeError):
        decode_duration(json.loads(doc)["ds"])


@pytest.mark.parametrize(
    "value, expected",
    [(timedelta(seconds=4), '{"ds":4}'), (timedelta(seconds=40), '{"ds":40}')],
)
def test_duration_marshal(value, expected):
    assert json.dumps({"ds": encode_duration(value)}, separators=COMPACT) == expected


def test_duration_round_trip_truncates_fraction():
    value = timedelta(seconds=7, milliseconds=900)
    assert decode_duration(encode_duration(value)) == timedelta(seconds=7)