"""Tests for utility helpers."""

from datetime import date

import pytest

from vidinfo.utils.helpers import (
    clean_html,
    count_or_none,
    date_or_none,
    find_descendants,
    float_or_none,
    int_or_none,
    parse_size,
    set_query_parameter,
    set_route_parameter,
    split_query,
    str_or_none,
    traverse_obj,
)


class TestTraverseObj:
    def test_simple_key(self):
        assert traverse_obj({"a": 1}, "a") == 1

    def test_nested_tuple_path(self):
        data = {"a": {"b": {"c": 42}}}
        assert traverse_obj(data, ("a", "b", "c")) == 42

    def test_missing_key_returns_default(self):
        assert traverse_obj({"a": 1}, "b", default="nope") == "nope"

    def test_list_index(self):
        data = {"runs": [{"text": "English"}]}
        assert traverse_obj(data, ("runs", 0, "text")) == "English"

    def test_none_input(self):
        assert traverse_obj(None, "a", default="d") == "d"

    def test_multiple_paths_first_wins(self):
        data = {"x": None, "y": 99}
        assert traverse_obj(data, ("x",), ("y",)) == 99


class TestFindDescendants:
    def test_collects_at_any_depth(self):
        data = {
            "captions": {"renderer": {"captionTracks": [1]}},
            "other": [{"captionTracks": [2]}],
        }
        assert find_descendants(data, "captionTracks") == [[1], [2]]

    def test_missing(self):
        assert find_descendants({"a": {"b": 1}}, "c") == []

    def test_scalar(self):
        assert find_descendants("text", "a") == []


class TestIntOrNone:
    @pytest.mark.parametrize(
        ("val", "expected"),
        [
            (42, 42),
            ("100", 100),
            ("3.9", None),  # int() cannot parse decimal strings
            (None, None),
            ("abc", None),
            ("", None),
        ],
    )
    def test_values(self, val, expected):
        assert int_or_none(val) == expected

    def test_scale(self):
        assert int_or_none("2500", scale=1000) == 2


class TestCleanHtml:
    def test_tags_and_entities(self):
        raw = 'Rick&#39;s &quot;video&quot;<br />Listen on <a href="https://x">rick.lnk.to</a> &amp; more'
        assert clean_html(raw) == "Rick's \"video\"\nListen on rick.lnk.to & more"

    def test_whitespace_stripped(self):
        assert clean_html("  <b>hi</b>  ") == "hi"


class TestFloatOrNone:
    @pytest.mark.parametrize(
        ("val", "expected"),
        [
            ("4.5", 4.5),
            (3, 3.0),
            ("-3.5", -3.5),
            (None, None),
            ("abc", None),
        ],
    )
    def test_values(self, val, expected):
        assert float_or_none(val) == expected

    def test_scale(self):
        assert float_or_none("1500", scale=1000) == 1.5


class TestCountOrNone:
    @pytest.mark.parametrize(
        ("val", "expected"),
        [
            ("8,123,456", 8123456),
            (" 312 045 ", 312045),
            ("", None),
            (None, None),
        ],
    )
    def test_values(self, val, expected):
        assert count_or_none(val) == expected


class TestDateOrNone:
    @pytest.mark.parametrize(
        ("val", "expected"),
        [
            ("2009-10-25", date(2009, 10, 25)),
            ("2009-10-25T06:57:33-07:00", date(2009, 10, 25)),
            ("25/10/2009", None),
            ("", None),
            (None, None),
        ],
    )
    def test_values(self, val, expected):
        assert date_or_none(val) == expected


class TestStrOrNone:
    def test_string(self):
        assert str_or_none("hello") == "hello"

    def test_empty_string(self):
        assert str_or_none("") is None

    def test_whitespace(self):
        assert str_or_none("   ") is None

    def test_none(self):
        assert str_or_none(None) is None

    def test_int(self):
        assert str_or_none(42) == "42"


class TestSplitQuery:
    def test_decodes_values(self):
        fields = split_query("itag=22&url=https%3A%2F%2Fr1.googlevideo.com%2Fvideoplayback%3Fa%3D1")
        assert fields == {"itag": "22", "url": "https://r1.googlevideo.com/videoplayback?a=1"}

    def test_last_value_wins(self):
        assert split_query("a=1&a=2")["a"] == "2"

    def test_blank_values_kept(self):
        assert split_query("video_id=&status=fail") == {"video_id": "", "status": "fail"}

    def test_plus_is_space(self):
        assert split_query("reason=This+video+is+private")["reason"] == "This video is private"


class TestSetQueryParameter:
    def test_appends(self):
        assert set_query_parameter("https://x.com/p?a=1", "b", "2") == "https://x.com/p?a=1&b=2"

    def test_replaces(self):
        url = set_query_parameter("https://x.com/p?format=1&lang=en", "format", "3")
        assert url == "https://x.com/p?lang=en&format=3"

    def test_no_query(self):
        assert set_query_parameter("https://x.com/p", "signature", "DABC") == "https://x.com/p?signature=DABC"


class TestSetRouteParameter:
    def test_appends(self):
        url = set_route_parameter("https://x.com/api/manifest/dash/s/ABCD", "signature", "DABC")
        assert url == "https://x.com/api/manifest/dash/s/ABCD/signature/DABC"

    def test_appends_after_trailing_slash(self):
        assert set_route_parameter("https://x.com/a/", "k", "v") == "https://x.com/a/k/v"

    def test_replaces(self):
        url = set_route_parameter("https://x.com/a/signature/OLD/b/1", "signature", "NEW")
        assert url == "https://x.com/a/signature/NEW/b/1"


class TestParseSize:
    def test_valid(self):
        assert parse_size("1920x1080") == (1920, 1080)

    @pytest.mark.parametrize("size", [None, "", "1080p", "x720"])
    def test_invalid(self, size):
        assert parse_size(size) is None
