"""Tests for genschema.core.superjson — SuperJSON envelope codec.

Tests cover:
- Plain values encode without a meta section.
- Annotated values (dates, sets, maps, non-finite numbers, big ints,
  regexes) and their paths.
- Decoding of envelopes, including nested annotation trees.
- Errors for unsupported types and malformed envelopes.
"""

from __future__ import annotations

import json
import math
import re
from datetime import datetime, timedelta, timezone

import pytest

from genschema.core import superjson


class TestSerialize:
    """Tests for serialize and stringify."""

    def test_plain_values_have_no_meta(self):
        """Plain JSON data is wrapped without annotations."""
        value = {"a": 1, "b": [1.5, "x", None, True], "c": {"d": "e"}}
        assert superjson.serialize(value) == {"json": value}

    def test_date_annotation(self):
        """Datetimes are ISO strings annotated as Date."""
        when = datetime(2024, 5, 1, 12, 0, 0, 123000, tzinfo=timezone.utc)
        envelope = superjson.serialize({"created": when})
        assert envelope["json"] == {"created": "2024-05-01T12:00:00.123Z"}
        assert envelope["meta"] == {"values": {"created": ["Date"]}}

    def test_nested_paths_are_dotted(self):
        """Annotations deep in plain containers use dotted paths."""
        envelope = superjson.serialize({"a": {"b": [float("nan")]}})
        assert envelope["meta"]["values"] == {"a.b.0": ["number"]}
        assert envelope["json"] == {"a": {"b": ["NaN"]}}

    def test_dots_in_keys_are_escaped(self):
        """Literal dots in keys are escaped in annotation paths."""
        envelope = superjson.serialize({"v1.0": float("inf")})
        assert envelope["meta"]["values"] == {"v1\\.0": ["number"]}

    def test_top_level_annotation(self):
        """An annotated root value uses a list, not a dict."""
        envelope = superjson.serialize({1, 2})
        assert envelope["meta"]["values"] == ["set"]
        assert sorted(envelope["json"]) == [1, 2]

    def test_set_with_annotated_members(self):
        """Annotations inside a set use the tree form."""
        when = datetime(2020, 1, 1, tzinfo=timezone.utc)
        envelope = superjson.serialize({"s": {when}})
        assert envelope["meta"]["values"] == {"s": ["set", {"0": ["Date"]}]}

    def test_map_for_non_string_keys(self):
        """Dicts with non-string keys become maps of pairs."""
        envelope = superjson.serialize({1: "one", 2: "two"})
        assert envelope["json"] == [[1, "one"], [2, "two"]]
        assert envelope["meta"]["values"] == ["map"]

    def test_bigint(self):
        """Integers beyond the JavaScript safe range become bigint strings."""
        envelope = superjson.serialize({"n": 2**64})
        assert envelope["json"] == {"n": str(2**64)}
        assert envelope["meta"]["values"] == {"n": ["bigint"]}

    def test_safe_integer_not_annotated(self):
        """Integers inside the safe range stay plain."""
        assert superjson.serialize(2**53 - 1) == {"json": 2**53 - 1}

    def test_regexp(self):
        """Compiled patterns become regex literals."""
        envelope = superjson.serialize(re.compile("ab+c", re.IGNORECASE))
        assert envelope == {"json": "/ab+c/i", "meta": {"values": ["regexp"]}}

    def test_unsupported_type_raises(self):
        """Values with no encoding raise TypeError."""
        with pytest.raises(TypeError):
            superjson.serialize({"x": object()})

    def test_naive_datetime_raises(self):
        """Naive datetimes have no instant to restore and are refused."""
        with pytest.raises(TypeError):
            superjson.serialize({"when": datetime(2024, 5, 1, 12, 0, 0, 123000)})

    def test_tuple_raises(self):
        """Tuples would come back as lists, so they are refused."""
        with pytest.raises(TypeError):
            superjson.serialize({"t": (1, 2)})

    def test_tuple_map_key_raises(self):
        """Tuple keys would decode to unhashable lists, so they are refused."""
        with pytest.raises(TypeError):
            superjson.stringify({(1, 2): "a"})

    def test_frozenset_raises(self):
        with pytest.raises(TypeError):
            superjson.serialize(frozenset({1}))

    def test_stringify_is_compact_json(self):
        """stringify produces compact JSON and keeps non-ASCII text."""
        text = superjson.stringify({"name": "café", "n": 1})
        assert text == '{"json":{"name":"café","n":1}}'


class TestDeserialize:
    """Tests for deserialize and parse."""

    def test_plain_envelope(self):
        assert superjson.deserialize({"json": {"a": [1, 2]}}) == {"a": [1, 2]}

    def test_envelope_not_modified(self):
        """Decoding works on a copy of the envelope."""
        envelope = {"json": {"s": [1, 2]}, "meta": {"values": {"s": ["set"]}}}
        superjson.deserialize(envelope)
        assert envelope["json"] == {"s": [1, 2]}

    def test_undefined_annotation(self):
        """undefined decodes to None."""
        envelope = {"json": {"x": None}, "meta": {"values": {"x": ["undefined"]}}}
        assert superjson.deserialize(envelope) == {"x": None}

    def test_round_trip_rich_values(self):
        """Rich values survive stringify then parse."""
        when = datetime(2024, 5, 1, 12, 30, 15, 250000, tzinfo=timezone.utc)
        value = {
            "when": when,
            "tags": {"a", "b"},
            "lookup": {1: "one", 2: {when}},
            "big": -(2**70),
            "inf": float("-inf"),
            "pattern": re.compile("^x.y$", re.MULTILINE | re.DOTALL),
            "key.with.dots": [float("inf")],
        }
        restored = superjson.parse(superjson.stringify(value))

        assert restored["when"] == when
        assert restored["tags"] == {"a", "b"}
        assert restored["lookup"] == {1: "one", 2: {when}}
        assert restored["big"] == -(2**70)
        assert restored["inf"] == float("-inf")
        assert restored["pattern"].pattern == "^x.y$"
        assert restored["pattern"].flags & re.MULTILINE
        assert restored["pattern"].flags & re.DOTALL
        assert restored["key.with.dots"] == [float("inf")]

    def test_nan_round_trip(self):
        restored = superjson.parse(superjson.stringify([float("nan")]))
        assert math.isnan(restored[0])

    def test_aware_datetime_in_other_zone(self):
        """Aware datetimes decode to the same instant in UTC."""
        when = datetime(2021, 3, 4, 5, 6, 7, tzinfo=timezone(timedelta(hours=2)))
        assert superjson.parse(superjson.stringify(when)) == when

    def test_reads_javascript_output(self):
        """Text produced by SuperJSON.stringify in JavaScript decodes."""
        text = json.dumps(
            {
                "json": {"d": "2023-01-01T00:00:00.000Z", "m": [["k", 1]]},
                "meta": {"values": {"d": ["Date"], "m": ["map"]}},
            }
        )
        restored = superjson.parse(text)
        assert restored == {
            "d": datetime(2023, 1, 1, tzinfo=timezone.utc),
            "m": {"k": 1},
        }

    def test_missing_json_key_raises(self):
        with pytest.raises(ValueError):
            superjson.deserialize({"meta": {}})

    def test_unknown_annotation_raises(self):
        with pytest.raises(ValueError):
            superjson.deserialize({"json": 1, "meta": {"values": ["custom-thing"]}})

    def test_bad_path_raises(self):
        with pytest.raises(ValueError):
            superjson.deserialize({"json": 1, "meta": {"values": {"a.b": ["Date"]}}})
