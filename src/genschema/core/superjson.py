"""SuperJSON-compatible envelope encoding.

Prompt artifacts are written in the SuperJSON wire format so that tools on
the JavaScript side can load them with ``SuperJSON.parse``.  The format is
ordinary JSON wrapped in an envelope that records the original type of every
value plain JSON cannot represent exactly::

    {
      "json": {"created": "2024-05-01T12:00:00.000Z", "tags": ["a", "b"]},
      "meta": {"values": {"created": ["Date"], "tags": ["set"]}}
    }

``meta`` is left out entirely when nothing needed annotating, so a document
made only of strings, numbers, lists and dicts encodes as ``{"json": ...}``.

Supported Annotations
---------------------
=============  ==========================  ================================
Annotation     Python type                 JSON form
=============  ==========================  ================================
``Date``       ``datetime.datetime``       ISO 8601 string, UTC, millis
``set``        ``set``                     array
``map``        ``dict`` with non-str keys  array of ``[key, value]`` pairs
``number``     ``float`` NaN / +-inf       ``"NaN"``, ``"Infinity"``, ...
``bigint``     ``int`` beyond 2**53 - 1    decimal string
``regexp``     ``re.Pattern``              ``"/source/flags"``
``undefined``  ``None`` (decode only)      ``null``
=============  ==========================  ================================

Annotation paths are dot-joined keys and list indices.  Literal dots in keys
are escaped as ``\\.``.  Annotations on values nested inside a set or map use
the tree form ``[type, {child_path: annotation}]``.

Datetimes are stored with millisecond precision and decode as timezone-aware
UTC values.

Only values that decode back to an equal value of the same type are
accepted.  Tuples, frozensets and naive datetimes raise ``TypeError``, and so
do map keys of those types, since JSON has no form that gives them back.

Usage Example
-------------
    from genschema.core import superjson

    text = superjson.stringify({"when": datetime.now(timezone.utc)})
    value = superjson.parse(text)
"""

from __future__ import annotations

import copy
import json
import math
import re
from datetime import datetime, timezone
from typing import Any

# Largest integer a JavaScript number holds exactly.
MAX_SAFE_INTEGER = 2**53 - 1

_REGEX_FLAGS = (
    ("i", re.IGNORECASE),
    ("m", re.MULTILINE),
    ("s", re.DOTALL),
)


# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------


def _escape_key(key: str) -> str:
    return key.replace("\\", "\\\\").replace(".", "\\.")


def _split_path(path: str) -> list[str]:
    """Split an annotation path on unescaped dots."""
    segments: list[str] = []
    current: list[str] = []
    chars = iter(path)
    for char in chars:
        if char == "\\":
            escaped = next(chars, "")
            current.append(escaped)
        elif char == ".":
            segments.append("".join(current))
            current = []
        else:
            current.append(char)
    segments.append("".join(current))
    return segments


def _flatten(children: dict[str, Any]) -> dict[str, Any]:
    """Merge the annotations of plain containers into dotted paths."""
    flat: dict[str, Any] = {}
    for key, annotation in children.items():
        if isinstance(annotation, dict):
            for sub_path, sub_annotation in annotation.items():
                flat[f"{key}.{sub_path}"] = sub_annotation
        else:
            flat[key] = annotation
    return flat


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------


def _encode_datetime(value: datetime) -> str:
    if value.tzinfo is None:
        raise TypeError(f"Cannot encode naive datetime {value!r}; attach a timezone")
    text = value.astimezone(timezone.utc).isoformat(timespec="milliseconds")
    return text.replace("+00:00", "Z")


def _encode_regex(pattern: re.Pattern) -> str:
    flags = "".join(letter for letter, flag in _REGEX_FLAGS if pattern.flags & flag)
    return f"/{pattern.pattern}/{flags}"


def _transformed(type_name: str, encoded: Any, children: dict[str, Any]) -> tuple[Any, list]:
    flat = _flatten(children)
    if flat:
        return encoded, [type_name, flat]
    return encoded, [type_name]


def _walk_items(items: list[tuple[str, Any]]) -> tuple[list[Any], dict[str, Any]]:
    encoded: list[Any] = []
    children: dict[str, Any] = {}
    for key, item in items:
        item_encoded, annotation = _walk(item)
        encoded.append(item_encoded)
        if annotation is not None:
            children[key] = annotation
    return encoded, children


def _walk(value: Any) -> tuple[Any, Any]:
    """Encode ``value``, returning ``(json_value, annotation)``.

    The annotation is None for plain values, a list for transformed values,
    or a dict of child annotations for plain dicts and lists.
    """
    if value is None or isinstance(value, (str, bool)):
        return value, None

    if isinstance(value, int):
        if abs(value) > MAX_SAFE_INTEGER:
            return str(value), ["bigint"]
        return value, None

    if isinstance(value, float):
        if math.isnan(value):
            return "NaN", ["number"]
        if math.isinf(value):
            return ("Infinity" if value > 0 else "-Infinity"), ["number"]
        return value, None

    if isinstance(value, datetime):
        return _encode_datetime(value), ["Date"]

    if isinstance(value, re.Pattern):
        return _encode_regex(value), ["regexp"]

    if isinstance(value, set):
        encoded, children = _walk_items([(str(i), item) for i, item in enumerate(value)])
        return _transformed("set", encoded, children)

    if isinstance(value, dict):
        if all(isinstance(key, str) for key in value):
            encoded_dict: dict[str, Any] = {}
            children: dict[str, Any] = {}
            for key, item in value.items():
                item_encoded, annotation = _walk(item)
                encoded_dict[key] = item_encoded
                if annotation is not None:
                    children[_escape_key(key)] = annotation
            return encoded_dict, (_flatten(children) or None)

        pairs = [[key, item] for key, item in value.items()]
        encoded, children = _walk_items([(str(i), pair) for i, pair in enumerate(pairs)])
        return _transformed("map", encoded, children)

    if isinstance(value, list):
        encoded, children = _walk_items([(str(i), item) for i, item in enumerate(value)])
        return encoded, (_flatten(children) or None)

    raise TypeError(f"Cannot encode value of type {type(value).__name__}")


def serialize(value: Any) -> dict[str, Any]:
    """Encode a value into a SuperJSON envelope dict.

    Raises:
        TypeError: If the value contains a type with no JSON encoding.
    """
    encoded, annotation = _walk(value)
    envelope: dict[str, Any] = {"json": encoded}
    if annotation is not None:
        envelope["meta"] = {"values": annotation}
    return envelope


def stringify(value: Any) -> str:
    """Encode a value as SuperJSON text (compact JSON, UTF-8 characters kept)."""
    return json.dumps(
        serialize(value),
        ensure_ascii=False,
        separators=(",", ":"),
        allow_nan=False,
    )


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


def _decode_regex(text: str) -> re.Pattern:
    if not text.startswith("/") or text.rfind("/") == 0:
        raise ValueError(f"Malformed regexp literal: {text!r}")
    end = text.rfind("/")
    source, letters = text[1:end], text[end + 1 :]
    flags = 0
    for letter, flag in _REGEX_FLAGS:
        if letter in letters:
            flags |= flag
    return re.compile(source, flags)


def _untransform(type_name: Any, value: Any) -> Any:
    if type_name == "Date":
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    if type_name == "set":
        return set(value)
    if type_name == "map":
        return {key: item for key, item in value}
    if type_name == "number":
        return float(value)
    if type_name == "bigint":
        return int(value)
    if type_name == "regexp":
        return _decode_regex(value)
    if type_name == "undefined":
        return None
    raise ValueError(f"Unsupported SuperJSON annotation: {type_name!r}")


def _apply_tree(node: Any, annotation: list) -> Any:
    if not annotation:
        raise ValueError("Empty SuperJSON annotation")
    if len(annotation) > 1:
        for path, child in annotation[1].items():
            node = _apply_at(node, _split_path(path), child)
    return _untransform(annotation[0], node)


def _apply_at(node: Any, segments: list[str], annotation: list) -> Any:
    if not segments:
        return _apply_tree(node, annotation)

    head, rest = segments[0], segments[1:]
    if isinstance(node, list):
        index = int(head)
        node[index] = _apply_at(node[index], rest, annotation)
    elif isinstance(node, dict):
        node[head] = _apply_at(node[head], rest, annotation)
    else:
        raise ValueError(f"Annotation path segment {head!r} does not address a container")
    return node


def deserialize(envelope: dict[str, Any]) -> Any:
    """Decode a SuperJSON envelope dict back into Python values.

    The envelope is not modified.

    Raises:
        ValueError: If the envelope is malformed or uses an unsupported
            annotation.
    """
    if not isinstance(envelope, dict) or "json" not in envelope:
        raise ValueError("SuperJSON envelope must be an object with a 'json' key")

    value = copy.deepcopy(envelope["json"])
    values = (envelope.get("meta") or {}).get("values")

    if values is None:
        return value
    if isinstance(values, list):
        return _apply_tree(value, values)
    if isinstance(values, dict):
        for path, annotation in values.items():
            value = _apply_at(value, _split_path(path), annotation)
        return value
    raise ValueError(f"Malformed SuperJSON meta values: {values!r}")


def parse(text: str) -> Any:
    """Decode SuperJSON text."""
    return deserialize(json.loads(text))
