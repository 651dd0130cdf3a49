# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy

import pytest

from jsondelta.diff_format import Missing
from jsondelta.log import InvalidKey, InvalidIndex
from jsondelta.pointer import (
    Key, ArrayIndex, LastElementInArray,
    parse_pointer, join_pointer, split_pointer,
    escape_segment, unescape_segment,
    value_at, mutate_at,
    )


def rfc6901_document():
    return {
        "foo": ["bar", "baz"],
        "": 0,
        "a/b": 1,
        "c%d": 2,
        "e^f": 3,
        "g|h": 4,
        "i\\j": 5,
        "k\"l": 6,
        " ": 7,
        "m~n": 8,
    }


def test_parse_full_document():
    assert parse_pointer("") == []


def test_parse_segments():
    assert parse_pointer("/") == [Key("")]
    assert parse_pointer("/m~0n") == [Key("m~n")]
    assert parse_pointer("/m~1n") == [Key("m/n")]
    assert parse_pointer("/a/0") == [Key("a"), ArrayIndex(0, "0")]
    assert parse_pointer("/a/-") == [Key("a"), LastElementInArray()]
    assert parse_pointer("/a//b") == [Key("a"), Key(""), Key("b")]
    assert parse_pointer("/-1/1a") == [Key("-1"), Key("1a")]


def test_parse_is_total():
    # Anything that is not an index or "-" is a key
    assert parse_pointer("/~2/~") == [Key("~2"), Key("~")]
    assert parse_pointer("a/b") == [Key("a"), Key("b")]


def test_index_segments_are_digits_only():
    assert parse_pointer("/a/0\n") == [Key("a"), Key("0\n")]
    assert parse_pointer("/a/ 1") == [Key("a"), Key(" 1")]
    assert value_at({"a": [7]}, "/a/0\n") is Missing
    assert value_at({"0\n": 1}, "/0\n") == 1


def test_unescape_in_single_pass():
    assert unescape_segment("~01") == "~1"
    assert unescape_segment("~10") == "/0"
    assert parse_pointer("/~01") == [Key("~1")]
    assert escape_segment("~1") == "~01"
    assert escape_segment("a/b~c") == "a~1b~0c"


def test_join_and_split():
    assert join_pointer([]) == ""
    assert join_pointer(["a", 0, "b/c", "~"]) == "/a/0/b~1c/~0"
    assert split_pointer("/a/0/b~1c/~0") == ["a", "0", "b/c", "~"]
    for pointer in ["", "/", "/a", "/a/0/-", "/m~0n/a~1b", "/~01"]:
        assert join_pointer(parse_pointer(pointer)) == pointer


def test_value_at_rfc6901_examples():
    doc = rfc6901_document()
    assert value_at(doc, "") == doc
    assert value_at(doc, "/foo") == ["bar", "baz"]
    assert value_at(doc, "/foo/0") == "bar"
    assert value_at(doc, "/") == 0
    assert value_at(doc, "/a~1b") == 1
    assert value_at(doc, "/c%d") == 2
    assert value_at(doc, "/e^f") == 3
    assert value_at(doc, "/g|h") == 4
    assert value_at(doc, "/i\\j") == 5
    assert value_at(doc, "/k\"l") == 6
    assert value_at(doc, "/ ") == 7
    assert value_at(doc, "/m~0n") == 8


def test_value_at_returns_subtree():
    doc = {"a": {"b": [1, {"c": None}]}}
    assert value_at(doc, "/a/b/1") is doc["a"]["b"][1]
    assert value_at(doc, "/a/b/1/c") is None
    assert value_at(doc, "/a/b/-") == {"c": None}


def test_value_at_not_found():
    doc = {"a": [1, 2], "e": [], "s": "text"}
    assert value_at(doc, "/b") is Missing
    assert value_at(doc, "/a/2") is Missing
    assert value_at(doc, "/a/x") is Missing
    assert value_at(doc, "/e/-") is Missing
    assert value_at(doc, "/s/0") is Missing
    assert value_at(doc, "/a/0/b") is Missing


def test_index_like_keys_in_objects():
    doc = {"0": "zero", "-": "dash", "01": "padded"}
    assert value_at(doc, "/0") == "zero"
    assert value_at(doc, "/-") == "dash"
    assert value_at(doc, "/01") == "padded"
    mutate_at(doc, "/0", "nil")
    assert doc["0"] == "nil"


def test_mutate_at():
    base = {"a": 1}
    base = mutate_at(base, "/a", [2, 1])
    base = mutate_at(base, "/a/1", 3)
    base = mutate_at(base, "/a/2", 0)
    base = mutate_at(base, "/a/4", "nope")
    base = mutate_at(base, "/a/3", {"new-object": [1, 2]})
    base = mutate_at(base, "/a/3/new-object/0", 3)
    base = mutate_at(base, "/a/5/new-object/0", 3)
    assert base == {"a": [2, 3, 0, {"new-object": [3, 2]}]}


def test_mutate_at_full_document():
    doc = {"a": 1}
    assert mutate_at(doc, "", [1, 2]) == [1, 2]
    assert doc == {"a": 1}


def test_mutate_at_ignores_unreachable_paths():
    doc = {"a": [1], "s": "text"}
    before = copy.deepcopy(doc)
    for pointer in ["/b", "/b/c", "/a/3", "/a/1/x", "/s/0", "/a/x"]:
        assert mutate_at(doc, pointer, "x") is doc
    assert doc == before


def test_mutate_at_strict():
    doc = {"a": [1], "s": "text"}
    with pytest.raises(InvalidKey) as e:
        mutate_at(doc, "/b", "x", strict=True)
    assert e.value.path == "/b"
    with pytest.raises(InvalidIndex) as e:
        mutate_at(doc, "/a/3", "x", strict=True)
    assert e.value.path == "/a/3"
    with pytest.raises(InvalidKey):
        mutate_at(doc, "/a/x", "x", strict=True)
    with pytest.raises(InvalidKey):
        mutate_at(doc, "/s/0", "x", strict=True)
    # Appending is still allowed
    mutate_at(doc, "/a/1", 2, strict=True)
    assert doc == {"a": [1, 2], "s": "text"}


def test_pointer_round_trip():
    doc = {"a": {"b/c": [1, {"~": [None, True]}]}, "": [[], {}]}
    pointers = []

    def collect(node, segments):
        pointers.append((join_pointer(segments), node))
        if isinstance(node, dict):
            for k, v in node.items():
                collect(v, segments + [k])
        elif isinstance(node, list):
            for i, v in enumerate(node):
                collect(v, segments + [i])

    collect(doc, [])
    for pointer, node in pointers:
        assert value_at(doc, pointer) is node

    for pointer, node in pointers:
        if pointer == "":
            continue
        modified = mutate_at(copy.deepcopy(doc), pointer, "replaced")
        assert value_at(modified, pointer) == "replaced"
