# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Parsing and walking of JSON pointers (RFC 6901).

A pointer such as "/foo/0/a~1b" is parsed into a selector, a list of
segments. The empty list selects the full document. Parsing never fails:
any segment that is not "-" or a non-negative integer is read as a key.
"""

import re

from .diff_format import Missing, record_type
from .log import InvalidIndex, InvalidKey
from . import log

__all__ = [
    "Key", "ArrayIndex", "LastElementInArray",
    "parse_pointer", "join_pointer", "split_pointer",
    "value_at", "mutate_at",
    ]


Key = record_type("Key", ("token",))
ArrayIndex = record_type("ArrayIndex", ("index", "token"))
LastElementInArray = record_type("LastElementInArray", ())

FULL_DOCUMENT = ""

_r_index = re.compile(r"\A[0-9]+\Z")
_r_escape = re.compile(r"~[01]")
_unescapes = {"~0": "~", "~1": "/"}


def escape_segment(segment):
    "Escape a single key or index for use in a pointer."
    return str(segment).replace("~", "~0").replace("/", "~1")


def unescape_segment(text):
    # Decode both escapes in one pass, "~01" is "~1" and not "/"
    return _r_escape.sub(lambda m: _unescapes[m.group(0)], text)


def segment_token(segment):
    "Return the unescaped text of a parsed segment."
    if isinstance(segment, LastElementInArray):
        return "-"
    if isinstance(segment, (Key, ArrayIndex)):
        return segment.token
    return str(segment)


def parse_segment(text):
    if text == "-":
        return LastElementInArray()
    if _r_index.match(text):
        return ArrayIndex(int(text), text)
    return Key(unescape_segment(text))


def parse_pointer(pointer):
    """Parse a pointer string into a selector (list of segments).

    Already parsed selectors are returned as a new list.
    """
    if isinstance(pointer, (list, tuple)):
        return list(pointer)
    if pointer == FULL_DOCUMENT:
        return []
    if not pointer.startswith("/"):
        pointer = "/" + pointer
    return [parse_segment(text) for text in pointer[1:].split("/")]


def join_pointer(segments):
    "Join a list of keys, indices or parsed segments into a pointer string."
    return "".join("/" + escape_segment(segment_token(s)) for s in segments)


def split_pointer(pointer):
    "Split a pointer string into its unescaped tokens."
    return [segment_token(s) for s in parse_pointer(pointer)]


def pointer_text(pointer):
    if isinstance(pointer, str):
        return pointer
    return join_pointer(pointer)


def child_value(node, segment):
    "Look up a single segment in node, returning Missing if not found."
    if isinstance(node, dict):
        # Index-like segments are plain keys in objects
        return node.get(segment_token(segment), Missing)
    if isinstance(node, list):
        if isinstance(segment, ArrayIndex):
            if segment.index < len(node):
                return node[segment.index]
        elif isinstance(segment, LastElementInArray):
            if node:
                return node[-1]
    return Missing


def value_at(document, pointer):
    """Return the value selected by pointer in document.

    Returns the Missing sentinel when the pointer does not resolve.
    """
    node = document
    for segment in parse_pointer(pointer):
        node = child_value(node, segment)
        if node is Missing:
            return Missing
    return node


def mutate_at(document, pointer, value, strict=False):
    """Replace the value selected by pointer in document with value.

    An array index equal to the array length in the final segment
    appends to the array. Anything else that can not be reached is
    silently ignored, or raises InvalidKey/InvalidIndex when strict
    is true.

    Mutates document in place and returns it. The full document
    pointer "" returns value instead.
    """
    selector = parse_pointer(pointer)
    if not selector:
        return value

    node = document
    last = len(selector) - 1
    for depth, segment in enumerate(selector):
        final = depth == last
        if isinstance(node, dict):
            key = segment_token(segment)
            if key in node:
                if final:
                    node[key] = value
                    return document
                node = node[key]
                continue
        elif isinstance(node, list) and isinstance(segment, ArrayIndex):
            if segment.index < len(node):
                if final:
                    node[segment.index] = value
                    return document
                node = node[segment.index]
                continue
            if final and segment.index == len(node):
                node.append(value)
                return document
        elif isinstance(node, list) and isinstance(segment, LastElementInArray):
            if node:
                if final:
                    node[-1] = value
                    return document
                node = node[-1]
                continue

        # Not reachable from here
        path = pointer_text(pointer)
        if strict:
            if isinstance(node, list) and not isinstance(segment, Key):
                raise InvalidIndex(path)
            raise InvalidKey(path)
        log.debug("Dropping mutation of unreachable path %r", path)
        return document

    return document
