"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0

Sidebar index for generated API documentation.

The index maps every documented symbol of the package to a one-line summary,
grouped by kind, and is emitted as a single ``initSidebarItems({...});`` call
that the documentation site loads to build its navigation panel.
"""

import json
import re
from types import ModuleType

from .exceptions import Iot1ClickDevicesError, OperationError
from .shapes import Shape

ENUM = "enum"
STRUCT = "struct"
TRAIT = "trait"
KINDS = (ENUM, STRUCT, TRAIT)

SidebarItems = dict[str, list[tuple[str, str]]]

_CALL_RE = re.compile(r"^\s*initSidebarItems\((?P<body>.*)\);?\s*$", re.DOTALL)


class DocIndexError(Iot1ClickDevicesError, ValueError):
    """The text is not a well-formed sidebar index."""

    ...


def _is_protocol(obj: type) -> bool:
    return bool(obj.__dict__.get("_is_protocol", False))


def classify(obj: object, traits: tuple[type, ...] = ()) -> str | None:
    """Return the sidebar kind of ``obj`` or ``None`` if it is not indexed.

    Classes implementing one of ``traits`` are indexed as structs.
    """
    if not isinstance(obj, type):
        return None
    if issubclass(obj, OperationError) and "operation" in obj.__dict__:
        return ENUM
    if _is_protocol(obj):
        return TRAIT
    if issubclass(obj, Shape) and obj is not Shape:
        return STRUCT
    if any(trait in obj.__mro__ for trait in traits):
        return STRUCT
    return None


def summary(obj: type) -> str:
    """First paragraph of the object's own docstring, on one line."""
    doc = obj.__dict__.get("__doc__") or ""
    # dataclasses synthesize a signature as the docstring
    if doc.startswith(f"{obj.__name__}("):
        return ""
    paragraph = doc.strip().split("\n\n", 1)[0]
    return " ".join(paragraph.split())


def build_sidebar_items(module: ModuleType) -> SidebarItems:
    public = [(name, getattr(module, name)) for name in getattr(module, "__all__", ())]
    traits = tuple(obj for _, obj in public if classify(obj) == TRAIT)
    items: SidebarItems = {kind: [] for kind in KINDS}
    for name, obj in public:
        kind = classify(obj, traits)
        if kind is not None:
            items[kind].append((name, summary(obj)))
    return {kind: sorted(entries) for kind, entries in items.items() if entries}


def render_sidebar_items(items: SidebarItems) -> str:
    """Render ``items`` as an ``initSidebarItems`` call.

    Known kinds come first in their fixed order, any others follow as given.
    """
    order = [kind for kind in KINDS if kind in items]
    order += [kind for kind in items if kind not in KINDS]
    payload = {kind: [[name, text] for name, text in items[kind]] for kind in order}
    return f"initSidebarItems({json.dumps(payload, separators=(',', ':'))});"


def parse_sidebar_items(text: str) -> SidebarItems:
    match = _CALL_RE.match(text)
    if match is None:
        raise DocIndexError("Expected a single initSidebarItems(...) call")
    try:
        payload = json.loads(match.group("body"))
    except ValueError as e:
        raise DocIndexError(f"Sidebar payload is not valid JSON: {e}") from e
    if not isinstance(payload, dict):
        raise DocIndexError("Sidebar payload must be a JSON object")

    items: SidebarItems = {}
    for kind, entries in payload.items():
        if not isinstance(entries, list):
            raise DocIndexError(f"Entries of {kind!r} must be a list")
        parsed = []
        for entry in entries:
            if (
                not isinstance(entry, list)
                or len(entry) != 2
                or not all(isinstance(part, str) for part in entry)
            ):
                raise DocIndexError(f"Malformed entry in {kind!r}: {entry!r}")
            parsed.append((entry[0], entry[1]))
        items[kind] = parsed
    return items


def summary_of(items: SidebarItems, name: str) -> str:
    for entries in items.values():
        for entry_name, text in entries:
            if entry_name == name:
                return text
    raise KeyError(name)
