"""Dict and JSON round trip for selectors."""

from __future__ import annotations

import json
from typing import Any

from selectorkit.builder import builder
from selectorkit.errors import SerializationError
from selectorkit.model.fragment import Fragment, FragmentKind
from selectorkit.model.selector import CompositeSelector, Selector, SimpleSelector

__all__ = ["to_dict", "from_dict", "to_json", "from_json"]


def to_dict(selector: Selector) -> dict[str, Any]:
    """Convert *selector* into plain JSON-compatible data."""
    if isinstance(selector, SimpleSelector):
        return {
            "type": "simple",
            "fragments": [
                {"kind": f.kind.value, "value": f.value} for f in selector.fragments
            ],
        }
    if isinstance(selector, CompositeSelector):
        return {
            "type": "composite",
            "left": to_dict(selector.left),
            "combinator": selector.combinator,
            "right": to_dict(selector.right),
        }
    raise TypeError(f"Not a selector: {selector!r}")


def _fragment_from_dict(data: dict[str, Any]) -> Fragment:
    try:
        kind = FragmentKind(data["kind"])
        value = data["value"]
    except (KeyError, TypeError, ValueError) as exc:
        raise SerializationError(f"Invalid fragment: {data!r}") from exc
    if not isinstance(value, str):
        raise SerializationError(f"Fragment value must be a string: {value!r}")
    return Fragment(kind, value)


def from_dict(data: dict[str, Any]) -> Selector:
    """Rebuild a selector from :func:`to_dict` output.

    Fragments are re-appended one by one, so data that breaks the uniqueness
    or ordering rules raises the same errors as building it by hand.
    """
    if not isinstance(data, dict):
        raise SerializationError(f"Expected an object, got {type(data).__name__}")

    kind = data.get("type")
    if kind == "simple":
        fragments = data.get("fragments")
        if not isinstance(fragments, list):
            raise SerializationError("Simple selector needs a 'fragments' list")
        selector = SimpleSelector()
        for item in fragments:
            selector.append(_fragment_from_dict(item))
        return selector
    if kind == "composite":
        try:
            left, combinator, right = data["left"], data["combinator"], data["right"]
        except KeyError as exc:
            raise SerializationError(f"Composite selector is missing {exc}") from exc
        if not isinstance(combinator, str):
            raise SerializationError(f"Combinator must be a string: {combinator!r}")
        return builder.combine(from_dict(left), combinator, from_dict(right))
    raise SerializationError(f"Unknown selector type: {kind!r}")


def to_json(selector: Selector, indent: int | None = None) -> str:
    return json.dumps(to_dict(selector), indent=indent)


def from_json(text: str) -> Selector:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SerializationError(f"Invalid JSON: {exc}") from exc
    return from_dict(data)
