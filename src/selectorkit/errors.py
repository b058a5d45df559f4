"""Error hierarchy for selectorkit."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from selectorkit.model.fragment import FragmentKind


class SelectorError(Exception):
    """Base error for all selectorkit errors."""


class DuplicateFragmentError(SelectorError):
    """A selector already holds its single element, id or pseudo-element."""

    def __init__(self, kind: FragmentKind, message: str | None = None) -> None:
        super().__init__(
            message
            or "Element, id and pseudo-element should not occur more then one "
            "time inside the selector"
        )
        self.kind = kind


class OrderViolationError(SelectorError):
    """A fragment was appended after a fragment of higher rank."""

    def __init__(
        self,
        kind: FragmentKind,
        previous: FragmentKind,
        message: str | None = None,
    ) -> None:
        super().__init__(
            message
            or "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element"
        )
        self.kind = kind
        self.previous = previous


class SelectorParseError(SelectorError):
    """Raised when selector text cannot be parsed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)


class SerializationError(SelectorError):
    """Raised when a serialized selector cannot be decoded."""
