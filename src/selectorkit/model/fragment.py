"""Fragment model: the typed pieces a simple selector is made of."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class FragmentKind(StrEnum):
    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTR = "attr"
    PSEUDO_CLASS = "pseudo_class"
    PSEUDO_ELEMENT = "pseudo_element"


# Position of each kind inside a simple selector; appends must not go down.
RANKS: dict[FragmentKind, int] = {
    FragmentKind.ELEMENT: 0,
    FragmentKind.ID: 1,
    FragmentKind.CLASS: 2,
    FragmentKind.ATTR: 3,
    FragmentKind.PSEUDO_CLASS: 4,
    FragmentKind.PSEUDO_ELEMENT: 5,
}

FORMATS: dict[FragmentKind, str] = {
    FragmentKind.ELEMENT: "{}",
    FragmentKind.ID: "#{}",
    FragmentKind.CLASS: ".{}",
    FragmentKind.ATTR: "[{}]",
    FragmentKind.PSEUDO_CLASS: ":{}",
    FragmentKind.PSEUDO_ELEMENT: "::{}",
}

# Kinds that may appear at most once in a simple selector.
UNIQUE_KINDS: frozenset[FragmentKind] = frozenset(
    {FragmentKind.ELEMENT, FragmentKind.ID, FragmentKind.PSEUDO_ELEMENT}
)


@dataclass(frozen=True)
class Fragment:
    """A single typed piece of a selector, e.g. an id or a class reference.

    Attributes:
        kind: Which part of the selector this fragment is.
        value: The raw text, without the kind's prefix or brackets.
    """

    kind: FragmentKind
    value: str

    @property
    def rank(self) -> int:
        return RANKS[self.kind]

    @property
    def is_unique(self) -> bool:
        return self.kind in UNIQUE_KINDS

    def render(self) -> str:
        return FORMATS[self.kind].format(self.value)

    def __str__(self) -> str:
        return self.render()
