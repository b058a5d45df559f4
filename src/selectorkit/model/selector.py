"""Selector model: simple (compound) selectors and combinator trees."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Union

from selectorkit.errors import DuplicateFragmentError, OrderViolationError
from selectorkit.model.fragment import Fragment, FragmentKind

log = logging.getLogger("selectorkit")


@dataclass
class SimpleSelector:
    """An ordered run of fragments such as ``div#main.container:hover``.

    Fragments are appended one at a time through the chainable methods, each
    of which returns ``self``. Every append checks two invariants, in order:

    * element, id and pseudo-element fragments occur at most once
      (:class:`DuplicateFragmentError`);
    * a fragment's rank is never lower than the rank of the fragment appended
      just before it (:class:`OrderViolationError`).

    A rejected append leaves the selector unchanged.
    """

    fragments: list[Fragment] = field(default_factory=list)

    # --- appending ------------------------------------------------------------

    def append(self, fragment: Fragment) -> SimpleSelector:
        """Append *fragment* after checking uniqueness, then order."""
        self._check_unique(fragment)
        self._check_order(fragment)
        self.fragments.append(fragment)
        return self

    def _check_unique(self, fragment: Fragment) -> None:
        if fragment.is_unique and self.has_kind(fragment.kind):
            log.debug("Rejected duplicate %s fragment %r", fragment.kind, fragment.value)
            raise DuplicateFragmentError(fragment.kind)

    def _check_order(self, fragment: Fragment) -> None:
        if not self.fragments:
            return
        last = self.fragments[-1]
        if last.rank > fragment.rank:
            log.debug(
                "Rejected %s fragment %r after %s", fragment.kind, fragment.value, last.kind
            )
            raise OrderViolationError(fragment.kind, last.kind)

    def element(self, value: str) -> SimpleSelector:
        return self.append(Fragment(FragmentKind.ELEMENT, value))

    def id(self, value: str) -> SimpleSelector:
        return self.append(Fragment(FragmentKind.ID, value))

    def class_(self, value: str) -> SimpleSelector:
        return self.append(Fragment(FragmentKind.CLASS, value))

    def attr(self, value: str) -> SimpleSelector:
        return self.append(Fragment(FragmentKind.ATTR, value))

    def pseudo_class(self, value: str) -> SimpleSelector:
        return self.append(Fragment(FragmentKind.PSEUDO_CLASS, value))

    def pseudo_element(self, value: str) -> SimpleSelector:
        return self.append(Fragment(FragmentKind.PSEUDO_ELEMENT, value))

    # --- queries --------------------------------------------------------------

    def has_kind(self, kind: FragmentKind) -> bool:
        return any(f.kind is kind for f in self.fragments)

    def copy(self) -> SimpleSelector:
        return SimpleSelector(list(self.fragments))

    def render(self) -> str:
        return "".join(f.render() for f in self.fragments)

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class CompositeSelector:
    """Two selectors joined by a combinator symbol (``" "``, ``+``, ``~``, ``>``).

    The combinator is stored verbatim and always rendered with one space on
    each side, so a descendant combinator (``" "``) renders as three spaces.

    Composites compare by structure but are not hashable, since their leaves
    are mutable :class:`SimpleSelector` objects.
    """

    left: Selector
    combinator: str
    right: Selector

    __hash__ = None  # type: ignore[assignment]

    def render(self) -> str:
        return f"{self.left.render()} {self.combinator} {self.right.render()}"

    def __str__(self) -> str:
        return self.render()


Selector = Union[SimpleSelector, CompositeSelector]
