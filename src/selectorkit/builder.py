"""Selector factory: the entry point for building selectors.

Example::

    from selectorkit import builder

    builder.element("a").attr('href$=".png"').pseudo_class("focus").render()
    # 'a[href$=".png"]:focus'

    builder.combine(builder.element("ul"), ">", builder.element("li")).render()
    # 'ul > li'
"""

from __future__ import annotations

import logging

from selectorkit.model.fragment import Fragment, FragmentKind
from selectorkit.model.selector import CompositeSelector, Selector, SimpleSelector

__all__ = ["SelectorFactory", "builder"]

log = logging.getLogger("selectorkit")


def _own(selector: Selector) -> Selector:
    """Return a copy of *selector* that no caller holds a reference to."""
    if isinstance(selector, SimpleSelector):
        return selector.copy()
    return CompositeSelector(
        _own(selector.left), selector.combinator, _own(selector.right)
    )


class SelectorFactory:
    """Facade that starts new selectors and combines existing ones."""

    def fragment(self, kind: FragmentKind | str, value: str) -> SimpleSelector:
        """Start a new selector holding a single fragment of *kind*."""
        return SimpleSelector().append(Fragment(FragmentKind(kind), value))

    def element(self, value: str) -> SimpleSelector:
        return self.fragment(FragmentKind.ELEMENT, value)

    def id(self, value: str) -> SimpleSelector:
        return self.fragment(FragmentKind.ID, value)

    def class_(self, value: str) -> SimpleSelector:
        return self.fragment(FragmentKind.CLASS, value)

    def attr(self, value: str) -> SimpleSelector:
        return self.fragment(FragmentKind.ATTR, value)

    def pseudo_class(self, value: str) -> SimpleSelector:
        return self.fragment(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SimpleSelector:
        return self.fragment(FragmentKind.PSEUDO_ELEMENT, value)

    def combine(
        self, left: Selector, combinator: str, right: Selector
    ) -> CompositeSelector:
        """Join *left* and *right* with *combinator*.

        The combinator is not validated. Both sides are copied down to their
        simple leaves, so appending to the originals afterwards does not
        change the composite.
        """
        log.debug("Combining selectors with %r", combinator)
        return CompositeSelector(_own(left), combinator, _own(right))


builder = SelectorFactory()
