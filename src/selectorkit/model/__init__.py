from __future__ import annotations

from selectorkit.model.fragment import FORMATS, RANKS, UNIQUE_KINDS, Fragment, FragmentKind
from selectorkit.model.selector import CompositeSelector, Selector, SimpleSelector

__all__ = [
    # fragment
    "FragmentKind",
    "Fragment",
    "RANKS",
    "FORMATS",
    "UNIQUE_KINDS",
    # selector
    "SimpleSelector",
    "CompositeSelector",
    "Selector",
]
