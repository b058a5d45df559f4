"""selectorkit: build, render and combine CSS-like selectors."""
from __future__ import annotations

__version__ = "0.1.0"

from selectorkit.builder import SelectorFactory, builder
from selectorkit.config import SelectorKitConfig
from selectorkit.errors import (
    DuplicateFragmentError,
    OrderViolationError,
    SelectorError,
    SelectorParseError,
    SerializationError,
)
from selectorkit.model import CompositeSelector, Fragment, FragmentKind, Selector, SimpleSelector
from selectorkit.parser import parse_selector
from selectorkit.serialization import from_dict, from_json, to_dict, to_json

__all__ = [
    "__version__",
    # builder
    "SelectorFactory",
    "builder",
    # model
    "FragmentKind",
    "Fragment",
    "SimpleSelector",
    "CompositeSelector",
    "Selector",
    # errors
    "SelectorError",
    "DuplicateFragmentError",
    "OrderViolationError",
    "SelectorParseError",
    "SerializationError",
    # parsing / serialization
    "parse_selector",
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # config
    "SelectorKitConfig",
]
