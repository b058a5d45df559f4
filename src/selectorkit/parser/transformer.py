"""Lark Transformer that converts a selector parse tree into selector objects."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import UnexpectedInput, VisitError

from selectorkit.builder import builder
from selectorkit.errors import SelectorError, SelectorParseError
from selectorkit.model.fragment import Fragment, FragmentKind
from selectorkit.model.selector import CompositeSelector, Selector, SimpleSelector

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

log = logging.getLogger("selectorkit")

# Token type -> (fragment kind, slice that drops the prefix/brackets).
_TOKEN_KINDS: dict[str, tuple[FragmentKind, slice]] = {
    "ELEMENT": (FragmentKind.ELEMENT, slice(None)),
    "ID": (FragmentKind.ID, slice(1, None)),
    "CLASS": (FragmentKind.CLASS, slice(1, None)),
    "ATTR": (FragmentKind.ATTR, slice(1, -1)),
    "PSEUDO_CLASS": (FragmentKind.PSEUDO_CLASS, slice(1, None)),
    "PSEUDO_ELEMENT": (FragmentKind.PSEUDO_ELEMENT, slice(2, None)),
}


class SelectorTransformer(Transformer):  # type: ignore[type-arg]
    """Builds selectors bottom-up; appends go through SimpleSelector checks."""

    def compound(self, items: list[Token]) -> SimpleSelector:
        selector = SimpleSelector()
        for token in items:
            kind, span = _TOKEN_KINDS[token.type]
            selector.append(Fragment(kind, str(token)[span]))
        return selector

    def combined(self, items: list[object]) -> CompositeSelector:
        left, combinator, right = items
        # Bare whitespace is the descendant combinator.
        symbol = str(combinator).strip() or " "
        return builder.combine(left, symbol, right)  # type: ignore[arg-type]

    def start(self, items: list[Selector]) -> Selector:
        return items[0]


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(encoding="utf-8"), parser="lalr", start="start")


def parse_selector(source: str) -> Selector:
    """Parse selector text such as ``div#main > p.note`` into a Selector.

    Combinator chains fold to the left, so ``a + b ~ c`` becomes
    ``combine(combine(a, "+", b), "~", c)``.
    """
    try:
        tree = _parser().parse(source.strip())
    except UnexpectedInput as e:
        log.debug("Failed to parse selector %r: %s", source, e)
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise SelectorParseError(str(e), line=line, column=column) from e
    try:
        return SelectorTransformer().transform(tree)
    except VisitError as e:
        if isinstance(e.orig_exc, SelectorError):
            raise e.orig_exc from None
        raise
