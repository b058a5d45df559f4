from selectorkit.errors import SelectorParseError
from selectorkit.parser.transformer import SelectorTransformer, parse_selector

__all__ = ["SelectorParseError", "SelectorTransformer", "parse_selector"]
