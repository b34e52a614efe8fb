"""selectorkit: CSS selector builder, JSON bridge and rectangle values."""

__version__ = "0.1.0"

from selectorkit.jsonbridge import Capabilities, ParseError, from_json, get_json  # noqa: E402
from selectorkit.selector import (  # noqa: E402
    DuplicateFragmentError,
    OrderViolationError,
    Selector,
    css_selector_builder,
)
from selectorkit.shapes import Rectangle  # noqa: E402

__all__ = [
    "__version__",
    "Rectangle",
    "get_json",
    "from_json",
    "Capabilities",
    "ParseError",
    "Selector",
    "css_selector_builder",
    "DuplicateFragmentError",
    "OrderViolationError",
]
