from selectorkit.selector.builder import (
    COMBINATORS,
    Selector,
    SelectorBuilder,
    combine,
    css_selector_builder,
)
from selectorkit.selector.errors import (
    DuplicateFragmentError,
    OrderViolationError,
    SelectorError,
)
from selectorkit.selector.model import EMPTY_FRAGMENTS, FragmentKind, FragmentSet

__all__ = [
    "COMBINATORS",
    "Selector",
    "SelectorBuilder",
    "combine",
    "css_selector_builder",
    "SelectorError",
    "DuplicateFragmentError",
    "OrderViolationError",
    "EMPTY_FRAGMENTS",
    "FragmentKind",
    "FragmentSet",
]
