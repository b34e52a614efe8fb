"""Chainable CSS selector builder.

Each compound selector is built from fragments in a fixed order::

    element#id.class[attr]:pseudo-class::pseudo-element

Class and pseudo-class fragments may repeat; a repeated attribute replaces
the previous one.  Compound selectors are joined into complex ones with a
combinator (``" "``, ``"+"``, ``"~"``, ``">"``)::

    >>> b = css_selector_builder
    >>> b.id("main").class_("container").class_("editable").stringify()
    '#main.container.editable'
    >>> b.combine(b.element("div").id("main"), "+", b.element("table")).stringify()
    'div#main + table'
"""

from __future__ import annotations

import logging
from dataclasses import replace

from selectorkit.selector.errors import DuplicateFragmentError, OrderViolationError
from selectorkit.selector.model import (
    EMPTY_FRAGMENTS,
    SINGLE_KINDS,
    FragmentKind,
    FragmentSet,
)

__all__ = ["COMBINATORS", "Selector", "SelectorBuilder", "combine", "css_selector_builder"]

log = logging.getLogger(__name__)

COMBINATORS: tuple[str, ...] = (" ", "+", "~", ">")


def _extend(fragments: FragmentSet, kind: FragmentKind, value: str) -> FragmentSet:
    """Return a copy of *fragments* with *value* added under *kind*."""
    if fragments.is_combined:
        raise OrderViolationError(
            "A combined selector cannot take further fragments"
        )
    if kind in SINGLE_KINDS and fragments.has(kind):
        raise DuplicateFragmentError()
    if kind < fragments.last_kind:
        raise OrderViolationError()

    if kind is FragmentKind.ELEMENT:
        updates = {"element": value}
    elif kind is FragmentKind.ID:
        updates = {"id": value}
    elif kind is FragmentKind.CLASS:
        updates = {"classes": fragments.classes + (value,)}
    elif kind is FragmentKind.ATTRIBUTE:
        updates = {"attribute": value}
    elif kind is FragmentKind.PSEUDO_CLASS:
        updates = {"pseudo_classes": fragments.pseudo_classes + (value,)}
    elif kind is FragmentKind.PSEUDO_ELEMENT:
        updates = {"pseudo_element": value}
    else:
        raise ValueError(f"Cannot append fragment of kind {kind!r}")

    log.debug("append %s=%r", kind.name.lower(), value)
    return replace(fragments, last_kind=kind, **updates)


class Selector:
    """An immutable CSS selector.

    Every append method returns a new Selector and leaves the receiver
    untouched, so partial chains can be reused as templates.
    """

    __slots__ = ("_fragments",)

    def __init__(self, fragments: FragmentSet = EMPTY_FRAGMENTS) -> None:
        self._fragments = fragments

    @property
    def fragments(self) -> FragmentSet:
        return self._fragments

    # --- append operations ----------------------------------------------------

    def with_element(self, value: str) -> Selector:
        return Selector(_extend(self._fragments, FragmentKind.ELEMENT, value))

    def with_id(self, value: str) -> Selector:
        return Selector(_extend(self._fragments, FragmentKind.ID, value))

    def with_class(self, value: str) -> Selector:
        return Selector(_extend(self._fragments, FragmentKind.CLASS, value))

    def with_attribute(self, value: str) -> Selector:
        return Selector(_extend(self._fragments, FragmentKind.ATTRIBUTE, value))

    def with_pseudo_class(self, value: str) -> Selector:
        return Selector(_extend(self._fragments, FragmentKind.PSEUDO_CLASS, value))

    def with_pseudo_element(self, value: str) -> Selector:
        return Selector(_extend(self._fragments, FragmentKind.PSEUDO_ELEMENT, value))

    # Short names used by the builder facade.
    element = with_element
    id = with_id
    class_ = with_class
    attr = with_attribute
    pseudo_class = with_pseudo_class
    pseudo_element = with_pseudo_element

    # --- rendering ------------------------------------------------------------

    def render(self) -> str:
        """Return the canonical CSS text for this selector."""
        return self._fragments.render()

    stringify = render

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Selector({self.render()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Selector):
            return NotImplemented
        return self._fragments == other._fragments

    def __hash__(self) -> int:
        return hash(self._fragments)


def combine(left: Selector, combinator: str, right: Selector) -> Selector:
    """Join two selectors with *combinator*, padded by one space each side."""
    text = f"{left.render()} {combinator} {right.render()}"
    log.debug("combine %r", text)
    return Selector(replace(EMPTY_FRAGMENTS, precomputed=text))


class SelectorBuilder:
    """Stateless entry point that starts new selector chains.

    Each method starts from the empty fragment set, so the builder itself
    never accumulates state and can be shared.
    """

    def element(self, value: str) -> Selector:
        return Selector().with_element(value)

    def id(self, value: str) -> Selector:
        return Selector().with_id(value)

    def class_(self, value: str) -> Selector:
        return Selector().with_class(value)

    def attr(self, value: str) -> Selector:
        return Selector().with_attribute(value)

    def pseudo_class(self, value: str) -> Selector:
        return Selector().with_pseudo_class(value)

    def pseudo_element(self, value: str) -> Selector:
        return Selector().with_pseudo_element(value)

    def combine(self, left: Selector, combinator: str, right: Selector) -> Selector:
        return combine(left, combinator, right)


css_selector_builder = SelectorBuilder()
