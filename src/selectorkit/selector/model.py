"""Selector model: FragmentKind ordering and the immutable FragmentSet."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class FragmentKind(IntEnum):
    """Categories of compound-selector fragments, in required order.

    A chain may skip categories but never go back to an earlier one.
    CLASS and PSEUDO_CLASS may repeat; a repeated ATTRIBUTE replaces the last.
    """

    NONE = -1
    ELEMENT = 0
    ID = 1
    CLASS = 2
    ATTRIBUTE = 3
    PSEUDO_CLASS = 4
    PSEUDO_ELEMENT = 5


# Categories that may occur at most once per selector.
SINGLE_KINDS = frozenset(
    {FragmentKind.ELEMENT, FragmentKind.ID, FragmentKind.PSEUDO_ELEMENT}
)


@dataclass(frozen=True)
class FragmentSet:
    """Accumulated state of one selector-in-progress.

    ``attribute`` keeps only the most recent attribute fragment.
    ``precomputed`` holds the rendered text of a combined selector; when it
    is set the fragment fields are unused.
    """

    element: str = ""
    id: str = ""
    classes: tuple[str, ...] = ()
    attribute: str = ""
    pseudo_classes: tuple[str, ...] = ()
    pseudo_element: str = ""
    precomputed: str = ""
    last_kind: FragmentKind = FragmentKind.NONE

    @property
    def is_combined(self) -> bool:
        return bool(self.precomputed)

    def has(self, kind: FragmentKind) -> bool:
        """True if a single-occurrence category is already filled."""
        if kind is FragmentKind.ELEMENT:
            return bool(self.element)
        if kind is FragmentKind.ID:
            return bool(self.id)
        if kind is FragmentKind.PSEUDO_ELEMENT:
            return bool(self.pseudo_element)
        return False

    def render(self) -> str:
        """Render the fragments in canonical order."""
        if self.precomputed:
            return self.precomputed

        parts: list[str] = [self.element]
        if self.id:
            parts.append(f"#{self.id}")
        if self.classes:
            parts.append("." + ".".join(self.classes))
        if self.attribute:
            parts.append(f"[{self.attribute}]")
        if self.pseudo_classes:
            parts.append(":" + ":".join(self.pseudo_classes))
        if self.pseudo_element:
            parts.append(f"::{self.pseudo_element}")
        return "".join(parts)


# The common ancestor of every selector chain.
EMPTY_FRAGMENTS = FragmentSet()
