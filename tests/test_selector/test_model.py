"""Tests for FragmentKind ordering and FragmentSet rendering."""

import dataclasses

import pytest

from selectorkit.selector import EMPTY_FRAGMENTS, FragmentKind, FragmentSet


class TestFragmentKind:
    def test_total_order(self):
        ordered = sorted(FragmentKind)
        assert ordered == [
            FragmentKind.NONE,
            FragmentKind.ELEMENT,
            FragmentKind.ID,
            FragmentKind.CLASS,
            FragmentKind.ATTRIBUTE,
            FragmentKind.PSEUDO_CLASS,
            FragmentKind.PSEUDO_ELEMENT,
        ]

    def test_ordinals(self):
        assert FragmentKind.NONE == -1
        assert FragmentKind.ELEMENT == 0
        assert FragmentKind.PSEUDO_ELEMENT == 5


class TestFragmentSet:
    def test_empty_defaults(self):
        assert EMPTY_FRAGMENTS == FragmentSet()
        assert EMPTY_FRAGMENTS.last_kind is FragmentKind.NONE
        assert EMPTY_FRAGMENTS.render() == ""

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            EMPTY_FRAGMENTS.element = "div"  # type: ignore[misc]

    def test_render_order_is_fixed(self):
        fragments = FragmentSet(
            element="a",
            id="x",
            classes=("c1", "c2"),
            attribute="href",
            pseudo_classes=("hover",),
            pseudo_element="after",
        )
        assert fragments.render() == "a#x.c1.c2[href]:hover::after"

    def test_precomputed_wins(self):
        fragments = FragmentSet(element="ignored", precomputed="a > b")
        assert fragments.is_combined
        assert fragments.render() == "a > b"

    def test_has_only_tracks_single_kinds(self):
        fragments = FragmentSet(element="a", classes=("c",))
        assert fragments.has(FragmentKind.ELEMENT)
        assert not fragments.has(FragmentKind.ID)
        assert not fragments.has(FragmentKind.CLASS)
