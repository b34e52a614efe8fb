"""Tests for Capabilities construction, composition and lookup."""

import pytest

from selectorkit.jsonbridge import Capabilities, from_json


class Base:
    kind = "base"

    def greet(self):
        return f"hello {self.name}"

    def describe(self):
        return "base"


class Child(Base):
    kind = "child"

    def describe(self):
        return "child"

    @staticmethod
    def helper(x):
        return x + 1

    @classmethod
    def origin(cls):
        return cls.__name__

    @property
    def shout(self):
        return self.name.upper()

    def _private(self):
        return "hidden"


class TestFromType:
    def test_collects_public_members_across_bases(self):
        caps = Capabilities.from_type(Child)
        assert {"kind", "greet", "describe", "helper", "origin", "shout"} <= set(caps)

    def test_skips_private_and_dunder_members(self):
        caps = Capabilities.from_type(Child)
        assert "_private" not in caps
        assert "__init__" not in caps

    def test_subclass_overrides_base(self):
        value = from_json(Child, '{"name":"ada"}')
        assert value.describe() == "child"
        assert value.kind == "child"

    def test_inherited_method(self):
        value = from_json(Child, '{"name":"ada"}')
        assert value.greet() == "hello ada"

    def test_staticmethod(self):
        value = from_json(Child, "{}")
        assert value.helper(1) == 2

    def test_classmethod_binds_to_defining_class(self):
        value = from_json(Child, "{}")
        assert value.origin() == "Child"

    def test_property(self):
        value = from_json(Child, '{"name":"ada"}')
        assert value.shout == "ADA"


class TestCoerce:
    def test_none_is_empty(self):
        assert len(Capabilities.coerce(None)) == 0

    def test_instance_uses_its_type(self):
        caps = Capabilities.coerce(Base())
        assert "greet" in caps

    def test_existing_set_is_returned(self):
        caps = Capabilities({"a": 1})
        assert Capabilities.coerce(caps) is caps

    def test_mapping(self):
        caps = Capabilities.coerce({"a": 1})
        assert "a" in caps


class TestComposition:
    def test_union_merges_members(self):
        caps = Capabilities.from_type(Base) | {"extra": lambda self: "extra"}
        value = from_json(caps, '{"name":"bo"}')
        assert value.greet() == "hello bo"
        assert value.extra() == "extra"

    def test_right_operand_wins(self):
        caps = Capabilities({"kind": "left"}) | Capabilities({"kind": "right"})
        assert from_json(caps, "{}").kind == "right"

    def test_union_returns_new_set(self):
        left = Capabilities({"a": 1})
        left | {"b": 2}
        assert "b" not in left

    def test_resolve_unknown_raises_key_error(self):
        with pytest.raises(KeyError):
            Capabilities().resolve("missing", object())
