"""Capability sets: named members resolved for values that lack them."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

__all__ = ["Capabilities"]


class Capabilities:
    """An immutable set of named members (methods, properties, constants).

    Functions and other descriptors are bound to the value they are resolved
    for, so a function taking ``self`` behaves like a method of that value.
    Static and class methods keep the behaviour they had on their class.
    """

    __slots__ = ("_members", "_owners")

    def __init__(
        self,
        members: Mapping[str, Any] | None = None,
        owners: Mapping[str, type] | None = None,
    ) -> None:
        self._members: dict[str, Any] = dict(members) if members else {}
        self._owners: dict[str, type] = dict(owners) if owners else {}

    # --- construction ---------------------------------------------------------

    @classmethod
    def from_type(cls, source: type) -> Capabilities:
        """Collect the public attributes of *source* and its bases.

        Subclass attributes override base-class ones, as in normal lookup.
        """
        members: dict[str, Any] = {}
        owners: dict[str, type] = {}
        for klass in reversed(source.__mro__):
            if klass is object:
                continue
            for name, value in vars(klass).items():
                if name.startswith("_"):
                    continue
                members[name] = value
                owners[name] = klass
        return cls(members, owners)

    @classmethod
    def coerce(cls, source: Any) -> Capabilities:
        """Build a capability set from a class, a mapping, or an instance."""
        if isinstance(source, Capabilities):
            return source
        if source is None:
            return cls()
        if isinstance(source, Mapping):
            return cls(source)
        if isinstance(source, type):
            return cls.from_type(source)
        return cls.from_type(type(source))

    def __or__(self, other: Any) -> Capabilities:
        other = Capabilities.coerce(other)
        return Capabilities(
            {**self._members, **other._members},
            {**self._owners, **other._owners},
        )

    # --- lookup ---------------------------------------------------------------

    def __contains__(self, name: object) -> bool:
        return name in self._members

    def __iter__(self) -> Iterator[str]:
        return iter(self._members)

    def __len__(self) -> int:
        return len(self._members)

    def resolve(self, name: str, instance: Any) -> Any:
        """Return member *name* as seen from *instance*.

        Raises KeyError if the member is not part of this set.
        """
        value = self._members[name]
        if isinstance(value, staticmethod):
            return value.__func__
        if isinstance(value, classmethod):
            owner = self._owners.get(name, type(instance))
            return value.__get__(None, owner)
        if hasattr(value, "__get__"):
            return value.__get__(instance, type(instance))
        return value

    def __repr__(self) -> str:
        return f"Capabilities({sorted(self._members)})"
