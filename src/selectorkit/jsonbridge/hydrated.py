"""Hydrated: parsed JSON data with a capability set attached."""

from __future__ import annotations

from typing import Any

from selectorkit.jsonbridge.capabilities import Capabilities

__all__ = ["Hydrated", "capabilities_of", "unwrap"]


class Hydrated:
    """Wraps a parsed JSON value and resolves missing members through
    its capability set.

    Attribute lookup checks the parsed object's own fields first, then the
    capabilities.  Attribute assignment writes to the parsed fields.  No
    public attributes are defined on the wrapper itself so that any JSON
    field name stays reachable; use :func:`unwrap` and
    :func:`capabilities_of` to get at the parts.

    The wrapper's own slots are ``_hydrated_data`` and
    ``_hydrated_capabilities``; JSON fields with those two names are only
    reachable by subscripting.
    """

    __slots__ = ("_hydrated_data", "_hydrated_capabilities")

    def __init__(self, data: Any, capabilities: Capabilities) -> None:
        object.__setattr__(self, "_hydrated_data", data)
        object.__setattr__(self, "_hydrated_capabilities", capabilities)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("__") or name in Hydrated.__slots__:
            raise AttributeError(name)
        data = object.__getattribute__(self, "_hydrated_data")
        if isinstance(data, dict) and name in data:
            return data[name]
        capabilities = object.__getattribute__(self, "_hydrated_capabilities")
        if name in capabilities:
            return capabilities.resolve(name, self)
        raise AttributeError(
            f"{type(data).__name__} value has no field or capability {name!r}"
        )

    def __setattr__(self, name: str, value: Any) -> None:
        data = object.__getattribute__(self, "_hydrated_data")
        if not isinstance(data, dict):
            raise AttributeError(
                f"cannot set {name!r} on a {type(data).__name__} value"
            )
        data[name] = value

    def __delattr__(self, name: str) -> None:
        data = object.__getattribute__(self, "_hydrated_data")
        if not isinstance(data, dict) or name not in data:
            raise AttributeError(name)
        del data[name]

    # --- container protocol, delegated to the parsed value --------------------

    def __getitem__(self, key: Any) -> Any:
        return self._hydrated_data[key]

    def __setitem__(self, key: Any, value: Any) -> None:
        self._hydrated_data[key] = value

    def __contains__(self, item: object) -> bool:
        return item in self._hydrated_data

    def __iter__(self):
        return iter(self._hydrated_data)

    def __len__(self) -> int:
        return len(self._hydrated_data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Hydrated):
            return self._hydrated_data == other._hydrated_data
        return self._hydrated_data == other

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Hydrated({self._hydrated_data!r}, {self._hydrated_capabilities!r})"


def unwrap(value: Any) -> Any:
    """Return the parsed data behind a Hydrated value, or *value* itself."""
    if isinstance(value, Hydrated):
        return object.__getattribute__(value, "_hydrated_data")
    return value


def capabilities_of(value: Hydrated) -> Capabilities:
    return object.__getattribute__(value, "_hydrated_capabilities")
