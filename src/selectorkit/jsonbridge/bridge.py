"""get_json / from_json: compact JSON text in and out of Python values."""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any

from selectorkit.jsonbridge.capabilities import Capabilities
from selectorkit.jsonbridge.errors import ParseError
from selectorkit.jsonbridge.hydrated import Hydrated, unwrap

__all__ = ["get_json", "from_json"]

log = logging.getLogger(__name__)


def _own_fields(value: Any) -> Any:
    """Fallback for json.dumps: reduce an object to its own public fields."""
    if isinstance(value, Hydrated):
        return unwrap(value)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            f.name: getattr(value, f.name)
            for f in dataclasses.fields(value)
            if not f.name.startswith("_")
        }
    if hasattr(value, "__dict__") and not isinstance(value, type):
        return {k: v for k, v in vars(value).items() if not k.startswith("_")}
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def get_json(value: Any) -> str:
    """Serialize *value* to compact JSON text.

    Keys keep their insertion order.  Lists and tuples become arrays.
    Dataclasses and plain objects contribute their public instance fields.
    """
    text = json.dumps(
        value,
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
        default=_own_fields,
    )
    log.debug("serialized %s to %d chars", type(value).__name__, len(text))
    return text


def _decode(raw: bytes) -> str:
    """Decode JSON bytes the way json.loads does, as a ParseError on failure."""
    try:
        return raw.decode(json.detect_encoding(raw), "surrogatepass")
    except UnicodeDecodeError as exc:
        doc = raw.decode("utf-8", "replace")
        raise ParseError(f"Invalid {exc.encoding} data: {exc.reason}", doc, exc.start) from exc


def from_json(capabilities: Any, text: str | bytes) -> Hydrated:
    """Parse *text* and attach *capabilities* to the result.

    *capabilities* may be a :class:`Capabilities`, a class, or a mapping of
    names to members.  Raises :class:`ParseError` for malformed JSON,
    including the non-standard ``NaN``/``Infinity`` constants and bytes
    that are not valid UTF-8/16/32.
    """
    if isinstance(text, (bytes, bytearray)):
        text = _decode(bytes(text))

    def reject_constant(name: str) -> Any:
        raise json.JSONDecodeError(f"Invalid constant {name}", text, text.find(name))

    try:
        data = json.loads(text, parse_constant=reject_constant)
    except json.JSONDecodeError as exc:
        raise ParseError(exc.msg, exc.doc, exc.pos) from exc

    caps = Capabilities.coerce(capabilities)
    log.debug("parsed %s with %d capabilities", type(data).__name__, len(caps))
    return Hydrated(data, caps)
