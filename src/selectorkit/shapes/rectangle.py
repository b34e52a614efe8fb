"""Rectangle value with a derived area."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class Rectangle:
    """A width/height pair.

    Neither dimension is validated; whatever is stored flows straight into
    :meth:`get_area`.
    """

    width: Any
    height: Any

    def get_area(self) -> Any:
        """Return ``width * height`` using the current field values."""
        return self.width * self.height
