from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    log_format: str = "%(levelname)s %(name)s: %(message)s"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Read SELECTORKIT_* variables, keeping defaults for unset ones."""
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            log_level=env.get("SELECTORKIT_LOG_LEVEL", defaults.log_level).upper(),
            log_format=env.get("SELECTORKIT_LOG_FORMAT", defaults.log_format),
        )
