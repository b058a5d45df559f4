from __future__ import annotations

import os
from dataclasses import dataclass

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True)
class SelectorKitConfig:
    log_level: str = "WARNING"
    json_indent: int | None = 2

    @classmethod
    def from_env(cls) -> SelectorKitConfig:
        """Build a config from ``SELECTORKIT_*`` environment variables.

        Raises ValueError when a variable holds an unusable value.
        """
        defaults = cls()

        log_level = os.environ.get("SELECTORKIT_LOG_LEVEL", defaults.log_level).upper()
        if log_level not in LOG_LEVELS:
            raise ValueError(
                f"SELECTORKIT_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, "
                f"got {log_level!r}"
            )

        json_indent = defaults.json_indent
        raw_indent = os.environ.get("SELECTORKIT_JSON_INDENT")
        if raw_indent:
            try:
                json_indent = int(raw_indent)
            except ValueError:
                raise ValueError(
                    f"SELECTORKIT_JSON_INDENT must be an integer, got {raw_indent!r}"
                ) from None

        return cls(log_level=log_level, json_indent=json_indent)
