"""Rule toggles. Immutable value object created by Infrastructure."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, fields

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuleConfig:
    """
    Enables or disables each message rule for one analysis run.

    Domain does not read the filesystem; Infrastructure loads the raw mapping
    (JSON file or pyproject.toml table) and calls RuleConfig.from_mapping().
    """

    enable_lowercase_start: bool = True
    enable_no_special_chars: bool = True
    enable_sensitive_patterns: bool = True
    enable_english_only: bool = True

    @classmethod
    def default(cls) -> RuleConfig:
        return cls()

    @classmethod
    def from_mapping(cls, raw: Mapping[str, object]) -> RuleConfig:
        """
        Build a config from a loaded mapping, starting from all-enabled defaults.

        Keys may use dashes or underscores. Unknown keys are ignored; values
        that are not booleans keep their default.
        """
        known = {f.name for f in fields(cls)}
        values: dict[str, bool] = {}
        for key, value in raw.items():
            if not isinstance(key, str):
                continue
            name = key.replace("-", "_")
            if name not in known:
                continue
            if not isinstance(value, bool):
                logger.warning("ignoring non-boolean value for config key %s", key)
                continue
            values[name] = value
        return cls(**values)

    def is_enabled(self, flag: str) -> bool:
        """Return the toggle named flag (e.g. 'enable_english_only')."""
        return bool(getattr(self, flag))

    def to_dict(self) -> dict[str, bool]:
        return {f.name: getattr(self, f.name) for f in fields(self)}
