"""Registry lookups shared by the checker's msgs table and GuidanceService."""

from collections.abc import Mapping
from typing import cast

from log_message_linter.domain.constants import RULE_PREFIX
from log_message_linter.domain.registry_types import RuleRegistryEntry


class RuleMsgBuilder:
    """Reads rule entries keyed as 'logmsg.<code>' out of a registry mapping."""

    @staticmethod
    def get_entry(
        registry: Mapping[str, RuleRegistryEntry], rule_code: str
    ) -> RuleRegistryEntry | None:
        """Find a rule by code ("W9401") or symbol; returns a copy of its entry."""
        found = registry.get(f"{RULE_PREFIX}{rule_code}")
        if not isinstance(found, dict):
            found = next(
                (
                    entry
                    for key, entry in registry.items()
                    if key.startswith(RULE_PREFIX)
                    and isinstance(entry, dict)
                    and entry.get("symbol") == rule_code
                ),
                None,
            )
        return None if found is None else cast(RuleRegistryEntry, dict(found))

    @classmethod
    def msg_definition(
        cls, registry: Mapping[str, RuleRegistryEntry], code: str
    ) -> tuple[str, str, str] | None:
        entry = cls.get_entry(registry, code)
        if entry is None or not entry.get("message_template"):
            return None
        description = entry.get("short_description") or entry.get("display_name") or code
        return (str(entry["message_template"]), str(entry.get("symbol") or code), str(description))

    @classmethod
    def build_msgs_for_codes(
        cls, registry: Mapping[str, RuleRegistryEntry], codes: list[str]
    ) -> dict[str, tuple[str, str, str]]:
        """pylint msgs table {code: (template, symbol, description)}; codes without a template are left out."""
        definitions = {code: cls.msg_definition(registry, code) for code in codes}
        return {code: d for code, d in definitions.items() if d is not None}
