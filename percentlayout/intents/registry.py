"""
Intent registry: loads the translation rules from YAML at startup, validates
them, and exposes a read-only query API.

The registry is a module-level singleton; call get_registry() to obtain it.
The rule table is loaded and validated once at import time. Nothing writes to
the registry after startup.
"""

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Optional, cast

import yaml

from percentlayout.schemas.relation import Attribute

from .types import IntentRule, LayoutIntent

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).parent / "data"
_RULES_FILE = "intents.yaml"
_ENTRY_KEYS = frozenset(
    {
        "id",
        "subject",
        "percent_reference",
        "complement",
        "flush_reference",
        "absolute_reference",
        "inset",
        "expands_to",
    }
)


def _optional_attribute(value: Optional[str]) -> Optional[Attribute]:
    return Attribute(value) if value is not None else None


class IntentRegistry:
    """
    Read-only registry of layout intent rules.

    rules is wrapped in MappingProxyType after loading and is immutable for
    the lifetime of the registry instance.

    Instantiate directly to use a custom data directory (e.g. in tests);
    otherwise use get_registry() for the module singleton.
    """

    def __init__(self, data_dir: Path = _DATA_DIR) -> None:
        self._data_dir = data_dir
        self.rules: MappingProxyType[LayoutIntent, IntentRule]

        self._load_rules()
        self._validate()
        logger.debug("Loaded %d intent rules from %s", len(self.rules), data_dir)

    # ── Loading ────────────────────────────────────────────────────────────────

    def _load_yaml(self, filename: str) -> dict[str, Any]:
        path = self._data_dir / filename
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except FileNotFoundError:
            raise FileNotFoundError(f"Intent data file not found: {path}") from None
        except yaml.YAMLError as exc:
            raise ValueError(f"Failed to parse intent data file {path}: {exc}") from exc
        if not isinstance(data, dict) or not isinstance(data.get("entries"), list):
            raise ValueError(f"Intent data file {path} must contain an 'entries' list")
        return cast(dict[str, Any], data)

    def _load_rules(self) -> None:
        data = self._load_yaml(_RULES_FILE)
        result: dict[LayoutIntent, IntentRule] = {}
        for index, entry in enumerate(data["entries"]):
            try:
                rule = self._parse_entry(entry)
            except (KeyError, TypeError, ValueError) as exc:
                raise ValueError(f"Invalid intent entry #{index}: {exc}") from exc
            if rule.id in result:
                raise ValueError(f"Duplicate intent rule for {rule.id.value!r}")
            result[rule.id] = rule
        self.rules = MappingProxyType(result)

    @staticmethod
    def _parse_entry(entry: Any) -> IntentRule:
        if not isinstance(entry, dict):
            raise TypeError(f"expected a mapping, got {type(entry).__name__}")
        unknown = sorted(set(entry) - _ENTRY_KEYS)
        if unknown:
            raise ValueError(f"unknown keys {unknown}")
        if "id" not in entry:
            raise KeyError("missing 'id'")
        return IntentRule(
            id=LayoutIntent(entry["id"]),
            subject=_optional_attribute(entry.get("subject")),
            percent_reference=_optional_attribute(entry.get("percent_reference")),
            complement=bool(entry.get("complement", False)),
            flush_reference=_optional_attribute(entry.get("flush_reference")),
            absolute_reference=_optional_attribute(entry.get("absolute_reference")),
            inset=bool(entry.get("inset", False)),
            expands_to=tuple(LayoutIntent(i) for i in entry.get("expands_to", [])),
        )

    # ── Validation ─────────────────────────────────────────────────────────────

    def _validate(self) -> None:
        """
        Run at startup. Raises ValueError listing all problems found if the
        table misses an intent or any rule is internally inconsistent.
        """
        errors: list[str] = []
        for intent in LayoutIntent:
            if intent not in self.rules:
                errors.append(f"intent {intent.value!r}: no rule defined")
        for rule in self.rules.values():
            if rule.is_composite:
                self._check_composite(rule, errors)
            else:
                self._check_simple(rule, errors)
        if errors:
            raise ValueError(
                "Intent registry validation failed:\n" + "\n".join(f"  • {e}" for e in errors)
            )

    def _check_simple(self, rule: IntentRule, errors: list[str]) -> None:
        prefix = f"intent {rule.id.value!r}"
        if rule.subject is None:
            errors.append(f"{prefix}: subject is not set")
        if rule.percent_reference is None:
            errors.append(f"{prefix}: percent_reference is not set")
        if rule.complement and rule.flush_reference is None:
            errors.append(f"{prefix}: complement rule has no flush_reference")
        if not rule.complement and rule.flush_reference is not None:
            errors.append(f"{prefix}: flush_reference is only used by complement rules")
        if rule.inset and rule.absolute_reference is None:
            errors.append(f"{prefix}: inset rule has no absolute_reference")

    def _check_composite(self, rule: IntentRule, errors: list[str]) -> None:
        prefix = f"intent {rule.id.value!r}"
        if rule.subject is not None or rule.percent_reference is not None:
            errors.append(f"{prefix}: composite rule must not set subject or percent_reference")
        for target in rule.expands_to:
            if target == rule.id:
                errors.append(f"{prefix}: expands to itself")
            elif target not in self.rules:
                errors.append(f"{prefix}: expands to undefined intent {target.value!r}")
            elif self.rules[target].is_composite:
                errors.append(f"{prefix}: expands to composite intent {target.value!r}")

    # ── Query API ──────────────────────────────────────────────────────────────

    def get_rule(self, intent: LayoutIntent) -> IntentRule:
        """Return the rule for *intent*.

        Raises KeyError if the intent has no rule. Validation guarantees every
        LayoutIntent member has one after construction.
        """
        try:
            return self.rules[intent]
        except KeyError:
            raise KeyError(f"No rule for layout intent {intent!r}") from None

    def expand(self, intent: LayoutIntent) -> tuple[IntentRule, ...]:
        """Return the simple rules *intent* applies, in application order."""
        rule = self.get_rule(intent)
        if rule.is_composite:
            return tuple(self.rules[target] for target in rule.expands_to)
        return (rule,)


# ── Module-level singleton ─────────────────────────────────────────────────────

_registry: IntentRegistry = IntentRegistry()


def get_registry() -> IntentRegistry:
    """Return the module-level registry singleton."""
    return _registry
