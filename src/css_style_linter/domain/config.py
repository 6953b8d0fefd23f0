"""Configuration value objects. Built by Infrastructure from loaded dicts; never read files."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from css_style_linter.domain.constants import (
    DEFAULT_EXTENSIONS,
    DEFAULT_JOBS,
)
from css_style_linter.domain.errors import InvalidRuleConfigError


@dataclass(frozen=True)
class RuleSettings:
    """Per-rule settings: whether it runs and which options override its defaults."""

    enabled: bool = True
    options: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_raw(cls, rule_id: str, raw: object) -> "RuleSettings":
        """
        Accept ``true``/``false`` or a table with an optional ``enabled`` key.

        Any other shape is a configuration error.
        """
        if isinstance(raw, bool):
            return cls(enabled=raw)
        if isinstance(raw, Mapping):
            options = {str(k): v for k, v in raw.items() if k != "enabled"}
            enabled = raw.get("enabled", True)
            if not isinstance(enabled, bool):
                raise InvalidRuleConfigError(rule_id, "'enabled' must be true or false")
            return cls(enabled=enabled, options=MappingProxyType(options))
        raise InvalidRuleConfigError(
            rule_id, f"expected a bool or a table, got {type(raw).__name__}"
        )


class LintConfiguration:
    """
    Immutable mapping of rule id to RuleSettings.

    Rules absent from the mapping run with their defaults. Shared read-only
    across concurrent lint passes.
    """

    def __init__(self, rules: Mapping[str, RuleSettings] | None = None) -> None:
        self._rules: Mapping[str, RuleSettings] = MappingProxyType(dict(rules or {}))

    @classmethod
    def from_mapping(cls, raw: Mapping[str, object]) -> "LintConfiguration":
        """Build from the ``rules`` table of a config file."""
        return cls({str(rule_id): RuleSettings.from_raw(str(rule_id), value)
                    for rule_id, value in raw.items()})

    @classmethod
    def disabling(cls, rule_ids: Iterable[str]) -> "LintConfiguration":
        """Configuration that turns every given rule off."""
        return cls({rule_id: RuleSettings(enabled=False) for rule_id in rule_ids})

    @property
    def rules(self) -> Mapping[str, RuleSettings]:
        return self._rules

    def settings_for(self, rule_id: str) -> RuleSettings:
        return self._rules.get(rule_id, RuleSettings())

    def with_disabled(self, rule_ids: Iterable[str]) -> "LintConfiguration":
        """Copy with the given rules switched off, keeping their options."""
        merged = dict(self._rules)
        for rule_id in rule_ids:
            current = merged.get(rule_id, RuleSettings())
            merged[rule_id] = RuleSettings(enabled=False, options=current.options)
        return LintConfiguration(merged)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LintConfiguration):
            return NotImplemented
        return dict(self._rules) == dict(other._rules)

    def __repr__(self) -> str:
        return f"LintConfiguration({dict(self._rules)!r})"


class ConfigurationLoader:
    """
    Immutable tool configuration.

    Created by Infrastructure from the ``[tool.css-style-linter]`` table;
    ConfigFileLoader does the file I/O and the composition root constructs
    ConfigurationLoader(config_dict).
    """

    def __init__(self, config_dict: Mapping[str, object]) -> None:
        self._config = dict(config_dict)
        raw_rules = self._config.get("rules", {})
        if not isinstance(raw_rules, Mapping):
            raise InvalidRuleConfigError("rules", "the 'rules' entry must be a table")
        self._lint_config = LintConfiguration.from_mapping(raw_rules)

    @property
    def config(self) -> dict[str, object]:
        """Return the loaded configuration."""
        return self._config

    @property
    def lint_config(self) -> LintConfiguration:
        return self._lint_config

    @property
    def exclude_paths(self) -> list[str]:
        """Path fragments to skip during file discovery."""
        raw = self._config.get("exclude", [])
        if isinstance(raw, list):
            return [str(x) for x in raw if isinstance(x, str)]
        return []

    @property
    def extensions(self) -> list[str]:
        raw = self._config.get("extensions", DEFAULT_EXTENSIONS)
        if isinstance(raw, list) and raw:
            return [str(x) if str(x).startswith(".") else f".{x}" for x in raw]
        return list(DEFAULT_EXTENSIONS)

    @property
    def jobs(self) -> int:
        raw = self._config.get("jobs", DEFAULT_JOBS)
        if isinstance(raw, int) and not isinstance(raw, bool) and raw > 0:
            return raw
        return DEFAULT_JOBS
