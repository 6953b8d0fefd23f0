"""Ordered, named collection of rules, resolved against a configuration."""

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Any

from css_style_linter.domain.config import LintConfiguration
from css_style_linter.domain.errors import (
    DuplicateRuleError,
    InvalidRuleOptionError,
    UnknownRuleError,
)
from css_style_linter.domain.rules import ActiveRule, Checkable


class RuleRegistry:
    """
    Registered rules in registration order.

    Populated once at start-up, then only read; ``resolve`` never mutates the
    registry, so one instance is safely shared by concurrent lint passes.
    """

    def __init__(self, rules: Iterable[Checkable] = ()) -> None:
        self._rules: dict[str, Checkable] = {}
        for rule in rules:
            self.register(rule)

    @classmethod
    def default(cls) -> "RuleRegistry":
        """Registry holding every built-in rule."""
        from css_style_linter.domain.rules.catalog import BUILTIN_RULES

        return cls(rule_class() for rule_class in BUILTIN_RULES)

    def register(self, rule: Checkable) -> None:
        if rule.rule_id in self._rules:
            raise DuplicateRuleError(rule.rule_id)
        self._rules[rule.rule_id] = rule

    def get(self, rule_id: str) -> Checkable | None:
        return self._rules.get(rule_id)

    @property
    def rule_ids(self) -> list[str]:
        return list(self._rules)

    def __iter__(self) -> Iterator[Checkable]:
        return iter(self._rules.values())

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, rule_id: object) -> bool:
        return rule_id in self._rules

    def resolve(self, config: LintConfiguration) -> list[ActiveRule]:
        """
        Enabled rules with their merged options, in registration order.

        Raises UnknownRuleError for ids the registry does not know and
        InvalidRuleOptionError for undeclared or mistyped options. Everything is
        validated before anything is returned.
        """
        for rule_id in config.rules:
            if rule_id not in self._rules:
                raise UnknownRuleError(rule_id)

        active: list[ActiveRule] = []
        for rule_id, rule in self._rules.items():
            settings = config.settings_for(rule_id)
            options = self._merge_options(rule, settings.options)
            if settings.enabled:
                active.append(ActiveRule(rule=rule, options=options))
        return active

    @staticmethod
    def _merge_options(
        rule: Checkable, overrides: Mapping[str, Any]
    ) -> Mapping[str, Any]:
        defaults = dict(rule.defaults)
        choices: Mapping[str, tuple[object, ...]] = getattr(rule, "choices", {})
        for option, value in overrides.items():
            if option not in defaults:
                raise InvalidRuleOptionError(rule.rule_id, option, "not a known option")
            expected = type(defaults[option])
            if isinstance(value, bool) != (expected is bool) or not isinstance(
                value, expected
            ):
                raise InvalidRuleOptionError(
                    rule.rule_id,
                    option,
                    f"expected {expected.__name__}, got {type(value).__name__}",
                )
            if option in choices and value not in choices[option]:
                allowed = ", ".join(repr(c) for c in choices[option])
                raise InvalidRuleOptionError(
                    rule.rule_id, option, f"must be one of {allowed}"
                )
            defaults[option] = value
        return MappingProxyType(defaults)
