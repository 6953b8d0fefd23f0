"""Configuration and parse errors. Violations are data, not errors."""


class ConfigError(Exception):
    """Malformed or contradictory rule configuration. Aborts the lint pass."""

    def __init__(self, rule_id: str, message: str) -> None:
        super().__init__(message)
        self.rule_id = rule_id


class UnknownRuleError(ConfigError):
    """Configuration references a rule id that is not registered."""

    def __init__(self, rule_id: str) -> None:
        super().__init__(rule_id, f"Unknown rule '{rule_id}' in configuration.")


class DuplicateRuleError(ConfigError):
    """A rule id was registered twice."""

    def __init__(self, rule_id: str) -> None:
        super().__init__(rule_id, f"Rule '{rule_id}' is already registered.")


class InvalidRuleConfigError(ConfigError):
    """A rule entry is neither a bool nor a table."""

    def __init__(self, rule_id: str, detail: str) -> None:
        super().__init__(rule_id, f"Invalid configuration for rule '{rule_id}': {detail}")


class InvalidRuleOptionError(ConfigError):
    """A rule option is not declared by the rule or has the wrong type."""

    def __init__(self, rule_id: str, option: str, detail: str) -> None:
        super().__init__(
            rule_id, f"Invalid option '{option}' for rule '{rule_id}': {detail}"
        )
        self.option = option


class StyleSyntaxError(Exception):
    """Raised by the parser gateway when source text cannot be turned into a tree."""

    def __init__(self, message: str, line: int, column: int, path: str = "") -> None:
        location = f"{path}:{line}:{column}" if path else f"{line}:{column}"
        super().__init__(f"{location}: {message}")
        self.line = line
        self.column = column
        self.path = path
