"""Accumulates violations for one lint pass."""

from collections.abc import Iterable

from css_style_linter.domain.nodes import SourceSpan
from css_style_linter.domain.rules import Violation


class ViolationCollector:
    """
    Collects violations in emission order and hands them back totally ordered.

    An exact (rule id, span) repeat is dropped, so a rule reached twice for the
    same span reports once.
    """

    def __init__(self) -> None:
        self._violations: list[Violation] = []
        self._seen: set[tuple[str, SourceSpan]] = set()

    def add(self, violation: Violation) -> bool:
        """Record a violation; False when it repeats one already recorded."""
        key = (violation.rule_id, violation.span)
        if key in self._seen:
            return False
        self._seen.add(key)
        self._violations.append(violation)
        return True

    def extend(self, violations: Iterable[Violation]) -> None:
        for violation in violations:
            self.add(violation)

    def __len__(self) -> int:
        return len(self._violations)

    def finalize(self) -> list[Violation]:
        """Violations sorted by (line, column, rule id)."""
        return sorted(self._violations, key=lambda v: v.sort_key)
