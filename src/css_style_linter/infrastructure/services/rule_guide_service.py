"""RuleGuideService: human guidance per rule, read from the packaged rule_registry.yaml."""

import logging
from pathlib import Path
from typing import cast

import yaml

from css_style_linter.domain.protocols import RuleGuideProtocol
from css_style_linter.domain.registry_types import RuleGuideEntry

logger = logging.getLogger(__name__)

DEFAULT_GUIDE_PATH = Path(__file__).resolve().parents[2] / "resources" / "rule_registry.yaml"

EXAMPLE_KEYS: tuple[tuple[str, str], ...] = (("Good", "good_example"), ("Bad", "bad_example"))


class RuleGuideService(RuleGuideProtocol):
    """
    Serves display names, summaries, instructions and examples for ``explain``.

    Detection and severity stay on the rule classes; a rule with no guide entry
    falls back to its id and description.
    """

    def __init__(self, guide_path: str | None = None) -> None:
        self._path = Path(guide_path) if guide_path is not None else DEFAULT_GUIDE_PATH
        self._entries = self._read_entries(self._path)

    @staticmethod
    def _read_entries(path: Path) -> dict[str, RuleGuideEntry]:
        if not path.exists():
            logger.warning("Rule guide not found at %s", path)
            return {}
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            logger.warning("Rule guide %s is not a mapping of rule ids", path)
            return {}
        entries: dict[str, RuleGuideEntry] = {}
        for rule_id, entry in data.items():
            if isinstance(entry, dict):
                entries[str(rule_id)] = cast(RuleGuideEntry, entry)
            else:
                logger.warning("Skipping guide entry %r: expected a mapping", rule_id)
        return entries

    def get_display_name(self, rule_id: str) -> str:
        return self._entries.get(rule_id, {}).get("display_name") or rule_id

    def get_summary(self, rule_id: str, fallback: str) -> str:
        return self._entries.get(rule_id, {}).get("short_description") or fallback

    def get_manual_instructions(self, rule_id: str) -> str:
        return self._entries.get(rule_id, {}).get("manual_instructions", "").strip()

    def get_examples(self, rule_id: str) -> list[tuple[str, str]]:
        """(label, snippet) pairs for the good and bad examples the guide carries."""
        entry = self._entries.get(rule_id, {})
        examples: list[tuple[str, str]] = []
        for label, key in EXAMPLE_KEYS:
            snippet = cast(str, entry.get(key, ""))
            if snippet:
                examples.append((label, snippet.rstrip()))
        return examples

    def get_references(self, rule_id: str) -> list[str]:
        return list(self._entries.get(rule_id, {}).get("references", []))
