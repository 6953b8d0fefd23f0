from typing import TypedDict


class RuleGuideEntry(TypedDict, total=False):
    display_name: str
    short_description: str
    manual_instructions: str
    good_example: str
    bad_example: str
    references: list[str]
