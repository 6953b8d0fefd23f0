"""Built-in rules in registration (and therefore resolution) order."""

from css_style_linter.domain.rules import StyleRule
from css_style_linter.domain.rules.braces import (
    BraceStyleRule,
    DeclarationColonSpacingRule,
    TrailingSemicolonRule,
)
from css_style_linter.domain.rules.comments import CommentBlockDelimiterRule
from css_style_linter.domain.rules.layout import (
    BlankLineBetweenRulesetsRule,
    NestingDepthRule,
    OneDeclarationPerLineRule,
    OneSelectorPerLineRule,
)
from css_style_linter.domain.rules.naming import SelectorNamingRule
from css_style_linter.domain.rules.ordering import DeclarationAlphabeticalOrderRule
from css_style_linter.domain.rules.values import (
    CommaSpaceRule,
    HexCaseRule,
    HexShorthandRule,
    QuoteStyleRule,
    ZeroUnitRule,
)
from css_style_linter.domain.rules.whitespace import (
    IndentWidthRule,
    MaxLineLengthRule,
    NoTabsRule,
)

BUILTIN_RULES: tuple[type[StyleRule], ...] = (
    IndentWidthRule,
    NoTabsRule,
    BraceStyleRule,
    DeclarationColonSpacingRule,
    OneSelectorPerLineRule,
    OneDeclarationPerLineRule,
    HexCaseRule,
    HexShorthandRule,
    QuoteStyleRule,
    ZeroUnitRule,
    CommaSpaceRule,
    TrailingSemicolonRule,
    BlankLineBetweenRulesetsRule,
    DeclarationAlphabeticalOrderRule,
    NestingDepthRule,
    CommentBlockDelimiterRule,
    SelectorNamingRule,
    MaxLineLengthRule,
)
