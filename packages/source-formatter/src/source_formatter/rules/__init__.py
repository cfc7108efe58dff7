from .base import BaseFormattingRule, FormattingContext, scan_literals
from .blank_lines import BlankLineRule
from .indentation import IndentationRule
from .spacing import SpacingRule
from .whitespace import WhitespaceCleanupRule

__all__ = [
    "BaseFormattingRule",
    "FormattingContext",
    "scan_literals",
    "SpacingRule",
    "BlankLineRule",
    "IndentationRule",
    "WhitespaceCleanupRule",
]
