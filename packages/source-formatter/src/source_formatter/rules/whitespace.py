from .base import STRING, BaseFormattingRule, FormattingContext
from ..models import FormatterConfig


class WhitespaceCleanupRule(BaseFormattingRule):
    """Strips trailing whitespace and ends the file with exactly one newline."""

    def __init__(self, config: FormatterConfig):
        self.config = config

    def apply(self, context: FormattingContext) -> None:
        scanned = context.scan()
        result = []
        for line in scanned.lines():
            trimmed = line.text.rstrip(" \t")
            # Trailing blanks inside a multi-line string are content
            if len(trimmed) != len(line.text) and scanned.in_kind(line.offset + len(trimmed), STRING):
                trimmed = line.text
            result.append(trimmed)

        text = "\n".join(result).rstrip("\n")
        context.source = text + "\n" if text else ""
