from .base import BLOCK_COMMENT, STRING, BaseFormattingRule, FormattingContext
from ..models import FormatterConfig


class BlankLineRule(BaseFormattingRule):
    """Collapses vertical whitespace.

    Leading blank lines and blank lines at block boundaries are removed, other
    runs are capped at ``max_blank_lines``. Lines inside block comments and
    multi-line strings are left alone.
    """

    def __init__(self, config: FormatterConfig):
        self.config = config

    def apply(self, context: FormattingContext) -> None:
        scanned = context.scan()
        result = []
        pending = 0
        last_code = ""

        for line in scanned.lines():
            if scanned.in_kind(line.offset, STRING, BLOCK_COMMENT):
                result.extend([""] * pending)
                pending = 0
                result.append(line.text)
                continue

            if not line.text.strip():
                pending += 1
                continue

            keep = min(pending, self.config.max_blank_lines)
            if not result or last_code.endswith("{") or line.code.startswith("}"):
                keep = 0
            result.extend([""] * keep)
            pending = 0
            result.append(line.text)
            last_code = line.code

        # Blank lines at EOF are dropped, the terminating newline is kept
        if context.source.endswith("\n") and result:
            result.append("")
        context.source = "\n".join(result)
