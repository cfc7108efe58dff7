from .base import BLOCK_COMMENT, STRING, BaseFormattingRule, FormattingContext
from ..models import FormatterConfig


class IndentationRule(BaseFormattingRule):
    """Re-indents every line from its brace depth.

    Lines that start inside an unclosed parenthesis get the continuation
    indent on top of the block level. Block comment bodies are aligned under
    the opening ``/*``; multi-line string contents are never re-indented.
    """

    def __init__(self, config: FormatterConfig):
        self.config = config

    def apply(self, context: FormattingContext) -> None:
        scanned = context.scan()
        unit = self.config.indent_unit
        depth = 0
        parens = 0
        comment_indent = ""
        result = []

        for line in scanned.lines():
            span = scanned.span_at(line.offset)
            stripped = line.text.strip()
            code = line.code

            if span is not None and span.kind == STRING:
                result.append(line.text)
            elif span is not None and span.kind == BLOCK_COMMENT:
                if stripped.startswith("*"):
                    result.append(f"{comment_indent} {stripped}")
                else:
                    result.append(line.text if stripped else "")
            elif not stripped:
                result.append("")
            else:
                level = depth - 1 if code.startswith("}") else depth
                if parens > 0 and not code.startswith(")"):
                    level += self.config.continuation_indent
                comment_indent = unit * max(level, 0)
                result.append(comment_indent + stripped)

            depth = max(depth + code.count("{") - code.count("}"), 0)
            parens = max(parens + code.count("(") - code.count(")"), 0)

        context.source = "\n".join(result)
