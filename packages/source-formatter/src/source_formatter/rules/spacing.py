import re
from typing import List

from .base import BaseFormattingRule, FormattingContext, insert_at
from ..models import FormatterConfig

DEFAULT_KEYWORDS = ("if", "for", "while", "switch", "catch", "synchronized")

# Each pattern's match end is where a single space is inserted.
_BRACE_AFTER_CODE = re.compile(r"(?<=[\w)])(?=\{)")
_CLOSE_BEFORE_CONTINUATION = re.compile(r"\}(?=(?:else|catch|finally)\b)")


class SpacingRule(BaseFormattingRule):
    """Inserts the spaces Eclipse puts around control keywords and braces.

    Matching runs on the masked source so literals and comments are never
    touched; insertions are then applied to the real source at the same
    offsets.
    """

    def __init__(self, config: FormatterConfig):
        self.config = config

    def _keyword_pattern(self, context: FormattingContext) -> re.Pattern:
        keywords = context.profile.control_keywords if context.profile else DEFAULT_KEYWORDS
        return re.compile(rf"\b(?:{'|'.join(keywords)})(?=\()")

    def apply(self, context: FormattingContext) -> None:
        scanned = context.scan()
        offsets: List[int] = []
        for pattern in (self._keyword_pattern(context), _BRACE_AFTER_CODE, _CLOSE_BEFORE_CONTINUATION):
            offsets.extend(m.end() for m in pattern.finditer(scanned.masked))
        if offsets:
            context.source = insert_at(context.source, offsets)
