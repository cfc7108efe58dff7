from abc import ABC, abstractmethod
from bisect import bisect_right
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple

if TYPE_CHECKING:
    from ..languages import LanguageProfile

LINE_COMMENT = "line_comment"
BLOCK_COMMENT = "block_comment"
STRING = "string"

# Stand-in for characters inside comments and literals. Neither a word
# character nor whitespace, so rule regexes never match across it.
MASK = "\0"


@dataclass(frozen=True)
class LiteralSpan:
    """A comment or string literal occupying source[start:end]."""
    start: int
    end: int
    kind: str

    def contains(self, offset: int) -> bool:
        return self.start < offset < self.end


@dataclass(frozen=True)
class SourceLine:
    text: str
    masked: str
    offset: int

    @property
    def code(self) -> str:
        """The line with comments and literal contents removed."""
        return self.masked.replace(MASK, "").strip()


def _string_end(source: str, start: int, quote: str) -> int:
    i = start
    while i < len(source):
        ch = source[i]
        if ch == "\\":
            i += 2
            continue
        if ch == quote:
            return i + 1
        if ch == "\n":
            # Unterminated literal, stop at the line break
            return i
        i += 1
    return len(source)


def _triple_end(source: str, start: int, delimiter: str) -> int:
    i = start
    while i < len(source):
        if source[i] == "\\":
            i += 2
            continue
        if source.startswith(delimiter, i):
            return i + len(delimiter)
        i += 1
    return len(source)


def scan_literals(source: str, triple_quotes: Sequence[str] = ()) -> List[LiteralSpan]:
    """Locate comments and string/char literals in C-family source."""
    spans: List[LiteralSpan] = []
    i = 0
    n = len(source)
    while i < n:
        ch = source[i]
        if source.startswith("//", i):
            end = source.find("\n", i)
            end = n if end == -1 else end
            spans.append(LiteralSpan(i, end, LINE_COMMENT))
            i = end
        elif source.startswith("/*", i):
            end = source.find("*/", i + 2)
            end = n if end == -1 else end + 2
            spans.append(LiteralSpan(i, end, BLOCK_COMMENT))
            i = end
        elif ch in "\"'":
            triple = next((q for q in triple_quotes if source.startswith(q, i)), None)
            if triple:
                end = _triple_end(source, i + len(triple), triple)
            else:
                end = _string_end(source, i + 1, ch)
            spans.append(LiteralSpan(i, end, STRING))
            i = end
        else:
            i += 1
    return spans


class ScannedSource:
    """Source text paired with its literal spans and a same-length masked copy."""

    def __init__(self, source: str, spans: List[LiteralSpan]):
        self.source = source
        self.spans = spans
        self._starts = [span.start for span in spans]
        chars = list(source)
        for span in spans:
            for k in range(span.start, span.end):
                if chars[k] != "\n":
                    chars[k] = MASK
        self.masked = "".join(chars)

    def span_at(self, offset: int) -> Optional[LiteralSpan]:
        """Return the span strictly enclosing offset, if any."""
        idx = bisect_right(self._starts, offset) - 1
        if idx < 0:
            return None
        span = self.spans[idx]
        return span if span.contains(offset) else None

    def in_kind(self, offset: int, *kinds: str) -> bool:
        span = self.span_at(offset)
        return span is not None and span.kind in kinds

    def lines(self) -> List[SourceLine]:
        result = []
        offset = 0
        for text, masked in zip(self.source.split("\n"), self.masked.split("\n")):
            result.append(SourceLine(text, masked, offset))
            offset += len(text) + 1
        return result


@dataclass
class FormattingContext:
    source: str
    file_path: str = ""
    profile: Optional["LanguageProfile"] = None

    @property
    def triple_quotes(self) -> Tuple[str, ...]:
        return self.profile.triple_quotes if self.profile else ()

    def scan(self) -> ScannedSource:
        """Scan the current source. Call again after changing context.source."""
        return ScannedSource(self.source, scan_literals(self.source, self.triple_quotes))


class BaseFormattingRule(ABC):
    @abstractmethod
    def apply(self, context: FormattingContext) -> None:
        """Apply the formatting rule to the context."""
        pass


def insert_at(source: str, offsets: Sequence[int], text: str = " ") -> str:
    """Insert text at each offset of the original source."""
    parts = []
    last = 0
    for offset in sorted(set(offsets)):
        parts.append(source[last:offset])
        parts.append(text)
        last = offset
    parts.append(source[last:])
    return "".join(parts)
