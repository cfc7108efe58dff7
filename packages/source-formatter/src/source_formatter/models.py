from dataclasses import dataclass, field
from typing import List

@dataclass
class FormatterConfig:
    indent_size: int = 4
    use_tabs: bool = True
    continuation_indent: int = 2
    max_blank_lines: int = 1

    @property
    def indent_unit(self) -> str:
        return "\t" if self.use_tabs else " " * self.indent_size

@dataclass
class FormatResult:
    source: str
    modified: bool
    errors: List[str] = field(default_factory=list)
