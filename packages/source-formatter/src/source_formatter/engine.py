import traceback
from pathlib import Path
from typing import TYPE_CHECKING, List, Optional, Union

from .models import FormatterConfig, FormatResult
from .rules.base import BaseFormattingRule, FormattingContext

if TYPE_CHECKING:
    from .languages import LanguageProfile


class FormatterEngine:
    """Formats source text for one language by running text rules in order."""

    def __init__(self, config: FormatterConfig, profile: Optional["LanguageProfile"] = None):
        self.config = config
        self.profile = profile
        self.rules: List[BaseFormattingRule] = []

    def add_rule(self, rule: BaseFormattingRule) -> None:
        """Register a new formatting rule."""
        self.rules.append(rule)

    def format_string(self, source: str, file_path: str = "") -> FormatResult:
        """Formats a string. ``modified`` compares against the text as given,
        so line-ending normalization alone counts as a change."""
        normalized = source.replace("\r\n", "\n").replace("\r", "\n")
        context = FormattingContext(source=normalized, file_path=file_path, profile=self.profile)

        try:
            for rule in self.rules:
                rule.apply(context)
        except Exception as e:
            return FormatResult(
                source=source, modified=False, errors=[f"{e}\n{traceback.format_exc()}"]
            )

        return FormatResult(source=context.source, modified=context.source != source)

    def format(self, path: Union[str, Path], content: str) -> FormatResult:
        """Engine entry point used by the driver. Never touches the file."""
        return self.format_string(content, str(path))
