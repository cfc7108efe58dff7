from pathlib import Path
from typing import Dict, NamedTuple, Optional, Protocol, Union

from source_formatter import GROOVY, JAVA, groovy_engine, java_engine
from source_formatter.models import FormatResult, FormatterConfig

from .models import RunConfiguration


class FormatEngine(Protocol):
    """Protocol for a language formatter"""

    def format(self, path: Union[str, Path], content: str) -> FormatResult: ...


class _Entry(NamedTuple):
    language: str
    engine: FormatEngine


def extension_of(path: Union[str, Path]) -> str:
    """Text after the last '.' of the file name, or '' when there is none."""
    name = Path(path).name
    return name.rpartition(".")[2] if "." in name else ""


class FormatEngineRegistry:
    """Maps file extensions to formatting engines"""

    def __init__(self):
        self._engines: Dict[str, _Entry] = {}

    def register(self, extension: str, language: str, engine: FormatEngine):
        self._engines[extension] = _Entry(language, engine)

    def engine_for(self, extension: str, config: RunConfiguration) -> Optional[FormatEngine]:
        """Engine for the extension, or None when unknown or its language is disabled."""
        entry = self._engines.get(extension)
        if entry is None or not config.language_enabled(entry.language):
            return None
        return entry.engine


def build_default_registry(formatter_config: Optional[FormatterConfig] = None) -> FormatEngineRegistry:
    registry = FormatEngineRegistry()
    registry.register(JAVA.extension, JAVA.name, java_engine(formatter_config))
    registry.register(GROOVY.extension, GROOVY.name, groovy_engine(formatter_config))
    return registry
