import logging
import tomllib
from pathlib import Path

from source_formatter.models import FormatterConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = ".srcfmt.toml"


class FormatConfig:
    """Handles loading of the optional .srcfmt.toml settings file"""

    def __init__(self, config_path: Path | None = None):
        self.indent_size: int = 4
        self.use_tabs: bool = True
        self.continuation_indent: int = 2
        self.max_blank_lines: int = 1
        self.backup: bool = False

        if config_path and config_path.is_file():
            self._load_from_file(config_path)

    def _load_from_file(self, path: Path):
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.warning("Ignoring config file %s: %s", path, e)
            return

        fmt_data = data.get("tool", {}).get("srcfmt", {})
        try:
            indent_size = int(fmt_data.get("indent_size", self.indent_size))
            continuation_indent = int(fmt_data.get("continuation_indent", self.continuation_indent))
            max_blank_lines = int(fmt_data.get("max_blank_lines", self.max_blank_lines))
        except (TypeError, ValueError) as e:
            logger.warning("Ignoring config file %s: %s", path, e)
            return

        self.indent_size = indent_size
        self.continuation_indent = continuation_indent
        self.max_blank_lines = max_blank_lines
        self.use_tabs = bool(fmt_data.get("use_tabs", self.use_tabs))
        self.backup = bool(fmt_data.get("backup", self.backup))

    def formatter_config(self) -> FormatterConfig:
        """Engine settings derived from this config"""
        return FormatterConfig(
            indent_size=self.indent_size,
            use_tabs=self.use_tabs,
            continuation_indent=self.continuation_indent,
            max_blank_lines=self.max_blank_lines,
        )
