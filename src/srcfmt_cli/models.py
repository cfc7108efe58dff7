from dataclasses import dataclass
from enum import Enum, IntEnum
from pathlib import Path
from typing import FrozenSet, Optional

from pydantic import BaseModel

LANGUAGES = ("java", "groovy")


class ExitCode(IntEnum):
    OK = 0
    INVALID_INPUT = 1
    # 2 is left to click for usage errors
    FILE_ERRORS = 3


@dataclass(frozen=True)
class RunConfiguration:
    """Flags resolved once per invocation and shared read-only by every component."""

    backup_enabled: bool = False
    enabled_languages: FrozenSet[str] = frozenset(LANGUAGES)
    # Informational: --help exits while the command line is parsed, so runs
    # built by the CLI always carry False here.
    help_requested: bool = False
    version_requested: bool = False
    target_path: Optional[str] = None

    @property
    def java_enabled(self) -> bool:
        return "java" in self.enabled_languages

    @property
    def groovy_enabled(self) -> bool:
        return "groovy" in self.enabled_languages

    def language_enabled(self, language: str) -> bool:
        return language in self.enabled_languages

    @classmethod
    def from_flags(
        cls,
        *,
        backup: bool = False,
        java: bool = False,
        groovy: bool = False,
        help_requested: bool = False,
        version_requested: bool = False,
        target_path: Optional[str] = None,
    ) -> "RunConfiguration":
        """Language flags restrict processing to the named languages; with
        none of them set every language is enabled."""
        selected = {name for name, flag in (("java", java), ("groovy", groovy)) if flag}
        return cls(
            backup_enabled=backup,
            enabled_languages=frozenset(selected or LANGUAGES),
            help_requested=help_requested,
            version_requested=version_requested,
            target_path=target_path,
        )


@dataclass(frozen=True)
class FileTask:
    path: Path
    content: Optional[str]


@dataclass
class FormatOutcome:
    path: Path
    extension_matched: bool = False
    engine_ran: bool = False
    content_changed: bool = False
    backup_path: Optional[Path] = None
    error: Optional[str] = None


class ReportStatus(str, Enum):
    FORMATTED = "FORMATTED"
    UNCHANGED = "UNCHANGED"
    SKIPPED = "SKIPPED"
    ERROR = "ERROR"


class FileReport(BaseModel):
    path: str
    status: ReportStatus
    backup_path: Optional[str] = None
    message: Optional[str] = None
