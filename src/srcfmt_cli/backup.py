import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from .errors import BackupWriteError

logger = logging.getLogger(__name__)

BACKUP_MARKER = "_BACKUP_"


def backup_timestamp(moment: datetime) -> str:
    """MM_dd_yyyy_h_mm_ss, with a 12-hour, unpadded hour."""
    hour = moment.hour % 12 or 12
    return f"{moment:%m_%d_%Y}_{hour}_{moment:%M_%S}"


class BackupWriter:
    """Writes a sibling copy of a file's content before it is overwritten.

    Backups taken of the same file within one second share a name; the later
    one replaces the earlier.
    """

    def __init__(self, clock: Callable[[], datetime] = datetime.now):
        self.clock = clock

    def backup_path_for(self, path: Path) -> Path:
        return Path(f"{path}{BACKUP_MARKER}{backup_timestamp(self.clock())}")

    def create(self, path: Path, original_content: str) -> Path:
        """Write original_content verbatim next to path, raising on failure."""
        backup_path = self.backup_path_for(path)
        try:
            with open(backup_path, "w", encoding="utf-8", newline="") as f:
                f.write(original_content)
        except OSError as e:
            raise BackupWriteError(f"Could not write backup file {backup_path}") from e
        return backup_path

    def write(self, path: Path, original_content: str) -> Optional[Path]:
        """Like create(), but logs a failure and returns None."""
        try:
            return self.create(path, original_content)
        except BackupWriteError as e:
            logger.exception("%s", e)
            return None
