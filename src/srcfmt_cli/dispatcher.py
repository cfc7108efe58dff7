import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Optional

from .backup import BackupWriter
from .errors import FileReadError, FormatError
from .models import FileTask, FormatOutcome, RunConfiguration
from .registry import FormatEngine, FormatEngineRegistry, extension_of

logger = logging.getLogger(__name__)


class FileDispatcher:
    """Runs one file through read, format, backup and write.

    Every expected failure is logged and turned into a FormatOutcome so that a
    bad file never stops the files after it.
    """

    def __init__(self, registry: FormatEngineRegistry, backup_writer: Optional[BackupWriter] = None):
        self.registry = registry
        self.backup_writer = backup_writer or BackupWriter()

    def process(self, path: Path, config: RunConfiguration) -> FormatOutcome:
        outcome = FormatOutcome(path=path)
        if path.is_dir():
            # Subdirectories of a scanned directory are not descended into
            return outcome

        try:
            task = self._read(path)
        except FileReadError as e:
            logger.error("%s", e)
            outcome.error = str(e)
            return outcome

        engine = self.registry.engine_for(extension_of(path), config)
        if engine is None:
            # Unknown extensions and disabled languages are skipped alike, silently
            return outcome
        outcome.extension_matched = True

        try:
            return self._format(task, engine, config, outcome)
        except FormatError as e:
            logger.error("%s", e)
            outcome.error = str(e)
            return outcome

    def _read(self, path: Path) -> FileTask:
        try:
            with open(path, encoding="utf-8", newline="") as f:
                return FileTask(path=path, content=f.read())
        except (OSError, UnicodeDecodeError) as e:
            raise FileReadError(f"Error occurred when opening {path}: {e}") from e

    def _format(
        self, task: FileTask, engine: FormatEngine, config: RunConfiguration, outcome: FormatOutcome
    ) -> FormatOutcome:
        # task.content is the only copy of the original text; the backup is
        # taken from it before the file is overwritten.
        outcome.engine_ran = True
        try:
            result = engine.format(task.path, task.content)
        except Exception as e:
            raise FormatError(f"Could not format {task.path}: {e}") from e
        if result.errors:
            raise FormatError(f"Could not format {task.path}: {result.errors[0]}")
        if not result.modified:
            return outcome

        if config.backup_enabled:
            outcome.backup_path = self.backup_writer.write(task.path, task.content)

        self._replace(task.path, result.source)
        outcome.content_changed = True
        return outcome

    def _replace(self, path: Path, content: str):
        """Swap content in atomically; the original stays intact if the write fails."""
        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
            with open(fd, "w", encoding="utf-8", newline="") as f:
                f.write(content)
            shutil.copymode(path, tmp_name)
            os.replace(tmp_name, path)
        except OSError as e:
            if tmp_name:
                Path(tmp_name).unlink(missing_ok=True)
            raise FormatError(f"Could not write formatted {path}: {e}") from e
