from pathlib import Path
from typing import List, Union

from .errors import InvalidInputError


class PathResolver:
    """Turns the command's target argument into the list of files to process"""

    def __init__(self, cwd: Union[str, Path, None] = None):
        self.cwd = Path(cwd) if cwd is not None else Path.cwd()

    def resolve(self, raw_arg: str) -> List[Path]:
        """A file resolves to itself, a directory to its immediate children
        sorted by name. Subdirectories are listed but never descended into.

        A path that is neither raises InvalidInputError instead of resolving to
        an empty list; the caller reports it as invalid input.
        """
        target = self.cwd / raw_arg
        if target.is_dir():
            return sorted(target.iterdir(), key=lambda p: p.name)
        if target.is_file():
            return [target]
        raise InvalidInputError(f"{raw_arg} is not a file or directory")
