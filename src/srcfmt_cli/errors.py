class SrcfmtError(Exception):
    """Base class for driver errors."""


class InvalidInputError(SrcfmtError):
    """No target given, or the target is neither a file nor a directory."""


class FileReadError(SrcfmtError):
    """A candidate file could not be read or decoded."""


class BackupWriteError(SrcfmtError):
    """The backup copy of a file could not be written."""


class FormatError(SrcfmtError):
    """An engine failed to format a file."""
