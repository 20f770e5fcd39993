"""
Error taxonomy for the README writer

Every failure the Writer can report is a ReadmeError subclass carrying a
human-readable default message. The conversion pipeline itself never
raises; the Locator signals absence with an empty path instead.
"""


class ReadmeError(Exception):
    """Base class for terminal readme.txt generation failures"""

    message: str = "readme.txt could not be generated."

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.message)


class ReadmeNotFoundError(ReadmeError):
    """Source README does not exist"""

    message = "File not found."


class TargetNotWritableError(ReadmeError):
    """Directory holding the source README cannot receive output"""

    message = "Target directory is not writable."


class OutputExistsNotWritableError(ReadmeError):
    """readme.txt already exists and rejected the write probe"""

    message = "readme.txt already exists and is not writable."


class WriteFailedError(ReadmeError):
    """Final write of the converted document failed"""

    message = "Failed to save readme.txt"
