"""
Error taxonomy shared by the record store and the triage tools.

A record that cannot be found is not an error: lookups return ``None``
(or an empty mapping) instead.
"""

from pathlib import Path
from typing import Optional, Union


class CrawlerError(Exception):
    """Base class for all crawler errors"""


class StorageIOError(CrawlerError):
    """Filesystem failure while writing a record (permission, disk full, mkdir)"""

    def __init__(self, path: Union[str, Path], cause: Optional[BaseException] = None):
        self.path = Path(path)
        self.cause = cause
        message = f"Failed to write record file: {self.path}"
        if cause is not None:
            message = f"{message} ({cause})"
        super().__init__(message)


class UnsupportedFormatError(CrawlerError):
    """No codec is registered for the extension of a record file"""

    def __init__(self, filename: Union[str, Path]):
        self.filename = str(filename)
        super().__init__(f"Unsupported record format: {self.filename}")


class PathTraversalError(CrawlerError, ValueError):
    """Logical name tries to address a location outside the storage root"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Record name escapes the storage root: {name!r}")


class InvalidRecordNameError(CrawlerError, ValueError):
    """Logical name does not name a record (e.g. ends with a separator)"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Not a record name: {name!r}")
