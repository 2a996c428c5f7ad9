"""
Error taxonomy for query dispatch and row actions.
"""

from enum import Enum


class SearchDeskError(Exception):
    """Base class for client-side errors."""


class ValidationError(SearchDeskError):
    """Query input is empty or insufficient; no engine call is made."""

    def __init__(self, message, notice=""):
        super().__init__(message)
        # text shown to the user when the dispatcher rejects the query
        self.notice = notice or message


class TransportError(SearchDeskError):
    """The engine call was rejected or the process boundary failed."""

    def __init__(self, message, method=None):
        super().__init__(message)
        self.method = method


class ClipboardErrorKind(Enum):
    UNSUPPORTED = "unsupported"


class ClipboardError(SearchDeskError):
    def __init__(self, kind=ClipboardErrorKind.UNSUPPORTED, message="no clipboard strategy succeeded"):
        super().__init__(message)
        self.kind = kind


class OpenLocationError(SearchDeskError):
    """The OS file browser could not be asked to open a directory."""

    def __init__(self, path, message):
        super().__init__(message)
        self.path = path


__all__ = [
    "SearchDeskError",
    "ValidationError",
    "TransportError",
    "ClipboardErrorKind",
    "ClipboardError",
    "OpenLocationError",
]
