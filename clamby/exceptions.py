"""Exception hierarchy for clamby."""

from __future__ import annotations


class ClambyError(Exception):
    """Base exception for all clamby errors."""


class UnpermittedExecutable(ClambyError):
    """Raised when something other than a ClamAV executable is requested.

    Never configurable: the allow-list is checked on every invocation.
    """


class FileNotFound(ClambyError, FileNotFoundError):
    """Raised when the scan target is not an existing regular file.

    Suppressed when ``error_file_missing`` is off; the scan then returns ``None``.
    """


class VirusDetected(ClambyError):
    """Raised when the scanner reports an infection and ``error_file_virus`` is on.

    Attributes:
        path: The scanned path.
    """

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(message)
        self.path = path


class ClamscanClientError(ClambyError):
    """Raised when ``clamdscan`` fails for a reason other than a detection.

    Only raised in daemon mode with ``error_clamscan_client_error`` on.
    """
