"""High-level ClamAV client: scan files, update signatures, check the scanner."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from clamby import runner
from clamby.command import build_scan, build_update, build_version
from clamby.config import DEFAULT_CONFIG, Config
from clamby.exceptions import ClamscanClientError, FileNotFound, VirusDetected
from clamby.models import Invocation, Outcome

logger = logging.getLogger(__name__)

# clamdscan exits with 2 for any error other than a detection.
CLIENT_ERROR_STATUS = 2


def classify_exit_status(status: Optional[int]) -> Outcome:
    """Map a scanner exit status to an :class:`Outcome`.

    ``None`` means the process never produced an exit status.
    """
    if status is None:
        return Outcome.INDETERMINATE
    if status == 0:
        return Outcome.CLEAN
    if status == CLIENT_ERROR_STATUS:
        return Outcome.CLIENT_ERROR
    return Outcome.INFECTED


class ClambyClient:
    """Runs ``clamscan``/``clamdscan``/``freshclam`` according to a :class:`Config`.

    Args:
        config: Starting configuration. Defaults to :data:`DEFAULT_CONFIG`.
        **options: Applied on top of *config*, as with :meth:`configure`.

    Example::

        client = ClambyClient(daemonize=True, fdpass=True)
        if client.virus("/tmp/upload.bin"):
            print("infected")
    """

    def __init__(self, config: Config | None = None, **options: Any) -> None:
        self._config = (config or DEFAULT_CONFIG).merge(options, stacklevel=3)
        self.last_invocation: Optional[Invocation] = None

    @property
    def config(self) -> Config:
        return self._config

    def configure(self, options: Mapping[str, Any] | None = None, **kwargs: Any) -> Config:
        """Merge options into the current configuration.

        Unknown keys are ignored. Accepts a mapping, keyword arguments or both.

        Returns:
            The updated :class:`Config`.
        """
        return self._apply({**(options or {}), **kwargs})

    def reset(self) -> Config:
        """Restore the default configuration."""
        self._config = DEFAULT_CONFIG
        return self._config

    def daemonize(self) -> bool:
        """Whether scans go through ``clamdscan``."""
        return bool(self._config.daemonize)

    def scanner_exists(self) -> bool:
        """Check that the scanner answers ``--version``.

        Always ``True`` when ``check`` is off.
        """
        if not self._config.check:
            return True
        return self._run(build_version(self._config)) is True

    def virus(self, path: Union[str, Path]) -> Optional[bool]:
        """Scan *path*; ``True`` if infected, ``None`` if the scanner is unavailable.

        Raises:
            FileNotFound: If *path* is missing and ``error_file_missing`` is on.
            VirusDetected: If infected and ``error_file_virus`` is on.
            ClamscanClientError: If ``clamdscan`` fails and
                ``error_clamscan_client_error`` is on.
        """
        if not self.scanner_exists():
            return None
        return self.scan(path)

    def safe(self, path: Union[str, Path]) -> Optional[bool]:
        """Inverse of :meth:`virus`; ``None`` stays ``None``."""
        value = self.virus(path)
        if value is None:
            return None
        return not value

    def scan(self, path: Union[str, Path]) -> Optional[bool]:
        """Scan *path* without checking the scanner first.

        Returns:
            ``False`` when clean, ``True`` when infected (or, for backward
            compatibility, when the client failed), ``None`` when the file is
            missing and ``error_file_missing`` is off.
        """
        if not self._file_exists(path):
            return None

        outcome = classify_exit_status(self._run(build_scan(path, self._config)))

        if outcome is Outcome.CLEAN:
            return False

        if outcome in (Outcome.CLIENT_ERROR, Outcome.INDETERMINATE):
            if self._config.error_clamscan_client_error and self._config.daemonize:
                raise ClamscanClientError("Clamscan client error")
            return True

        if self._config.error_file_virus:
            raise VirusDetected(f"VIRUS DETECTED on {datetime.now()}: {path}", path=str(path))
        logger.info("Virus detected in %s", path)
        return True

    def update(self) -> Optional[bool]:
        """Run ``freshclam``.

        Returns:
            ``True`` on exit status 0, ``False`` on any other status, ``None``
            if ``freshclam`` could not be run.
        """
        status = self._run(build_update(self._config))
        if status is None:
            return None
        logger.info("freshclam exited with status %d", status)
        return status == 0

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _apply(self, options: Mapping[str, Any]) -> Config:
        # Deprecation warnings point two frames above this one.
        self._config = self._config.merge(options, stacklevel=4)
        return self._config

    def _run(self, invocation: Invocation) -> Union[int, bool, None]:
        self.last_invocation = invocation
        return runner.run(invocation, self._config.output_level)

    def _file_exists(self, path: Union[str, Path]) -> bool:
        if Path(path).is_file():
            return True

        if self._config.error_file_missing:
            raise FileNotFound(f"File not found: {path}")
        logger.warning("FILE NOT FOUND on %s: %s", datetime.now(), path)
        return False
