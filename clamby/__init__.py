"""clamby — run ClamAV's clamscan, clamdscan and freshclam from Python.

The module-level functions share one process-wide :class:`ClambyClient`;
create your own client to keep an independent configuration.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, Optional, Union

from clamby.client import ClambyClient, classify_exit_status
from clamby.command import EXECUTABLES
from clamby.config import DEFAULT_CONFIG, VALID_KEYS, Config, OutputLevel
from clamby.exceptions import (
    ClambyError,
    ClamscanClientError,
    FileNotFound,
    UnpermittedExecutable,
    VirusDetected,
)
from clamby.models import Invocation, Outcome, RunMode

__all__ = [
    "ClambyClient",
    "Config",
    "OutputLevel",
    "DEFAULT_CONFIG",
    "VALID_KEYS",
    "EXECUTABLES",
    "Invocation",
    "Outcome",
    "RunMode",
    "classify_exit_status",
    "ClambyError",
    "UnpermittedExecutable",
    "FileNotFound",
    "VirusDetected",
    "ClamscanClientError",
    "configure",
    "config",
    "reset",
    "safe",
    "virus",
    "scanner_exists",
    "update",
    "daemonize",
]

_default = ClambyClient()


def configure(options: Mapping[str, Any] | None = None, **kwargs: Any) -> Config:
    """Merge options into the process-wide configuration. See :meth:`ClambyClient.configure`."""
    return _default._apply({**(options or {}), **kwargs})


def config() -> Config:
    """The process-wide configuration."""
    return _default.config


def reset() -> Config:
    """Restore the default process-wide configuration."""
    return _default.reset()


def safe(path: Union[str, Path]) -> Optional[bool]:
    """Scan *path* with the default client; ``True`` if clean. See :meth:`ClambyClient.safe`."""
    return _default.safe(path)


def virus(path: Union[str, Path]) -> Optional[bool]:
    """Scan *path* with the default client; ``True`` if infected. See :meth:`ClambyClient.virus`."""
    return _default.virus(path)


def scanner_exists() -> bool:
    """Whether the configured scanner answers ``--version``."""
    return _default.scanner_exists()


def update() -> Optional[bool]:
    """Run ``freshclam`` to refresh the signature databases."""
    return _default.update()


def daemonize() -> bool:
    """Whether scans go through ``clamdscan``."""
    return _default.daemonize()
