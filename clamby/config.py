"""Configuration for clamby."""

from __future__ import annotations

import warnings
from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Any, Mapping, Optional


class OutputLevel(str, Enum):
    """How much the ClamAV executables print.

    ``off`` discards stdout, ``low`` adds ``--quiet``, ``high`` adds ``--verbose``.
    """

    OFF = "off"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True, slots=True)
class Config:
    """Options controlling how ClamAV is invoked and how results are reported.

    Attributes:
        check: Verify the scanner responds to ``--version`` before scanning.
        daemonize: Use ``clamdscan`` (talks to a running clamd) instead of ``clamscan``.
        config_file: clamd configuration file, passed to ``clamdscan`` only.
        error_clamscan_client_error: Raise :class:`ClamscanClientError` when
            ``clamdscan`` exits with status 2.
        error_file_missing: Raise :class:`FileNotFound` for a missing scan target.
        error_file_virus: Raise :class:`VirusDetected` instead of returning ``True``.
        fdpass: Pass the file descriptor to clamd (daemon mode only).
        stream: Stream the file to clamd (daemon mode only).
        output_level: See :class:`OutputLevel`.
        datadir: Signature database directory override.
        executable_path_clamscan: Path of the ``clamscan`` executable.
        executable_path_clamdscan: Path of the ``clamdscan`` executable.
        executable_path_freshclam: Path of the ``freshclam`` executable.
    """

    check: bool = True
    daemonize: bool = False
    config_file: Optional[str] = None
    error_clamscan_client_error: bool = False
    error_file_missing: bool = True
    error_file_virus: bool = False
    fdpass: bool = False
    stream: bool = False
    output_level: OutputLevel = OutputLevel.MEDIUM
    datadir: Optional[str] = None
    executable_path_clamscan: str = "clamscan"
    executable_path_clamdscan: str = "clamdscan"
    executable_path_freshclam: str = "freshclam"

    def __post_init__(self) -> None:
        if not isinstance(self.output_level, OutputLevel):
            object.__setattr__(self, "output_level", OutputLevel(self.output_level))

    def merge(self, options: Mapping[str, Any], *, stacklevel: int = 2) -> Config:
        """Return a copy with the recognized keys of *options* applied.

        Unknown keys are ignored. ``silence_output=True`` is accepted as a
        deprecated alias for ``output_level="off"``.

        Args:
            options: Option names mapped to their new values.
            stacklevel: Passed to :func:`warnings.warn` so the deprecation
                points at the caller's ``configure`` line.
        """
        opts = dict(options)
        if opts.pop("silence_output", False):
            warnings.warn(
                "silence_output is deprecated. Use output_level='off' instead.",
                FutureWarning,
                stacklevel=stacklevel,
            )
            opts["output_level"] = OutputLevel.OFF

        return replace(self, **{k: v for k, v in opts.items() if k in VALID_KEYS})


VALID_KEYS = frozenset(f.name for f in fields(Config))

DEFAULT_CONFIG = Config()
