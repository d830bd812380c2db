"""Builds the argument vectors for the ClamAV executables."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Union

from clamby.config import Config, OutputLevel
from clamby.exceptions import UnpermittedExecutable
from clamby.models import Invocation, RunMode

EXECUTABLES = ("clamscan", "clamdscan", "freshclam")


def resolve_executable(name: str, config: Config) -> str:
    """Map a ClamAV executable name to its configured path.

    Raises:
        UnpermittedExecutable: If *name* is not one of :data:`EXECUTABLES`.
    """
    if name not in EXECUTABLES:
        raise UnpermittedExecutable(f"`{name}` is not permitted")
    return getattr(config, f"executable_path_{name}")


def scan_executable(config: Config) -> str:
    """Name of the scanner to use: ``clamdscan`` when daemonized."""
    return "clamdscan" if config.daemonize else "clamscan"


def default_args(config: Config) -> list[str]:
    """Flags shared by every command."""
    args = []
    if config.daemonize and config.config_file:
        args.append(f"--config-file={config.config_file}")
    if config.output_level is OutputLevel.LOW:
        args.append("--quiet")
    if config.output_level is OutputLevel.HIGH:
        args.append("--verbose")
    return args


def build_scan(path: Union[str, Path], config: Config) -> Invocation:
    """Build the command that scans a single file.

    The path is made absolute; once sorted among the flags a relative name
    starting with ``-`` would otherwise be read as an option.
    """
    args = [os.path.abspath(os.fspath(path)), "--no-summary"]

    if config.daemonize:
        if config.fdpass:
            args.append("--fdpass")
        if config.stream:
            args.append("--stream")

    if config.datadir:
        args.append(f"--database={config.datadir}")

    return _build(scan_executable(config), args, config)


def build_update(config: Config) -> Invocation:
    """Build the ``freshclam`` command."""
    args = []
    if config.datadir:
        args.append(f"--datadir={config.datadir}")
    return _build("freshclam", args, config)


def build_version(config: Config) -> Invocation:
    """Build the ``--version`` probe used to check the scanner is installed."""
    return _build(scan_executable(config), ["--version"], config, mode=RunMode.PROBE)


def _build(
    executable: str,
    args: Iterable[str],
    config: Config,
    mode: RunMode = RunMode.STANDARD,
) -> Invocation:
    path = resolve_executable(executable, config)
    combined = set(args) | set(default_args(config))
    return Invocation(executable=path, args=tuple(sorted(combined)), mode=mode)
