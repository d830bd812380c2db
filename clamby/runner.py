"""Runs ClamAV executables as child processes."""

from __future__ import annotations

import logging
import subprocess
from typing import Optional, Union

from clamby.config import OutputLevel
from clamby.models import Invocation, RunMode

logger = logging.getLogger(__name__)


def run(
    invocation: Invocation,
    output_level: OutputLevel = OutputLevel.MEDIUM,
) -> Union[int, bool, None]:
    """Execute *invocation* and wait for it to exit.

    The command is spawned from its argument vector, never through a shell.

    Returns:
        In ``RunMode.PROBE``: ``True`` if the process exited 0 with nothing on
        stderr, ``None`` if anything was written to stderr, ``False`` otherwise.
        In ``RunMode.STANDARD``: the exit status.
        ``None`` in either mode when the process could not be started, and in
        standard mode when it was killed by a signal.
    """
    logger.debug("Running %s", invocation)
    if invocation.mode is RunMode.PROBE:
        return _probe(invocation)
    return _run_standard(invocation, output_level)


def _probe(invocation: Invocation) -> Optional[bool]:
    try:
        proc = subprocess.run(invocation.argv, capture_output=True, check=False)
    except (OSError, ValueError) as exc:
        logger.warning("Could not start %s: %s", invocation.executable, exc)
        return None

    if proc.stderr:
        return None
    return proc.returncode == 0


def _run_standard(invocation: Invocation, output_level: OutputLevel) -> Optional[int]:
    kwargs = {}
    if output_level is OutputLevel.OFF:
        kwargs["stdout"] = subprocess.DEVNULL

    try:
        proc = subprocess.run(invocation.argv, check=False, **kwargs)
    except (OSError, ValueError) as exc:
        logger.warning("Could not start %s: %s", invocation.executable, exc)
        return None

    # Negative means killed by a signal; there is no exit status to classify.
    if proc.returncode < 0:
        logger.warning("%s terminated by signal %d", invocation.executable, -proc.returncode)
        return None
    return proc.returncode
