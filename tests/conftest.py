"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator
from unittest import mock

import pytest

import clamby
from clamby.client import ClambyClient
from fakes import completed


@pytest.fixture(autouse=True)
def _reset_default_config() -> Iterator[None]:
    clamby.reset()
    yield
    clamby.reset()


@pytest.fixture()
def fake_run() -> Iterator[mock.MagicMock]:
    """Patch ``subprocess.run`` as seen by the runner; exits 0 by default."""
    with mock.patch("clamby.runner.subprocess.run", return_value=completed()) as run:
        yield run


@pytest.fixture()
def good_path(tmp_path: Path) -> Path:
    path = tmp_path / "clean.txt"
    path.write_bytes(b"Hello, ClamAV!")
    return path


@pytest.fixture()
def bad_path(tmp_path: Path) -> Path:
    return tmp_path / "missing.txt"


@pytest.fixture()
def special_path(tmp_path: Path) -> Path:
    """A file whose name would need quoting in a shell."""
    path = tmp_path / "spëcial $(touch pwned) 'quoted' & name;.txt"
    path.write_bytes(b"Hello, ClamAV!")
    return path


@pytest.fixture()
def client() -> ClambyClient:
    return ClambyClient(check=False)


@pytest.fixture()
def eicar_bytes() -> bytes:
    """EICAR anti-malware test string (safe; every AV recognises it)."""
    return b"X5O!P%@AP[4\\PZX54(P^)7CC)7}$EICAR-STANDARD-ANTIVIRUS-TEST-FILE!$H+H*"
