# topmark:header:start
#
#   project      : UtilCore
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the UtilCore test suite.

Sets up TRACE-level logging for the run, keeps the developer's
``UTILCORE_LOG_LEVEL`` from leaking into tests, and provides small filesystem
fixtures shared across test packages.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

import pytest

from utilcore.config import logging


@pytest.fixture(autouse=True)
def silence_utilcore_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture.
    """
    monkeypatch.delenv(logging.ENV_LOG_LEVEL, raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for the whole run.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def keep_cwd() -> Iterator[Path]:
    """Yield the current working directory and assert it is unchanged afterwards.

    Yields:
        Path: The working directory at test start.
    """
    before = Path(os.getcwd())
    yield before
    assert Path(os.getcwd()) == before


def write(p: Path, data: str | bytes = "") -> Path:
    """Write ``data`` to ``p``, creating parent directories if needed.

    Args:
        p (Path): Path of the file to create.
        data (str | bytes): Content to write; bytes are written verbatim.

    Returns:
        Path: The created file path.
    """
    p.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(data, bytes):
        p.write_bytes(data)
    else:
        p.write_text(data, encoding="utf-8", newline="")
    return p
