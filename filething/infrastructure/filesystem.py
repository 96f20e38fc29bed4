"""
FILETHING - Deletion Strategies

Provides the removal primitive used by FileThing and the stand-ins
substituted for it in tests.
"""

import errno
import os
from typing import List, Protocol


class Remover(Protocol):
    """Protocol for deletion strategies.

    A strategy removes the entry at ``path`` and raises ``OSError`` on
    failure. "Does not exist" must be signalled as ``FileNotFoundError``.
    """

    def __call__(self, path: str) -> None:
        ...


def os_remove(path: str) -> None:
    """Remove a file using the real filesystem."""
    os.remove(path)


class RecordingRemover:
    """Remover that succeeds without touching the filesystem."""

    def __init__(self):
        self.calls: List[str] = []

    def __call__(self, path: str) -> None:
        self.calls.append(path)


class FailingRemover:
    """Remover that raises the same error on every call."""

    def __init__(self, error: BaseException):
        self._error = error
        self.calls: List[str] = []

    def __call__(self, path: str) -> None:
        self.calls.append(path)
        raise self._error


class MissingRemover:
    """Remover that reports the target as already gone."""

    def __init__(self):
        self.calls: List[str] = []

    def __call__(self, path: str) -> None:
        self.calls.append(path)
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), path)
