"""
FILETHING - FileThing

A file at a path, removed through a pluggable deletion strategy.
"""

import logging
from dataclasses import dataclass, field

from filething.infrastructure.filesystem import Remover, os_remove

logger = logging.getLogger(__name__)


@dataclass
class FileThing:
    """
    A filesystem path plus the strategy used to delete it.

    Holds no OS resources. The path is not checked on construction.
    ``_remove`` is internal; tests in this package replace it to
    simulate failures.
    """

    path: str
    _remove: Remover = field(
        default_factory=lambda: os_remove, init=False, repr=False, compare=False
    )

    def remove(self) -> None:
        """
        Delete the file at ``path``.

        A file that is already missing counts as removed.

        Raises:
            Exception: Any exception raised by the deletion strategy other
                than FileNotFoundError, unchanged.
        """
        try:
            self._remove(self.path)
        except FileNotFoundError:
            logger.debug(f"Nothing to remove at {self.path}")
            return
        logger.debug(f"Removed {self.path}")


def new(path: str) -> FileThing:
    """Create a FileThing that deletes through the real filesystem."""
    return FileThing(path)


def _with_remover(path: str, remover: Remover) -> FileThing:
    thing = FileThing(path)
    thing._remove = remover
    return thing
