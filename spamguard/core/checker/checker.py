"""
Checker abstract base class.

Defines the interface that all checkers must implement.
"""

from abc import ABC, abstractmethod

from .types import CheckerParams


class Checker(ABC):
    """
    Base class for all checkers.

    Checkers inspect a submitted comment and return a verdict:
    ``True`` to let it through, ``False`` to block it. A checker that
    cannot decide raises ``CheckerError``; the pipeline records this as an
    abstention, never as a block.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique name of this checker."""
        ...

    @abstractmethod
    async def check(self, params: CheckerParams) -> bool:
        """
        Evaluate one comment.

        Args:
            params: The comment fields. Must not be modified.

        Returns:
            True if the comment passes, False if it should be blocked

        Raises:
            CheckerError: If no decision could be reached
        """
        ...

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name!r}>"
