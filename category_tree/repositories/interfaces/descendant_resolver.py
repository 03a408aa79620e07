"""Interface for descendant resolution."""

from abc import ABC, abstractmethod
from typing import Iterable


class IDescendantResolver(ABC):
    """Contract for expanding root ids into their whole subtrees."""

    @abstractmethod
    def expand(self, root_ids: Iterable[int]) -> str:
        """Returns the roots plus all descendant ids, comma-joined."""
        pass
