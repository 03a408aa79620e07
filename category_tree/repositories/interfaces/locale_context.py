"""Interface for locale context."""

from abc import ABC, abstractmethod


class ILocaleContext(ABC):
    """Contract for resolving the active locale at the request boundary."""

    @abstractmethod
    def current_locale(self) -> int:
        """Returns the active locale id, 0 when none is known."""
        pass
