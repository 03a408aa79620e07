"""Interface for category store."""

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from ...domain.category import Category
from ...domain.query import Condition, Ordering


class ICategoryStore(ABC):
    """Contract for category data access."""

    @abstractmethod
    def fetch(
        self, condition: Condition, ordering: Optional[Ordering] = None
    ) -> list[Category]:
        """Gets categories matching a condition, ordered as requested."""
        pass

    @abstractmethod
    def fetch_locale_variants(
        self, locale_id: int, parent_ids: Iterable[int]
    ) -> list[tuple[int, int]]:
        """Gets (locale_parent_id, id) pairs of variants in a locale."""
        pass

    @abstractmethod
    def add(self, category: Category) -> Category:
        """Stores a category."""
        pass
