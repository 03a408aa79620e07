"""Category entity - a node of the category hierarchy."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Category:
    """A category record as stored.

    ``parent_id`` is 0 for a root within its storage folder (``pid``).
    Locale variants point at their default-locale record through
    ``locale_parent_id``; default-locale records have ``locale_id == 0``.
    """

    id: int
    pid: int
    title: str
    parent_id: int = 0
    sort_order: int = 0
    description: Optional[str] = None
    import_source: Optional[str] = None
    import_id: Optional[str] = None
    locale_id: int = 0
    locale_parent_id: int = 0
    created_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Category":
        """Creates a Category from a dictionary."""
        return cls(
            id=int(data["id"]),
            pid=int(data.get("pid") or 0),
            title=data["title"],
            parent_id=int(data.get("parent_id") or 0),
            sort_order=int(data.get("sort_order") or 0),
            description=data.get("description"),
            import_source=data.get("import_source"),
            import_id=data.get("import_id"),
            locale_id=int(data.get("locale_id") or 0),
            locale_parent_id=int(data.get("locale_parent_id") or 0),
            created_at=data.get("created_at"),
        )

    def to_dict(self) -> dict:
        """Converts to dictionary."""
        return {
            "id": self.id,
            "pid": self.pid,
            "title": self.title,
            "parent_id": self.parent_id,
            "sort_order": self.sort_order,
            "description": self.description,
            "import_source": self.import_source,
            "import_id": self.import_id,
            "locale_id": self.locale_id,
            "locale_parent_id": self.locale_parent_id,
            "created_at": self.created_at,
        }

    @property
    def is_root(self) -> bool:
        """True when the record declares no parent."""
        return not self.parent_id

    @property
    def is_variant(self) -> bool:
        """True for a locale-specific variant of another record."""
        return bool(self.locale_parent_id)
