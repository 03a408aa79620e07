"""SQLite implementation of CategoryStore."""

from datetime import datetime
from typing import Iterable, Optional

from ..interfaces.category_store import ICategoryStore
from ...domain.category import Category
from ...domain.query import And, Condition, Equals, In, Order, Ordering
from ...config import logger as log
from .connection import SQLiteConnection

# Domain field -> column. Anything else is rejected before reaching SQL.
COLUMNS = {
    "id": "id",
    "pid": "pid",
    "title": "title",
    "parent_id": "parent_id",
    "sort_order": "sort_order",
    "import_source": "import_source",
    "import_id": "import_id",
    "locale_id": "locale_id",
    "locale_parent_id": "locale_parent_id",
    "created_at": "created_at",
}


def _column(field: str) -> str:
    try:
        return COLUMNS[field]
    except KeyError:
        raise ValueError(f"Unknown category field: {field!r}") from None


def compile_condition(condition: Condition) -> tuple[str, list]:
    """Turns a condition tree into a WHERE fragment and its parameters."""
    if isinstance(condition, Equals):
        if condition.value is None:
            return f"{_column(condition.field)} IS NULL", []
        return f"{_column(condition.field)} = ?", [condition.value]

    if isinstance(condition, In):
        if not condition.values:
            return "0", []
        placeholders = ", ".join("?" for _ in condition.values)
        return f"{_column(condition.field)} IN ({placeholders})", list(condition.values)

    if isinstance(condition, And):
        if not condition.conditions:
            return "1", []
        parts, params = [], []
        for sub in condition.conditions:
            sql, sub_params = compile_condition(sub)
            parts.append(f"({sql})")
            params.extend(sub_params)
        return " AND ".join(parts), params

    raise ValueError(f"Unsupported condition: {condition!r}")


def compile_ordering(ordering: Optional[Ordering]) -> str:
    """Turns {field: ASC|DESC} into an ORDER BY clause (empty when none)."""
    if not ordering:
        return ""
    parts = []
    for field, direction in ordering.items():
        direction = direction.upper()
        if direction not in (Order.ASCENDING, Order.DESCENDING):
            raise ValueError(f"Unknown sort direction: {direction!r}")
        parts.append(f"{_column(field)} {direction}")
    return " ORDER BY " + ", ".join(parts)


class SQLiteCategoryStore(ICategoryStore):
    """SQLite implementation of category store."""

    def __init__(self, connection: SQLiteConnection):
        self._conn = connection

    def fetch(
        self, condition: Condition, ordering: Optional[Ordering] = None
    ) -> list[Category]:
        """Gets categories matching a condition, ordered as requested."""
        where, params = compile_condition(condition)
        sql = f"SELECT * FROM categories WHERE {where}{compile_ordering(ordering)}"
        log.debug("repo.category", "fetch", where=where, params=params)
        with self._conn.get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(sql, params)
            results = [Category.from_dict(dict(row)) for row in cursor.fetchall()]
            log.debug("repo.category", "fetch result", count=len(results))
            return results

    def fetch_locale_variants(
        self, locale_id: int, parent_ids: Iterable[int]
    ) -> list[tuple[int, int]]:
        """Gets (locale_parent_id, id) pairs of variants in a locale."""
        parent_ids = list(dict.fromkeys(int(i) for i in parent_ids))
        log.debug(
            "repo.category",
            "fetch_locale_variants",
            locale_id=locale_id,
            parent_ids=parent_ids,
        )
        if not parent_ids:
            return []
        placeholders = ", ".join("?" for _ in parent_ids)
        with self._conn.get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(
                f"""SELECT locale_parent_id, id FROM categories
                   WHERE locale_id = ? AND locale_parent_id IN ({placeholders})
                   ORDER BY id""",
                [locale_id, *parent_ids],
            )
            results = [(row["locale_parent_id"], row["id"]) for row in cursor.fetchall()]
            log.debug("repo.category", "fetch_locale_variants result", count=len(results))
            return results

    def add(self, category: Category) -> Category:
        """Stores a category, filling created_at when missing."""
        if category.created_at is None:
            category.created_at = datetime.now()
        data = category.to_dict()
        columns = ", ".join(data)
        placeholders = ", ".join("?" for _ in data)
        log.debug("repo.category", "add", id=category.id, title=category.title)
        with self._conn.get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(
                f"INSERT INTO categories ({columns}) VALUES ({placeholders})",
                list(data.values()),
            )
        return category
