"""SQLite implementation of DescendantResolver."""

from typing import Iterable, Optional

from ..interfaces.descendant_resolver import IDescendantResolver
from ...config import env
from ...config import logger as log
from .connection import SQLiteConnection


class SQLiteDescendantResolver(IDescendantResolver):
    """Walks parent_id links of default-locale records, depth-first.

    The result starts with the given roots, followed by every descendant
    right after its parent, siblings in sort order. Ids are never emitted
    twice, so cyclic data terminates; ``max_descendants`` bounds the walk.
    """

    def __init__(self, connection: SQLiteConnection, max_descendants: Optional[int] = None):
        self._conn = connection
        self._max_descendants = (
            max_descendants if max_descendants is not None else env.get_max_descendants()
        )

    def expand(self, root_ids: Iterable[int]) -> str:
        """Returns the roots plus all descendant ids, comma-joined."""
        roots = list(dict.fromkeys(int(i) for i in root_ids))
        log.debug("repo.descendants", "expand", root_ids=roots)
        if not roots:
            return ""

        result = list(roots)
        seen = set(roots)
        found = 0
        with self._conn.get_connection() as conn:
            cursor = conn.cursor()
            stack = list(reversed(self._children(cursor, roots)))
            while stack:
                category_id = stack.pop()
                if category_id in seen:
                    log.warn(
                        "repo.descendants",
                        "Category reached twice, skipping (recursive hierarchy?)",
                        category_id=category_id,
                    )
                    continue
                if found >= self._max_descendants:
                    log.warn(
                        "repo.descendants",
                        "Descendant limit reached, result truncated",
                        limit=self._max_descendants,
                        root_ids=roots,
                    )
                    break
                seen.add(category_id)
                result.append(category_id)
                found += 1
                stack.extend(reversed(self._children(cursor, [category_id])))

        log.debug("repo.descendants", "expand result", count=len(result))
        return ",".join(str(i) for i in result)

    @staticmethod
    def _children(cursor, parent_ids: list[int]) -> list[int]:
        placeholders = ", ".join("?" for _ in parent_ids)
        cursor.execute(
            f"""SELECT id FROM categories
               WHERE parent_id IN ({placeholders}) AND locale_id = 0
               ORDER BY sort_order, id""",
            parent_ids,
        )
        return [row["id"] for row in cursor.fetchall()]
