"""Factory for creating Container with SQLite implementation."""

from typing import Optional

from ...container import Container
from ...config.locale_context import EnvLocaleContext
from .connection import SQLiteConnection
from .category_store import SQLiteCategoryStore
from .descendant_resolver import SQLiteDescendantResolver


def create_sqlite_container(
    db_path: Optional[str] = None, max_descendants: Optional[int] = None
) -> Container:
    """Creates a Container with SQLite repository implementations.

    Args:
        db_path: Path to database file. Uses CATEGORY_DB_PATH if not specified.
        max_descendants: Cap for descendant expansion. Uses
            CATEGORY_MAX_DESCENDANTS if not specified.

    Returns:
        Container: Configured with SQLite repositories.
    """
    connection = SQLiteConnection(db_path)

    return Container(
        categories=SQLiteCategoryStore(connection),
        descendants=SQLiteDescendantResolver(connection, max_descendants),
        locale=EnvLocaleContext(),
    )
