"""SQLite connection management."""

import sqlite3
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from ...config import env


def adapt_datetime(val: datetime) -> str:
    return val.isoformat()


def convert_datetime(val: bytes) -> datetime:
    return datetime.fromisoformat(val.decode())


sqlite3.register_adapter(datetime, adapt_datetime)
sqlite3.register_converter("DATETIME", convert_datetime)


class SQLiteConnection:
    """Manages SQLite connection with transaction context manager."""

    def __init__(self, db_path: Optional[Union[str, Path]] = None):
        """Initializes connection.

        Args:
            db_path: Path to database file. Uses CATEGORY_DB_PATH if not specified.
        """
        self.db_path = Path(db_path) if db_path else env.get_db_path()
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_tables()

    @contextmanager
    def get_connection(self):
        """Context manager for getting a connection with transaction."""
        conn = sqlite3.connect(
            self.db_path,
            detect_types=sqlite3.PARSE_DECLTYPES | sqlite3.PARSE_COLNAMES,
        )
        conn.row_factory = sqlite3.Row
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def _init_tables(self):
        """Initializes the category table and its indexes."""
        with self.get_connection() as conn:
            cursor = conn.cursor()

            cursor.execute(
                """
                CREATE TABLE IF NOT EXISTS categories (
                    id INTEGER PRIMARY KEY,
                    pid INTEGER NOT NULL DEFAULT 0,
                    title TEXT NOT NULL,
                    parent_id INTEGER NOT NULL DEFAULT 0,
                    sort_order INTEGER NOT NULL DEFAULT 0,
                    description TEXT,
                    import_source TEXT,
                    import_id TEXT,
                    locale_id INTEGER NOT NULL DEFAULT 0,
                    locale_parent_id INTEGER NOT NULL DEFAULT 0,
                    created_at DATETIME,
                    UNIQUE(import_source, import_id)
                )
            """
            )

            cursor.execute(
                "CREATE INDEX IF NOT EXISTS idx_categories_parent ON categories(parent_id)"
            )
            cursor.execute(
                "CREATE INDEX IF NOT EXISTS idx_categories_pid ON categories(pid)"
            )
            cursor.execute(
                "CREATE INDEX IF NOT EXISTS idx_categories_locale "
                "ON categories(locale_id, locale_parent_id)"
            )
