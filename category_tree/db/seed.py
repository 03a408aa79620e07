"""
Seed Data - demo category hierarchy

Two storage folders, one nested hierarchy spanning both, and German (locale 1)
variants for part of it. Variants point at the parent that is visible in
their own locale.

Run: python -m category_tree.db.seed
"""

from ..config import logger as log
from ..container import Container, get_container
from ..domain.category import Category
from ..domain.query import Equals

TOPICS_FOLDER = 10
SPORTS_FOLDER = 20
GERMAN = 1

CATEGORIES = [
    Category(id=1, pid=TOPICS_FOLDER, title="Topics", sort_order=1),
    Category(id=2, pid=TOPICS_FOLDER, title="Politics", parent_id=1, sort_order=1,
             import_source="legacy", import_id="pol"),
    Category(id=3, pid=TOPICS_FOLDER, title="Sports", parent_id=1, sort_order=2,
             import_source="legacy", import_id="spo"),
    Category(id=4, pid=SPORTS_FOLDER, title="Football", parent_id=3, sort_order=1),
    Category(id=5, pid=SPORTS_FOLDER, title="Tennis", parent_id=3, sort_order=2),
    Category(id=6, pid=TOPICS_FOLDER, title="Regions", sort_order=2),
    Category(id=7, pid=TOPICS_FOLDER, title="Europe", parent_id=6, sort_order=1),
    # German variants
    Category(id=101, pid=TOPICS_FOLDER, title="Themen", sort_order=1,
             locale_id=GERMAN, locale_parent_id=1),
    Category(id=103, pid=TOPICS_FOLDER, title="Sport", parent_id=101, sort_order=2,
             locale_id=GERMAN, locale_parent_id=3),
    Category(id=104, pid=SPORTS_FOLDER, title="Fußball", parent_id=103, sort_order=1,
             locale_id=GERMAN, locale_parent_id=4),
]


def seed_all(container: Container = None) -> int:
    """Inserts the demo categories once. Returns how many were added."""
    container = container or get_container()
    store = container.categories

    if store.fetch(Equals("id", CATEGORIES[0].id)):
        log.info("seed", "Categories already seeded, skipping")
        return 0

    for category in CATEGORIES:
        store.add(Category.from_dict(category.to_dict()))

    log.info("seed", "Categories seeded", count=len(CATEGORIES))
    return len(CATEGORIES)


if __name__ == "__main__":
    from ..repositories.sqlite.factory import create_sqlite_container

    seed_all(create_sqlite_container())
