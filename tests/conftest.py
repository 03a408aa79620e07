from pathlib import Path

import pytest

from category_tree.container import reset_container, set_container
from category_tree.domain.category import Category
from category_tree.domain.query import OverlayMode
from category_tree.repositories.sqlite.factory import create_sqlite_container
from category_tree.services import CategoryQueryService


def make(id, parent_id=0, sort_order=0, pid=10, **extra) -> Category:
    return Category(
        id=id,
        pid=pid,
        title=extra.pop("title", f"Category {id}"),
        parent_id=parent_id,
        sort_order=sort_order,
        **extra,
    )


@pytest.fixture
def container(tmp_path: Path):
    container = create_sqlite_container(str(tmp_path / "categories.db"))
    set_container(container)
    yield container
    reset_container()


@pytest.fixture
def store(container):
    return container.categories


@pytest.fixture
def service(container):
    return CategoryQueryService.from_container(OverlayMode.FIRST)


@pytest.fixture
def hierarchy(store):
    """
    1 Topics (pid 10)
      2 Politics
      3 Sports
        4 Football (pid 20)
        5 Tennis (pid 20)
    6 Regions (pid 10)
      7 Europe
    101 variant of 1 in locale 1, 103 variant of 3 (parent 101)
    """
    rows = [
        make(1, sort_order=1),
        make(2, parent_id=1, sort_order=3, import_source="legacy", import_id="pol"),
        make(3, parent_id=1, sort_order=4),
        make(4, parent_id=3, sort_order=5, pid=20),
        make(5, parent_id=3, sort_order=6, pid=20),
        make(6, sort_order=2),
        make(7, parent_id=6, sort_order=7),
        make(101, sort_order=1, locale_id=1, locale_parent_id=1),
        make(103, parent_id=101, sort_order=4, locale_id=1, locale_parent_id=3),
    ]
    for row in rows:
        store.add(row)
    return rows
