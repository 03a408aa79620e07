"""Category queries - lookups and tree retrieval over a category store."""

from typing import Iterable, Optional, Union

from ..config import logger as log
from ..container import get_container
from ..domain.category import Category
from ..domain.query import And, Equals, In, Order, Ordering, OverlayMode
from ..domain.tree import Forest
from ..errors import EMPTY_ID_LIST, InvalidInputError
from ..repositories.interfaces.category_store import ICategoryStore
from ..repositories.interfaces.descendant_resolver import IDescendantResolver
from .locale_overlay import overlay
from .tree_assembler import assemble


def parse_id_list(value: Union[str, Iterable, None]) -> list[int]:
    """Parses "1, 2,,3" (or an iterable of ids) into [1, 2, 3].

    Raises:
        ValueError: If an entry is not an integer.
    """
    if value is None:
        return []
    parts = value.split(",") if isinstance(value, str) else value
    return [int(str(p).strip()) for p in parts if str(p).strip()]


class CategoryQueryService:
    """Read-side entry point for categories.

    The active locale is passed in by the caller on each call; nothing is
    read from ambient request state.
    """

    def __init__(
        self,
        store: ICategoryStore,
        descendants: IDescendantResolver,
        overlay_mode: Optional[OverlayMode] = None,
    ):
        self._store = store
        self._descendants = descendants
        self._overlay_mode = overlay_mode

    @classmethod
    def from_container(cls, overlay_mode: Optional[OverlayMode] = None) -> "CategoryQueryService":
        container = get_container()
        return cls(container.categories, container.descendants, overlay_mode)

    def find_by_import_key(
        self, import_source: str, import_id: str, as_dict: bool = False
    ) -> Union[Category, dict, None]:
        """Gets the category imported from an external system.

        Storage folder restrictions do not apply. Returns None (or {} with
        as_dict) when nothing matches.
        """
        log.debug(
            "service.category",
            "find_by_import_key",
            import_source=import_source,
            import_id=import_id,
        )
        matches = self._store.fetch(
            And(Equals("import_source", import_source), Equals("import_id", import_id))
        )
        category = matches[0] if matches else None
        if as_dict:
            return category.to_dict() if category else {}
        return category

    def find_root_categories_of(self, pid: int) -> list[Category]:
        """Gets the top-level categories stored in a folder."""
        log.debug("service.category", "find_root_categories_of", pid=pid)
        return self._store.fetch(And(Equals("pid", int(pid)), Equals("parent_id", 0)))

    def find_by_id_list(
        self,
        id_list: Iterable[int],
        ordering: Optional[Ordering] = None,
        starting_point: Optional[str] = None,
        locale_id: int = 0,
    ) -> list[Category]:
        """Gets categories by id, swapped to their variants in locale_id.

        Args:
            id_list: Ids to fetch, default-locale ids allowed.
            ordering: {field: "ASC"|"DESC"}; store order when omitted.
            starting_point: Comma-separated folder pids to restrict to.
            locale_id: Active locale, 0 for the default locale.

        Raises:
            InvalidInputError: If id_list is empty.
        """
        id_list = list(id_list)
        if not id_list:
            raise InvalidInputError("The given id list is empty.", EMPTY_ID_LIST)

        ids = overlay(id_list, locale_id, self._store, self._overlay_mode)
        conditions = [In("id", ids)]
        if starting_point is not None:
            conditions.append(In("pid", parse_id_list(starting_point)))

        log.debug(
            "service.category",
            "find_by_id_list",
            ids=ids,
            starting_point=starting_point,
            locale_id=locale_id,
        )
        return self._store.fetch(And(*conditions), ordering or None)

    def find_children(self, parent_id: int) -> list[Category]:
        """Gets the direct children of a category in sort order."""
        log.debug("service.category", "find_children", parent_id=parent_id)
        return self._store.fetch(
            Equals("parent_id", int(parent_id)), {"sort_order": Order.ASCENDING}
        )

    def find_tree(
        self,
        root_ids: Iterable[int],
        starting_point: Optional[str] = None,
        locale_id: int = 0,
    ) -> Forest:
        """Gets the subtrees below root_ids as a forest.

        Categories whose parent is not part of the result (outside the
        starting point, say) appear as roots.
        """
        root_ids = list(root_ids)
        expanded = self._descendants.expand(root_ids)
        id_list = parse_id_list(expanded)
        if not id_list:
            log.debug("service.category", "find_tree: nothing to fetch", root_ids=root_ids)
            return {}

        categories = self.find_by_id_list(
            id_list, {"sort_order": Order.ASCENDING}, starting_point, locale_id
        )
        forest = assemble(categories)
        log.info(
            "service.category",
            "Tree assembled",
            root_ids=root_ids,
            categories=len(categories),
            roots=len(forest),
        )
        return forest
