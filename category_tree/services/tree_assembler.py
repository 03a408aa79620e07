"""Tree assembler - nests a flat, sorted category list into a forest."""

from typing import Iterable, Optional

from ..config import logger as log
from ..domain.category import Category
from ..domain.tree import Forest, TreeNode

Arena = dict[int, tuple[Category, Optional[int]]]


def build_arena(categories: Iterable[Category]) -> Arena:
    """Maps id -> (category, declared parent id or None), keeping input order."""
    return {c.id: (c, c.parent_id or None) for c in categories}


def promote_orphans(arena: Arena) -> Arena:
    """Returns a copy where parents missing from the arena become None.

    A category fetched without its parent (e.g. the parent was filtered out
    by storage folder) is then shown at the top level instead of being lost.
    """
    return {
        category_id: (item, parent if parent in arena else None)
        for category_id, (item, parent) in arena.items()
    }


def break_cycles(arena: Arena) -> Arena:
    """Returns a copy where each parent loop is cut at the first node reached.

    Expects every parent to be None or a key of the arena.
    """
    result = dict(arena)
    visiting, done = 1, 2
    state: dict[int, int] = {}
    for start in result:
        path = []
        current = start
        while current is not None and current not in state:
            state[current] = visiting
            path.append(current)
            current = result[current][1]
        if current is not None and state[current] == visiting:
            item, parent = result[current]
            log.warn("service.tree", "Parent loop cut", category_id=current, parent_id=parent)
            result[current] = (item, None)
        for category_id in path:
            state[category_id] = done
    return result


def link(arena: Arena) -> Forest:
    """Builds the nested forest from an arena whose parents all resolve."""
    nodes = {
        category_id: TreeNode(item=item, parent_ref=parent)
        for category_id, (item, parent) in arena.items()
    }
    forest: Forest = {}
    for category_id, node in nodes.items():
        if node.parent_ref is None:
            forest[category_id] = node
        else:
            nodes[node.parent_ref].children[category_id] = node
    return forest


def assemble(categories: Iterable[Category]) -> Forest:
    """Converts categories (already sorted) into an ordered forest.

    Roots and children keep the relative order of the input. Ids must be
    unique; duplicates are not detected.
    """
    return link(break_cycles(promote_orphans(build_arena(categories))))
