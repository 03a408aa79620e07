"""TreeNode entity - a category placed in an assembled forest."""

from dataclasses import dataclass, field
from typing import Iterator, Optional

from .category import Category


@dataclass
class TreeNode:
    """A category with its resolved tree parent and ordered children.

    ``parent_ref`` is None for roots, including records promoted to the top
    because their declared parent was not part of the fetched set.
    """

    item: Category
    parent_ref: Optional[int] = None
    children: dict[int, "TreeNode"] = field(default_factory=dict)

    @property
    def id(self) -> int:
        return self.item.id

    def to_dict(self) -> dict:
        """Converts the subtree to nested dictionaries."""
        return {
            "item": self.item.to_dict(),
            "parent": self.parent_ref,
            "children": {
                child_id: child.to_dict() for child_id, child in self.children.items()
            },
        }


Forest = dict[int, TreeNode]


def walk(forest: Forest, depth: int = 0) -> Iterator[tuple[int, TreeNode]]:
    """Yields (depth, node) pairs depth-first in stored order."""
    for node in forest.values():
        yield depth, node
        yield from walk(node.children, depth + 1)
