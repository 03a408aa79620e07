"""
Category schemas - JSON shape of categories and assembled trees
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from ..domain.tree import Forest, TreeNode


class CategoryModel(BaseModel):
    """
    Public view of a category record.
    """

    id: int = Field(..., description="Category id in the active locale")
    pid: int = Field(..., description="Storage folder id")
    title: str = Field(..., description="Category title")
    parent_id: int = Field(default=0, description="Declared parent, 0 for none")
    sort_order: int = Field(default=0, description="Ascending sort key")
    description: Optional[str] = Field(None, description="Description")

    import_source: Optional[str] = Field(None, description="External system")
    import_id: Optional[str] = Field(None, description="Id in the external system")

    locale_id: int = Field(default=0, description="Locale of this record")
    locale_parent_id: int = Field(default=0, description="Default-locale record")

    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class CategoryTreeModel(BaseModel):
    """
    One node of an assembled forest with its children in order.
    """

    category: CategoryModel
    parent: Optional[int] = Field(None, description="Tree parent, None for roots")
    children: list["CategoryTreeModel"] = Field(default_factory=list)

    @classmethod
    def from_node(cls, node: TreeNode) -> "CategoryTreeModel":
        return cls(
            category=CategoryModel.model_validate(node.item),
            parent=node.parent_ref,
            children=[cls.from_node(child) for child in node.children.values()],
        )


CategoryTreeModel.model_rebuild()


def forest_to_models(forest: Forest) -> list[CategoryTreeModel]:
    """Converts a forest into schema objects, roots in order."""
    return [CategoryTreeModel.from_node(node) for node in forest.values()]
