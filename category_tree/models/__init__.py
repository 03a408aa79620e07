"""
Pydantic schemas for category output
"""
from .category import CategoryModel, CategoryTreeModel, forest_to_models

__all__ = [
    "CategoryModel",
    "CategoryTreeModel",
    "forest_to_models",
]
