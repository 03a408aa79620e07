"""
Category services: locale overlay, tree assembly and the query facade.
"""

from .category_query import CategoryQueryService, parse_id_list
from .locale_overlay import overlay, replace_ids
from .tree_assembler import assemble

__all__ = [
    "CategoryQueryService",
    "parse_id_list",
    "overlay",
    "replace_ids",
    "assemble",
]
