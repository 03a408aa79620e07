#!/usr/bin/env python3
"""Show Tree - prints the category forest below one or more roots.

Usage:
    python scripts/show_tree.py 1                       # default locale
    python scripts/show_tree.py 1 6 --locale 1          # German variants
    python scripts/show_tree.py 1 --starting-point 10   # only folder 10
    python scripts/show_tree.py 1 --json                # JSON instead of a tree
"""

import argparse
import json
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

load_dotenv()

from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from category_tree.config import env
from category_tree.config import logger as log
from category_tree.config.locale_context import FixedLocaleContext
from category_tree.container import set_container
from category_tree.domain.tree import Forest, TreeNode
from category_tree.models import forest_to_models
from category_tree.repositories.sqlite.factory import create_sqlite_container
from category_tree.services import CategoryQueryService

console = Console()


def _label(node: TreeNode) -> str:
    item = node.item
    label = f"[bold]{escape(item.title)}[/bold] [dim]#{item.id} pid={item.pid}[/dim]"
    if item.is_variant:
        label += f" [cyan](variant of #{item.locale_parent_id})[/cyan]"
    if node.parent_ref is None and item.parent_id:
        label += f" [yellow](parent #{item.parent_id} not selected)[/yellow]"
    return label


def _add(branch: Tree, node: TreeNode) -> None:
    child_branch = branch.add(_label(node))
    for child in node.children.values():
        _add(child_branch, child)


def render(forest: Forest, title: str) -> Tree:
    """Builds a rich Tree for the forest."""
    tree = Tree(title)
    for node in forest.values():
        _add(tree, node)
    return tree


def main() -> int:
    parser = argparse.ArgumentParser(description="Print a category tree")
    parser.add_argument("root_ids", nargs="+", type=int, help="Root category ids")
    parser.add_argument("--starting-point", help="Comma-separated storage folder ids")
    parser.add_argument("--locale", type=int, help="Locale id (default: CATEGORY_LOCALE)")
    parser.add_argument("--db", help="SQLite file (default: CATEGORY_DB_PATH)")
    parser.add_argument("--json", action="store_true", help="Print JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args()

    log.set_level("debug" if args.verbose else env.get_log_level())

    container = create_sqlite_container(args.db)
    if args.locale is not None:
        container.locale = FixedLocaleContext(args.locale)
    set_container(container)

    # Resolved once here, passed explicitly from now on
    locale_id = container.locale.current_locale()
    service = CategoryQueryService.from_container()
    forest = service.find_tree(args.root_ids, args.starting_point, locale_id=locale_id)

    if args.json:
        payload = [model.model_dump(mode="json") for model in forest_to_models(forest)]
        print(json.dumps(payload, indent=2, ensure_ascii=False))
    elif forest:
        console.print(render(forest, f"Categories (locale {locale_id})"))
    else:
        console.print("[yellow]No categories found.[/yellow]")
    return 0


if __name__ == "__main__":
    sys.exit(main())
