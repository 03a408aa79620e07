from conftest import make

from category_tree.domain.tree import walk
from category_tree.services.tree_assembler import (
    assemble,
    break_cycles,
    build_arena,
    promote_orphans,
)


def test_empty_input_gives_empty_forest():
    assert assemble([]) == {}


def test_orphan_is_promoted_to_root():
    forest = assemble([make(1), make(2, parent_id=1), make(3, parent_id=99)])

    assert list(forest) == [1, 3]
    assert list(forest[1].children) == [2]
    assert forest[3].parent_ref is None
    assert forest[3].item.parent_id == 99
    assert forest[1].children[2].parent_ref == 1


def test_roots_and_children_keep_input_order():
    forest = assemble([make(5), make(3, parent_id=5), make(1)])

    assert list(forest) == [5, 1]
    assert list(forest[5].children) == [3]
    assert forest[1].children == {}


def test_child_listed_before_parent_is_still_linked():
    forest = assemble([make(2, parent_id=1), make(3, parent_id=1), make(1)])

    assert list(forest) == [1]
    assert list(forest[1].children) == [2, 3]


def test_every_input_appears_exactly_once():
    categories = [
        make(1),
        make(2, parent_id=1),
        make(3, parent_id=2),
        make(4, parent_id=42),
        make(5, parent_id=4),
        make(6, parent_id=1),
    ]
    forest = assemble(categories)

    seen = [node.id for _, node in walk(forest)]
    assert sorted(seen) == [1, 2, 3, 4, 5, 6]
    assert len(seen) == len(set(seen))


def test_parent_refs_point_inside_the_set():
    categories = [make(1, parent_id=8), make(2, parent_id=1), make(3, parent_id=9)]
    forest = assemble(categories)
    ids = {c.id for c in categories}

    for _, node in walk(forest):
        assert node.parent_ref is None or node.parent_ref in ids


def test_walk_reports_depth():
    forest = assemble([make(1), make(2, parent_id=1), make(3, parent_id=2)])

    assert [(depth, node.id) for depth, node in walk(forest)] == [(0, 1), (1, 2), (2, 3)]


def test_promote_orphans_does_not_touch_its_input():
    arena = build_arena([make(1, parent_id=7)])
    promoted = promote_orphans(arena)

    assert arena[1][1] == 7
    assert promoted[1][1] is None


def test_parent_loop_is_cut_without_losing_nodes():
    forest = assemble([make(1, parent_id=2), make(2, parent_id=1), make(3, parent_id=3)])

    seen = sorted(node.id for _, node in walk(forest))
    assert seen == [1, 2, 3]
    assert list(forest) == [1, 3]
    assert list(forest[1].children) == [2]


def test_break_cycles_leaves_plain_trees_alone():
    arena = build_arena([make(1), make(2, parent_id=1)])

    assert break_cycles(arena) == arena


def test_to_dict_nests_children():
    forest = assemble([make(1), make(2, parent_id=1)])
    data = forest[1].to_dict()

    assert data["parent"] is None
    assert data["item"]["id"] == 1
    assert data["children"][2]["parent"] == 1
    assert data["children"][2]["children"] == {}
