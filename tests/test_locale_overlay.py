import pytest

from category_tree.domain.query import OverlayMode
from category_tree.repositories.interfaces.category_store import ICategoryStore
from category_tree.services.locale_overlay import overlay, replace_ids


class RecordingStore(ICategoryStore):
    def __init__(self, variants):
        self.variants = variants
        self.calls = []

    def fetch(self, condition, ordering=None):
        raise AssertionError("overlay must not fetch records")

    def fetch_locale_variants(self, locale_id, parent_ids):
        self.calls.append((locale_id, list(parent_ids)))
        return [
            (parent, variant)
            for parent, variant in self.variants.get(locale_id, [])
            if parent in parent_ids
        ]

    def add(self, category):
        raise NotImplementedError


def test_default_locale_is_a_no_op():
    store = RecordingStore({1: [(1, 101)]})

    assert overlay([1, 2, 1], 0, store) == [1, 2, 1]
    assert store.calls == []


def test_input_list_is_not_mutated():
    store = RecordingStore({1: [(1, 101)]})
    ids = [1, 2]

    assert overlay(ids, 1, store, OverlayMode.FIRST) == [101, 2]
    assert ids == [1, 2]


def test_only_first_duplicate_is_replaced():
    store = RecordingStore({1: [(1, 101)]})

    assert overlay([1, 2, 1], 1, store, OverlayMode.FIRST) == [101, 2, 1]


def test_all_mode_replaces_every_occurrence():
    store = RecordingStore({1: [(1, 101)]})

    assert overlay([1, 2, 1], 1, store, OverlayMode.ALL) == [101, 2, 101]


def test_first_mode_is_not_idempotent_on_duplicates():
    store = RecordingStore({1: [(1, 101)]})
    once = overlay([1, 1], 1, store, OverlayMode.FIRST)
    twice = overlay(once, 1, store, OverlayMode.FIRST)

    assert once == [101, 1]
    assert twice == [101, 101]


def test_ids_without_variant_pass_through():
    store = RecordingStore({2: [(3, 303)]})

    assert overlay([1, 3, 5], 2, store, OverlayMode.FIRST) == [1, 303, 5]


def test_mode_defaults_to_environment(monkeypatch):
    monkeypatch.setenv("CATEGORY_OVERLAY_MODE", "all")
    store = RecordingStore({1: [(1, 101)]})

    assert overlay([1, 1], 1, store) == [101, 101]


def test_unknown_mode_in_environment_is_rejected(monkeypatch):
    monkeypatch.setenv("CATEGORY_OVERLAY_MODE", "some")
    store = RecordingStore({1: [(1, 101)]})

    with pytest.raises(ValueError):
        overlay([1], 1, store)


def test_replace_ids_ignores_unknown_originals():
    assert replace_ids([1, 2], [(9, 900)]) == [1, 2]


def test_overlay_against_sqlite(store, hierarchy):
    assert overlay([1, 2, 3], 1, store, OverlayMode.FIRST) == [101, 2, 103]
    assert overlay([1, 2, 3], 2, store, OverlayMode.FIRST) == [1, 2, 3]
