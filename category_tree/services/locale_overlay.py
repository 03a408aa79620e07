"""Locale overlay - swaps default-locale ids for their variants."""

from typing import Iterable, Optional

from ..config import env
from ..config import logger as log
from ..domain.query import OverlayMode
from ..repositories.interfaces.category_store import ICategoryStore


def replace_ids(
    id_list: list[int],
    replacements: Iterable[tuple[int, int]],
    mode: OverlayMode = OverlayMode.FIRST,
) -> list[int]:
    """Applies (original_id, replacement_id) pairs to a copy of id_list.

    With OverlayMode.FIRST only the first occurrence of an id is swapped,
    later duplicates keep the default-locale id.
    """
    result = list(id_list)
    for original_id, replacement_id in replacements:
        if mode == OverlayMode.ALL:
            result = [replacement_id if i == original_id else i for i in result]
            continue
        try:
            position = result.index(original_id)
        except ValueError:
            continue
        result[position] = replacement_id
    return result


def overlay(
    id_list: Iterable[int],
    locale_id: int,
    store: ICategoryStore,
    mode: Optional[OverlayMode] = None,
) -> list[int]:
    """Returns id_list with each id replaced by its variant in locale_id.

    Ids without a variant, and every id when locale_id is the default
    locale (0), pass through unchanged. Order and length are preserved.
    """
    ids = [int(i) for i in id_list]
    if not locale_id or locale_id < 0 or not ids:
        return ids

    mode = mode or env.get_overlay_mode()
    rows = store.fetch_locale_variants(locale_id, ids)
    log.debug(
        "service.overlay",
        "Locale variants found",
        locale_id=locale_id,
        variants=len(rows),
        mode=mode.value,
    )
    return replace_ids(ids, rows, mode)
