from pathlib import Path

import pytest

from category_tree.config import env
from category_tree.config import logger as log
from category_tree.config.locale_context import EnvLocaleContext, FixedLocaleContext
from category_tree.domain.query import OverlayMode


def test_defaults(monkeypatch):
    for key in (
        "CATEGORY_DB_PATH",
        "CATEGORY_OVERLAY_MODE",
        "CATEGORY_MAX_DESCENDANTS",
        "CATEGORY_LOCALE",
    ):
        monkeypatch.delenv(key, raising=False)

    assert env.get_db_path() == Path("data/categories.db")
    assert env.get_overlay_mode() is OverlayMode.FIRST
    assert env.get_max_descendants() == 10000
    assert env.get_locale() == 0


def test_overrides(monkeypatch):
    monkeypatch.setenv("CATEGORY_DB_PATH", "/tmp/x.db")
    monkeypatch.setenv("CATEGORY_OVERLAY_MODE", " ALL ")
    monkeypatch.setenv("CATEGORY_MAX_DESCENDANTS", "50")

    assert env.get_db_path() == Path("/tmp/x.db")
    assert env.get_overlay_mode() is OverlayMode.ALL
    assert env.get_max_descendants() == 50


def test_locale_contexts(monkeypatch):
    monkeypatch.setenv("CATEGORY_LOCALE", "2")

    assert EnvLocaleContext().current_locale() == 2
    assert FixedLocaleContext(3).current_locale() == 3
    assert FixedLocaleContext(-1).current_locale() == 0
    assert FixedLocaleContext().current_locale() == 0


def test_bad_locale_in_environment(monkeypatch):
    monkeypatch.setenv("CATEGORY_LOCALE", "de")

    with pytest.raises(ValueError):
        EnvLocaleContext().current_locale()


def test_logger_prints_context_and_data(capsys):
    log.set_level("debug")
    try:
        log.info("service.test", "Tree [assembled]", ids=[1, 2])
    finally:
        log.set_level("info")

    err = capsys.readouterr().err
    assert "[service.test]" in err
    assert "Tree [assembled]" in err
    assert "ids=1,2" in err
