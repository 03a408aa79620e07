"""Locale contexts resolved once at the request boundary."""

from ..repositories.interfaces.locale_context import ILocaleContext
from . import env


class FixedLocaleContext(ILocaleContext):
    """Locale known up front, e.g. parsed from a request parameter."""

    def __init__(self, locale_id: int = 0):
        self._locale_id = max(int(locale_id), 0)

    def current_locale(self) -> int:
        return self._locale_id


class EnvLocaleContext(ILocaleContext):
    """Locale taken from CATEGORY_LOCALE; 0 when unset."""

    def current_locale(self) -> int:
        return max(env.get_locale(), 0)
