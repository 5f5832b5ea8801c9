"""Search-term projection of the option catalog."""

from __future__ import annotations

from collections.abc import Sequence

from widgetkit.api.dropdown import OptionRecord
from widgetkit.ui_runtime.catalog import OptionCatalog


def normalize_term(term: str) -> str:
    """Return the case-folded needle; whitespace-only terms match everything."""
    if not term.strip():
        return ""
    return term.casefold()


def filter_options(options: Sequence[OptionRecord], term: str) -> tuple[OptionRecord, ...]:
    """Return options whose label contains term, case-insensitively, in catalog order.

    Disabled options are kept so users can see why a choice is unavailable.
    """
    needle = normalize_term(term)
    if not needle:
        return tuple(options)
    return tuple(option for option in options if needle in option.label.casefold())


class FilterEngine:
    """Caches VisibleOptions for the current (catalog, term) pair."""

    __slots__ = ("_catalog", "_term", "_visible")

    def __init__(self, catalog: OptionCatalog, term: str = "") -> None:
        self._catalog = catalog
        self._term = term
        self._visible = filter_options(catalog.options, term)

    @property
    def term(self) -> str:
        return self._term

    @property
    def visible(self) -> tuple[OptionRecord, ...]:
        return self._visible

    def set_search_term(self, term: str) -> bool:
        """Set term and recompute; returns whether VisibleOptions changed."""
        if term == self._term:
            return False
        self._term = term
        visible = filter_options(self._catalog.options, term)
        if visible == self._visible:
            return False
        self._visible = visible
        return True

    def set_catalog(self, catalog: OptionCatalog) -> bool:
        """Swap catalog and recompute; returns whether VisibleOptions changed."""
        self._catalog = catalog
        visible = filter_options(catalog.options, self._term)
        if visible == self._visible:
            return False
        self._visible = visible
        return True
