"""Persisted user preferences: the colour theme and favourite exercises.

Both are small values in the key-value store. Each object loads its value
once when created and writes it back on every change.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Iterator, Set

from backend import DEFAULT_THEME, FAVORITE_EXERCISES_KEY, SELECTED_THEME_KEY
from backend.storage import KeyValueStore


class AppTheme(Enum):
    DARK = "Dark"
    LIGHT = "Light"

    @property
    def theme_style(self) -> str:
        """Name of the matching KivyMD ``theme_style``."""
        return self.value


class ThemeSettings:
    """Selected colour theme."""

    def __init__(self, store: KeyValueStore) -> None:
        self.store = store
        self._theme = AppTheme(DEFAULT_THEME)
        self.load()

    def load(self) -> AppTheme:
        value = self.store.get(SELECTED_THEME_KEY, DEFAULT_THEME)
        try:
            self._theme = AppTheme(value)
        except ValueError:
            logging.warning("Unknown theme %r, using %s", value, DEFAULT_THEME)
            self._theme = AppTheme(DEFAULT_THEME)
        return self._theme

    def save(self) -> None:
        self.store.set(SELECTED_THEME_KEY, self._theme.value)

    @property
    def theme(self) -> AppTheme:
        return self._theme

    @theme.setter
    def theme(self, value: AppTheme) -> None:
        self._theme = AppTheme(value)
        self.save()

    def toggle(self) -> AppTheme:
        self.theme = AppTheme.LIGHT if self._theme is AppTheme.DARK else AppTheme.DARK
        return self._theme


class FavoriteSet:
    """Names of exercises the user starred."""

    def __init__(self, store: KeyValueStore) -> None:
        self.store = store
        self._names: Set[str] = set()
        self.load()

    def load(self) -> None:
        value = self.store.get(FAVORITE_EXERCISES_KEY, [])
        if not isinstance(value, list):
            logging.warning("Ignoring malformed favourites: %r", value)
            value = []
        self._names = {str(name) for name in value}

    def save(self) -> None:
        self.store.set(FAVORITE_EXERCISES_KEY, sorted(self._names))

    def toggle(self, name: str) -> bool:
        """Flip ``name`` in the set. Return ``True`` if it is now a favourite."""
        if name in self._names:
            self._names.remove(name)
        else:
            self._names.add(name)
        self.save()
        return name in self._names

    def contains(self, name: str) -> bool:
        return name in self._names

    __contains__ = contains

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._names))

    def __len__(self) -> int:
        return len(self._names)
