"""Persistent history and favorites stores."""

from .favorites import MAX_FAVORITES, FavoritesFull, FavoritesStore
from .history import CSV_HEADER, MAX_HISTORY, HistoryStore

__all__ = [
    "CSV_HEADER",
    "MAX_HISTORY",
    "MAX_FAVORITES",
    "FavoritesFull",
    "FavoritesStore",
    "HistoryStore",
]
