"""Saved favorite conversions."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, List, Optional

from ..catalog import ALL_CATEGORIES, UnitCatalog
from ..errors import ConverterError, StorageUnavailable, UnknownCategory
from ..records import FavoriteRecord
from ..resolver import UnitResolver

logger = logging.getLogger(__name__)

MAX_FAVORITES = 20


class FavoritesFull(ConverterError):
    """Raised when adding past the favorites limit."""


class FavoritesStore:
    """Small list of :class:`FavoriteRecord` entries validated against the catalog."""

    def __init__(
        self,
        resolver: UnitResolver,
        path: Optional[Path] = None,
        *,
        max_entries: int = MAX_FAVORITES,
    ) -> None:
        self.resolver = resolver
        self.path = Path(path) if path is not None else None
        self.max_entries = max_entries
        self._entries: List[FavoriteRecord] = []

    @property
    def catalog(self) -> UnitCatalog:
        return self.resolver.catalog

    def load(self) -> int:
        self._entries.clear()
        if self.path is None:
            return 0
        try:
            with self.path.open("r", encoding="utf-8", errors="replace") as fh:
                lines = fh.readlines()
        except FileNotFoundError:
            return 0
        except OSError as exc:
            logger.debug("Ignoring unreadable favorites file %s (%s).", self.path, exc)
            return 0
        for line in lines:
            record = FavoriteRecord.from_line(line)
            if record is None:
                continue
            if len(self._entries) >= self.max_entries:
                logger.warning(
                    "Favorites file %s holds more than %d entries; extra lines ignored.", self.path, self.max_entries
                )
                break
            self._entries.append(record)
        return len(self._entries)

    def add(self, source: str, target: str, category: str) -> FavoriteRecord:
        if len(self._entries) >= self.max_entries:
            raise FavoritesFull(f"Maximum number of favorites ({self.max_entries}) reached.")
        record = self._validated(source, target, category)
        self._entries.append(record)
        self.save()
        return record

    def remove(self, index: int) -> FavoriteRecord:
        self._check_index(index)
        removed = self._entries.pop(index)
        self.save()
        return removed

    def edit(
        self,
        index: int,
        *,
        source: Optional[str] = None,
        target: Optional[str] = None,
        category: Optional[str] = None,
    ) -> FavoriteRecord:
        """Change fields of favorite *index*; nothing is committed unless both units resolve."""

        self._check_index(index)
        current = self._entries[index]
        record = self._validated(
            source if source is not None else current.source,
            target if target is not None else current.target,
            category if category is not None else current.category,
        )
        self._entries[index] = record
        self.save()
        return record

    def save(self) -> None:
        if self.path is None:
            return
        try:
            with self.path.open("w", encoding="utf-8") as fh:
                for entry in self._entries:
                    fh.write(entry.to_line() + "\n")
        except OSError as exc:
            raise StorageUnavailable(self.path, "write favorites to") from exc

    def get(self, index: int) -> FavoriteRecord:
        self._check_index(index)
        return self._entries[index]

    def entries(self) -> List[FavoriteRecord]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[FavoriteRecord]:
        return iter(self._entries)

    # ------------------------------------------------------------------ helpers
    def _validated(self, source: str, target: str, category: str) -> FavoriteRecord:
        canonical = self.catalog.find_category(category)
        if canonical is None or canonical == ALL_CATEGORIES:
            raise UnknownCategory(category)
        source_unit = self.resolver.require(source, canonical)
        target_unit = self.resolver.require(target, canonical)
        return FavoriteRecord(source=source_unit.symbol, target=target_unit.symbol, category=canonical)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._entries):
            raise IndexError(f"Favorite index {index} out of range.")


__all__ = ["FavoritesFull", "FavoritesStore", "MAX_FAVORITES"]
