"""Resolution of user-supplied tokens to catalog records."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from .catalog import ALL_CATEGORIES, UnitCatalog
from .errors import UnknownUnit
from .records import UnitRecord
from .units import normalize

logger = logging.getLogger(__name__)


class UnitResolver:
    """Maps tokens to :class:`UnitRecord` objects, optionally scoped to a category.

    Records flagged ``case_sensitive`` are matched verbatim first; every other
    record is matched after :func:`normalize`. Within each pass records are
    tried in catalog order, so under ``"All"`` scope the first record listed
    wins when a token names units in several categories.
    """

    def __init__(self, catalog: UnitCatalog) -> None:
        self.catalog = catalog
        self._exact: Dict[str, List[UnitRecord]] = {}
        self._folded: Dict[str, List[UnitRecord]] = {}
        self._build_index()

    def resolve(self, token: str, scope: str = ALL_CATEGORIES) -> Optional[UnitRecord]:
        """Return the record named by *token* within *scope*, or ``None``."""

        if not token or not token.strip():
            return None
        raw = token.strip()
        match = self._first_in_scope(self._exact.get(raw, ()), scope)
        if match is None:
            match = self._first_in_scope(self._folded.get(normalize(raw), ()), scope)
        if match is None:
            logger.debug("No unit named %r in scope %s.", token, scope)
        return match

    def require(self, token: str, scope: str = ALL_CATEGORIES) -> UnitRecord:
        """Like :meth:`resolve` but raise :class:`UnknownUnit` on a miss."""

        record = self.resolve(token, scope)
        if record is None:
            raise UnknownUnit(token.strip() if token else "", scope)
        return record

    def exists(self, token: str, scope: str = ALL_CATEGORIES) -> bool:
        return self.resolve(token, scope) is not None

    # ------------------------------------------------------------------ helpers
    def _build_index(self) -> None:
        for unit in self.catalog.all_units():
            for alias in unit.tokens:
                if unit.case_sensitive:
                    bucket = self._exact.setdefault(alias.strip(), [])
                else:
                    bucket = self._folded.setdefault(normalize(alias), [])
                if unit not in bucket:
                    bucket.append(unit)

    @staticmethod
    def _first_in_scope(candidates, scope: str) -> Optional[UnitRecord]:
        for unit in candidates:
            if scope == ALL_CATEGORIES or unit.category == scope:
                return unit
        return None


__all__ = ["UnitResolver"]
