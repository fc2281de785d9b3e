"""Application context wiring catalog, engine and stores together."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from .catalog import ALL_CATEGORIES, UnitCatalog, build_default_catalog
from .config import ConverterConfig
from .engine import ConversionEngine
from .errors import StorageUnavailable
from .quick import QuickConversionParser
from .records import ConversionRecord, UnitRecord
from .resolver import UnitResolver
from .storage import FavoritesStore, HistoryStore

logger = logging.getLogger(__name__)


@dataclass
class ConversionResult:
    value: float
    result: float
    source: UnitRecord
    target: UnitRecord
    recorded: Optional[ConversionRecord] = None


@dataclass
class ConverterApp:
    """Owns every piece of converter state and hands it to the components."""

    config: ConverterConfig = field(default_factory=ConverterConfig)
    catalog: UnitCatalog = field(default_factory=build_default_catalog)
    load_state: bool = True

    def __post_init__(self) -> None:
        self.resolver = UnitResolver(self.catalog)
        self.engine = ConversionEngine(self.resolver, magnitude_threshold=self.config.magnitude_threshold)
        self.quick = QuickConversionParser(self.resolver)
        self.history = HistoryStore(self.config.history_path, max_entries=self.config.max_history)
        self.favorites = FavoritesStore(
            self.resolver, self.config.favorites_path, max_entries=self.config.max_favorites
        )
        if self.load_state:
            self.history.load()
            self.favorites.load()

    def convert(
        self,
        value: float,
        from_token: str,
        to_token: str,
        scope: str = ALL_CATEGORIES,
        *,
        record: bool = True,
    ) -> ConversionResult:
        """Convert and, when *record* is set, append to history.

        A history write failure is logged and does not affect the result.
        """

        source, target = self.engine.resolve_pair(from_token, to_token, scope)
        result = self.engine.convert_records(value, source, target)
        outcome = ConversionResult(value=float(value), result=result, source=source, target=target)
        if record:
            outcome.recorded = self._record(source.symbol, target.symbol, float(value), result)
        return outcome

    def convert_batch(
        self,
        values: Iterable[float],
        from_token: str,
        to_token: str,
        scope: str = ALL_CATEGORIES,
        *,
        record: bool = True,
    ) -> List[ConversionResult]:
        values = [float(v) for v in values]
        source, target = self.engine.resolve_pair(from_token, to_token, scope)
        results = self.engine.convert_many_records(values, source, target)
        outcomes = []
        for value, result in zip(values, results.tolist()):
            outcome = ConversionResult(value=value, result=result, source=source, target=target)
            if record:
                outcome.recorded = self._record(source.symbol, target.symbol, value, result)
            outcomes.append(outcome)
        return outcomes

    def convert_phrase(self, phrase: str, *, record: bool = True) -> ConversionResult:
        request = self.quick.parse(phrase)
        return self.convert(request.value, request.source, request.target, record=record)

    def _record(self, source: str, target: str, value: float, result: float) -> Optional[ConversionRecord]:
        try:
            return self.history.record(source, target, value, result)
        except StorageUnavailable as exc:
            logger.warning("History not saved: %s", exc)
            return None


__all__ = ["ConversionResult", "ConverterApp"]
