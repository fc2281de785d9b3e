"""Conversion arithmetic for linear and temperature units."""

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, Tuple

import numpy as np

from .catalog import ALL_CATEGORIES
from .errors import IncompatibleUnits
from .records import UnitRecord
from .resolver import UnitResolver

logger = logging.getLogger(__name__)

MAGNITUDE_WARNING_THRESHOLD = 1e15

# symbol -> (to Celsius, from Celsius); works for floats and numpy arrays alike
_TEMPERATURE_FORMULAS: Dict[str, Tuple[Callable, Callable]] = {
    "C": (lambda v: v, lambda c: c),
    "F": (lambda v: (v - 32) * 5 / 9, lambda c: (c * 9 / 5) + 32),
    "K": (lambda v: v - 273.15, lambda c: c + 273.15),
}


class ConversionEngine:
    """Converts values between units resolved through a :class:`UnitResolver`."""

    def __init__(
        self,
        resolver: UnitResolver,
        *,
        magnitude_threshold: float = MAGNITUDE_WARNING_THRESHOLD,
    ) -> None:
        self.resolver = resolver
        self.magnitude_threshold = magnitude_threshold

    def convert(self, value: float, from_token: str, to_token: str, scope: str = ALL_CATEGORIES) -> float:
        """Convert *value* from *from_token* to *to_token*.

        Raises :class:`UnknownUnit` naming the token that does not resolve in
        *scope* and :class:`IncompatibleUnits` when the two units measure
        different quantities.
        """

        source, target = self.resolve_pair(from_token, to_token, scope)
        return self.convert_records(value, source, target)

    def convert_records(self, value: float, source: UnitRecord, target: UnitRecord) -> float:
        self._check_compatible(source, target)
        value = float(value)
        if abs(value) > self.magnitude_threshold:
            logger.warning(
                "Value %g exceeds %g; double precision may lose digits.", value, self.magnitude_threshold
            )
        if source == target:
            return value
        if source.is_temperature:
            return float(self._convert_temperature(value, source, target))
        return value * source.factor / target.factor

    def convert_many(
        self,
        values: Iterable[float],
        from_token: str,
        to_token: str,
        scope: str = ALL_CATEGORIES,
    ) -> np.ndarray:
        """Vectorized :meth:`convert` for batch mode."""

        source, target = self.resolve_pair(from_token, to_token, scope)
        return self.convert_many_records(values, source, target)

    def convert_many_records(self, values: Iterable[float], source: UnitRecord, target: UnitRecord) -> np.ndarray:
        self._check_compatible(source, target)
        array = np.asarray(list(values), dtype=float)
        if array.size and np.any(np.abs(array) > self.magnitude_threshold):
            logger.warning(
                "Batch contains values above %g; double precision may lose digits.", self.magnitude_threshold
            )
        if source == target:
            return array.copy()
        if source.is_temperature:
            return self._convert_temperature(array, source, target)
        return array * source.factor / target.factor

    def resolve_pair(self, from_token: str, to_token: str, scope: str = ALL_CATEGORIES) -> Tuple[UnitRecord, UnitRecord]:
        source = self.resolver.require(from_token, scope)
        if scope == ALL_CATEGORIES:
            # an ambiguous target should land in the source's category
            target = self.resolver.resolve(to_token, source.category) or self.resolver.require(to_token, scope)
        else:
            target = self.resolver.require(to_token, scope)
        return source, target

    # ------------------------------------------------------------------ helpers
    @staticmethod
    def _check_compatible(source: UnitRecord, target: UnitRecord) -> None:
        if source.is_temperature != target.is_temperature:
            raise IncompatibleUnits(source.symbol, target.symbol, "temperature and linear units do not mix")
        if source.category != target.category:
            raise IncompatibleUnits(
                source.symbol, target.symbol, f"{source.category} and {target.category} are different quantities"
            )

    @staticmethod
    def _convert_temperature(value, source: UnitRecord, target: UnitRecord):
        try:
            to_celsius, _ = _TEMPERATURE_FORMULAS[source.symbol]
            _, from_celsius = _TEMPERATURE_FORMULAS[target.symbol]
        except KeyError as exc:
            raise IncompatibleUnits(source.symbol, target.symbol, f"no temperature formula for {exc.args[0]}") from exc
        return from_celsius(to_celsius(value))


__all__ = ["ConversionEngine", "MAGNITUDE_WARNING_THRESHOLD"]
