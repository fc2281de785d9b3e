"""One-line conversion phrases such as ``"convert 3 ft to cm"``."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from .catalog import ALL_CATEGORIES
from .errors import ConverterError, InvalidValue, UnknownUnit
from .resolver import UnitResolver
from .units import parse_quantity

logger = logging.getLogger(__name__)


@dataclass
class QuickRequest:
    """A parsed phrase, ready for :meth:`ConversionEngine.convert`."""

    value: float
    source: str
    target: str
    category: str


class QuickConversionParser:
    """Splits ``<value><unit> to <unit>`` phrases.

    ``to``, ``in``, ``into``, ``as``, ``->`` and ``=`` separate the halves. Because
    ``in`` is also the inch symbol every separator position is tried until both
    halves resolve.
    """

    _LEAD_PATTERN = re.compile(r"^\s*(?:convert|conv)\s+", re.IGNORECASE)
    _SEPARATOR_PATTERN = re.compile(r"(?<=\s)(?:to|into|in|as)(?=\s)|->|=", re.IGNORECASE)

    def __init__(self, resolver: UnitResolver) -> None:
        self.resolver = resolver

    def parse(self, phrase: str) -> QuickRequest:
        text = self._LEAD_PATTERN.sub("", phrase).strip()
        if not text:
            raise InvalidValue(phrase)
        last_error: ConverterError | None = None
        for separator in self._SEPARATOR_PATTERN.finditer(text):
            quantity = text[: separator.start()].strip()
            target_token = text[separator.end():].strip()
            if not quantity.strip() or not target_token:
                continue
            try:
                value, source_token = parse_quantity(quantity, self.resolver, ALL_CATEGORIES)
            except ConverterError as exc:
                last_error = exc
                continue
            source = self.resolver.require(source_token, ALL_CATEGORIES)
            target = self.resolver.resolve(target_token, source.category) or self.resolver.resolve(target_token)
            if target is None:
                last_error = UnknownUnit(target_token, source.category)
                continue
            logger.debug("Quick phrase %r -> %s %s to %s.", phrase, value, source.symbol, target.symbol)
            return QuickRequest(value=value, source=source_token, target=target_token, category=source.category)
        if last_error is not None:
            raise last_error
        raise InvalidValue(phrase)


__all__ = ["QuickConversionParser", "QuickRequest"]
