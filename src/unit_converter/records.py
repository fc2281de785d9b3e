"""Data structures shared by the catalog, the engine and the stores."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional, Tuple
import time


@dataclass(frozen=True)
class UnitRecord:
    """A single measurement unit.

    ``factor`` is the ratio from this unit to its category's base unit. It is a
    placeholder for temperature units, which convert through Celsius instead.
    """

    name: str
    symbol: str
    factor: float
    category: str
    is_temperature: bool = False
    aliases: Tuple[str, ...] = ()
    case_sensitive: bool = False
    description: str = ""

    @property
    def tokens(self) -> Tuple[str, ...]:
        """Symbol followed by the aliases, in lookup order."""

        return (self.symbol,) + tuple(self.aliases)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ConversionRecord:
    """One entry of the conversion history."""

    source: str
    target: str
    value: float
    result: float
    timestamp: int = field(default_factory=lambda: int(time.time()))

    def to_line(self) -> str:
        return f"{self.source},{self.target},{self.value!r},{self.result!r},{self.timestamp}"

    @classmethod
    def from_line(cls, line: str) -> Optional["ConversionRecord"]:
        """Parse a ``from,to,value,result,timestamp`` line; ``None`` if malformed."""

        parts = line.strip().split(",")
        if len(parts) != 5:
            return None
        source, target, value, result, timestamp = parts
        if not source or not target:
            return None
        try:
            return cls(
                source=source,
                target=target,
                value=float(value),
                result=float(result),
                timestamp=int(float(timestamp)),
            )
        except ValueError:
            return None


@dataclass
class FavoriteRecord:
    """A saved (from, to, category) conversion shortcut."""

    source: str
    target: str
    category: str

    def to_line(self) -> str:
        return f"{self.source},{self.target},{self.category}"

    @classmethod
    def from_line(cls, line: str) -> Optional["FavoriteRecord"]:
        parts = [part.strip() for part in line.strip().split(",")]
        if len(parts) != 3 or not all(parts):
            return None
        return cls(source=parts[0], target=parts[1], category=parts[2])

    def label(self) -> str:
        return f"{self.source} -> {self.target}"


__all__ = ["UnitRecord", "ConversionRecord", "FavoriteRecord"]
