"""Static unit table grouped into categories."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .errors import CatalogError
from .records import UnitRecord

ALL_CATEGORIES = "All"
TEMPERATURE_SYMBOLS = ("C", "F", "K")


class UnitCatalog:
    """Read-only, ordered collection of :class:`UnitRecord` objects.

    Category order defines menu order. Symbols may repeat across categories;
    callers scope lookups by category, and under ``"All"`` the first record in
    catalog order wins.
    """

    def __init__(self, units: Iterable[UnitRecord], categories: Sequence[str]) -> None:
        self._units: Tuple[UnitRecord, ...] = tuple(units)
        self._categories: Tuple[str, ...] = tuple(categories)
        self._validate()

    def all_units(self) -> Tuple[UnitRecord, ...]:
        return self._units

    def categories(self) -> Tuple[str, ...]:
        return self._categories

    def units_in(self, category: str) -> Tuple[UnitRecord, ...]:
        if category == ALL_CATEGORIES:
            return self._units
        return tuple(unit for unit in self._units if unit.category == category)

    def find_category(self, name: str) -> Optional[str]:
        """Return the canonical spelling of *name* (case-insensitive), if known."""

        wanted = "".join(name.split()).upper()
        if wanted == ALL_CATEGORIES.upper():
            return ALL_CATEGORIES
        for category in self._categories:
            if "".join(category.split()).upper() == wanted:
                return category
        return None

    def find(self, name_or_symbol: str) -> Optional[UnitRecord]:
        """Look a unit up by its exact name or symbol, falling back to a folded match."""

        text = name_or_symbol.strip()
        if not text:
            return None
        for unit in self._units:
            if text in (unit.name, unit.symbol):
                return unit
        folded = text.casefold()
        for unit in self._units:
            if folded == unit.name.casefold():
                return unit
            if not unit.case_sensitive and folded == unit.symbol.casefold():
                return unit
        return None

    def __len__(self) -> int:
        return len(self._units)

    def __iter__(self):
        return iter(self._units)

    # ------------------------------------------------------------------ checks
    def _validate(self) -> None:
        known = set(self._categories)
        if len(known) != len(self._categories):
            raise CatalogError("Category names must be unique.")
        names_seen: Dict[Tuple[str, str], UnitRecord] = {}
        for unit in self._units:
            if unit.category not in known:
                raise CatalogError(f"Unit '{unit.name}' uses unlisted category '{unit.category}'.")
            if not unit.symbol.strip():
                raise CatalogError(f"Unit '{unit.name}' has an empty symbol.")
            if not unit.factor > 0:
                raise CatalogError(f"Unit '{unit.name}' must have a positive factor.")
            key = (unit.category, unit.name)
            if key in names_seen:
                raise CatalogError(f"Duplicate unit name '{unit.name}' in {unit.category}.")
            names_seen[key] = unit

        for category in self._categories:
            members = [unit for unit in self._units if unit.category == category]
            if not members:
                raise CatalogError(f"Category '{category}' has no units.")
            temperature_flags = {unit.is_temperature for unit in members}
            if len(temperature_flags) > 1:
                raise CatalogError(f"Category '{category}' mixes temperature and linear units.")
            if temperature_flags == {True}:
                unsupported = [unit.symbol for unit in members if unit.symbol not in TEMPERATURE_SYMBOLS]
                if unsupported:
                    raise CatalogError(f"No temperature formula for {unsupported}.")
                continue
            bases = [unit.name for unit in members if unit.factor == 1.0]
            if len(bases) != 1:
                raise CatalogError(
                    f"Category '{category}' needs exactly one base unit with factor 1.0, found {bases}."
                )


def _unit(
    name: str,
    symbol: str,
    factor: float,
    category: str,
    *aliases: str,
    description: str = "",
    case_sensitive: bool = False,
    is_temperature: bool = False,
) -> UnitRecord:
    return UnitRecord(
        name=name,
        symbol=symbol,
        factor=factor,
        category=category,
        is_temperature=is_temperature,
        aliases=tuple(aliases),
        case_sensitive=case_sensitive,
        description=description,
    )


DEFAULT_CATEGORIES: Tuple[str, ...] = (
    "Length",
    "Temperature",
    "Digital Storage",
    "Data",
    "Mass",
    "Time",
    "Volume",
    "Area",
    "Speed",
    "Energy",
    "Power",
    "Pressure",
)


def _default_units() -> List[UnitRecord]:
    return [
        # Length
        _unit("Meter", "m", 1.0, "Length", "metre", "meter", description="Base unit of length in the metric system"),
        _unit("Kilometer", "km", 1000.0, "Length", "kilometre", "kilometer", description="1000 meters, commonly used for long distances"),
        _unit("Centimeter", "cm", 0.01, "Length", "centimetre", "centimeter", description="One hundredth of a meter"),
        _unit("Millimeter", "mm", 0.001, "Length", "millimetre", "millimeter", description="One thousandth of a meter"),
        _unit("Inch", "in", 0.0254, "Length", "inch", "inches", description="Imperial unit of length, 1/12 of a foot"),
        _unit("Foot", "ft", 0.3048, "Length", "foot", "feet", description="Imperial unit of length, 12 inches"),
        _unit("Yard", "yd", 0.9144, "Length", "yard", description="Imperial unit of length, 3 feet"),
        _unit("Mile", "mi", 1609.344, "Length", "mile", description="Imperial unit of length, 5280 feet"),
        _unit("Light Year", "ly", 9.461e15, "Length", "lightyear", description="Distance light travels in one year"),
        # Temperature
        _unit("Celsius", "C", 1.0, "Temperature", "celsius", "degC", is_temperature=True, description="Water freezes at 0 and boils at 100"),
        _unit("Fahrenheit", "F", 1.0, "Temperature", "fahrenheit", "degF", is_temperature=True, description="Water freezes at 32 and boils at 212"),
        _unit("Kelvin", "K", 1.0, "Temperature", "kelvin", is_temperature=True, description="Absolute scale, 0 K is absolute zero"),
        # Digital Storage: binary multiples on a bit base
        _unit("Bit", "b", 1.0, "Digital Storage", "bit", case_sensitive=True, description="Smallest unit of digital information"),
        _unit("Byte", "B", 8.0, "Digital Storage", "byte", case_sensitive=True, description="8 bits, basic unit of digital storage"),
        _unit("Kilobyte", "KB", 8192.0, "Digital Storage", description="1024 bytes"),
        _unit("Megabyte", "MB", 8388608.0, "Digital Storage", description="1024 kilobytes"),
        _unit("Gigabyte", "GB", 8589934592.0, "Digital Storage", description="1024 megabytes"),
        _unit("Terabyte", "TB", 8796093022208.0, "Digital Storage", description="1024 gigabytes"),
        # Data: decimal multiples on a byte base
        _unit("Byte", "B", 1.0, "Data", "byte", case_sensitive=True, description="Basic addressable unit of data"),
        _unit("Kilobyte", "KB", 1e3, "Data", description="1000 bytes"),
        _unit("Megabyte", "MB", 1e6, "Data", description="1000 kilobytes"),
        _unit("Gigabyte", "GB", 1e9, "Data", description="1000 megabytes"),
        _unit("Terabyte", "TB", 1e12, "Data", description="1000 gigabytes"),
        # Mass
        _unit("Gram", "g", 1.0, "Mass", "gram", description="Base unit of mass for this table"),
        _unit("Kilogram", "kg", 1000.0, "Mass", "kilogram", description="SI base unit of mass, 1000 grams"),
        _unit("Milligram", "mg", 0.001, "Mass", "milligram", description="One thousandth of a gram"),
        _unit("Pound", "lb", 453.59237, "Mass", "lbs", "pound", description="Avoirdupois pound"),
        _unit("Ounce", "oz", 28.349523125, "Mass", "ounce", description="1/16 of a pound"),
        # Time
        _unit("Second", "s", 1.0, "Time", "sec", "second", description="SI base unit of time"),
        _unit("Minute", "min", 60.0, "Time", "minute", description="60 seconds"),
        _unit("Hour", "hr", 3600.0, "Time", "h", "hour", description="60 minutes"),
        _unit("Day", "day", 86400.0, "Time", "d", "days", description="24 hours"),
        _unit("Week", "week", 604800.0, "Time", "wk", "weeks", description="7 days"),
        # Volume
        _unit("Liter", "L", 1.0, "Volume", "litre", "liter", description="Metric unit of volume, one cubic decimetre"),
        _unit("Milliliter", "mL", 0.001, "Volume", "millilitre", "milliliter", description="One thousandth of a liter"),
        _unit("Gallon", "gal", 3.785411784, "Volume", "gallon", description="US liquid gallon"),
        _unit("Quart", "qt", 0.946352946, "Volume", "quart", description="US liquid quart, 1/4 gallon"),
        _unit("Pint", "pt", 0.473176473, "Volume", "pint", description="US liquid pint, 1/2 quart"),
        # Area
        _unit("Square Meter", "m2", 1.0, "Area", "sqm", description="Area of a one meter square"),
        _unit("Square Kilometer", "km2", 1000000.0, "Area", "sqkm", description="One million square meters"),
        _unit("Square Foot", "ft2", 0.09290304, "Area", "sqft", description="Area of a one foot square"),
        _unit("Square Mile", "mi2", 2589988.110336, "Area", "sqmi", description="Area of a one mile square"),
        _unit("Acre", "ac", 4046.8564224, "Area", "acre", "acres", description="43560 square feet"),
        # Speed
        _unit("Meter per Second", "m/s", 1.0, "Speed", "mps", description="SI unit of speed"),
        _unit("Kilometer per Hour", "km/h", 1 / 3.6, "Speed", "kph", "kmh", description="1000 meters per hour"),
        _unit("Mile per Hour", "mph", 0.44704, "Speed", "mi/h", description="One mile per hour"),
        _unit("Knot", "kt", 1852 / 3600, "Speed", "knot", "kn", description="One nautical mile per hour"),
        # Energy
        _unit("Joule", "J", 1.0, "Energy", "joule", description="SI unit of energy"),
        _unit("Calorie", "cal", 4.184, "Energy", "calorie", description="Energy needed to raise 1 g of water by 1 degree C"),
        _unit("Kilowatt Hour", "kWh", 3600000.0, "Energy", description="1 kilowatt of power for 1 hour"),
        _unit("Electron Volt", "eV", 1.602176634e-19, "Energy", description="Energy gained by an electron moving through 1 volt"),
        # Power
        _unit("Watt", "W", 1.0, "Power", "watt", description="SI unit of power"),
        _unit("Horsepower", "hp", 745.7, "Power", "horsepower", description="Mechanical horsepower, about 550 foot-pounds per second"),
        _unit("Kilowatt", "kW", 1000.0, "Power", "kilowatt", description="1000 watts"),
        # Pressure
        _unit("Pascal", "Pa", 1.0, "Pressure", "pascal", description="SI unit of pressure"),
        _unit("Bar", "bar", 100000.0, "Pressure", description="100,000 pascals"),
        _unit("Atmosphere", "atm", 101325.0, "Pressure", description="Standard atmospheric pressure"),
        _unit("PSI", "psi", 6894.757293168, "Pressure", description="Pounds per square inch"),
    ]


def build_default_catalog() -> UnitCatalog:
    """Return the catalog shipped with the converter."""

    return UnitCatalog(_default_units(), DEFAULT_CATEGORIES)


__all__ = [
    "ALL_CATEGORIES",
    "DEFAULT_CATEGORIES",
    "TEMPERATURE_SYMBOLS",
    "UnitCatalog",
    "build_default_catalog",
]
