"""Offline unit conversion: catalog, resolver, engine and terminal front ends."""

from . import units
from .app import ConversionResult, ConverterApp
from .catalog import ALL_CATEGORIES, UnitCatalog, build_default_catalog
from .config import ConverterConfig
from .engine import ConversionEngine
from .errors import (
    CatalogError,
    ConverterError,
    IncompatibleUnits,
    InvalidValue,
    StorageUnavailable,
    UnknownCategory,
    UnknownUnit,
)
from .formatting import format_number
from .quick import QuickConversionParser, QuickRequest
from .records import ConversionRecord, FavoriteRecord, UnitRecord
from .resolver import UnitResolver
from .units import normalize, parse_prefixed, parse_quantity, parse_value

__version__ = "0.3.0"

__all__ = [
    "ALL_CATEGORIES",
    "CatalogError",
    "ConversionEngine",
    "ConversionRecord",
    "ConversionResult",
    "ConverterApp",
    "ConverterConfig",
    "ConverterError",
    "FavoriteRecord",
    "IncompatibleUnits",
    "InvalidValue",
    "QuickConversionParser",
    "QuickRequest",
    "StorageUnavailable",
    "UnitCatalog",
    "UnitRecord",
    "UnitResolver",
    "UnknownCategory",
    "UnknownUnit",
    "build_default_catalog",
    "format_number",
    "normalize",
    "parse_prefixed",
    "parse_quantity",
    "parse_value",
    "units",
]
