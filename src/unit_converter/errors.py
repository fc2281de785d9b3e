"""Exception types raised by the converter."""

from __future__ import annotations


class ConverterError(Exception):
    """Base class for every recoverable converter error."""


class CatalogError(ConverterError):
    """Raised when a unit table violates its structural invariants."""


class UnknownUnit(ConverterError, ValueError):
    """Raised when a token does not name a unit in the requested scope."""

    def __init__(self, token: str, scope: str = "All") -> None:
        self.token = token
        self.scope = scope
        where = "any category" if scope == "All" else f"category '{scope}'"
        super().__init__(f"Unknown unit '{token}' in {where}.")


class UnknownCategory(ConverterError, ValueError):
    """Raised when a category name is not part of the catalog."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown category '{name}'.")


class IncompatibleUnits(ConverterError, ValueError):
    """Raised when two resolved units cannot be converted into each other."""

    def __init__(self, source: str, target: str, reason: str = "") -> None:
        self.source = source
        self.target = target
        message = f"Cannot convert '{source}' to '{target}'"
        super().__init__(f"{message}: {reason}" if reason else f"{message}.")


class InvalidValue(ConverterError, ValueError):
    """Raised when a numeric literal cannot be parsed."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Could not parse a number from '{text}'.")


class StorageUnavailable(ConverterError):
    """Raised when the history or favorites file cannot be read or written."""

    def __init__(self, path, operation: str) -> None:
        self.path = path
        self.operation = operation
        super().__init__(f"Could not {operation} '{path}'.")


__all__ = [
    "ConverterError",
    "CatalogError",
    "UnknownUnit",
    "UnknownCategory",
    "IncompatibleUnits",
    "InvalidValue",
    "StorageUnavailable",
]
