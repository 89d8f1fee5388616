"""cargomap exception hierarchy."""

from __future__ import annotations


class CargoMapError(Exception):
    """Base exception for all cargomap errors."""


class InvalidColumnsError(CargoMapError, TypeError):
    """The columns argument is not a usable sequence of columns.

    Raised for malformed calls only. Messy manifest data never raises.
    """


class CatalogError(CargoMapError):
    """The field catalog is structurally invalid."""


class UnknownFieldError(CatalogError, KeyError):
    """A field was requested from a catalog that does not define it."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Field {field!r} is not defined in this catalog")
