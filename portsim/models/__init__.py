"""
Domain models for the port simulation's cargo book-keeping.

These are pure Python/domain classes; the registry and codec that operate on
them live in portsim.services.
"""

from portsim.models.cargo import (
    BulkCargo,
    BulkCargoType,
    Cargo,
    CargoKind,
    Container,
    ContainerType,
)
from portsim.models.errors import (
    CargoDecodeError,
    CargoError,
    CargoExistsError,
    DecodeErrorKind,
    InvalidCargoIdError,
    InvalidTonnageError,
    ManifestError,
    NoSuchCargoError,
)

__all__ = [
    "Cargo",
    "CargoKind",
    "Container",
    "ContainerType",
    "BulkCargo",
    "BulkCargoType",
    "CargoError",
    "CargoExistsError",
    "InvalidCargoIdError",
    "InvalidTonnageError",
    "NoSuchCargoError",
    "CargoDecodeError",
    "DecodeErrorKind",
    "ManifestError",
]
