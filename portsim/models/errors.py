"""
Error types raised by cargo construction, registry lookups and the codec.
"""

from __future__ import annotations

from enum import Enum


class CargoError(Exception):
    """Base class for every cargo-related failure."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class CargoExistsError(CargoError, ValueError):
    """Construction requested for an id that is already live."""

    def __init__(self, cargo_id: int) -> None:
        self.cargo_id = cargo_id
        super().__init__(f"The specified cargo already exists: {cargo_id}")


class InvalidCargoIdError(CargoError, ValueError):
    """Construction requested with a negative id."""

    def __init__(self, cargo_id: int) -> None:
        self.cargo_id = cargo_id
        super().__init__(f"Cargo ID must be greater than or equal to 0: {cargo_id}")


class InvalidTonnageError(CargoError, ValueError):
    """Bulk cargo constructed with a negative tonnage."""

    def __init__(self, tonnage: int) -> None:
        self.tonnage = tonnage
        super().__init__(f"Bulk cargo tonnage must be greater than or equal to 0: {tonnage}")


class NoSuchCargoError(CargoError, LookupError):
    """Lookup requested for an id that is not in the registry."""

    def __init__(self, cargo_id: int) -> None:
        self.cargo_id = cargo_id
        super().__init__(f"The cargo with the specified id does not exist: {cargo_id}")


class DecodeErrorKind(Enum):
    MALFORMED_STRUCTURE = "malformed_structure"
    MALFORMED_NUMBER = "malformed_number"
    INVALID_ENUM_VALUE = "invalid_enum_value"
    IDENTITY_CONFLICT = "identity_conflict"
    INVALID_ID = "invalid_id"
    INVALID_TONNAGE = "invalid_tonnage"


class CargoDecodeError(CargoError):
    """
    Raised when a line of text does not decode to a cargo.

    `kind` names the rule that was violated and `fragment` holds the offending
    part of the input (the whole line when no narrower part applies). When the
    failure came from the cargo constructor, the constructor's exception is
    available as `__cause__`.
    """

    def __init__(self, kind: DecodeErrorKind, message: str, fragment: str = "") -> None:
        self.kind = kind
        self.fragment = fragment
        super().__init__(message)

    def __str__(self) -> str:
        return f"{self.message} [{self.kind.value}]"


class ManifestError(CargoError):
    """A manifest file line failed to decode."""

    def __init__(self, message: str, line_no: int) -> None:
        self.line_no = line_no
        super().__init__(f"line {line_no}: {message}")
