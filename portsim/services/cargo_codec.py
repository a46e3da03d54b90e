"""
Machine-readable text form of cargo.

Encoded lines have the form

    Container:<id>:<destination>:<ContainerType>
    BulkCargo:<id>:<destination>:<BulkCargoType>:<tonnage>

e.g. ``Container:3:Australia:REEFER`` or ``BulkCargo:2:France:GRAIN:120``.
Destinations are written verbatim; a destination containing ``:`` cannot be
decoded back.

Decoding checks the input in stages (field count, integer fields, enum names)
and then hands identity and range checks to the cargo constructor. Each stage
reports its own DecodeErrorKind, and every failure reaches the caller as a
CargoDecodeError. Decoding constructs the cargo, so a decoded cargo is live in
the registry and an id that is already live fails to decode.
"""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import Callable, Dict, List, Tuple, Type, TypeVar

from portsim.config.limits import (
    BULK_CARGO_FIELD_COUNT,
    CONTAINER_FIELD_COUNT,
    FIELD_SEPARATOR,
    MAX_INT_FIELD,
    MIN_INT_FIELD,
)
from portsim.models.cargo import BulkCargo, BulkCargoType, Cargo, CargoKind, Container, ContainerType
from portsim.models.errors import (
    CargoDecodeError,
    CargoExistsError,
    DecodeErrorKind,
    InvalidCargoIdError,
    InvalidTonnageError,
)
from portsim.services.cargo_registry import CargoRegistry

_LOG = logging.getLogger(__name__)

_E = TypeVar("_E", bound=Enum)

_INT_RE = re.compile(r"[+-]?[0-9]+")

_VALID_FIELD_COUNTS = (CONTAINER_FIELD_COUNT, BULK_CARGO_FIELD_COUNT)


# -------------------------
# Encoding
# -------------------------

def encode_cargo(cargo: Cargo) -> str:
    """Return the encoded line for `cargo`."""
    kind = getattr(cargo, "kind", None)
    if kind is CargoKind.CONTAINER:
        fields = [kind.value, str(cargo.id), cargo.destination, cargo.container_type.name]
    elif kind is CargoKind.BULK_CARGO:
        fields = [
            kind.value,
            str(cargo.id),
            cargo.destination,
            cargo.bulk_type.name,
            str(cargo.tonnage),
        ]
    else:
        raise TypeError(f"Cannot encode object of type {type(cargo).__name__}")
    return FIELD_SEPARATOR.join(fields)


# -------------------------
# Decoding stages
# -------------------------

def _split_fields(text: str) -> List[str]:
    """Split on the separator, keeping empty fields, and check the field count."""
    fields = text.split(FIELD_SEPARATOR)
    if len(fields) not in _VALID_FIELD_COUNTS:
        raise CargoDecodeError(
            DecodeErrorKind.MALFORMED_STRUCTURE,
            f"Encoded cargo should contain {CONTAINER_FIELD_COUNT} or "
            f"{BULK_CARGO_FIELD_COUNT} fields, got {len(fields)}: {text!r}",
            text,
        )
    return fields


def _parse_int(value: str, *, field_name: str) -> int:
    """
    Parse a signed decimal integer field.

    Accepts an optional sign followed by ASCII digits, within the signed 32-bit
    range. Negative values are returned as-is; range rules belong to the cargo
    constructor.
    """
    if not _INT_RE.fullmatch(value):
        raise CargoDecodeError(
            DecodeErrorKind.MALFORMED_NUMBER,
            f"{field_name} must be an integer: {value!r}",
            value,
        )
    number = int(value)
    if not (MIN_INT_FIELD <= number <= MAX_INT_FIELD):
        raise CargoDecodeError(
            DecodeErrorKind.MALFORMED_NUMBER,
            f"{field_name} is out of integer range: {value!r}",
            value,
        )
    return number


def _parse_enum(enum_cls: Type[_E], value: str) -> _E:
    """Look up an enum member by its exact (case-sensitive) name."""
    try:
        return enum_cls[value]
    except KeyError:
        raise CargoDecodeError(
            DecodeErrorKind.INVALID_ENUM_VALUE,
            f"Invalid {enum_cls.__name__}: {value!r}",
            value,
        ) from None


def _build_container(fields: List[str], cargo_id: int, registry: CargoRegistry) -> Cargo:
    container_type = _parse_enum(ContainerType, fields[3])
    return Container(registry, cargo_id, fields[2], container_type)


def _build_bulk_cargo(fields: List[str], cargo_id: int, registry: CargoRegistry) -> Cargo:
    bulk_type = _parse_enum(BulkCargoType, fields[3])
    tonnage = _parse_int(fields[4], field_name="Bulk cargo tonnage")
    return BulkCargo(registry, cargo_id, fields[2], tonnage, bulk_type)


_Builder = Callable[[List[str], int, CargoRegistry], Cargo]

# (type tag, field count) -> builder
_BUILDERS: Dict[Tuple[str, int], _Builder] = {
    (CargoKind.CONTAINER.value, CONTAINER_FIELD_COUNT): _build_container,
    (CargoKind.BULK_CARGO.value, BULK_CARGO_FIELD_COUNT): _build_bulk_cargo,
}

# Constructor failures and the decode kind they are reported as
_CONSTRUCTION_ERRORS: Dict[type, DecodeErrorKind] = {
    CargoExistsError: DecodeErrorKind.IDENTITY_CONFLICT,
    InvalidCargoIdError: DecodeErrorKind.INVALID_ID,
    InvalidTonnageError: DecodeErrorKind.INVALID_TONNAGE,
}


def _decode(text: str, registry: CargoRegistry) -> Cargo:
    fields = _split_fields(text)
    cargo_id = _parse_int(fields[1], field_name="Cargo id")

    builder = _BUILDERS.get((fields[0], len(fields)))
    if builder is None:
        raise CargoDecodeError(
            DecodeErrorKind.MALFORMED_STRUCTURE,
            f"Unknown cargo type {fields[0]!r} for {len(fields)} fields",
            fields[0],
        )

    try:
        return builder(fields, cargo_id, registry)
    except (CargoExistsError, InvalidCargoIdError, InvalidTonnageError) as e:
        raise CargoDecodeError(_CONSTRUCTION_ERRORS[type(e)], e.message, text) from e


def decode_cargo(text: str, registry: CargoRegistry) -> Cargo:
    """
    Construct the cargo described by an encoded line.

    Raises CargoDecodeError if the line is malformed or the cargo cannot be
    constructed; the registry is left unchanged in that case.
    """
    try:
        return _decode(text, registry)
    except CargoDecodeError as e:
        _LOG.debug("Rejected cargo line %r: %s", text, e.kind.value)
        raise
