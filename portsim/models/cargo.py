"""
Cargo variants tracked by the port simulation.

A cargo is identified by its id and carries a destination port. The set of
variants is closed: Container and BulkCargo. Constructing a cargo registers it
with the CargoRegistry passed in, so every live cargo is reachable by id.
"""

from __future__ import annotations

from dataclasses import InitVar, dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, ClassVar

from portsim.models.errors import InvalidTonnageError

if TYPE_CHECKING:
    from portsim.services.cargo_registry import CargoRegistry


class CargoKind(Enum):
    """Variant tag. The value is the canonical type name used in text forms."""

    CONTAINER = "Container"
    BULK_CARGO = "BulkCargo"


class ContainerType(Enum):
    STANDARD = auto()
    REEFER = auto()
    OPEN_TOP = auto()
    FLAT_RACK = auto()
    OTHER = auto()


class BulkCargoType(Enum):
    GRAIN = auto()
    COAL = auto()
    MINERALS = auto()
    OIL = auto()
    OTHER = auto()


@dataclass(frozen=True, slots=True, eq=False)
class Cargo:
    """
    Base for all cargo variants.

    Two cargo are equal when they share id and destination; variant and
    variant-specific fields do not take part in equality or hashing.
    """

    registry: InitVar["CargoRegistry"]
    id: int
    destination: str

    kind: ClassVar[CargoKind]

    def __post_init__(self, registry: "CargoRegistry") -> None:
        if not hasattr(type(self), "kind"):
            raise TypeError("Cargo is abstract; construct Container or BulkCargo")
        registry.ensure_available(self.id)
        self._validate()
        registry.register(self)

    def _validate(self) -> None:
        """Variant-specific checks, run after id checks and before registration."""

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, Cargo):
            return NotImplemented
        return other.id == self.id and other.destination == self.destination

    def __hash__(self) -> int:
        return hash((self.id, self.destination))

    def __str__(self) -> str:
        """Human-readable form, e.g. ``Container 55 to New Zealand``."""
        return f"{self.kind.value} {self.id} to {self.destination}"


@dataclass(frozen=True, slots=True, eq=False)
class Container(Cargo):
    """General-purpose shipping container."""

    container_type: ContainerType

    kind: ClassVar[CargoKind] = CargoKind.CONTAINER


@dataclass(frozen=True, slots=True, eq=False)
class BulkCargo(Cargo):
    """Bulk commodity measured in tonnes."""

    tonnage: int
    bulk_type: BulkCargoType

    kind: ClassVar[CargoKind] = CargoKind.BULK_CARGO

    def _validate(self) -> None:
        if self.tonnage < 0:
            raise InvalidTonnageError(self.tonnage)
