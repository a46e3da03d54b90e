"""
Registry of all cargo currently live in a simulation run.

One registry is created per run and handed to everything that constructs or
looks up cargo. It performs no locking; the simulation steps one tick at a
time and serializes access itself.
"""

from __future__ import annotations

import logging
from typing import Dict, List

from portsim.models.cargo import Cargo
from portsim.models.errors import CargoExistsError, InvalidCargoIdError, NoSuchCargoError

_LOG = logging.getLogger(__name__)


class CargoRegistry:
    """Maps cargo ids to the single live instance holding each id."""

    def __init__(self) -> None:
        self._cargo: Dict[int, Cargo] = {}

    def __len__(self) -> int:
        return len(self._cargo)

    def __contains__(self, cargo_id: object) -> bool:
        return cargo_id in self._cargo

    def __repr__(self) -> str:
        return f"CargoRegistry(size={len(self._cargo)})"

    def exists(self, cargo_id: int) -> bool:
        """True if a live cargo holds `cargo_id`."""
        return cargo_id in self._cargo

    def get_by_id(self, cargo_id: int) -> Cargo:
        try:
            return self._cargo[cargo_id]
        except KeyError:
            raise NoSuchCargoError(cargo_id) from None

    def snapshot(self) -> Dict[int, Cargo]:
        """Return a copy of the id -> cargo mapping. Changes to it do not reach the registry."""
        return dict(self._cargo)

    def ids(self) -> List[int]:
        """Live ids in ascending order."""
        return sorted(self._cargo)

    def ensure_available(self, cargo_id: int) -> None:
        """
        Raise if `cargo_id` cannot be given to a new cargo.

        An id already in use is reported before a negative id.
        """
        if cargo_id in self._cargo:
            raise CargoExistsError(cargo_id)
        if cargo_id < 0:
            raise InvalidCargoIdError(cargo_id)

    def register(self, cargo: Cargo) -> None:
        """Insert a freshly constructed cargo. Leaves the registry unchanged on failure."""
        self.ensure_available(cargo.id)
        self._cargo[cargo.id] = cargo
        _LOG.debug("Registered %s", cargo)

    def reset(self) -> None:
        """Drop every entry. Used between simulation runs and in tests."""
        count = len(self._cargo)
        self._cargo = {}
        _LOG.debug("Cargo registry reset (%d entries dropped)", count)
