"""Pytest configuration and fixtures."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure project root is on path when running tests
_project_root = Path(__file__).resolve().parents[2]
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from portsim.models import BulkCargo, BulkCargoType, Container, ContainerType
from portsim.services.cargo_registry import CargoRegistry


@pytest.fixture
def registry():
    """A fresh, empty registry for each test."""
    return CargoRegistry()


@pytest.fixture
def sample_container(registry):
    return Container(registry, 55, "New Zealand", ContainerType.STANDARD)


@pytest.fixture
def sample_bulk(registry):
    return BulkCargo(registry, 2, "France", 120, BulkCargoType.GRAIN)


@pytest.fixture
def manifest_path(tmp_path):
    """Path of a manifest file in a temporary directory (not created)."""
    return tmp_path / "manifest.txt"
