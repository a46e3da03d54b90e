"""Tests for manifest file save/load."""

from __future__ import annotations

import logging

import pytest

from portsim.models import (
    BulkCargo,
    BulkCargoType,
    CargoDecodeError,
    Container,
    ContainerType,
    DecodeErrorKind,
    ManifestError,
)
from portsim.services.cargo_registry import CargoRegistry
from portsim.services.manifest_service import load_manifest, save_manifest


class TestSaveManifest:
    def test_one_line_per_cargo(self, manifest_path, sample_container, sample_bulk):
        written = save_manifest(manifest_path, [sample_container, sample_bulk])
        assert written == 2
        assert manifest_path.read_text(encoding="utf-8") == (
            "Container:55:New Zealand:STANDARD\n"
            "BulkCargo:2:France:GRAIN:120\n"
        )

    def test_empty(self, manifest_path):
        assert save_manifest(manifest_path, []) == 0
        assert manifest_path.read_text(encoding="utf-8") == ""


class TestLoadManifest:
    def test_round_trip(self, manifest_path, registry, sample_container, sample_bulk):
        save_manifest(manifest_path, [sample_container, sample_bulk])
        registry.reset()
        loaded = load_manifest(manifest_path, registry)
        assert loaded == [sample_container, sample_bulk]
        assert isinstance(loaded[0], Container)
        assert isinstance(loaded[1], BulkCargo)
        assert registry.ids() == [2, 55]

    def test_skips_blank_lines(self, manifest_path, registry):
        manifest_path.write_text(
            "\nContainer:1:Peru:REEFER\n   \r\nBulkCargo:2:Chile:COAL:40\r\n\n",
            encoding="utf-8",
        )
        loaded = load_manifest(manifest_path, registry)
        assert [c.id for c in loaded] == [1, 2]
        assert loaded[1].tonnage == 40

    def test_bad_line_reports_line_number(self, manifest_path, registry):
        manifest_path.write_text(
            "Container:1:Peru:REEFER\n\nContainer:2:Peru:MYSTERY\nContainer:3:Peru:OTHER\n",
            encoding="utf-8",
        )
        with pytest.raises(ManifestError) as exc:
            load_manifest(manifest_path, registry)
        assert exc.value.line_no == 3
        assert isinstance(exc.value.__cause__, CargoDecodeError)
        assert exc.value.__cause__.kind is DecodeErrorKind.INVALID_ENUM_VALUE
        # earlier lines stay registered, later ones are never read
        assert registry.ids() == [1]

    def test_duplicate_against_live_registry(self, manifest_path, registry, sample_container):
        manifest_path.write_text("Container:55:Chile:REEFER\n", encoding="utf-8")
        with pytest.raises(ManifestError) as exc:
            load_manifest(manifest_path, registry)
        assert exc.value.__cause__.kind is DecodeErrorKind.IDENTITY_CONFLICT
        assert registry.get_by_id(55) is sample_container

    def test_missing_file(self, manifest_path, registry):
        with pytest.raises(FileNotFoundError):
            load_manifest(manifest_path, registry)

    def test_into_fresh_registry(self, manifest_path, registry, sample_container):
        save_manifest(manifest_path, [sample_container])
        other = CargoRegistry()
        loaded = load_manifest(manifest_path, other)
        assert loaded == [sample_container]
        assert other.get_by_id(55) is not sample_container

    def test_invalid_utf8_reports_line_number(self, manifest_path, registry):
        manifest_path.write_bytes(b"Container:1:Peru:REEFER\nContainer:2:Cura\xe7ao:STANDARD\n")
        with pytest.raises(ManifestError) as exc:
            load_manifest(manifest_path, registry)
        assert exc.value.line_no == 2
        assert isinstance(exc.value.__cause__, UnicodeDecodeError)
        assert registry.ids() == [1]


class TestManifestLogging:
    def test_save_logs_info(self, manifest_path, sample_container, caplog):
        with caplog.at_level(logging.INFO, logger="portsim.services.manifest_service"):
            save_manifest(manifest_path, [sample_container])
        assert any(
            r.levelno == logging.INFO and "Saved 1 cargo" in r.getMessage() for r in caplog.records
        )

    def test_load_logs_info(self, manifest_path, registry, caplog):
        manifest_path.write_text("Container:1:Peru:REEFER\n", encoding="utf-8")
        with caplog.at_level(logging.INFO, logger="portsim.services.manifest_service"):
            load_manifest(manifest_path, registry)
        assert any(
            r.levelno == logging.INFO and "Loaded 1 cargo" in r.getMessage() for r in caplog.records
        )
