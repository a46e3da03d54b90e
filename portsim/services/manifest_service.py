"""
Manifest files: plain UTF-8 text holding one encoded cargo per line.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

from portsim.models.cargo import Cargo
from portsim.models.errors import CargoDecodeError, ManifestError
from portsim.services.cargo_codec import decode_cargo, encode_cargo
from portsim.services.cargo_registry import CargoRegistry

_LOG = logging.getLogger(__name__)


def save_manifest(filepath: Path, cargo: Iterable[Cargo]) -> int:
    """
    Write cargo to a manifest file in the given order.

    Args:
        filepath: Path where to save the file
        cargo: The cargo to encode

    Returns:
        Number of lines written.
    """
    lines = [encode_cargo(c) for c in cargo]
    with open(filepath, "w", encoding="utf-8", newline="\n") as f:
        for line in lines:
            f.write(line + "\n")
    _LOG.info("Saved %d cargo to %s", len(lines), filepath)
    return len(lines)


def load_manifest(filepath: Path, registry: CargoRegistry) -> List[Cargo]:
    """
    Decode every non-blank line of a manifest file into `registry`.

    Stops at the first line that is not valid UTF-8 or fails to decode as
    cargo, and raises ManifestError with its line number. Cargo decoded from
    earlier lines stays registered.
    """
    loaded: List[Cargo] = []
    with open(filepath, "rb") as f:
        for line_no, raw in enumerate(f, start=1):
            try:
                line = raw.decode("utf-8").rstrip("\r\n")
            except UnicodeDecodeError as e:
                raise ManifestError(f"not valid UTF-8: {e}", line_no) from e
            if not line.strip():
                continue
            try:
                loaded.append(decode_cargo(line, registry))
            except CargoDecodeError as e:
                raise ManifestError(str(e), line_no) from e
    _LOG.info("Loaded %d cargo from %s", len(loaded), filepath)
    return loaded
