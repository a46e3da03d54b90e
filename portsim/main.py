"""
Inspect a cargo manifest file.

    python -m portsim.main path/to/manifest.txt [--encoded] [--data-dir DIR]

Loads the manifest into a fresh registry and prints one line per cargo.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from portsim.config.settings import Settings, init_logging
from portsim.models.errors import ManifestError
from portsim.services.cargo_codec import encode_cargo
from portsim.services.cargo_registry import CargoRegistry
from portsim.services.manifest_service import load_manifest


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="List the cargo in a manifest file")
    parser.add_argument("manifest", type=Path, help="Manifest file, one encoded cargo per line")
    parser.add_argument("--encoded", action="store_true", help="Print encoded lines instead of descriptions")
    parser.add_argument("--data-dir", type=Path, help="Directory for the log file (default: ./portsim_data)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    if args.data_dir:
        args.data_dir.mkdir(parents=True, exist_ok=True)
        settings = Settings(
            project_root=Path.cwd(),
            data_dir=args.data_dir,
            log_path=args.data_dir / "portsim.log",
        )
    else:
        settings = Settings.default()
    init_logging(settings)

    registry = CargoRegistry()
    try:
        cargo = load_manifest(args.manifest, registry)
    except (OSError, ManifestError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for c in cargo:
        print(encode_cargo(c) if args.encoded else str(c))
    return 0


if __name__ == "__main__":
    sys.exit(main())
