"""
Basic settings and logging configuration for the port simulation cargo tools.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path


@dataclass(slots=True)
class Settings:
    """Application-level settings."""

    project_root: Path
    data_dir: Path
    log_path: Path
    log_level: int = logging.INFO

    @classmethod
    def default(cls, project_root: Path | None = None) -> "Settings":
        """Create default settings rooted at `project_root` (or the current working directory)."""
        root = Path(project_root) if project_root is not None else Path.cwd()
        data_dir = root / "portsim_data"
        data_dir.mkdir(parents=True, exist_ok=True)
        log_path = data_dir / "portsim.log"
        return cls(project_root=root, data_dir=data_dir, log_path=log_path)


def init_logging(settings: Settings) -> None:
    """Configure basic logging to console and file."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler(settings.log_path, encoding="utf-8"),
        ],
    )

    logging.getLogger(__name__).info("Logging initialized. Log file at %s", settings.log_path)
