"""Runtime settings for griddy, read from ``configs/griddy_config.yaml``."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

_DEFAULT_PATH = Path(__file__).resolve().parents[2] / "configs" / "griddy_config.yaml"


def load_config(path: str) -> Dict[str, Any]:
    """Read grid settings from a ``.yaml``/``.yml`` or ``.json`` file."""
    path_p = Path(path)
    with open(path_p, "r", encoding="utf-8") as f:
        if path_p.suffix in {".yaml", ".yml"}:
            return yaml.safe_load(f) or {}
        if path_p.suffix == ".json":
            return json.load(f)
        raise ValueError("Unsupported config format")


def load_griddy_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Return the settings at ``path`` (the bundled file by default).

    A missing file means every setting keeps its built-in default.
    """
    path = _DEFAULT_PATH if path is None else path
    return load_config(str(path)) if path.exists() else {}


GRIDDY_CONFIG: Dict[str, Any] = load_griddy_config()
LOG_LEVEL: str = str(GRIDDY_CONFIG.get("log_level", "WARNING")).upper()
STRICT_SQUARE_ROTATION: bool = bool(GRIDDY_CONFIG.get("strict_square_rotation", False))


def set_strict_square_rotation(value: bool) -> None:
    """Make ``Grid.rotate`` reject non-square grids."""
    global STRICT_SQUARE_ROTATION
    STRICT_SQUARE_ROTATION = value
    GRIDDY_CONFIG["strict_square_rotation"] = value


def set_log_level(value: str) -> None:
    """Change the level of every ``griddy`` logger, including existing ones."""
    global LOG_LEVEL
    LOG_LEVEL = value.upper()
    GRIDDY_CONFIG["log_level"] = LOG_LEVEL
    level = getattr(logging, LOG_LEVEL, logging.WARNING)
    for name in list(logging.root.manager.loggerDict):
        if name == "griddy" or name.startswith("griddy."):
            logging.getLogger(name).setLevel(level)


def print_runtime_config() -> None:
    """Print the grid settings currently in effect."""
    print("griddy settings:")
    print(f"  log_level: {LOG_LEVEL}")
    print(f"  strict_square_rotation: {STRICT_SQUARE_ROTATION}")
