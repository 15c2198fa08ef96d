"""Simple configuration loader for grid_astar."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"

# Reference diagonal step factor, a 5-decimal truncation of sqrt(2).
REFERENCE_DIAGONAL_COST = 1.41421


@dataclass
class SearchConfig:
    """Defaults applied to grids and searches."""

    diagonal: bool = False
    closest: bool = False
    heuristic: Optional[str] = None
    diagonal_cost: float = REFERENCE_DIAGONAL_COST


@dataclass
class LoggingConfig:
    """Log levels for the library's loggers."""

    global_level: str = "WARNING"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class Config:
    """Top level configuration dataclass."""

    search: SearchConfig = field(default_factory=SearchConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _as_bool(value: Any, key: str) -> bool:
    """Return ``value`` if it is a YAML boolean, else raise ``ValueError``."""

    if not isinstance(value, bool):
        raise ValueError(f"config key '{key}' must be true or false, got {value!r}")
    return value


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    search_data = data.get("search") or {}
    heuristic = search_data.get("heuristic")
    search = SearchConfig(
        diagonal=_as_bool(search_data.get("diagonal", False), "search.diagonal"),
        closest=_as_bool(search_data.get("closest", False), "search.closest"),
        heuristic=str(heuristic) if heuristic else None,
        diagonal_cost=float(
            search_data.get("diagonal_cost", REFERENCE_DIAGONAL_COST)
        ),
    )

    logging_data = data.get("logging") or {}
    log_cfg = LoggingConfig(
        global_level=str(logging_data.get("global_level", "WARNING")).upper(),
        module_levels=dict(logging_data.get("module_levels") or {}),
    )

    return Config(search=search, logging=log_cfg)


def load_config(path: Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    path = Path(path)
    if path.is_file():
        raw = yaml.safe_load(path.read_text()) or {}
    else:
        raw = {}
    return _parse_config(raw)


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "Config",
    "SearchConfig",
    "LoggingConfig",
    "REFERENCE_DIAGONAL_COST",
    "load_config",
]
