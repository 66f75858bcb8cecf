"""Simulation settings grouped into dataclass sections."""

import json
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Tuple, Union

from .errors import ConfigError


@dataclass
class GridConfig:
    rows: int = 32
    cols: int = 32
    # Raise instead of dropping out-of-bounds or duplicate registrations
    strict: bool = False

    def to_tuple(self) -> Tuple[int, int]:
        return self.rows, self.cols


@dataclass
class SeedConfig:
    pattern: str = "glider"  # catalogue name, or "random"
    density: float = 0.3
    seed: Optional[int] = None
    position: Optional[Tuple[int, int]] = None  # top-left corner; centered when None


@dataclass
class RunConfig:
    generations: int = 100
    time_step: float = 1.0 / 60.0
    log_level: str = "INFO"


@dataclass
class SimulationConfig:
    grid: GridConfig = field(default_factory=GridConfig)
    seed: SeedConfig = field(default_factory=SeedConfig)
    run: RunConfig = field(default_factory=RunConfig)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def update_from_mapping(self, data: Dict[str, Any]) -> None:
        """Merge settings from a nested mapping into the config.

        Unknown sections or keys raise ``ConfigError`` so typos in a
        config file do not go unnoticed.
        """
        sections = dict(self.iter_sections())
        for section_name, section_values in data.items():
            section = sections.get(section_name)
            if section is None:
                raise ConfigError(f"Unknown config section: {section_name!r}")
            if not isinstance(section_values, dict):
                raise ConfigError(f"Config section {section_name!r} must be a mapping")
            known = {f.name for f in fields(section)}
            for key, value in section_values.items():
                if key not in known:
                    raise ConfigError(f"Unknown key {key!r} in section {section_name!r}")
                if key == "position" and value is not None:
                    value = tuple(value)
                setattr(section, key, value)

    def iter_sections(self) -> Iterable[Tuple[str, Any]]:
        yield "grid", self.grid
        yield "seed", self.seed
        yield "run", self.run


def load_config(path: Union[str, Path]) -> SimulationConfig:
    """Read a JSON file on top of the default configuration."""
    path = Path(path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Top level of {path} must be a JSON object")

    config = SimulationConfig()
    config.update_from_mapping(data)
    return config
