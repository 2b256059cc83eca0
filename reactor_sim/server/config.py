"""
Server Configuration

Settings for the HTTP server and the tick loop, loadable from a YAML file.
"""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from ..exceptions import ConfigError


@dataclass
class ServerConfig:
    """Configuration for the reactor server"""

    # HTTP
    host: str = "0.0.0.0"
    port: int = 80
    static_dir: str = "frontend"                # served at / if it exists
    fallback_static_dir: str = "static"

    # Tick loop
    tick_interval: float = 0.05                 # s wall clock between ticks
    tick_dt: float = 0.2                        # s simulated time per tick

    log_level: str = "INFO"
    seed: Optional[int] = None                  # grid load random seed

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ServerConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")
        return cls(**data)

    @classmethod
    def from_yaml_file(cls, path: Union[str, Path]) -> "ServerConfig":
        """
        Load configuration from a YAML file

        Args:
            path: Path to a YAML file holding a mapping of ServerConfig fields

        Returns:
            ServerConfig with file values over the defaults

        Raises:
            ConfigError: If the file is missing, malformed or has unknown keys
        """
        yaml_path = Path(path)
        if not yaml_path.exists():
            raise ConfigError(f"Configuration file not found: {yaml_path}")

        try:
            with open(yaml_path, "r", encoding="utf-8") as f:
                loaded = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Error parsing YAML file {yaml_path}: {e}") from e

        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ConfigError(f"Configuration file must contain a mapping: {yaml_path}")

        return cls.from_dict(loaded)

    def resolve_static_dir(self) -> Optional[Path]:
        """First existing static directory, or None"""
        for candidate in (self.static_dir, self.fallback_static_dir):
            if candidate and Path(candidate).is_dir():
                return Path(candidate)
        return None
