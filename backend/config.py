"""
Configuration loader for the route finder service.

Loads YAML profiles from the config/ folder, merged over config/default.yaml.
Usage:
    from backend.config import load_config
    cfg = load_config("dev")  # config/dev.yaml merged with default.yaml
"""

from typing import List, Optional
from dataclasses import dataclass, field
from pathlib import Path

import yaml

PROJECT_ROOT = Path(__file__).resolve().parent.parent
CONFIG_DIR = PROJECT_ROOT / "config"


@dataclass
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False


@dataclass
class LoggingConfig:
    level: str = "INFO"
    log_dir: Optional[str] = None  # None = console only


@dataclass
class GraphConfig:
    file: str = ""  # empty = built-in reference map


@dataclass
class CorsConfig:
    origins: List[str] = field(default_factory=lambda: [
        "http://localhost:5173",  # Vite default
        "http://localhost:3000",  # CRA/Next.js
    ])


@dataclass
class Config:
    server: ServerConfig = field(default_factory=ServerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    graph: GraphConfig = field(default_factory=GraphConfig)
    cors: CorsConfig = field(default_factory=CorsConfig)


def deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge override into a copy of base."""
    result = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_yaml(path: Path) -> dict:
    """Load a YAML file, {} if it does not exist."""
    if not path.exists():
        return {}
    with open(path, 'r') as f:
        return yaml.safe_load(f) or {}


def dict_to_config(data: dict) -> Config:
    """Convert a dictionary to a Config dataclass. Unknown keys are ignored."""
    cfg = Config()
    for section in ("server", "logging", "graph", "cors"):
        values = data.get(section) or {}
        target = getattr(cfg, section)
        for k, v in values.items():
            if hasattr(target, k):
                setattr(target, k, v)
    return cfg


def load_config(profile: str = "default", config_dir: Path = CONFIG_DIR) -> Config:
    """
    Load configuration from a profile.

    Args:
        profile: Name of the config file (without .yaml extension)
        config_dir: Folder holding default.yaml and the profile files

    Returns:
        Config with default.yaml + <profile>.yaml merged
    """
    data = load_yaml(config_dir / "default.yaml")
    if profile != "default":
        data = deep_merge(data, load_yaml(config_dir / f"{profile}.yaml"))

    cfg = dict_to_config(data)

    # relative graph file is taken from the project root
    if cfg.graph.file and not Path(cfg.graph.file).is_absolute():
        cfg.graph.file = str(PROJECT_ROOT / cfg.graph.file)
    return cfg
