"""Map profile configuration."""

from .config_loader import ConfigLoader, MapProfile, get_config

__all__ = [
    "ConfigLoader",
    "MapProfile",
    "get_config",
]
