"""
Configuration loader for map profiles and environment variables.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Any, Optional
import yaml

from ..presentation.layout import EXPANDED_RADIUS_PX
from ..spatial.clustering import ClusterOptions
from ..spatial.projection import BAY_AREA_BOUNDS, ViewportBounds

DEFAULT_PROFILE = "bay-area"


@dataclass(frozen=True)
class MapProfile:
    """Viewport, clustering parameters and layout for one map."""

    name: str
    bounds: ViewportBounds = BAY_AREA_BOUNDS
    clustering: ClusterOptions = ClusterOptions()
    expanded_radius: float = EXPANDED_RADIUS_PX

    @classmethod
    def from_dict(cls, name: str, data: Dict[str, Any]) -> "MapProfile":
        """
        Build a profile from parsed YAML. Missing sections use defaults.

        Raises:
            ValueError: If a bounds, clustering or layout value is invalid
        """
        data = data or {}
        bounds = data.get("bounds") or {}
        clustering = data.get("clustering") or {}
        layout = data.get("layout") or {}

        try:
            viewport = ViewportBounds(
                north=float(bounds.get("north", BAY_AREA_BOUNDS.north)),
                south=float(bounds.get("south", BAY_AREA_BOUNDS.south)),
                east=float(bounds.get("east", BAY_AREA_BOUNDS.east)),
                west=float(bounds.get("west", BAY_AREA_BOUNDS.west)),
            )
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Invalid bounds in profile '{name}': {exc}") from exc

        try:
            options = ClusterOptions(
                radius=float(clustering.get("radius", 8.0)),
                min_cluster_size=int(clustering.get("min_cluster_size", 2)),
            )
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Invalid clustering in profile '{name}': {exc}") from exc

        try:
            expanded_radius = float(layout.get("expanded_radius", EXPANDED_RADIUS_PX))
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Invalid layout in profile '{name}': {exc}") from exc

        return cls(
            name=name,
            bounds=viewport,
            clustering=options,
            expanded_radius=expanded_radius,
        )


class ConfigLoader:
    """Load and manage configuration from YAML files and environment."""

    CONFIG_DIR = Path(__file__).parent.parent / "configs"

    @classmethod
    def load_raw_profile(cls, profile_name: str = DEFAULT_PROFILE) -> Dict[str, Any]:
        """
        Load a map profile as a plain dictionary.

        Args:
            profile_name: Name of the profile (bay-area, sf-downtown)

        Returns:
            Dictionary with configuration values

        Raises:
            FileNotFoundError: If profile doesn't exist
        """
        profile_path = cls.CONFIG_DIR / f"{profile_name}.yaml"

        if not profile_path.exists():
            available = sorted(f.stem for f in cls.CONFIG_DIR.glob("*.yaml"))
            raise FileNotFoundError(
                f"Profile '{profile_name}' not found. Available profiles: {', '.join(available)}"
            )

        with open(profile_path, "r") as f:
            return yaml.safe_load(f) or {}

    @classmethod
    def load_map_profile(cls, profile_name: str = DEFAULT_PROFILE) -> MapProfile:
        """Load a map profile into a ``MapProfile``."""
        return MapProfile.from_dict(profile_name, cls.load_raw_profile(profile_name))

    @classmethod
    def get_profile_from_env(cls) -> Optional[str]:
        """Get map profile name from MAP_PROFILE environment variable."""
        return os.getenv("MAP_PROFILE")

    @classmethod
    def load_default_or_env_profile(cls) -> MapProfile:
        """
        Load map profile from environment variable or use bay-area default.

        Returns:
            MapProfile
        """
        profile = cls.get_profile_from_env() or DEFAULT_PROFILE
        return cls.load_map_profile(profile)


def get_config() -> MapProfile:
    """Convenience function to get current configuration."""
    return ConfigLoader.load_default_or_env_profile()
