"""Configuration module using Pydantic Settings.

Usage:
    from scenecache.config import SceneCacheSettings

    settings = SceneCacheSettings(scene_resources={"Menu": ["audio.se/click_sfx"]})
"""

from scenecache.config.settings import SceneCacheSettings

__all__ = [
    "SceneCacheSettings",
]
