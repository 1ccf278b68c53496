"""Configuration settings using Pydantic Settings.

Holds the Scene Declaration Table in its text form, so it can come from
the environment or a ``.env`` file instead of code.

Usage:
    from scenecache.config import SceneCacheSettings

    # Load from environment variables (SCENECACHE_*)
    settings = SceneCacheSettings()

    # Or override with explicit values
    settings = SceneCacheSettings(
        scene_resources={"Menu": ["audio.se/click_sfx"]},
        initial_scene="Menu",
    )
    table = settings.declaration_table()
"""

from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from scenecache.core.identity import DEFAULT_NAMESPACE, ResourceId, SceneId


class SceneCacheSettings(BaseSettings):
    """Configuration for scene-scoped caches.

    Attributes:
        scene_resources: Scene name -> resource ids (``namespace/name`` or
            bare ``name``) to pre-warm when that scene loads.
        default_namespace: Namespace for bare resource names.
        initial_scene: Scene to pre-warm when the resource cache is created.

    Environment Variables:
        SCENECACHE_SCENE_RESOURCES (JSON object)
        SCENECACHE_DEFAULT_NAMESPACE
        SCENECACHE_INITIAL_SCENE
    """

    model_config = SettingsConfigDict(
        env_prefix="SCENECACHE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    scene_resources: dict[str, list[str]] = {}
    default_namespace: str = DEFAULT_NAMESPACE
    initial_scene: str | None = None

    @field_validator("scene_resources")
    @classmethod
    def _ids_parse(cls, value: dict[str, list[str]]) -> dict[str, list[str]]:
        for scene, resources in value.items():
            if not scene.strip():
                raise ValueError("Scene names must not be blank")
            for entry in resources:
                # Namespace does not affect validity, only the name part does.
                ResourceId.parse(entry)
        return value

    def declaration_table(self) -> dict[SceneId, tuple[ResourceId, ...]]:
        """Scene Declaration Table with typed identifiers, in configured order."""
        return {
            SceneId(scene): tuple(
                dict.fromkeys(
                    ResourceId.parse(entry, self.default_namespace) for entry in resources
                )
            )
            for scene, resources in self.scene_resources.items()
        }

    def initial_scene_id(self) -> SceneId | None:
        """Typed initial scene, if configured."""
        return SceneId(self.initial_scene) if self.initial_scene else None
