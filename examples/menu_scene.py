"""Minimal host loop: two scenes, one button, one sound effect.

Run with: python examples/menu_scene.py
"""

import logging
from dataclasses import dataclass

from scenecache import (
    LocalSceneGraph,
    MappingResourceLoader,
    ResourceId,
    SceneCacheSettings,
    SceneId,
    SceneTransitionCoordinator,
)


@dataclass
class Clickable:
    label: str


@dataclass
class AudioClip:
    name: str


MENU = SceneId("Menu")
STAGE = SceneId("Stage1")
CLICK = ResourceId("audio.se", "click_sfx")


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)

    graph = LocalSceneGraph()
    canvas = graph.spawn("Canvas", scene=MENU)
    graph.spawn("StartButton", Clickable("Start"), parent=canvas)
    graph.spawn("Player", scene=STAGE)

    loader = MappingResourceLoader({CLICK: AudioClip("click")})
    settings = SceneCacheSettings(scene_resources={"Menu": ["audio.se/click_sfx"]})
    coordinator = SceneTransitionCoordinator.from_settings(graph, loader, settings)

    for scene in (MENU, STAGE, MENU):
        graph.load_scene(scene)
        coordinator.notify_scene_loaded(scene)
        button = coordinator.entities.get_typed("StartButton", Clickable)
        print(f"{scene}: button={button} click={coordinator.resources.get(CLICK)}")

    print("entity cache:", coordinator.entities.stats.to_dict())
    print("resource cache:", coordinator.resources.stats.to_dict())


if __name__ == "__main__":
    main()
