"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from dataclasses import dataclass

from scenecache import (
    EntityCache,
    KeyedResourceCache,
    LocalSceneGraph,
    MappingResourceLoader,
    ResourceId,
    SceneId,
)


@dataclass(slots=True)
class FixtureClickable:
    label: str


@dataclass(slots=True)
class FixtureClip:
    name: str


MENU = SceneId("Menu")
GAME = SceneId("Game")
CLICK = ResourceId("audio.se", "click_sfx")
JUMP = ResourceId("audio.se", "jump_sfx")
HIT = ResourceId("audio.se", "hit_sfx")


@pytest.fixture
def graph():
    """Fresh in-memory scene graph."""
    return LocalSceneGraph()


@pytest.fixture
def loader():
    """Loader that knows CLICK, JUMP and HIT."""
    return MappingResourceLoader(
        {
            CLICK: FixtureClip("click"),
            JUMP: FixtureClip("jump"),
            HIT: FixtureClip("hit"),
        }
    )


@pytest.fixture
def entity_cache(graph):
    return EntityCache(graph)


@pytest.fixture
def declarations():
    return {MENU: {CLICK}, GAME: {JUMP, HIT}}


@pytest.fixture
def resource_cache(loader, declarations):
    return KeyedResourceCache(loader, declarations)


@pytest.fixture
def clickable_cls():
    return FixtureClickable
