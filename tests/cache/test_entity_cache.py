"""Tests for EntityCache.

Critical Invariants:
- Same-scene notification is a no-op
- Scene transition drops every entry of the previous scene
- A destroyed entity is never returned (self-healing)
- Name collisions resolve to the entity visited last in pre-order
- A failed rebuild leaves the cache empty, not partial
"""

import pytest

from scenecache import EntityCache, LocalSceneGraph, SceneId, UninitializedCollaboratorError

MENU = SceneId("Menu")
GAME = SceneId("Game")


@pytest.fixture
def menu_graph(graph, clickable_cls):
    """Menu scene: Canvas > (Play > Label, Quit), Camera."""
    canvas = graph.spawn("Canvas", scene=MENU)
    play = graph.spawn("Play", clickable_cls("play"), parent=canvas)
    graph.spawn("Label", parent=play)
    graph.spawn("Quit", clickable_cls("quit"), parent=canvas)
    graph.spawn("Camera", scene=MENU)
    graph.spawn("Player", scene=GAME)
    graph.spawn("Camera", scene=GAME)
    graph.load_scene(MENU)
    return graph


def test_rebuild_caches_every_entity(menu_graph, entity_cache):
    entity_cache.on_scene_loaded(MENU)

    assert entity_cache.current_scene == MENU
    assert sorted(entity_cache.names()) == ["Camera", "Canvas", "Label", "Play", "Quit"]
    assert entity_cache.get("Label") == menu_graph.find_by_name("Label")


def test_hits_do_not_query_graph(menu_graph, entity_cache, monkeypatch):
    entity_cache.on_scene_loaded(MENU)

    def fail(name):
        raise AssertionError(f"find_by_name({name!r}) called on a cache hit")

    monkeypatch.setattr(menu_graph, "find_by_name", fail)
    assert entity_cache.get("Quit") is not None
    assert entity_cache.stats.hits == 1
    assert entity_cache.stats.misses == 0


def test_same_scene_twice_is_noop(menu_graph, entity_cache):
    """Idempotence: second identical notification changes nothing observable."""
    entity_cache.on_scene_loaded(MENU)
    before = {name: entity_cache.get(name) for name in entity_cache.names()}
    menu_graph.spawn("LateJoiner")

    entity_cache.on_scene_loaded(MENU)

    assert "LateJoiner" not in entity_cache
    assert {name: entity_cache.get(name) for name in entity_cache.names()} == before
    assert entity_cache.stats.transitions == 1


def test_transition_drops_previous_scene(menu_graph, entity_cache):
    """Invalidation: names only present in the old scene are gone."""
    entity_cache.on_scene_loaded(MENU)
    old_camera = entity_cache.get("Camera")

    menu_graph.load_scene(GAME)
    entity_cache.on_scene_loaded(GAME)

    assert "Play" not in entity_cache
    assert entity_cache.get("Play") is None
    assert entity_cache.get("Player") is not None
    new_camera = entity_cache.get("Camera")
    assert new_camera is not None
    assert new_camera != old_camera


def test_dead_entry_is_evicted_and_reresolved(menu_graph, entity_cache):
    """Self-healing: a destroyed entity is replaced by a live one with the same name."""
    entity_cache.on_scene_loaded(MENU)
    old_quit = entity_cache.get("Quit")

    menu_graph.destroy(old_quit)
    replacement = menu_graph.spawn("Quit")

    assert entity_cache.get("Quit") == replacement
    assert entity_cache.stats.evictions == 1
    assert entity_cache.get("Quit") == replacement
    assert entity_cache.stats.evictions == 1


def test_dead_entry_without_replacement_is_not_found(menu_graph, entity_cache):
    entity_cache.on_scene_loaded(MENU)
    menu_graph.destroy(entity_cache.get("Quit"))

    assert entity_cache.get("Quit") is None
    assert "Quit" not in entity_cache


def test_destroying_parent_heals_children(menu_graph, entity_cache):
    entity_cache.on_scene_loaded(MENU)
    menu_graph.destroy(entity_cache.get("Canvas"))

    assert entity_cache.get("Label") is None
    assert entity_cache.get("Camera") is not None


def test_miss_falls_back_and_caches(menu_graph, entity_cache):
    entity_cache.on_scene_loaded(MENU)
    spawned = menu_graph.spawn("Popup")

    assert "Popup" not in entity_cache
    assert entity_cache.get("Popup") == spawned
    assert "Popup" in entity_cache
    assert entity_cache.stats.misses == 1


def test_unknown_name_returns_none(menu_graph, entity_cache):
    entity_cache.on_scene_loaded(MENU)
    assert entity_cache.get("Nope") is None


def test_name_collision_last_in_pre_order_wins(graph, entity_cache):
    """Pinned tie-break: the later visit overwrites the earlier one.

    Note: the graph's own find_by_name returns the first match, so the cache
    and a direct search disagree on purpose here.
    """
    graph.load_scene(MENU)
    first_root = graph.spawn("A")
    nested_x = graph.spawn("X", parent=first_root)
    root_x = graph.spawn("X")
    deep = graph.spawn("B")
    deepest_x = graph.spawn("X", parent=deep)

    entity_cache.on_scene_loaded(MENU)

    assert entity_cache.get("X") == deepest_x
    assert graph.find_by_name("X") == nested_x
    assert root_x not in (nested_x, deepest_x)


def test_collision_child_after_parent(graph, entity_cache):
    """Pre-order: a child is visited after its parent, so the child wins."""
    graph.load_scene(MENU)
    parent = graph.spawn("X")
    child = graph.spawn("X", parent=parent)

    entity_cache.on_scene_loaded(MENU)

    assert entity_cache.get("X") == child


def test_no_active_scene_leaves_cache_empty(graph, entity_cache):
    graph.spawn("Camera", scene=MENU)

    entity_cache.on_scene_loaded(MENU)

    assert len(entity_cache) == 0
    assert entity_cache.current_scene == MENU
    assert entity_cache.get("Camera") is None


def test_get_typed(menu_graph, entity_cache, clickable_cls):
    entity_cache.on_scene_loaded(MENU)

    assert entity_cache.get_typed("Play", clickable_cls) == clickable_cls("play")
    assert entity_cache.get_typed("Camera", clickable_cls) is None
    assert entity_cache.get_typed("Nope", clickable_cls) is None


def test_get_typed_on_destroyed_entity(menu_graph, entity_cache, clickable_cls):
    entity_cache.on_scene_loaded(MENU)
    menu_graph.destroy(entity_cache.get("Play"))

    assert entity_cache.get_typed("Play", clickable_cls) is None


class _BrokenGraph(LocalSceneGraph):
    def children(self, entity):
        if self.name_of(entity) == "Broken":
            raise RuntimeError("host failure")
        return super().children(entity)


def test_failed_rebuild_leaves_cache_empty():
    graph = _BrokenGraph()
    graph.load_scene(MENU)
    graph.spawn("Fine")
    graph.spawn("Broken")
    cache = EntityCache(graph)

    with pytest.raises(RuntimeError, match="host failure"):
        cache.on_scene_loaded(MENU)

    assert len(cache) == 0
    assert cache.current_scene is None


def test_unbound_cache_raises():
    cache = EntityCache()

    with pytest.raises(UninitializedCollaboratorError):
        cache.on_scene_loaded(MENU)
    with pytest.raises(UninitializedCollaboratorError):
        cache.get("Camera")


def test_bind_late(menu_graph):
    cache = EntityCache()
    cache.bind(menu_graph)
    cache.on_scene_loaded(MENU)

    assert cache.get("Camera") is not None
