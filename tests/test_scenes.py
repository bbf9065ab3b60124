import pytest

from okinawa.scene import Scene
from okinawa.scenes import MAX_SCENES, SceneHandler


def _handler(*names):
    handler = SceneHandler()
    scenes = [Scene(name) for name in names]
    for scene, name in zip(scenes, names):
        handler.add_scene(scene, name)
    return handler, scenes


def test_new_handler_has_no_current_scene():
    handler = SceneHandler()
    assert handler.current_scene is None
    assert handler.scene_count == 0
    assert handler.current_scene_index == 0


def test_set_scene_activates_and_records_name():
    handler, scenes = _handler("a", "b")
    handler.set_scene(1)
    assert handler.current_scene is scenes[1]
    assert handler.current_scene_name == "b"
    assert handler.current_scene_index == 1
    assert scenes[1].is_active


def test_switching_deactivates_previous():
    handler, scenes = _handler("a", "b")
    handler.set_scene(0)
    handler.set_scene(1)
    assert not scenes[0].is_active
    assert scenes[1].is_active


def test_advance_and_go_back_stop_at_ends():
    handler, scenes = _handler("a", "b", "c")
    handler.set_scene(0)
    handler.go_back()
    assert handler.current_scene is scenes[0]
    handler.advance()
    handler.advance()
    assert handler.current_scene is scenes[2]
    handler.advance()
    assert handler.current_scene is scenes[2]
    handler.go_back()
    assert handler.current_scene is scenes[1]


def test_set_scene_invalid_index():
    handler, _ = _handler("a")
    with pytest.raises(IndexError):
        handler.set_scene(1)
    assert handler.current_scene is None


def test_insert_scene_places_at_index():
    handler, scenes = _handler("a", "c")
    middle = Scene("b")
    handler.insert_scene(middle, "b", 1)
    assert handler.scene_count == 3
    handler.set_scene(1)
    assert handler.current_scene is middle
    assert handler.current_scene_name == "b"


def test_insert_scene_at_end_is_allowed():
    handler, _ = _handler("a")
    last = Scene("z")
    handler.insert_scene(last, "z", 1)
    handler.set_scene(1)
    assert handler.current_scene is last


def test_insert_scene_invalid_index():
    handler, _ = _handler("a")
    with pytest.raises(IndexError):
        handler.insert_scene(Scene("x"), "x", 2)
    assert handler.scene_count == 1


def test_collection_is_limited():
    handler = SceneHandler()
    for number in range(MAX_SCENES):
        handler.add_scene(Scene(str(number)), str(number))
    assert handler.scene_count == MAX_SCENES
    with pytest.raises(OverflowError):
        handler.add_scene(Scene("extra"), "extra")
    with pytest.raises(OverflowError):
        handler.insert_scene(Scene("extra"), "extra", 0)
    assert len(handler) == MAX_SCENES