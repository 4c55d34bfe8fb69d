"""Tests for the demo scene registry."""

import pytest

from vecmotion.engine.bounds import Rect
from vecmotion.engine.scene import Scene
from vecmotion.scenes import (
    DEFAULT_SCENE_NAME,
    SCENE_TYPES,
    MorphScene,
    create_scene,
    supported_scene_names,
)
from vecmotion.scenes.morph_scene import star


def test_supported_scene_names_are_stable():
    """Scene names should be listed in registry order."""
    assert supported_scene_names() == ("shapes", "morph", "reveal")
    assert DEFAULT_SCENE_NAME in SCENE_TYPES


def test_create_scene_by_name():
    """create_scene should instantiate the registered class."""
    assert isinstance(create_scene("morph"), MorphScene)


def test_create_scene_falls_back_to_default():
    """An unknown name should use the default when one is given."""
    assert isinstance(create_scene("nope", default="morph"), MorphScene)


def test_create_scene_unknown_name_raises():
    """An unknown name without default should list the options."""
    with pytest.raises(ValueError, match="Unknown scene 'nope'. Available: shapes, morph, reveal"):
        create_scene("nope")


@pytest.mark.parametrize("name", list(SCENE_TYPES))
def test_every_scene_constructs_and_plays_to_the_end(name: str):
    """Each demo should queue animations and finish without errors."""
    scene = Scene(Rect.from_w_h(16.0, 9.0))
    create_scene(name).construct(scene)

    assert len(scene.store) > 0
    assert scene.timeline.end_time() > 0

    scene.update(scene.timeline.end_time() / 2)
    scene.update(scene.timeline.end_time())

    assert scene.timeline.is_idle()


def test_star_outline_is_closed_with_alternating_radii():
    """star should alternate outer and inner corners."""
    path = star(2.0, 1.0, points=5)

    assert path.is_closed()
    assert len(path) == 11
    assert path.commands[0].to.y == pytest.approx(2.0)
