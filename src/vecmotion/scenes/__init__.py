"""Bundled demo scenes."""

from .base_scene import BaseScene
from .morph_scene import MorphScene
from .reveal_scene import RevealScene
from .shapes_scene import ShapesScene

DEFAULT_SCENE_NAME = "shapes"
SCENE_TYPES: dict[str, type[BaseScene]] = {
    "shapes": ShapesScene,
    "morph": MorphScene,
    "reveal": RevealScene,
}


def supported_scene_names() -> tuple[str, ...]:
    """Return supported scene names in deterministic order."""
    return tuple(SCENE_TYPES.keys())


def create_scene(name: str, default: str | None = None) -> BaseScene:
    """Create a scene script instance by name."""
    scene_name = name if name in SCENE_TYPES else default
    if scene_name is None:
        available = ", ".join(supported_scene_names())
        raise ValueError(f"Unknown scene '{name}'. Available: {available}")

    scene_class = SCENE_TYPES[scene_name]
    return scene_class()


__all__ = [
    "BaseScene",
    "MorphScene",
    "RevealScene",
    "ShapesScene",
    "DEFAULT_SCENE_NAME",
    "SCENE_TYPES",
    "supported_scene_names",
    "create_scene",
]
