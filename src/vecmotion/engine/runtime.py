"""Scene runtime helpers used by Animator."""

import hashlib
import json
import random
from typing import TYPE_CHECKING

from .bounds import Rect
from .scene import Scene

if TYPE_CHECKING:
    from ..scenes.base_scene import BaseScene


def derive_scene_seed(script: "BaseScene", fps: int) -> int:
    """Create a stable seed based on the scene script and frame rate."""
    payload = {
        "fps": fps,
        "scene": script.__class__.__name__,
    }
    encoded = json.dumps(payload, sort_keys=True, separators=(",", ":")).encode("utf-8")
    digest = hashlib.sha256(encoded).digest()
    return int.from_bytes(digest[:8], "big")


def create_seeded_scene(script: "BaseScene", viewport: Rect, seed: int) -> Scene:
    """Create a scene with deterministic RNG streams for the script and the scene."""
    master_rng = random.Random(seed)
    script_rng = random.Random(master_rng.getrandbits(64))
    scene_rng = random.Random(master_rng.getrandbits(64))
    script.set_rng(script_rng)
    scene = Scene(viewport, rng=scene_rng)
    script.construct(scene)
    return scene
