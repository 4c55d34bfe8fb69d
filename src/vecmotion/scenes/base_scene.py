"""Base interface for scripted demo scenes."""

import random
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..engine.scene import Scene


class BaseScene(ABC):
    """Abstract base class for scripts that populate and animate a scene."""

    description: str = ""

    def set_rng(self, rng: random.Random) -> None:
        """Inject RNG source for deterministic scripts."""
        del rng

    @abstractmethod
    def construct(self, scene: "Scene") -> None:
        """
        Create entities and queue their animations.

        Args:
            scene: The empty scene to populate; its clock has not started yet
        """
        raise NotImplementedError
