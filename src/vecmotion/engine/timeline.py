"""Animation requests, the play() batch builder, and the per-scene timeline."""

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Iterable, Iterator

from ..constants import DEFAULT_RUN_TIME
from .attributes import BlendMode
from .easing import EaseType
from .store import AttributeKind, AttributeStore, EntityId

if TYPE_CHECKING:
    from .scene import Scene

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Animation:
    """A request to drive one attribute of one entity toward a value over time."""

    entity: EntityId
    kind: AttributeKind
    value: Any
    blend: BlendMode | None = None
    start: float = 0.0
    run_time: float = DEFAULT_RUN_TIME
    ease: EaseType = EaseType.LINEAR
    initial: Any = None
    baseline: Any = field(default=None, init=False)
    end_value: Any = field(default=None, init=False)
    restore_value: Any = field(default=None, init=False)
    begun: bool = field(default=False, init=False)
    sequence: int = field(default=-1, init=False)

    def __post_init__(self) -> None:
        if self.blend is None:
            self.blend = self.kind.default_blend
        if not self.blend.supports(self.kind.value_type):
            raise ValueError(f"{self.kind.value} cannot be animated with {self.blend.value} blending")
        if self.blend is BlendMode.ABSOLUTE and not isinstance(self.value, self.kind.value_type):
            raise ValueError(
                f"{self.kind.value} target must be {self.kind.value_type.__name__}, "
                f"got {type(self.value).__name__}"
            )

    @property
    def end(self) -> float:
        return self.start + max(self.run_time, 0.0)

    def has_started(self, now: float) -> bool:
        return now >= self.start

    def is_finished(self, now: float) -> bool:
        return now >= self.end

    def progress(self, now: float) -> float:
        """Eased progress at ``now``; a non-positive run time completes instantly."""
        if self.run_time <= 0:
            return 1.0
        return self.ease.calculate((now - self.start) / self.run_time)

    def begin(self, current: Any) -> None:
        """
        Capture the baseline and resolve the end value.

        Args:
            current: The attribute value at this animation's start time
        """
        self.restore_value = current
        self.baseline = self.initial if self.initial is not None else current
        self.end_value = self.blend.resolve(self.baseline, self.value)
        self.begun = True

    def value_at(self, now: float) -> Any:
        return self.baseline.interp(self.end_value, self.progress(now))

    def reset(self) -> None:
        self.baseline = None
        self.end_value = None
        self.restore_value = None
        self.begun = False


def _flatten(animations: Iterable["Animation | Iterable[Animation]"]) -> Iterator[Animation]:
    for item in animations:
        if isinstance(item, Animation):
            yield item
        else:
            yield from _flatten(item)


class Timeline:
    """Queued, running and retired animations of a scene."""

    def __init__(self) -> None:
        self.pending: list[Animation] = []
        self.active: list[Animation] = []
        self.history: list[Animation] = []
        self._sequence = 0

    def __len__(self) -> int:
        return len(self.pending) + len(self.active)

    def add(self, animation: Animation) -> None:
        animation.sequence = self._sequence
        self._sequence += 1
        self.pending.append(animation)

    def is_idle(self) -> bool:
        return not self.pending and not self.active

    def end_time(self) -> float:
        """Time at which the last known animation finishes."""
        return max((a.end for a in (*self.pending, *self.active, *self.history)), default=0.0)

    def due(self, now: float) -> list[Animation]:
        """Pending animations whose start time has been reached, in start order."""
        return sorted((a for a in self.pending if a.has_started(now)), key=_order)

    def running(self, kind: AttributeKind | None = None) -> list[Animation]:
        """Active animations in application order, optionally for one kind."""
        animations = self.active if kind is None else [a for a in self.active if a.kind is kind]
        return sorted(animations, key=_order)

    def latest_on(self, entity: EntityId, kind: AttributeKind) -> Animation | None:
        """The most recently started active animation on an attribute."""
        candidates = [a for a in self.active if a.entity == entity and a.kind is kind]
        return max(candidates, key=_order, default=None)

    def first_on(self, entity: EntityId, kind: AttributeKind) -> Animation | None:
        """The earliest known animation on an attribute, whatever its state."""
        candidates = [
            a
            for a in (*self.pending, *self.active, *self.history)
            if a.entity == entity and a.kind is kind
        ]
        return min(candidates, key=_order, default=None)

    def activate(self, animation: Animation) -> None:
        self.pending.remove(animation)
        self.active.append(animation)

    def discard(self, animation: Animation) -> None:
        self.pending.remove(animation)

    def retire(self, animation: Animation) -> None:
        self.active.remove(animation)
        self.history.append(animation)

    def rewind(self, now: float, store: AttributeStore) -> None:
        """
        Undo progress past ``now`` after the clock moved backward.

        Animations that began after ``now`` restore the value they replaced, in
        reverse start order, and return to the pending queue. Retired animations
        that would still be running at ``now`` become active again.
        """
        begun = sorted((*self.active, *self.history), key=_order, reverse=True)
        for animation in begun:
            if animation.has_started(now):
                continue
            if store.has(animation.kind, animation.entity):
                store.set(animation.kind, animation.entity, animation.restore_value)
            if animation in self.active:
                self.active.remove(animation)
            else:
                self.history.remove(animation)
            animation.reset()
            self.pending.append(animation)
            logger.debug("Rewound %s on entity %s", animation.kind.value, animation.entity)

        for animation in [a for a in self.history if not a.is_finished(now)]:
            self.history.remove(animation)
            self.active.append(animation)


def _order(animation: Animation) -> tuple[float, int]:
    return animation.start, animation.sequence


class AnimBuilder:
    """Adjust the timing of a batch of animations queued by Scene.play()."""

    def __init__(self, scene: "Scene", animations: Iterable["Animation | Iterable[Animation]"]):
        """
        Queue ``animations`` at the scene's scheduling cursor.

        Args:
            scene: Scene whose timeline receives the batch
            animations: Animations, or iterables of animations, to play together
        """
        self.scene = scene
        self.animations = list(_flatten(animations))
        self._start = scene.event_time
        self._run_time = DEFAULT_RUN_TIME
        self._lag = 0.0
        self._uses_cursor = True
        self._claimed = 0.0

        for animation in self.animations:
            scene.queue(animation)
        self._apply()

    def start_time(self, time: float) -> "AnimBuilder":
        """Pin the batch to an absolute start time, releasing the cursor."""
        self._uses_cursor = False
        self._start = time
        self._apply()
        return self

    def run_time(self, duration: float) -> "AnimBuilder":
        self._run_time = duration
        self._apply()
        return self

    def rate_func(self, ease: EaseType) -> "AnimBuilder":
        for animation in self.animations:
            animation.ease = ease
        return self

    def lag(self, seconds: float) -> "AnimBuilder":
        """Stagger the batch so each animation starts ``seconds`` after the previous."""
        self._lag = seconds
        self._apply()
        return self

    def _apply(self) -> None:
        for index, animation in enumerate(self.animations):
            animation.start = self._start + index * self._lag
            animation.run_time = self._run_time
        # The cursor moves past the batch only while the batch sits on it.
        span = 0.0
        if self._uses_cursor:
            span = max(self._run_time, 0.0) + max(len(self.animations) - 1, 0) * self._lag
        self.scene.event_time += span - self._claimed
        self._claimed = span
