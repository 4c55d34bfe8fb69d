"""Ordered per-frame update stages over the attribute store."""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Sequence

from ..constants import PATH_TOLERANCE
from .attributes import PathCompletion, Scale
from .bounds import Bounds
from .path import DegeneratePathError
from .store import REGULAR_KINDS, AttributeKind, AttributeStore
from .timeline import Animation, Timeline

logger = logging.getLogger(__name__)


@dataclass
class FrameContext:
    """Scene state a frame's stages read and write."""

    store: AttributeStore
    timeline: Timeline
    now: float
    bounds: Bounds


Stage = Callable[[FrameContext], None]


def _value_at(animation: Animation, now: float) -> Any:
    try:
        return animation.value_at(now)
    except DegeneratePathError:
        logger.warning(
            "Degenerate path on entity %s; snapping to the nearer endpoint", animation.entity
        )
        return animation.end_value if animation.progress(now) >= 0.5 else animation.baseline


def hold_initial_values(ctx: FrameContext) -> None:
    """
    Show the initial value of a not-yet-started animation ahead of its start.

    Only the earliest animation on an attribute holds it, so a later reveal
    never rewrites the baseline of animations that run before it.
    """
    for animation in ctx.timeline.pending:
        if animation.initial is None or animation.has_started(ctx.now):
            continue
        if ctx.timeline.first_on(animation.entity, animation.kind) is not animation:
            continue
        if ctx.store.has(animation.kind, animation.entity):
            ctx.store.set(animation.kind, animation.entity, animation.initial)


def snapshot_previous(ctx: FrameContext) -> None:
    """Shadow the current value of every attribute an animation drives this frame."""
    for animation in (*ctx.timeline.active, *ctx.timeline.due(ctx.now)):
        if ctx.store.has(animation.kind, animation.entity):
            ctx.store.snapshot(animation.kind, animation.entity)


def begin_animations(ctx: FrameContext) -> None:
    """
    Start animations whose start time has been reached.

    The baseline is the attribute's value at the animation's own start time:
    the running predecessor on the same attribute evaluated at that time, or
    the value shadowed before this frame mutated anything.
    """
    for animation in ctx.timeline.due(ctx.now):
        if not ctx.store.has(animation.kind, animation.entity):
            logger.warning(
                "Entity %s has no %s attribute; dropping animation",
                animation.entity,
                animation.kind.value,
            )
            ctx.timeline.discard(animation)
            continue
        predecessor = ctx.timeline.latest_on(animation.entity, animation.kind)
        if predecessor is not None:
            current = _value_at(predecessor, animation.start)
        else:
            current = ctx.store.previous(animation.kind, animation.entity)
        animation.begin(current)
        if animation.initial is not None:
            ctx.store.set(animation.kind, animation.entity, animation.initial)
        ctx.timeline.activate(animation)


def _apply(ctx: FrameContext, kind: AttributeKind) -> None:
    for animation in ctx.timeline.running(kind):
        ctx.store.set(kind, animation.entity, _value_at(animation, ctx.now))


def apply_animations(ctx: FrameContext) -> None:
    """Advance every attribute the outline does not depend on last."""
    for kind in REGULAR_KINDS:
        _apply(ctx, kind)


def apply_path_animations(ctx: FrameContext) -> None:
    _apply(ctx, AttributeKind.PATH)


def update_rendered_paths(ctx: FrameContext) -> None:
    """
    Rebuild each outline from its path, size, scale and completion.

    Must run after every other attribute has been advanced for the frame.
    """
    store = ctx.store
    for entity, path in store.table(AttributeKind.PATH).items():
        size = store.get(AttributeKind.SIZE, entity)
        scale = store.get(AttributeKind.SCALE, entity, Scale(1.0)).value
        completion = store.get(AttributeKind.PATH_COMPLETION, entity, PathCompletion(1.0)).value
        inputs = (path, size, scale, completion)
        if store.render_inputs.get(entity) == inputs:
            continue

        reference = store.reference_sizes.get(entity)
        factor = size.ratio_to(reference) if size is not None and reference is not None else None
        fx, fy = factor or (1.0, 1.0)
        outline = path.transformed(scale=(fx * scale, fy * scale))
        store.rendered_paths[entity] = outline.upto(completion, PATH_TOLERANCE)
        store.render_inputs[entity] = inputs


def retire_animations(ctx: FrameContext) -> None:
    """Drop finished animations, pinning the attribute to the exact end value."""
    for animation in ctx.timeline.running():
        if not animation.is_finished(ctx.now):
            continue
        ctx.timeline.retire(animation)
        if ctx.timeline.latest_on(animation.entity, animation.kind) is None:
            ctx.store.set(animation.kind, animation.entity, animation.end_value)
            logger.debug("Retired %s on entity %s", animation.kind.value, animation.entity)


UPDATE_STAGES: tuple[Stage, ...] = (
    hold_initial_values,
    snapshot_previous,
    begin_animations,
    apply_animations,
    apply_path_animations,
    update_rendered_paths,
    retire_animations,
)


def run_stages(ctx: FrameContext, stages: Sequence[Stage] = UPDATE_STAGES) -> None:
    for stage in stages:
        stage(ctx)
