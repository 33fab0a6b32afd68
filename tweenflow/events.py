"""Timed events fired while an entity's time span is in progress.

An entity holding a :class:`TweenEventData` and a ``TimeSpanProgress`` makes
:class:`TweenEventSystem` fire a :class:`TweenEvent` each time it runs. The
event goes to the entity's observers and into the world's event queue.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any

from tweenflow.tween import (
    Entity,
    SkipTween,
    TimeSpanProgress,
    TweenInterpolationValue,
)
from tweenflow.world import World


@dataclass(frozen=True)
class TweenEventData:
    """User data to fire as a :class:`TweenEvent`; ``None`` means no data."""

    data: Any = None


@dataclass(frozen=True)
class TweenEvent:
    """Fired for an entity holding ``TweenEventData`` and ``TimeSpanProgress``."""

    data: Any
    progress: TimeSpanProgress
    interpolation_value: float | None
    entity: Entity


class TweenEventSystem:
    """Fire a :class:`TweenEvent` for every entity with event data and progress.

    ``data_type`` limits the system to event data that is an instance of it;
    when left out, every event data is handled. Entities marked
    ``SkipTween`` are ignored. The data is copied into each event.
    """

    def __init__(self, data_type: type | None = None) -> None:
        if data_type is not None and not isinstance(data_type, type):
            raise TypeError("data_type must be a type")
        self.data_type = data_type

    def __call__(self, world: World) -> None:
        for entity, event_data, progress in world.query(
            TweenEventData, TimeSpanProgress
        ):
            if world.has(entity, SkipTween):
                continue
            if self.data_type is not None and not isinstance(
                event_data.data, self.data_type
            ):
                continue
            value = world.get(entity, TweenInterpolationValue)
            event = TweenEvent(
                data=copy.copy(event_data.data),
                progress=progress,
                interpolation_value=None if value is None else value.value,
                entity=entity,
            )
            world.trigger(event, entity)
            world.send(event)