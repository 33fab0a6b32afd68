"""Tween components and the targets a tween can point at."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Protocol, Union, runtime_checkable

Entity = int
"""Entities are identified by plain integers."""


@runtime_checkable
class Interpolator(Protocol):
    """Anything that can write an interpolated value into an item."""

    def interpolate(self, item: Any, value: float) -> None:
        ...


InterpolatorLike = Union[Interpolator, Callable[[Any, float], None]]


@dataclass(frozen=True)
class SkipTween:
    """Marker component: a tween carrying it is left alone by the systems."""


@dataclass(frozen=True)
class AnimationTarget:
    """Marker component searched for by a tween with a marker target."""


@dataclass(frozen=True)
class TweenInterpolationValue:
    """Sampled interpolation value, managed by the interpolation systems."""

    value: float


@dataclass(frozen=True)
class TimeSpanProgress:
    """Progress of a time span; ``now_percentage`` is nominally in 0..1."""

    now_percentage: float


@dataclass
class Tween:
    """A target paired with an interpolator.

    ``item_type`` names the component, resource or asset type the
    interpolator works on. When left out it is read from the
    interpolator's ``item_type`` attribute, if it has one.
    """

    target: Any
    interpolator: Any
    item_type: type | None = None

    def __post_init__(self) -> None:
        if not (
            isinstance(self.interpolator, Interpolator)
            or callable(self.interpolator)
        ):
            raise TypeError(
                "interpolator must have an interpolate(item, value) method "
                "or be callable as f(item, value)"
            )
        if self.item_type is None:
            self.item_type = getattr(self.interpolator, "item_type", None)

    def interpolate(self, item: Any, value: float) -> None:
        """Apply the interpolator to ``item`` at ``value``."""
        if isinstance(self.interpolator, Interpolator):
            self.interpolator.interpolate(item, value)
        else:
            self.interpolator(item, value)


def _tween_with(
    target: Any, interpolator: InterpolatorLike, item_type: type | None
) -> Tween:
    return Tween(target, interpolator, item_type)


def _tween_with_closure(
    target: Any,
    closure: Callable[[Any, float], None],
    item_type: type | None,
) -> Tween:
    if not callable(closure):
        raise TypeError("closure must be callable")
    return Tween(target, closure, item_type)


class TargetComponent:
    """Which component of which entity a tween writes to."""

    __slots__ = ()

    @staticmethod
    def marker() -> MarkerTarget:
        """Search up the parent chain for an ``AnimationTarget``."""
        return MarkerTarget()

    @staticmethod
    def entity(entity: Entity) -> EntityTarget:
        """Target one entity."""
        return EntityTarget(entity)

    @staticmethod
    def entities(entities: Iterable[Entity]) -> EntitiesTarget:
        """Target several entities."""
        return EntitiesTarget(tuple(entities))

    @staticmethod
    def default() -> MarkerTarget:
        """The default component target is the marker search."""
        return MarkerTarget()

    def with_(
        self, interpolator: InterpolatorLike, item_type: type | None = None
    ) -> Tween:
        """Create a tween of this target with ``interpolator``."""
        return _tween_with(self, interpolator, item_type)

    def with_closure(
        self,
        closure: Callable[[Any, float], None],
        item_type: type | None = None,
    ) -> Tween:
        """Create a tween of this target driven by ``closure(item, value)``."""
        return _tween_with_closure(self, closure, item_type)


@dataclass(frozen=True)
class MarkerTarget(TargetComponent):
    """Navigate up the parent chain for an entity marked ``AnimationTarget``."""


@dataclass(frozen=True)
class EntityTarget(TargetComponent):
    """Target this entity."""

    entity: Entity


@dataclass(frozen=True)
class EntitiesTarget(TargetComponent):
    """Target these entities."""

    entities: tuple[Entity, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "entities", tuple(self.entities))


@dataclass(frozen=True)
class TargetResource:
    """Target the single resource of the tween's item type."""

    def with_(
        self, interpolator: InterpolatorLike, item_type: type | None = None
    ) -> Tween:
        """Create a tween of this target with ``interpolator``."""
        return _tween_with(self, interpolator, item_type)

    def with_closure(
        self,
        closure: Callable[[Any, float], None],
        item_type: type | None = None,
    ) -> Tween:
        """Create a tween of this target driven by ``closure(item, value)``."""
        return _tween_with_closure(self, closure, item_type)


@dataclass(frozen=True)
class AssetHandle:
    """Reference to an asset of a given type stored in a world."""

    asset_type: type
    id: int


@dataclass(frozen=True)
class TargetAsset:
    """Target one or more assets by handle."""

    handles: tuple[AssetHandle, ...]

    def __post_init__(self) -> None:
        handles = tuple(self.handles)
        for handle in handles:
            if not isinstance(handle, AssetHandle):
                raise TypeError(f"expected AssetHandle, got {handle!r}")
        object.__setattr__(self, "handles", handles)

    @classmethod
    def asset(cls, handle: AssetHandle) -> TargetAsset:
        """Target this asset."""
        return cls((handle,))

    @classmethod
    def assets(cls, handles: Iterable[AssetHandle]) -> TargetAsset:
        """Target these assets."""
        return cls(tuple(handles))

    def with_(
        self, interpolator: InterpolatorLike, item_type: type | None = None
    ) -> Tween:
        """Create a tween of this target with ``interpolator``."""
        return _tween_with(self, interpolator, item_type)

    def with_closure(
        self,
        closure: Callable[[Any, float], None],
        item_type: type | None = None,
    ) -> Tween:
        """Create a tween of this target driven by ``closure(item, value)``."""
        return _tween_with_closure(self, closure, item_type)


def target_entities(entities: Iterable[Entity]) -> EntitiesTarget:
    """Build a component target for several entities."""
    items = tuple(entities)
    for entity in items:
        if not _is_entity(entity):
            raise TypeError(f"expected an entity, got {entity!r}")
    return EntitiesTarget(items)


def target_assets(handles: Iterable[AssetHandle]) -> TargetAsset:
    """Build an asset target for several handles."""
    return TargetAsset.assets(handles)


def _is_entity(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def into_target(value: Any) -> TargetComponent | TargetAsset:
    """Turn an entity, handle, marker or collection of those into a target."""
    if value is AnimationTarget or isinstance(value, AnimationTarget):
        return MarkerTarget()
    if isinstance(value, AssetHandle):
        return TargetAsset.asset(value)
    if _is_entity(value):
        return EntityTarget(value)
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        raise TypeError(f"cannot convert {value!r} into a target")
    items = tuple(value)
    if items and all(isinstance(item, AssetHandle) for item in items):
        return TargetAsset(items)
    if all(_is_entity(item) for item in items):
        return EntitiesTarget(items)
    raise TypeError(f"cannot convert {value!r} into a target")