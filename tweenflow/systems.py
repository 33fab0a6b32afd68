"""Systems that apply tweens to components, resources and assets."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any

from tweenflow.tween import (
    AnimationTarget,
    EntitiesTarget,
    Entity,
    EntityTarget,
    SkipTween,
    TargetAsset,
    TargetComponent,
    TargetResource,
    Tween,
    TweenInterpolationValue,
)
from tweenflow.world import World

logger = logging.getLogger(__name__)


class QueryEntityErrorKind(Enum):
    """Why a component could not be fetched from an entity."""

    QUERY_DOES_NOT_MATCH = "query_does_not_match"
    NO_SUCH_ENTITY = "no_such_entity"
    ALIASED_MUTABILITY = "aliased_mutability"


@dataclass(eq=True, unsafe_hash=True)
class QueryEntityError(Exception):
    """A failed component lookup; equal errors compare and hash equal."""

    kind: QueryEntityErrorKind
    entity: Entity

    def __str__(self) -> str:
        if self.kind is QueryEntityErrorKind.QUERY_DOES_NOT_MATCH:
            return f"The query does not match the entity {self.entity}"
        if self.kind is QueryEntityErrorKind.NO_SUCH_ENTITY:
            return f"The entity {self.entity} does not exist"
        return f"The entity {self.entity} was requested mutably more than once"


def find_animation_target(world: World, entity: Entity) -> Entity | None:
    """Walk up from ``entity`` to the first entity marked ``AnimationTarget``."""
    current: Entity | None = entity
    while current is not None and world.contains(current):
        if world.has(current, AnimationTarget):
            return current
        current = world.parent(current)
    return None


def _fetch_component(world: World, entity: Entity, item_type: type) -> Any:
    if not world.contains(entity):
        raise QueryEntityError(QueryEntityErrorKind.NO_SUCH_ENTITY, entity)
    if not world.has(entity, item_type):
        raise QueryEntityError(QueryEntityErrorKind.QUERY_DOES_NOT_MATCH, entity)
    return world.get(entity, item_type)


def _name(kind: type | None) -> str:
    return "<unknown>" if kind is None else kind.__qualname__


def _resolve_item_type(tween: Tween, system_type: type | None) -> type | None:
    """The item type a tween works on, or None if it is not this system's."""
    if tween.item_type is None:
        return system_type
    if system_type is None or tween.item_type is system_type:
        return tween.item_type
    return None


def _active_tweens(
    world: World, target_kind: type, interpolator_type: type | None
) -> Iterator[tuple[Entity, Tween, float]]:
    for entity, tween, value in world.query(Tween, TweenInterpolationValue):
        if world.has(entity, SkipTween):
            continue
        if not isinstance(tween.target, target_kind):
            continue
        if interpolator_type is not None and not isinstance(
            tween.interpolator, interpolator_type
        ):
            continue
        yield entity, tween, value.value


class ComponentTweenSystem:
    """Apply component tweens using each tween's interpolation value.

    ``item_type`` limits the system to tweens of that component type and
    supplies it for tweens that name none; ``interpolator_type`` limits it
    to tweens whose interpolator is an instance of that type. Lookup errors
    are logged once until they change or go away.
    """

    def __init__(
        self, item_type: type | None = None, interpolator_type: type | None = None
    ) -> None:
        self.item_type = item_type
        self.interpolator_type = interpolator_type
        self._last_entity_errors: dict[Entity, QueryEntityError] = {}
        self._last_search_errors: set[Entity] = set()

    def __call__(self, world: World) -> None:
        entity_errors: dict[Entity, QueryEntityError] = {}
        search_errors: set[Entity] = set()
        for entity, tween, value in _active_tweens(
            world, TargetComponent, self.interpolator_type
        ):
            item_type = _resolve_item_type(tween, self.item_type)
            if item_type is None:
                continue
            target = tween.target
            interpolator_name = _name(type(tween.interpolator))
            if isinstance(target, EntitiesTarget):
                targets: tuple[Entity, ...] = target.entities
            elif isinstance(target, EntityTarget):
                targets = (target.entity,)
            else:
                found = find_animation_target(world, entity)
                if found is None:
                    if (
                        entity not in self._last_search_errors
                        and entity not in search_errors
                    ):
                        logger.error(
                            "Tween %s %s cannot find AnimationTarget marker",
                            entity,
                            interpolator_name,
                        )
                    search_errors.add(entity)
                    continue
                targets = (found,)
            for target_entity in targets:
                try:
                    item = _fetch_component(world, target_entity, item_type)
                except QueryEntityError as err:
                    if (
                        self._last_entity_errors.get(target_entity) != err
                        and entity_errors.get(target_entity) != err
                    ):
                        logger.error(
                            "%s attempted to tween %s component but got query error: %s",
                            interpolator_name,
                            _name(item_type),
                            err,
                        )
                    entity_errors[target_entity] = err
                    continue
                tween.interpolate(item, value)
        self._last_entity_errors = entity_errors
        self._last_search_errors = search_errors


class ResourceTweenSystem:
    """Apply resource tweens to the world's resource of ``item_type``.

    A missing resource is logged once until it appears.
    """

    def __init__(self, item_type: type, interpolator_type: type | None = None) -> None:
        if not isinstance(item_type, type):
            raise TypeError("item_type must be a type")
        self.item_type = item_type
        self.interpolator_type = interpolator_type
        self._last_error = False

    def __call__(self, world: World) -> None:
        resource = world.resource(self.item_type)
        if resource is None:
            if not self._last_error:
                logger.error(
                    "%s resource tween system cannot find the resource",
                    _name(self.interpolator_type or self.item_type),
                )
                self._last_error = True
            return
        self._last_error = False
        for _, tween, value in _active_tweens(
            world, TargetResource, self.interpolator_type
        ):
            if _resolve_item_type(tween, self.item_type) is None:
                continue
            tween.interpolate(resource, value)


class AssetTweenSystem:
    """Apply asset tweens to every asset their handles point at.

    ``item_type`` limits the system to tweens and handles of that asset
    type. A handle with no asset behind it is logged once until it resolves.
    """

    def __init__(
        self, item_type: type | None = None, interpolator_type: type | None = None
    ) -> None:
        self.item_type = item_type
        self.interpolator_type = interpolator_type
        self._last_asset_errors: set[Any] = set()

    def __call__(self, world: World) -> None:
        asset_errors: set[Any] = set()
        for _, tween, value in _active_tweens(
            world, TargetAsset, self.interpolator_type
        ):
            if (
                tween.item_type is not None
                and self.item_type is not None
                and tween.item_type is not self.item_type
            ):
                continue
            for handle in tween.target.handles:
                if self.item_type is not None and handle.asset_type is not self.item_type:
                    continue
                asset = world.asset(handle)
                if asset is None:
                    if (
                        handle not in self._last_asset_errors
                        and handle not in asset_errors
                    ):
                        logger.error(
                            "%s attempted to tween %s asset %s but it does not exists",
                            _name(type(tween.interpolator)),
                            _name(handle.asset_type),
                            handle.id,
                        )
                    asset_errors.add(handle)
                    continue
                tween.interpolate(asset, value)
        self._last_asset_errors = asset_errors