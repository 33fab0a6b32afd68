"""A small entity store: entities with typed components, resources, assets,
events and per-entity observers."""

from __future__ import annotations

import itertools
from collections.abc import Callable, Iterator
from typing import Any

from tweenflow.tween import AssetHandle, Entity


class World:
    """Holds entities and their components, plus resources, assets and events.

    Components are keyed by their exact type, so an entity holds at most one
    component of each type. Writing to an unknown entity raises ``KeyError``;
    reading from one gives ``None`` or ``False``.
    """

    def __init__(self) -> None:
        self._entity_ids = itertools.count()
        self._asset_ids = itertools.count()
        self._entities: dict[Entity, dict[type, Any]] = {}
        self._parents: dict[Entity, Entity] = {}
        self._resources: dict[type, Any] = {}
        self._assets: dict[AssetHandle, Any] = {}
        self._events: dict[type, list[Any]] = {}
        self._observers: dict[Entity, list[Callable[[Any], None]]] = {}

    def _components(self, entity: Entity) -> dict[type, Any]:
        try:
            return self._entities[entity]
        except KeyError:
            raise KeyError(f"entity {entity} does not exist") from None

    @staticmethod
    def _check_component(component: Any) -> None:
        if isinstance(component, type):
            raise TypeError(
                f"expected a component instance, got the type {component.__qualname__}"
            )

    def spawn(self, *components: Any) -> Entity:
        """Create an entity holding ``components`` and return it."""
        for component in components:
            self._check_component(component)
        entity = next(self._entity_ids)
        self._entities[entity] = {type(c): c for c in components}
        return entity

    def insert(self, entity: Entity, *components: Any) -> None:
        """Add components to ``entity``, replacing any of the same type."""
        store = self._components(entity)
        for component in components:
            self._check_component(component)
        for component in components:
            store[type(component)] = component

    def remove(self, entity: Entity, component_type: type) -> Any | None:
        """Remove and return the component of ``component_type``, if present."""
        return self._components(entity).pop(component_type, None)

    def despawn(self, entity: Entity) -> None:
        """Delete ``entity``, its observers and its place in the hierarchy."""
        self._components(entity)
        del self._entities[entity]
        self._parents.pop(entity, None)
        self._observers.pop(entity, None)
        orphans = [child for child, parent in self._parents.items() if parent == entity]
        for child in orphans:
            del self._parents[child]

    def contains(self, entity: Entity) -> bool:
        """Whether ``entity`` exists."""
        return entity in self._entities

    def get(self, entity: Entity, component_type: type) -> Any | None:
        """The component of ``component_type`` on ``entity``, or ``None``."""
        return self._entities.get(entity, {}).get(component_type)

    def has(self, entity: Entity, component_type: type) -> bool:
        """Whether ``entity`` exists and holds a ``component_type``."""
        return component_type in self._entities.get(entity, {})

    def query(self, *component_types: type) -> Iterator[tuple[Any, ...]]:
        """Iterate ``(entity, component, ...)`` for entities holding every type.

        The matches are collected up front, so the world may be changed
        while iterating.
        """
        if not component_types:
            raise TypeError("query needs at least one component type")
        matches = [
            (entity, *(store[t] for t in component_types))
            for entity, store in self._entities.items()
            if all(t in store for t in component_types)
        ]
        return iter(matches)

    def set_parent(self, child: Entity, parent: Entity | None) -> None:
        """Make ``parent`` the parent of ``child``; ``None`` detaches it."""
        self._components(child)
        if parent is None:
            self._parents.pop(child, None)
            return
        self._components(parent)
        ancestor: Entity | None = parent
        while ancestor is not None:
            if ancestor == child:
                raise ValueError(
                    f"making {parent} the parent of {child} would form a cycle"
                )
            ancestor = self._parents.get(ancestor)
        self._parents[child] = parent

    def parent(self, entity: Entity) -> Entity | None:
        """The parent of ``entity``, or ``None``."""
        return self._parents.get(entity)

    def insert_resource(self, resource: Any) -> None:
        """Store ``resource`` as the single resource of its type."""
        self._check_component(resource)
        self._resources[type(resource)] = resource

    def resource(self, resource_type: type) -> Any | None:
        """The resource of ``resource_type``, or ``None``."""
        return self._resources.get(resource_type)

    def add_asset(self, asset: Any) -> AssetHandle:
        """Store ``asset`` and return a handle to it."""
        self._check_component(asset)
        handle = AssetHandle(type(asset), next(self._asset_ids))
        self._assets[handle] = asset
        return handle

    def asset(self, handle: AssetHandle) -> Any | None:
        """The asset behind ``handle``, or ``None``."""
        return self._assets.get(handle)

    def send(self, event: Any) -> None:
        """Queue ``event`` under its type."""
        self._events.setdefault(type(event), []).append(event)

    def drain_events(self, event_type: type) -> list[Any]:
        """Return and clear the queued events of ``event_type``, oldest first."""
        return self._events.pop(event_type, [])

    def observe(self, entity: Entity, callback: Callable[[Any], None]) -> None:
        """Call ``callback(event)`` whenever an event is triggered on ``entity``."""
        self._components(entity)
        if not callable(callback):
            raise TypeError("callback must be callable")
        self._observers.setdefault(entity, []).append(callback)

    def trigger(self, event: Any, entity: Entity) -> None:
        """Run the observers of ``entity`` with ``event``."""
        for callback in list(self._observers.get(entity, ())):
            callback(event)