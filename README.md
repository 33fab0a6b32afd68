# tweenflow

A small tweening library built around an in-memory entity world. Entities
hold components; a tween points at a target (components on entities, a
resource, or assets) and carries an interpolator that writes into that
target. Systems read each tween's interpolation value and apply it, and an
event system fires timed events from entities that are in progress.

## Installing

```
pip install tweenflow
```

To run the test suite:

```
pip install "tweenflow[test]"
pytest
```

## Modules

### `tweenflow.world`

`World` stores entities (plain integers) with at most one component per
type, plus resources, assets, parent links, queued events and per-entity
observers.

- `spawn(*components)`, `insert(entity, *components)`,
  `remove(entity, component_type)`, `despawn(entity)`
- `contains(entity)`, `get(entity, component_type)`,
  `has(entity, component_type)`
- `query(*component_types)` yields `(entity, component, ...)` for each
  entity that holds every requested type.
- `set_parent(child, parent)` (a cycle raises `ValueError`, `None`
  detaches) and `parent(entity)`
- `insert_resource(resource)` and `resource(resource_type)`
- `add_asset(asset)` returns an `AssetHandle`; `asset(handle)` looks it up.
- `send(event)` and `drain_events(event_type)`
- `observe(entity, callback)` and `trigger(event, entity)`

Writing to an entity that does not exist raises `KeyError`; reading from
one gives `None` or `False`.

### `tweenflow.tween`

- `Tween(target, interpolator, item_type=None)` pairs a target with an
  interpolator. The interpolator is either an object with an
  `interpolate(item, value)` method or a callable `f(item, value)`.
  `item_type` names the component, resource or asset type it works on; if
  left out it is taken from the interpolator's `item_type` attribute, when
  it has one.
- Targets:
  - `TargetComponent`, with the variants `MarkerTarget`, `EntityTarget` and
    `EntitiesTarget` (also built by `TargetComponent.marker()`, `.entity()`,
    `.entities()`; `.default()` is the marker).
  - `TargetResource`
  - `TargetAsset`, built from `AssetHandle`s via `TargetAsset.asset()` or
    `TargetAsset.assets()`.
  - Each target has `with_(interpolator, item_type=None)` and
    `with_closure(closure, item_type=None)` to build a `Tween`.
- `into_target(value)` turns an entity, a collection of entities, an
  `AssetHandle`, a collection of handles or `AnimationTarget` into a target.
  `target_entities` and `target_assets` build the multi-target forms.
- Components used by the systems: `TimeSpanProgress`,
  `TweenInterpolationValue`, `SkipTween` and `AnimationTarget`.

### `tweenflow.systems`

Each system is called with the world: `system(world)`. Tweens on entities
marked `SkipTween`, or without a `TweenInterpolationValue`, are left alone.

- `ComponentTweenSystem(item_type=None, interpolator_type=None)` applies
  component tweens. A marker target walks up the parent chain with
  `find_animation_target` to the first entity carrying `AnimationTarget`.
- `ResourceTweenSystem(item_type, interpolator_type=None)` applies resource
  tweens to the world's resource of `item_type`.
- `AssetTweenSystem(item_type=None, interpolator_type=None)` applies asset
  tweens to every asset their handles point at.

Lookup failures are not raised: they are logged through the
`tweenflow.systems` logger, once until they change or go away. A failed
component lookup is described by `QueryEntityError` with a
`QueryEntityErrorKind`.

### `tweenflow.events`

`TweenEventSystem(data_type=None)` fires a `TweenEvent` for every entity
holding both `TweenEventData` and `TimeSpanProgress` (and not
`SkipTween`). The event carries a copy of the data, the progress, the
entity's interpolation value (or `None`) and the entity. It goes first to
the entity's observers, then into the world's event queue.

## Example

```python
from dataclasses import dataclass

from tweenflow.systems import ComponentTweenSystem
from tweenflow.tween import TweenInterpolationValue, into_target
from tweenflow.world import World


@dataclass
class Size:
    value: float


world = World()
box = world.spawn(Size(0.0))

tween = into_target(box).with_(
    lambda item, v: setattr(item, "value", 10 * v), Size
)
world.spawn(tween, TweenInterpolationValue(0.5))

ComponentTweenSystem()(world)
assert world.get(box, Size).value == 5.0
```

## What this package does not do

- It has no easing curves and does not turn progress into an interpolation
  value: the `TweenInterpolationValue` on each tween entity is yours to
  write, for instance from the entity's `TimeSpanProgress`.
- It does not advance `TimeSpanProgress`; timing is up to the caller.
- It has no scheduler or frame loop: call the systems yourself, in the
  order you need, once per frame.