import pytest

from tweenflow.events import TweenEvent, TweenEventData, TweenEventSystem
from tweenflow.tween import SkipTween, TimeSpanProgress, TweenInterpolationValue
from tweenflow.world import World


def test_event_sent_with_progress_and_value():
    world = World()
    progress = TimeSpanProgress(0.25)
    entity = world.spawn(
        TweenEventData("hello"), progress, TweenInterpolationValue(0.5)
    )
    TweenEventSystem()(world)
    events = world.drain_events(TweenEvent)
    assert events == [TweenEvent("hello", progress, 0.5, entity)]


def test_missing_interpolation_value_gives_none():
    world = World()
    entity = world.spawn(TweenEventData(), TimeSpanProgress(0.1))
    TweenEventSystem()(world)
    [event] = world.drain_events(TweenEvent)
    assert event.interpolation_value is None
    assert event.data is None
    assert event.entity == entity


def test_no_event_without_progress():
    world = World()
    world.spawn(TweenEventData("x"))
    TweenEventSystem()(world)
    assert world.drain_events(TweenEvent) == []


def test_skip_tween_suppresses_event():
    world = World()
    world.spawn(TweenEventData("x"), TimeSpanProgress(0.5), SkipTween())
    TweenEventSystem()(world)
    assert world.drain_events(TweenEvent) == []


def test_observer_receives_same_event_as_queue():
    world = World()
    entity = world.spawn(TweenEventData("ping"), TimeSpanProgress(0.75))
    received = []
    world.observe(entity, received.append)
    TweenEventSystem()(world)
    queued = world.drain_events(TweenEvent)
    assert received == queued
    assert len(received) == 1
    assert received[0].data == "ping"


def test_data_type_filter():
    world = World()
    world.spawn(TweenEventData("text"), TimeSpanProgress(0.5))
    none_entity = world.spawn(TweenEventData(), TimeSpanProgress(0.5))
    TweenEventSystem(type(None))(world)
    events = world.drain_events(TweenEvent)
    assert [e.entity for e in events] == [none_entity]


def test_str_filter_picks_strings_only():
    world = World()
    str_entity = world.spawn(TweenEventData("text"), TimeSpanProgress(0.5))
    world.spawn(TweenEventData(), TimeSpanProgress(0.5))
    TweenEventSystem(str)(world)
    events = world.drain_events(TweenEvent)
    assert [(e.entity, e.data) for e in events] == [(str_entity, "text")]


def test_fires_every_run():
    world = World()
    world.spawn(TweenEventData("tick"), TimeSpanProgress(0.5))
    system = TweenEventSystem()
    system(world)
    system(world)
    assert len(world.drain_events(TweenEvent)) == 2


def test_events_in_spawn_order():
    world = World()
    first = world.spawn(TweenEventData("a"), TimeSpanProgress(0.1))
    second = world.spawn(TweenEventData("b"), TimeSpanProgress(0.2))
    TweenEventSystem()(world)
    events = world.drain_events(TweenEvent)
    assert [(e.entity, e.data) for e in events] == [(first, "a"), (second, "b")]


def test_data_is_copied():
    world = World()
    payload = [1, 2]
    world.spawn(TweenEventData(payload), TimeSpanProgress(0.5))
    TweenEventSystem()(world)
    [event] = world.drain_events(TweenEvent)
    assert event.data == payload
    event.data.append(3)
    assert payload == [1, 2]


def test_invalid_data_type_rejected():
    with pytest.raises(TypeError):
        TweenEventSystem("str")


def test_event_data_default_is_none():
    assert TweenEventData() == TweenEventData(None)