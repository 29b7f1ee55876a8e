import pytest

from src.pokemon_adventure.scheduler import Scheduler


def test_events_fire_in_due_order_then_scheduling_order():
    scheduler = Scheduler()
    fired = []
    scheduler.schedule(2.0, lambda: fired.append("late"))
    scheduler.schedule(1.0, lambda: fired.append("first"))
    scheduler.schedule(1.0, lambda: fired.append("second"))

    assert scheduler.advance(0.5) == 0
    assert fired == []
    assert scheduler.advance(0.5) == 2
    assert fired == ["first", "second"]
    assert scheduler.advance(5) == 1
    assert fired == ["first", "second", "late"]
    assert scheduler.now == 6.0


def test_chained_events_inside_window_fire():
    scheduler = Scheduler()
    fired = []

    def first():
        fired.append("first")
        scheduler.schedule(1.0, lambda: fired.append("chained"))

    scheduler.schedule(1.0, first)
    scheduler.advance(1.5)
    assert fired == ["first"]
    scheduler.advance(0.5)
    assert fired == ["first", "chained"]


def test_each_event_fires_once():
    scheduler = Scheduler()
    fired = []
    scheduler.schedule(0.1, lambda: fired.append(1))
    scheduler.advance(1)
    scheduler.advance(1)
    scheduler.flush()
    assert fired == [1]


def test_cancel_owner_drops_only_that_owner():
    scheduler = Scheduler()
    fired = []
    scheduler.schedule(1.0, lambda: fired.append("a"), owner=1)
    scheduler.schedule(1.0, lambda: fired.append("b"), owner=2)
    assert scheduler.cancel_owner(1) == 1
    assert [event.owner for event in scheduler.pending()] == [2]
    scheduler.flush()
    assert fired == ["b"]


def test_flush_runs_everything_and_moves_clock():
    scheduler = Scheduler()
    fired = []
    scheduler.schedule(3.0, lambda: fired.append("x"))
    assert scheduler.flush() == 1
    assert scheduler.now == 3.0


def test_negative_delays_are_rejected():
    scheduler = Scheduler()
    with pytest.raises(ValueError):
        scheduler.schedule(-1, lambda: None)
    with pytest.raises(ValueError):
        scheduler.advance(-1)


def test_flush_guards_against_endless_chains():
    scheduler = Scheduler()

    def again():
        scheduler.schedule(0.0, again)

    scheduler.schedule(0.0, again)
    with pytest.raises(RuntimeError):
        scheduler.flush(max_events=10)
