from pokeworld.scheduler import ManualScheduler


def test_callbacks_fire_in_due_order() -> None:
    scheduler = ManualScheduler()
    fired = []
    scheduler.call_later(2.0, lambda: fired.append("late"))
    scheduler.call_later(1.0, lambda: fired.append("early"))
    scheduler.call_later(1.0, lambda: fired.append("early-second"))
    scheduler.advance(1.5)
    assert fired == ["early", "early-second"]
    assert scheduler.now == 1.5
    scheduler.advance(0.5)
    assert fired == ["early", "early-second", "late"]
    assert scheduler.pending_count == 0


def test_nested_scheduling_uses_virtual_time() -> None:
    scheduler = ManualScheduler()
    fired = []

    def first() -> None:
        fired.append(("first", scheduler.now))
        scheduler.call_later(2.0, lambda: fired.append(("second", scheduler.now)))

    scheduler.call_later(1.5, first)
    scheduler.advance(3.0)
    assert fired == [("first", 1.5)]
    scheduler.advance(0.5)
    assert fired == [("first", 1.5), ("second", 3.5)]


def test_run_all_drains_queue() -> None:
    scheduler = ManualScheduler()
    fired = []
    scheduler.call_later(5.0, lambda: fired.append(1))
    scheduler.call_later(1.0, lambda: scheduler.call_later(1.0, lambda: fired.append(2)))
    scheduler.run_all()
    assert fired == [2, 1]
    assert scheduler.pending_count == 0
