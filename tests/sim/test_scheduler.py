"""Tests for the virtual-clock scheduler."""

from rarity_duel.sim.scheduler import Scheduler


class TestScheduler:
    def test_nothing_runs_before_due(self):
        sched = Scheduler()
        ran = []
        sched.call_later(5.0, lambda: ran.append("a"))
        assert sched.advance(4.9) == 0
        assert ran == []
        assert sched.pending == 1

    def test_runs_when_due(self):
        sched = Scheduler()
        ran = []
        sched.call_later(5.0, lambda: ran.append("a"))
        sched.advance(4.0)
        assert sched.advance(1.0) == 1
        assert ran == ["a"]
        assert sched.now == 5.0

    def test_due_order_then_schedule_order(self):
        sched = Scheduler()
        ran = []
        sched.call_later(2.0, lambda: ran.append("late"))
        sched.call_later(1.0, lambda: ran.append("first"))
        sched.call_later(1.0, lambda: ran.append("second"))
        sched.advance(10.0)
        assert ran == ["first", "second", "late"]

    def test_nested_scheduling_in_window(self):
        sched = Scheduler()
        ran = []
        sched.call_later(1.0, lambda: sched.call_later(1.0, lambda: ran.append("child")))
        assert sched.advance(3.0) == 2
        assert ran == ["child"]

    def test_negative_delay_runs_on_next_advance(self):
        sched = Scheduler()
        ran = []
        sched.call_later(-3.0, lambda: ran.append("now"))
        sched.advance(0.0)
        assert ran == ["now"]

    def test_run_all(self):
        sched = Scheduler()
        ran = []
        sched.call_later(100.0, lambda: ran.append(1))
        sched.call_later(0.5, lambda: ran.append(2))
        assert sched.run_all() == 2
        assert ran == [2, 1]
        assert sched.pending == 0
        assert sched.now == 100.0
