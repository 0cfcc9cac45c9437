"""Tests for LayoutTrigger scheduling and resize debounce."""

import asyncio

import pytest

from netdiagram.viz.trigger import RESIZE_QUIET_WINDOW, LayoutTrigger


class Recorder:
    """Render callback that records the fake-loop time of each call."""

    def __init__(self, loop):
        self.loop = loop
        self.calls = []

    def __call__(self):
        self.calls.append(self.loop.now)


def test_quiet_window_is_120ms():
    assert RESIZE_QUIET_WINDOW == pytest.approx(0.120)


class TestInitialPass:
    def test_runs_on_next_iteration_not_immediately(self, fake_loop):
        render = Recorder(fake_loop)
        trigger = LayoutTrigger(render, fake_loop)
        trigger.schedule_initial()
        assert render.calls == []
        assert trigger.pending
        fake_loop.advance(0)
        assert render.calls == [0.0]
        assert not trigger.pending

    def test_runs_once(self, fake_loop):
        render = Recorder(fake_loop)
        trigger = LayoutTrigger(render, fake_loop)
        trigger.schedule_initial()
        fake_loop.advance(1.0)
        assert len(render.calls) == 1
        assert trigger.runs == 1


class TestResizeDebounce:
    def test_single_resize_fires_after_window(self, fake_loop):
        render = Recorder(fake_loop)
        trigger = LayoutTrigger(render, fake_loop)
        trigger.on_resize()
        fake_loop.advance(0.119)
        assert render.calls == []
        fake_loop.advance(0.002)
        assert render.calls == [pytest.approx(0.120)]

    def test_burst_of_ten_triggers_exactly_one_redraw(self, fake_loop):
        render = Recorder(fake_loop)
        trigger = LayoutTrigger(render, fake_loop)

        for _ in range(10):
            trigger.on_resize()
            fake_loop.advance(0.005)
        last_signal = fake_loop.now - 0.005

        fake_loop.advance(1.0)

        assert len(render.calls) == 1
        assert render.calls[0] == pytest.approx(last_signal + 0.120)

    def test_signals_within_window_keep_postponing(self, fake_loop):
        render = Recorder(fake_loop)
        trigger = LayoutTrigger(render, fake_loop)
        for _ in range(5):
            trigger.on_resize()
            fake_loop.advance(0.100)
        assert render.calls == []
        fake_loop.advance(0.030)
        assert len(render.calls) == 1

    def test_separate_bursts_each_redraw(self, fake_loop):
        render = Recorder(fake_loop)
        trigger = LayoutTrigger(render, fake_loop)
        trigger.on_resize()
        fake_loop.advance(0.5)
        trigger.on_resize()
        fake_loop.advance(0.5)
        assert render.calls == [pytest.approx(0.120), pytest.approx(0.620)]

    def test_cancelled_handles_never_fire(self, fake_loop):
        render = Recorder(fake_loop)
        trigger = LayoutTrigger(render, fake_loop)
        for _ in range(3):
            trigger.on_resize()
        assert len(fake_loop.scheduled) == 1
        assert sum(h.cancelled for h in fake_loop.handles) == 2

    def test_cancel_drops_pending(self, fake_loop):
        render = Recorder(fake_loop)
        trigger = LayoutTrigger(render, fake_loop)
        trigger.on_resize()
        trigger.cancel()
        fake_loop.advance(1.0)
        assert render.calls == []
        assert not trigger.pending

    def test_resize_replaces_pending_initial_pass(self, fake_loop):
        render = Recorder(fake_loop)
        trigger = LayoutTrigger(render, fake_loop)
        trigger.schedule_initial()
        trigger.on_resize()
        fake_loop.advance(1.0)
        assert render.calls == [pytest.approx(0.120)]

    def test_custom_quiet_window(self, fake_loop):
        render = Recorder(fake_loop)
        trigger = LayoutTrigger(render, fake_loop, quiet_window=0.5)
        trigger.on_resize()
        fake_loop.advance(0.4)
        assert render.calls == []
        fake_loop.advance(0.2)
        assert len(render.calls) == 1


class TestAsyncioLoop:
    @pytest.mark.asyncio
    async def test_uses_running_loop_by_default(self):
        calls = []
        trigger = LayoutTrigger(lambda: calls.append(1))
        trigger.schedule_initial()
        assert calls == []
        await asyncio.sleep(0)
        assert calls == [1]

    @pytest.mark.asyncio
    async def test_resize_burst_on_real_loop(self):
        calls = []
        trigger = LayoutTrigger(lambda: calls.append(1))
        for _ in range(10):
            trigger.on_resize()
            await asyncio.sleep(0.005)
        assert calls == []
        await asyncio.sleep(0.3)
        assert calls == [1]

    def test_no_running_loop_raises_on_schedule(self):
        trigger = LayoutTrigger(lambda: None)
        with pytest.raises(RuntimeError):
            trigger.schedule_initial()
