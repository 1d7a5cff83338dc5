from fakes import FakeScroller

from lexilens.core.events import HAND_GESTURE_EVENT, HAND_SCROLL_EVENT, EventBus
from lexilens.core.gesture_bridge import GestureBridge
from lexilens.core.settings_model import Settings
from lexilens.core.ui_state import OverlayState

CONDUCTOR = "visual_aids.hand_conductor"


def _bridge():
    bus = EventBus()
    scroller = FakeScroller()
    state = OverlayState()
    return GestureBridge(bus, scroller, state), bus, scroller, state


def _conductor(enabled=True, master=True):
    return Settings(enabled=master).with_changes(CONDUCTOR, enabled=enabled)


def test_scroll_is_doubled_and_immediate():
    bridge, bus, scroller, _ = _bridge()
    bridge.sync(_conductor())

    bus.dispatch(HAND_SCROLL_EVENT, {"deltaY": 10})

    assert scroller.calls == [(20, False)]


def test_no_scroll_when_conductor_off():
    bridge, bus, scroller, _ = _bridge()
    bridge.sync(_conductor(enabled=False))

    bus.dispatch(HAND_SCROLL_EVENT, {"deltaY": 10})

    assert scroller.calls == []


def test_master_off_detaches_listeners():
    bridge, bus, scroller, _ = _bridge()
    bridge.sync(_conductor())
    bridge.sync(_conductor(master=False))

    bus.dispatch(HAND_SCROLL_EVENT, {"deltaY": 10})

    assert scroller.calls == []
    assert not bridge.attached
    assert bus.listener_count(HAND_SCROLL_EVENT) == 0


def test_right_toggles_panel():
    bridge, bus, _, state = _bridge()
    bridge.sync(_conductor())

    bus.dispatch(HAND_GESTURE_EVENT, {"direction": "RIGHT"})
    assert state.panel_open is True

    bus.dispatch(HAND_GESTURE_EVENT, {"direction": "RIGHT"})
    assert state.panel_open is False


def test_left_always_closes_panel():
    bridge, bus, _, state = _bridge()
    bridge.sync(_conductor())

    bus.dispatch(HAND_GESTURE_EVENT, {"direction": "LEFT"})
    assert state.panel_open is False

    state.open_panel()
    bus.dispatch(HAND_GESTURE_EVENT, {"direction": "LEFT"})
    assert state.panel_open is False


def test_other_directions_and_malformed_details_are_ignored():
    bridge, bus, scroller, state = _bridge()
    bridge.sync(_conductor())

    bus.dispatch(HAND_GESTURE_EVENT, {"direction": "UP"})
    bus.dispatch(HAND_GESTURE_EVENT, None)
    bus.dispatch(HAND_SCROLL_EVENT, {"deltaY": "fast"})
    bus.dispatch(HAND_SCROLL_EVENT, {})

    assert state.panel_open is False
    assert scroller.calls == []


def test_repeated_cycles_do_not_stack_listeners():
    bridge, bus, scroller, _ = _bridge()
    for _ in range(5):
        bridge.sync(_conductor())
        bridge.sync(_conductor())
        bridge.sync(_conductor(enabled=False))
    bridge.sync(_conductor())

    assert bus.listener_count(HAND_SCROLL_EVENT) == 1
    assert bus.listener_count(HAND_GESTURE_EVENT) == 1

    bus.dispatch(HAND_SCROLL_EVENT, {"deltaY": -3})
    assert scroller.calls == [(-6, False)]


def test_custom_multiplier():
    bus = EventBus()
    scroller = FakeScroller()
    bridge = GestureBridge(bus, scroller, OverlayState(), scroll_multiplier=3)
    bridge.attach()

    bus.dispatch(HAND_SCROLL_EVENT, {"deltaY": 5})

    assert scroller.calls == [(15, False)]


def test_scroller_failure_stays_inside_the_bus():
    class _BrokenScroller:
        def scroll_by(self, dy, smooth=False):
            raise RuntimeError("scroll backend gone")

    bus = EventBus()
    bridge = GestureBridge(bus, _BrokenScroller(), OverlayState())
    bridge.attach()
    seen = []
    bus.subscribe(HAND_SCROLL_EVENT, seen.append)

    bus.dispatch(HAND_SCROLL_EVENT, {"deltaY": 10})

    assert seen == [{"deltaY": 10}]
