from lexilens.core.events import ExtensionMessage, LocalMessageChannel
from lexilens.core.message_bridge import MessageBridge
from lexilens.core.ui_state import OverlayState


def test_summarize_sets_text_and_closes_panel():
    channel = LocalMessageChannel()
    state = OverlayState(panel_open=True)
    bridge = MessageBridge(channel, state)
    bridge.attach()

    channel.send({"type": "SUMMARIZE_TEXT", "payload": "hello"})

    assert state.summary_text == "hello"
    assert state.panel_open is False


def test_accepts_message_objects_and_calls_surface():
    channel = LocalMessageChannel()
    shown = []
    bridge = MessageBridge(channel, OverlayState(), on_summary=shown.append)
    bridge.attach()

    channel.send(ExtensionMessage(type="SUMMARIZE_TEXT", payload="a summary"))

    assert shown == ["a summary"]


def test_other_and_malformed_messages_are_ignored():
    channel = LocalMessageChannel()
    state = OverlayState(panel_open=True)
    bridge = MessageBridge(channel, state)
    bridge.attach()

    channel.send({"type": "PING", "payload": "x"})
    channel.send({"type": "SUMMARIZE_TEXT", "payload": 42})
    channel.send({"type": "SUMMARIZE_TEXT"})
    channel.send("SUMMARIZE_TEXT")
    channel.send(None)

    assert state.summary_text is None
    assert state.panel_open is True


def test_single_listener_registered_and_removed_once():
    channel = LocalMessageChannel()
    bridge = MessageBridge(channel, OverlayState())

    bridge.attach()
    bridge.attach()
    assert channel.listener_count() == 1

    bridge.detach()
    bridge.detach()
    assert channel.listener_count() == 0
