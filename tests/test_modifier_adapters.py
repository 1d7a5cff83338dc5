import pytest

from lexilens.adapters.modifiers import (
    FunctionModifierAdapter,
    FunctionTypographyAdapter,
    LoggingModifierAdapter,
    logging_adapters,
)
from lexilens.core.modifiers import ModifierId
from lexilens.core.orchestrator import LifecycleOrchestrator
from lexilens.core.ports import TypographyModifier, UpdatableModifier
from lexilens.core.settings_model import Settings


def test_function_adapter_forwards_calls():
    events = []
    adapter = FunctionModifierAdapter(
        enable_fn=lambda p: events.append(("on", p)),
        disable_fn=lambda: events.append(("off",)),
        update_fn=lambda p: events.append(("set", p)),
    )

    adapter.enable(1)
    adapter.update(2)
    adapter.disable()

    assert events == [("on", 1), ("set", 2), ("off",)]
    assert isinstance(adapter, UpdatableModifier)


def test_function_adapter_without_update_refuses_update():
    adapter = FunctionModifierAdapter(enable_fn=lambda p: None, disable_fn=lambda: None)

    assert adapter.updatable is False
    with pytest.raises(TypeError, match="update_fn"):
        adapter.update({})


def test_function_typography_adapter():
    events = []
    adapter = FunctionTypographyAdapter(apply_fn=events.append, remove_fn=lambda: events.append(None))

    adapter.apply("serif")
    adapter.remove()

    assert events == ["serif", None]
    assert isinstance(adapter, TypographyModifier)


def test_logging_adapters_cover_every_slot(caplog):
    adapters = logging_adapters()
    orchestrator = LifecycleOrchestrator(adapters)

    with caplog.at_level("INFO"):
        orchestrator.sync(Settings().with_changes("visual_aids.focus_mode", enabled=True))

    focus = adapters.get(ModifierId.FOCUS_MODE)
    assert isinstance(focus, LoggingModifierAdapter)
    assert focus.active is True
    assert adapters.get(ModifierId.TYPOGRAPHY).active is True
    assert "focus_mode enabled" in caplog.text
