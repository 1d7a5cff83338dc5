"""Modifier adapters.

The concrete renderers (ruler drawing, tint overlay, speech, ...) live
outside the core. These adapters let them be plugged in as plain callables,
and provide a logging stand-in for running the overlay without renderers.
"""

from __future__ import annotations

import logging
from typing import Callable

from ..core.modifiers import ModifierId
from ..core.ports import ModifierAdapters

logger = logging.getLogger(__name__)


class FunctionModifierAdapter:
    def __init__(
        self,
        enable_fn: Callable[[object], None],
        disable_fn: Callable[[], None],
        update_fn: Callable[[object], None] | None = None,
    ):
        self._enable_fn = enable_fn
        self._disable_fn = disable_fn
        self._update_fn = update_fn

    @property
    def updatable(self) -> bool:
        return self._update_fn is not None

    def enable(self, params) -> None:
        self._enable_fn(params)

    def update(self, params) -> None:
        if self._update_fn is None:
            raise TypeError("modifier was built without update_fn and cannot be updated")
        self._update_fn(params)

    def disable(self) -> None:
        self._disable_fn()


class FunctionTypographyAdapter:
    def __init__(self, apply_fn: Callable[[object], None], remove_fn: Callable[[], None]):
        self._apply_fn = apply_fn
        self._remove_fn = remove_fn

    def apply(self, params) -> None:
        self._apply_fn(params)

    def remove(self) -> None:
        self._remove_fn()


class LoggingModifierAdapter:
    """Logs every lifecycle call; tracks whether the modifier is on."""

    def __init__(self, name: str):
        self.name = name
        self.active = False

    def enable(self, params) -> None:
        self.active = True
        logger.info("%s enabled: %s", self.name, params)

    def update(self, params) -> None:
        logger.info("%s updated: %s", self.name, params)

    def disable(self) -> None:
        if self.active:
            logger.info("%s disabled", self.name)
        self.active = False

    def apply(self, params) -> None:
        self.active = True
        logger.info("%s applied: %s", self.name, params)

    def remove(self) -> None:
        if self.active:
            logger.info("%s removed", self.name)
        self.active = False


def logging_adapters() -> ModifierAdapters:
    """A full adapter set that only logs."""
    return ModifierAdapters(
        **{modifier.value: LoggingModifierAdapter(modifier.value) for modifier in ModifierId}
    )
