"""Teardown controller: full disable sweep when the overlay goes away."""

from __future__ import annotations

import logging

from .modifiers import MODIFIER_SLOTS, TYPOGRAPHY_SLOT
from .orchestrator import invoke_isolated
from .ports import ModifierAdapters

logger = logging.getLogger(__name__)


class TeardownController:
    """Disables every modifier exactly once, whatever the last settings were.

    The sweep is not diff-based: the overlay may be destroyed before a final
    "disabled" snapshot was ever observed.
    """

    def __init__(self, adapters: ModifierAdapters, *bridges):
        self._adapters = adapters
        self._bridges = bridges
        self._done = False

    @property
    def done(self) -> bool:
        return self._done

    def run(self) -> None:
        if self._done:
            return
        self._done = True

        for bridge in self._bridges:
            bridge.detach()

        invoke_isolated(self._adapters, TYPOGRAPHY_SLOT.id, "remove")
        for slot in MODIFIER_SLOTS:
            invoke_isolated(self._adapters, slot.id, "disable")
        logger.debug("Teardown complete")
