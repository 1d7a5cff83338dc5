"""Page scrolling through synthetic mouse wheel events."""

from __future__ import annotations

from pynput.mouse import Controller


class PynputScroller:
    """Turns pixel deltas into mouse wheel steps on the focused window.

    Fractional steps are carried over between calls so slow, continuous hand
    movement still scrolls instead of rounding to zero every time.
    """

    def __init__(self, step_pixels: int = 40, mouse=None):
        if step_pixels <= 0:
            raise ValueError("step_pixels must be positive")
        self._mouse = mouse if mouse is not None else Controller()
        self._step_pixels = step_pixels
        self._remainder = 0.0

    def scroll_by(self, dy: float, smooth: bool = False) -> None:
        total = self._remainder + dy / self._step_pixels
        steps = int(total)
        self._remainder = total - steps
        if steps == 0:
            return

        # pynput: positive dy scrolls up, page deltas are positive downwards
        if smooth:
            unit = -1 if steps > 0 else 1
            for _ in range(abs(steps)):
                self._mouse.scroll(0, unit)
        else:
            self._mouse.scroll(0, -steps)
