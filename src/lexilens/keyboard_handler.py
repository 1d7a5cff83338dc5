"""Global hotkeys for LexiLens"""
from pynput import keyboard
from pynput.keyboard import Key

_MODIFIERS = {
    "alt": (Key.alt, Key.alt_l, Key.alt_r),
    "ctrl": (Key.ctrl, Key.ctrl_l, Key.ctrl_r),
    "shift": (Key.shift, Key.shift_l, Key.shift_r),
}


class KeyboardHandler:
    """Map modifier+key combinations to callbacks.

    ``bindings`` maps a key character to the callback fired when it is
    pressed together with ``modifier``.
    """

    def __init__(self, modifier: str, bindings: dict):
        self.modifier = modifier.lower().split("_")[0]
        self.bindings = {key.lower(): callback for key, callback in bindings.items()}
        self.listener = None
        self.pressed_keys = set()
        self.active_combo = None

    def start(self):
        """Start keyboard listener"""
        self.listener = keyboard.Listener(
            on_press=self._on_press,
            on_release=self._on_release
        )
        self.listener.start()

    def stop(self):
        """Stop keyboard listener"""
        if self.listener:
            self.listener.stop()
            self.listener = None

    def _on_press(self, key):
        """Track key presses and fire bindings once per press"""
        self.pressed_keys.add(_normalize(key))
        combo = self._pressed_combo()
        if combo and combo != self.active_combo:
            self.active_combo = combo
            self.bindings[combo]()

    def _on_release(self, key):
        """Track key releases"""
        normalized = _normalize(key)
        self.pressed_keys.discard(normalized)
        if normalized == self.active_combo or normalized in _MODIFIERS.get(self.modifier, ()):
            self.active_combo = None

    def _pressed_combo(self):
        """Return the bound key currently held with the modifier, if any"""
        modifier_keys = _MODIFIERS.get(self.modifier, ())
        if not any(k in self.pressed_keys for k in modifier_keys):
            return None
        for key in self.bindings:
            if key in self.pressed_keys:
                return key
        return None


def _normalize(key):
    char = getattr(key, "char", None)
    if char:
        return char.lower()
    return key
