"""LexiLens - reading accessibility overlay driven by a single settings snapshot"""

__version__ = "1.0.0"
__description__ = "Reading accessibility overlay driven by a single settings snapshot"

__all__ = ["main", "OverlayController", "__version__"]


def __getattr__(name: str):
    """Lazy import to avoid triggering pynput initialization on package import.

    This allows importing lexilens.core or lexilens.config without
    requiring a display, which is needed for CI/headless environments.
    """
    if name == "OverlayController":
        from .core.controller import OverlayController

        return OverlayController
    if name == "main":
        from .main import main

        return main
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
