"""rum: manage user styles in a Firefox profile's userContent.css and userChrome.css."""
from __future__ import annotations

__version__ = "0.4.0"

from rum.config import RumConfig
from rum.lifecycle import LifecycleEngine

__all__ = [
    "RumConfig",
    "LifecycleEngine",
    "__version__",
]
