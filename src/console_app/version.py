"""Single source of truth for the console-app version string."""

from __future__ import annotations

__version__: str = "1.0.0"
