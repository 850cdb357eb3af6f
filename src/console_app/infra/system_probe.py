"""Infrastructure: runtime and process information.

Collects the values shown on the System Info screen.  psutil supplies
the resident memory and the process start time; everything else comes
from :mod:`platform` and :mod:`sys`.
"""

from __future__ import annotations

import math
import platform
import sys
import time
from pathlib import Path

from console_app.core.models import SystemInfo
from console_app.exceptions import EnvironmentError

_BYTES_PER_MB: int = 1024 * 1024


def _round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for non-negatives."""
    return math.floor(value + 0.5)


class ProcessSystemProbe:
    """Concrete :class:`~console_app.core.protocols.SystemProbe` for this process."""

    def collect(self, cwd: Path) -> SystemInfo:
        try:
            import psutil
        except ModuleNotFoundError as exc:
            raise EnvironmentError(
                "psutil is not installed. Install with: pip install psutil",
            ) from exc

        process = psutil.Process()
        rss: int = process.memory_info().rss
        uptime: float = max(0.0, time.time() - process.create_time())

        return SystemInfo(
            python_version=platform.python_version(),
            platform=sys.platform,
            architecture=platform.machine(),
            cwd=str(cwd),
            memory_mb=_round_half_up(rss / _BYTES_PER_MB),
            uptime_seconds=_round_half_up(uptime),
        )
