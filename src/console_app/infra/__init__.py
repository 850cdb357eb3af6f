"""Infrastructure layer — operating-system integration.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Every raw ``OSError`` is re-raised as a
  :class:`~console_app.exceptions.ConsoleAppError` subclass.
"""

from console_app.infra.filesystem import WorkingDirectory
from console_app.infra.system_probe import ProcessSystemProbe

__all__: list[str] = [
    "ProcessSystemProbe",
    "WorkingDirectory",
]
