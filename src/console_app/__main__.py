"""Allow ``python -m console_app`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m console_app`` behaves identically to the ``console-app``
console script.
"""

from __future__ import annotations

from console_app.cli.app import cli

if __name__ == "__main__":
    cli()
