"""console-app — interactive menu-driven console demo.

File browsing, a four-function calculator and system information,
wired together with argparse, questionary and Rich.
"""

from console_app.version import __version__

__all__: list[str] = ["__version__"]
