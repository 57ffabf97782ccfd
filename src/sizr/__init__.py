"""sizr — list the largest files and directories under a path."""

__version__ = "0.1.0"
