"""rtplan - storage target device layout planner."""

__version__ = "0.1.0"
