"""niche-radar: competitive positioning scan for independent advisory firms."""

__version__ = "0.1.0"
