"""Version information for neo-permissions."""

__version__ = "1.0.0"
