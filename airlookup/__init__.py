"""AIR constraint building with lookup-bus interactions and a bitwise range-check bus."""

__version__ = "0.1.0"
__all__ = ["field", "air", "interaction", "bus", "core"]