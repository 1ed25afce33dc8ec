"""CAN frame model with validity checks and an abstract bus manager."""

__version__ = "0.1.0"
__all__ = ["manager", "message"]