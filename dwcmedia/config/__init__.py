"""Configuration."""

__all__ = ["Settings", "cfg"]
