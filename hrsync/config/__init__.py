"""Configuration module."""

from hrsync.config.settings import ClientSettings

__all__ = ["ClientSettings"]
