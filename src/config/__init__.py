"""Configuration module for the Ethiopian Date Service."""

from src.config.base import Settings
from src.config.loader import get_settings, reload_settings

__all__ = ["Settings", "get_settings", "reload_settings"]
