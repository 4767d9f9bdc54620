"""Configuration helpers for glossgen."""
from .settings import AppSettings, BuildSettings, get_settings, reload_settings

__all__ = ["AppSettings", "BuildSettings", "get_settings", "reload_settings"]
