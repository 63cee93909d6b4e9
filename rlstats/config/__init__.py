"""Configuration helpers."""

from .env import ApiConfig, configure_logging, get_export_dir, load_config

__all__ = ["ApiConfig", "configure_logging", "get_export_dir", "load_config"]
