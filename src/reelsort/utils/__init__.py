"""Utility modules for reelsort."""

from reelsort.utils.config import AppConfig, load_config
from reelsort.utils.debug import setup_logger

__all__ = ["AppConfig", "load_config", "setup_logger"]
