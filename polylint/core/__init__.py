from .config import LintSettings, settings
from .logger import configure_logging

__all__ = ["LintSettings", "settings", "configure_logging"]
