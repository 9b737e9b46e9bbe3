"""Core: config, constants, content catalog and application bootstrap.

Single place for settings and shared constants.
"""

from tagcloud.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
