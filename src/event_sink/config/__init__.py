"""
Package: config
Description: Environment-driven connector configuration.
"""

from .settings import ConnectorSettings, load_settings

__all__ = ["ConnectorSettings", "load_settings"]
