"""Application settings management.

This package provides:
- UserSettings: User-configurable settings loaded from config.yaml
- ConfigurationError: Fatal configuration problem
"""

from zipweather.settings.user import ConfigurationError, UserSettings

__all__ = ["ConfigurationError", "UserSettings"]
