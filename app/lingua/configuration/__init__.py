"""Configuration for lingua.

Settings are read from the environment when instantiated; use
``lingua.providers.get_settings()`` for an application-scoped instance.
"""

from lingua.configuration.settings import I18nSettings, Settings

__all__ = ["I18nSettings", "Settings"]
