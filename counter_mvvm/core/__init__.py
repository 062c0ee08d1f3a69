"""
Core services: configuration, logging and the synchronous Signal primitive.
"""
from counter_mvvm.core.events import Signal
from counter_mvvm.core.config import (
    ConfigManager,
    AppConfig,
    CounterSettings,
    WindowSettings,
    GeneralSettings,
)
from counter_mvvm.core.logging import setup_logging

__all__ = [
    "Signal",
    "ConfigManager",
    "AppConfig",
    "CounterSettings",
    "WindowSettings",
    "GeneralSettings",
    "setup_logging",
]
