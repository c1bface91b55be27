"""
Core systems: events, commands, configuration and logging.
"""
from pixellab.core.events import Signal
from pixellab.core.config import ConfigManager, AppConfig, CommandSettings, LoggingSettings
from pixellab.core.logging import setup_logging, setup_logging_from_settings
from pixellab.core.commands import (
    ICommand,
    InvalidArgumentError,
    DelegateCommand,
    TypedDelegateCommand,
)

__all__ = [
    "Signal",
    "ConfigManager",
    "AppConfig",
    "CommandSettings",
    "LoggingSettings",
    "setup_logging",
    "setup_logging_from_settings",
    "ICommand",
    "InvalidArgumentError",
    "DelegateCommand",
    "TypedDelegateCommand",
]
