"""
PixelLab - Delegate commands for MVVM user interfaces.

Bind buttons and menu items to ViewModel actions without writing a
command class per action.
"""
from pixellab.core import (
    Signal,
    ConfigManager,
    AppConfig,
    CommandSettings,
    LoggingSettings,
    setup_logging,
    setup_logging_from_settings,
    ICommand,
    InvalidArgumentError,
    DelegateCommand,
    TypedDelegateCommand,
)

__version__ = "0.1.0"

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
