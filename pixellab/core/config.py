"""
Application configuration.

Settings sections are shared live with the objects that use them:

    config = ConfigManager("config.json")
    setup_logging_from_settings(config.data.logging)
    command = TypedDelegateCommand(int, on_select, settings=config.data.commands)

    # The command stops tracing parameter mismatches right away
    config.update("commands", "trace_type_mismatch", False)
"""
from typing import Any
import json
import os
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from loguru import logger
from .events import Signal

# --- Settings Models ---
class LoggingSettings(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    debug_mode: bool = True
    log_dir: str = "logs"
    file_logging: bool = True

class CommandSettings(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    # Debug trace when a binding queries a typed command with the wrong parameter type
    trace_type_mismatch: bool = True

class AppConfig(BaseModel):
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    commands: CommandSettings = Field(default_factory=CommandSettings)

# --- Manager ---
class ConfigManager:
    """
    Manages application configuration with persistence and reactivity.
    """
    def __init__(self, filepath: str = "config.json"):
        self.filepath = filepath
        self._data = AppConfig()
        self.on_changed = Signal("ConfigChanged")
        self._load()

    @property
    def data(self) -> AppConfig:
        return self._data

    def update(self, section: str, key: str, value: Any):
        """Update a setting, validate via Pydantic, autosave, and emit change event."""
        if section not in AppConfig.model_fields:
            raise ValueError(f"Invalid section: {section}")

        section_obj = getattr(self._data, section)
        if key not in type(section_obj).model_fields:
            raise ValueError(f"Invalid key: {key} in section {section}")

        # Mutated in place so holders of the section see the new value
        setattr(section_obj, key, value)
        self._save()
        self.on_changed.emit(section, key, getattr(section_obj, key))

    def get(self, section: str, key: str) -> Any:
        section_obj = getattr(self._data, section)
        return getattr(section_obj, key)

    def _load(self):
        """Load settings from JSON or TOML file if present; otherwise keep defaults."""
        if os.path.isfile(self.filepath):
            try:
                if self.filepath.endswith('.toml'):
                    import tomllib
                    with open(self.filepath, "rb") as f:
                        raw = tomllib.load(f)
                else:
                    with open(self.filepath, "r", encoding="utf-8") as f:
                        raw = json.load(f)
                self._data = AppConfig.model_validate(raw)
            except (OSError, ValueError, ValidationError) as e:
                logger.error(f"Failed to load config from {self.filepath}: {e}")
                self._save()
        else:
            self._save()

    def _save(self):
        """Persist current config to JSON file."""
        if self.filepath.endswith('.toml'):
            # TOML config files are never written back
            return
        try:
            dirname = os.path.dirname(self.filepath)
            if dirname:
                os.makedirs(dirname, exist_ok=True)
            with open(self.filepath, "w", encoding="utf-8") as f:
                json.dump(self._data.model_dump(), f, indent=4)
        except OSError as e:
            logger.error(f"Failed to save config to {self.filepath}: {e}")
