from typing import Any
import json
import os
from pydantic import BaseModel, Field, model_validator
from loguru import logger
from .events import Signal

# --- Settings Models ---
class CounterSettings(BaseModel):
    initial_value: int = 0
    min_value: int = -100
    max_value: int = 100

    @model_validator(mode="after")
    def _check_bounds(self) -> "CounterSettings":
        if self.min_value > self.max_value:
            raise ValueError(f"min_value ({self.min_value}) exceeds max_value ({self.max_value})")
        if not self.min_value <= self.initial_value <= self.max_value:
            raise ValueError(
                f"initial_value ({self.initial_value}) outside [{self.min_value}, {self.max_value}]"
            )
        return self

class WindowSettings(BaseModel):
    title: str = "MVVM Pattern - Teaching Demo"
    width: int = Field(default=600, gt=0)
    height: int = Field(default=700, gt=0)
    resizable: bool = False

class GeneralSettings(BaseModel):
    debug_mode: bool = False
    log_dir: str = "logs"
    log_to_file: bool = True

class AppConfig(BaseModel):
    general: GeneralSettings = Field(default_factory=GeneralSettings)
    counter: CounterSettings = Field(default_factory=CounterSettings)
    window: WindowSettings = Field(default_factory=WindowSettings)

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

        # Rebuild the section so cross-field validators see the new value;
        # a ValidationError leaves the current config untouched.
        raw = section_obj.model_dump()
        raw[key] = value
        new_section = type(section_obj).model_validate(raw)

        setattr(self._data, section, new_section)
        self._save()
        self.on_changed.emit(section, key, getattr(new_section, key))

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
            except Exception as e:
                logger.error(f"Failed to load config from {self.filepath}: {e}")
                self._data = AppConfig()
        else:
            self._save()

    def _save(self):
        """Persist current config to JSON file."""
        if self.filepath.endswith('.toml'):
            # TOML files are treated as read-only input
            return
        try:
            dirname = os.path.dirname(self.filepath)
            if dirname:
                os.makedirs(dirname, exist_ok=True)
            with open(self.filepath, "w", encoding="utf-8") as f:
                json.dump(self._data.model_dump(), f, indent=4)
        except OSError as e:
            logger.error(f"Failed to save config to {self.filepath}: {e}")
