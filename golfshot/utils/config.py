"""
User settings for golfshot.

Settings are persisted to ~/.golfshot/config.json (or the file named by the
GOLFSHOT_CONFIG environment variable) and turned into the immutable
configuration objects the engine takes.
"""

import dataclasses
import json
import logging
import os
from pathlib import Path
from typing import Optional

from golfshot.models.physics import DEFAULT_PHYSICS, PhysicsConfig, SimulationSettings
from golfshot.models.shot import WeatherConditions
from golfshot.utils.constants import MAX_FLIGHT_TIME, SAMPLE_EVERY, TIME_STEP

logger = logging.getLogger(__name__)


class Config:
    """Manages simulation settings with JSON file persistence."""

    _APP_DIR = Path.home() / ".golfshot"
    _CONFIG_FILE = _APP_DIR / "config.json"
    _ENV_VAR = "GOLFSHOT_CONFIG"

    _defaults = {
        "time_step": TIME_STEP,             # seconds per integration step
        "sample_every": SAMPLE_EVERY,       # keep every Nth step in the output
        "max_flight_time": MAX_FLIGHT_TIME, # runaway cutoff (seconds)
        "altitude_density": False,          # thin the air with height
        "ball_type": "RPT Ball",
        "weather": None,                    # {"temperature", "air_pressure", "humidity"}
    }

    def __init__(self, path: Optional[Path] = None):
        env_path = os.environ.get(self._ENV_VAR, "")
        if path is not None:
            self.path = Path(path)
        elif env_path:
            self.path = Path(env_path)
        else:
            self.path = self._CONFIG_FILE
        self._settings: dict = {}
        self._load()

    def _load(self):
        """Load settings from disk, merging with defaults."""
        if self.path.exists():
            try:
                with open(self.path) as f:
                    saved = json.load(f)
                # Merge: defaults first, then saved values override
                self._settings = {**self._defaults, **saved}
            except (json.JSONDecodeError, IOError) as e:
                logger.warning(f"Could not read {self.path}, using defaults: {e}")
                self._settings = dict(self._defaults)
        else:
            self._settings = dict(self._defaults)

    def save(self):
        """Persist current settings to disk."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w") as f:
            json.dump(self._settings, f, indent=2)

    def get(self, key: str, default=None):
        """Get a setting value."""
        return self._settings.get(key, default)

    def set(self, key: str, value):
        """Set a setting value and save."""
        self._settings[key] = value
        self.save()

    def simulation_settings(self) -> SimulationSettings:
        """Integration settings from the stored values."""
        return SimulationSettings(
            time_step=float(self.get("time_step")),
            sample_every=int(self.get("sample_every")),
            max_flight_time=float(self.get("max_flight_time")),
        )

    def physics_config(self) -> PhysicsConfig:
        """Default physics with the stored altitude-density switch."""
        return dataclasses.replace(
            DEFAULT_PHYSICS, altitude_density=bool(self.get("altitude_density"))
        )

    def weather(self) -> Optional[WeatherConditions]:
        """Stored weather, or None for standard air (also when unreadable)."""
        stored = self.get("weather")
        if not stored:
            return None
        try:
            return WeatherConditions.from_dict(stored)
        except (TypeError, AttributeError) as e:
            logger.warning(f"Invalid weather in {self.path}, using standard air: {e}")
            return None
