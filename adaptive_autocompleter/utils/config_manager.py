# config_manager.py - JSON config manager

import json
import logging
import os

logger = logging.getLogger(__name__)

DEFAULTS = {
    "max_suggestions": 8,
    "recent_limit": 10,
    "seed_samples": True,
    "seed_max_age_seconds": 10000.0,
    "show_scores": True,
    "log_path": os.path.join("logs", "autocompleter.log"),
}


class Config:
    def __init__(self, path="config.json", autosave=False):
        self.path = path
        self.data = dict(DEFAULTS)
        self._load()
        if autosave and not os.path.exists(self.path):
            self.save()

    def _load(self):
        if not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                loaded = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("config %s unreadable, using defaults: %s", self.path, e)
            return
        if isinstance(loaded, dict):
            self.data.update({k: v for k, v in loaded.items() if k in DEFAULTS})

    def save(self):
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key):
        return self.data[key]

    def rows(self):
        return list(self.data.items())

    def set(self, key, val):
        """Coerce `val` to the default's type and persist. False for unknown keys/bad values."""
        if key not in self.data:
            return False
        kind = type(DEFAULTS[key])
        try:
            if kind is bool and isinstance(val, str):
                coerced = val.strip().lower() in ("1", "true", "yes", "on")
            else:
                coerced = kind(val)
        except (TypeError, ValueError):
            return False
        self.data[key] = coerced
        self.save()
        return True
