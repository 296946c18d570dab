"""Settings loading and validation."""
from .loader import load_settings, settings_path_from_env
from .models import ObservabilitySettings, PathsSettings, Settings

__all__ = ["Settings", "PathsSettings", "ObservabilitySettings", "load_settings", "settings_path_from_env"]
