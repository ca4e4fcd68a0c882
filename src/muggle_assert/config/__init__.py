from .loader import CONFIG_ENV_VAR, CONFIG_FILENAME, configure, get_settings, load_settings, settings_from_env
from .models import AssertSettings, ReportSettings, StackSettings

__all__ = [
    "CONFIG_ENV_VAR",
    "CONFIG_FILENAME",
    "AssertSettings",
    "ReportSettings",
    "StackSettings",
    "configure",
    "get_settings",
    "load_settings",
    "settings_from_env",
]
