# This file makes Python treat the `config` directory as a package.
from .models import AppSettings, FetchSettings, NormalizeOptions, Ordering, OutputSettings
from .loader import ConfigManager
from .paths import resolve_config_file

__all__ = [
    "AppSettings",
    "FetchSettings",
    "NormalizeOptions",
    "Ordering",
    "OutputSettings",
    "ConfigManager",
    "resolve_config_file",
]
