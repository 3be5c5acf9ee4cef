"""
Configuration for metascraper.
"""

from .config import Config, FetchConfig, MonitoringConfig, ParserSettings, find_config_file, load_config

__all__ = [
    "Config",
    "FetchConfig",
    "MonitoringConfig",
    "ParserSettings",
    "find_config_file",
    "load_config",
]
