from .config import Config, FetchConfig, LazyConfig, MonitoringConfig, find_config_file, settings

__all__ = ["Config", "FetchConfig", "LazyConfig", "MonitoringConfig", "find_config_file", "settings"]
