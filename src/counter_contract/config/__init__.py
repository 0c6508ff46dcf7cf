from .loader import ConfigError, load_config
from .models import AppConfig, LoggingConfig, StorageConfig

# Config exports are intentionally small.
__all__ = ["AppConfig", "ConfigError", "LoggingConfig", "StorageConfig", "load_config"]
