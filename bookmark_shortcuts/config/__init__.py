from .configuration import Configuration
from .pydantic_config import ConfigurationManager, ShortcutsConfig

__all__ = ["Configuration", "ConfigurationManager", "ShortcutsConfig"]
