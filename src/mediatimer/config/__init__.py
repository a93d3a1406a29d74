"""Configuration management package for MediaTimer"""

from .manager import ConfigManager, ConfigurationError

__all__ = ['ConfigManager', 'ConfigurationError']
