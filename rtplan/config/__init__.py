"""Configuration management."""
from rtplan.config.loader import ConfigLoader
from rtplan.models.config import ConfigValidationError

__all__ = ['ConfigLoader', 'ConfigValidationError']
