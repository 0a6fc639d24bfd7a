"""Configuration package exports."""

from .loader import ConfigLocator, ConfigRepository
from .models import LookupConfig

__all__ = ["ConfigLocator", "ConfigRepository", "LookupConfig"]
