"""
Конфигурация провайдера.
"""

from .base import SiteConfig, SITE, SEARCH_PATH
from .loader import ConfigLoader

__all__ = ["SiteConfig", "SITE", "SEARCH_PATH", "ConfigLoader"]
