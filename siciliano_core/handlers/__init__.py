"""
Транспорт: загрузка страниц каталога.
"""

from .base import Transport
from .http_handler import HttpTransport, transcode

__all__ = ["Transport", "HttpTransport", "transcode"]
