"""
Базовый класс транспорта.

Определяет интерфейс загрузки страниц каталога. Провайдер не зависит
от конкретной реализации: в тестах транспорт подменяется заглушкой.
"""

from abc import ABC, abstractmethod
import logging

logger = logging.getLogger(__name__)


class Transport(ABC):
    """Базовый класс транспорта."""

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @abstractmethod
    def fetch(self, url: str) -> str:
        """
        Загрузка страницы по URL.

        Args:
            url: Абсолютный URL страницы

        Returns:
            str: Содержимое страницы

        Raises:
            TransportError: ошибка загрузки в реализациях, не основанных на requests

        Ошибки транспорта не перехватываются и передаются вызывающему коду.
        """
        pass

    def close(self):
        """Освобождение ресурсов транспорта."""
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
