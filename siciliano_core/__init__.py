"""
Siciliano Core - поиск библиографических записей в каталоге Livraria Siciliano.

Основные компоненты:
- config: Конфигурация сайта (SiteConfig, ConfigLoader)
- isbn: Приведение ISBN к формам ISBN-13 / ISBN-10
- handlers: Транспорт (загрузка страниц через requests)
- parsers: Разбор страницы результатов и страницы товара
- orchestrator: Построение запроса и провайдер с повторной попыткой по ISBN

Версия: 1.0.0
"""

__version__ = "1.0.0"

from .config.base import SiteConfig
from .config.loader import ConfigLoader
from .errors import (
    ProviderError,
    NoResultsError,
    MalformedItemError,
    TranscodeError,
    InvalidISBNError,
    TransportError,
)
from .models import (
    SearchType,
    SearchCriterion,
    SearchAttempt,
    ResultStub,
    Book,
    CoverImageRef,
    ProductPage,
)
from .handlers.base import Transport
from .handlers.http_handler import HttpTransport
from .orchestrator.query import QueryBuilder
from .orchestrator.search import SicilianoProvider
from .parsers.results import ResultListParser
from .parsers.product import ProductPageParser

__all__ = [
    # Конфигурация
    "SiteConfig",
    "ConfigLoader",
    # Ошибки
    "ProviderError",
    "NoResultsError",
    "MalformedItemError",
    "TranscodeError",
    "InvalidISBNError",
    "TransportError",
    # Модели
    "SearchType",
    "SearchCriterion",
    "SearchAttempt",
    "ResultStub",
    "Book",
    "CoverImageRef",
    "ProductPage",
    # Транспорт
    "Transport",
    "HttpTransport",
    # Поиск
    "QueryBuilder",
    "SicilianoProvider",
    "ResultListParser",
    "ProductPageParser",
]
