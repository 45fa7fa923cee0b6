"""
Оркестрация поиска: построение запроса и провайдер каталога.
"""

from .query import QueryBuilder
from .search import SicilianoProvider

__all__ = ["QueryBuilder", "SicilianoProvider"]
