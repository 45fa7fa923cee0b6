"""
Парсеры страниц каталога.

Модули:
- text: чистые функции нормализации текста
- results: страница результатов поиска -> ResultStub
- product: страница товара -> Book и обложка
"""

from .results import ResultListParser
from .product import ProductPageParser

__all__ = ["ResultListParser", "ProductPageParser"]
