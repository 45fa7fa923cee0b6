"""
Построение поискового URL каталога.
"""

from typing import Optional, Union
from urllib.parse import quote_plus

from ..config.base import SiteConfig
from ..isbn.utils import to_isbn10, to_isbn13
from ..models import SearchAttempt, SearchType


class QueryBuilder:
    """Строит URL поиска по типу, запросу и номеру попытки."""

    def __init__(self, site_config: Optional[SiteConfig] = None):
        self.site_config = site_config or SiteConfig()

    def encode_term(
        self, kind: Union[SearchType, str], term: str, attempt: int = 1
    ) -> str:
        """
        Подготовка поискового запроса.

        Для ISBN первая попытка использует ISBN-13, вторая - ISBN-10.
        Остальные запросы кодируются для строки запроса в кодировке сайта.
        """
        if kind == SearchType.ISBN:
            if attempt > 1:
                return to_isbn10(term)
            return to_isbn13(term)
        return quote_plus(term, encoding=self.site_config.encoding)

    def build(
        self, kind: Union[SearchType, str], term: str, attempt: int = 1
    ) -> SearchAttempt:
        """
        Построение попытки поиска.

        Args:
            kind: Тип поиска
            term: Поисковый запрос
            attempt: Номер попытки (2 бывает только для ISBN)

        Returns:
            SearchAttempt: Закодированный запрос и URL
        """
        if kind != SearchType.ISBN:
            attempt = 1
        code = self.site_config.type_code(kind)
        encoded = self.encode_term(kind, term, attempt)
        url = self.site_config.search_url_template.format(term=encoded, code=code)
        return SearchAttempt(kind=kind, encoded_term=encoded, attempt=attempt, url=url)

    def build_url(
        self, kind: Union[SearchType, str], term: str, attempt: int = 1
    ) -> str:
        """URL поиска (см. build)."""
        return self.build(kind, term, attempt).url
