"""
Провайдер каталога Livraria Siciliano.

SicilianoProvider отвечает за:
1. Проверку, что запрос представим в кодировке сайта
2. Построение запроса и загрузку страницы результатов
3. Повторную попытку поиска по ISBN-10, если ISBN-13 ничего не нашёл
4. Загрузку и разбор страниц товаров в порядке выдачи
"""

import logging
from typing import Iterator, List, Optional, Tuple, Union

import requests

from ..config.base import SiteConfig
from ..errors import NoResultsError, TranscodeError, TransportError
from ..handlers.base import Transport
from ..handlers.http_handler import HttpTransport, transcode
from ..isbn.utils import has_isbn10_form
from ..models import Book, ProductPage, ResultStub, SearchCriterion, SearchType
from ..parsers.product import ProductPageParser
from ..parsers.results import ResultListParser
from .query import QueryBuilder

logger = logging.getLogger(__name__)

MAX_ISBN_ATTEMPTS = 2


class SicilianoProvider:
    """Поиск книг в каталоге Siciliano."""

    def __init__(
        self,
        site_config: Optional[SiteConfig] = None,
        transport: Optional[Transport] = None,
    ):
        """
        Инициализация провайдера.

        Args:
            site_config: Статическая конфигурация сайта
            transport: Транспорт для загрузки страниц (по умолчанию HttpTransport)
        """
        self.site_config = site_config or SiteConfig()
        self.transport = transport or HttpTransport(self.site_config)
        self.query_builder = QueryBuilder(self.site_config)
        self.result_parser = ResultListParser(self.site_config)
        self.product_parser = ProductPageParser(self.site_config)

    @property
    def name(self) -> str:
        return self.site_config.name

    @property
    def fullname(self) -> str:
        return self.site_config.fullname

    def search(
        self,
        criterion: Union[SearchCriterion, str],
        kind: Union[SearchType, str, None] = None,
    ) -> List[Book]:
        """
        Поиск книг.

        Args:
            criterion: Поисковый запрос (строка или SearchCriterion)
            kind: Тип поиска (если criterion - строка)

        Returns:
            List[Book]: Найденные книги; для поиска по ISBN - одна книга

        Raises:
            NoResultsError: если ничего не найдено
        """
        return [page.book for page in self.iter_results(criterion, kind)]

    def search_with_covers(
        self,
        criterion: Union[SearchCriterion, str],
        kind: Union[SearchType, str, None] = None,
    ) -> List[ProductPage]:
        """Поиск книг вместе с URL обложек."""
        return list(self.iter_results(criterion, kind))

    def iter_results(
        self,
        criterion: Union[SearchCriterion, str],
        kind: Union[SearchType, str, None] = None,
    ) -> Iterator[ProductPage]:
        """
        Ленивый поиск: страницы товаров загружаются по мере итерации.

        Если прекратить итерацию, оставшиеся страницы не загружаются.
        """
        term, kind = self._unpack(criterion, kind)

        try:
            transcode(term, self.site_config.encoding)
        except TranscodeError as e:
            logger.info(f"Нельзя искать в {self.name} запрос вне {self.site_config.encoding}: {e}")
            raise NoResultsError(term) from e

        logger.info(f"{self.name}: поиск '{term}' (тип: {kind})")
        stubs = self._find_stubs(kind, term)

        if kind == SearchType.ISBN:
            page = self.get_book_from_search_result(stubs[0])
            if page is None:
                raise NoResultsError(term)
            yield page
            return

        found = 0
        for stub in stubs:
            try:
                page = self.get_book_from_search_result(stub)
            except (requests.RequestException, TransportError) as e:
                logger.warning(f"Не удалось загрузить {stub.url}: {e}")
                continue
            if page is not None:
                found += 1
                yield page

        logger.info(f"{self.name}: разобрано книг {found}/{len(stubs)}")

    def get_book_from_search_result(self, stub: ResultStub) -> Optional[ProductPage]:
        """
        Загрузка и разбор страницы товара для одного результата поиска.

        Returns:
            Optional[ProductPage]: Книга и обложка или None, если страница не разобрана
        """
        logger.info(f"Загрузка книги с {stub.url}")
        html = self.transport.fetch(stub.url)
        return self.product_parser.parse(html, stub)

    def permalink(self, book: Book) -> None:
        """
        Постоянная ссылка на книгу.

        Сайт не даёт прямых ссылок по ISBN (адрес зависит от id товара),
        поэтому всегда None.
        """
        return None

    url = permalink

    def close(self):
        """Закрытие транспорта."""
        self.transport.close()

    def _unpack(
        self,
        criterion: Union[SearchCriterion, str],
        kind: Union[SearchType, str, None],
    ) -> Tuple[str, Union[SearchType, str]]:
        if isinstance(criterion, SearchCriterion):
            return criterion.text, criterion.kind
        if not criterion:
            raise ValueError("Критерий поиска не может быть пустым")
        if kind is None:
            kind = SearchType.KEYWORD
        try:
            kind = SearchType(kind)
        except ValueError:
            logger.debug(f"Неизвестный тип поиска {kind!r}, используется код по умолчанию")
        return criterion, kind

    def _find_stubs(
        self, kind: Union[SearchType, str], term: str
    ) -> List[ResultStub]:
        """Страница результатов с повторной попыткой по ISBN-10."""
        max_attempts = MAX_ISBN_ATTEMPTS if kind == SearchType.ISBN else 1

        for attempt in range(1, max_attempts + 1):
            if attempt > 1 and not has_isbn10_form(term):
                logger.info(f"{self.name}: у ISBN {term} нет 10-значной формы, повтор пропущен")
                break

            query = self.query_builder.build(kind, term, attempt)
            retrying = "повторный " if attempt > 1 else ""
            logger.debug(f"{self.name} {retrying}запрос = {query.url}")

            html = self.transport.fetch(query.url)
            stubs = self.result_parser.parse(html)
            if stubs:
                return stubs

            if attempt < max_attempts:
                logger.info(f"{self.name}: по ISBN-13 ничего не найдено, пробуем ISBN-10")

        raise NoResultsError(term)
