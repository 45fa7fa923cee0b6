"""
Парсер страницы товара (карточки книги).

Извлекает название, авторов, характеристики (ISBN, переводчик, издание),
аннотацию и путь к обложке из встроенного скрипта. Издательство берётся
из заглушки результата поиска: на странице товара оно указывается
ненадёжно.
"""

from typing import Dict, Optional
import logging

from bs4 import BeautifulSoup

from ..config.base import SiteConfig
from ..errors import MalformedItemError, NoResultsError
from ..models import Book, CoverImageRef, ProductPage, ResultStub
from .text import (
    authors_to_list,
    collapse_whitespace,
    extract_publish_year,
    find_image_path,
    first_non_empty_text,
    lines_of_text,
    lines_to_map,
    reflow,
)

logger = logging.getLogger(__name__)


class ProductPageParser:
    """Разбор страницы товара в запись Book и ссылку на обложку."""

    TITLE_SELECTOR = "div.titulo h2.produto"
    AUTHORS_SELECTOR = "div.titulo h3.autor"
    DETAILS_SELECTOR = "div#tab-caracteristica"
    SYNOPSIS_SELECTOR = "div#tab-sinopse"

    # Канонические ключи характеристик (только латинские буквы)
    ISBN_KEY = "ISBN"
    EAN_KEY = "CdBarras"
    TRANSLATOR_KEY = "Tradutor"
    EDITION_KEY = "Edio"

    def __init__(self, site_config: Optional[SiteConfig] = None):
        self.site_config = site_config or SiteConfig()

    def parse(self, html: str, stub: ResultStub) -> Optional[ProductPage]:
        """
        Разбор страницы товара.

        Любая ошибка структуры отбрасывает запись целиком.

        Args:
            html: HTML страницы товара
            stub: Заглушка из результатов поиска (источник издательства)

        Returns:
            Optional[ProductPage]: Книга и обложка или None
        """
        try:
            return self._parse(html, stub)
        except NoResultsError:
            logger.warning(f"На странице {stub.url} нет названия книги")
            return None
        except Exception:
            logger.exception(f"Ошибка разбора страницы товара {stub.url}")
            return None

    def _parse(self, html: str, stub: ResultStub) -> ProductPage:
        soup = BeautifulSoup(html, "lxml")

        title_elem = soup.select_one(self.TITLE_SELECTOR)
        if title_elem is None:
            raise NoResultsError(stub.url)
        title = first_non_empty_text(title_elem)
        if not title:
            raise MalformedItemError("пустое название")

        authors_elem = soup.select_one(self.AUTHORS_SELECTOR)
        if authors_elem is None:
            raise MalformedItemError("не найден блок авторов")
        authors = authors_to_list(first_non_empty_text(authors_elem))

        details = self.parse_details(soup)

        isbn = details.get(self.ISBN_KEY) or details.get(self.EAN_KEY) or ""

        translator = details.get(self.TRANSLATOR_KEY)
        if translator:
            authors.append(translator)

        edition = details.get(self.EDITION_KEY)
        publish_year = extract_publish_year(edition)

        book = Book(
            title=title,
            authors=authors,
            isbn=isbn,
            publisher=stub.publisher,
            publish_year=publish_year,
            edition=edition,
        )
        book.notes = self.parse_synopsis(soup)

        return ProductPage(book=book, cover_url=self.parse_cover_url(soup))

    def parse_details(self, soup: BeautifulSoup) -> Dict[str, str]:
        """Характеристики товара как словарь с каноническими ключами."""
        details_elem = soup.select_one(self.DETAILS_SELECTOR)
        if details_elem is None:
            raise MalformedItemError("не найден блок характеристик")
        return lines_to_map(lines_of_text(details_elem))

    def parse_cover_url(self, soup: BeautifulSoup) -> Optional[CoverImageRef]:
        """URL обложки большого размера или None, если путь не найден."""
        for script in soup.find_all("script"):
            script_text = "".join(str(child) for child in script.children)
            path = find_image_path(script_text)
            if path:
                return f"{self.site_config.site}{path}{self.site_config.image_size_suffix}"
        logger.debug("Обложка не найдена")
        return None

    def parse_synopsis(self, soup: BeautifulSoup) -> Optional[str]:
        """Аннотация, переформатированная по десять слов в строке."""
        synopsis_elem = soup.select_one(self.SYNOPSIS_SELECTOR)
        if synopsis_elem is None:
            return None
        synopsis = collapse_whitespace(first_non_empty_text(synopsis_elem))
        return reflow(synopsis)
