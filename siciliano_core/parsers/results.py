"""
Парсер страницы результатов поиска.

Разметка одного элемента выдачи:

    <td>
      <div class="pesquisa-item-lista-conteudo">...</div>
      <a href="/livro/...">
        <span class="vitrine_nome_produto">1. Título</span><br/>
        Sobrenome, Nome / EDITORA
      </a>
      <div class="vitrine_preco_por">...</div>
    </td>
"""

from typing import List, Optional
import logging

from bs4 import BeautifulSoup, Tag

from ..config.base import SiteConfig
from ..errors import MalformedItemError
from ..models import ResultStub
from .text import absolute_url, authors_to_list, strip_ordinal, text_with_breaks

logger = logging.getLogger(__name__)


class ResultListParser:
    """Извлекает заглушки результатов из страницы поиска."""

    ITEM_CONTENT_SELECTOR = "div.pesquisa-item-lista-conteudo"
    PRODUCT_NAME_SELECTOR = "span.vitrine_nome_produto"

    def __init__(self, site_config: Optional[SiteConfig] = None):
        self.site_config = site_config or SiteConfig()

    def parse(self, html: str) -> List[ResultStub]:
        """
        Разбор страницы результатов.

        Элементы, которые не удалось разобрать, пропускаются с записью в лог.

        Args:
            html: HTML страницы результатов

        Returns:
            List[ResultStub]: Заглушки в порядке следования на странице
        """
        soup = BeautifulSoup(html, "lxml")
        results = []

        for index, block in enumerate(self._item_blocks(soup), start=1):
            try:
                results.append(self.parse_item(block))
            except Exception as e:
                logger.exception(f"Ошибка разбора элемента выдачи #{index}: {e}")

        logger.debug(f"Найдено результатов: {len(results)}")
        return results

    def _item_blocks(self, soup: BeautifulSoup) -> List[Tag]:
        blocks = []
        seen = set()
        for content in soup.select(self.ITEM_CONTENT_SELECTOR):
            block = content.parent
            if block is None or id(block) in seen:
                continue
            seen.add(id(block))
            blocks.append(block)
        return blocks

    def parse_item(self, block: Tag) -> ResultStub:
        """
        Разбор одного элемента выдачи.

        Raises:
            MalformedItemError: если структура элемента не соответствует ожидаемой
        """
        name = block.select_one(self.PRODUCT_NAME_SELECTOR)
        if name is None or name.parent is None:
            raise MalformedItemError("не найден элемент с названием")

        # Название и "авторы / издательство" разделены переводом строки
        text = text_with_breaks(name.parent).strip()
        title_line, sep, rest = text.partition("\n")
        if not sep:
            raise MalformedItemError(f"нет строки с автором и издательством: {text!r}")

        title = strip_ordinal(title_line.strip())
        if not title:
            raise MalformedItemError("пустое название")

        # Учитывается только вторая строка ссылки, дальше может идти цена или формат
        byline = rest.strip().split("\n", 1)[0]
        author_publisher = byline.split("/")
        if len(author_publisher) < 2:
            raise MalformedItemError(
                f"не удалось разделить автора и издательство: {byline!r}"
            )
        authors = authors_to_list(author_publisher[0].strip())
        publisher = author_publisher[1].strip().capitalize()

        link = block.find("a", href=True)
        if link is None:
            raise MalformedItemError("нет ссылки на страницу товара")
        url = absolute_url(self.site_config.site, link["href"].strip())

        return ResultStub(title=title, authors=authors, publisher=publisher, url=url)
