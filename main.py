#!/usr/bin/env python3
"""
Поиск книг в каталоге Livraria Siciliano из командной строки.

Конфигурация сайта задаётся JSON-файлом (параметр --config); без него
используются значения по умолчанию.
"""

import argparse
import json
import logging
import sys
from dataclasses import asdict
from typing import List, Optional

from siciliano_core import (
    ConfigLoader,
    NoResultsError,
    ProductPage,
    SearchType,
    SicilianoProvider,
)

logger = logging.getLogger("main")


def setup_logging(verbose: bool = False):
    """Настройка логирования для CLI."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def format_page(page: ProductPage) -> str:
    """Текстовое представление найденной книги."""
    book = page.book
    lines = [
        f"Название:     {book.title}",
        f"Авторы:       {'; '.join(book.authors) or '—'}",
        f"ISBN:         {book.isbn or '—'}",
        f"Издательство: {book.publisher or '—'}",
        f"Год:          {book.publish_year or '—'}",
        f"Издание:      {book.edition or '—'}",
        f"Обложка:      {page.cover_url or '—'}",
    ]
    if book.notes:
        lines.append("Аннотация:")
        lines.append(book.notes.rstrip())
    return "\n".join(lines)


def pages_to_json(pages: List[ProductPage]) -> str:
    """Результаты поиска в JSON."""
    output = []
    for page in pages:
        item = asdict(page.book)
        item["cover_url"] = page.cover_url
        output.append(item)
    return json.dumps(output, ensure_ascii=False, indent=2)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Поиск книг в каталоге Livraria Siciliano (Бразилия)"
    )
    parser.add_argument("criterion", help="ISBN, название, автор или ключевые слова")
    parser.add_argument("--type", "-t", dest="search_type", default=SearchType.KEYWORD.value,
                        choices=[t.value for t in SearchType],
                        help="Тип поиска (по умолчанию keyword)")
    parser.add_argument("--config", type=str, default=None,
                        help="Путь к JSON-файлу конфигурации сайта")
    parser.add_argument("--json", action="store_true",
                        help="Вывести результаты в формате JSON")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Подробный вывод")

    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    site_config = ConfigLoader().load_site_config(args.config)
    provider = SicilianoProvider(site_config)

    try:
        pages = provider.search_with_covers(args.criterion, SearchType(args.search_type))
    except NoResultsError:
        print(f"Ничего не найдено: {args.criterion}", file=sys.stderr)
        return 1
    finally:
        provider.close()

    if args.json:
        print(pages_to_json(pages))
    else:
        print(("\n" + "-" * 60 + "\n").join(format_page(page) for page in pages))

    logger.info(f"Найдено книг: {len(pages)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
