"""
Утилиты для работы с ISBN: нормализация и приведение к ISBN-13 / ISBN-10.

Каталог индексирует одни записи по ISBN-13 (EAN), другие по ISBN-10,
поэтому поиск по ISBN запрашивает обе формы.
"""

import re

import isbnlib

from ..errors import InvalidISBNError


def normalize_isbn(isbn: str) -> str:
    """
    Нормализация ISBN: удаление дефисов, пробелов, приведение к верхнему регистру.

    Пример:
        >>> normalize_isbn("978-0-306-40615-7")
        "9780306406157"
        >>> normalize_isbn("0-306-40615-x")
        "030640615X"
    """
    if not isbn:
        return ""
    return re.sub(r"[^\dX]", "", isbn.upper())


def is_valid_isbn(isbn: str) -> bool:
    """True если строка является корректным ISBN-10 или ISBN-13."""
    clean = normalize_isbn(isbn)
    return bool(isbnlib.is_isbn10(clean) or isbnlib.is_isbn13(clean))


def to_isbn13(isbn: str) -> str:
    """
    Каноническая 13-значная форма (EAN) для ISBN-10 или ISBN-13.

    Raises:
        InvalidISBNError: если строка не является корректным ISBN
    """
    clean = normalize_isbn(isbn)
    if not is_valid_isbn(clean):
        raise InvalidISBNError(f"Некорректный ISBN: {isbn!r}")
    if len(clean) == 13:
        return clean
    result = isbnlib.to_isbn13(clean)
    if not result:
        raise InvalidISBNError(f"Не удалось привести к ISBN-13: {isbn!r}")
    return result


def to_isbn10(isbn: str) -> str:
    """
    Каноническая 10-значная форма для ISBN-10 или ISBN-13 (только префикс 978).

    Raises:
        InvalidISBNError: если строка не является корректным ISBN
            или у ISBN-13 нет 10-значной формы (префикс 979)
    """
    clean = normalize_isbn(isbn)
    if not is_valid_isbn(clean):
        raise InvalidISBNError(f"Некорректный ISBN: {isbn!r}")
    if len(clean) == 10:
        return clean
    result = isbnlib.to_isbn10(clean)
    if not result:
        raise InvalidISBNError(f"У ISBN нет 10-значной формы: {isbn!r}")
    return result


def has_isbn10_form(isbn: str) -> bool:
    """True если у корректного ISBN есть 10-значная форма (ISBN-10 или префикс 978)."""
    clean = normalize_isbn(isbn)
    if not is_valid_isbn(clean):
        return False
    return len(clean) == 10 or bool(isbnlib.to_isbn10(clean))
