"""
Обработка ISBN.
"""

from .utils import normalize_isbn, is_valid_isbn, to_isbn13, to_isbn10, has_isbn10_form

__all__ = ["normalize_isbn", "is_valid_isbn", "to_isbn13", "to_isbn10", "has_isbn10_form"]
