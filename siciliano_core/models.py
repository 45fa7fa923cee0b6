"""
Модели данных провайдера: тип поиска, критерий, заглушка результата
поиска и запись о книге.
"""

from dataclasses import FrozenInstanceError, dataclass, field
from enum import Enum
from typing import List, Optional


class SearchType(str, Enum):
    """Типы поиска по каталогу."""

    ISBN = "isbn"
    TITLE = "title"
    AUTHORS = "authors"
    KEYWORD = "keyword"


@dataclass(frozen=True)
class SearchCriterion:
    """Критерий поиска, заданный пользователем."""

    kind: SearchType
    text: str

    def __post_init__(self):
        if not self.text:
            raise ValueError("Критерий поиска не может быть пустым")


@dataclass(frozen=True)
class SearchAttempt:
    """Одна попытка поиска: закодированный запрос и итоговый URL."""

    kind: SearchType
    encoded_term: str
    attempt: int
    url: str


@dataclass(frozen=True)
class ResultStub:
    """Элемент страницы результатов поиска (достаточно для загрузки карточки)."""

    title: str
    authors: List[str]
    publisher: str
    url: str


@dataclass
class Book:
    """
    Библиографическая запись, извлечённая со страницы товара.

    После создания меняется только поле notes (синопсис заполняется
    отдельно от основных сведений).
    """

    title: str
    authors: List[str] = field(default_factory=list)
    isbn: str = ""
    publisher: str = ""
    publish_year: Optional[int] = None
    edition: Optional[str] = None
    notes: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "_sealed", True)

    def __setattr__(self, name, value):
        if name != "notes" and getattr(self, "_sealed", False):
            raise FrozenInstanceError(f"Поле {name!r} нельзя изменить после создания книги")
        super().__setattr__(name, value)


# URL обложки: адрес сайта + путь к изображению + суффикс размера
CoverImageRef = str


@dataclass
class ProductPage:
    """Результат разбора страницы товара: книга и ссылка на обложку."""

    book: Book
    cover_url: Optional[CoverImageRef] = None
