"""
Исключения провайдера Siciliano.

NoResultsError - единственная ошибка, которую видит вызывающий код поиска.
MalformedItemError перехватывается на уровне одного элемента выдачи
или одной страницы товара и только логируется.
"""


class ProviderError(RuntimeError):
    """Базовая ошибка провайдера."""


class NoResultsError(ProviderError):
    """Поиск не дал ни одного результата."""


class MalformedItemError(ProviderError):
    """Элемент выдачи или страница товара имеют неожиданную структуру."""


class TranscodeError(ProviderError):
    """Текст не представим в кодировке сайта."""


class InvalidISBNError(ProviderError, ValueError):
    """Строку нельзя привести к ISBN-10/ISBN-13."""


class TransportError(ProviderError):
    """Ошибка загрузки страницы в транспорте, не основанном на requests."""
