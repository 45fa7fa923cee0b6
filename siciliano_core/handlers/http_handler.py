"""
HTTP-транспорт на requests и проверка кодировки запроса.

Сайт отдаёт страницы в ISO-8859-1 и часто не указывает charset
в заголовках, поэтому кодировка ответа задаётся явно.
"""

from typing import Optional

import requests

from .base import Transport
from ..config.base import SiteConfig
from ..errors import TranscodeError


def transcode(text: str, encoding: str) -> str:
    """
    Проверка, что текст представим в кодировке сайта.

    Args:
        text: Исходный текст
        encoding: Целевая однобайтовая кодировка (например, ISO-8859-1)

    Returns:
        str: Тот же текст, если все символы представимы

    Raises:
        TranscodeError: если в тексте есть символы вне кодировки
    """
    try:
        text.encode(encoding)
    except UnicodeEncodeError as e:
        raise TranscodeError(
            f"Текст {text!r} не представим в кодировке {encoding}: {e.reason}"
        ) from e
    return text


class HttpTransport(Transport):
    """Загрузка страниц через requests.Session."""

    def __init__(
        self,
        site_config: Optional[SiteConfig] = None,
        session: Optional[requests.Session] = None,
    ):
        super().__init__()
        self.site_config = site_config or SiteConfig()
        self.timeout = self.site_config.timeout
        self.encoding = self.site_config.encoding
        self._own_session = session is None
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": self.site_config.user_agent})

    def fetch(self, url: str) -> str:
        """
        GET-запрос к странице каталога.

        Raises:
            requests.RequestException: сетевые ошибки и HTTP-статусы 4xx/5xx
        """
        self.logger.debug(f"GET {url}")
        response = self.session.get(url, timeout=self.timeout)
        response.raise_for_status()

        content_type = response.headers.get("Content-Type", "").lower()
        if "charset" not in content_type:
            response.encoding = self.encoding

        return response.text

    def close(self):
        """Закрытие сессии, если она создана транспортом."""
        if self._own_session:
            self.session.close()
