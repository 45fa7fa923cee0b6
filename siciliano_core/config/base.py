"""
Базовые классы конфигурации провайдера.

Содержит Pydantic-модель статической конфигурации сайта: адрес, шаблон
поискового запроса, коды типов поиска и параметры загрузки страниц.
"""

from typing import Dict
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..models import SearchType


SITE = "http://www.siciliano.com.br"

SEARCH_PATH = (
    "/pesquisaweb/pesquisaweb.dll/pesquisa?"
    "&FIL_ID=102"
    "&PALAVRASN1={term}"  # поисковый запрос
    "&FILTRON1={code}"  # тип поиска
    "&ORDEMN1={code}"  # сортировка (совпадает с типом поиска)
    "&ESTRUTN1=0301&ORDEMN2=E"
)


class SiteConfig(BaseModel):
    """Статическая конфигурация каталога Siciliano."""

    model_config = ConfigDict(frozen=True)

    name: str = Field("Siciliano", description="Короткое имя провайдера")
    fullname: str = Field(
        "Livraria Siciliano (Brasil)", description="Полное имя провайдера"
    )

    site: str = Field(SITE, description="Базовый адрес сайта (без завершающего /)")
    search_path: str = Field(
        SEARCH_PATH, description="Шаблон пути поиска ({term}, {code})"
    )
    type_codes: Dict[SearchType, str] = Field(
        default_factory=lambda: {
            SearchType.ISBN: "G",
            SearchType.TITLE: "A",
            SearchType.AUTHORS: "B",
            SearchType.KEYWORD: "X",
        },
        description="Однобуквенные коды типов поиска",
    )
    default_type_code: str = Field("X", description="Код для неизвестного типа")
    image_size_suffix: str = Field(
        "&tam=2", description="Суффикс URL, выбирающий большой размер обложки"
    )

    encoding: str = Field("ISO-8859-1", description="Кодировка сайта")
    timeout: float = Field(30.0, description="Таймаут запроса (секунды)")
    user_agent: str = Field(
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36",
        description="User-Agent для HTTP-запросов",
    )

    @field_validator("site")
    @classmethod
    def validate_site(cls, v):
        if not v.startswith(("http://", "https://")):
            raise ValueError("site должен начинаться с http:// или https://")
        return v.rstrip("/")

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v):
        if v <= 0:
            raise ValueError("timeout должен быть положительным")
        return v

    @property
    def search_url_template(self) -> str:
        """Полный шаблон поискового URL."""
        return self.site + self.search_path

    def type_code(self, kind) -> str:
        """Код типа поиска; для неизвестных типов - код поиска по ключевым словам."""
        try:
            return self.type_codes.get(SearchType(kind), self.default_type_code)
        except ValueError:
            return self.default_type_code
