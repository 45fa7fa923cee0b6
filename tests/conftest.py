import pytest
from typing import Dict, List, Optional

from siciliano_core.config.base import SiteConfig
from siciliano_core.handlers.base import Transport
from siciliano_core.models import ResultStub


LISTING_ITEM = """
<td class="normal">
  <div class="pesquisa-item-lista-conteudo"><img src="/img/capa.jpg"/></div>
  <a href="{href}"><span class="vitrine_nome_produto">{title}</span><br/>{byline}</a>
  <div class="vitrine_preco_por">R$ 29,90</div>
</td>
"""

BROKEN_ITEM = """
<td class="normal">
  <div class="pesquisa-item-lista-conteudo"></div>
  <a href="/livro/999"><span class="vitrine_nome_produto">3. Sem autor</span></a>
</td>
"""

EMPTY_LISTING = "<html><body><p>Nenhum produto encontrado</p></body></html>"

SYNOPSIS_WORDS = [f"palavra{i}" for i in range(1, 24)]

PRODUCT_PAGE = """
<html>
<head>
<script type="text/javascript">
var ImgSrc = new Array();
ImgSrc[1]="/imagem/imagem.dll?pro_id=1386929&PIM_Id=658849";
ImgSrc[2]="/imagem/imagem.dll?pro_id=1386929&PIM_Id=658850";
</script>
</head>
<body>
<div class="titulo">
  <h2 class="produto"><b>Lançamento</b> {title} </h2>
  <h3 class="autor">{authors}</h3>
</div>
<div id="tab-caracteristica">
ISBN: {isbn}<br/>
Cód. Barras: 9788508071425<br/>
Edição: 2ª ed. 2005<br/>
<b>Tradutor:</b> Fulano de Tal<br/>
Acabamento: Brochura<br/>
</div>
<div id="tab-sinopse">{synopsis}</div>
</body>
</html>
"""


def listing_page(*items: str) -> str:
    """HTML страницы результатов из готовых элементов."""
    return "<html><body><table><tr>" + "".join(items) + "</tr></table></body></html>"


def listing_item(
    title: str = "1. Dom Casmurro",
    byline: str = "Assis, Machado de / EDITORA ATICA",
    href: str = "/livro/123",
) -> str:
    return LISTING_ITEM.format(title=title, byline=byline, href=href)


def product_page(
    title: str = "Dom Casmurro",
    authors: str = "Assis, Machado de",
    isbn: str = "8508071429",
    synopsis: Optional[str] = None,
) -> str:
    if synopsis is None:
        synopsis = " ".join(SYNOPSIS_WORDS[:12]) + "\r\n" + "  ".join(SYNOPSIS_WORDS[12:])
    return PRODUCT_PAGE.format(title=title, authors=authors, isbn=isbn, synopsis=synopsis)


class FakeTransport(Transport):
    """Транспорт-заглушка: отдаёт заранее заданные страницы и запоминает URL."""

    def __init__(self, pages: Dict[str, object]):
        super().__init__()
        self.pages = pages
        self.calls: List[str] = []

    def fetch(self, url: str) -> str:
        self.calls.append(url)
        page = self.pages[url]
        if isinstance(page, Exception):
            raise page
        return page


@pytest.fixture
def site_config() -> SiteConfig:
    """Конфигурация сайта по умолчанию."""
    return SiteConfig()


@pytest.fixture
def stub() -> ResultStub:
    """Заглушка результата поиска."""
    return ResultStub(
        title="Dom Casmurro",
        authors=["Machado de Assis"],
        publisher="Editora atica",
        url="http://www.siciliano.com.br/livro/123",
    )
