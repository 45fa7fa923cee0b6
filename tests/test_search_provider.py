"""
Тесты для SicilianoProvider.
"""

import pytest
import requests

from conftest import (
    BROKEN_ITEM,
    EMPTY_LISTING,
    FakeTransport,
    listing_item,
    listing_page,
    product_page,
)
from siciliano_core.errors import NoResultsError, TransportError
from siciliano_core.models import Book, SearchCriterion, SearchType
from siciliano_core.orchestrator.query import QueryBuilder
from siciliano_core.orchestrator.search import SicilianoProvider

SITE = "http://www.siciliano.com.br"
ISBN10 = "0306406152"
ISBN13 = "9780306406157"
ISBN13_979 = "9791034304561"


def _url(kind, term, attempt=1):
    return QueryBuilder().build_url(kind, term, attempt)


def _three_results():
    return listing_page(
        listing_item(title="1. Um", href="/livro/1"),
        listing_item(title="2. Dois", href="/livro/2"),
        listing_item(title="3. Três", href="/livro/3"),
    )


class TestIsbnSearch:
    """Поиск по ISBN и повторная попытка по ISBN-10."""

    def test_found_on_first_attempt(self):
        transport = FakeTransport(
            {
                _url(SearchType.ISBN, ISBN10): _three_results(),
                f"{SITE}/livro/1": product_page(title="Um"),
            }
        )
        provider = SicilianoProvider(transport=transport)

        books = provider.search(ISBN10, SearchType.ISBN)

        assert [b.title for b in books] == ["Um"]
        # Загружается только первая карточка
        assert transport.calls == [_url(SearchType.ISBN, ISBN10), f"{SITE}/livro/1"]
        assert f"PALAVRASN1={ISBN13}" in transport.calls[0]

    def test_retry_with_isbn10(self):
        transport = FakeTransport(
            {
                _url(SearchType.ISBN, ISBN10, 1): EMPTY_LISTING,
                _url(SearchType.ISBN, ISBN10, 2): listing_page(listing_item()),
                f"{SITE}/livro/123": product_page(),
            }
        )
        books = SicilianoProvider(transport=transport).search(ISBN13, SearchType.ISBN)

        assert len(books) == 1
        assert books[0].title == "Dom Casmurro"
        assert f"PALAVRASN1={ISBN10}&FILTRON1=G" in transport.calls[1]

    def test_exactly_one_retry_then_no_results(self):
        transport = FakeTransport(
            {
                _url(SearchType.ISBN, ISBN10, 1): EMPTY_LISTING,
                _url(SearchType.ISBN, ISBN10, 2): EMPTY_LISTING,
            }
        )
        provider = SicilianoProvider(transport=transport)

        with pytest.raises(NoResultsError):
            provider.search(ISBN10, SearchType.ISBN)

        assert transport.calls == [
            _url(SearchType.ISBN, ISBN10, 1),
            _url(SearchType.ISBN, ISBN10, 2),
        ]

    def test_979_isbn_without_retry(self):
        transport = FakeTransport({_url(SearchType.ISBN, ISBN13_979): EMPTY_LISTING})
        provider = SicilianoProvider(transport=transport)

        with pytest.raises(NoResultsError):
            provider.search(ISBN13_979, SearchType.ISBN)

        assert transport.calls == [_url(SearchType.ISBN, ISBN13_979)]

    def test_unparsable_product_page(self):
        transport = FakeTransport(
            {
                _url(SearchType.ISBN, ISBN10): listing_page(listing_item()),
                f"{SITE}/livro/123": "<html><body>Produto indisponível</body></html>",
            }
        )
        with pytest.raises(NoResultsError):
            SicilianoProvider(transport=transport).search(ISBN10, SearchType.ISBN)

    def test_product_transport_error_propagates(self):
        transport = FakeTransport(
            {
                _url(SearchType.ISBN, ISBN10): listing_page(listing_item()),
                f"{SITE}/livro/123": requests.ConnectionError("reset"),
            }
        )
        with pytest.raises(requests.ConnectionError):
            SicilianoProvider(transport=transport).search(ISBN10, SearchType.ISBN)


class TestTextSearch:
    """Поиск по названию, автору и ключевым словам."""

    def test_all_results_in_order(self):
        transport = FakeTransport(
            {
                _url(SearchType.TITLE, "casmurro"): _three_results(),
                f"{SITE}/livro/1": product_page(title="Um"),
                f"{SITE}/livro/2": product_page(title="Dois"),
                f"{SITE}/livro/3": product_page(title="Três"),
            }
        )
        books = SicilianoProvider(transport=transport).search("casmurro", SearchType.TITLE)

        assert [b.title for b in books] == ["Um", "Dois", "Três"]
        assert all(isinstance(b, Book) for b in books)

    def test_empty_listing_no_retry(self):
        transport = FakeTransport({_url(SearchType.KEYWORD, "nada"): EMPTY_LISTING})

        with pytest.raises(NoResultsError):
            SicilianoProvider(transport=transport).search("nada", SearchType.KEYWORD)

        assert len(transport.calls) == 1

    def test_failed_product_pages_dropped(self):
        transport = FakeTransport(
            {
                _url(SearchType.AUTHORS, "assis"): _three_results(),
                f"{SITE}/livro/1": product_page(title="Um"),
                f"{SITE}/livro/2": "<html><body></body></html>",
                f"{SITE}/livro/3": requests.Timeout("timeout"),
            }
        )
        books = SicilianoProvider(transport=transport).search("assis", SearchType.AUTHORS)

        assert [b.title for b in books] == ["Um"]
        assert len(transport.calls) == 4

    def test_custom_transport_error_isolated(self):
        transport = FakeTransport(
            {
                _url(SearchType.TITLE, "casmurro"): _three_results(),
                f"{SITE}/livro/1": TransportError("sem conexão"),
                f"{SITE}/livro/2": product_page(title="Dois"),
                f"{SITE}/livro/3": product_page(title="Três"),
            }
        )
        books = SicilianoProvider(transport=transport).search("casmurro", SearchType.TITLE)

        assert [b.title for b in books] == ["Dois", "Três"]

    def test_malformed_listing_item_skipped(self):
        transport = FakeTransport(
            {
                _url(SearchType.KEYWORD, "x"): listing_page(BROKEN_ITEM, listing_item()),
                f"{SITE}/livro/123": product_page(),
            }
        )
        books = SicilianoProvider(transport=transport).search("x", SearchType.KEYWORD)
        assert [b.title for b in books] == ["Dom Casmurro"]

    def test_listing_transport_error_propagates(self):
        transport = FakeTransport(
            {_url(SearchType.KEYWORD, "x"): requests.HTTPError("503 Server Error")}
        )
        with pytest.raises(requests.HTTPError):
            SicilianoProvider(transport=transport).search("x", SearchType.KEYWORD)

    def test_search_with_covers(self):
        transport = FakeTransport(
            {
                _url(SearchType.KEYWORD, "x"): listing_page(listing_item()),
                f"{SITE}/livro/123": product_page(),
            }
        )
        pages = SicilianoProvider(transport=transport).search_with_covers(
            "x", SearchType.KEYWORD
        )

        assert len(pages) == 1
        assert pages[0].cover_url.endswith("&tam=2")

    def test_iteration_can_stop_early(self):
        transport = FakeTransport(
            {
                _url(SearchType.KEYWORD, "x"): _three_results(),
                f"{SITE}/livro/1": product_page(title="Um"),
            }
        )
        results = SicilianoProvider(transport=transport).iter_results(
            "x", SearchType.KEYWORD
        )

        assert next(results).book.title == "Um"
        results.close()
        assert len(transport.calls) == 2

    def test_criterion_object(self):
        transport = FakeTransport(
            {
                _url(SearchType.TITLE, "Dom Casmurro"): listing_page(listing_item()),
                f"{SITE}/livro/123": product_page(),
            }
        )
        criterion = SearchCriterion(kind=SearchType.TITLE, text="Dom Casmurro")
        books = SicilianoProvider(transport=transport).search(criterion)

        assert books[0].title == "Dom Casmurro"
        assert "PALAVRASN1=Dom+Casmurro&FILTRON1=A" in transport.calls[0]


class TestProviderBehaviour:
    """Прочие свойства провайдера."""

    def test_untranscodable_criterion(self):
        transport = FakeTransport({})
        provider = SicilianoProvider(transport=transport)

        with pytest.raises(NoResultsError):
            provider.search("東京物語", SearchType.TITLE)

        assert transport.calls == []

    def test_latin1_criterion_accepted(self):
        term = "Memórias Póstumas"
        transport = FakeTransport({_url(SearchType.TITLE, term): EMPTY_LISTING})

        with pytest.raises(NoResultsError):
            SicilianoProvider(transport=transport).search(term, SearchType.TITLE)

        assert "Mem%F3rias+P%F3stumas" in transport.calls[0]

    def test_empty_criterion(self):
        with pytest.raises(ValueError):
            SicilianoProvider(transport=FakeTransport({})).search("", SearchType.TITLE)
        with pytest.raises(ValueError):
            SearchCriterion(kind=SearchType.TITLE, text="")

    def test_permalink_is_none(self):
        provider = SicilianoProvider(transport=FakeTransport({}))
        book = Book(title="Dom Casmurro", isbn=ISBN10)

        assert provider.permalink(book) is None
        assert provider.url(book) is None

    def test_names(self):
        provider = SicilianoProvider(transport=FakeTransport({}))
        assert provider.name == "Siciliano"
        assert provider.fullname == "Livraria Siciliano (Brasil)"

    def test_no_state_between_searches(self):
        transport = FakeTransport(
            {
                _url(SearchType.KEYWORD, "x"): listing_page(listing_item()),
                f"{SITE}/livro/123": product_page(),
            }
        )
        provider = SicilianoProvider(transport=transport)

        assert provider.search("x") == provider.search("x")
