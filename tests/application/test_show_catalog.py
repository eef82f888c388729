"""Tests for the Show Catalog query."""

from datetime import timedelta

from pos.application.show_catalog import ShowCatalogHandler
from pos.infrastructure.catalog.memory_catalog import InMemoryProductRepository
from tests.fakes import perishable_cheese, scratch_card


class TestShowCatalog:

    def test_lists_products_in_catalog_order(self):
        repo = InMemoryProductRepository(
            [perishable_cheese(timedelta(hours=1)), scratch_card()]
        )
        lines = ShowCatalogHandler(repo).handle()

        assert [line.name for line in lines] == ["Cheese", "Scratch Card"]
        cheese_line, card_line = lines
        assert cheese_line.kind == "perishable"
        assert cheese_line.weight == "0.2kg"
        assert cheese_line.expires_at == "2026-10-18 13:00 UTC"
        assert card_line.kind == "digital"
        assert card_line.price == "50"
        assert card_line.weight == ""
        assert card_line.expires_at == ""

    def test_empty_catalog(self):
        assert ShowCatalogHandler(InMemoryProductRepository()).handle() == []
