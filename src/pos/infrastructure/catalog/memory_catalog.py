"""In-memory implementation of ProductRepository."""

from __future__ import annotations

from pos.domain.exceptions import ValidationError
from pos.domain.model.product import Product
from pos.domain.repository.product_repository import ProductRepository


class InMemoryProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for p in products or []:
            key = p.name.lower()
            if key in self._store:
                raise ValidationError(f"Duplicate product name in catalog: '{p.name}'")
            self._store[key] = p

    def get_by_name(self, name: str) -> Product | None:
        return self._store.get(name.strip().lower())

    def list_all(self) -> list[Product]:
        return list(self._store.values())
