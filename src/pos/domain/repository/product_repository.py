"""Abstract catalog lookup.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete catalogs (in-memory, JSON file) live in the
infrastructure layer. Catalogs are read-only: stock changes made by a
checkout live only on the product objects handed out.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pos.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_name(self, name: str) -> Product | None:
        """Return a product by name (case-insensitive), or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog, in catalog order."""
