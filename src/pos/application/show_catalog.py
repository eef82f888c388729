"""Application service: Show Catalog use case (query)."""

from __future__ import annotations

from datetime import timezone

from pos.application.dto import CatalogLineDTO
from pos.domain.model.product import PerishableProduct, Product
from pos.domain.repository.product_repository import ProductRepository


class ShowCatalogHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[CatalogLineDTO]:
        return [self._to_dto(p) for p in self._product_repo.list_all()]

    @staticmethod
    def _to_dto(product: Product) -> CatalogLineDTO:
        view = product.shipping_view()
        expires_at = ""
        if isinstance(product, PerishableProduct):
            expires_at = product.expires_at.astimezone(timezone.utc).strftime("%Y-%m-%d %H:%M UTC")
        return CatalogLineDTO(
            name=product.name,
            kind=product.kind.value,
            price=str(product.unit_price),
            stock=product.stock,
            weight=str(view.unit_weight_kg) if view is not None else "",
            expires_at=expires_at,
        )
