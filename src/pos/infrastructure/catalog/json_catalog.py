"""JSON-file-backed catalog.

The file is an array of product records, for example::

    [
      {"kind": "shippable", "name": "Cheese", "price": "100",
       "stock": 10, "weight_kg": "0.2"},
      {"kind": "perishable", "name": "Milk", "price": "30", "stock": 4,
       "weight_kg": "1", "expires_at": "2030-01-01T00:00:00+00:00"},
      {"kind": "digital", "name": "Scratch Card", "price": "50", "stock": 100}
    ]

The file is read once and never written back.
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any

from pos.domain.exceptions import ValidationError
from pos.domain.model.product import (
    DigitalProduct,
    PerishableProduct,
    Product,
    ProductKind,
    ShippableProduct,
)
from pos.domain.model.value_objects import Money, Weight
from pos.infrastructure.catalog.memory_catalog import InMemoryProductRepository


class JsonProductRepository(InMemoryProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        super().__init__(self._load())

    # --- Deserialization helpers ----------------------------------------------

    def _load(self) -> list[Product]:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ValidationError(
                f"Catalog file {self._file_path} is not valid JSON: {exc.msg}"
            ) from exc
        if not isinstance(raw, list):
            raise ValidationError(
                f"Catalog file {self._file_path} must contain a JSON array"
            )
        return [self._product_from_record(item) for item in raw]

    @staticmethod
    def _product_from_record(item: dict[str, Any]) -> Product:
        try:
            kind = ProductKind(item["kind"])
            name = item["name"]
            price = Money.of(item["price"])
            stock = item["stock"]
            if kind is ProductKind.DIGITAL:
                return DigitalProduct(name=name, unit_price=price, stock=stock)
            weight = Weight.of(item["weight_kg"])
            if kind is ProductKind.SHIPPABLE:
                return ShippableProduct(
                    name=name, unit_price=price, stock=stock, unit_weight_kg=weight
                )
            return PerishableProduct(
                name=name,
                unit_price=price,
                stock=stock,
                expires_at=datetime.fromisoformat(item["expires_at"]),
                unit_weight_kg=weight,
            )
        except KeyError as exc:
            raise ValidationError(
                f"Catalog record {item!r} is missing field {exc.args[0]!r}"
            ) from exc
        except (TypeError, ValueError) as exc:
            raise ValidationError(f"Invalid catalog record {item!r}: {exc}") from exc
