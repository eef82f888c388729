"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pathlib import Path

import click

from pos.domain.model.clock import Clock, system_clock
from pos.domain.repository.product_repository import ProductRepository
from pos.domain.service.checkout_service import CheckoutService
from pos.domain.service.shipping_service import Emitter, ShippingService
from pos.infrastructure.catalog.demo_catalog import demo_products
from pos.infrastructure.catalog.json_catalog import JsonProductRepository
from pos.infrastructure.catalog.memory_catalog import InMemoryProductRepository


def product_repository(catalog_path: Path | None = None) -> ProductRepository:
    if catalog_path is None:
        return InMemoryProductRepository(demo_products())
    return JsonProductRepository(catalog_path)


def checkout_service(
    emit: Emitter = click.echo,
    clock: Clock = system_clock,
) -> CheckoutService:
    return CheckoutService(emit=emit, shipping=ShippingService(emit), clock=clock)
