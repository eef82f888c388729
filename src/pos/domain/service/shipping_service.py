"""Domain service: Shipping.

Turns the shippable part of a paid cart into a shipment notice and
writes it out. Performs no validation and touches no state; it trusts
that its input is the manifest of a checkout that has already committed.
"""

from __future__ import annotations

from typing import Callable, Sequence

import structlog

from pos.domain.model.cart import ManifestLine
from pos.domain.model.documents import ShipmentLine, ShipmentNotice

logger = structlog.get_logger(__name__)

Emitter = Callable[[str], None]


class ShippingService:

    def __init__(self, emit: Emitter) -> None:
        self._emit = emit

    def ship(self, manifest: Sequence[ManifestLine]) -> ShipmentNotice:
        notice = ShipmentNotice(
            lines=tuple(
                ShipmentLine(
                    quantity=line.quantity,
                    name=line.item.name,
                    weight_kg=line.weight_kg,
                )
                for line in manifest
            )
        )
        for text in notice.render():
            self._emit(text)

        logger.debug(
            "shipment.emitted",
            lines=len(notice.lines),
            total_weight_kg=str(notice.total_weight_kg),
        )
        return notice
