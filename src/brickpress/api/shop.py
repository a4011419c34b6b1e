"""Mock print shop endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request

from brickpress.api.dependencies import get_container
from brickpress.api.models import OrderPayload  # noqa: TC001
from brickpress.api.serializers import serialize_order, serialize_product
from brickpress.domain.products import ShippingDetails

if TYPE_CHECKING:
    from brickpress.containers import AppContainer

router = APIRouter(prefix="/api", tags=["shop"])


@router.get("/products")
async def list_products(request: Request) -> dict[str, object]:
    """Return the printable products."""
    container: AppContainer = get_container(request)
    products = container.print_shop_service.list_products()
    return {"products": [serialize_product(product) for product in products]}


@router.post("/orders")
async def place_order(payload: OrderPayload, request: Request) -> dict[str, object]:
    """Confirm a mock print order. No payment is taken."""
    container: AppContainer = get_container(request)
    order = container.print_shop_service.place_order(
        payload.product_id,
        ShippingDetails(
            name=payload.shipping.name,
            address=payload.shipping.address,
            city=payload.shipping.city,
            zip=payload.shipping.zip,
        ),
    )
    return {"success": True, "order": serialize_order(order)}
