"""Mock print shop."""

import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import uuid4

from brickpress.domain.errors import ValidationError
from brickpress.domain.products import (
    PRODUCTS,
    PrintOrder,
    Product,
    ShippingDetails,
)

logger = logging.getLogger(__name__)


@dataclass
class PrintShopService:
    """Quote and confirm print orders without taking payment."""

    products: tuple[Product, ...] = field(default=PRODUCTS)

    def list_products(self) -> list[Product]:
        """Return the product catalog."""
        return list(self.products)

    def get_product(self, product_id: str) -> Product | None:
        """Return a product by id."""
        for product in self.products:
            if product.id == product_id:
                return product
        return None

    def place_order(self, product_id: str, shipping: ShippingDetails) -> PrintOrder:
        """Confirm a mock order for a product."""
        product = self.get_product(product_id)
        if product is None:
            raise ValidationError(f"Unknown product: {product_id}")
        missing = [
            label
            for label, value in (
                ("name", shipping.name),
                ("address", shipping.address),
                ("city", shipping.city),
                ("zip", shipping.zip),
            )
            if not value.strip()
        ]
        if missing:
            raise ValidationError(f"Missing shipping fields: {', '.join(missing)}")
        order = PrintOrder(
            id=uuid4(),
            product=product,
            shipping=shipping,
            status="CONFIRMED",
            total=product.price,
            created_at=datetime.now(tz=UTC),
        )
        logger.info(
            "Print order confirmed",
            extra={"order_id": str(order.id), "product_id": product.id},
        )
        return order
