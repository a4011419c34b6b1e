"""Print shop catalog and order models."""

from dataclasses import dataclass
from datetime import datetime
from typing import Literal
from uuid import UUID

ProductType = Literal["poster", "canvas", "sticker"]


@dataclass(frozen=True)
class Product:
    """A printable product offered for a generated poster."""

    id: str
    name: str
    description: str
    price: float
    dimensions: str
    type: ProductType
    image_ratio: float


@dataclass(frozen=True)
class ShippingDetails:
    """Mock shipping address."""

    name: str
    address: str
    city: str
    zip: str


@dataclass(frozen=True)
class PrintOrder:
    """Confirmed mock order."""

    id: UUID
    product: Product
    shipping: ShippingDetails
    status: str
    total: float
    created_at: datetime


PRODUCTS: tuple[Product, ...] = (
    Product(
        id="poster-standard",
        name="Standard Poster",
        description="High-quality matte finish poster paper. Perfect for framing.",
        price=19.99,
        dimensions="12 x 16 inches",
        type="poster",
        image_ratio=0.75,
    ),
    Product(
        id="poster-large",
        name="Premium Art Print",
        description="Museum-quality archival paper with rich color reproduction.",
        price=34.99,
        dimensions="18 x 24 inches",
        type="poster",
        image_ratio=0.75,
    ),
    Product(
        id="canvas-framed",
        name="Framed Canvas",
        description="Gallery-wrapped canvas in a sleek black floating frame.",
        price=89.99,
        dimensions="16 x 20 inches",
        type="canvas",
        image_ratio=0.8,
    ),
    Product(
        id="sticker-pack",
        name="Die-Cut Sticker Pack",
        description="5x vinyl sticker sheet with glossy UV coating.",
        price=12.99,
        dimensions="5 x 7 inches",
        type="sticker",
        image_ratio=0.71,
    ),
)
