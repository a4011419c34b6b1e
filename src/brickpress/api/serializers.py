"""JSON shapes for domain objects."""

from brickpress.domain.generations import GalleryItem
from brickpress.domain.products import PrintOrder, Product


def serialize_gallery_item(item: GalleryItem) -> dict[str, object]:
    record = item.record
    return {
        "id": record.id,
        "name": record.name,
        "description": record.description,
        "theme": record.theme,
        "storageId": record.storage_id,
        "userId": record.owner.user_id,
        "createdAt": record.created_at.isoformat(),
        "imageUrl": item.image_url,
    }


def serialize_product(product: Product) -> dict[str, object]:
    return {
        "id": product.id,
        "name": product.name,
        "description": product.description,
        "price": product.price,
        "dimensions": product.dimensions,
        "type": product.type,
        "imageRatio": product.image_ratio,
    }


def serialize_order(order: PrintOrder) -> dict[str, object]:
    return {
        "id": str(order.id),
        "status": order.status,
        "total": order.total,
        "product": serialize_product(order.product),
        "shipping": {
            "name": order.shipping.name,
            "address": order.shipping.address,
            "city": order.shipping.city,
            "zip": order.shipping.zip,
        },
        "createdAt": order.created_at.isoformat(),
    }
