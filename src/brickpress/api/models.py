"""Request payloads for the JSON endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class SaveCreationPayload(BaseModel):
    """Manual save of an already generated poster."""

    model_config = ConfigDict(populate_by_name=True)

    image: str
    name: str = ""
    description: str = ""
    theme: str | None = None
    user_id: str | None = Field(default=None, alias="userId")


class SaveGenerationPayload(BaseModel):
    """Relay request to record an uploaded poster."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    description: str = ""
    theme: str = ""
    storage_id: str | None = Field(default=None, alias="storageId")
    user_id: str | None = Field(default=None, alias="userId")


class ShippingPayload(BaseModel):
    """Mock shipping address."""

    name: str
    address: str
    city: str
    zip: str


class OrderPayload(BaseModel):
    """Print order request."""

    model_config = ConfigDict(populate_by_name=True)

    product_id: str = Field(alias="productId")
    shipping: ShippingPayload
