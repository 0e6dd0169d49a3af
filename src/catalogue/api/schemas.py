"""Pydantic request/response schemas for the Catalogue API."""

from __future__ import annotations

from pydantic import BaseModel


class BadgeSchema(BaseModel):
    tone: str
    label: str


class ImageSchema(BaseModel):
    url: str
    alt_text: str | None = None


class VariantSchema(BaseModel):
    id: str
    title: str
    price: str
    sku: str | None = None
    inventory_quantity: int | None = None
    image: ImageSchema | None = None


class ProductSchema(BaseModel):
    id: str
    title: str
    handle: str
    status: BadgeSchema
    total_inventory: int | None = None
    price: str | None = None
    featured_image: ImageSchema | None = None
    variants: list[VariantSchema] = []


class ProductListResponse(BaseModel):
    products: list[ProductSchema]
    query: str = ""


class CreateProductRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "title": "Classic Black T-Shirt",
                    "description": "<p>Premium cotton crew-neck tee.</p>",
                    "vendor": "Acme Apparel",
                    "tags": "apparel, summer",
                    "status": "ACTIVE",
                    "price": "499.00",
                    "inventory": "25",
                    "sku": "TSHIRT-BLK-M",
                }
            ]
        }
    }

    title: str | None = None
    description: str | None = None
    handle: str | None = None
    product_type: str | None = None
    vendor: str | None = None
    tags: str | None = None
    status: str | None = None
    price: str | None = None
    inventory: str | int | None = None
    sku: str | None = None


class UserErrorSchema(BaseModel):
    field: str | None = None
    message: str


class CreateProductResponse(BaseModel):
    product_id: str | None = None
    errors: list[UserErrorSchema] = []
    redirect_to: str | None = None
