"""FastAPI routes for the Catalogue screens.

Products are owned by the remote commerce API; these routes read through
the gateway and derive what the screens display.
"""

from commerce.gateway import get_gateway
from commerce.gateway.port import CommerceAPIError, ImageRef, Product
from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from catalogue.api.schemas import (
    CreateProductRequest,
    CreateProductResponse,
    ImageSchema,
    ProductListResponse,
    ProductSchema,
    UserErrorSchema,
    VariantSchema,
)
from catalogue.product.browsing import filter_products, primary_variant_price, product_status_badge
from catalogue.product.creation import create_product

product_router = APIRouter(prefix="/products", tags=["products"])


def _image(image: ImageRef | None) -> ImageSchema | None:
    return ImageSchema(url=image.url, alt_text=image.alt_text) if image else None


def _product_schema(product: Product) -> ProductSchema:
    price = primary_variant_price(product)
    return ProductSchema(
        id=product.id,
        title=product.title,
        handle=product.handle,
        status=product_status_badge(product.status).to_dict(),
        total_inventory=product.total_inventory,
        price=f"{price:.2f}" if price is not None else None,
        featured_image=_image(product.featured_image),
        variants=[
            VariantSchema(
                id=variant.id,
                title=variant.title,
                price=variant.price,
                sku=variant.sku,
                inventory_quantity=variant.inventory_quantity,
                image=_image(variant.image),
            )
            for variant in product.variants
        ],
    )


@product_router.get("", response_model=ProductListResponse)
def list_products(query: str = "", first: int = 50) -> ProductListResponse:
    try:
        products = get_gateway().list_products(first=first)
    except CommerceAPIError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    return ProductListResponse(
        products=[_product_schema(product) for product in filter_products(products, query)],
        query=query,
    )


@product_router.post("", status_code=201, response_model=CreateProductResponse)
def create(body: CreateProductRequest):
    result = create_product(get_gateway(), body.model_dump())
    if result.ok:
        return CreateProductResponse(product_id=result.resource_id, redirect_to="/products")

    response = CreateProductResponse(
        errors=[UserErrorSchema(field=error.field, message=error.message) for error in result.user_errors]
    )
    return JSONResponse(status_code=422, content=response.model_dump())
