import pytest
from commerce.gateway.port import ImageRef, Product, ProductVariant


@pytest.fixture()
def products():
    return [
        Product(
            id="gid://shopify/Product/1",
            title="Classic Tee",
            handle="classic-tee",
            status="ACTIVE",
            total_inventory=30,
            featured_image=ImageRef(url="https://cdn.example.com/tee.png", alt_text="Tee"),
            variants=(
                ProductVariant(id="gid://shopify/ProductVariant/11", title="Black / M", price="499", sku="TEE-BLK-M"),
                ProductVariant(id="gid://shopify/ProductVariant/12", title="White / L", price="549.50"),
            ),
        ),
        Product(id="gid://shopify/Product/2", title="Linen Shirt", handle="summer-linen", status="DRAFT"),
        Product(id="gid://shopify/Product/3", title="Canvas Tote", handle="canvas-tote", status="ARCHIVED"),
    ]


@pytest.fixture()
def stocked_gateway(gateway, products):
    gateway.products.extend(products)
    return gateway
