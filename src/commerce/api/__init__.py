"""Commerce maintenance API package."""

from commerce.api.routes import commerce_router

__all__ = ["commerce_router"]
