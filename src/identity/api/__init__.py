"""Identity API package."""

from identity.api.routes import customer_router

__all__ = ["customer_router"]
