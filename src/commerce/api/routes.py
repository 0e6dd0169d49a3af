"""FastAPI routes for commerce gateway maintenance (non-production only)."""

import os

from fastapi import APIRouter, HTTPException

from commerce.api.schemas import ConfigureGatewayRequest, GatewayConfigResponse, UserErrorSchema
from commerce.gateway import get_gateway
from commerce.gateway.fake_adapter import FakeCommerceGateway
from commerce.gateway.port import UserError

commerce_router = APIRouter(prefix="/commerce", tags=["commerce"])


def _errors(schemas: list[UserErrorSchema]) -> list[UserError]:
    return [UserError(field=schema.field, message=schema.message) for schema in schemas]


@commerce_router.post("/gateway/configure", response_model=GatewayConfigResponse)
async def configure_gateway(body: ConfigureGatewayRequest) -> GatewayConfigResponse:
    """Configure the FakeCommerceGateway behavior.

    Lets a tester make draft creation or completion return user errors, or
    make every call fail at the transport level. Not available when
    PROTEAN_ENV is 'production'.
    """
    if os.environ.get("PROTEAN_ENV") == "production":
        raise HTTPException(status_code=403, detail="Gateway configuration not available in production")

    gateway = get_gateway()
    if not isinstance(gateway, FakeCommerceGateway):
        raise HTTPException(status_code=400, detail="Gateway configuration only available for FakeCommerceGateway")

    gateway.configure(
        create_errors=_errors(body.create_errors),
        complete_errors=_errors(body.complete_errors),
        mutation_errors=_errors(body.mutation_errors),
        fail_transport=body.fail_transport,
    )
    return GatewayConfigResponse(gateway=type(gateway).__name__, **body.model_dump())
