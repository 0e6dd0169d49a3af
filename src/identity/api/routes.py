"""FastAPI routes for the Identity screens (customers)."""

from commerce.gateway import get_gateway
from commerce.gateway.port import CommerceAPIError, Customer
from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from identity.api.schemas import (
    CustomerListResponse,
    CustomerSchema,
    RegisterCustomerRequest,
    RegisterCustomerResponse,
    UserErrorSchema,
)
from identity.customer.browsing import customer_status_badge, filter_customers, marketing_status_badge
from identity.customer.registration import register_customer

customer_router = APIRouter(prefix="/customers", tags=["customers"])


def _customer_schema(customer: Customer) -> CustomerSchema:
    return CustomerSchema(
        id=customer.id,
        display_name=customer.display_name,
        email=customer.email,
        phone=customer.phone,
        status=customer_status_badge(customer).to_dict(),
        marketing=marketing_status_badge(customer).to_dict(),
    )


@customer_router.get("", response_model=CustomerListResponse)
def list_customers(query: str = "", first: int = 50) -> CustomerListResponse:
    """Search is narrowed remotely, then matched again on name and email."""
    try:
        customers = get_gateway().list_customers(first=first, query=query or None)
    except CommerceAPIError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    return CustomerListResponse(
        customers=[_customer_schema(customer) for customer in filter_customers(customers, query)],
        query=query,
    )


@customer_router.post("", status_code=201, response_model=RegisterCustomerResponse)
def register(body: RegisterCustomerRequest):
    result = register_customer(get_gateway(), body.model_dump())
    if result.ok:
        return RegisterCustomerResponse(customer_id=result.resource_id, redirect_to="/customers")

    response = RegisterCustomerResponse(
        errors=[UserErrorSchema(field=error.field, message=error.message) for error in result.user_errors]
    )
    return JSONResponse(status_code=422, content=response.model_dump())
