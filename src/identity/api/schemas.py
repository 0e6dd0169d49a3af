"""Pydantic request/response schemas for the Identity API."""

from pydantic import BaseModel


class BadgeSchema(BaseModel):
    tone: str
    label: str


class CustomerSchema(BaseModel):
    id: str
    display_name: str
    email: str | None = None
    phone: str | None = None
    status: BadgeSchema
    marketing: BadgeSchema


class CustomerListResponse(BaseModel):
    customers: list[CustomerSchema]
    query: str = ""


class RegisterCustomerRequest(BaseModel):
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    phone: str | None = None
    accepts_marketing: bool = False
    note: str | None = None
    tags: str | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "first_name": "Asha",
                    "last_name": "Rao",
                    "email": "asha@example.com",
                    "accepts_marketing": True,
                    "tags": "wholesale, vip",
                }
            ]
        }
    }


class UserErrorSchema(BaseModel):
    field: str | None = None
    message: str


class RegisterCustomerResponse(BaseModel):
    customer_id: str | None = None
    errors: list[UserErrorSchema] = []
    redirect_to: str | None = None
