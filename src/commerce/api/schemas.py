"""Pydantic schemas for the commerce gateway maintenance API."""

from pydantic import BaseModel


class UserErrorSchema(BaseModel):
    field: str | None = None
    message: str


class ConfigureGatewayRequest(BaseModel):
    create_errors: list[UserErrorSchema] = []
    complete_errors: list[UserErrorSchema] = []
    mutation_errors: list[UserErrorSchema] = []
    fail_transport: bool = False


class GatewayConfigResponse(BaseModel):
    gateway: str
    create_errors: list[UserErrorSchema] = []
    complete_errors: list[UserErrorSchema] = []
    mutation_errors: list[UserErrorSchema] = []
    fail_transport: bool = False
