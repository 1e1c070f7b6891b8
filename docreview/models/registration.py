"""Tenant registration DTOs.

Passed through to the registration endpoint as-is; only their shape is validated.
"""

from pydantic import Field

from docreview.models.base import WireModel


class CheckoutRequest(WireModel):
    plan_id: str = Field(alias="planId")
    interval: str


class RegisterCompanyRequest(WireModel):
    """
    Request to register a new tenant together with its first user.
    """
    email: str
    tenant_name: str = Field(alias="tenantName")
    first_name: str | None = Field(default=None, alias="firstName")
    last_name: str | None = Field(default=None, alias="lastName")
    captcha_token: str | None = Field(default=None, alias="captchaToken")
    checkout: CheckoutRequest | None = None


class RegisteredUser(WireModel):
    id: str
    email: str
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")


class RegistrationResponse(WireModel):
    """
    Successful registration payload.
    """
    user: RegisteredUser
    tenant_id: str = Field(alias="tenantId")
    checkout_url: str | None = Field(default=None, alias="checkoutUrl")


class RegistrationErrorDetails(WireModel):
    code: str
    message: str


class RegistrationErrorResponse(WireModel):
    """
    Error payload returned when registration is rejected (e.g. USER_ALREADY_EXISTS).
    """
    status: str
    error: RegistrationErrorDetails
