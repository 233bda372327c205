from __future__ import annotations
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Base model: permissive to avoid breaking on API additions
# =============================================================================
class _APIModel(BaseModel):
    """
    Loose model that accepts extra fields so the SDK doesn't break
    when the API adds response properties.
    """
    model_config = ConfigDict(
        extra="allow",
        populate_by_name=True,   # allow using field names when aliases exist
        str_strip_whitespace=True,
    )


# =============================================================================
# Errors
# =============================================================================
class ErrorResponse(_APIModel):
    """
    Error body returned with 4xx/5xx responses, e.g.:

      {"errorCode": "invalid_object", "errorId": "a1b2...",
       "message": "merchant.redirectConfirmUrl must be a valid URL",
       "httpStatusCode": 422}
    """
    error_code: Optional[str] = Field(None, alias="errorCode")
    error_id: Optional[str] = Field(None, alias="errorId")
    message: Optional[str] = None
    http_status_code: Optional[int] = Field(None, alias="httpStatusCode")


# =============================================================================
# Consumer / contact (the PII-bearing shapes that log obfuscation masks)
# =============================================================================
class Consumer(_APIModel):
    phone_number: Optional[str] = Field(None, alias="phoneNumber")
    given_names: Optional[str] = Field(None, alias="givenNames")
    surname: Optional[str] = None
    email: Optional[str] = None


class Contact(_APIModel):
    """Billing or shipping address."""
    name: Optional[str] = None
    line1: Optional[str] = None
    line2: Optional[str] = None
    area1: Optional[str] = None
    area2: Optional[str] = None
    region: Optional[str] = None
    postcode: Optional[str] = None
    country_code: Optional[str] = Field(None, alias="countryCode")
    phone_number: Optional[str] = Field(None, alias="phoneNumber")


__all__ = [
    "ErrorResponse",
    "Consumer",
    "Contact",
]
