"""
Domain models for attempt-probe.

`PaymentAttempt` mirrors one row of the `payment_attempt` table. All models are
frozen pydantic models: a record is built once by the factory and never
mutated afterwards. Their JSON form (`model_dump_json`) is the canonical text
written into structured columns.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, RootModel, model_serializer, model_validator

from attempt_probe.domain.enums import (
    AttemptStatus,
    AuthenticationType,
    CaptureMethod,
    Currency,
    PaymentExperience,
    PaymentMethod,
    PaymentMethodType,
)

FROZEN = ConfigDict(frozen=True, populate_by_name=True, arbitrary_types_allowed=False)


class JsonPayload(RootModel[Any]):
    """
    Opaque JSON value carried by free-form columns.

    Wrapping the value keeps a present payload whose content is JSON `null`
    distinct from an absent field (`None`).
    """

    model_config = ConfigDict(frozen=True)


class MandateAmountData(BaseModel):
    amount: int
    currency: Currency
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    metadata: Optional[JsonPayload] = None

    model_config = FROZEN


MANDATE_TAGS = ("SingleUse", "MultiUse")


def _untag(data: Any, tag: str) -> Any:
    """
    Unwrap the externally tagged form `{tag: amount_data}` into field input.

    A payload tagged with the other mandate arm is rejected so a union never
    reads `{"SingleUse": ...}` back as `MultiUse`.
    """
    if isinstance(data, dict) and len(data) == 1:
        (key, inner), = data.items()
        if key == tag:
            return {"amount_data": inner}
        if key in MANDATE_TAGS:
            raise ValueError(f"expected a {tag} mandate, got {key}")
    return data


class SingleUse(BaseModel):
    """Mandate valid for exactly one charge."""

    amount_data: MandateAmountData

    model_config = FROZEN

    @model_validator(mode="before")
    @classmethod
    def _from_tagged(cls, data: Any) -> Any:
        return _untag(data, "SingleUse")

    @model_serializer(mode="wrap")
    def _tagged(self, handler) -> Dict[str, Any]:
        return {"SingleUse": handler(self)["amount_data"]}


class MultiUse(BaseModel):
    """Mandate valid for repeated charges, optionally capped by amount data."""

    amount_data: Optional[MandateAmountData] = None

    model_config = FROZEN

    @model_validator(mode="before")
    @classmethod
    def _from_tagged(cls, data: Any) -> Any:
        return _untag(data, "MultiUse")

    @model_serializer(mode="wrap")
    def _tagged(self, handler) -> Dict[str, Any]:
        return {"MultiUse": handler(self)["amount_data"]}


MandateDataType = Union[SingleUse, MultiUse]


class MandateDetails(BaseModel):
    update_mandate_id: Optional[str] = None

    model_config = FROZEN


class PaymentAttempt(BaseModel):
    """
    Representation of a single row in the `payment_attempt` table.

    Field declaration order matches column order; `attempt_probe.domain.fields`
    holds the generation kind for each of them.
    """

    payment_id: str = Field(..., description="Payment identifier (partition key).")
    merchant_id: str = Field(..., description="Owning merchant.")
    attempt_id: str = Field(..., description="Attempt identifier (clustering key).")
    status: AttemptStatus
    amount: int = Field(..., description="Amount in minor units.")
    currency: Optional[Currency] = None
    save_to_locker: Optional[bool] = None
    connector: Optional[str] = None
    error_message: Optional[str] = None
    offer_amount: Optional[int] = None
    surcharge_amount: Optional[int] = None
    tax_amount: Optional[int] = None
    payment_method_id: Optional[str] = None
    payment_method: Optional[PaymentMethod] = None
    connector_transaction_id: Optional[str] = None
    capture_method: Optional[CaptureMethod] = None
    capture_on: Optional[datetime] = None
    confirm: bool
    authentication_type: Optional[AuthenticationType] = None
    created_at: datetime
    modified_at: datetime
    last_synced: Optional[datetime] = None
    cancellation_reason: Optional[str] = None
    amount_to_capture: Optional[int] = None
    mandate_id: Optional[str] = None
    browser_info: Optional[JsonPayload] = None
    error_code: Optional[str] = None
    payment_token: Optional[str] = None
    connector_metadata: Optional[JsonPayload] = None
    payment_experience: Optional[PaymentExperience] = None
    payment_method_type: Optional[PaymentMethodType] = None
    payment_method_data: Optional[JsonPayload] = None
    business_sub_label: Optional[str] = None
    straight_through_algorithm: Optional[JsonPayload] = None
    preprocessing_step_id: Optional[str] = None
    # Mandate details held for the duration of the transaction.
    mandate_details: Optional[MandateDataType] = None
    error_reason: Optional[str] = None
    multiple_capture_count: Optional[int] = None
    # Reference to the payment on the connector side.
    connector_response_reference_id: Optional[str] = None
    amount_capturable: int
    updated_by: str
    merchant_connector_id: Optional[str] = None
    authentication_data: Optional[JsonPayload] = None
    encoded_data: Optional[str] = None
    unified_code: Optional[str] = None
    unified_message: Optional[str] = None
    net_amount: Optional[int] = None
    external_three_ds_authentication_attempted: Optional[bool] = None
    authentication_connector: Optional[str] = None
    authentication_id: Optional[str] = None
    mandate_data: Optional[MandateDetails] = None
    fingerprint_id: Optional[str] = None
    payment_method_billing_address_id: Optional[str] = None
    charge_id: Optional[str] = None
    client_source: Optional[str] = None
    client_version: Optional[str] = None
    customer_acceptance: Optional[JsonPayload] = None
    profile_id: Optional[str] = None

    model_config = FROZEN


__all__ = [
    "JsonPayload",
    "MandateAmountData",
    "SingleUse",
    "MultiUse",
    "MandateDataType",
    "MandateDetails",
    "PaymentAttempt",
]
