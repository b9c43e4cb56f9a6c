"""
Field policy table for the payment attempt record.

`PAYMENT_ATTEMPT_FIELDS` is the single ordered declaration of every record
field and its kind. Generation, the column schema, the DDL and the positional
encoder all read from it, so column index N is always the N-th entry here.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, NamedTuple, Optional, Tuple, Type

from attempt_probe.domain.enums import (
    AttemptStatus,
    AuthenticationType,
    CaptureMethod,
    Currency,
    PaymentExperience,
    PaymentMethod,
    PaymentMethodType,
)
from attempt_probe.domain.models import (
    MandateAmountData,
    MandateDetails,
    MultiUse,
    PaymentAttempt,
    SingleUse,
)
from attempt_probe.errors import SchemaMismatch
from attempt_probe.randr.kinds import (
    Boolean,
    EnumKind,
    Int16,
    Int64,
    Kind,
    Maybe,
    Payload,
    Struct,
    TaggedUnion,
    Text,
    Timestamp,
)


class FieldSpec(NamedTuple):
    name: str
    kind: Kind


class Column(NamedTuple):
    """One positional column: name, SQL type and whether NULL is allowed."""

    name: str
    sql_type: str
    nullable: bool


MANDATE_AMOUNT_DATA = Struct(
    MandateAmountData,
    {
        "amount": Int64(),
        "currency": EnumKind(Currency),
        "start_date": Maybe(Timestamp()),
        "end_date": Maybe(Timestamp()),
        "metadata": Maybe(Payload()),
    },
)

MANDATE_DATA_TYPE = TaggedUnion(
    when_true=Struct(MultiUse, {"amount_data": Maybe(MANDATE_AMOUNT_DATA)}),
    when_false=Struct(SingleUse, {"amount_data": MANDATE_AMOUNT_DATA}),
)

MANDATE_DETAILS = Struct(MandateDetails, {"update_mandate_id": Maybe(Text())})

PAYMENT_ATTEMPT_FIELDS: Tuple[FieldSpec, ...] = (
    FieldSpec("payment_id", Text()),
    FieldSpec("merchant_id", Text()),
    FieldSpec("attempt_id", Text()),
    FieldSpec("status", EnumKind(AttemptStatus)),
    FieldSpec("amount", Int64()),
    FieldSpec("currency", Maybe(EnumKind(Currency))),
    FieldSpec("save_to_locker", Maybe(Boolean())),
    FieldSpec("connector", Maybe(Text())),
    FieldSpec("error_message", Maybe(Text())),
    FieldSpec("offer_amount", Maybe(Int64())),
    FieldSpec("surcharge_amount", Maybe(Int64())),
    FieldSpec("tax_amount", Maybe(Int64())),
    FieldSpec("payment_method_id", Maybe(Text())),
    FieldSpec("payment_method", Maybe(EnumKind(PaymentMethod))),
    FieldSpec("connector_transaction_id", Maybe(Text())),
    FieldSpec("capture_method", Maybe(EnumKind(CaptureMethod))),
    FieldSpec("capture_on", Maybe(Timestamp())),
    FieldSpec("confirm", Boolean()),
    FieldSpec("authentication_type", Maybe(EnumKind(AuthenticationType))),
    FieldSpec("created_at", Timestamp()),
    FieldSpec("modified_at", Timestamp()),
    FieldSpec("last_synced", Maybe(Timestamp())),
    FieldSpec("cancellation_reason", Maybe(Text())),
    FieldSpec("amount_to_capture", Maybe(Int64())),
    FieldSpec("mandate_id", Maybe(Text())),
    FieldSpec("browser_info", Maybe(Payload())),
    FieldSpec("error_code", Maybe(Text())),
    FieldSpec("payment_token", Maybe(Text())),
    FieldSpec("connector_metadata", Maybe(Payload())),
    FieldSpec("payment_experience", Maybe(EnumKind(PaymentExperience))),
    FieldSpec("payment_method_type", Maybe(EnumKind(PaymentMethodType))),
    FieldSpec("payment_method_data", Maybe(Payload())),
    FieldSpec("business_sub_label", Maybe(Text())),
    FieldSpec("straight_through_algorithm", Maybe(Payload())),
    FieldSpec("preprocessing_step_id", Maybe(Text())),
    FieldSpec("mandate_details", Maybe(MANDATE_DATA_TYPE)),
    FieldSpec("error_reason", Maybe(Text())),
    FieldSpec("multiple_capture_count", Maybe(Int16())),
    FieldSpec("connector_response_reference_id", Maybe(Text())),
    FieldSpec("amount_capturable", Int64()),
    FieldSpec("updated_by", Text()),
    FieldSpec("merchant_connector_id", Maybe(Text())),
    FieldSpec("authentication_data", Maybe(Payload())),
    FieldSpec("encoded_data", Maybe(Text())),
    FieldSpec("unified_code", Maybe(Text())),
    FieldSpec("unified_message", Maybe(Text())),
    FieldSpec("net_amount", Maybe(Int64())),
    FieldSpec("external_three_ds_authentication_attempted", Maybe(Boolean())),
    FieldSpec("authentication_connector", Maybe(Text())),
    FieldSpec("authentication_id", Maybe(Text())),
    FieldSpec("mandate_data", Maybe(MANDATE_DETAILS)),
    FieldSpec("fingerprint_id", Maybe(Text())),
    FieldSpec("payment_method_billing_address_id", Maybe(Text())),
    FieldSpec("charge_id", Maybe(Text())),
    FieldSpec("client_source", Maybe(Text())),
    FieldSpec("client_version", Maybe(Text())),
    FieldSpec("customer_acceptance", Maybe(Payload())),
    FieldSpec("profile_id", Maybe(Text())),
)

FIELDS_BY_NAME: Dict[str, FieldSpec] = {spec.name: spec for spec in PAYMENT_ATTEMPT_FIELDS}

PAYMENT_ATTEMPT_SCHEMA: Tuple[Column, ...] = tuple(
    Column(spec.name, spec.kind.sql_type, spec.kind.nullable) for spec in PAYMENT_ATTEMPT_FIELDS
)

PAYMENT_ATTEMPT_KIND = Struct(
    PaymentAttempt, {spec.name: spec.kind for spec in PAYMENT_ATTEMPT_FIELDS}
)

MANDATORY_FIELDS: Tuple[str, ...] = tuple(
    spec.name for spec in PAYMENT_ATTEMPT_FIELDS if not spec.kind.nullable
)
OPTIONAL_FIELDS: Tuple[str, ...] = tuple(
    spec.name for spec in PAYMENT_ATTEMPT_FIELDS if spec.kind.nullable
)


def _enum_type(kind: Kind) -> Optional[Type[Enum]]:
    inner = kind.inner if isinstance(kind, Maybe) else kind
    return inner.enum_type if isinstance(inner, EnumKind) else None


ENUM_FIELDS: Dict[str, Type[Enum]] = {
    spec.name: enum_type
    for spec in PAYMENT_ATTEMPT_FIELDS
    if (enum_type := _enum_type(spec.kind)) is not None
}

if tuple(PaymentAttempt.model_fields) != tuple(FIELDS_BY_NAME):
    raise SchemaMismatch("PaymentAttempt fields are out of sync with PAYMENT_ATTEMPT_FIELDS")


__all__ = [
    "FieldSpec",
    "Column",
    "MANDATE_AMOUNT_DATA",
    "MANDATE_DATA_TYPE",
    "MANDATE_DETAILS",
    "PAYMENT_ATTEMPT_FIELDS",
    "FIELDS_BY_NAME",
    "PAYMENT_ATTEMPT_SCHEMA",
    "PAYMENT_ATTEMPT_KIND",
    "MANDATORY_FIELDS",
    "OPTIONAL_FIELDS",
    "ENUM_FIELDS",
]
