"""
Domain package for attempt-probe.

Exports the payment attempt record, its nested models and enums. The field
policy table lives in `attempt_probe.domain.fields`.
"""

from attempt_probe.domain.enums import (
    CANONICAL_DEFAULTS,
    AttemptStatus,
    AuthenticationType,
    CaptureMethod,
    Currency,
    PaymentExperience,
    PaymentMethod,
    PaymentMethodType,
)
from attempt_probe.domain.models import (
    JsonPayload,
    MandateAmountData,
    MandateDataType,
    MandateDetails,
    MultiUse,
    PaymentAttempt,
    SingleUse,
)

__all__ = [
    # Enums
    "AttemptStatus",
    "AuthenticationType",
    "CaptureMethod",
    "Currency",
    "PaymentExperience",
    "PaymentMethod",
    "PaymentMethodType",
    "CANONICAL_DEFAULTS",
    # Models
    "JsonPayload",
    "MandateAmountData",
    "MandateDataType",
    "MandateDetails",
    "MultiUse",
    "PaymentAttempt",
    "SingleUse",
]
