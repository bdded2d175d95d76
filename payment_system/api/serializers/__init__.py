from .request_serializers import CreatePaymentOrderRequestSerializer, VerifyPaymentRequestSerializer
from .response_serializers import (
    AlreadyProcessedResponseSerializer,
    CreatePaymentOrderResponseSerializer,
    ErrorResponseSerializer,
    PaymentStatusResponseSerializer,
    VerifyPaymentResponseSerializer,
)

__all__ = [
    "CreatePaymentOrderRequestSerializer",
    "VerifyPaymentRequestSerializer",
    "AlreadyProcessedResponseSerializer",
    "CreatePaymentOrderResponseSerializer",
    "ErrorResponseSerializer",
    "PaymentStatusResponseSerializer",
    "VerifyPaymentResponseSerializer",
]
