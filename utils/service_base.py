"""
Shared service-layer building blocks.

Every domain service returns a ServiceResult instead of raising for expected
failures (validation errors, missing records, permission problems). Views map
``result.error`` to an HTTP status and render ``result.error_detail`` as the
response message.
"""

import logging
import time
from dataclasses import dataclass
from functools import wraps
from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass
class ServiceResult(Generic[T]):
    """
    Outcome of a service operation.

    Attributes:
        ok: True if operation succeeded
        value: Payload on success
        error: Error code from ErrorCodes on failure
        error_detail: Human-readable message shown to API clients
        error_data: Optional structured payload (e.g. stock shortfall details)

    Examples:
        >>> result = service_ok({"order_id": "ORD1"})
        >>> result.ok
        True
        >>> result = service_err(ErrorCodes.ORDER_NOT_FOUND, "Order not found")
        >>> result.error_detail
        'Order not found'
    """

    ok: bool
    value: Optional[T] = None
    error: Optional[str] = None
    error_detail: Optional[str] = None
    error_data: Any = None


def service_ok(value: T = None) -> ServiceResult[T]:
    return ServiceResult(ok=True, value=value)


def service_err(error: str, error_detail: str = "", error_data: Any = None) -> ServiceResult:
    """
    Create a failed ServiceResult.

    Args:
        error: Error code (see ErrorCodes)
        error_detail: Message returned to the client
        error_data: Extra structured details returned alongside the message
    """
    return ServiceResult(ok=False, error=error, error_detail=error_detail or error, error_data=error_data)


class BaseService:
    """
    Base class for all services.

    Provides a logger named after the concrete class and a timing decorator.

    Usage:
        class OrderService(BaseService):
            @BaseService.log_performance
            def create_order(self, payload):
                self.logger.info("Creating order")
    """

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__module__ + "." + self.__class__.__name__)

    @staticmethod
    def log_performance(func: Callable) -> Callable:
        """Log execution time and outcome of a service method."""

        @wraps(func)
        def wrapper(self, *args, **kwargs):
            start_time = time.time()
            method_name = f"{self.__class__.__name__}.{func.__name__}"

            try:
                self.logger.debug(f"{method_name} started")
                result = func(self, *args, **kwargs)
                elapsed_time = (time.time() - start_time) * 1000

                if isinstance(result, ServiceResult) and not result.ok:
                    self.logger.warning(f"{method_name} failed with error '{result.error}' in {elapsed_time:.2f}ms")
                else:
                    self.logger.info(f"{method_name} completed in {elapsed_time:.2f}ms")

                return result

            except Exception as e:
                elapsed_time = (time.time() - start_time) * 1000
                self.logger.error(
                    f"{method_name} raised exception after {elapsed_time:.2f}ms: {str(e)}",
                    exc_info=True,
                )
                raise

        return wrapper


class ErrorCodes:
    """Error codes shared by all services. Views translate these to HTTP statuses."""

    # Generic
    VALIDATION_ERROR = "validation_error"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    PERMISSION_DENIED = "permission_denied"
    INTERNAL_ERROR = "internal_error"

    # Authentication
    USER_EXISTS = "user_exists"
    INVALID_CREDENTIALS = "invalid_credentials"
    INVALID_RESET_TOKEN = "invalid_reset_token"
    RESET_TOKEN_EXPIRED = "reset_token_expired"
    SELLER_NOT_APPROVED = "seller_not_approved"
    SELLER_NOT_FOUND = "seller_not_found"

    # Catalog
    PRODUCT_NOT_FOUND = "product_not_found"
    INVALID_CATEGORY = "invalid_category"
    FILE_TOO_LARGE = "file_too_large"

    # Ordering
    ORDER_NOT_FOUND = "order_not_found"
    ORDER_CANNOT_CANCEL = "order_cannot_cancel"
    NOT_ORDER_OWNER = "not_order_owner"
    INSUFFICIENT_STOCK = "insufficient_stock"
    INVALID_STATUS = "invalid_status"

    # Payments
    PAYMENT_NOT_CONFIGURED = "payment_not_configured"
    PAYMENT_ALREADY_PROCESSED = "payment_already_processed"
    PAYMENT_VERIFICATION_FAILED = "payment_verification_failed"
    PAYMENT_GATEWAY_ERROR = "payment_gateway_error"


ERROR_STATUS_MAP = {
    ErrorCodes.VALIDATION_ERROR: 400,
    ErrorCodes.NOT_FOUND: 404,
    ErrorCodes.CONFLICT: 409,
    ErrorCodes.PERMISSION_DENIED: 403,
    ErrorCodes.INTERNAL_ERROR: 500,
    ErrorCodes.USER_EXISTS: 400,
    ErrorCodes.INVALID_CREDENTIALS: 400,
    ErrorCodes.INVALID_RESET_TOKEN: 400,
    ErrorCodes.RESET_TOKEN_EXPIRED: 400,
    ErrorCodes.SELLER_NOT_APPROVED: 403,
    ErrorCodes.SELLER_NOT_FOUND: 404,
    ErrorCodes.PRODUCT_NOT_FOUND: 404,
    ErrorCodes.INVALID_CATEGORY: 400,
    ErrorCodes.FILE_TOO_LARGE: 400,
    ErrorCodes.ORDER_NOT_FOUND: 404,
    ErrorCodes.ORDER_CANNOT_CANCEL: 400,
    ErrorCodes.NOT_ORDER_OWNER: 403,
    ErrorCodes.INSUFFICIENT_STOCK: 400,
    ErrorCodes.INVALID_STATUS: 400,
    ErrorCodes.PAYMENT_NOT_CONFIGURED: 500,
    ErrorCodes.PAYMENT_ALREADY_PROCESSED: 409,
    ErrorCodes.PAYMENT_VERIFICATION_FAILED: 400,
    ErrorCodes.PAYMENT_GATEWAY_ERROR: 500,
}


def status_for(result: ServiceResult) -> int:
    """HTTP status for a failed result; unknown codes are treated as server errors."""
    return ERROR_STATUS_MAP.get(result.error, 500)


def error_response_data(result: ServiceResult) -> dict:
    """Body for a failed result in the API's ``{"message": ...}`` shape."""
    data = {"message": result.error_detail}
    if result.error_data is not None:
        if isinstance(result.error_data, dict):
            data.update(result.error_data)
        else:
            data["details"] = result.error_data
    return data
