from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from infrastructure.container import container
from payment_system.api.serializers import (
    AlreadyProcessedResponseSerializer,
    CreatePaymentOrderRequestSerializer,
    CreatePaymentOrderResponseSerializer,
    ErrorResponseSerializer,
    PaymentStatusResponseSerializer,
    VerifyPaymentRequestSerializer,
    VerifyPaymentResponseSerializer,
)
from utils.api import error_response


@extend_schema(
    operation_id="payment_create_order",
    summary="Create a gateway order for checkout",
    description="""
    Validates the basket (amount, customer info, items, totals and stock) and
    opens an order at the payment gateway. The returned ``key`` is the public
    key for the browser checkout widget.
    """,
    request=CreatePaymentOrderRequestSerializer,
    responses={
        200: CreatePaymentOrderResponseSerializer,
        400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid checkout payload"),
        500: OpenApiResponse(response=ErrorResponseSerializer, description="Gateway not configured or failed"),
    },
    tags=["Payments"],
    auth=[],
)
@api_view(["POST"])
@authentication_classes([])
@permission_classes([AllowAny])
def create_payment_order(request):
    result = container.payment_service().create_payment_order(request.data)
    if not result.ok:
        return error_response(result)
    return Response(result.value, status=status.HTTP_200_OK)


@extend_schema(
    operation_id="payment_verify",
    summary="Verify a checkout payment and create the order",
    description="""
    Checks identifier formats and the callback signature, confirms capture and
    amount with the gateway, then stores the order with ``payment_status``
    **completed**. A payment id can only be used once.
    """,
    request=VerifyPaymentRequestSerializer,
    responses={
        200: VerifyPaymentResponseSerializer,
        400: OpenApiResponse(response=ErrorResponseSerializer, description="Verification failed"),
        409: OpenApiResponse(response=AlreadyProcessedResponseSerializer, description="Payment already processed"),
        500: OpenApiResponse(response=ErrorResponseSerializer, description="Gateway not configured"),
    },
    tags=["Payments"],
    auth=[],
)
@api_view(["POST"])
@authentication_classes([])
@permission_classes([AllowAny])
def verify_payment(request):
    result = container.payment_service().verify_payment(request.data)
    if not result.ok:
        return error_response(result)
    return Response(result.value, status=status.HTTP_200_OK)


@extend_schema(
    operation_id="payment_status",
    summary="Get a payment's status from the gateway",
    responses={
        200: PaymentStatusResponseSerializer,
        500: OpenApiResponse(response=ErrorResponseSerializer, description="Gateway not configured or failed"),
    },
    tags=["Payments"],
    auth=[],
)
@api_view(["GET"])
@authentication_classes([])
@permission_classes([AllowAny])
def payment_status(request, payment_id):
    result = container.payment_service().get_payment_status(payment_id)
    if not result.ok:
        return error_response(result)
    return Response({"payment": result.value}, status=status.HTTP_200_OK)
