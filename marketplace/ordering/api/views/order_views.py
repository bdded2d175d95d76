"""
Order endpoints for checkout, customers and admins.
"""

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from authentication.backends import OptionalBearerJWTAuthentication
from authentication.permissions import AdminRequired
from infrastructure.container import container
from marketplace.api.serializers import ErrorResponseSerializer
from marketplace.ordering.api.serializers import (
    CreateOrderRequestSerializer,
    OrderErrorResponseSerializer,
    OrderSerializer,
    OrderStatusUpdateSerializer,
)
from utils.api import error_response


class OrderListCreateView(APIView):
    """
    POST: record a paid order from checkout (public; the user is attached when logged in).
    GET:  every order, newest first (admin).
    """

    def get_authenticators(self):
        if self.request.method == "POST":
            return [OptionalBearerJWTAuthentication()]
        return super().get_authenticators()

    def get_permissions(self):
        if self.request.method == "POST":
            return [permissions.AllowAny()]
        return [AdminRequired()]

    @extend_schema(
        operation_id="orders_create",
        summary="Create an order",
        description="""
        Idempotent on ``payment_id`` and ``order_id``: a repeated request returns
        the stored order with status 200. Stock is checked before the order is
        saved; commission is computed per line item.
        """,
        request=CreateOrderRequestSerializer,
        responses={
            201: OrderSerializer,
            200: OpenApiResponse(response=OrderSerializer, description="Order already exists"),
            400: OpenApiResponse(response=OrderErrorResponseSerializer, description="Invalid order or short stock"),
        },
        tags=["Orders"],
    )
    def post(self, request):
        result = container.order_service().create_order(request.data, user=request.user)
        if not result.ok:
            return error_response(result)

        order = OrderSerializer(result.value["order"]).data
        if not result.value["created"]:
            return Response({"message": "Order already exists", "order": order}, status=status.HTTP_200_OK)
        return Response({"message": "Order created successfully", "order": order}, status=status.HTTP_201_CREATED)

    @extend_schema(
        operation_id="orders_list",
        summary="List all orders",
        responses={200: OrderSerializer(many=True)},
        tags=["Orders"],
    )
    def get(self, request):
        orders = container.order_service().list_orders()
        return Response(OrderSerializer(orders, many=True).data, status=status.HTTP_200_OK)


class MyOrdersView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    @extend_schema(
        operation_id="orders_mine",
        summary="List the current user's orders",
        description="Matches orders placed while logged in and orders placed with the user's email.",
        responses={200: OrderSerializer(many=True)},
        tags=["Orders"],
    )
    def get(self, request):
        orders = container.order_service().my_orders(request.user)
        return Response(OrderSerializer(orders, many=True).data, status=status.HTTP_200_OK)


class OrderByOrderIdView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    @extend_schema(
        operation_id="orders_by_order_id",
        summary="Get an order by its order id",
        responses={
            200: OrderSerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Order not found"),
        },
        tags=["Orders"],
    )
    def get(self, request, order_id):
        result = container.order_service().get_by_order_id(order_id)
        if not result.ok:
            return error_response(result)
        return Response(OrderSerializer(result.value).data, status=status.HTTP_200_OK)


class OrderByPaymentIdView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    @extend_schema(
        operation_id="orders_by_payment_id",
        summary="Get an order by its payment id",
        responses={
            200: OrderSerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Order not found for this payment ID"),
        },
        tags=["Orders"],
    )
    def get(self, request, payment_id):
        result = container.order_service().get_by_payment_id(payment_id)
        if not result.ok:
            return error_response(result)
        return Response(OrderSerializer(result.value).data, status=status.HTTP_200_OK)


class OrderStatusUpdateView(APIView):
    permission_classes = [AdminRequired]

    @extend_schema(
        operation_id="orders_update_status",
        summary="Change an order's status",
        description="The customer is emailed when the status actually changes.",
        request=OrderStatusUpdateSerializer,
        responses={
            200: OrderSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid status"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Order not found"),
        },
        tags=["Orders"],
    )
    def put(self, request, pk):
        result = container.order_service().update_order_status(pk, request.data.get("status"))
        if not result.ok:
            return error_response(result)
        return Response(
            {"message": "Order status updated successfully", "order": OrderSerializer(result.value).data},
            status=status.HTTP_200_OK,
        )


class OrderCancelView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    @extend_schema(
        operation_id="orders_cancel",
        summary="Cancel one of your orders",
        description="Only **pending** or **processing** orders can be cancelled.",
        request=None,
        responses={
            200: OrderSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Order cannot be cancelled"),
            403: OpenApiResponse(response=ErrorResponseSerializer, description="Not your order"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Order not found"),
        },
        tags=["Orders"],
    )
    def put(self, request, pk):
        result = container.order_service().cancel_order(pk, request.user)
        if not result.ok:
            return error_response(result)
        return Response(
            {"message": "Order cancelled successfully", "order": OrderSerializer(result.value).data},
            status=status.HTTP_200_OK,
        )
