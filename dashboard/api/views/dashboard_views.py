"""
Admin dashboard: overview counts, customers, orders, sellers, earnings and
category commissions. Every view requires an admin.
"""

from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, OpenApiTypes, extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from authentication.api.serializers import SellerSerializer, UserSerializer
from authentication.permissions import AdminRequired
from dashboard.api.serializers import (
    CommissionSerializer,
    CommissionUpdateRequestSerializer,
    DashboardOrderSerializer,
    ErrorResponseSerializer,
    OrderStatusRequestSerializer,
    SellerDetailSerializer,
    SellerUpdateRequestSerializer,
    StatsSerializer,
    VerificationReviewRequestSerializer,
)
from infrastructure.container import container
from marketplace.ordering.api.serializers import OrderSerializer
from marketplace.seller.api.serializers import EarningsResponseSerializer
from marketplace.seller.api.views import EARNINGS_PARAMETERS
from utils.api import error_response


class AdminView(APIView):
    permission_classes = [AdminRequired]


class StatsView(AdminView):
    @extend_schema(
        operation_id="dashboard_stats",
        summary="Store-wide counts and revenue",
        responses={200: StatsSerializer},
        tags=["Dashboard"],
    )
    def get(self, request):
        return Response({"data": container.dashboard_service().stats()}, status=status.HTTP_200_OK)


class CustomerListView(AdminView):
    @extend_schema(
        operation_id="dashboard_customers",
        summary="All customers, newest first",
        responses={200: UserSerializer(many=True)},
        tags=["Dashboard"],
    )
    def get(self, request):
        customers = container.dashboard_service().customers()
        return Response({"data": UserSerializer(customers, many=True).data}, status=status.HTTP_200_OK)


class OrderListView(AdminView):
    @extend_schema(
        operation_id="dashboard_orders",
        summary="All orders with the seller of every item",
        responses={200: DashboardOrderSerializer(many=True)},
        tags=["Dashboard"],
    )
    def get(self, request):
        orders = container.dashboard_service().orders_with_sellers()
        return Response({"data": DashboardOrderSerializer(orders, many=True).data}, status=status.HTTP_200_OK)


class OrderDeleteAllView(AdminView):
    @extend_schema(
        operation_id="dashboard_orders_delete_all",
        summary="Delete every order",
        responses={200: OpenApiTypes.OBJECT},
        tags=["Dashboard"],
    )
    def delete(self, request):
        return Response(container.dashboard_service().delete_all_orders(), status=status.HTTP_200_OK)


class OrderStatusView(AdminView):
    @extend_schema(
        operation_id="dashboard_orders_update_status",
        summary="Change an order's status",
        request=OrderStatusRequestSerializer,
        responses={
            200: OrderSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid status"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Order not found"),
        },
        tags=["Dashboard"],
    )
    def put(self, request, pk):
        result = container.dashboard_service().update_order_status(pk, request.data.get("status"))
        if not result.ok:
            return error_response(result)
        return Response(
            {"message": "Order status updated successfully", "data": OrderSerializer(result.value).data},
            status=status.HTTP_200_OK,
        )


class SellerListView(AdminView):
    @extend_schema(
        operation_id="dashboard_sellers",
        summary="All sellers with their parent summarized",
        responses={200: SellerSerializer(many=True)},
        tags=["Dashboard"],
    )
    def get(self, request):
        sellers = container.dashboard_service().list_sellers()
        return Response({"data": SellerSerializer(sellers, many=True).data}, status=status.HTTP_200_OK)


class SellerDetailView(AdminView):
    @extend_schema(
        operation_id="dashboard_sellers_retrieve",
        summary="Seller profile with product count and recent orders",
        responses={
            200: SellerDetailSerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Seller not found"),
        },
        tags=["Dashboard"],
    )
    def get(self, request, seller_id):
        result = container.dashboard_service().seller_detail(seller_id)
        if not result.ok:
            return error_response(result)
        return Response({"data": SellerDetailSerializer(result.value).data}, status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="dashboard_sellers_update",
        summary="Update a seller's account, profile and hierarchy",
        request=SellerUpdateRequestSerializer,
        responses={
            200: SellerSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Validation error"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Seller not found"),
        },
        tags=["Dashboard"],
    )
    def put(self, request, seller_id):
        result = container.dashboard_service().update_seller(seller_id, request.data)
        if not result.ok:
            return error_response(result)
        return Response(
            {"message": "Seller updated successfully", "data": SellerSerializer(result.value).data},
            status=status.HTTP_200_OK,
        )


class SellerVerificationReviewView(AdminView):
    @extend_schema(
        operation_id="dashboard_sellers_review_verification",
        summary="Approve or reject a seller",
        request=VerificationReviewRequestSerializer,
        responses={
            200: SellerSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid action"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Seller not found"),
        },
        tags=["Dashboard"],
    )
    def put(self, request, seller_id):
        result = container.dashboard_service().review_verification(
            seller_id, request.data.get("action"), request.data.get("note") or ""
        )
        if not result.ok:
            return error_response(result)
        seller = result.value
        return Response(
            {"message": f"Seller {seller.verification_status} successfully", "data": SellerSerializer(seller).data},
            status=status.HTTP_200_OK,
        )


class EarningsView(AdminView):
    @extend_schema(
        operation_id="dashboard_earnings",
        summary="Admin commission totals and breakdown",
        parameters=EARNINGS_PARAMETERS,
        responses={200: EarningsResponseSerializer},
        tags=["Dashboard"],
    )
    def get(self, request):
        params = request.query_params
        earnings = container.earnings_service().admin_earnings(
            range_name=params.get("range"),
            weeks=params.get("weeks"),
            months=params.get("months"),
            years=params.get("years"),
        )
        return Response({"data": earnings}, status=status.HTTP_200_OK)


class CommissionListView(AdminView):
    @extend_schema(
        operation_id="dashboard_commissions",
        summary="Commission percent for every category",
        responses={200: CommissionSerializer(many=True)},
        tags=["Dashboard"],
    )
    def get(self, request):
        return Response({"data": container.commission_service().list_commissions()}, status=status.HTTP_200_OK)


class CommissionUpdateView(AdminView):
    @extend_schema(
        operation_id="dashboard_commissions_update",
        summary="Set the commission percent for a category",
        request=CommissionUpdateRequestSerializer,
        responses={
            200: CommissionSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid category or percent"),
        },
        tags=["Dashboard"],
    )
    def put(self, request, category):
        result = container.commission_service().set_commission(
            category, request.data.get("commission_percent"), user=request.user
        )
        if not result.ok:
            return error_response(result)
        commission = result.value
        return Response(
            {
                "message": "Commission updated successfully",
                "data": {
                    "category": commission.category,
                    "commission_percent": float(commission.commission_percent),
                },
            },
            status=status.HTTP_200_OK,
        )
