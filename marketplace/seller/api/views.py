"""
Seller portal: an approved seller's products, orders, earnings and uploads.

Every view except the category commission lookup requires an approved seller;
``request.seller`` is set by ApprovedSellerRequired.
"""

from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, OpenApiTypes, extend_schema
from rest_framework import status
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.response import Response
from rest_framework.views import APIView

from authentication.permissions import ApprovedSellerRequired, SellerRequired
from infrastructure.container import container
from marketplace.api.serializers import ErrorResponseSerializer
from marketplace.catalog.api.serializers import (
    BulkUploadRequestSerializer,
    BulkUploadResponseSerializer,
    ProductFormSerializer,
    ProductListResponseSerializer,
    ProductSerializer,
)
from marketplace.catalog.api.views.bulk_upload_views import XLSX_CONTENT_TYPE, run_upload, template_response
from marketplace.catalog.api.views.product_views import product_files, serialize_page
from marketplace.ordering.api.serializers import OrderStatusUpdateSerializer
from marketplace.seller.api.serializers import (
    CategoryCommissionSerializer,
    EarningsResponseSerializer,
    RecentOrdersResponseSerializer,
    SellerOrderSerializer,
)
from utils.api import error_response, parse_bool, parse_int

EARNINGS_PARAMETERS = [
    OpenApiParameter("range", OpenApiTypes.STR, OpenApiParameter.QUERY, enum=["week", "month", "year"]),
    OpenApiParameter("weeks", OpenApiTypes.INT, OpenApiParameter.QUERY, description="Default 8"),
    OpenApiParameter("months", OpenApiTypes.INT, OpenApiParameter.QUERY, description="Default 12"),
    OpenApiParameter("years", OpenApiTypes.INT, OpenApiParameter.QUERY, description="Default 3"),
]


class SellerProductsView(APIView):
    permission_classes = [ApprovedSellerRequired]
    parser_classes = [MultiPartParser, FormParser, JSONParser]

    @extend_schema(
        operation_id="seller_products_list",
        summary="List the seller's products",
        parameters=[
            OpenApiParameter("category", OpenApiTypes.STR, OpenApiParameter.QUERY),
            OpenApiParameter("is_active", OpenApiTypes.BOOL, OpenApiParameter.QUERY),
            OpenApiParameter("in_stock", OpenApiTypes.BOOL, OpenApiParameter.QUERY),
            OpenApiParameter("search", OpenApiTypes.STR, OpenApiParameter.QUERY),
            OpenApiParameter("page", OpenApiTypes.INT, OpenApiParameter.QUERY),
            OpenApiParameter("limit", OpenApiTypes.INT, OpenApiParameter.QUERY),
        ],
        responses={200: ProductListResponseSerializer},
        tags=["Seller Portal"],
    )
    def get(self, request):
        params = request.query_params
        page = container.seller_portal_service().list_products(
            request.user,
            request.seller,
            {
                "category": params.get("category"),
                "is_active": parse_bool(params.get("is_active")),
                "in_stock": parse_bool(params.get("in_stock")),
                "search": params.get("search"),
            },
            page=parse_int(params.get("page"), 1),
            limit=parse_int(params.get("limit"), 50),
        )
        return Response(serialize_page(page), status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="seller_products_create",
        summary="Create a product as the current seller",
        request={"multipart/form-data": ProductFormSerializer},
        responses={
            201: ProductSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Validation error"),
        },
        tags=["Seller Portal"],
    )
    def post(self, request):
        result = container.catalog_service().create_product(
            request.data, product_files(request), request.user, seller=request.seller
        )
        if not result.ok:
            return error_response(result)
        return Response(
            {"message": "Product created successfully", "product": ProductSerializer(result.value).data},
            status=status.HTTP_201_CREATED,
        )


class SellerProductToggleView(APIView):
    permission_classes = [ApprovedSellerRequired]

    @extend_schema(
        operation_id="seller_products_toggle_status",
        summary="Activate or deactivate one of the seller's products",
        request=None,
        responses={
            200: ProductSerializer,
            403: OpenApiResponse(response=ErrorResponseSerializer, description="Not the seller's product"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Product not found"),
        },
        tags=["Seller Portal"],
    )
    def patch(self, request, product_id):
        result = container.seller_portal_service().toggle_product(product_id, request.user, request.seller)
        if not result.ok:
            return error_response(result)
        product = result.value
        state = "activated" if product.is_active else "deactivated"
        return Response(
            {"message": f"Product {state} successfully", "product": ProductSerializer(product).data},
            status=status.HTTP_200_OK,
        )


class SellerOrdersView(APIView):
    permission_classes = [ApprovedSellerRequired]

    @extend_schema(
        operation_id="seller_orders_list",
        summary="List orders containing the seller's products",
        parameters=[
            OpenApiParameter("status", OpenApiTypes.STR, OpenApiParameter.QUERY),
            OpenApiParameter("page", OpenApiTypes.INT, OpenApiParameter.QUERY),
            OpenApiParameter("limit", OpenApiTypes.INT, OpenApiParameter.QUERY),
        ],
        responses={200: SellerOrderSerializer(many=True)},
        tags=["Seller Portal"],
    )
    def get(self, request):
        params = request.query_params
        page = container.seller_portal_service().list_orders(
            request.user,
            request.seller,
            status=params.get("status") or None,
            page=parse_int(params.get("page"), 1),
            limit=parse_int(params.get("limit"), 20),
        )
        return Response(
            {"data": SellerOrderSerializer(page["data"], many=True).data, "pagination": page["pagination"]},
            status=status.HTTP_200_OK,
        )


class SellerRecentOrdersView(APIView):
    permission_classes = [ApprovedSellerRequired]

    @extend_schema(
        operation_id="seller_orders_recent",
        summary="Newest seller orders with a status summary",
        parameters=[OpenApiParameter("limit", OpenApiTypes.INT, OpenApiParameter.QUERY, description="Default 5")],
        responses={200: RecentOrdersResponseSerializer},
        tags=["Seller Portal"],
    )
    def get(self, request):
        recent = container.seller_portal_service().recent_orders(
            request.user, request.seller, limit=parse_int(request.query_params.get("limit"), 5)
        )
        return Response(
            {"data": SellerOrderSerializer(recent["data"], many=True).data, "summary": recent["summary"]},
            status=status.HTTP_200_OK,
        )


class SellerOrderDetailView(APIView):
    permission_classes = [ApprovedSellerRequired]

    @extend_schema(
        operation_id="seller_orders_retrieve",
        summary="Get one order containing the seller's products",
        responses={
            200: SellerOrderSerializer,
            403: OpenApiResponse(response=ErrorResponseSerializer, description="No items from this seller"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Order not found"),
        },
        tags=["Seller Portal"],
    )
    def get(self, request, pk):
        result = container.seller_portal_service().order_detail(pk, request.user, request.seller)
        if not result.ok:
            return error_response(result)
        return Response({"data": SellerOrderSerializer(result.value).data}, status=status.HTTP_200_OK)


class SellerOrderStatusView(APIView):
    permission_classes = [ApprovedSellerRequired]

    @extend_schema(
        operation_id="seller_orders_update_status",
        summary="Change the status of an order containing the seller's products",
        request=OrderStatusUpdateSerializer,
        responses={
            200: SellerOrderSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid status"),
            403: OpenApiResponse(response=ErrorResponseSerializer, description="No items from this seller"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Order not found"),
        },
        tags=["Seller Portal"],
    )
    def put(self, request, pk):
        result = container.seller_portal_service().update_order_status(
            pk, request.data.get("status"), request.user, request.seller
        )
        if not result.ok:
            return error_response(result)
        return Response(
            {"message": "Order status updated successfully", "data": SellerOrderSerializer(result.value).data},
            status=status.HTTP_200_OK,
        )


class SellerEarningsView(APIView):
    permission_classes = [ApprovedSellerRequired]

    @extend_schema(
        operation_id="seller_earnings",
        summary="Seller payout totals and breakdown",
        description="Delivered orders are earned, cancelled orders cancelled, anything else upcoming.",
        parameters=EARNINGS_PARAMETERS,
        responses={200: EarningsResponseSerializer},
        tags=["Seller Portal"],
    )
    def get(self, request):
        params = request.query_params
        earnings = container.seller_portal_service().earnings(
            request.user,
            request.seller,
            range_name=params.get("range"),
            weeks=params.get("weeks"),
            months=params.get("months"),
            years=params.get("years"),
        )
        return Response({"data": earnings}, status=status.HTTP_200_OK)


class SellerCategoryCommissionView(APIView):
    permission_classes = [SellerRequired]

    @extend_schema(
        operation_id="seller_category_commission",
        summary="Commission percent for a category",
        responses={
            200: CategoryCommissionSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid category"),
        },
        tags=["Seller Portal"],
    )
    def get(self, request, category):
        result = container.seller_portal_service().category_commission(category)
        if not result.ok:
            return error_response(result)
        return Response({"data": result.value}, status=status.HTTP_200_OK)


class SellerBulkUploadView(APIView):
    permission_classes = [ApprovedSellerRequired]
    parser_classes = [MultiPartParser, FormParser]

    @extend_schema(
        operation_id="seller_bulk_upload",
        summary="Bulk upload products as the current seller",
        request={"multipart/form-data": BulkUploadRequestSerializer},
        responses={
            200: BulkUploadResponseSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Missing, invalid or empty file"),
        },
        tags=["Seller Portal"],
    )
    def post(self, request):
        return run_upload(request, seller=request.seller)


class SellerBulkUploadTemplateView(APIView):
    permission_classes = [ApprovedSellerRequired]

    @extend_schema(
        operation_id="seller_bulk_upload_template",
        summary="Download the product upload template",
        responses={(200, XLSX_CONTENT_TYPE): OpenApiTypes.BINARY},
        tags=["Seller Portal"],
    )
    def get(self, request):
        return template_response()
