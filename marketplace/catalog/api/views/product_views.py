"""
Product endpoints: public storefront listing plus admin management.
"""

from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, OpenApiTypes, extend_schema
from rest_framework import permissions, status
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.response import Response
from rest_framework.views import APIView

from authentication.permissions import AdminRequired
from infrastructure.container import container
from marketplace.api.serializers import ErrorResponseSerializer, MessageResponseSerializer
from marketplace.catalog.api.serializers import ProductFormSerializer, ProductListResponseSerializer, ProductSerializer
from utils.api import error_response, parse_bool, parse_int

STOREFRONT_PARAMETERS = [
    OpenApiParameter("search", OpenApiTypes.STR, OpenApiParameter.QUERY, description="Name prefix (first word)"),
    OpenApiParameter("featured", OpenApiTypes.BOOL, OpenApiParameter.QUERY),
    OpenApiParameter("in_stock", OpenApiTypes.BOOL, OpenApiParameter.QUERY),
    OpenApiParameter("page", OpenApiTypes.INT, OpenApiParameter.QUERY),
    OpenApiParameter("limit", OpenApiTypes.INT, OpenApiParameter.QUERY),
]


def product_files(request):
    """Uploaded media from a multipart product form."""
    return {
        "image": request.FILES.get("image"),
        "images": request.FILES.getlist("images"),
        "video": request.FILES.get("video"),
    }


def storefront_filters(params):
    return {
        "search": params.get("search"),
        "featured": parse_bool(params.get("featured")),
        "in_stock": parse_bool(params.get("in_stock")),
    }


def serialize_page(page):
    return {"data": ProductSerializer(page["data"], many=True).data, "pagination": page["pagination"]}


class ProductListCreateView(APIView):
    """
    GET:  active products for the storefront.
    POST: create a product (admin, multipart).
    """

    parser_classes = [MultiPartParser, FormParser, JSONParser]

    def get_authenticators(self):
        if self.request.method == "GET":
            return []
        return super().get_authenticators()

    def get_permissions(self):
        if self.request.method == "POST":
            return [AdminRequired()]
        return [permissions.AllowAny()]

    @extend_schema(
        operation_id="products_list",
        summary="List active products",
        parameters=STOREFRONT_PARAMETERS,
        responses={200: ProductListResponseSerializer},
        tags=["Products"],
    )
    def get(self, request):
        params = request.query_params
        result = container.catalog_service().list_products(
            storefront_filters(params),
            page=parse_int(params.get("page"), 1),
            limit=parse_int(params.get("limit"), 50),
        )
        return Response(serialize_page(result.value), status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="products_create",
        summary="Create a product",
        description="""
        List fields accept a JSON array or a comma-separated string.
        ``images_color_map`` maps a colour to image indices; otherwise the i-th
        colour gets the i-th uploaded image. Videos are limited to 5MB.
        """,
        request={"multipart/form-data": ProductFormSerializer},
        responses={
            201: ProductSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Validation error"),
            403: OpenApiResponse(response=ErrorResponseSerializer, description="Admin access required"),
        },
        tags=["Products"],
    )
    def post(self, request):
        result = container.catalog_service().create_product(request.data, product_files(request), request.user)
        if not result.ok:
            return error_response(result)
        return Response(
            {"message": "Product created successfully", "product": ProductSerializer(result.value).data},
            status=status.HTTP_201_CREATED,
        )


class ProductCategoryListView(APIView):
    authentication_classes = []
    permission_classes = [permissions.AllowAny]

    @extend_schema(
        operation_id="products_by_category",
        summary="List active products in a category",
        description="Category aliases (``emart``, ``e-mart``, ``lmart``) resolve to ``l-mart``.",
        parameters=STOREFRONT_PARAMETERS,
        responses={200: ProductListResponseSerializer},
        tags=["Products"],
    )
    def get(self, request, category):
        params = request.query_params
        result = container.catalog_service().list_by_category(
            category,
            storefront_filters(params),
            page=parse_int(params.get("page"), 1),
            limit=parse_int(params.get("limit"), 10),
        )
        return Response(serialize_page(result.value), status=status.HTTP_200_OK)


class ProductDetailView(APIView):
    authentication_classes = []
    permission_classes = [permissions.AllowAny]

    @extend_schema(
        operation_id="products_retrieve",
        summary="Get a product",
        responses={
            200: ProductSerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Product not found"),
        },
        tags=["Products"],
    )
    def get(self, request, product_id):
        result = container.catalog_service().get_product(product_id)
        if not result.ok:
            return error_response(result)
        return Response(ProductSerializer(result.value).data, status=status.HTTP_200_OK)


class ProductUpdateView(APIView):
    permission_classes = [AdminRequired]
    parser_classes = [MultiPartParser, FormParser, JSONParser]

    @extend_schema(
        operation_id="products_update",
        summary="Update a product",
        description="Partial update. New images are appended to the existing ones.",
        request={"multipart/form-data": ProductFormSerializer},
        responses={
            200: ProductSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Validation error"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Product not found"),
        },
        tags=["Products"],
    )
    def put(self, request, product_id):
        result = container.catalog_service().update_product(
            product_id, request.data, product_files(request), request.user
        )
        if not result.ok:
            return error_response(result)
        return Response(
            {"message": "Product updated successfully", "product": ProductSerializer(result.value).data},
            status=status.HTTP_200_OK,
        )


class ProductDeleteView(APIView):
    permission_classes = [AdminRequired]

    @extend_schema(
        operation_id="products_delete",
        summary="Delete a product",
        responses={
            200: MessageResponseSerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Product not found"),
        },
        tags=["Products"],
    )
    def delete(self, request, product_id):
        result = container.catalog_service().delete_product(product_id)
        if not result.ok:
            return error_response(result)
        return Response({"message": "Product deleted successfully"}, status=status.HTTP_200_OK)


class ProductToggleStatusView(APIView):
    permission_classes = [AdminRequired]

    @extend_schema(
        operation_id="products_toggle_status",
        summary="Activate or deactivate a product",
        request=None,
        responses={
            200: ProductSerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Product not found"),
        },
        tags=["Products"],
    )
    def patch(self, request, product_id):
        result = container.catalog_service().toggle_status(product_id, request.user)
        if not result.ok:
            return error_response(result)
        product = result.value
        state = "activated" if product.is_active else "deactivated"
        return Response(
            {"message": f"Product {state} successfully", "product": ProductSerializer(product).data},
            status=status.HTTP_200_OK,
        )


class AdminProductListView(APIView):
    permission_classes = [AdminRequired]

    @extend_schema(
        operation_id="products_admin_list",
        summary="List all products (including inactive)",
        parameters=[
            OpenApiParameter("category", OpenApiTypes.STR, OpenApiParameter.QUERY),
            OpenApiParameter("search", OpenApiTypes.STR, OpenApiParameter.QUERY),
            OpenApiParameter("page", OpenApiTypes.INT, OpenApiParameter.QUERY),
            OpenApiParameter("limit", OpenApiTypes.INT, OpenApiParameter.QUERY),
        ],
        responses={200: ProductListResponseSerializer},
        tags=["Products"],
    )
    def get(self, request):
        params = request.query_params
        result = container.catalog_service().admin_list_products(
            category=params.get("category"),
            search=params.get("search"),
            page=parse_int(params.get("page"), 1),
            limit=parse_int(params.get("limit"), 10),
        )
        return Response(serialize_page(result.value), status=status.HTTP_200_OK)


class SellerProductListView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    @extend_schema(
        operation_id="products_by_seller",
        summary="List a seller's products",
        description="Admins can read any seller; an approved seller can read only their own products.",
        parameters=[
            OpenApiParameter("page", OpenApiTypes.INT, OpenApiParameter.QUERY),
            OpenApiParameter("limit", OpenApiTypes.INT, OpenApiParameter.QUERY),
        ],
        responses={
            200: ProductSerializer(many=True),
            403: OpenApiResponse(response=ErrorResponseSerializer, description="Not authorized"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Seller not found"),
        },
        tags=["Products"],
    )
    def get(self, request, seller_id):
        params = request.query_params
        result = container.catalog_service().list_seller_products(
            seller_id,
            request.user,
            page=parse_int(params.get("page"), 1),
            limit=parse_int(params.get("limit"), 50),
        )
        if not result.ok:
            return error_response(result)
        return Response({"data": ProductSerializer(result.value, many=True).data}, status=status.HTTP_200_OK)


class ProductDeleteAllView(APIView):
    permission_classes = [AdminRequired]

    @extend_schema(
        operation_id="products_delete_all",
        summary="Delete every product",
        responses={200: MessageResponseSerializer},
        tags=["Products"],
    )
    def delete(self, request):
        result = container.catalog_service().delete_all_products()
        return Response(
            {"message": "All products deleted successfully", "deleted_count": result.value},
            status=status.HTTP_200_OK,
        )
