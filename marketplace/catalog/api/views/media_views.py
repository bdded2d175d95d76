"""
Subcategory, banner and poster endpoints.

Listing is public; creating and deleting require an admin.
"""

from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, OpenApiTypes, extend_schema
from rest_framework import permissions, status
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.response import Response
from rest_framework.views import APIView

from authentication.permissions import AdminRequired
from infrastructure.container import container
from marketplace.api.serializers import ErrorResponseSerializer, MessageResponseSerializer
from marketplace.catalog.api.serializers import (
    BannerCreateSerializer,
    BannerSerializer,
    PosterCreateSerializer,
    PosterSerializer,
    SubcategoryCreateSerializer,
    SubcategorySerializer,
)
from utils.api import error_response


class AdminWriteMixin:
    """Public GET, admin for everything else."""

    def get_authenticators(self):
        if self.request.method == "GET":
            return []
        return super().get_authenticators()

    def get_permissions(self):
        if self.request.method == "GET":
            return [permissions.AllowAny()]
        return [AdminRequired()]


# ----------------------------------------------------------------------
# Subcategories
# ----------------------------------------------------------------------


class SubcategoryByCategoryView(APIView):
    authentication_classes = []
    permission_classes = [permissions.AllowAny]

    @extend_schema(
        operation_id="subcategories_by_category",
        summary="List active subcategories of a category",
        responses={200: SubcategorySerializer(many=True)},
        tags=["Subcategories"],
    )
    def get(self, request, category):
        subcategories = container.media_service().list_subcategories(category)
        return Response(SubcategorySerializer(subcategories, many=True).data, status=status.HTTP_200_OK)


class SubcategoryCreateView(APIView):
    permission_classes = [AdminRequired]
    parser_classes = [MultiPartParser, FormParser, JSONParser]

    @extend_schema(
        operation_id="subcategories_create",
        summary="Create a subcategory",
        request={"multipart/form-data": SubcategoryCreateSerializer},
        responses={
            201: SubcategorySerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Name and category are required"),
            409: OpenApiResponse(response=ErrorResponseSerializer, description="Subcategory already exists"),
        },
        tags=["Subcategories"],
    )
    def post(self, request):
        result = container.media_service().create_subcategory(
            request.data.get("name"),
            request.data.get("category"),
            image=request.FILES.get("image"),
            user=request.user,
        )
        if not result.ok:
            return error_response(result)
        return Response(SubcategorySerializer(result.value).data, status=status.HTTP_201_CREATED)


class SubcategoryDeleteView(APIView):
    permission_classes = [AdminRequired]

    @extend_schema(
        operation_id="subcategories_delete",
        summary="Delete a subcategory",
        responses={
            200: MessageResponseSerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Subcategory not found"),
        },
        tags=["Subcategories"],
    )
    def delete(self, request, subcategory_id):
        result = container.media_service().delete_subcategory(subcategory_id)
        if not result.ok:
            return error_response(result)
        return Response({"message": "Subcategory deleted"}, status=status.HTTP_200_OK)


class AdminSubcategoryListView(APIView):
    permission_classes = [AdminRequired]

    @extend_schema(
        operation_id="subcategories_admin_list",
        summary="List every subcategory",
        responses={200: SubcategorySerializer(many=True)},
        tags=["Subcategories"],
    )
    def get(self, request):
        subcategories = container.media_service().admin_list_subcategories()
        return Response(SubcategorySerializer(subcategories, many=True).data, status=status.HTTP_200_OK)


# ----------------------------------------------------------------------
# Banners
# ----------------------------------------------------------------------


class BannerListCreateView(AdminWriteMixin, APIView):
    parser_classes = [MultiPartParser, FormParser]

    @extend_schema(
        operation_id="banners_list",
        summary="List banners",
        parameters=[OpenApiParameter("product_id", OpenApiTypes.UUID, OpenApiParameter.QUERY)],
        responses={200: BannerSerializer(many=True)},
        tags=["Banners"],
    )
    def get(self, request):
        banners = container.media_service().list_banners(request.query_params.get("product_id"))
        return Response(BannerSerializer(banners, many=True).data, status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="banners_create",
        summary="Create a banner",
        description="When ``product_id`` is given the banner takes that product's category.",
        request={"multipart/form-data": BannerCreateSerializer},
        responses={
            201: BannerSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Missing image or bad product_id"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Product not found"),
        },
        tags=["Banners"],
    )
    def post(self, request):
        data = request.data
        result = container.media_service().create_banner(
            request.FILES.get("image"),
            name=data.get("name", ""),
            image_title=data.get("image_title", ""),
            product_id=data.get("product_id") or None,
            user=request.user,
        )
        if not result.ok:
            return error_response(result)
        return Response(BannerSerializer(result.value).data, status=status.HTTP_201_CREATED)


class BannerDeleteView(APIView):
    permission_classes = [AdminRequired]

    @extend_schema(
        operation_id="banners_delete",
        summary="Delete a banner",
        responses={
            200: MessageResponseSerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Banner not found"),
        },
        tags=["Banners"],
    )
    def delete(self, request, banner_id):
        result = container.media_service().delete_banner(banner_id)
        if not result.ok:
            return error_response(result)
        return Response({"message": "Banner deleted"}, status=status.HTTP_200_OK)


# ----------------------------------------------------------------------
# Posters
# ----------------------------------------------------------------------


class PosterListCreateView(AdminWriteMixin, APIView):
    parser_classes = [MultiPartParser, FormParser]

    @extend_schema(
        operation_id="posters_list",
        summary="List posters",
        responses={200: PosterSerializer(many=True)},
        tags=["Posters"],
    )
    def get(self, request):
        posters = container.media_service().list_posters()
        return Response(PosterSerializer(posters, many=True).data, status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="posters_create",
        summary="Create a poster",
        request={"multipart/form-data": PosterCreateSerializer},
        responses={
            201: PosterSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Image upload failed"),
        },
        tags=["Posters"],
    )
    def post(self, request):
        result = container.media_service().create_poster(
            request.FILES.get("image"), title=request.data.get("title", ""), user=request.user
        )
        if not result.ok:
            return error_response(result)
        return Response(PosterSerializer(result.value).data, status=status.HTTP_201_CREATED)


class PosterDeleteView(APIView):
    permission_classes = [AdminRequired]

    @extend_schema(
        operation_id="posters_delete",
        summary="Delete a poster",
        responses={
            200: MessageResponseSerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Poster not found"),
        },
        tags=["Posters"],
    )
    def delete(self, request, poster_id):
        result = container.media_service().delete_poster(poster_id)
        if not result.ok:
            return error_response(result)
        return Response({"message": "Poster deleted"}, status=status.HTTP_200_OK)
