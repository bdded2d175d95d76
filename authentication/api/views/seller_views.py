from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import permissions, status
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.response import Response
from rest_framework.views import APIView

from authentication.api.serializers import SellerSerializer, VerificationSubmitSerializer
from authentication.api.serializers.response_serializers import ErrorResponseSerializer
from authentication.domain.services.seller_service import PROOF_FIELDS
from authentication.permissions import ApprovedSellerRequired
from infrastructure.container import container
from utils.api import error_response


class SellerVerificationView(APIView):
    """
    POST: submit verification details and proof documents (multipart).
    GET:  read the current verification state by ``?email=``.
    """

    authentication_classes = []
    permission_classes = [permissions.AllowAny]
    parser_classes = [MultiPartParser, FormParser]

    @extend_schema(
        operation_id="seller_verification_submit",
        summary="Submit seller verification documents",
        description="""
        Upload ID, address, business and bank proofs. Missing files keep the
        previously stored URL. Resubmitting resets the seller to **pending**.
        """,
        request={"multipart/form-data": VerificationSubmitSerializer},
        responses={
            200: SellerSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Email is required"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Seller not found"),
        },
        tags=["Sellers"],
    )
    def post(self, request):
        data = request.data
        details = {key: data.get(key) for key in ("seller_name", "shop_name", "phone")}
        files = {field: request.FILES.get(field) for field in PROOF_FIELDS}

        result = container.seller_service().submit_verification(data.get("email"), details, files)
        if not result.ok:
            return error_response(result)
        return Response(
            {"message": "Verification submitted successfully", "seller": SellerSerializer(result.value).data},
            status=status.HTTP_200_OK,
        )

    @extend_schema(
        operation_id="seller_verification_get",
        summary="Get seller verification status",
        parameters=[OpenApiParameter("email", str, OpenApiParameter.QUERY, required=True)],
        responses={
            200: SellerSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Email is required"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Seller not found"),
        },
        tags=["Sellers"],
    )
    def get(self, request):
        result = container.seller_service().get_verification(request.query_params.get("email"))
        if not result.ok:
            return error_response(result)
        return Response({"seller": SellerSerializer(result.value).data}, status=status.HTTP_200_OK)


class SubSellerListView(APIView):
    permission_classes = [ApprovedSellerRequired]

    @extend_schema(
        operation_id="seller_sub_sellers",
        summary="List direct sub-sellers of the current seller",
        responses={
            200: SellerSerializer(many=True),
            403: OpenApiResponse(response=ErrorResponseSerializer, description="Seller not approved"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Seller profile not found"),
        },
        tags=["Sellers"],
    )
    def get(self, request):
        sub_sellers = container.seller_service().list_sub_sellers(request.seller)
        return Response(
            {"data": SellerSerializer(sub_sellers, many=True).data, "count": len(sub_sellers)},
            status=status.HTTP_200_OK,
        )
