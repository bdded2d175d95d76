from django.http import HttpResponse
from drf_spectacular.utils import OpenApiResponse, OpenApiTypes, extend_schema
from rest_framework import status
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.response import Response
from rest_framework.views import APIView

from authentication.permissions import AdminRequired
from infrastructure.container import container
from marketplace.api.serializers import ErrorResponseSerializer
from marketplace.catalog.api.serializers import BulkUploadRequestSerializer, BulkUploadResponseSerializer
from utils.api import error_response

XLSX_CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
TEMPLATE_FILENAME = "product_upload_template.xlsx"


def template_response() -> HttpResponse:
    response = HttpResponse(container.bulk_upload_service().build_template(), content_type=XLSX_CONTENT_TYPE)
    response["Content-Disposition"] = f'attachment; filename="{TEMPLATE_FILENAME}"'
    return response


def run_upload(request, seller=None) -> Response:
    result = container.bulk_upload_service().process_upload(request.FILES.get("file"), request.user, seller=seller)
    if not result.ok:
        return error_response(result)
    return Response(result.value, status=status.HTTP_200_OK)


class BulkUploadView(APIView):
    permission_classes = [AdminRequired]
    parser_classes = [MultiPartParser, FormParser]

    @extend_schema(
        operation_id="bulk_upload_products",
        summary="Bulk upload products from CSV or Excel",
        description="""
        Required columns: name, price, category, subcategory. List columns accept
        a JSON array or values separated by ``,`` or ``;``. Row errors are
        reported (first 50) without aborting the upload.
        """,
        request={"multipart/form-data": BulkUploadRequestSerializer},
        responses={
            200: BulkUploadResponseSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Missing, invalid or empty file"),
        },
        tags=["Bulk Upload"],
    )
    def post(self, request):
        return run_upload(request)


class BulkUploadTemplateView(APIView):
    permission_classes = [AdminRequired]

    @extend_schema(
        operation_id="bulk_upload_template",
        summary="Download the product upload template",
        responses={(200, XLSX_CONTENT_TYPE): OpenApiTypes.BINARY},
        tags=["Bulk Upload"],
    )
    def get(self, request):
        return template_response()
