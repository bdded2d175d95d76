"""
Notification inbox endpoints.

Admins read the ``admin``/``all`` inbox; sellers read notifications addressed
to their user id plus ``all``.
"""

from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, OpenApiTypes, extend_schema
from rest_framework import permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from authentication.permissions import AdminRequired, SellerRequired
from infrastructure.container import container
from notifications.api.serializers import (
    BulkUpdateResponseSerializer,
    ErrorResponseSerializer,
    NotificationCreateSerializer,
    NotificationListResponseSerializer,
    NotificationSerializer,
    UnreadCountResponseSerializer,
)
from utils.api import error_response, parse_bool, parse_int
from utils.rbac import ROLE_ADMIN, current_role

LIST_PARAMETERS = [
    OpenApiParameter("type", OpenApiTypes.STR, OpenApiParameter.QUERY, description="Notification type"),
    OpenApiParameter("is_read", OpenApiTypes.BOOL, OpenApiParameter.QUERY, description="Read state"),
    OpenApiParameter("page", OpenApiTypes.INT, OpenApiParameter.QUERY, description="Page (default 1)"),
    OpenApiParameter("limit", OpenApiTypes.INT, OpenApiParameter.QUERY, description="Page size (default 20)"),
]


class InboxMixin:
    """Resolves which inbox the view operates on."""

    recipient_type = "admin"

    def recipient_id(self, request):
        return None if self.recipient_type == "admin" else str(request.user.pk)


class NotificationListView(InboxMixin, APIView):
    def get(self, request):
        params = request.query_params
        result = container.notification_service().list_notifications(
            self.recipient_type,
            self.recipient_id(request),
            type=params.get("type") or None,
            is_read=parse_bool(params.get("is_read")),
            page=parse_int(params.get("page"), 1),
            limit=parse_int(params.get("limit"), 20),
        )
        data = dict(result.value)
        data["notifications"] = NotificationSerializer(data["notifications"], many=True).data
        return Response({"data": data}, status=status.HTTP_200_OK)


class UnreadCountView(InboxMixin, APIView):
    def get(self, request):
        count = container.notification_service().get_unread_count(self.recipient_type, self.recipient_id(request))
        return Response({"data": {"unread_count": count}}, status=status.HTTP_200_OK)


class MarkAllReadView(InboxMixin, APIView):
    def patch(self, request):
        result = container.notification_service().mark_all_as_read(self.recipient_type, self.recipient_id(request))
        return Response(
            {"message": "All notifications marked as read", **result.value}, status=status.HTTP_200_OK
        )


class ClearReadView(InboxMixin, APIView):
    def delete(self, request):
        result = container.notification_service().clear_read(self.recipient_type, self.recipient_id(request))
        return Response({"message": "Read notifications cleared", **result.value}, status=status.HTTP_200_OK)


# ----------------------------------------------------------------------
# Admin inbox
# ----------------------------------------------------------------------


class AdminNotificationListView(NotificationListView):
    permission_classes = [AdminRequired]

    @extend_schema(
        operation_id="notifications_admin_list",
        summary="List admin notifications",
        parameters=LIST_PARAMETERS,
        responses={200: NotificationListResponseSerializer},
        tags=["Notifications"],
    )
    def get(self, request):
        return super().get(request)


class AdminUnreadCountView(UnreadCountView):
    permission_classes = [AdminRequired]

    @extend_schema(
        operation_id="notifications_admin_unread_count",
        summary="Admin unread notification count",
        responses={200: UnreadCountResponseSerializer},
        tags=["Notifications"],
    )
    def get(self, request):
        return super().get(request)


class AdminMarkAllReadView(MarkAllReadView):
    permission_classes = [AdminRequired]

    @extend_schema(
        operation_id="notifications_admin_mark_all_read",
        summary="Mark every admin notification as read",
        request=None,
        responses={200: BulkUpdateResponseSerializer},
        tags=["Notifications"],
    )
    def patch(self, request):
        return super().patch(request)


class AdminClearReadView(ClearReadView):
    permission_classes = [AdminRequired]

    @extend_schema(
        operation_id="notifications_admin_clear_read",
        summary="Delete read admin notifications",
        responses={200: BulkUpdateResponseSerializer},
        tags=["Notifications"],
    )
    def delete(self, request):
        return super().delete(request)


# ----------------------------------------------------------------------
# Seller inbox
# ----------------------------------------------------------------------


class SellerNotificationListView(NotificationListView):
    permission_classes = [SellerRequired]
    recipient_type = "seller"

    @extend_schema(
        operation_id="notifications_seller_list",
        summary="List the current seller's notifications",
        parameters=LIST_PARAMETERS,
        responses={200: NotificationListResponseSerializer},
        tags=["Notifications"],
    )
    def get(self, request):
        return super().get(request)


class SellerUnreadCountView(UnreadCountView):
    permission_classes = [SellerRequired]
    recipient_type = "seller"

    @extend_schema(
        operation_id="notifications_seller_unread_count",
        summary="Seller unread notification count",
        responses={200: UnreadCountResponseSerializer},
        tags=["Notifications"],
    )
    def get(self, request):
        return super().get(request)


class SellerMarkAllReadView(MarkAllReadView):
    permission_classes = [SellerRequired]
    recipient_type = "seller"

    @extend_schema(
        operation_id="notifications_seller_mark_all_read",
        summary="Mark every seller notification as read",
        request=None,
        responses={200: BulkUpdateResponseSerializer},
        tags=["Notifications"],
    )
    def patch(self, request):
        return super().patch(request)


class SellerClearReadView(ClearReadView):
    permission_classes = [SellerRequired]
    recipient_type = "seller"

    @extend_schema(
        operation_id="notifications_seller_clear_read",
        summary="Delete read seller notifications",
        responses={200: BulkUpdateResponseSerializer},
        tags=["Notifications"],
    )
    def delete(self, request):
        return super().delete(request)


# ----------------------------------------------------------------------
# Single notifications
# ----------------------------------------------------------------------


class NotificationCreateView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    @extend_schema(
        operation_id="notifications_create",
        summary="Create a notification",
        description="Defaults: type **info**, priority **medium**, recipient **admin**.",
        request=NotificationCreateSerializer,
        responses={
            201: NotificationSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Validation error"),
        },
        tags=["Notifications"],
    )
    def post(self, request):
        serializer = NotificationCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        created_by_model = "Admin" if current_role(request.user) == ROLE_ADMIN else "User"
        result = container.notification_service().create_notification(
            created_by=str(request.user.pk), created_by_model=created_by_model, **serializer.validated_data
        )
        if not result.ok:
            return error_response(result)
        return Response({"data": NotificationSerializer(result.value).data}, status=status.HTTP_201_CREATED)


class NotificationMarkReadView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    @extend_schema(
        operation_id="notifications_mark_read",
        summary="Mark one notification as read",
        request=None,
        responses={
            200: NotificationSerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Notification not found"),
        },
        tags=["Notifications"],
    )
    def patch(self, request, notification_id):
        result = container.notification_service().mark_as_read(notification_id)
        if not result.ok:
            return error_response(result)
        return Response({"data": NotificationSerializer(result.value).data}, status=status.HTTP_200_OK)


class NotificationDeleteView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    @extend_schema(
        operation_id="notifications_delete",
        summary="Delete one notification",
        responses={
            200: OpenApiResponse(description="Notification deleted"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Notification not found"),
        },
        tags=["Notifications"],
    )
    def delete(self, request, notification_id):
        result = container.notification_service().delete_notification(notification_id)
        if not result.ok:
            return error_response(result)
        return Response({"message": "Notification deleted successfully"}, status=status.HTTP_200_OK)
