"""
NotificationService - in-app notifications for admins and sellers.

Admin inboxes see notifications addressed to ``admin`` or ``all``; a seller's
inbox sees ``seller`` notifications addressed to their user id plus ``all``.
"""

from typing import Any, Dict, Optional

from django.core.paginator import EmptyPage, Paginator
from django.db.models import Q
from django.utils import timezone

from notifications.models import Notification
from utils.service_base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok

DEFAULT_PAGE_SIZE = 20


class NotificationService(BaseService):
    VALID_TYPES = {choice for choice, _ in Notification.TYPE_CHOICES}
    VALID_PRIORITIES = {choice for choice, _ in Notification.PRIORITY_CHOICES}
    VALID_RECIPIENTS = {choice for choice, _ in Notification.RECIPIENT_CHOICES}
    VALID_ENTITIES = {choice for choice, _ in Notification.ENTITY_CHOICES}

    def create_notification(
        self,
        title: str,
        message: str,
        type: str = "info",
        priority: str = "medium",
        recipient_type: str = "admin",
        recipient_id: Optional[str] = None,
        related_entity_type: Optional[str] = None,
        related_entity_id: Optional[str] = None,
        action_url: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
        expires_at=None,
        created_by: Optional[str] = None,
        created_by_model: str = "System",
    ) -> ServiceResult[Notification]:
        if not title or not message:
            return service_err(ErrorCodes.VALIDATION_ERROR, "Title and message are required")
        if type not in self.VALID_TYPES:
            return service_err(ErrorCodes.VALIDATION_ERROR, f"Invalid notification type: {type}")
        if priority not in self.VALID_PRIORITIES:
            return service_err(ErrorCodes.VALIDATION_ERROR, f"Invalid priority: {priority}")
        if recipient_type not in self.VALID_RECIPIENTS:
            return service_err(ErrorCodes.VALIDATION_ERROR, f"Invalid recipient type: {recipient_type}")
        if related_entity_type and related_entity_type not in self.VALID_ENTITIES:
            return service_err(ErrorCodes.VALIDATION_ERROR, f"Invalid related entity type: {related_entity_type}")

        notification = Notification.objects.create(
            title=title[:200],
            message=message[:1000],
            type=type,
            priority=priority,
            recipient_type=recipient_type,
            recipient_id=str(recipient_id) if recipient_id else None,
            related_entity_type=related_entity_type,
            related_entity_id=str(related_entity_id) if related_entity_id else None,
            action_url=action_url,
            metadata=metadata or {},
            expires_at=expires_at,
            created_by=str(created_by) if created_by else None,
            created_by_model=created_by_model,
        )
        self.logger.info(f"Notification created: {notification.id} ({recipient_type}, {type})")
        return service_ok(notification)

    def notify(self, **kwargs) -> Optional[Notification]:
        """Best-effort variant of create_notification for side effects of other requests."""
        try:
            result = self.create_notification(**kwargs)
        except Exception as e:
            self.logger.error(f"Failed to create notification '{kwargs.get('title')}': {e}", exc_info=True)
            return None
        if not result.ok:
            self.logger.warning(f"Notification rejected: {result.error_detail}")
            return None
        return result.value

    # ------------------------------------------------------------------
    # Inbox queries
    # ------------------------------------------------------------------

    def _inbox(self, recipient_type: str, recipient_id: Optional[str] = None):
        if recipient_type == "admin":
            scope = Q(recipient_type__in=["admin", "all"])
        else:
            scope = Q(recipient_type=recipient_type, recipient_id=str(recipient_id)) | Q(recipient_type="all")
        active = Q(expires_at__isnull=True) | Q(expires_at__gt=timezone.now())
        return Notification.objects.filter(scope & active)

    def list_notifications(
        self,
        recipient_type: str,
        recipient_id: Optional[str] = None,
        type: Optional[str] = None,
        is_read: Optional[bool] = None,
        page: int = 1,
        limit: int = DEFAULT_PAGE_SIZE,
    ) -> ServiceResult[Dict[str, Any]]:
        queryset = self._inbox(recipient_type, recipient_id)
        if type:
            queryset = queryset.filter(type=type)
        if is_read is not None:
            queryset = queryset.filter(is_read=is_read)

        paginator = Paginator(queryset.order_by("-created_at"), max(1, limit))
        try:
            page_obj = paginator.page(max(1, page))
            items = list(page_obj.object_list)
        except EmptyPage:
            items = []

        return service_ok(
            {
                "notifications": items,
                "pagination": {
                    "current": page,
                    "total": paginator.num_pages,
                    "count": len(items),
                    "total_count": paginator.count,
                },
                "unread_count": self.get_unread_count(recipient_type, recipient_id),
            }
        )

    def get_unread_count(self, recipient_type: str, recipient_id: Optional[str] = None) -> int:
        return self._inbox(recipient_type, recipient_id).filter(is_read=False).count()

    def mark_all_as_read(self, recipient_type: str, recipient_id: Optional[str] = None) -> ServiceResult[Dict]:
        modified = self._inbox(recipient_type, recipient_id).filter(is_read=False).update(
            is_read=True, updated_at=timezone.now()
        )
        return service_ok({"modified_count": modified})

    def clear_read(self, recipient_type: str, recipient_id: Optional[str] = None) -> ServiceResult[Dict]:
        deleted, _ = self._inbox(recipient_type, recipient_id).filter(is_read=True).delete()
        return service_ok({"deleted_count": deleted})

    # ------------------------------------------------------------------
    # Single notification
    # ------------------------------------------------------------------

    def _find(self, notification_id, recipient_id: Optional[str] = None):
        queryset = Notification.objects.filter(pk=notification_id)
        if recipient_id is not None:
            queryset = queryset.filter(Q(recipient_id=str(recipient_id)) | Q(recipient_type="all"))
        return queryset.first()

    def mark_as_read(self, notification_id, recipient_id: Optional[str] = None) -> ServiceResult[Notification]:
        notification = self._find(notification_id, recipient_id)
        if notification is None:
            return service_err(ErrorCodes.NOT_FOUND, "Notification not found")
        if not notification.is_read:
            notification.is_read = True
            notification.save(update_fields=["is_read", "updated_at"])
        return service_ok(notification)

    def delete_notification(self, notification_id, recipient_id: Optional[str] = None) -> ServiceResult[Dict]:
        notification = self._find(notification_id, recipient_id)
        if notification is None:
            return service_err(ErrorCodes.NOT_FOUND, "Notification not found")
        notification.delete()
        return service_ok({"deleted": True})

    def purge_expired(self) -> int:
        deleted, _ = Notification.objects.filter(expires_at__lte=timezone.now()).delete()
        return deleted
