from datetime import timedelta

from django.test import TestCase
from django.utils import timezone

from infrastructure.container import container
from marketplace.tests.factories import NotificationFactory
from notifications.models import Notification
from notifications.tasks import purge_expired_notifications_task
from utils.service_base import ErrorCodes


class NotificationServiceTest(TestCase):
    def setUp(self):
        container.configure_for_testing()
        self.service = container.notification_service()
        self.seller_id = "7b0d5c1e-5a4b-4f38-9f1d-3f1b2d6c8e10"

    def test_create_with_defaults(self):
        result = self.service.create_notification(title="New order", message="ORD1 received")

        self.assertTrue(result.ok)
        notification = result.value
        self.assertEqual(notification.type, "info")
        self.assertEqual(notification.priority, "medium")
        self.assertEqual(notification.recipient_type, "admin")
        self.assertEqual(notification.created_by_model, "System")
        self.assertEqual(notification.metadata, {})

    def test_create_validation(self):
        cases = [
            ({"title": "", "message": "x"}, "Title and message are required"),
            ({"title": "t", "message": "m", "type": "spam"}, "Invalid notification type: spam"),
            ({"title": "t", "message": "m", "priority": "asap"}, "Invalid priority: asap"),
            ({"title": "t", "message": "m", "recipient_type": "robot"}, "Invalid recipient type: robot"),
            ({"title": "t", "message": "m", "related_entity_type": "coupon"}, "Invalid related entity type: coupon"),
        ]
        for kwargs, message in cases:
            with self.subTest(message=message):
                result = self.service.create_notification(**kwargs)
                self.assertEqual(result.error, ErrorCodes.VALIDATION_ERROR)
                self.assertEqual(result.error_detail, message)
        self.assertFalse(Notification.objects.exists())

    def test_notify_swallows_rejections(self):
        self.assertIsNone(self.service.notify(title="", message=""))

    def test_admin_inbox_includes_broadcasts_and_skips_expired(self):
        NotificationFactory(title="Admin")
        NotificationFactory(title="Everyone", recipient_type="all")
        NotificationFactory(title="Seller", recipient_type="seller", recipient_id=self.seller_id)
        NotificationFactory(title="Old", expires_at=timezone.now() - timedelta(hours=1))
        NotificationFactory(title="Later", expires_at=timezone.now() + timedelta(days=1))

        result = self.service.list_notifications("admin")

        titles = {n.title for n in result.value["notifications"]}
        self.assertEqual(titles, {"Admin", "Everyone", "Later"})
        self.assertEqual(result.value["unread_count"], 3)
        self.assertEqual(result.value["pagination"]["total_count"], 3)

    def test_seller_inbox_is_scoped_to_recipient(self):
        NotificationFactory(title="Mine", recipient_type="seller", recipient_id=self.seller_id)
        NotificationFactory(title="Other", recipient_type="seller", recipient_id="someone-else")
        NotificationFactory(title="Everyone", recipient_type="all")
        NotificationFactory(title="Admin")

        result = self.service.list_notifications("seller", self.seller_id)

        self.assertEqual({n.title for n in result.value["notifications"]}, {"Mine", "Everyone"})

    def test_list_filters_and_pagination(self):
        NotificationFactory.create_batch(3, type="order")
        NotificationFactory(type="order", is_read=True)
        NotificationFactory(type="seller")

        result = self.service.list_notifications("admin", type="order", is_read=False, page=2, limit=2)

        self.assertEqual(result.value["pagination"], {"current": 2, "total": 2, "count": 1, "total_count": 3})

    def test_page_past_the_end_is_empty(self):
        NotificationFactory()

        result = self.service.list_notifications("admin", page=5)

        self.assertEqual(result.value["notifications"], [])
        self.assertEqual(result.value["pagination"]["count"], 0)

    def test_mark_all_and_clear_read(self):
        NotificationFactory.create_batch(2)
        NotificationFactory(recipient_type="seller", recipient_id=self.seller_id)

        marked = self.service.mark_all_as_read("admin")
        cleared = self.service.clear_read("admin")

        self.assertEqual(marked.value, {"modified_count": 2})
        self.assertEqual(cleared.value, {"deleted_count": 2})
        self.assertEqual(Notification.objects.count(), 1)
        self.assertEqual(self.service.get_unread_count("seller", self.seller_id), 1)

    def test_mark_and_delete_single(self):
        notification = NotificationFactory()

        read = self.service.mark_as_read(notification.pk)
        deleted = self.service.delete_notification(notification.pk)
        missing = self.service.mark_as_read(notification.pk)

        self.assertTrue(read.value.is_read)
        self.assertTrue(deleted.ok)
        self.assertEqual(missing.error, ErrorCodes.NOT_FOUND)
        self.assertEqual(missing.error_detail, "Notification not found")

    def test_single_lookup_scoped_to_recipient(self):
        notification = NotificationFactory(recipient_type="seller", recipient_id=self.seller_id)

        result = self.service.mark_as_read(notification.pk, recipient_id="someone-else")

        self.assertEqual(result.error, ErrorCodes.NOT_FOUND)

    def test_purge_expired_task(self):
        NotificationFactory(expires_at=timezone.now() - timedelta(minutes=5))
        NotificationFactory(expires_at=timezone.now() - timedelta(days=2))
        NotificationFactory()

        result = purge_expired_notifications_task.delay().get()

        self.assertEqual(result, {"deleted_count": 2})
        self.assertEqual(Notification.objects.count(), 1)
