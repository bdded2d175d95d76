from notifications.domain.models.notification import Notification


__all__ = ["Notification"]
