from rest_framework import serializers

from notifications.models import Notification


class NotificationSerializer(serializers.ModelSerializer):
    class Meta:
        model = Notification
        fields = [
            "id",
            "title",
            "message",
            "type",
            "priority",
            "is_read",
            "recipient_type",
            "recipient_id",
            "related_entity_type",
            "related_entity_id",
            "action_url",
            "metadata",
            "expires_at",
            "created_by",
            "created_by_model",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class NotificationCreateSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=200)
    message = serializers.CharField(max_length=1000)
    type = serializers.ChoiceField(choices=Notification.TYPE_CHOICES, default="info")
    priority = serializers.ChoiceField(choices=Notification.PRIORITY_CHOICES, default="medium")
    recipient_type = serializers.ChoiceField(choices=Notification.RECIPIENT_CHOICES, default="admin")
    recipient_id = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    related_entity_type = serializers.ChoiceField(
        choices=Notification.ENTITY_CHOICES, required=False, allow_null=True
    )
    related_entity_id = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    action_url = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    metadata = serializers.DictField(required=False)
    expires_at = serializers.DateTimeField(required=False, allow_null=True)


class PaginationSerializer(serializers.Serializer):
    current = serializers.IntegerField()
    total = serializers.IntegerField(help_text="Number of pages")
    count = serializers.IntegerField(help_text="Items on this page")
    total_count = serializers.IntegerField()


class NotificationListResponseSerializer(serializers.Serializer):
    notifications = NotificationSerializer(many=True)
    pagination = PaginationSerializer()
    unread_count = serializers.IntegerField()


class UnreadCountResponseSerializer(serializers.Serializer):
    unread_count = serializers.IntegerField()


class BulkUpdateResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    modified_count = serializers.IntegerField(required=False)
    deleted_count = serializers.IntegerField(required=False)


class ErrorResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
