"""
Shared response shapes for the marketplace API documentation.
"""

from rest_framework import serializers


class ErrorResponseSerializer(serializers.Serializer):
    """Standard error response"""

    message = serializers.CharField(help_text="Human-readable error message")
    details = serializers.ListField(
        child=serializers.DictField(), required=False, help_text="Structured details (e.g. stock shortages)"
    )


class MessageResponseSerializer(serializers.Serializer):
    message = serializers.CharField(help_text="Success message")
    deleted_count = serializers.IntegerField(required=False)
