"""
Response serializers used only for OpenAPI documentation.
"""

from rest_framework import serializers

from .auth_serializers import UserSerializer
from .seller_serializers import SellerSerializer


class ErrorResponseSerializer(serializers.Serializer):
    message = serializers.CharField()


class MessageResponseSerializer(serializers.Serializer):
    message = serializers.CharField()


class AuthResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    token = serializers.CharField(help_text="JWT access token (Bearer)")
    user = UserSerializer()
    verification_status = serializers.CharField(required=False, help_text="Sellers only")


class SellerRegisterResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    seller = SellerSerializer()


class ForgotPasswordResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    reset_url = serializers.CharField(required=False, help_text="Only when email delivery is unavailable")
