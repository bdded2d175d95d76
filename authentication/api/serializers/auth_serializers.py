from django.contrib.auth import get_user_model
from rest_framework import serializers

User = get_user_model()


class UserSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = [
            "id",
            "name",
            "email",
            "role",
            "order_count",
            "total_spent",
            "login_count",
            "last_login",
            "created_at",
        ]
        read_only_fields = fields


class RegisterRequestSerializer(serializers.Serializer):
    name = serializers.CharField(required=False, allow_blank=True)
    email = serializers.CharField(required=False, allow_blank=True)
    password = serializers.CharField(required=False, allow_blank=True, write_only=True)


class SellerRegisterRequestSerializer(RegisterRequestSerializer):
    seller_name = serializers.CharField(required=False, allow_blank=True)
    parent_seller_email = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class LoginRequestSerializer(serializers.Serializer):
    email = serializers.CharField(required=False, allow_blank=True)
    password = serializers.CharField(required=False, allow_blank=True, write_only=True)


class ForgotPasswordRequestSerializer(serializers.Serializer):
    email = serializers.CharField(required=False, allow_blank=True)


class ResetPasswordRequestSerializer(serializers.Serializer):
    email = serializers.CharField(required=False, allow_blank=True)
    token = serializers.CharField(required=False, allow_blank=True)
    password = serializers.CharField(required=False, allow_blank=True, write_only=True)
