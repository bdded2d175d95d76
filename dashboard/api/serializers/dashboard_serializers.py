from rest_framework import serializers

from authentication.api.serializers import SellerSerializer
from marketplace.ordering.api.serializers import OrderSerializer


class ErrorResponseSerializer(serializers.Serializer):
    message = serializers.CharField()


class StatsSerializer(serializers.Serializer):
    total_customers = serializers.IntegerField()
    total_orders = serializers.IntegerField()
    total_revenue = serializers.FloatField()
    pending_orders = serializers.IntegerField()
    total_products = serializers.IntegerField()


class DashboardOrderSerializer(OrderSerializer):
    """Order whose items are annotated with ``seller_id``/``seller_name``."""

    def to_representation(self, instance):
        order, items = instance
        data = super().to_representation(order)
        data["items"] = items
        return data


class OrderStatusRequestSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=["pending", "processing", "shipped", "delivered", "cancelled"])


class SellerUpdateRequestSerializer(serializers.Serializer):
    name = serializers.CharField(required=False)
    email = serializers.EmailField(required=False)
    seller_name = serializers.CharField(required=False)
    shop_name = serializers.CharField(required=False)
    phone = serializers.CharField(required=False)
    hierarchy_level = serializers.IntegerField(required=False, min_value=0)
    verification_status = serializers.ChoiceField(choices=["pending", "approved", "rejected"], required=False)
    parent_seller_id = serializers.UUIDField(required=False, allow_null=True)
    parent_seller_email = serializers.EmailField(required=False, allow_null=True)


class VerificationReviewRequestSerializer(serializers.Serializer):
    action = serializers.ChoiceField(choices=["approve", "reject"])
    note = serializers.CharField(required=False, allow_blank=True)


class SellerSummarySerializer(serializers.Serializer):
    products_count = serializers.IntegerField()
    recent_orders = OrderSerializer(many=True)


class SellerDetailSerializer(serializers.Serializer):
    seller = SellerSerializer()
    summary = SellerSummarySerializer()


class CommissionSerializer(serializers.Serializer):
    category = serializers.CharField()
    commission_percent = serializers.FloatField()


class CommissionUpdateRequestSerializer(serializers.Serializer):
    commission_percent = serializers.FloatField()
