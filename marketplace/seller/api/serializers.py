from rest_framework import serializers

from marketplace.ordering.api.serializers import OrderSerializer


class SellerOrderSerializer(serializers.Serializer):
    """An order as seen by one seller: only that seller's line items."""

    order = OrderSerializer()
    customer_info = serializers.DictField()
    seller_items = serializers.JSONField()
    seller_total = serializers.FloatField()
    item_count = serializers.IntegerField()
    total_quantity = serializers.IntegerField()

    def to_representation(self, instance):
        data = super().to_representation(instance)
        order = data.pop("order")
        order.pop("items", None)
        return {**order, **data}


class StatusSummarySerializer(serializers.Serializer):
    total = serializers.IntegerField()
    pending = serializers.IntegerField()
    processing = serializers.IntegerField()
    shipped = serializers.IntegerField()
    delivered = serializers.IntegerField()
    cancelled = serializers.IntegerField()


class RecentOrdersResponseSerializer(serializers.Serializer):
    data = SellerOrderSerializer(many=True)
    summary = StatusSummarySerializer()


class EarningsBucketSerializer(serializers.Serializer):
    label = serializers.CharField()
    earned = serializers.FloatField()
    upcoming = serializers.FloatField()
    cancelled = serializers.FloatField()
    count = serializers.IntegerField()


class EarningsResponseSerializer(serializers.Serializer):
    total_earned = serializers.FloatField()
    total_upcoming = serializers.FloatField()
    total_cancelled = serializers.FloatField()
    orders_count = serializers.IntegerField()
    breakdown = EarningsBucketSerializer(many=True)


class CategoryCommissionSerializer(serializers.Serializer):
    category = serializers.CharField()
    commission_percent = serializers.FloatField()
