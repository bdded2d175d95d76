from rest_framework import serializers

from marketplace.ordering.domain.models import Order


class OrderSerializer(serializers.ModelSerializer):
    customer_id = serializers.UUIDField(read_only=True, allow_null=True)
    items = serializers.JSONField(read_only=True)

    class Meta:
        model = Order
        fields = [
            "id",
            "order_id",
            "payment_id",
            "gateway_order_id",
            "customer_id",
            "customer_name",
            "customer_email",
            "customer_phone",
            "customer_address",
            "customer_city",
            "customer_pincode",
            "total",
            "status",
            "payment_status",
            "payment_date",
            "items",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class CreateOrderRequestSerializer(serializers.Serializer):
    """Documentation only; the payload is validated by OrderService."""

    order_id = serializers.CharField()
    payment_id = serializers.CharField()
    total = serializers.DecimalField(max_digits=12, decimal_places=2)
    items = serializers.ListField(child=serializers.DictField())
    customer_name = serializers.CharField()
    customer_email = serializers.EmailField(required=False)
    customer_phone = serializers.CharField(required=False)
    customer_address = serializers.CharField(required=False)
    customer_city = serializers.CharField(required=False)
    customer_pincode = serializers.CharField(required=False)


class OrderStatusUpdateSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=Order.STATUS_CHOICES)


class StockShortageSerializer(serializers.Serializer):
    product_id = serializers.CharField()
    name = serializers.CharField()
    requested = serializers.IntegerField()
    available = serializers.IntegerField()


class OrderErrorResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    details = StockShortageSerializer(many=True, required=False)
    missing = serializers.ListField(child=serializers.CharField(), required=False)
