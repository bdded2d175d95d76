from rest_framework import serializers


class CustomerInfoSerializer(serializers.Serializer):
    name = serializers.CharField(required=False, allow_blank=True)
    email = serializers.CharField(required=False, allow_blank=True)
    phone = serializers.CharField(required=False, allow_blank=True)
    address = serializers.CharField(required=False, allow_blank=True)
    city = serializers.CharField(required=False, allow_blank=True)
    pincode = serializers.CharField(required=False, allow_blank=True)


class GatewayItemSerializer(serializers.Serializer):
    id = serializers.CharField()
    name = serializers.CharField()
    price = serializers.FloatField()
    quantity = serializers.IntegerField()


class CreatePaymentOrderRequestSerializer(serializers.Serializer):
    """Documentation only; the payload is validated by PaymentService."""

    amount = serializers.FloatField(help_text="Order total in major units (rupees)")
    currency = serializers.ChoiceField(choices=["INR", "USD"], default="INR")
    customer_info = CustomerInfoSerializer()
    items = GatewayItemSerializer(many=True)
    order_items = serializers.ListField(child=serializers.DictField(), required=False)


class VerifyPaymentRequestSerializer(serializers.Serializer):
    gateway_order_id = serializers.CharField(help_text="e.g. order_Nx3v9Q1ABCDEF")
    payment_id = serializers.CharField(help_text="e.g. pay_Nx3vA9ZABCDEF")
    signature = serializers.CharField(help_text="Hex HMAC-SHA256 of '<order>|<payment>'")
    customer_info = CustomerInfoSerializer()
    items = serializers.ListField(child=serializers.DictField())
    amount = serializers.FloatField()
