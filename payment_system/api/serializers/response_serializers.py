from rest_framework import serializers


class ErrorResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    details = serializers.ListField(child=serializers.DictField(), required=False)


class GatewayOrderSerializer(serializers.Serializer):
    id = serializers.CharField()
    amount = serializers.IntegerField(help_text="Minor units")
    currency = serializers.CharField()
    receipt = serializers.CharField()


class CreatePaymentOrderResponseSerializer(serializers.Serializer):
    order = GatewayOrderSerializer()
    key = serializers.CharField(help_text="Public key for the checkout widget")


class VerifiedOrderSerializer(serializers.Serializer):
    id = serializers.CharField()
    order_id = serializers.CharField()
    payment_id = serializers.CharField()
    amount = serializers.FloatField()
    status = serializers.CharField()


class VerifyPaymentResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    order = VerifiedOrderSerializer()


class AlreadyProcessedResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    order_id = serializers.CharField()


class PaymentStatusSerializer(serializers.Serializer):
    id = serializers.CharField()
    status = serializers.CharField()
    amount = serializers.IntegerField()
    currency = serializers.CharField()
    method = serializers.CharField(allow_null=True)
    created_at = serializers.IntegerField(allow_null=True)


class PaymentStatusResponseSerializer(serializers.Serializer):
    payment = PaymentStatusSerializer()
