from rest_framework import serializers

from authentication.models import Seller, SellerVerification


class SellerVerificationSerializer(serializers.ModelSerializer):
    class Meta:
        model = SellerVerification
        fields = [
            "seller_name",
            "shop_name",
            "email",
            "phone",
            "id_proof_url",
            "address_proof_url",
            "business_proof_url",
            "bank_proof_url",
            "submitted_at",
            "reviewed_at",
            "reviewer_note",
        ]
        read_only_fields = fields


class ParentSellerSerializer(serializers.ModelSerializer):
    email = serializers.EmailField(source="user.email", read_only=True)
    name = serializers.CharField(source="user.name", read_only=True)

    class Meta:
        model = Seller
        fields = ["id", "name", "seller_name", "email", "hierarchy_level"]
        read_only_fields = fields


class SellerSerializer(serializers.ModelSerializer):
    user_id = serializers.UUIDField(source="user.id", read_only=True)
    name = serializers.CharField(source="user.name", read_only=True)
    email = serializers.EmailField(source="user.email", read_only=True)
    role = serializers.CharField(source="user.role", read_only=True)
    parent_seller = ParentSellerSerializer(read_only=True)
    verification = serializers.SerializerMethodField()

    class Meta:
        model = Seller
        fields = [
            "id",
            "user_id",
            "name",
            "email",
            "role",
            "seller_name",
            "parent_seller",
            "hierarchy_level",
            "order_count",
            "total_revenue",
            "verification_status",
            "registered_on",
            "verification",
            "created_at",
        ]
        read_only_fields = fields

    def get_verification(self, obj):
        verification = SellerVerification.objects.filter(seller=obj).first()
        return SellerVerificationSerializer(verification).data if verification else None


class VerificationSubmitSerializer(serializers.Serializer):
    email = serializers.CharField(required=False, allow_blank=True)
    seller_name = serializers.CharField(required=False, allow_blank=True)
    shop_name = serializers.CharField(required=False, allow_blank=True)
    phone = serializers.CharField(required=False, allow_blank=True)
    id_proof = serializers.FileField(required=False)
    address_proof = serializers.FileField(required=False)
    business_proof = serializers.FileField(required=False)
    bank_proof = serializers.FileField(required=False)
