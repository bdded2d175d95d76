from rest_framework import serializers

from marketplace.catalog.domain.models import Product


class CreatorSummarySerializer(serializers.Serializer):
    id = serializers.UUIDField()
    name = serializers.CharField()
    email = serializers.EmailField()


class ProductSerializer(serializers.ModelSerializer):
    created_by = CreatorSummarySerializer(read_only=True)
    seller_id = serializers.UUIDField(read_only=True, allow_null=True)

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "description",
            "price",
            "offer_price",
            "original_price",
            "discount",
            "in_stock",
            "stock_quantity",
            "category",
            "subcategory",
            "color_variants",
            "size_variants",
            "image",
            "images",
            "video_url",
            "is_active",
            "is_featured",
            "seller_id",
            "seller_name",
            "created_by",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class ProductFormSerializer(serializers.Serializer):
    """
    Multipart product form, for documentation.

    List fields accept a JSON array or a comma-separated string;
    ``images_color_map`` is a JSON object of colour -> image index(es).
    """

    name = serializers.CharField(max_length=200)
    description = serializers.CharField(max_length=2000, required=False)
    price = serializers.DecimalField(max_digits=12, decimal_places=2)
    offer_price = serializers.DecimalField(max_digits=12, decimal_places=2, required=False)
    original_price = serializers.DecimalField(max_digits=12, decimal_places=2, required=False)
    discount = serializers.DecimalField(max_digits=5, decimal_places=2, required=False)
    category = serializers.CharField()
    subcategory = serializers.CharField(required=False)
    stock_quantity = serializers.IntegerField(required=False)
    in_stock = serializers.BooleanField(required=False)
    is_active = serializers.BooleanField(required=False)
    is_featured = serializers.BooleanField(required=False)
    color_variants = serializers.CharField(required=False)
    size_variants = serializers.CharField(required=False)
    images_color_map = serializers.CharField(required=False)
    image = serializers.ImageField(required=False)
    images = serializers.ListField(child=serializers.ImageField(), required=False)
    video = serializers.FileField(required=False)


class PaginationSerializer(serializers.Serializer):
    current = serializers.IntegerField()
    pages = serializers.IntegerField()
    total = serializers.IntegerField()


class ProductListResponseSerializer(serializers.Serializer):
    data = ProductSerializer(many=True)
    pagination = PaginationSerializer()
