from rest_framework import serializers

from marketplace.catalog.domain.models import Banner, Poster, Subcategory


class SubcategorySerializer(serializers.ModelSerializer):
    class Meta:
        model = Subcategory
        fields = ["id", "name", "category", "image_url", "is_active", "created_at"]
        read_only_fields = fields


class SubcategoryCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=100)
    category = serializers.CharField()
    image = serializers.ImageField(required=False)


class BannerSerializer(serializers.ModelSerializer):
    product_id = serializers.UUIDField(read_only=True, allow_null=True)

    class Meta:
        model = Banner
        fields = ["id", "name", "image_title", "image_url", "category", "product_id", "created_at"]
        read_only_fields = fields


class BannerCreateSerializer(serializers.Serializer):
    image = serializers.ImageField()
    name = serializers.CharField(required=False)
    image_title = serializers.CharField(required=False)
    product_id = serializers.UUIDField(required=False)


class PosterSerializer(serializers.ModelSerializer):
    class Meta:
        model = Poster
        fields = ["id", "title", "image_url", "created_at"]
        read_only_fields = fields


class PosterCreateSerializer(serializers.Serializer):
    image = serializers.ImageField()
    title = serializers.CharField(required=False)
