from rest_framework import serializers


class BulkUploadRequestSerializer(serializers.Serializer):
    file = serializers.FileField(help_text=".csv or .xlsx, at most 10MB")


class BulkUploadResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    success_count = serializers.IntegerField()
    error_count = serializers.IntegerField()
    total_processed = serializers.IntegerField()
    total = serializers.IntegerField()
    errors = serializers.ListField(child=serializers.CharField(), help_text="First 50 row errors")
