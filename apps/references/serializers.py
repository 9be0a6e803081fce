from rest_framework import serializers


class BrewerySerializer(serializers.Serializer):
    id = serializers.ReadOnlyField()
    name = serializers.CharField(max_length=200)
    country = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)
    city = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)
    created_at = serializers.CharField(read_only=True)


class StyleSerializer(serializers.Serializer):
    id = serializers.ReadOnlyField()
    name = serializers.CharField(max_length=100)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    created_at = serializers.CharField(read_only=True)


class ErrorSerializer(serializers.Serializer):
    error = serializers.CharField()
