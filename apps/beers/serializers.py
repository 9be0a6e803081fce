from rest_framework import serializers


class ReferenceSummarySerializer(serializers.Serializer):
    """Embedded brewery or style row."""

    id = serializers.ReadOnlyField()
    name = serializers.CharField(read_only=True)


class BeerSerializer(serializers.Serializer):
    """Main serializer for beer rows."""

    id = serializers.ReadOnlyField()
    name = serializers.CharField(read_only=True)
    brewery = serializers.CharField(read_only=True, allow_null=True)
    style = serializers.CharField(read_only=True, allow_null=True)
    abv = serializers.FloatField(read_only=True, allow_null=True)
    score = serializers.FloatField(read_only=True, allow_null=True)
    color = serializers.CharField(read_only=True, allow_null=True)
    notes = serializers.CharField(read_only=True, allow_null=True)
    photo_url = serializers.CharField(read_only=True, allow_null=True)
    brewery_id = serializers.ReadOnlyField()
    style_id = serializers.ReadOnlyField()
    user_id = serializers.ReadOnlyField()
    created_at = serializers.CharField(read_only=True, allow_null=True)

    # Present only when the reference join was requested
    breweries = ReferenceSummarySerializer(read_only=True)
    styles = ReferenceSummarySerializer(read_only=True)


class BeerWriteSerializer(serializers.Serializer):
    """Input serializer for creating and updating beers."""

    name = serializers.CharField(max_length=200)
    brewery = serializers.CharField(max_length=200, required=False, allow_blank=True, allow_null=True)
    style = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)
    abv = serializers.FloatField(min_value=0, max_value=100, required=False, allow_null=True)
    score = serializers.FloatField(min_value=0, max_value=10, required=False, allow_null=True)
    color = serializers.CharField(max_length=50, required=False, allow_blank=True, allow_null=True)
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    photo_url = serializers.URLField(required=False, allow_blank=True, allow_null=True)
    brewery_id = serializers.IntegerField(required=False, allow_null=True)
    style_id = serializers.IntegerField(required=False, allow_null=True)


class BeerListQuerySerializer(serializers.Serializer):
    """Query parameters for the beer list."""

    search = serializers.CharField(required=False, allow_blank=True)
    brewery = serializers.CharField(required=False, allow_blank=True)
    style = serializers.CharField(required=False, allow_blank=True)
    min_score = serializers.FloatField(required=False, min_value=0, max_value=10)
    expand = serializers.BooleanField(required=False, default=False)


class BeerDetailQuerySerializer(serializers.Serializer):
    expand = serializers.BooleanField(required=False, default=False)


class PhotoUploadSerializer(serializers.Serializer):
    file = serializers.FileField()


class PhotoUploadResponseSerializer(serializers.Serializer):
    url = serializers.URLField()


class BeerStatisticsSerializer(serializers.Serializer):
    total_beers = serializers.IntegerField()
    average_score = serializers.FloatField()
    this_month_count = serializers.IntegerField()
    favorite_brewery = serializers.CharField(allow_null=True)


class ErrorSerializer(serializers.Serializer):
    error = serializers.CharField()
