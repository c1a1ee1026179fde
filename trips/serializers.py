"""
Serializers for Mileage Tracker API.
"""
from rest_framework import serializers


class TripInputSerializer(serializers.Serializer):
    """Serializer for adding a trip. Addresses are not validated."""
    from_location = serializers.CharField(allow_blank=True, default='', trim_whitespace=False)
    to_location = serializers.CharField(allow_blank=True, default='', trim_whitespace=False)
    date_time = serializers.DateTimeField(required=False)


class TripSerializer(serializers.Serializer):
    """Serializer for a trip as shown in the trip list."""
    id = serializers.UUIDField(source='trip_id')
    from_location = serializers.CharField()
    to_location = serializers.CharField()
    date_time = serializers.DateTimeField()
    total_miles = serializers.FloatField()
    route = serializers.CharField(allow_blank=True)


class TripSummarySerializer(serializers.Serializer):
    """Serializer for the text summary of a trip's route."""
    trip = TripSerializer()
    total_miles = serializers.FloatField()
    route = serializers.CharField(allow_blank=True)


class PolylineOverlaySerializer(serializers.Serializer):
    """Serializer for a polyline drawn over the map."""
    coordinates = serializers.ListField(child=serializers.ListField(child=serializers.FloatField()))
    stroke_color = serializers.CharField()
    line_width = serializers.IntegerField()


class RegionSerializer(serializers.Serializer):
    """Serializer for the visible map region."""
    center_lat = serializers.FloatField()
    center_lng = serializers.FloatField()
    latitude_delta = serializers.FloatField()
    longitude_delta = serializers.FloatField()


class MapOverlaySerializer(serializers.Serializer):
    """Serializer for the map view of a trip's route."""
    total_miles = serializers.FloatField()
    annotations = serializers.ListField(child=serializers.DictField())
    overlays = PolylineOverlaySerializer(many=True)
    region = RegionSerializer(allow_null=True)
