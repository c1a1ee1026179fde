"""
Views for Mileage Tracker API.
"""
import logging

from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response

from .serializers import (
    MapOverlaySerializer,
    TripInputSerializer,
    TripSerializer,
    TripSummarySerializer,
)
from .services import (
    GeocodingService,
    MapOverlayDisplay,
    RouteResolver,
    RoutingService,
    TripSummaryDisplay,
)
from .store import get_trip_store

logger = logging.getLogger(__name__)


def _trip_not_found(trip_id):
    return Response(
        {'error': f'Trip not found: {trip_id}'},
        status=status.HTTP_404_NOT_FOUND
    )


def _route_resolver():
    return RouteResolver(geocoder=GeocodingService(), router=RoutingService())


@api_view(['GET', 'POST'])
def trip_list(request):
    """
    List trips in the order they were added, or add a new one.

    Request body for POST:
    {
        "from_location": "Foothill College",
        "to_location": "De Anza College",
        "date_time": "2023-06-29T10:30:00Z"   (optional, defaults to now)
    }
    """
    store = get_trip_store()

    if request.method == 'GET':
        return Response(TripSerializer(store.trips(), many=True).data)

    serializer = TripInputSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    data = serializer.validated_data
    trip = store.add_trip(
        from_location=data['from_location'],
        to_location=data['to_location'],
        date_time=data.get('date_time'),
    )
    return Response(TripSerializer(trip).data, status=status.HTTP_201_CREATED)


@api_view(['GET'])
def trip_detail(request, trip_id):
    """Get a single trip."""
    trip = get_trip_store().get(trip_id)
    if trip is None:
        return _trip_not_found(trip_id)
    return Response(TripSerializer(trip).data)


@api_view(['DELETE'])
def delete_trip(request, index):
    """
    Deleting trips is disabled.

    Returns the trip list, which is unchanged.
    """
    store = get_trip_store()
    store.delete([index])
    return Response(TripSerializer(store.trips(), many=True).data)


@api_view(['GET'])
def trip_route_summary(request, trip_id):
    """
    Distance and route coordinates of a trip as text.

    Returns:
    {
        "trip": {...},
        "total_miles": 6.2,
        "route": "(37.36155, -122.12838)\\n..."
    }

    When the route can't be resolved the summary keeps its initial
    values (0 miles, empty route).
    """
    trip = get_trip_store().get(trip_id)
    if trip is None:
        return _trip_not_found(trip_id)

    display = TripSummaryDisplay()
    try:
        _route_resolver().resolve_into(trip.from_location, trip.to_location, display)
    except Exception:
        logger.exception("Error while resolving route for trip %s", trip_id)
        return Response(
            {'error': 'An error occurred while resolving the route'},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )
    return Response(TripSummarySerializer({
        'trip': trip,
        'total_miles': display.total_miles,
        'route': display.route,
    }).data)


@api_view(['GET'])
def trip_route_map(request, trip_id):
    """
    Map overlay for a trip's route: a polyline and the region bounding it.

    Every call resolves the route again.
    """
    trip = get_trip_store().get(trip_id)
    if trip is None:
        return _trip_not_found(trip_id)

    display = MapOverlayDisplay()
    try:
        _route_resolver().resolve_into(trip.from_location, trip.to_location, display)
    except Exception:
        logger.exception("Error while resolving route for trip %s", trip_id)
        return Response(
            {'error': 'An error occurred while resolving the route'},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )
    return Response(MapOverlaySerializer({
        'total_miles': display.total_miles,
        'annotations': display.annotations,
        'overlays': display.overlays,
        'region': display.region,
    }).data)


@api_view(['GET'])
def health_check(request):
    """Health check endpoint."""
    return Response({'status': 'healthy'}, status=status.HTTP_200_OK)
