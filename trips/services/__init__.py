from .geocoding import GeocodingService
from .routing import RoutingService
from .route_resolver import ResolutionState, RouteResolver, RouteResult
from .displays import MapOverlayDisplay, TripSummaryDisplay, format_route

__all__ = [
    'GeocodingService', 'RoutingService', 'ResolutionState', 'RouteResolver',
    'RouteResult', 'MapOverlayDisplay', 'TripSummaryDisplay', 'format_route',
]
