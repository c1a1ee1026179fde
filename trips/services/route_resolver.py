"""
Route resolution for a trip.

Geocodes the origin, then the destination, then asks for a driving route
between the two. Each stage runs only when the previous one produced a
location. Any failure ends the workflow without a result.
"""
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from .geocoding import GeocodingService
from .routing import RoutingService

logger = logging.getLogger(__name__)

Coordinate = Tuple[float, float]


class ResolutionState(str, Enum):
    IDLE = 'idle'
    GEOCODING_SOURCE = 'geocoding_source'
    GEOCODING_DESTINATION = 'geocoding_destination'
    REQUESTING_ROUTE = 'requesting_route'
    DONE = 'done'
    FAILED = 'failed'


@dataclass
class RouteResult:
    """Distance in miles and the route path as (lat, lng) pairs in travel order."""
    total_miles: float
    path: List[Coordinate] = field(default_factory=list)


class RouteResolver:
    """Turns two free-text addresses into a driving distance and path."""

    def __init__(self, geocoder=None, router=None):
        self.geocoder = geocoder if geocoder is not None else GeocodingService()
        self.router = router if router is not None else RoutingService()
        self.state = ResolutionState.IDLE

    def _fail(self, reason: str, *args) -> None:
        logger.debug("Route resolution stopped: " + reason, *args)
        self.state = ResolutionState.FAILED
        return None

    def resolve(self, from_location: str, to_location: str) -> Optional[RouteResult]:
        """
        Resolve the driving route between two addresses.

        Returns:
            RouteResult, or None if either address has no geocoding
            candidate or no route connects them.
        """
        self.state = ResolutionState.GEOCODING_SOURCE
        source = self.geocoder.geocode(from_location)
        if not source:
            return self._fail("no location for origin %r", from_location)

        self.state = ResolutionState.GEOCODING_DESTINATION
        destination = self.geocoder.geocode(to_location)
        if not destination:
            return self._fail("no location for destination %r", to_location)

        self.state = ResolutionState.REQUESTING_ROUTE
        route = self.router.get_route(source, destination)
        if not route:
            return self._fail("no route from %r to %r", from_location, to_location)

        self.state = ResolutionState.DONE
        return RouteResult(
            total_miles=route['total_distance_miles'],
            path=[(float(lat), float(lng)) for lat, lng in route['geometry']],
        )

    def resolve_into(self, from_location: str, to_location: str, display) -> Optional[RouteResult]:
        """Resolve a route and hand it to ``display``. On failure the display is left as it was."""
        result = self.resolve(from_location, to_location)
        if result is not None:
            display.apply(result)
        return result
