"""
Display state for a resolved route.

Two independent consumers: a text summary (distance plus one coordinate
pair per line) and a map overlay (distance plus a polyline and the region
that bounds it). Both are updated only through ``apply``.
"""
from typing import Dict, List, Optional, Sequence, Tuple

from .route_resolver import RouteResult

ROUTE_STROKE_COLOR = 'blue'
ROUTE_LINE_WIDTH = 5


def format_route(path: Sequence[Tuple[float, float]]) -> str:
    """Format a path as "(lat, lng)" lines with 5 decimals, no trailing newline."""
    return '\n'.join(f"({lat:.5f}, {lng:.5f})" for lat, lng in path)


def bounding_region(path: Sequence[Tuple[float, float]]) -> Optional[Dict]:
    """
    Smallest region that contains every point of the path.

    Returns:
        Dict with center_lat, center_lng, latitude_delta, longitude_delta,
        or None for an empty path.
    """
    if not path:
        return None

    lats = [lat for lat, _ in path]
    lngs = [lng for _, lng in path]
    min_lat, max_lat = min(lats), max(lats)
    min_lng, max_lng = min(lngs), max(lngs)

    return {
        'center_lat': (min_lat + max_lat) / 2,
        'center_lng': (min_lng + max_lng) / 2,
        'latitude_delta': max_lat - min_lat,
        'longitude_delta': max_lng - min_lng,
    }


class RouteDisplay:
    """Base for displays fed by a RouteResolver."""

    def apply(self, result: RouteResult):
        """Replace the displayed state with ``result``. Applying it again changes nothing."""
        raise NotImplementedError


class TripSummaryDisplay(RouteDisplay):
    """Distance and the route as text."""

    def __init__(self):
        self.total_miles = 0.0
        self.route = ''

    def apply(self, result: RouteResult):
        self.total_miles = result.total_miles
        self.route = format_route(result.path)


class MapOverlayDisplay(RouteDisplay):
    """Annotations, polyline overlays and visible region for a map surface."""

    def __init__(self):
        self.total_miles = 0.0
        self.annotations: List[Dict] = []
        self.overlays: List[Dict] = []
        self.region: Optional[Dict] = None

    def apply(self, result: RouteResult):
        self.annotations = []
        self.overlays = [{
            'coordinates': [[lat, lng] for lat, lng in result.path],
            'stroke_color': ROUTE_STROKE_COLOR,
            'line_width': ROUTE_LINE_WIDTH,
        }]
        self.region = bounding_region(result.path)
        self.total_miles = result.total_miles
