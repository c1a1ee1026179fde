"""
Routing service using OSRM (Open Source Routing Machine).
Gets driving routes, distances, and route geometry.
"""
import logging
from typing import Dict, Optional

import polyline
import requests
from django.conf import settings

logger = logging.getLogger(__name__)

METERS_PER_MILE = 1609.34

# OSRM profile for automobile travel
DRIVING_PROFILE = 'driving'


class RoutingService:
    """Service for getting driving routes using OSRM."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = (base_url or settings.ROUTING_BASE_URL).rstrip('/')
        self.timeout = timeout if timeout is not None else settings.HTTP_TIMEOUT_SECONDS
        self.session = session or requests.Session()

    def get_route(self, source: Dict, destination: Dict) -> Optional[Dict]:
        """
        Get a driving route between two points.

        Args:
            source: Dict with 'lat' and 'lng' keys
            destination: Dict with 'lat' and 'lng' keys

        Returns:
            Dict with distance and geometry of the first route OSRM
            returns, or None when there is no route or the request failed.
        """
        # OSRM wants lng,lat;lng,lat
        coords = f"{source['lng']},{source['lat']};{destination['lng']},{destination['lat']}"

        try:
            response = self.session.get(
                f"{self.base_url}/route/v1/{DRIVING_PROFILE}/{coords}",
                params={
                    'overview': 'full',
                    'geometries': 'polyline',
                },
                timeout=self.timeout,
            )
            response.raise_for_status()
            data = response.json()

            if data.get('code') != 'Ok':
                logger.info("OSRM error: %s", data.get('message', data.get('code', 'Unknown error')))
                return None

            routes = data.get('routes') or []
            if not routes:
                logger.info("OSRM returned no routes for %s", coords)
                return None

            # Alternates are discarded
            route = routes[0]

            # Decode the polyline geometry to lat/lng pairs
            geometry = polyline.decode(route['geometry'])

            return {
                'total_distance_miles': route['distance'] / METERS_PER_MILE,
                'geometry': geometry,  # List of (lat, lng) pairs
            }
        except requests.RequestException as e:
            logger.info("Routing request failed: %s", e)
            return None
        except (KeyError, TypeError, ValueError) as e:
            logger.info("Unexpected routing payload: %s", e)
            return None
