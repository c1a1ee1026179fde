"""
Geocoding service using Nominatim API.
Converts free-text addresses to coordinates.
"""
import logging
import threading
import time
from typing import Dict, List, Optional

import requests
from django.conf import settings

logger = logging.getLogger(__name__)

# Shared by every GeocodingService in the process: Nominatim counts requests
# per client, not per session.
_rate_limit_lock = threading.Lock()
_last_request_time = 0.0


class GeocodingService:
    """Service for geocoding addresses using Nominatim (OpenStreetMap)."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        user_agent: Optional[str] = None,
        country_codes: Optional[str] = None,
        min_interval: Optional[float] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = (base_url or settings.GEOCODING_BASE_URL).rstrip('/')
        self.country_codes = (
            country_codes if country_codes is not None else settings.GEOCODING_COUNTRY_CODES
        )
        self.min_interval = (
            min_interval if min_interval is not None else settings.GEOCODING_MIN_INTERVAL_SECONDS
        )
        self.timeout = timeout if timeout is not None else settings.HTTP_TIMEOUT_SECONDS
        self.session = session or requests.Session()
        self.session.headers.update({
            'User-Agent': user_agent or settings.GEOCODING_USER_AGENT
        })

    def _rate_limit(self):
        """Ensure we don't exceed Nominatim's rate limit (1 request/second)."""
        global _last_request_time
        with _rate_limit_lock:
            elapsed = time.time() - _last_request_time
            if elapsed < self.min_interval:
                time.sleep(self.min_interval - elapsed)
            _last_request_time = time.time()

    def search(self, address: str, limit: int = 5) -> List[Dict]:
        """
        Look up candidate locations for an address.

        Args:
            address: The address string to geocode
            limit: Maximum number of candidates to ask for

        Returns:
            List of dicts with lat, lng, display_name in the order
            Nominatim ranks them. Empty when nothing matched or the
            request failed.
        """
        self._rate_limit()

        params = {
            'q': address,
            'format': 'json',
            'limit': limit,
        }
        if self.country_codes:
            params['countrycodes'] = self.country_codes

        try:
            response = self.session.get(
                f"{self.base_url}/search",
                params=params,
                timeout=self.timeout,
            )
            response.raise_for_status()
            results = response.json()

            return [
                {
                    'lat': float(result['lat']),
                    'lng': float(result['lon']),
                    'display_name': result.get('display_name', address),
                }
                for result in results
            ]
        except requests.RequestException as e:
            logger.info("Geocoding request for %r failed: %s", address, e)
            return []
        except (KeyError, TypeError, ValueError) as e:
            logger.info("Unexpected geocoding payload for %r: %s", address, e)
            return []

    def geocode(self, address: str) -> Optional[Dict]:
        """
        Convert an address to coordinates.

        Only the best ranked candidate is kept, the others are discarded.

        Returns:
            Dict with lat, lng, display_name or None if not found
        """
        candidates = self.search(address, limit=1)
        if not candidates:
            logger.debug("No geocoding candidates for %r", address)
            return None
        return candidates[0]
