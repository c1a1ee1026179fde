import pytest
import requests

from trips.store import get_trip_store


class FakeResponse:
    def __init__(self, payload, status_code=200):
        self.payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self):
        return self.payload


class FakeSession:
    """Stands in for requests.Session, replaying canned responses."""

    def __init__(self, responses=None, error=None):
        self.headers = {}
        self.responses = list(responses or [])
        self.error = error
        self.calls = []

    def get(self, url, params=None, timeout=None):
        self.calls.append({'url': url, 'params': params, 'timeout': timeout})
        if self.error is not None:
            raise self.error
        return self.responses.pop(0)


class FakeGeocoder:
    """Geocoder keyed by address; unknown addresses have no candidates."""

    def __init__(self, locations):
        self.locations = locations
        self.calls = []

    def geocode(self, address):
        self.calls.append(address)
        return self.locations.get(address)


class FakeRouter:
    def __init__(self, route):
        self.route = route
        self.calls = []

    def get_route(self, source, destination):
        self.calls.append((source, destination))
        return self.route


FOOTHILL = {'lat': 37.36155, 'lng': -122.12838, 'display_name': 'Foothill College'}
DE_ANZA = {'lat': 37.31944, 'lng': -122.04496, 'display_name': 'De Anza College'}


@pytest.fixture
def campus_geocoder():
    return FakeGeocoder({'Foothill College': FOOTHILL, 'De Anza College': DE_ANZA})


@pytest.fixture
def campus_route():
    return {
        'total_distance_miles': 10000.0 / 1609.34,
        'geometry': [
            (FOOTHILL['lat'], FOOTHILL['lng']),
            (37.34012, -122.08741),
            (DE_ANZA['lat'], DE_ANZA['lng']),
        ],
    }


@pytest.fixture(autouse=True)
def no_rate_limit(settings):
    settings.GEOCODING_MIN_INTERVAL_SECONDS = 0


@pytest.fixture
def memory_store(settings):
    settings.TRIP_STORE_BACKEND = 'memory'
    get_trip_store.cache_clear()
    yield get_trip_store()
    get_trip_store.cache_clear()


@pytest.fixture
def database_store(settings, db):
    settings.TRIP_STORE_BACKEND = 'database'
    get_trip_store.cache_clear()
    yield get_trip_store()
    get_trip_store.cache_clear()
