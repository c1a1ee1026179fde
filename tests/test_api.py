import pytest
from rest_framework.test import APIClient

from trips import views

from .conftest import DE_ANZA, FOOTHILL, FakeGeocoder, FakeRouter

pytestmark = pytest.mark.django_db


@pytest.fixture
def client():
    return APIClient()


@pytest.fixture
def external_services(monkeypatch, campus_route):
    """Replace the geocoding and routing clients used by the views."""
    geocoders = []
    routers = []

    def make_geocoder():
        geocoder = FakeGeocoder({'Foothill College': FOOTHILL, 'De Anza College': DE_ANZA})
        geocoders.append(geocoder)
        return geocoder

    def make_router():
        router = FakeRouter(campus_route)
        routers.append(router)
        return router

    monkeypatch.setattr(views, 'GeocodingService', make_geocoder)
    monkeypatch.setattr(views, 'RoutingService', make_router)
    return geocoders, routers


def test_health_check(client):
    response = client.get('/api/health/')
    assert response.status_code == 200
    assert response.json() == {'status': 'healthy'}


def test_list_trips(client, memory_store):
    response = client.get('/api/trips/')

    assert response.status_code == 200
    body = response.json()
    assert [(t['from_location'], t['to_location']) for t in body] == [
        ('Foothill College', 'De Anza College'),
        ('Your starting point', 'Your destination'),
    ]
    assert body[0]['total_miles'] == 0
    assert body[0]['route'] == ''


def test_add_trip(client, memory_store):
    response = client.post(
        '/api/trips/',
        {'from_location': 'A', 'to_location': 'B', 'date_time': '2023-06-29T10:30:00Z'},
        format='json',
    )

    assert response.status_code == 201
    body = response.json()
    assert body['from_location'] == 'A'
    assert body['to_location'] == 'B'
    assert body['date_time'] == '2023-06-29T10:30:00Z'
    assert body['total_miles'] == 0
    assert body['route'] == ''

    listing = client.get('/api/trips/').json()
    assert len(listing) == 3
    assert listing[-1]['id'] == body['id']


def test_add_trip_with_empty_addresses(client, memory_store):
    response = client.post('/api/trips/', {}, format='json')

    assert response.status_code == 201
    assert response.json()['from_location'] == ''
    assert response.json()['to_location'] == ''


def test_add_trip_rejects_bad_date(client, memory_store):
    response = client.post(
        '/api/trips/',
        {'from_location': 'A', 'to_location': 'B', 'date_time': 'yesterday'},
        format='json',
    )

    assert response.status_code == 400
    assert 'date_time' in response.json()
    assert len(memory_store.trips()) == 2


def test_delete_is_a_no_op(client, memory_store):
    before = client.get('/api/trips/').json()

    response = client.delete('/api/trips/0/')

    assert response.status_code == 200
    assert response.json() == before
    assert client.get('/api/trips/').json() == before


def test_trip_detail(client, memory_store):
    trip = memory_store.trips()[0]

    response = client.get(f'/api/trips/{trip.trip_id}/')

    assert response.status_code == 200
    assert response.json()['from_location'] == 'Foothill College'


def test_unknown_trip(client, memory_store):
    response = client.get('/api/trips/00000000-0000-0000-0000-000000000000/summary/')
    assert response.status_code == 404
    assert 'error' in response.json()


def test_route_summary(client, memory_store, external_services):
    trip = memory_store.trips()[0]

    response = client.get(f'/api/trips/{trip.trip_id}/summary/')

    assert response.status_code == 200
    body = response.json()
    assert body['trip']['id'] == str(trip.trip_id)
    assert body['total_miles'] == pytest.approx(6.21373, rel=1e-4)
    assert body['route'] == (
        "(37.36155, -122.12838)\n"
        "(37.34012, -122.08741)\n"
        "(37.31944, -122.04496)"
    )


def test_route_summary_when_address_does_not_resolve(client, memory_store, external_services):
    trip = memory_store.trips()[1]
    geocoders, routers = external_services

    response = client.get(f'/api/trips/{trip.trip_id}/summary/')

    assert response.status_code == 200
    assert response.json()['total_miles'] == 0
    assert response.json()['route'] == ''
    assert geocoders[0].calls == ['Your starting point']
    assert routers[0].calls == []


def test_route_map(client, memory_store, external_services):
    trip = memory_store.trips()[0]

    response = client.get(f'/api/trips/{trip.trip_id}/map/')

    assert response.status_code == 200
    body = response.json()
    assert body['annotations'] == []
    assert len(body['overlays']) == 1
    assert body['overlays'][0]['coordinates'][0] == [FOOTHILL['lat'], FOOTHILL['lng']]
    assert body['overlays'][0]['coordinates'][-1] == [DE_ANZA['lat'], DE_ANZA['lng']]
    assert body['overlays'][0]['stroke_color'] == 'blue'
    assert body['overlays'][0]['line_width'] == 5
    assert body['region']['latitude_delta'] == pytest.approx(FOOTHILL['lat'] - DE_ANZA['lat'])


def test_route_map_without_route(client, memory_store, monkeypatch):
    monkeypatch.setattr(views, 'GeocodingService', lambda: FakeGeocoder({}))
    monkeypatch.setattr(views, 'RoutingService', lambda: FakeRouter(None))
    trip = memory_store.trips()[0]

    response = client.get(f'/api/trips/{trip.trip_id}/map/')

    assert response.status_code == 200
    assert response.json() == {
        'total_miles': 0.0,
        'annotations': [],
        'overlays': [],
        'region': None,
    }


def test_each_view_resolves_independently(client, memory_store, external_services):
    trip = memory_store.trips()[0]
    geocoders, routers = external_services

    client.get(f'/api/trips/{trip.trip_id}/summary/')
    client.get(f'/api/trips/{trip.trip_id}/map/')
    client.get(f'/api/trips/{trip.trip_id}/map/')

    assert len(routers) == 3
    assert all(len(router.calls) == 1 for router in routers)


def test_database_backend_round_trip(client, database_store):
    created = client.post(
        '/api/trips/', {'from_location': 'A', 'to_location': 'B'}, format='json'
    ).json()

    detail = client.get(f"/api/trips/{created['id']}/")

    assert detail.status_code == 200
    assert detail.json()['from_location'] == 'A'
    assert [t['id'] for t in client.get('/api/trips/').json()][-1] == created['id']
