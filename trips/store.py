"""
Trip store.

Keeps trips in insertion order. Trips are only ever appended: deleting is
disabled. Storage sits behind a repository so the same workflow can run
against transient session state or the database.
"""
import logging
from datetime import datetime
from functools import lru_cache
from typing import Iterable, List, Optional
from uuid import UUID

from django.conf import settings
from django.utils import timezone

from .models import Trip

logger = logging.getLogger(__name__)

SEED_TRIPS = [
    ('Foothill College', 'De Anza College'),
    ('Your starting point', 'Your destination'),
]


class TripRepository:
    """Where trips live."""

    def all(self) -> List[Trip]:
        raise NotImplementedError

    def add(self, trip: Trip) -> Trip:
        raise NotImplementedError

    def get(self, trip_id: UUID) -> Optional[Trip]:
        raise NotImplementedError


class InMemoryTripRepository(TripRepository):
    """Unsaved Trip instances held for the lifetime of the process."""

    def __init__(self, seed: bool = True):
        self._trips: List[Trip] = []
        if seed:
            for from_location, to_location in SEED_TRIPS:
                self._trips.append(Trip(from_location=from_location, to_location=to_location))

    def all(self) -> List[Trip]:
        return list(self._trips)

    def add(self, trip: Trip) -> Trip:
        self._trips.append(trip)
        return trip

    def get(self, trip_id: UUID) -> Optional[Trip]:
        for trip in self._trips:
            if trip.trip_id == trip_id:
                return trip
        return None


class DatabaseTripRepository(TripRepository):
    """Trips stored through the Django ORM. Seed rows come from a data migration."""

    def all(self) -> List[Trip]:
        return list(Trip.objects.order_by('id'))

    def add(self, trip: Trip) -> Trip:
        trip.save()
        return trip

    def get(self, trip_id: UUID) -> Optional[Trip]:
        return Trip.objects.filter(trip_id=trip_id).first()


class TripStore:
    """The trip list as seen by the API."""

    def __init__(self, repository: TripRepository):
        self.repository = repository

    def trips(self) -> List[Trip]:
        return self.repository.all()

    def get(self, trip_id: UUID) -> Optional[Trip]:
        return self.repository.get(trip_id)

    def add_trip(
        self,
        from_location: str,
        to_location: str,
        date_time: Optional[datetime] = None,
    ) -> Trip:
        """
        Append a new trip.

        No validation and no duplicate detection: empty addresses are
        accepted as is. The scratch fields keep their defaults.
        """
        trip = Trip(
            from_location=from_location,
            to_location=to_location,
            date_time=date_time if date_time is not None else timezone.now(),
            total_miles=0.0,
            route='',
        )
        self.repository.add(trip)
        logger.info("Added trip %s from %r to %r", trip.trip_id, from_location, to_location)
        return trip

    def delete(self, offsets: Iterable[int]) -> None:
        """Deleting trips is disabled; the list is left unchanged."""
        logger.debug("Ignoring delete of trips at %s", list(offsets))


REPOSITORIES = {
    'memory': InMemoryTripRepository,
    'database': DatabaseTripRepository,
}


@lru_cache(maxsize=None)
def get_trip_store() -> TripStore:
    """Process-wide trip store, backed by ``settings.TRIP_STORE_BACKEND``."""
    backend = settings.TRIP_STORE_BACKEND
    try:
        repository_class = REPOSITORIES[backend]
    except KeyError:
        raise ValueError(
            f"Unknown TRIP_STORE_BACKEND {backend!r}, expected one of {sorted(REPOSITORIES)}"
        ) from None
    return TripStore(repository_class())
