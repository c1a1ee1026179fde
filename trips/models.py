"""
Models for Mileage Tracker.
"""
import uuid

from django.db import models
from django.utils import timezone


class Trip(models.Model):
    """A recorded journey between two free-text addresses."""
    trip_id = models.UUIDField(default=uuid.uuid4, unique=True, editable=False)
    from_location = models.TextField(blank=True)
    to_location = models.TextField(blank=True)
    date_time = models.DateTimeField(default=timezone.now)
    # Scratch fields, not filled in when a trip is added
    total_miles = models.FloatField(default=0)
    route = models.TextField(blank=True, default='')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['id']

    def __str__(self):
        return f"Trip from {self.from_location} to {self.to_location}"
