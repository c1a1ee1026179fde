"""
URL configuration for trips app.
"""
from django.urls import path

from . import views

app_name = 'trips'

urlpatterns = [
    path('health/', views.health_check, name='health_check'),

    # GET: list trips, POST: add a trip
    path('trips/', views.trip_list, name='trip_list'),
    # DELETE by list position (no-op)
    path('trips/<int:index>/', views.delete_trip, name='delete_trip'),
    path('trips/<uuid:trip_id>/', views.trip_detail, name='trip_detail'),
    path('trips/<uuid:trip_id>/summary/', views.trip_route_summary, name='trip_route_summary'),
    path('trips/<uuid:trip_id>/map/', views.trip_route_map, name='trip_route_map'),
]
