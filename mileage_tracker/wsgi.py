"""
WSGI config for Mileage Tracker.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'mileage_tracker.settings')

application = get_wsgi_application()
