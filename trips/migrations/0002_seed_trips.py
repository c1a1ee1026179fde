from django.db import migrations

SEED_TRIPS = [
    ('Foothill College', 'De Anza College'),
    ('Your starting point', 'Your destination'),
]


def seed_trips(apps, schema_editor):
    Trip = apps.get_model('trips', 'Trip')
    for from_location, to_location in SEED_TRIPS:
        Trip.objects.create(from_location=from_location, to_location=to_location)


def unseed_trips(apps, schema_editor):
    # Only the seeded rows: users may have added trips with the same addresses
    Trip = apps.get_model('trips', 'Trip')
    for from_location, to_location in SEED_TRIPS:
        seeded = (
            Trip.objects
            .filter(from_location=from_location, to_location=to_location)
            .order_by('id')
            .first()
        )
        if seeded is not None:
            seeded.delete()


class Migration(migrations.Migration):

    dependencies = [
        ('trips', '0001_initial'),
    ]

    operations = [
        migrations.RunPython(seed_trips, unseed_trips),
    ]
