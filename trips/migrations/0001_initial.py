import uuid

import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Trip',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('trip_id', models.UUIDField(default=uuid.uuid4, editable=False, unique=True)),
                ('from_location', models.TextField(blank=True)),
                ('to_location', models.TextField(blank=True)),
                ('date_time', models.DateTimeField(default=django.utils.timezone.now)),
                ('total_miles', models.FloatField(default=0)),
                ('route', models.TextField(blank=True, default='')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'ordering': ['id'],
            },
        ),
    ]
