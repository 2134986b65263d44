import uuid

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='DatingIdea',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('uuid', models.UUIDField(default=uuid.uuid4, editable=False, unique=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('title', models.CharField(max_length=255)),
                ('description', models.TextField(blank=True)),
                ('category', models.CharField(blank=True, choices=[('romantic', 'Romantic'), ('adventure', 'Adventure'), ('culture', 'Culture'), ('sport', 'Sport'), ('culinary', 'Culinary'), ('relaxation', 'Relaxation'), ('creative', 'Creative')], max_length=30)),
                ('estimated_cost', models.CharField(blank=True, choices=[('free', 'Free'), ('under_20', 'Under 20 €'), ('20_50', '20-50 €'), ('50_100', '50-100 €'), ('over_100', 'Over 100 €')], max_length=20)),
                ('estimated_duration', models.CharField(blank=True, choices=[('under_1h', 'Under 1h'), ('1_3h', '1-3h'), ('3_5h', '3-5h'), ('half_day', 'Half a day'), ('full_day', 'Full day'), ('weekend', 'Weekend')], max_length=20)),
                ('location_type', models.CharField(blank=True, choices=[('indoor', 'Indoor'), ('outdoor', 'Outdoor'), ('home', 'At home'), ('restaurant', 'Restaurant'), ('bar', 'Bar'), ('activity', 'Activity')], max_length=20)),
                ('is_favorite', models.BooleanField(default=False)),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='+', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'ordering': ['-created_at', '-id'],
            },
        ),
    ]
