import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Assistant',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=100)),
                ('phone', models.CharField(blank=True, max_length=20, validators=[django.core.validators.RegexValidator('^\\+?[0-9 ()-]{6,20}$', 'Invalid phone number format.')])),
            ],
            options={
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Container',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('container_number', models.CharField(max_length=50)),
            ],
            options={
                'ordering': ['container_number'],
            },
        ),
        migrations.CreateModel(
            name='Driver',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=100)),
                ('license_number', models.CharField(max_length=50)),
                ('phone', models.CharField(blank=True, max_length=20, validators=[django.core.validators.RegexValidator('^\\+?[0-9 ()-]{6,20}$', 'Invalid phone number format.')])),
            ],
            options={
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Lorry',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('number_plate', models.CharField(max_length=50)),
                ('model', models.CharField(max_length=100)),
            ],
            options={
                'ordering': ['number_plate'],
                'verbose_name_plural': 'Lorries',
            },
        ),
        migrations.CreateModel(
            name='TransportUnit',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('unit_number', models.CharField(max_length=50)),
                ('assistant', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='transport_units', to='fleet.assistant')),
                ('container', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='transport_units', to='fleet.container')),
                ('driver', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='transport_units', to='fleet.driver')),
                ('lorry', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='transport_units', to='fleet.lorry')),
            ],
            options={
                'ordering': ['unit_number'],
            },
        ),
    ]
