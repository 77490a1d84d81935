import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='StringRecord',
            fields=[
                ('id', models.CharField(editable=False, max_length=64, primary_key=True, serialize=False)),
                ('value', models.TextField(unique=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'db_table': 'string_records',
                'ordering': ['-created_at'],
            },
        ),
        migrations.CreateModel(
            name='StringProperties',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('length', models.PositiveIntegerField()),
                ('is_palindrome', models.BooleanField()),
                ('unique_characters', models.PositiveIntegerField()),
                ('word_count', models.PositiveIntegerField()),
                ('sha256_hash', models.CharField(max_length=64)),
                ('character_frequency_map', models.JSONField()),
                ('record', models.OneToOneField(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='properties',
                    to='String_Analyser.stringrecord',
                )),
            ],
            options={
                'db_table': 'string_properties',
                'verbose_name_plural': 'string properties',
            },
        ),
    ]
