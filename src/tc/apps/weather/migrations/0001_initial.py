from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='WeatherCache',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('location', models.CharField(db_index=True, max_length=255)),
                ('data', models.TextField()),
                ('timestamp', models.DateTimeField(db_index=True)),
            ],
            options={
                'verbose_name': 'Weather Cache Entry',
                'verbose_name_plural': 'Weather Cache Entries',
            },
        ),
    ]
