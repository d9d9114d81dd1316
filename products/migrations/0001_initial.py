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
            name='Product',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=200)),
                ('category', models.CharField(choices=[('building_materials', 'Building Materials'), ('clay_bricks', 'Clay Bricks'), ('concrete_blocks', 'Concrete Blocks'), ('fly_ash_bricks', 'Fly Ash Bricks'), ('aac_blocks', 'AAC Blocks'), ('cement', 'Cement'), ('sand', 'Sand'), ('aggregates', 'Aggregates'), ('other', 'Other')], max_length=30)),
                ('description', models.TextField(blank=True)),
                ('dimensions', models.CharField(blank=True, max_length=100)),
                ('price', models.DecimalField(decimal_places=2, max_digits=12)),
                ('price_unit', models.CharField(default='per piece', max_length=30)),
                ('stock_quantity', models.PositiveIntegerField(blank=True, null=True)),
                ('is_available', models.BooleanField(default=True)),
                ('specifications', models.JSONField(blank=True, default=dict)),
                ('image_url', models.URLField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('manufacturer', models.ForeignKey(limit_choices_to={'role': 'manufacturer'}, on_delete=django.db.models.deletion.CASCADE, related_name='products', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'ordering': ['-created_at'],
            },
        ),
    ]
