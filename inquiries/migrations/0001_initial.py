import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ('providers', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Inquiry',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('inquiry_type', models.CharField(choices=[('general_inquiry', 'General Inquiry'), ('quotation_inquiry', 'Quotation Inquiry'), ('order_inquiry', 'Order Inquiry')], default='general_inquiry', max_length=30)),
                ('item_type', models.CharField(blank=True, help_text='Coal type, transport type or service type', max_length=100)),
                ('message', models.TextField()),
                ('quantity', models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True)),
                ('unit', models.CharField(default='MT', max_length=20)),
                ('delivery_location', models.CharField(blank=True, max_length=255)),
                ('expected_delivery_date', models.DateField(blank=True, null=True)),
                ('budget_range_min', models.DecimalField(blank=True, decimal_places=2, max_digits=14, null=True)),
                ('budget_range_max', models.DecimalField(blank=True, decimal_places=2, max_digits=14, null=True)),
                ('status', models.CharField(choices=[('pending', 'Pending'), ('responded', 'Responded'), ('closed', 'Closed')], default='pending', max_length=20)),
                ('provider_response', models.TextField(blank=True)),
                ('provider_response_date', models.DateTimeField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('manufacturer', models.ForeignKey(limit_choices_to={'role': 'manufacturer'}, on_delete=django.db.models.deletion.CASCADE, related_name='inquiries', to=settings.AUTH_USER_MODEL)),
                ('provider', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='inquiries', to='providers.provider')),
                ('responded_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='inquiry_responses', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name_plural': 'inquiries',
                'ordering': ['-created_at'],
            },
        ),
        migrations.CreateModel(
            name='InquiryResponseHistory',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('response_number', models.PositiveIntegerField()),
                ('response_text', models.TextField()),
                ('response_type', models.CharField(choices=[('text_response', 'Text Response'), ('text_response_edited', 'Edited Text Response')], default='text_response', max_length=30)),
                ('is_current_response', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('inquiry', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='response_history', to='inquiries.inquiry')),
                ('manufacturer', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='received_inquiry_responses', to=settings.AUTH_USER_MODEL)),
                ('provider', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='inquiry_response_history', to='providers.provider')),
                ('responded_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name_plural': 'inquiry response history',
                'ordering': ['-response_number'],
                'unique_together': {('inquiry', 'response_number')},
            },
        ),
    ]
