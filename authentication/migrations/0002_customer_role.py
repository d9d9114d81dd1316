from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ('authentication', '0001_initial'),
    ]

    operations = [
        migrations.AlterField(
            model_name='customuser',
            name='role',
            field=models.CharField(choices=[('manufacturer', 'Manufacturer'), ('coal_provider', 'Coal Provider'), ('transport_provider', 'Transport Provider'), ('labour_contractor', 'Labour Contractor'), ('customer', 'Customer'), ('admin', 'Admin')], default='manufacturer', max_length=20),
        ),
    ]
