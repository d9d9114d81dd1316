"""
Management command to create sample data for the kiln marketplace
"""
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.contrib.auth import get_user_model
from django.db import transaction

from customers.models import CustomerProfile
from inquiries.models import Inquiry
from orders.models import Order
from products.models import Product
from providers.enums import CAPABILITY_SUGGESTIONS
from providers.models import Manufacturer, Provider
from quotations.models import Quotation
from quotations.services import quotation_total

User = get_user_model()


class Command(BaseCommand):
    help = 'Create sample manufacturers, providers and requests for the kiln marketplace'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            dest='clear',
            help='Clear existing data before creating new sample data',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            self.clear_existing_data()

        self.stdout.write('Creating sample data...')

        admin = self.create_admin()
        manufacturers = self.create_manufacturers()
        providers = self.create_providers()
        self.create_requests(manufacturers[0], providers)
        self.create_catalogue(manufacturers[0])
        self.create_customer()

        self.stdout.write(self.style.SUCCESS('Sample data created successfully!'))
        self.print_test_endpoints(admin, manufacturers[0])

    def clear_existing_data(self):
        self.stdout.write('Clearing existing sample data...')

        # Profiles and requests cascade from the users (keep admin)
        User.objects.exclude(role='admin').delete()

        self.stdout.write('Existing data cleared!')

    def create_admin(self):
        admin_user, created = User.objects.get_or_create(
            phone_number='+911234567890',
            defaults={
                'name': 'Admin User',
                'email': 'admin@kilnmarket.in',
                'role': 'admin',
                'is_staff': True,
                'is_superuser': True,
            }
        )
        if created:
            admin_user.set_password('admin123')
            admin_user.save()
            self.stdout.write("Created admin user")
        return admin_user

    def create_manufacturers(self):
        manufacturer_data = [
            {
                'phone_number': '+919123456789',
                'name': 'Rajesh Kumar',
                'company_name': 'Shree Ganesh Bricks',
                'kiln_type': 'Zig-zag',
                'city': 'Patna',
                'district': 'Patna',
                'state': 'Bihar',
                'pincode': '800001',
            },
            {
                'phone_number': '+919123456788',
                'name': 'Priya Sharma',
                'company_name': 'Sharma Brick Works',
                'kiln_type': 'Fixed chimney BTK',
                'city': 'Meerut',
                'district': 'Meerut',
                'state': 'Uttar Pradesh',
                'pincode': '250001',
            },
        ]

        manufacturers = []
        for info in manufacturer_data:
            user, _ = User.objects.get_or_create(
                phone_number=info['phone_number'],
                defaults={'name': info['name'], 'role': 'manufacturer'}
            )
            profile, created = Manufacturer.objects.get_or_create(
                user=user,
                defaults={
                    'name': info['name'],
                    'company_name': info['company_name'],
                    'phone': info['phone_number'],
                    'kiln_type': info['kiln_type'],
                    'city': info['city'],
                    'district': info['district'],
                    'state': info['state'],
                    'pincode': info['pincode'],
                }
            )
            if created:
                self.stdout.write(f"Created manufacturer: {profile.company_name}")
            manufacturers.append(user)
        return manufacturers

    def create_providers(self):
        provider_data = [
            {
                'phone_number': '+919876543210',
                'role': 'coal_provider',
                'kind': 'coal',
                'company_name': 'Jharia Coal Traders',
                'contact_name': 'Suresh Mahato',
                'city': 'Dhanbad',
                'district': 'Dhanbad',
                'state': 'Jharkhand',
                'pincode': '826001',
                'capacity': '500 MT / month',
            },
            {
                'phone_number': '+919876543211',
                'role': 'transport_provider',
                'kind': 'transport',
                'company_name': 'Ganga Freight Carriers',
                'contact_name': 'Manoj Yadav',
                'city': 'Patna',
                'district': 'Patna',
                'state': 'Bihar',
                'pincode': '800002',
                'capacity': '25 MT trucks',
            },
            {
                'phone_number': '+919876543212',
                'role': 'labour_contractor',
                'kind': 'labour',
                'company_name': 'Kisan Labour Services',
                'contact_name': 'Ramesh Paswan',
                'city': 'Gaya',
                'district': 'Gaya',
                'state': 'Bihar',
                'pincode': '823001',
                'capacity': '120 workers',
            },
        ]

        providers = {}
        for info in provider_data:
            user, _ = User.objects.get_or_create(
                phone_number=info['phone_number'],
                defaults={'name': info['contact_name'], 'role': info['role']}
            )
            provider, created = Provider.objects.get_or_create(
                user=user,
                defaults={
                    'kind': info['kind'],
                    'company_name': info['company_name'],
                    'contact_name': info['contact_name'],
                    'phone': info['phone_number'],
                    'city': info['city'],
                    'district': info['district'],
                    'state': info['state'],
                    'pincode': info['pincode'],
                    'capacity': info['capacity'],
                    'capabilities': CAPABILITY_SUGGESTIONS[info['kind']][:3],
                }
            )
            if created:
                self.stdout.write(f"Created {info['kind']} provider: {provider.company_name}")
            providers[info['kind']] = provider
        return providers

    def create_requests(self, manufacturer, providers):
        coal = providers['coal']
        if Inquiry.objects.filter(manufacturer=manufacturer, provider=coal).exists():
            return

        Inquiry.objects.create(
            manufacturer=manufacturer,
            provider=coal,
            item_type='indian_coal',
            message='Need steady supply for the coming firing season',
            quantity=Decimal('100'),
            delivery_location='Patna',
        )
        quantity, price = Decimal('50'), Decimal('8500')
        Quotation.objects.create(
            manufacturer=manufacturer,
            provider=coal,
            item_type='imported_coal',
            quantity=quantity,
            price_per_unit=price,
            total_amount=quotation_total(quantity, price),
            delivery_location='Patna',
        )
        Order.objects.create(
            manufacturer=manufacturer,
            provider=providers['transport'],
            item_type='road_transport',
            quantity=Decimal('25'),
            price_per_unit=Decimal('1200'),
            total_amount=quotation_total(Decimal('25'), Decimal('1200')),
            delivery_location='Patna',
        )
        self.stdout.write("Created sample inquiry, quotation and order")

    def create_catalogue(self, manufacturer):
        product_data = [
            ('Red Clay Bricks', 'clay_bricks', Decimal('8.50'), '230x110x75 mm'),
            ('Fly Ash Bricks', 'fly_ash_bricks', Decimal('6.00'), '230x100x75 mm'),
        ]
        for name, category, price, dimensions in product_data:
            _, created = Product.objects.get_or_create(
                manufacturer=manufacturer,
                name=name,
                defaults={'category': category, 'price': price, 'dimensions': dimensions, 'stock_quantity': 50000}
            )
            if created:
                self.stdout.write(f"Created product: {name}")

    def create_customer(self):
        user, _ = User.objects.get_or_create(
            phone_number='+919988776655',
            defaults={'name': 'Anita Verma', 'role': 'customer'}
        )
        _, created = CustomerProfile.objects.get_or_create(
            user=user,
            defaults={
                'name': user.name,
                'phone': user.phone_number,
                'company_name': 'Verma Constructions',
                'state': 'Bihar',
                'district': 'Patna',
                'category': 'Builder',
            }
        )
        if created:
            self.stdout.write("Created customer: Anita Verma")
        return user

    def print_test_endpoints(self, admin, manufacturer):
        """Print sample API endpoints for testing"""
        self.stdout.write('\n' + '=' * 60)
        self.stdout.write(self.style.SUCCESS('SAMPLE API ENDPOINTS FOR TESTING'))
        self.stdout.write('=' * 60)

        self.stdout.write('\n1. Login as manufacturer (OTP is logged when no SMS gateway is configured):')
        self.stdout.write('   POST /api/auth/send-otp/')
        self.stdout.write(f'   Body: {{"phone_number": "{manufacturer.phone_number}"}}')

        self.stdout.write('\n2. Browse coal providers in Jharkhand:')
        self.stdout.write('   GET /api/providers/?kind=coal&state=Jharkhand')

        self.stdout.write('\n3. Load the request dashboard:')
        self.stdout.write('   GET /api/dashboard/requests/')

        self.stdout.write('\n4. Browse the brick catalogue:')
        self.stdout.write('   GET /api/products/?category=clay_bricks')

        self.stdout.write('\n' + '=' * 60)
        self.stdout.write(f'Admin panel: /admin/ ({admin.phone_number} / admin123)')
        self.stdout.write('=' * 60)
