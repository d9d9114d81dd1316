"""
Test utilities and factories for creating test data
"""
import random
import string
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.utils import timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken

from customers.models import CustomerProfile, ProductQuotation
from customers.services import ProductQuotationService
from inquiries.models import Inquiry
from orders.models import Order
from products.models import Product
from providers.enums import KIND_FOR_ROLE
from providers.models import Manufacturer, Provider
from quotations.models import Quotation
from quotations.services import quotation_total
from ratings.models import Rating

User = get_user_model()


class TestDataFactory:
    """Factory class for creating test data"""

    @staticmethod
    def random_string(length=10):
        return ''.join(random.choices(string.ascii_letters + string.digits, k=length))

    @staticmethod
    def random_phone():
        return '+9198' + ''.join(random.choices(string.digits, k=8))

    @staticmethod
    def create_user(role='manufacturer', phone_number=None, name=None, **extra):
        """Create a test user with an unusable password (OTP login only)"""
        return User.objects.create_user(
            phone_number=phone_number or TestDataFactory.random_phone(),
            name=name or f'User {TestDataFactory.random_string(4)}',
            role=role,
            **extra
        )

    @staticmethod
    def create_manufacturer(user=None, **fields):
        """Create a manufacturer user together with its kiln profile"""
        user = user or TestDataFactory.create_user(role='manufacturer')
        defaults = {
            'name': user.name,
            'company_name': f'Bricks {TestDataFactory.random_string(5)}',
            'phone': user.phone_number,
            'district': 'Patna',
            'state': 'Bihar',
        }
        defaults.update(fields)
        Manufacturer.objects.create(user=user, **defaults)
        return user

    @staticmethod
    def create_provider(role='coal_provider', user=None, **fields):
        """Create a provider user and its provider profile of the matching kind"""
        user = user or TestDataFactory.create_user(role=role)
        defaults = {
            'kind': KIND_FOR_ROLE[role],
            'company_name': f'Provider {TestDataFactory.random_string(5)}',
            'contact_name': user.name,
            'phone': user.phone_number,
            'city': 'Dhanbad',
            'district': 'Dhanbad',
            'state': 'Jharkhand',
            'pincode': '826001',
            'capabilities': ['indian_coal', 'imported_coal'],
        }
        defaults.update(fields)
        return Provider.objects.create(user=user, **defaults)

    @staticmethod
    def create_inquiry(manufacturer, provider, message='Need coal for the season', **fields):
        return Inquiry.objects.create(manufacturer=manufacturer, provider=provider, message=message, **fields)

    @staticmethod
    def create_quotation(manufacturer, provider, quantity=Decimal('10'), price_per_unit=Decimal('100'), **fields):
        fields.setdefault('item_type', 'indian_coal')
        fields.setdefault('delivery_location', 'Patna')
        return Quotation.objects.create(
            manufacturer=manufacturer,
            provider=provider,
            quantity=quantity,
            price_per_unit=price_per_unit,
            total_amount=quotation_total(quantity, price_per_unit),
            **fields
        )

    @staticmethod
    def create_order(manufacturer, provider, quantity=Decimal('10'), price_per_unit=Decimal('100'), **fields):
        fields.setdefault('order_number', f'ORD-{TestDataFactory.random_string(10)}')
        fields.setdefault('item_type', 'indian_coal')
        fields.setdefault('delivery_location', 'Patna')
        return Order.objects.create(
            manufacturer=manufacturer,
            provider=provider,
            quantity=quantity,
            price_per_unit=price_per_unit,
            total_amount=quotation_total(quantity, price_per_unit),
            **fields
        )

    @staticmethod
    def create_confirmed_order(manufacturer, provider, **fields):
        fields.setdefault('order_status', 'confirmed')
        fields.setdefault('confirmed_by_provider', True)
        fields.setdefault('provider_confirmation_date', timezone.now())
        return TestDataFactory.create_order(manufacturer, provider, **fields)

    @staticmethod
    def create_rating(order, rating=5, **fields):
        return Rating.objects.create(
            manufacturer=order.manufacturer,
            provider=order.provider,
            order=order,
            rating=rating,
            **fields
        )

    @staticmethod
    def create_customer(user=None, **fields):
        """Create a customer user together with its buyer profile"""
        user = user or TestDataFactory.create_user(role='customer')
        defaults = {
            'name': user.name,
            'phone': user.phone_number,
            'state': 'Bihar',
            'district': 'Patna',
            'category': 'Builder',
        }
        defaults.update(fields)
        CustomerProfile.objects.create(user=user, **defaults)
        return user

    @staticmethod
    def create_product(manufacturer, price=Decimal('8.50'), **fields):
        fields.setdefault('name', 'Red Clay Bricks')
        fields.setdefault('category', 'clay_bricks')
        return Product.objects.create(manufacturer=manufacturer, price=price, **fields)

    @staticmethod
    def create_accepted_quotation(customer, product, quantity=1000, response_price=None, **response):
        """Customer quotation request already answered with an offer"""
        quotation = ProductQuotation.objects.create(
            customer=customer,
            manufacturer=product.manufacturer,
            product=product,
            quantity=quantity,
            quoted_price=product.price,
            total_amount=quotation_total(quantity, product.price),
        )
        return ProductQuotationService.respond(
            quotation,
            product.manufacturer,
            response_price=response_price or product.price,
            **response
        )


class AuthenticatedAPIClient(APIClient):
    """APIClient with authentication helper"""

    def authenticate_user(self, user):
        """Authenticate the client with a user"""
        refresh = RefreshToken.for_user(user)
        self.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
        return self

    def logout(self):
        """Remove authentication"""
        self.credentials()
