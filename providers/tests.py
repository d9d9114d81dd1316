"""
Tests for provider / manufacturer registration and provider search
"""
from django.core.exceptions import ValidationError
from django.core.management import call_command
from django.test import TestCase
from io import StringIO
from rest_framework import status
from rest_framework.test import APIClient

from customers.models import CustomerProfile
from products.models import Product
from project.test_utils import TestDataFactory, AuthenticatedAPIClient
from providers.models import Manufacturer, Provider
from providers.services import (
    ProviderProfileService, ManufacturerProfileService, ProviderSearchService, clean_capabilities
)


class ProviderProfileServiceTests(TestCase):

    def setUp(self):
        self.user = TestDataFactory.create_user(role='coal_provider')

    def profile_data(self, **overrides):
        data = {
            'company_name': 'Jharia Coal Traders',
            'contact_name': 'Suresh',
            'city': 'Dhanbad',
            'district': 'Dhanbad',
            'state': 'Jharkhand',
            'pincode': '826001',
            'capabilities': ['indian_coal', ' indian_coal ', '', 'imported_coal'],
        }
        data.update(overrides)
        return data

    def test_register_infers_kind_from_role(self):
        provider = ProviderProfileService.register_provider(self.user, **self.profile_data())
        self.assertEqual(provider.kind, 'coal')
        self.assertEqual(provider.phone, self.user.phone_number)
        self.assertEqual(provider.capabilities, ['indian_coal', 'imported_coal'])

    def test_register_rejects_kind_of_another_role(self):
        with self.assertRaises(ValidationError):
            ProviderProfileService.register_provider(self.user, kind='transport', **self.profile_data())

    def test_register_twice_rejected(self):
        ProviderProfileService.register_provider(self.user, **self.profile_data())
        with self.assertRaises(ValidationError):
            ProviderProfileService.register_provider(self.user, **self.profile_data())

    def test_manufacturer_cannot_register_provider(self):
        manufacturer = TestDataFactory.create_user(role='manufacturer')
        with self.assertRaises(ValidationError):
            ProviderProfileService.register_provider(manufacturer, **self.profile_data())

    def test_update_keeps_kind(self):
        provider = ProviderProfileService.register_provider(self.user, **self.profile_data())
        provider = ProviderProfileService.update_provider(provider, kind='labour', capacity='900 MT')
        self.assertEqual(provider.kind, 'coal')
        self.assertEqual(provider.capacity, '900 MT')

    def test_clean_capabilities(self):
        self.assertEqual(clean_capabilities([' a', 'a', '', 'b ']), ['a', 'b'])


class ManufacturerProfileServiceTests(TestCase):

    def test_register_manufacturer(self):
        user = TestDataFactory.create_user(role='manufacturer')
        profile = ManufacturerProfileService.register_manufacturer(
            user, name='Rajesh', company_name='Ganesh Bricks', district='Patna', state='Bihar'
        )
        self.assertEqual(profile.phone, user.phone_number)
        self.assertEqual(ManufacturerProfileService.get_for_user(user), profile)

    def test_provider_cannot_register_manufacturer(self):
        user = TestDataFactory.create_user(role='coal_provider')
        with self.assertRaises(ValidationError):
            ManufacturerProfileService.register_manufacturer(
                user, name='X', company_name='Y', district='Patna', state='Bihar'
            )


class ProviderSearchTests(TestCase):

    def setUp(self):
        self.coal = TestDataFactory.create_provider(
            company_name='Jharia Coal', state='Jharkhand', capabilities=['Indian_Coal', 'biomass_fuel']
        )
        self.transport = TestDataFactory.create_provider(
            role='transport_provider', company_name='Ganga Freight', city='Patna', district='Patna',
            state='Bihar', capabilities=['road_transport']
        )
        self.inactive = TestDataFactory.create_provider(company_name='Closed Coal', is_active=False)

    def test_filter_by_kind(self):
        self.assertEqual(ProviderSearchService.search(kind='transport'), [self.transport])

    def test_inactive_providers_hidden(self):
        self.assertNotIn(self.inactive, ProviderSearchService.search())

    def test_free_text_matches_company(self):
        self.assertEqual(ProviderSearchService.search(query='jharia'), [self.coal])

    def test_capability_case_insensitive(self):
        self.assertEqual(ProviderSearchService.search(capability='indian_coal'), [self.coal])

    def test_location_filters(self):
        self.assertEqual(ProviderSearchService.search(state='bihar'), [self.transport])
        self.assertEqual(ProviderSearchService.search(city='Patna', kind='coal'), [])

    def test_rating_summary(self):
        manufacturer = TestDataFactory.create_user()
        for score in (4, 5):
            order = TestDataFactory.create_order(manufacturer, self.coal)
            TestDataFactory.create_rating(order, rating=score)
        summary = ProviderSearchService.summary(self.coal)
        self.assertEqual(summary['rating_count'], 2)
        self.assertEqual(summary['average_rating'], 4.5)
        self.assertIsNone(ProviderSearchService.summary(self.transport)['average_rating'])


class ProviderAPITests(TestCase):

    def setUp(self):
        self.client = APIClient()
        self.provider = TestDataFactory.create_provider(company_name='Jharia Coal', capabilities=['indian_coal'])

    def test_public_search(self):
        response = self.client.get('/api/providers/', {'kind': 'coal', 'capability': 'indian_coal'})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data['data']), 1)
        self.assertEqual(response.data['data'][0]['company_name'], 'Jharia Coal')

    def test_search_rejects_unknown_kind(self):
        response = self.client.get('/api/providers/', {'kind': 'steel'})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_public_detail(self):
        response = self.client.get(f'/api/providers/{self.provider.id}/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['data']['rating_summary']['rating_count'], 0)

    def test_register_provider(self):
        user = TestDataFactory.create_user(role='labour_contractor')
        client = AuthenticatedAPIClient().authenticate_user(user)
        response = client.post('/api/providers/register/', {
            'company_name': 'Kisan Labour',
            'contact_name': 'Ramesh',
            'city': 'Gaya',
            'district': 'Gaya',
            'state': 'Bihar',
            'pincode': '823001',
            'capabilities': ['molders', 'stackers'],
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['data']['kind'], 'labour')
        self.assertTrue(Provider.objects.filter(user=user).exists())

    def test_register_requires_capabilities(self):
        user = TestDataFactory.create_user(role='coal_provider')
        client = AuthenticatedAPIClient().authenticate_user(user)
        response = client.post('/api/providers/register/', {
            'company_name': 'Coal Co', 'contact_name': 'A', 'city': 'X', 'district': 'X',
            'state': 'X', 'pincode': '1', 'capabilities': [],
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('capabilities', response.data['errors'])

    def test_nepal_requires_pan(self):
        user = TestDataFactory.create_user(role='coal_provider')
        client = AuthenticatedAPIClient().authenticate_user(user)
        response = client.post('/api/providers/register/', {
            'company_name': 'Coal Co', 'contact_name': 'A', 'city': 'Biratnagar', 'district': 'Morang',
            'state': 'Koshi', 'pincode': '56613', 'country': 'Nepal', 'capabilities': ['indian_coal'],
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('pan_no', response.data['errors'])

    def test_manufacturer_cannot_register_provider(self):
        client = AuthenticatedAPIClient().authenticate_user(TestDataFactory.create_user())
        response = client.post('/api/providers/register/', {}, format='json')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_my_profile_update(self):
        client = AuthenticatedAPIClient().authenticate_user(self.provider.user)
        response = client.patch('/api/providers/me/', {'capacity': '1000 MT'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.provider.refresh_from_db()
        self.assertEqual(self.provider.capacity, '1000 MT')

    def test_my_profile_missing(self):
        user = TestDataFactory.create_user(role='transport_provider')
        client = AuthenticatedAPIClient().authenticate_user(user)
        response = client.get('/api/providers/me/')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_manufacturer_register_and_profile(self):
        user = TestDataFactory.create_user(role='manufacturer')
        client = AuthenticatedAPIClient().authenticate_user(user)
        response = client.post('/api/providers/manufacturers/register/', {
            'name': 'Rajesh', 'company_name': 'Ganesh Bricks', 'district': 'Patna', 'state': 'Bihar',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        response = client.get('/api/providers/manufacturers/me/')
        self.assertEqual(response.data['data']['company_name'], 'Ganesh Bricks')


class CreateSampleDataCommandTests(TestCase):

    def test_command_is_idempotent(self):
        call_command('create_sample_data', stdout=StringIO())
        call_command('create_sample_data', stdout=StringIO())
        self.assertEqual(Provider.objects.count(), 3)
        self.assertEqual(Manufacturer.objects.count(), 2)
        self.assertEqual(Product.objects.count(), 2)
        self.assertEqual(CustomerProfile.objects.count(), 1)
