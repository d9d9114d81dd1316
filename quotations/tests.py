"""
Tests for provider quotes and manufacturer decisions on quotations
"""
from decimal import Decimal

from django.core.exceptions import ValidationError
from django.test import TestCase
from rest_framework import status

from project.test_utils import TestDataFactory, AuthenticatedAPIClient
from quotations.enums import QuotationStatus
from quotations.services import QuotationResponseService, QuotationStatusService, quotation_total


class QuotationTotalTests(TestCase):

    def test_total_is_rounded_to_paise(self):
        self.assertEqual(quotation_total(Decimal('2.5'), Decimal('10.333')), Decimal('25.83'))


class QuotationResponseServiceTests(TestCase):

    def setUp(self):
        self.manufacturer = TestDataFactory.create_manufacturer()
        self.provider = TestDataFactory.create_provider()
        self.quotation = TestDataFactory.create_quotation(
            self.manufacturer, self.provider, quantity=Decimal('20'), price_per_unit=Decimal('0')
        )

    def test_respond_computes_total_when_omitted(self):
        result = QuotationResponseService.respond(
            self.quotation, self.provider, price_per_unit=Decimal('8500'),
            delivery_timeline='7 days', validity_period=15
        )
        quotation = result['quotation']
        self.assertEqual(result['previous_status'], QuotationStatus.PENDING)
        self.assertEqual(quotation.status, QuotationStatus.QUOTED)
        self.assertEqual(quotation.total_amount, Decimal('170000.00'))
        self.assertEqual(quotation.validity_period, 15)
        self.assertIsNotNone(quotation.provider_response_date)

    def test_respond_keeps_explicit_total(self):
        result = QuotationResponseService.respond(
            self.quotation, self.provider, price_per_unit=Decimal('8500'), total_amount=Decimal('160000')
        )
        self.assertEqual(result['quotation'].total_amount, Decimal('160000'))

    def test_other_provider_cannot_respond(self):
        other = TestDataFactory.create_provider()
        with self.assertRaises(ValidationError):
            QuotationResponseService.respond(self.quotation, other, price_per_unit=Decimal('1'))

    def test_zero_price_rejected(self):
        with self.assertRaises(ValidationError):
            QuotationResponseService.respond(self.quotation, self.provider, price_per_unit=Decimal('0'))


class QuotationStatusServiceTests(TestCase):

    def setUp(self):
        self.manufacturer = TestDataFactory.create_manufacturer()
        self.provider = TestDataFactory.create_provider()
        self.quotation = TestDataFactory.create_quotation(self.manufacturer, self.provider)

    def test_manufacturer_accepts(self):
        result = QuotationStatusService.update_status(self.quotation, 'accepted', self.manufacturer)
        self.assertEqual(result['old_status'], 'pending')
        self.assertEqual(result['quotation'].status, 'accepted')

    def test_provider_statuses_not_allowed(self):
        with self.assertRaises(ValidationError):
            QuotationStatusService.update_status(self.quotation, 'quoted', self.manufacturer)

    def test_final_status_is_locked(self):
        QuotationStatusService.update_status(self.quotation, 'rejected', self.manufacturer)
        with self.assertRaises(ValidationError):
            QuotationStatusService.update_status(self.quotation, 'accepted', self.manufacturer)

    def test_other_manufacturer_rejected(self):
        other = TestDataFactory.create_manufacturer()
        with self.assertRaises(ValidationError):
            QuotationStatusService.update_status(self.quotation, 'accepted', other)


class QuotationAPITests(TestCase):

    def setUp(self):
        self.manufacturer = TestDataFactory.create_manufacturer()
        self.provider = TestDataFactory.create_provider()
        self.quotation = TestDataFactory.create_quotation(self.manufacturer, self.provider)
        self.provider_client = AuthenticatedAPIClient().authenticate_user(self.provider.user)
        self.manufacturer_client = AuthenticatedAPIClient().authenticate_user(self.manufacturer)

    def test_provider_lists_requests_with_pending_badge(self):
        response = self.provider_client.get('/api/quotations/provider/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data['data']), 1)
        self.assertEqual(response.data['data'][0]['status_badge']['status'], 'pending')

    def test_respond_makes_badge_received(self):
        response = self.provider_client.post(f'/api/quotations/{self.quotation.id}/respond/', {
            'price_per_unit': '9000.00',
            'payment_terms': '50% advance',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['data']['status'], 'quoted')
        self.assertEqual(response.data['data']['status_badge']['status'], 'received')
        self.assertEqual(response.data['data']['total_amount'], '90000.00')

    def test_respond_requires_price(self):
        response = self.provider_client.post(f'/api/quotations/{self.quotation.id}/respond/', {}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('price_per_unit', response.data['errors'])

    def test_respond_to_unknown_quotation(self):
        response = self.provider_client.post('/api/quotations/999999/respond/', {'price_per_unit': '1'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_manufacturer_updates_status(self):
        response = self.manufacturer_client.post(
            f'/api/quotations/{self.quotation.id}/status/', {'status': 'cancelled'}, format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['data']['new_status'], 'cancelled')
        self.assertEqual(response.data['data']['quotation']['status_badge']['bucket'], 'neutral')

    def test_manufacturer_cannot_set_quoted(self):
        response = self.manufacturer_client.post(
            f'/api/quotations/{self.quotation.id}/status/', {'status': 'quoted'}, format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_provider_cannot_update_status(self):
        response = self.provider_client.post(
            f'/api/quotations/{self.quotation.id}/status/', {'status': 'accepted'}, format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
