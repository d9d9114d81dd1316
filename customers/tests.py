"""
Tests for customer profiles, customer inquiries, product quotations,
customer orders and the admin customer analytics
"""
from datetime import timedelta
from decimal import Decimal

from django.core.exceptions import ValidationError
from django.test import TestCase
from django.utils import timezone
from rest_framework import status

from customers.enums import ErrorMessages
from customers.models import CustomerInquiry, ProductQuotation, CustomerOrder, CustomerProfile
from customers.services import (
    CustomerInquiryService, ProductQuotationService, CustomerOrderService, CustomerAnalyticsService
)
from project.test_utils import TestDataFactory, AuthenticatedAPIClient


class CustomerInquiryServiceTests(TestCase):

    def setUp(self):
        self.customer = TestDataFactory.create_customer()
        self.manufacturer = TestDataFactory.create_manufacturer()

    def test_inquiry_only_to_manufacturers(self):
        provider = TestDataFactory.create_provider()
        with self.assertRaises(ValidationError):
            CustomerInquiryService.create_inquiry(self.customer, provider.user, 'Bricks', 'Need 10k bricks')

    def test_respond_resolves(self):
        inquiry = CustomerInquiryService.create_inquiry(self.customer, self.manufacturer, 'Bricks', 'Price?')
        self.assertEqual(inquiry.status, 'new')
        inquiry = CustomerInquiryService.respond(inquiry, self.manufacturer, '₹8 per piece')
        self.assertEqual(inquiry.status, 'resolved')
        self.assertIsNotNone(inquiry.responded_at)

    def test_respond_by_other_manufacturer_rejected(self):
        inquiry = CustomerInquiryService.create_inquiry(self.customer, self.manufacturer, 'Bricks', 'Price?')
        with self.assertRaises(ValidationError):
            CustomerInquiryService.respond(inquiry, TestDataFactory.create_manufacturer(), 'No')

    def test_statistics(self):
        for status_value in ('new', 'new', 'in_progress', 'closed'):
            CustomerInquiry.objects.create(
                customer=self.customer, manufacturer=self.manufacturer,
                subject='s', message='m', status=status_value
            )
        CustomerInquiry.objects.create(
            customer=self.customer, manufacturer=TestDataFactory.create_manufacturer(), subject='s', message='m'
        )
        self.assertEqual(CustomerInquiryService.statistics(self.manufacturer), {
            'new': 2, 'in_progress': 1, 'resolved': 0, 'closed': 1, 'total': 4,
        })


class ProductQuotationServiceTests(TestCase):

    def setUp(self):
        self.customer = TestDataFactory.create_customer()
        self.manufacturer = TestDataFactory.create_manufacturer()
        self.product = TestDataFactory.create_product(self.manufacturer, price=Decimal('8.50'))

    def test_request_uses_catalogue_price(self):
        quotation = ProductQuotationService.request_quotation(self.customer, self.product, 2000)
        self.assertEqual(quotation.manufacturer, self.manufacturer)
        self.assertEqual(quotation.quoted_price, Decimal('8.50'))
        self.assertEqual(quotation.total_amount, Decimal('17000.00'))
        self.assertEqual(quotation.status, 'pending')

    def test_unavailable_product_cannot_be_quoted(self):
        self.product.is_available = False
        self.product.save()
        with self.assertRaises(ValidationError):
            ProductQuotationService.request_quotation(self.customer, self.product, 10)

    def test_respond_accepts_with_offer(self):
        quotation = ProductQuotationService.request_quotation(self.customer, self.product, 2000)
        quotation = ProductQuotationService.respond(
            quotation, self.manufacturer, Decimal('8.00'), response_quantity=2500, response_message='Bulk rate'
        )
        self.assertEqual(quotation.status, 'accepted')
        self.assertEqual(quotation.total_amount, Decimal('20000.00'))
        self.assertIsNotNone(quotation.responded_at)

    def test_answered_quotation_cannot_be_answered_again(self):
        quotation = ProductQuotationService.request_quotation(self.customer, self.product, 10)
        ProductQuotationService.reject(quotation, self.manufacturer, 'Out of stock')
        with self.assertRaises(ValidationError):
            ProductQuotationService.respond(quotation, self.manufacturer, Decimal('8.00'))


class CustomerOrderServiceTests(TestCase):

    def setUp(self):
        self.customer = TestDataFactory.create_customer()
        self.manufacturer = TestDataFactory.create_manufacturer()
        self.product = TestDataFactory.create_product(self.manufacturer, price=Decimal('8.50'))

    def place(self, quotation, customer=None):
        return CustomerOrderService.place_order(customer or self.customer, quotation, 'Site 4, Danapur', '+919811112222')

    def test_order_takes_offer_price_and_quantity(self):
        quotation = TestDataFactory.create_accepted_quotation(
            self.customer, self.product, quantity=1000, response_price=Decimal('8.00'), response_quantity=1200
        )
        order = self.place(quotation)
        self.assertEqual(order.status, 'pending')
        self.assertEqual(order.price, Decimal('8.00'))
        self.assertEqual(order.quantity, 1200)
        self.assertEqual(order.total_amount, Decimal('9600.00'))
        self.assertEqual(order.manufacturer, self.manufacturer)

    def test_pending_quotation_cannot_be_ordered(self):
        quotation = ProductQuotationService.request_quotation(self.customer, self.product, 10)
        with self.assertRaises(ValidationError) as ctx:
            self.place(quotation)
        self.assertEqual(ctx.exception.messages, [ErrorMessages.QUOTATION_NOT_ACCEPTED])

    def test_expired_offer_cannot_be_ordered(self):
        quotation = TestDataFactory.create_accepted_quotation(
            self.customer, self.product, offer_expiry=timezone.now() - timedelta(hours=1)
        )
        with self.assertRaises(ValidationError) as ctx:
            self.place(quotation)
        self.assertEqual(ctx.exception.messages, [ErrorMessages.OFFER_EXPIRED])
        self.assertFalse(CustomerOrder.objects.exists())

    def test_quotation_ordered_once(self):
        quotation = TestDataFactory.create_accepted_quotation(self.customer, self.product)
        self.place(quotation)
        with self.assertRaises(ValidationError):
            self.place(quotation)

    def test_other_customer_cannot_order(self):
        quotation = TestDataFactory.create_accepted_quotation(self.customer, self.product)
        with self.assertRaises(ValidationError):
            self.place(quotation, customer=TestDataFactory.create_customer())

    def test_update_recomputes_total(self):
        order = self.place(TestDataFactory.create_accepted_quotation(self.customer, self.product, quantity=100))
        order = CustomerOrderService.update_order(order, self.customer, quantity=300)
        self.assertEqual(order.total_amount, Decimal('2550.00'))

    def test_cancel_only_while_pending(self):
        order = self.place(TestDataFactory.create_accepted_quotation(self.customer, self.product))
        CustomerOrderService.update_status(order, self.manufacturer, 'processing')
        with self.assertRaises(ValidationError):
            CustomerOrderService.cancel_order(order, self.customer)
        with self.assertRaises(ValidationError):
            CustomerOrderService.update_order(order, self.customer, quantity=5)

    def test_status_transitions(self):
        order = self.place(TestDataFactory.create_accepted_quotation(self.customer, self.product))
        with self.assertRaises(ValidationError):
            CustomerOrderService.update_status(order, self.manufacturer, 'delivered')
        CustomerOrderService.update_status(order, self.manufacturer, 'processing')
        result = CustomerOrderService.update_status(order, self.manufacturer, 'shipped', tracking_number='TRK-42')
        self.assertEqual(result['old_status'], 'processing')
        self.assertEqual(result['order'].tracking_number, 'TRK-42')


class CustomerAnalyticsServiceTests(TestCase):

    def test_groups_customers(self):
        TestDataFactory.create_customer(state='Bihar', category='Builder')
        TestDataFactory.create_customer(state='Bihar', category='')
        TestDataFactory.create_customer(state='Uttar Pradesh', category='Builder')

        result = CustomerAnalyticsService.analytics()
        self.assertEqual(result['total_customers'], 3)
        self.assertEqual(result['by_state'], {'Bihar': 2, 'Uttar Pradesh': 1})
        self.assertEqual(result['by_category'], {'Builder': 2, 'Unknown': 1})
        month = timezone.localtime().strftime('%Y-%m')
        self.assertEqual(result['joined_by_month'], {month: 3})


class CustomerAPITests(TestCase):

    def setUp(self):
        self.customer = TestDataFactory.create_customer()
        self.manufacturer = TestDataFactory.create_manufacturer()
        self.product = TestDataFactory.create_product(self.manufacturer, price=Decimal('8.50'))
        self.customer_client = AuthenticatedAPIClient().authenticate_user(self.customer)
        self.manufacturer_client = AuthenticatedAPIClient().authenticate_user(self.manufacturer)

    def test_profile_save_and_read(self):
        user = TestDataFactory.create_user(role='customer', name='Anita')
        client = AuthenticatedAPIClient().authenticate_user(user)
        self.assertEqual(client.get('/api/customers/me/').status_code, status.HTTP_404_NOT_FOUND)

        response = client.put('/api/customers/me/', {'state': 'Bihar', 'category': 'Contractor'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['data']['name'], 'Anita')
        self.assertEqual(response.data['data']['phone'], user.phone_number)
        self.assertEqual(CustomerProfile.objects.get(user=user).category, 'Contractor')

    def test_inquiry_flow(self):
        response = self.customer_client.post('/api/customers/inquiries/', {
            'manufacturer': self.manufacturer.id, 'subject': 'Fly ash bricks', 'message': 'Do you deliver to Danapur?',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        inquiry_id = response.data['data']['id']

        response = self.manufacturer_client.get('/api/customers/inquiries/')
        self.assertEqual([row['id'] for row in response.data['data']], [inquiry_id])

        response = self.manufacturer_client.post(
            f'/api/customers/inquiries/{inquiry_id}/respond/', {'response': 'Yes'}, format='json'
        )
        self.assertEqual(response.data['data']['status'], 'resolved')

        response = self.manufacturer_client.post(
            f'/api/customers/inquiries/{inquiry_id}/status/', {'status': 'closed'}, format='json'
        )
        self.assertEqual(response.data['data']['old_status'], 'resolved')

        response = self.manufacturer_client.get('/api/customers/inquiries/statistics/')
        self.assertEqual(response.data['data']['closed'], 1)

    def test_manufacturer_cannot_send_customer_inquiry(self):
        response = self.manufacturer_client.post('/api/customers/inquiries/', {
            'manufacturer': self.manufacturer.id, 'subject': 's', 'message': 'm',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_quotation_order_and_cancel(self):
        response = self.customer_client.post('/api/customers/quotations/', {
            'product': self.product.id, 'quantity': 1000,
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        quotation_id = response.data['data']['id']

        response = self.customer_client.post('/api/customers/orders/', {
            'quotation': quotation_id, 'delivery_address': 'Danapur', 'contact_number': '+919811112222',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

        response = self.manufacturer_client.post(f'/api/customers/quotations/{quotation_id}/respond/', {
            'response_price': '8.00',
            'offer_expiry': (timezone.now() + timedelta(days=3)).isoformat(),
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['data']['status'], 'accepted')

        response = self.customer_client.post('/api/customers/orders/', {
            'quotation': quotation_id, 'delivery_address': 'Danapur', 'contact_number': '+919811112222',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        order_id = response.data['data']['id']
        self.assertEqual(Decimal(response.data['data']['total_amount']), Decimal('8000.00'))

        response = self.customer_client.patch(f'/api/customers/orders/{order_id}/', {'quantity': 500}, format='json')
        self.assertEqual(Decimal(response.data['data']['total_amount']), Decimal('4000.00'))

        response = self.customer_client.post(f'/api/customers/orders/{order_id}/cancel/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(CustomerOrder.objects.get(id=order_id).status, 'cancelled')

        response = self.manufacturer_client.get('/api/customers/orders/', {'status': 'cancelled'})
        self.assertEqual([row['id'] for row in response.data['data']], [order_id])

    def test_reject_quotation(self):
        quotation = ProductQuotationService.request_quotation(self.customer, self.product, 10)
        response = self.manufacturer_client.post(
            f'/api/customers/quotations/{quotation.id}/reject/', {'response_message': 'Sold out'}, format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(ProductQuotation.objects.get(id=quotation.id).status, 'rejected')

    def test_manufacturer_ships_order(self):
        quotation = TestDataFactory.create_accepted_quotation(self.customer, self.product)
        order = CustomerOrderService.place_order(self.customer, quotation, 'Danapur', '+919811112222')

        url = f'/api/customers/orders/{order.id}/status/'
        response = self.manufacturer_client.post(url, {'status': 'shipped'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('status', response.data['errors'])

        self.manufacturer_client.post(url, {'status': 'processing'}, format='json')
        response = self.manufacturer_client.post(url, {'status': 'shipped', 'tracking_number': 'TRK-1'}, format='json')
        self.assertEqual(response.data['data']['order']['tracking_number'], 'TRK-1')

        response = self.customer_client.post(f'/api/customers/orders/{order.id}/cancel/')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_other_manufacturer_sees_no_orders(self):
        quotation = TestDataFactory.create_accepted_quotation(self.customer, self.product)
        order = CustomerOrderService.place_order(self.customer, quotation, 'Danapur', '+919811112222')
        client = AuthenticatedAPIClient().authenticate_user(TestDataFactory.create_manufacturer())
        self.assertEqual(client.get('/api/customers/orders/').data['data'], [])
        response = client.post(f'/api/customers/orders/{order.id}/status/', {'status': 'processing'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_providers_have_no_access(self):
        provider = TestDataFactory.create_provider()
        client = AuthenticatedAPIClient().authenticate_user(provider.user)
        self.assertEqual(client.get('/api/customers/orders/').status_code, status.HTTP_403_FORBIDDEN)

    def test_analytics_admin_only(self):
        response = self.customer_client.get('/api/customers/analytics/')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

        admin = TestDataFactory.create_user(role='admin')
        client = AuthenticatedAPIClient().authenticate_user(admin)
        response = client.get('/api/customers/analytics/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['data']['total_customers'], 1)
