"""
Tests for order confirmation, the two status axes and their history
"""
from django.core.exceptions import ValidationError
from django.test import TestCase
from rest_framework import status

from orders.enums import OrderStatus, PaymentStatus, StatusAxis
from orders.models import Order, generate_order_number
from orders.services import OrderConfirmationService, OrderStatusTrackingService
from project.test_utils import TestDataFactory, AuthenticatedAPIClient


class OrderModelTests(TestCase):

    def test_order_number_generated_on_save(self):
        manufacturer = TestDataFactory.create_manufacturer()
        provider = TestDataFactory.create_provider()
        order = TestDataFactory.create_order(manufacturer, provider, order_number='')
        self.assertTrue(order.order_number.startswith('ORD-'))

    def test_generate_order_number_format(self):
        number = generate_order_number()
        self.assertRegex(number, r'^ORD-\d{13,}$')


class OrderConfirmationServiceTests(TestCase):

    def setUp(self):
        self.manufacturer = TestDataFactory.create_manufacturer()
        self.provider = TestDataFactory.create_provider()
        self.order = TestDataFactory.create_order(self.manufacturer, self.provider)

    def test_confirm_stamps_provider_fields(self):
        result = OrderConfirmationService.confirm_order(self.order, self.provider.user, provider_order_number='JCT-77')
        order = result['order']
        self.assertEqual(order.order_status, OrderStatus.CONFIRMED)
        self.assertTrue(order.confirmed_by_provider)
        self.assertIsNotNone(order.provider_confirmation_date)
        self.assertEqual(order.provider_order_number, 'JCT-77')
        self.assertEqual(result['status_history'].previous_status, 'pending')

    def test_manufacturer_cannot_confirm(self):
        with self.assertRaises(ValidationError):
            OrderConfirmationService.confirm_order(self.order, self.manufacturer)

    def test_cancelled_order_cannot_be_confirmed(self):
        self.order.order_status = OrderStatus.CANCELLED
        self.order.save()
        with self.assertRaises(ValidationError):
            OrderConfirmationService.confirm_order(self.order, self.provider.user)


class OrderStatusTrackingServiceTests(TestCase):

    def setUp(self):
        self.manufacturer = TestDataFactory.create_manufacturer()
        self.provider = TestDataFactory.create_provider()
        self.order = TestDataFactory.create_order(self.manufacturer, self.provider)

    def test_provider_walks_the_happy_path(self):
        for new_status in ('confirmed', 'processing', 'delivered', 'completed'):
            OrderStatusTrackingService.update_order_status(self.order, new_status, self.provider.user)
        self.order.refresh_from_db()
        self.assertEqual(self.order.order_status, 'completed')
        self.assertIsNotNone(self.order.actual_delivery_date)
        self.assertEqual(self.order.status_history.filter(axis=StatusAxis.ORDER).count(), 4)

    def test_manufacturer_may_only_cancel(self):
        with self.assertRaises(ValidationError):
            OrderStatusTrackingService.update_order_status(self.order, 'completed', self.manufacturer)
        result = OrderStatusTrackingService.update_order_status(self.order, 'cancelled', self.manufacturer)
        self.assertEqual(result['new_status'], 'cancelled')

    def test_invalid_transition(self):
        with self.assertRaises(ValidationError):
            OrderStatusTrackingService.update_order_status(self.order, 'completed', self.provider.user)

    def test_final_state_is_locked(self):
        OrderStatusTrackingService.update_order_status(self.order, 'cancelled', self.provider.user)
        with self.assertRaises(ValidationError):
            OrderStatusTrackingService.update_order_status(self.order, 'processing', self.provider.user)

    def test_manufacturer_cannot_attach_tracking_number(self):
        OrderStatusTrackingService.update_order_status(
            self.order, 'cancelled', self.manufacturer, tracking_number='TRK1'
        )
        self.assertEqual(self.order.tracking_number, '')

    def test_provider_attaches_tracking_number(self):
        result = OrderStatusTrackingService.update_order_status(
            self.order, 'processing', self.provider.user, tracking_number='TRK1'
        )
        self.assertEqual(result['context']['tracking_number'], 'TRK1')

    def test_stranger_cannot_update(self):
        stranger = TestDataFactory.create_provider()
        with self.assertRaises(ValidationError):
            OrderStatusTrackingService.update_order_status(self.order, 'confirmed', stranger.user)

    def test_admin_may_set_any_valid_transition(self):
        admin = TestDataFactory.create_user(role='admin')
        result = OrderStatusTrackingService.update_order_status(self.order, 'processing', admin)
        self.assertEqual(result['new_status'], 'processing')

    def test_payment_axis_is_independent(self):
        result = OrderStatusTrackingService.update_payment_status(self.order, 'completed', self.manufacturer)
        self.order.refresh_from_db()
        self.assertEqual(self.order.payment_status, PaymentStatus.COMPLETED)
        self.assertEqual(self.order.order_status, OrderStatus.PENDING)
        self.assertEqual(result['status_history'].axis, StatusAxis.PAYMENT)

    def test_invalid_payment_status(self):
        with self.assertRaises(ValidationError):
            OrderStatusTrackingService.update_payment_status(self.order, 'bounced', self.manufacturer)


class OrderAPITests(TestCase):

    def setUp(self):
        self.manufacturer = TestDataFactory.create_manufacturer()
        self.provider = TestDataFactory.create_provider()
        self.order = TestDataFactory.create_order(self.manufacturer, self.provider, order_status='processing')
        self.provider_client = AuthenticatedAPIClient().authenticate_user(self.provider.user)
        self.manufacturer_client = AuthenticatedAPIClient().authenticate_user(self.manufacturer)

    def test_unconfirmed_order_shows_pending(self):
        response = self.provider_client.get('/api/orders/provider/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        row = response.data['data'][0]
        self.assertEqual(row['order_status'], 'processing')
        self.assertEqual(row['order_status_badge']['status'], 'pending')

    def test_list_filters(self):
        response = self.provider_client.get('/api/orders/provider/', {'payment_status': 'paid'})
        self.assertEqual(response.data['data'], [])

    def test_confirm_then_badge_follows_stored_status(self):
        response = self.provider_client.post(f'/api/orders/{self.order.id}/confirm/', {'provider_order_number': 'P-1'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['data']['order_status_badge']['status'], 'confirmed')

    def test_confirm_other_providers_order_is_404(self):
        other = TestDataFactory.create_provider()
        client = AuthenticatedAPIClient().authenticate_user(other.user)
        response = client.post(f'/api/orders/{self.order.id}/confirm/', {}, format='json')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_update_status(self):
        response = self.provider_client.post(
            f'/api/orders/{self.order.id}/update-status/',
            {'status': 'delivered', 'tracking_number': 'TRK-9'},
            format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['data']['previous_status'], 'processing')
        self.assertEqual(response.data['data']['order']['tracking_number'], 'TRK-9')

    def test_manufacturer_cannot_complete(self):
        response = self.manufacturer_client.post(
            f'/api/orders/{self.order.id}/update-status/', {'status': 'completed'}, format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(response.data['success'])

    def test_manufacturer_completed_payment_shows_pending(self):
        response = self.manufacturer_client.post(
            f'/api/orders/{self.order.id}/payment-status/', {'payment_status': 'completed'}, format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['data']['new_status'], 'completed')
        self.assertEqual(response.data['data']['order']['payment_status_badge']['status'], 'pending')

    def test_status_history_by_axis(self):
        OrderStatusTrackingService.update_payment_status(self.order, 'paid', self.manufacturer)
        OrderStatusTrackingService.update_order_status(self.order, 'delivered', self.provider.user)

        response = self.manufacturer_client.get(f'/api/orders/{self.order.id}/status-history/', {'axis': 'payment'})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['data']['order_number'], self.order.order_number)
        self.assertEqual([h['new_status'] for h in response.data['data']['history']], ['paid'])

    def test_history_hidden_from_strangers(self):
        stranger = TestDataFactory.create_manufacturer()
        client = AuthenticatedAPIClient().authenticate_user(stranger)
        response = client.get(f'/api/orders/{self.order.id}/status-history/')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertTrue(Order.objects.filter(id=self.order.id).exists())
