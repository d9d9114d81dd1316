"""
Tests for the manufacturer product catalogue and public product browsing
"""
from decimal import Decimal

from django.core.exceptions import ValidationError
from django.test import TestCase
from rest_framework import status
from rest_framework.test import APIClient

from customers.services import CustomerOrderService
from products.enums import ErrorMessages
from products.models import Product
from products.services import ProductService
from project.test_utils import TestDataFactory, AuthenticatedAPIClient


class ProductServiceTests(TestCase):

    def setUp(self):
        self.manufacturer = TestDataFactory.create_manufacturer()

    def test_create_defaults_price_unit(self):
        product = ProductService.create_product(
            self.manufacturer, name='Fly Ash Bricks', category='fly_ash_bricks', price=Decimal('6.00'), price_unit=''
        )
        self.assertEqual(product.price_unit, 'per piece')
        self.assertTrue(product.is_available)

    def test_create_rejects_short_name_and_free_price(self):
        with self.assertRaises(ValidationError):
            ProductService.create_product(self.manufacturer, name='B', category='other', price=Decimal('1'))
        with self.assertRaises(ValidationError):
            ProductService.create_product(self.manufacturer, name='Bricks', category='other', price=Decimal('0'))
        self.assertFalse(Product.objects.exists())

    def test_update_requires_owner(self):
        product = TestDataFactory.create_product(self.manufacturer)
        with self.assertRaises(ValidationError):
            ProductService.update_product(product, TestDataFactory.create_manufacturer(), price=Decimal('1'))

    def test_set_availability_flips_when_not_given(self):
        product = TestDataFactory.create_product(self.manufacturer)
        self.assertFalse(ProductService.set_availability(product, self.manufacturer).is_available)
        self.assertTrue(ProductService.set_availability(product, self.manufacturer).is_available)
        self.assertFalse(ProductService.set_availability(product, self.manufacturer, False).is_available)

    def test_browse_hides_unavailable_products(self):
        shown = TestDataFactory.create_product(self.manufacturer, category='cement', name='OPC Cement')
        TestDataFactory.create_product(self.manufacturer, is_available=False)
        self.assertEqual(ProductService.browse(), [shown])
        self.assertEqual(ProductService.browse(category='clay_bricks'), [])
        self.assertEqual(ProductService.browse(query='opc'), [shown])

    def test_product_with_orders_cannot_be_deleted(self):
        product = TestDataFactory.create_product(self.manufacturer)
        customer = TestDataFactory.create_customer()
        quotation = TestDataFactory.create_accepted_quotation(customer, product)
        CustomerOrderService.place_order(customer, quotation, 'Site 4, Danapur', '+919811112222')

        with self.assertRaises(ValidationError) as ctx:
            ProductService.delete_product(product, self.manufacturer)
        self.assertEqual(ctx.exception.messages, [ErrorMessages.HAS_ORDERS])
        self.assertTrue(Product.objects.filter(id=product.id).exists())


class ProductAPITests(TestCase):

    def setUp(self):
        self.manufacturer = TestDataFactory.create_manufacturer()
        self.client = AuthenticatedAPIClient().authenticate_user(self.manufacturer)

    def test_create_and_list_own_products(self):
        response = self.client.post('/api/products/mine/', {
            'name': 'Red Clay Bricks',
            'category': 'clay_bricks',
            'price': '8.50',
            'stock_quantity': 50000,
            'dimensions': '230x110x75 mm',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['data']['manufacturer'], self.manufacturer.id)
        self.assertEqual(response.data['data']['price_unit'], 'per piece')

        TestDataFactory.create_product(TestDataFactory.create_manufacturer())
        response = self.client.get('/api/products/mine/')
        self.assertEqual(len(response.data['data']), 1)

    def test_create_validation(self):
        response = self.client.post('/api/products/mine/', {
            'name': 'X', 'category': 'bricks', 'price': '-1',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(set(response.data['errors']), {'name', 'category', 'price'})

    def test_providers_cannot_create_products(self):
        provider = TestDataFactory.create_provider()
        client = AuthenticatedAPIClient().authenticate_user(provider.user)
        response = client.post('/api/products/mine/', {'name': 'Coal', 'category': 'other', 'price': '1'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_public_browse_and_detail(self):
        product = TestDataFactory.create_product(self.manufacturer)
        hidden = TestDataFactory.create_product(self.manufacturer, is_available=False)
        client = APIClient()

        response = client.get('/api/products/', {'manufacturer': self.manufacturer.id})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([row['id'] for row in response.data['data']], [product.id])

        self.assertEqual(client.get(f'/api/products/{product.id}/').status_code, status.HTTP_200_OK)
        self.assertEqual(client.get(f'/api/products/{hidden.id}/').status_code, status.HTTP_404_NOT_FOUND)
        # the owner still sees an unavailable product
        self.assertEqual(self.client.get(f'/api/products/{hidden.id}/').status_code, status.HTTP_200_OK)

    def test_owner_updates_and_deletes(self):
        product = TestDataFactory.create_product(self.manufacturer)
        response = self.client.patch(f'/api/products/{product.id}/', {'price': '9.25'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        product.refresh_from_db()
        self.assertEqual(product.price, Decimal('9.25'))

        response = self.client.delete(f'/api/products/{product.id}/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(Product.objects.filter(id=product.id).exists())

    def test_other_manufacturer_cannot_edit(self):
        product = TestDataFactory.create_product(self.manufacturer)
        client = AuthenticatedAPIClient().authenticate_user(TestDataFactory.create_manufacturer())
        response = client.patch(f'/api/products/{product.id}/', {'price': '1.00'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        response = client.delete(f'/api/products/{product.id}/')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertTrue(Product.objects.filter(id=product.id).exists())

    def test_customer_cannot_edit(self):
        product = TestDataFactory.create_product(self.manufacturer)
        client = AuthenticatedAPIClient().authenticate_user(TestDataFactory.create_customer())
        response = client.patch(f'/api/products/{product.id}/', {'price': '1.00'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_toggle_availability(self):
        product = TestDataFactory.create_product(self.manufacturer)
        response = self.client.post(f'/api/products/{product.id}/availability/', {}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(response.data['data']['is_available'])

        response = self.client.post(f'/api/products/{product.id}/availability/', {'is_available': True}, format='json')
        self.assertTrue(response.data['data']['is_available'])

    def test_toggle_foreign_product_not_found(self):
        product = TestDataFactory.create_product(TestDataFactory.create_manufacturer())
        response = self.client.post(f'/api/products/{product.id}/availability/', {}, format='json')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
