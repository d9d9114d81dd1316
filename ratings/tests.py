"""
Tests for provider ratings tied to orders
"""
from django.core.exceptions import ValidationError
from django.test import TestCase
from rest_framework import status

from project.test_utils import TestDataFactory, AuthenticatedAPIClient
from ratings.models import Rating
from ratings.services import RatingService


class RatingServiceTests(TestCase):

    def setUp(self):
        self.manufacturer = TestDataFactory.create_manufacturer()
        self.provider = TestDataFactory.create_provider()
        self.order = TestDataFactory.create_order(self.manufacturer, self.provider)

    def test_create_rating_fills_sub_ratings(self):
        rating = RatingService.create_rating(self.manufacturer, self.provider, self.order, 4, review_text='Good coal')
        self.assertEqual(rating.quality_rating, 4)
        self.assertEqual(rating.delivery_rating, 4)
        self.assertEqual(rating.service_rating, 4)
        self.assertTrue(rating.would_recommend)
        self.assertFalse(rating.is_verified)

    def test_low_rating_not_recommended(self):
        rating = RatingService.create_rating(self.manufacturer, self.provider, self.order, 3)
        self.assertFalse(rating.would_recommend)

    def test_explicit_sub_ratings_kept(self):
        rating = RatingService.create_rating(
            self.manufacturer, self.provider, self.order, 5, delivery_rating=2, would_recommend=False
        )
        self.assertEqual(rating.delivery_rating, 2)
        self.assertFalse(rating.would_recommend)

    def test_order_of_another_provider_rejected(self):
        other = TestDataFactory.create_provider()
        with self.assertRaises(ValidationError):
            RatingService.create_rating(self.manufacturer, other, self.order, 5)
        self.assertFalse(Rating.objects.exists())

    def test_order_required(self):
        with self.assertRaises(ValidationError):
            RatingService.create_rating(self.manufacturer, self.provider, None, 5)

    def test_rating_out_of_range(self):
        with self.assertRaises(ValidationError):
            RatingService.create_rating(self.manufacturer, self.provider, self.order, 6)

    def test_model_clean_checks_order_parties(self):
        stranger = TestDataFactory.create_manufacturer()
        rating = Rating(manufacturer=stranger, provider=self.provider, order=self.order, rating=5)
        with self.assertRaises(ValidationError) as ctx:
            rating.full_clean()
        self.assertIn('order', ctx.exception.message_dict)


class RatingAPITests(TestCase):

    def setUp(self):
        self.manufacturer = TestDataFactory.create_manufacturer()
        self.provider = TestDataFactory.create_provider()
        order = TestDataFactory.create_order(self.manufacturer, self.provider)
        self.rating = TestDataFactory.create_rating(order, rating=5, review_title='Reliable')

    def test_provider_lists_received_ratings(self):
        client = AuthenticatedAPIClient().authenticate_user(self.provider.user)
        response = client.get('/api/ratings/provider/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data['data']), 1)
        self.assertEqual(response.data['data'][0]['review_title'], 'Reliable')
        self.assertEqual(response.data['data'][0]['order_number'], self.rating.order.order_number)

    def test_other_provider_sees_nothing(self):
        other = TestDataFactory.create_provider()
        client = AuthenticatedAPIClient().authenticate_user(other.user)
        response = client.get('/api/ratings/provider/')
        self.assertEqual(response.data['data'], [])

    def test_manufacturer_forbidden(self):
        client = AuthenticatedAPIClient().authenticate_user(self.manufacturer)
        response = client.get('/api/ratings/provider/')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
