"""
Tests for provider responses to inquiries and the numbered response history
"""
from django.core.exceptions import ValidationError
from django.test import TestCase
from rest_framework import status

from inquiries.enums import InquiryStatus, ResponseType
from inquiries.models import InquiryResponseHistory
from inquiries.services import InquiryResponseService
from project.test_utils import TestDataFactory, AuthenticatedAPIClient


class InquiryResponseServiceTests(TestCase):

    def setUp(self):
        self.manufacturer = TestDataFactory.create_manufacturer()
        self.provider = TestDataFactory.create_provider()
        self.inquiry = TestDataFactory.create_inquiry(self.manufacturer, self.provider)

    def respond(self, text, edit=False):
        action = InquiryResponseService.edit_response if edit else InquiryResponseService.add_response
        return action(self.inquiry, self.provider, text, self.provider.user)

    def test_first_response_updates_inquiry(self):
        result = self.respond('  We can supply 100 MT  ')
        self.inquiry.refresh_from_db()
        self.assertEqual(result['response_number'], 1)
        self.assertEqual(self.inquiry.status, InquiryStatus.RESPONDED)
        self.assertEqual(self.inquiry.provider_response, 'We can supply 100 MT')
        self.assertIsNotNone(self.inquiry.provider_response_date)
        self.assertEqual(self.inquiry.responded_by, self.provider.user)

    def test_responses_are_numbered_and_only_latest_is_current(self):
        self.respond('First answer')
        self.respond('Second answer')
        result = self.respond('Corrected answer', edit=True)

        history = list(self.inquiry.response_history.order_by('response_number'))
        self.assertEqual([h.response_number for h in history], [1, 2, 3])
        self.assertEqual([h.is_current_response for h in history], [False, False, True])
        self.assertEqual(result['history'].response_type, ResponseType.TEXT_RESPONSE_EDITED)
        self.assertEqual(history[0].manufacturer, self.manufacturer)

    def test_edit_without_previous_response_rejected(self):
        with self.assertRaises(ValidationError):
            self.respond('Edited', edit=True)
        self.assertFalse(InquiryResponseHistory.objects.exists())

    def test_empty_response_rejected(self):
        with self.assertRaises(ValidationError):
            self.respond('   ')

    def test_other_provider_cannot_respond(self):
        other = TestDataFactory.create_provider()
        with self.assertRaises(ValidationError):
            InquiryResponseService.add_response(self.inquiry, other, 'Hello', other.user)


class InquiryAPITests(TestCase):

    def setUp(self):
        self.manufacturer = TestDataFactory.create_manufacturer()
        self.provider = TestDataFactory.create_provider()
        self.inquiry = TestDataFactory.create_inquiry(self.manufacturer, self.provider)
        self.client = AuthenticatedAPIClient().authenticate_user(self.provider.user)

    def test_provider_lists_own_inquiries(self):
        other = TestDataFactory.create_provider()
        TestDataFactory.create_inquiry(self.manufacturer, other)

        response = self.client.get('/api/inquiries/provider/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([row['id'] for row in response.data['data']], [self.inquiry.id])
        self.assertEqual(response.data['data'][0]['status_badge']['bucket'], 'neutral')

    def test_status_filter(self):
        response = self.client.get('/api/inquiries/provider/', {'status': 'responded'})
        self.assertEqual(response.data['data'], [])

    def test_respond_and_edit(self):
        response = self.client.post(f'/api/inquiries/{self.inquiry.id}/respond/', {'response': 'Available'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['data']['response']['response_number'], 1)

        response = self.client.post(f'/api/inquiries/{self.inquiry.id}/edit-response/', {'response': 'Available next week'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['data']['response']['response_type'], 'text_response_edited')
        self.assertEqual(response.data['data']['inquiry']['provider_response'], 'Available next week')

    def test_edit_before_respond_is_400(self):
        response = self.client.post(f'/api/inquiries/{self.inquiry.id}/edit-response/', {'response': 'x'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(response.data['success'])

    def test_respond_to_other_providers_inquiry_is_404(self):
        other = TestDataFactory.create_provider()
        inquiry = TestDataFactory.create_inquiry(self.manufacturer, other)
        response = self.client.post(f'/api/inquiries/{inquiry.id}/respond/', {'response': 'x'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_manufacturer_cannot_respond(self):
        client = AuthenticatedAPIClient().authenticate_user(self.manufacturer)
        response = client.post(f'/api/inquiries/{self.inquiry.id}/respond/', {'response': 'x'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_history_visible_to_both_parties_only(self):
        InquiryResponseService.add_response(self.inquiry, self.provider, 'Answer', self.provider.user)

        for user in (self.manufacturer, self.provider.user):
            client = AuthenticatedAPIClient().authenticate_user(user)
            response = client.get(f'/api/inquiries/{self.inquiry.id}/history/')
            self.assertEqual(response.status_code, status.HTTP_200_OK)
            self.assertEqual(len(response.data['data']), 1)

        stranger = TestDataFactory.create_manufacturer()
        client = AuthenticatedAPIClient().authenticate_user(stranger)
        response = client.get(f'/api/inquiries/{self.inquiry.id}/history/')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_provider_response_history(self):
        InquiryResponseService.add_response(self.inquiry, self.provider, 'Answer', self.provider.user)
        response = self.client.get('/api/inquiries/provider/history/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['data'][0]['response_text'], 'Answer')
