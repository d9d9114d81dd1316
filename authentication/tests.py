"""
Tests for phone number / OTP login, token refresh and the profile endpoint
"""
from datetime import timedelta
from unittest import mock

import requests
from django.core.cache import cache
from django.core.exceptions import ValidationError
from django.test import TestCase, override_settings
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APIClient

from authentication.enums import OTPMessages
from authentication.models import CustomUser, PhoneOTP
from authentication.services import (
    OTPService, LoginService, SMSGateway, SMSGatewayError, normalize_phone_number
)
from project.test_utils import TestDataFactory, AuthenticatedAPIClient

PHONE = '+919812345678'


class PhoneNumberTests(TestCase):

    def test_normalize_strips_spaces_and_dashes(self):
        self.assertEqual(normalize_phone_number('+91 98123-45678'), PHONE)

    def test_invalid_phone_rejected(self):
        with self.assertRaises(ValidationError):
            normalize_phone_number('12ab')


@override_settings(SMS_GATEWAY_URL='', SMS_API_KEY='')
class OTPServiceTests(TestCase):

    def test_send_otp_creates_six_digit_code(self):
        otp = OTPService.send_otp(PHONE)
        self.assertEqual(len(otp.code), 6)
        self.assertTrue(otp.code.isdigit())
        self.assertFalse(otp.is_expired)

    def test_new_code_invalidates_previous(self):
        first = OTPService.send_otp(PHONE)
        OTPService.send_otp(PHONE)
        first.refresh_from_db()
        self.assertTrue(first.is_used)

    def test_verify_marks_code_used(self):
        otp = OTPService.send_otp(PHONE)
        OTPService.verify_otp(PHONE, otp.code)
        otp.refresh_from_db()
        self.assertTrue(otp.is_used)
        with self.assertRaises(ValidationError):
            OTPService.verify_otp(PHONE, otp.code)

    def test_wrong_code_counts_attempts(self):
        otp = OTPService.send_otp(PHONE)
        wrong = '000000' if otp.code != '000000' else '111111'
        with self.assertRaises(ValidationError):
            OTPService.verify_otp(PHONE, wrong)
        otp.refresh_from_db()
        self.assertEqual(otp.attempts, 1)

    @override_settings(OTP_MAX_ATTEMPTS=1)
    def test_too_many_attempts_blocks_correct_code(self):
        otp = OTPService.send_otp(PHONE)
        wrong = '000000' if otp.code != '000000' else '111111'
        with self.assertRaises(ValidationError):
            OTPService.verify_otp(PHONE, wrong)
        with self.assertRaises(ValidationError) as ctx:
            OTPService.verify_otp(PHONE, otp.code)
        self.assertIn('otp', ctx.exception.message_dict)

    def test_expired_code_rejected(self):
        otp = OTPService.send_otp(PHONE)
        PhoneOTP.objects.filter(pk=otp.pk).update(expires_at=timezone.now() - timedelta(minutes=1))
        with self.assertRaises(ValidationError):
            OTPService.verify_otp(PHONE, otp.code)


@override_settings(SMS_GATEWAY_URL='https://sms.example.com/API/V1', SMS_API_KEY='key', SMS_TEMPLATE_NAME='Login')
class SMSGatewayTests(TestCase):

    @mock.patch('authentication.services.requests.get')
    def test_send_otp_returns_session(self, mock_get):
        mock_get.return_value.json.return_value = {'Status': 'Success', 'Details': 'session-1'}
        self.assertEqual(SMSGateway.send_otp(PHONE, '123456'), 'session-1')
        url = mock_get.call_args[0][0]
        self.assertEqual(url, f'https://sms.example.com/API/V1/key/SMS/{PHONE}/123456/Login')

    @mock.patch('authentication.services.requests.get')
    def test_gateway_error_status(self, mock_get):
        mock_get.return_value.json.return_value = {'Status': 'Error', 'Details': 'Invalid API key'}
        with self.assertRaises(SMSGatewayError):
            SMSGateway.send_otp(PHONE, '123456')

    @mock.patch('authentication.services.requests.get', side_effect=requests.ConnectionError('down'))
    def test_network_failure(self, mock_get):
        with self.assertRaises(SMSGatewayError):
            SMSGateway.send_otp(PHONE, '123456')

    @mock.patch('authentication.services.requests.get')
    def test_send_otp_stores_gateway_session(self, mock_get):
        mock_get.return_value.json.return_value = {'Status': 'Success', 'Details': 'session-2'}
        otp = OTPService.send_otp(PHONE)
        self.assertEqual(otp.gateway_session, 'session-2')


@override_settings(SMS_GATEWAY_URL='', SMS_API_KEY='')
class LoginServiceTests(TestCase):

    def test_first_login_creates_user_with_role(self):
        otp = OTPService.send_otp(PHONE)
        result = LoginService.login_with_otp(PHONE, otp.code, role='coal_provider', name='Suresh')
        self.assertTrue(result['created'])
        self.assertEqual(result['user'].role, 'coal_provider')
        self.assertIn('access', result['tokens'])
        self.assertIn('refresh', result['tokens'])

    def test_existing_user_keeps_role(self):
        TestDataFactory.create_user(role='transport_provider', phone_number=PHONE)
        otp = OTPService.send_otp(PHONE)
        result = LoginService.login_with_otp(PHONE, otp.code, role='manufacturer')
        self.assertFalse(result['created'])
        self.assertEqual(result['user'].role, 'transport_provider')

    def test_admin_role_not_self_service(self):
        otp = OTPService.send_otp(PHONE)
        with self.assertRaises(ValidationError):
            LoginService.login_with_otp(PHONE, otp.code, role='admin')
        self.assertFalse(CustomUser.objects.filter(phone_number=PHONE).exists())

    def test_inactive_user_rejected(self):
        TestDataFactory.create_user(phone_number=PHONE, is_active=False)
        otp = OTPService.send_otp(PHONE)
        with self.assertRaises(ValidationError):
            LoginService.login_with_otp(PHONE, otp.code)

    @override_settings(OTP_MAX_ATTEMPTS=3)
    def test_failed_logins_count_towards_attempt_limit(self):
        otp = OTPService.send_otp(PHONE)
        wrong = '000000' if otp.code != '000000' else '111111'
        for _ in range(3):
            with self.assertRaises(ValidationError):
                LoginService.login_with_otp(PHONE, wrong)

        otp.refresh_from_db()
        self.assertEqual(otp.attempts, 3)

        with self.assertRaises(ValidationError) as ctx:
            LoginService.login_with_otp(PHONE, otp.code)
        self.assertEqual(ctx.exception.message_dict['otp'], [OTPMessages.TOO_MANY_ATTEMPTS])
        self.assertFalse(CustomUser.objects.filter(phone_number=PHONE).exists())

    def test_sign_up_as_customer(self):
        otp = OTPService.send_otp(PHONE)
        result = LoginService.login_with_otp(PHONE, otp.code, role='customer')
        self.assertTrue(result['user'].is_customer)
        self.assertFalse(result['user'].is_provider)


@override_settings(SMS_GATEWAY_URL='', SMS_API_KEY='', RATELIMIT_ENABLE=False)
class AuthAPITests(TestCase):

    def setUp(self):
        self.client = APIClient()

    def test_send_otp(self):
        response = self.client.post('/api/auth/send-otp/', {'phone_number': PHONE}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data['success'])
        self.assertEqual(response.data['data']['phone_number'], PHONE)

    def test_send_otp_invalid_phone(self):
        response = self.client.post('/api/auth/send-otp/', {'phone_number': 'abc'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(response.data['success'])
        self.assertIn('phone_number', response.data['errors'])

    def test_verify_otp_creates_account(self):
        otp = OTPService.send_otp(PHONE)
        response = self.client.post('/api/auth/verify-otp/', {
            'phone_number': PHONE,
            'otp': otp.code,
            'role': 'labour_contractor',
            'name': 'Ramesh',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertTrue(response.data['data']['created'])
        self.assertEqual(response.data['data']['user']['role'], 'labour_contractor')

    def test_verify_existing_account_returns_200(self):
        TestDataFactory.create_user(phone_number=PHONE)
        otp = OTPService.send_otp(PHONE)
        response = self.client.post('/api/auth/verify-otp/', {'phone_number': PHONE, 'otp': otp.code}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(response.data['data']['created'])

    def test_verify_wrong_otp(self):
        otp = OTPService.send_otp(PHONE)
        wrong = '000000' if otp.code != '000000' else '111111'
        response = self.client.post('/api/auth/verify-otp/', {'phone_number': PHONE, 'otp': wrong}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('otp', response.data['errors'])

    @override_settings(OTP_MAX_ATTEMPTS=2)
    def test_verify_locks_after_repeated_wrong_codes(self):
        otp = OTPService.send_otp(PHONE)
        wrong = '000000' if otp.code != '000000' else '111111'
        for _ in range(2):
            self.client.post('/api/auth/verify-otp/', {'phone_number': PHONE, 'otp': wrong}, format='json')

        response = self.client.post('/api/auth/verify-otp/', {'phone_number': PHONE, 'otp': otp.code}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['errors']['otp'], [OTPMessages.TOO_MANY_ATTEMPTS])
        self.assertFalse(CustomUser.objects.filter(phone_number=PHONE).exists())

    @mock.patch('authentication.api.views.OTPService.send_otp', side_effect=SMSGatewayError('down'))
    def test_send_otp_gateway_failure(self, mock_send):
        response = self.client.post('/api/auth/send-otp/', {'phone_number': PHONE}, format='json')
        self.assertEqual(response.status_code, status.HTTP_502_BAD_GATEWAY)

    def test_token_refresh_rotates(self):
        user = TestDataFactory.create_user()
        tokens = LoginService.tokens_for(user)
        response = self.client.post('/api/auth/token/refresh/', {'refresh': tokens['refresh']}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIn('access', response.data['data'])

    def test_token_refresh_invalid(self):
        response = self.client.post('/api/auth/token/refresh/', {'refresh': 'garbage'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_profile_get_and_patch(self):
        user = TestDataFactory.create_user(name='Old Name')
        client = AuthenticatedAPIClient().authenticate_user(user)
        response = client.get('/api/auth/me/')
        self.assertEqual(response.data['data']['user']['name'], 'Old Name')

        response = client.patch('/api/auth/me/', {'name': 'New Name', 'role': 'admin'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        user.refresh_from_db()
        self.assertEqual(user.name, 'New Name')
        self.assertEqual(user.role, 'manufacturer')

    def test_profile_requires_auth(self):
        response = self.client.get('/api/auth/me/')
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)


@override_settings(SMS_GATEWAY_URL='', SMS_API_KEY='', RATELIMIT_ENABLE=True)
class SendOTPRateLimitTests(TestCase):

    def setUp(self):
        cache.clear()

    def tearDown(self):
        cache.clear()

    def test_fourth_request_in_an_hour_is_blocked(self):
        client = APIClient()
        for _ in range(3):
            response = client.post('/api/auth/send-otp/', {'phone_number': PHONE}, format='json')
            self.assertEqual(response.status_code, status.HTTP_200_OK)
        response = client.post('/api/auth/send-otp/', {'phone_number': PHONE}, format='json')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
