"""
Phone number login: OTP issuing, SMS delivery and verification.
"""
import logging
import re
import secrets
from datetime import timedelta
from typing import Dict, Any, Optional

import requests
from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import transaction
from django.utils import timezone
from rest_framework_simplejwt.tokens import RefreshToken

from .enums import OTPMessages, UserRole, SELF_SERVICE_ROLES
from .models import CustomUser, PhoneOTP

logger = logging.getLogger(__name__)

PHONE_PATTERN = re.compile(r'^\+?[1-9][0-9]{9,14}$')


class SMSGatewayError(Exception):
    """The SMS gateway rejected the message or could not be reached."""


def normalize_phone_number(phone_number: str) -> str:
    cleaned = re.sub(r'[\s-]', '', phone_number or '')
    if not PHONE_PATTERN.match(cleaned):
        raise ValidationError({'phone_number': [OTPMessages.INVALID_PHONE]})
    return cleaned


class SMSGateway:
    """Thin client for the 2Factor style SMS API configured in settings."""

    @staticmethod
    def is_configured() -> bool:
        return bool(settings.SMS_GATEWAY_URL and settings.SMS_API_KEY)

    @staticmethod
    def send_otp(phone_number: str, code: str) -> str:
        url = "{base}/{key}/SMS/{phone}/{code}/{template}".format(
            base=settings.SMS_GATEWAY_URL.rstrip('/'),
            key=settings.SMS_API_KEY,
            phone=phone_number,
            code=code,
            template=settings.SMS_TEMPLATE_NAME,
        )
        try:
            response = requests.get(url, timeout=settings.SMS_TIMEOUT_SECONDS)
            response.raise_for_status()
            payload = response.json()
        except (requests.RequestException, ValueError) as exc:
            raise SMSGatewayError(str(exc)) from exc

        if payload.get('Status') != 'Success':
            raise SMSGatewayError(payload.get('Details') or 'SMS gateway returned an error')
        return str(payload.get('Details', ''))


class OTPService:

    @staticmethod
    def generate_code() -> str:
        return f"{secrets.randbelow(10 ** 6):06d}"

    @staticmethod
    def send_otp(phone_number: str) -> PhoneOTP:
        """
        Issue a fresh OTP for the phone number and deliver it by SMS.

        Earlier unused codes for the same number are invalidated. When no SMS
        gateway is configured the code is only written to the log, which is
        what local development and the test suite rely on.
        """
        phone_number = normalize_phone_number(phone_number)
        code = OTPService.generate_code()

        session = ''
        if SMSGateway.is_configured():
            session = SMSGateway.send_otp(phone_number, code)
            logger.info("OTP sent to %s via SMS gateway", phone_number)
        else:
            logger.info("SMS gateway not configured, OTP for %s is %s", phone_number, code)

        with transaction.atomic():
            PhoneOTP.objects.filter(phone_number=phone_number, is_used=False).update(is_used=True)
            otp = PhoneOTP.objects.create(
                phone_number=phone_number,
                code=code,
                gateway_session=session,
                expires_at=timezone.now() + timedelta(minutes=settings.OTP_TTL_MINUTES),
            )
        return otp

    @staticmethod
    def verify_otp(phone_number: str, code: str) -> PhoneOTP:
        phone_number = normalize_phone_number(phone_number)
        otp = (
            PhoneOTP.objects
            .filter(phone_number=phone_number, is_used=False)
            .order_by('-created_at')
            .first()
        )
        if otp is None or otp.is_expired:
            raise ValidationError({'otp': [OTPMessages.INVALID]})

        if otp.attempts >= settings.OTP_MAX_ATTEMPTS:
            raise ValidationError({'otp': [OTPMessages.TOO_MANY_ATTEMPTS]})

        if not secrets.compare_digest(otp.code, str(code)):
            otp.attempts += 1
            otp.save(update_fields=['attempts'])
            raise ValidationError({'otp': [OTPMessages.INVALID]})

        otp.is_used = True
        otp.save(update_fields=['is_used'])
        return otp


class LoginService:

    @staticmethod
    def tokens_for(user: CustomUser) -> Dict[str, str]:
        refresh = RefreshToken.for_user(user)
        return {
            'refresh': str(refresh),
            'access': str(refresh.access_token),
        }

    @staticmethod
    def login_with_otp(phone_number: str, code: str, role: Optional[str] = None, name: str = '') -> Dict[str, Any]:
        """
        Verify the OTP and return the user with a fresh JWT pair.

        The first successful login creates the account with the requested role.
        An existing account keeps its role. Verification runs outside the
        account transaction so a failed attempt stays counted.
        """
        otp = OTPService.verify_otp(phone_number, code)

        with transaction.atomic():
            user = CustomUser.objects.filter(phone_number=otp.phone_number).first()
            created = False
            if user is None:
                role = role or UserRole.MANUFACTURER
                if role not in SELF_SERVICE_ROLES:
                    raise ValidationError({'role': [f"Role '{role}' cannot be chosen at sign up"]})
                user = CustomUser.objects.create_user(phone_number=otp.phone_number, role=role, name=name)
                created = True
                logger.info("Created %s account for %s", role, otp.phone_number)
            elif not user.is_active:
                raise ValidationError({'phone_number': ["This account is disabled"]})

            user.last_login = timezone.now()
            user.save(update_fields=['last_login'])

        return {
            'user': user,
            'created': created,
            'tokens': LoginService.tokens_for(user),
        }
