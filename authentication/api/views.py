import logging

from django.core.exceptions import ValidationError
from django.utils.decorators import method_decorator
from django_ratelimit.decorators import ratelimit
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import RefreshToken

from authentication.api.serializers import SendOTPSerializer, VerifyOTPSerializer, UserSerializer
from authentication.enums import OTPMessages
from authentication.models import CustomUser
from authentication.services import OTPService, LoginService, SMSGatewayError
from project.utils import StandardizedAPIView, django_validation_errors

logger = logging.getLogger(__name__)


class SendOTPView(StandardizedAPIView):
    permission_classes = []
    authentication_classes = []

    @method_decorator(ratelimit(key='ip', rate='3/h', method='POST', block=True))
    def post(self, request, *args, **kwargs):
        serializer = SendOTPSerializer(data=request.data)
        if not serializer.is_valid():
            return self.validation_error_response(serializer.errors)

        try:
            otp = OTPService.send_otp(serializer.validated_data['phone_number'])
        except ValidationError as e:
            return self.validation_error_response(django_validation_errors(e))
        except SMSGatewayError:
            logger.exception("SMS gateway failed for %s", serializer.validated_data['phone_number'])
            return self.error_response(OTPMessages.SEND_FAILED, status.HTTP_502_BAD_GATEWAY)

        return self.success_response(
            data={
                'phone_number': otp.phone_number,
                'expires_at': otp.expires_at,
            },
            message=OTPMessages.SENT
        )


class VerifyOTPView(StandardizedAPIView):
    permission_classes = []
    authentication_classes = []

    def post(self, request, *args, **kwargs):
        serializer = VerifyOTPSerializer(data=request.data)
        if not serializer.is_valid():
            return self.validation_error_response(serializer.errors)

        data = serializer.validated_data
        try:
            result = LoginService.login_with_otp(
                phone_number=data['phone_number'],
                code=data['otp'],
                role=data.get('role'),
                name=data.get('name', ''),
            )
        except ValidationError as e:
            return self.error_response(
                OTPMessages.INVALID,
                status.HTTP_400_BAD_REQUEST,
                errors=django_validation_errors(e)
            )

        return self.success_response(
            data={
                'user': UserSerializer(result['user']).data,
                'created': result['created'],
                'tokens': result['tokens'],
            },
            message=OTPMessages.VERIFIED,
            status_code=status.HTTP_201_CREATED if result['created'] else status.HTTP_200_OK
        )


class UserProfileView(StandardizedAPIView):
    permission_classes = [IsAuthenticated]

    def get(self, request, *args, **kwargs):
        return self.success_response(
            data={'user': UserSerializer(request.user).data},
            message="User data retrieved successfully"
        )

    def patch(self, request, *args, **kwargs):
        serializer = UserSerializer(request.user, data=request.data, partial=True)
        if not serializer.is_valid():
            return self.validation_error_response(serializer.errors)
        serializer.save()
        return self.success_response(
            data={'user': serializer.data},
            message="User updated successfully"
        )


class TokenRefreshView(StandardizedAPIView):
    """
    Token refresh that answers in the standard envelope and rotates the refresh token.
    """
    permission_classes = []
    authentication_classes = []

    def post(self, request, *args, **kwargs):
        refresh_token = request.data.get('refresh')
        if not refresh_token:
            return self.error_response("Refresh token is required", status.HTTP_400_BAD_REQUEST)

        try:
            refresh = RefreshToken(refresh_token)
        except TokenError:
            return self.error_response("Invalid refresh token", status.HTTP_401_UNAUTHORIZED)

        user_id = refresh.payload.get('user_id')
        try:
            user = CustomUser.objects.get(id=user_id, is_active=True)
        except CustomUser.DoesNotExist:
            return self.error_response("User not found", status.HTTP_401_UNAUTHORIZED)

        new_refresh = RefreshToken.for_user(user)
        return self.success_response(
            data={
                'access': str(new_refresh.access_token),
                'refresh': str(new_refresh)
            },
            message="Token refreshed successfully"
        )
