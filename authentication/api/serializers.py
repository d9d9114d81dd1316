from rest_framework import serializers

from authentication.enums import UserRole
from authentication.models import CustomUser


class SendOTPSerializer(serializers.Serializer):
    phone_number = serializers.CharField(max_length=20)


class VerifyOTPSerializer(serializers.Serializer):
    phone_number = serializers.CharField(max_length=20)
    otp = serializers.RegexField(r'^\d{4,6}$', error_messages={'invalid': 'OTP must be 4 to 6 digits'})
    role = serializers.ChoiceField(choices=UserRole.choices, required=False)
    name = serializers.CharField(max_length=150, required=False, allow_blank=True, default='')


class UserSerializer(serializers.ModelSerializer):
    class Meta:
        model = CustomUser
        fields = ['id', 'phone_number', 'email', 'name', 'role', 'date_joined']
        read_only_fields = ['id', 'phone_number', 'role', 'date_joined']
