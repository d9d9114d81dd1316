from django.contrib.auth.models import AbstractBaseUser, BaseUserManager, PermissionsMixin
from django.db import models
from django.utils import timezone

from .enums import UserRole, PROVIDER_ROLES


class CustomUserManager(BaseUserManager):
    def create_user(self, phone_number, password=None, **extra_fields):
        if not phone_number:
            raise ValueError("Phone number is required")
        extra_fields.setdefault('role', UserRole.MANUFACTURER)
        email = extra_fields.pop('email', '')
        user = self.model(phone_number=phone_number, email=self.normalize_email(email), **extra_fields)
        if password:
            user.set_password(password)
        else:
            # OTP login only
            user.set_unusable_password()
        user.save(using=self._db)
        return user

    def create_superuser(self, phone_number, password=None, **extra_fields):
        extra_fields.setdefault('role', UserRole.ADMIN)
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        if not extra_fields.get('is_staff') or not extra_fields.get('is_superuser'):
            raise ValueError("Superuser must have is_staff=True and is_superuser=True")
        return self.create_user(phone_number, password, **extra_fields)


class CustomUser(AbstractBaseUser, PermissionsMixin):
    phone_number = models.CharField(max_length=16, unique=True)
    email = models.EmailField(blank=True)
    name = models.CharField(max_length=150, blank=True)
    role = models.CharField(max_length=20, choices=UserRole.choices, default=UserRole.MANUFACTURER)

    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(default=False)
    date_joined = models.DateTimeField(default=timezone.now)

    objects = CustomUserManager()

    USERNAME_FIELD = 'phone_number'
    REQUIRED_FIELDS = []

    class Meta:
        ordering = ['-date_joined']

    def __str__(self):
        return f"{self.name or self.phone_number} ({self.role})"

    @property
    def is_provider(self):
        return self.role in PROVIDER_ROLES

    @property
    def is_manufacturer(self):
        return self.role == UserRole.MANUFACTURER

    @property
    def is_customer(self):
        return self.role == UserRole.CUSTOMER

    @property
    def is_admin_user(self):
        return self.role == UserRole.ADMIN or self.is_superuser


class PhoneOTP(models.Model):
    """One-time password issued for a phone number login."""
    phone_number = models.CharField(max_length=16, db_index=True)
    code = models.CharField(max_length=6)
    gateway_session = models.CharField(max_length=64, blank=True)
    expires_at = models.DateTimeField()
    attempts = models.PositiveSmallIntegerField(default=0)
    is_used = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return f"OTP for {self.phone_number}"

    @property
    def is_expired(self):
        return timezone.now() >= self.expires_at
