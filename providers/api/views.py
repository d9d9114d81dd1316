from django.core.exceptions import ValidationError
from rest_framework import generics, status
from rest_framework.decorators import api_view, permission_classes

from providers.api.serializers import (
    ProviderListSerializer, ProviderDetailSerializer, ProviderSearchSerializer,
    ManufacturerSerializer
)
from providers.enums import ProviderMessages
from providers.models import Provider
from providers.services import (
    ProviderProfileService, ManufacturerProfileService, ProviderSearchService
)
from project.permissions import IsProvider, IsManufacturer
from project.utils import (
    success_response, error_response, validation_error_response,
    business_error_response, StandardizedAPIView, StandardizedResponseMixin
)


@api_view(['GET'])
@permission_classes([])
def provider_search(request):
    """
    Public API to browse providers by kind, name, capability and location
    """
    serializer = ProviderSearchSerializer(data=request.GET)
    if not serializer.is_valid():
        return validation_error_response(serializer.errors)

    data = serializer.validated_data
    providers = ProviderSearchService.search(
        kind=data.get('kind'),
        query=data.get('q'),
        capability=data.get('capability'),
        city=data.get('city'),
        district=data.get('district'),
        state=data.get('state'),
    )
    return success_response(
        data=ProviderListSerializer(providers, many=True).data,
        message=f"Found {len(providers)} providers"
    )


class ProviderDetailView(StandardizedResponseMixin, generics.RetrieveAPIView):
    """Public provider profile"""
    queryset = Provider.objects.filter(is_active=True)
    serializer_class = ProviderDetailSerializer
    permission_classes = []


class ProviderRegisterView(StandardizedAPIView):
    permission_classes = [IsProvider]

    def post(self, request, *args, **kwargs):
        serializer = ProviderDetailSerializer(data=request.data)
        if not serializer.is_valid():
            return self.validation_error_response(serializer.errors)

        try:
            provider = ProviderProfileService.register_provider(request.user, **serializer.validated_data)
        except ValidationError as e:
            return business_error_response(e)

        return self.success_response(
            data=ProviderDetailSerializer(provider).data,
            message=ProviderMessages.REGISTERED,
            status_code=status.HTTP_201_CREATED
        )


class MyProviderProfileView(StandardizedAPIView):
    """Read or update the provider profile of the authenticated provider"""
    permission_classes = [IsProvider]

    def get(self, request, *args, **kwargs):
        try:
            provider = ProviderProfileService.get_for_user(request.user)
        except ValidationError:
            return self.error_response(ProviderMessages.PROFILE_MISSING, status.HTTP_404_NOT_FOUND)
        return self.success_response(data=ProviderDetailSerializer(provider).data)

    def patch(self, request, *args, **kwargs):
        try:
            provider = ProviderProfileService.get_for_user(request.user)
        except ValidationError:
            return self.error_response(ProviderMessages.PROFILE_MISSING, status.HTTP_404_NOT_FOUND)

        serializer = ProviderDetailSerializer(provider, data=request.data, partial=True)
        if not serializer.is_valid():
            return self.validation_error_response(serializer.errors)

        provider = ProviderProfileService.update_provider(provider, **serializer.validated_data)
        return self.success_response(
            data=ProviderDetailSerializer(provider).data,
            message=ProviderMessages.UPDATED
        )


class ManufacturerRegisterView(StandardizedAPIView):
    permission_classes = [IsManufacturer]

    def post(self, request, *args, **kwargs):
        serializer = ManufacturerSerializer(data=request.data)
        if not serializer.is_valid():
            return self.validation_error_response(serializer.errors)

        try:
            manufacturer = ManufacturerProfileService.register_manufacturer(
                request.user, **serializer.validated_data
            )
        except ValidationError as e:
            return business_error_response(e)

        return self.success_response(
            data=ManufacturerSerializer(manufacturer).data,
            message=ProviderMessages.MANUFACTURER_REGISTERED,
            status_code=status.HTTP_201_CREATED
        )


class MyManufacturerProfileView(StandardizedAPIView):
    permission_classes = [IsManufacturer]

    def get(self, request, *args, **kwargs):
        try:
            manufacturer = ManufacturerProfileService.get_for_user(request.user)
        except ValidationError:
            return error_response(ProviderMessages.MANUFACTURER_MISSING, status.HTTP_404_NOT_FOUND)
        return success_response(data=ManufacturerSerializer(manufacturer).data)

    def patch(self, request, *args, **kwargs):
        try:
            manufacturer = ManufacturerProfileService.get_for_user(request.user)
        except ValidationError:
            return error_response(ProviderMessages.MANUFACTURER_MISSING, status.HTTP_404_NOT_FOUND)

        serializer = ManufacturerSerializer(manufacturer, data=request.data, partial=True)
        if not serializer.is_valid():
            return validation_error_response(serializer.errors)
        serializer.save()
        return success_response(data=serializer.data, message="Manufacturer profile updated successfully")
