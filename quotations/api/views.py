from django.core.exceptions import ValidationError
from rest_framework import generics, status
from rest_framework.views import APIView

from providers.models import Provider
from quotations.api.serializers import (
    QuotationSerializer, QuotationResponseSerializer, QuotationStatusSerializer
)
from quotations.enums import ErrorMessages, ResponseMessages
from quotations.models import Quotation
from quotations.services import QuotationResponseService, QuotationStatusService
from project.permissions import IsProvider, IsManufacturer
from project.utils import (
    success_response, error_response, validation_error_response,
    business_error_response, StandardizedResponseMixin
)


class ProviderQuotationsView(StandardizedResponseMixin, generics.ListAPIView):
    """Quotation requests addressed to the authenticated provider"""
    serializer_class = QuotationSerializer
    permission_classes = [IsProvider]

    def get_queryset(self):
        queryset = Quotation.objects.filter(provider__user=self.request.user).select_related('manufacturer', 'provider')
        status_filter = self.request.query_params.get('status')
        if status_filter:
            queryset = queryset.filter(status=status_filter)
        return queryset


class QuotationRespondView(APIView):
    """Provider sends price and terms for a quotation request"""
    permission_classes = [IsProvider]

    def post(self, request, quotation_id):
        serializer = QuotationResponseSerializer(data=request.data)
        if not serializer.is_valid():
            return validation_error_response(serializer.errors)

        try:
            provider = Provider.objects.get(user=request.user)
            quotation = Quotation.objects.get(id=quotation_id, provider=provider)
        except (Provider.DoesNotExist, Quotation.DoesNotExist):
            return error_response(ErrorMessages.QUOTATION_NOT_FOUND, status.HTTP_404_NOT_FOUND)

        data = dict(serializer.validated_data)
        try:
            result = QuotationResponseService.respond(
                quotation,
                provider,
                price_per_unit=data.pop('price_per_unit'),
                total_amount=data.pop('total_amount', None),
                **data
            )
        except ValidationError as e:
            return business_error_response(e)

        return success_response(
            data=QuotationSerializer(result['quotation']).data,
            message=ResponseMessages.QUOTATION_SENT
        )


class QuotationStatusView(APIView):
    """Manufacturer accepts, rejects or cancels one of its quotations"""
    permission_classes = [IsManufacturer]

    def post(self, request, quotation_id):
        serializer = QuotationStatusSerializer(data=request.data)
        if not serializer.is_valid():
            return validation_error_response(serializer.errors)

        try:
            quotation = Quotation.objects.get(id=quotation_id, manufacturer=request.user)
        except Quotation.DoesNotExist:
            return error_response(ErrorMessages.QUOTATION_NOT_FOUND, status.HTTP_404_NOT_FOUND)

        try:
            result = QuotationStatusService.update_status(quotation, serializer.validated_data['status'], request.user)
        except ValidationError as e:
            return business_error_response(e)

        return success_response(
            data={
                'quotation': QuotationSerializer(result['quotation']).data,
                'old_status': result['old_status'],
                'new_status': result['new_status'],
            },
            message=ResponseMessages.STATUS_UPDATED.format(status=result['new_status'])
        )
