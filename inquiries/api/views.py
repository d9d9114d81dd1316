from django.core.exceptions import ValidationError
from rest_framework import generics, status

from inquiries.api.serializers import (
    InquirySerializer, InquiryResponseSerializer, InquiryResponseHistorySerializer
)
from inquiries.enums import ErrorMessages, ResponseMessages
from inquiries.models import Inquiry, InquiryResponseHistory
from inquiries.services import InquiryResponseService, InquiryQueryService
from providers.models import Provider
from project.permissions import IsProvider, IsManufacturerOrProvider
from project.utils import (
    StandardizedAPIView, StandardizedResponseMixin, business_error_response
)


class ProviderInquiriesView(StandardizedResponseMixin, generics.ListAPIView):
    """Inquiries addressed to the authenticated provider"""
    serializer_class = InquirySerializer
    permission_classes = [IsProvider]

    def get_queryset(self):
        provider = Provider.objects.filter(user=self.request.user).first()
        if provider is None:
            return Inquiry.objects.none()
        queryset = InquiryQueryService.for_provider(provider)
        status_filter = self.request.query_params.get('status')
        if status_filter:
            queryset = queryset.filter(status=status_filter)
        return queryset


class ProviderResponseHistoryView(StandardizedResponseMixin, generics.ListAPIView):
    """Every answer the authenticated provider has given"""
    serializer_class = InquiryResponseHistorySerializer
    permission_classes = [IsProvider]

    def get_queryset(self):
        provider = Provider.objects.filter(user=self.request.user).first()
        if provider is None:
            return InquiryResponseHistory.objects.none()
        return InquiryQueryService.history_for_provider(provider)


class InquiryResponseView(StandardizedAPIView):
    """Provider answers an inquiry; ``edit`` records a correction of the previous answer"""
    permission_classes = [IsProvider]
    edit = False

    def post(self, request, inquiry_id):
        serializer = InquiryResponseSerializer(data=request.data)
        if not serializer.is_valid():
            return self.validation_error_response(serializer.errors)

        try:
            provider = Provider.objects.get(user=request.user)
            inquiry = Inquiry.objects.get(id=inquiry_id, provider=provider)
        except (Provider.DoesNotExist, Inquiry.DoesNotExist):
            return self.error_response(ErrorMessages.INQUIRY_NOT_FOUND, status.HTTP_404_NOT_FOUND)

        action = InquiryResponseService.edit_response if self.edit else InquiryResponseService.add_response
        try:
            result = action(
                inquiry=inquiry,
                provider=provider,
                response_text=serializer.validated_data['response'],
                responded_by=request.user,
            )
        except ValidationError as e:
            return business_error_response(e)

        return self.success_response(
            data={
                'inquiry': InquirySerializer(result['inquiry']).data,
                'response': InquiryResponseHistorySerializer(result['history']).data,
            },
            message=ResponseMessages.RESPONSE_EDITED if self.edit else ResponseMessages.RESPONSE_ADDED
        )


class InquiryHistoryView(StandardizedAPIView):
    """Response history of one inquiry, visible to both parties"""
    permission_classes = [IsManufacturerOrProvider]

    def get(self, request, inquiry_id):
        try:
            inquiry = Inquiry.objects.select_related('provider').get(id=inquiry_id)
        except Inquiry.DoesNotExist:
            return self.error_response(ErrorMessages.INQUIRY_NOT_FOUND, status.HTTP_404_NOT_FOUND)

        if request.user != inquiry.manufacturer and request.user != inquiry.provider.user:
            return self.error_response(ErrorMessages.INQUIRY_NOT_FOUND, status.HTTP_404_NOT_FOUND)

        history = inquiry.response_history.select_related('responded_by')
        return self.success_response(
            data=InquiryResponseHistorySerializer(history, many=True).data,
            message=f"Retrieved {history.count()} responses"
        )
