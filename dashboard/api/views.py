from asgiref.sync import async_to_sync
from rest_framework import status

from dashboard.api.serializers import serialize_lists, SubmitRequestSerializer, BulkDeleteSerializer
from dashboard.controller import RequestDashboard, DashboardMessages
from dashboard.exceptions import SubmissionValidationError
from dashboard.store import LIST_TYPES
from dashboard.submission import INTERACTION_LISTS
from project.permissions import IsManufacturer
from project.utils import StandardizedAPIView, django_validation_errors
from providers.enums import ProviderMessages
from providers.models import Provider


def _last_message(dashboard, default=None):
    if dashboard.notifications:
        return dashboard.notifications[-1]['message']
    return default


class DashboardAPIView(StandardizedAPIView):
    permission_classes = [IsManufacturer]

    def get_dashboard(self):
        return RequestDashboard(self.request.user)

    def get_provider(self, provider_id):
        return Provider.objects.filter(id=provider_id).first()

    def unknown_list(self, list_type):
        return self.error_response(f"Unknown list: {list_type}", status.HTTP_404_NOT_FOUND)


class RequestsView(DashboardAPIView):
    """All inquiries, quotations, orders and ratings of the manufacturer with derived badges"""

    def get(self, request):
        dashboard = self.get_dashboard()
        if not async_to_sync(dashboard.fetch_all_requests)():
            return self.error_response(DashboardMessages.LOAD_FAILED, status.HTTP_503_SERVICE_UNAVAILABLE)
        return self.success_response(data=serialize_lists(dashboard.lists), message="Requests loaded")


class SubmitRequestView(DashboardAPIView):
    """Send one inquiry, quotation request, order or rating to a provider"""

    def post(self, request, interaction_type):
        if interaction_type not in INTERACTION_LISTS:
            return self.error_response(f"Unknown request type: {interaction_type}", status.HTTP_404_NOT_FOUND)

        serializer = SubmitRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return self.validation_error_response(serializer.errors)

        provider = self.get_provider(serializer.validated_data['provider'])
        if provider is None:
            return self.error_response(ProviderMessages.NOT_FOUND, status.HTTP_404_NOT_FOUND)

        form = {key: value for key, value in request.data.items() if key != 'provider'}
        dashboard = self.get_dashboard()
        try:
            record = async_to_sync(self._submit)(dashboard, interaction_type, provider, form)
        except SubmissionValidationError as e:
            return self.validation_error_response(django_validation_errors(e))

        if record is None:
            return self.error_response(
                _last_message(dashboard, DashboardMessages.SUBMIT_FAILED),
                status.HTTP_503_SERVICE_UNAVAILABLE
            )
        return self.success_response(
            data={
                'id': record.pk,
                'list_type': INTERACTION_LISTS[interaction_type],
                'requests': serialize_lists(dashboard.lists),
            },
            message=_last_message(dashboard),
            status_code=status.HTTP_201_CREATED
        )

    @staticmethod
    async def _submit(dashboard, interaction_type, provider, form):
        # ratings are matched against the loaded orders
        if not await dashboard.fetch_all_requests():
            return None
        return await dashboard.submit(interaction_type, provider, form)


class BulkDeleteView(DashboardAPIView):

    def post(self, request, list_type):
        if list_type not in LIST_TYPES:
            return self.unknown_list(list_type)

        serializer = BulkDeleteSerializer(data=request.data)
        if not serializer.is_valid():
            return self.validation_error_response(serializer.errors)

        dashboard = self.get_dashboard()
        selection = dashboard.selection(list_type)
        for record_id in serializer.validated_data['ids']:
            selection.toggle(record_id, True)

        if not async_to_sync(dashboard.delete_selected)(list_type):
            return self.error_response(_last_message(dashboard), status.HTTP_503_SERVICE_UNAVAILABLE)
        return self.success_response(data=serialize_lists(dashboard.lists), message=_last_message(dashboard))


class RecordDeleteView(DashboardAPIView):

    def delete(self, request, list_type, record_id):
        if list_type not in LIST_TYPES:
            return self.unknown_list(list_type)

        dashboard = self.get_dashboard()
        if not async_to_sync(dashboard.delete_one)(list_type, record_id):
            message = _last_message(dashboard)
            code = status.HTTP_404_NOT_FOUND if message == DashboardMessages.RECORD_NOT_FOUND else status.HTTP_503_SERVICE_UNAVAILABLE
            return self.error_response(message, code)
        return self.success_response(data=serialize_lists(dashboard.lists), message=_last_message(dashboard))


class ClearProviderView(DashboardAPIView):
    """Remove every inquiry, quotation and order the manufacturer has with one provider"""

    def post(self, request, provider_id):
        provider = self.get_provider(provider_id)
        if provider is None:
            return self.error_response(ProviderMessages.NOT_FOUND, status.HTTP_404_NOT_FOUND)

        dashboard = self.get_dashboard()
        counts = async_to_sync(dashboard.clear_provider)(provider)
        if counts is None:
            return self.error_response(_last_message(dashboard), status.HTTP_503_SERVICE_UNAVAILABLE)
        return self.success_response(data={'deleted': counts}, message=_last_message(dashboard))
