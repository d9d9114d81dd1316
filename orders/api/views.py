from django.core.exceptions import ValidationError
from rest_framework import generics, status
from rest_framework.views import APIView

from orders.api.serializers import (
    OrderSerializer, OrderConfirmSerializer, OrderStatusUpdateSerializer,
    PaymentStatusUpdateSerializer, OrderStatusHistorySerializer
)
from orders.enums import ErrorMessages, ResponseMessages
from orders.models import Order
from orders.services import OrderConfirmationService, OrderStatusTrackingService
from project.permissions import IsProvider, IsManufacturerOrProvider
from project.utils import (
    success_response, error_response, validation_error_response,
    business_error_response, StandardizedResponseMixin
)


def _order_for_party(order_id, user):
    """Fetch an order the user takes part in, as manufacturer or as provider."""
    queryset = Order.objects.select_related('provider', 'manufacturer')
    if user.role == 'admin':
        return queryset.get(id=order_id)
    if user.is_manufacturer:
        return queryset.get(id=order_id, manufacturer=user)
    return queryset.get(id=order_id, provider__user=user)


class ProviderOrdersView(StandardizedResponseMixin, generics.ListAPIView):
    """Orders placed with the authenticated provider"""
    serializer_class = OrderSerializer
    permission_classes = [IsProvider]

    def get_queryset(self):
        queryset = Order.objects.filter(provider__user=self.request.user).select_related('manufacturer', 'provider')
        order_status = self.request.query_params.get('order_status')
        if order_status:
            queryset = queryset.filter(order_status=order_status)
        payment_status = self.request.query_params.get('payment_status')
        if payment_status:
            queryset = queryset.filter(payment_status=payment_status)
        return queryset


class ConfirmOrderView(APIView):
    """Provider confirms an order placed with it"""
    permission_classes = [IsProvider]

    def post(self, request, order_id):
        serializer = OrderConfirmSerializer(data=request.data)
        if not serializer.is_valid():
            return validation_error_response(serializer.errors)

        try:
            order = Order.objects.select_related('provider').get(id=order_id, provider__user=request.user)
        except Order.DoesNotExist:
            return error_response(ErrorMessages.ORDER_NOT_FOUND, status.HTTP_404_NOT_FOUND)

        try:
            result = OrderConfirmationService.confirm_order(
                order,
                request.user,
                provider_order_number=serializer.validated_data['provider_order_number'],
                notes=serializer.validated_data['notes'],
            )
        except ValidationError as e:
            return business_error_response(e)

        return success_response(
            data=OrderSerializer(result['order']).data,
            message=ResponseMessages.ORDER_CONFIRMED
        )


class UpdateOrderStatusView(APIView):
    """Update order status with automatic history tracking"""
    permission_classes = [IsManufacturerOrProvider]

    def post(self, request, order_id):
        serializer = OrderStatusUpdateSerializer(data=request.data)
        if not serializer.is_valid():
            return validation_error_response(serializer.errors)

        try:
            order = _order_for_party(order_id, request.user)
        except Order.DoesNotExist:
            return error_response(ErrorMessages.ORDER_NOT_FOUND, status.HTTP_404_NOT_FOUND)

        data = serializer.validated_data
        try:
            result = OrderStatusTrackingService.update_order_status(
                order=order,
                new_status=data['status'],
                updated_by=request.user,
                notes=data['notes'],
                tracking_number=data.get('tracking_number'),
            )
        except ValidationError as e:
            return business_error_response(e)

        return success_response(
            data={
                'order': OrderSerializer(result['order']).data,
                'previous_status': result['previous_status'],
                'new_status': result['new_status'],
                'status_history': OrderStatusHistorySerializer(result['status_history']).data,
            },
            message=ResponseMessages.STATUS_UPDATED.format(status=result['new_status'])
        )


class UpdatePaymentStatusView(APIView):
    permission_classes = [IsManufacturerOrProvider]

    def post(self, request, order_id):
        serializer = PaymentStatusUpdateSerializer(data=request.data)
        if not serializer.is_valid():
            return validation_error_response(serializer.errors)

        try:
            order = _order_for_party(order_id, request.user)
        except Order.DoesNotExist:
            return error_response(ErrorMessages.ORDER_NOT_FOUND, status.HTTP_404_NOT_FOUND)

        try:
            result = OrderStatusTrackingService.update_payment_status(
                order=order,
                new_status=serializer.validated_data['payment_status'],
                updated_by=request.user,
                notes=serializer.validated_data['notes'],
            )
        except ValidationError as e:
            return business_error_response(e)

        return success_response(
            data={
                'order': OrderSerializer(result['order']).data,
                'previous_status': result['previous_status'],
                'new_status': result['new_status'],
            },
            message=ResponseMessages.PAYMENT_UPDATED.format(status=result['new_status'])
        )


class OrderStatusHistoryView(APIView):
    permission_classes = [IsManufacturerOrProvider]

    def get(self, request, order_id):
        try:
            order = _order_for_party(order_id, request.user)
        except Order.DoesNotExist:
            return error_response(ErrorMessages.ORDER_NOT_FOUND, status.HTTP_404_NOT_FOUND)

        history = order.status_history.select_related('updated_by')
        axis = request.query_params.get('axis')
        if axis:
            history = history.filter(axis=axis)

        return success_response(
            data={
                'order_number': order.order_number,
                'history': OrderStatusHistorySerializer(history, many=True).data,
            },
            message=f"Retrieved {history.count()} status changes"
        )
