"""
Order Management Services
Provider confirmation, status management and history tracking for both status axes.
"""
import logging
from typing import Dict, Any, Optional

from django.core.exceptions import ValidationError
from django.db import transaction
from django.utils import timezone
from django.contrib.auth import get_user_model

from .enums import OrderStatus, PaymentStatus, StatusAxis, ErrorMessages
from .models import Order, OrderStatusHistory

User = get_user_model()
logger = logging.getLogger(__name__)


def _party_role(order: Order, user: User) -> str:
    """
    Which side of ``order`` the user acts for: manufacturer, provider or admin.

    Raises:
        ValidationError: if the user is not a party to the order
    """
    if user.role == 'admin':
        return 'admin'
    if user.is_manufacturer and order.manufacturer_id == user.pk:
        return 'manufacturer'
    if user.is_provider and order.provider.user_id == user.pk:
        return 'provider'
    raise ValidationError(ErrorMessages.NOT_YOUR_ORDER)


class OrderConfirmationService:

    @staticmethod
    @transaction.atomic
    def confirm_order(order: Order, user: User, provider_order_number: str = "", notes: str = "") -> Dict[str, Any]:
        """
        Provider acknowledges an order.

        Stamps the provider-only confirmation fields, which is what lets the
        dashboard show the stored order status instead of ``pending``.
        """
        if _party_role(order, user) != 'provider':
            raise ValidationError(ErrorMessages.NOT_YOUR_ORDER)
        if order.order_status in (OrderStatus.CANCELLED, OrderStatus.COMPLETED):
            raise ValidationError(ErrorMessages.CANNOT_CONFIRM.format(status=order.order_status))

        previous_status = order.order_status
        order.provider_confirmation_date = timezone.now()
        order.confirmed_by_provider = True
        if provider_order_number:
            order.provider_order_number = provider_order_number
        order.order_status = OrderStatus.CONFIRMED
        order.save()

        history = OrderStatusTrackingService.create_status_entry(
            order=order,
            previous_status=previous_status,
            new_status=OrderStatus.CONFIRMED,
            updated_by=user,
            notes=notes or "Order confirmed by provider",
        )
        logger.info("Order %s confirmed by provider user %s", order.order_number, user.pk)
        return {
            'order': order,
            'previous_status': previous_status,
            'status_history': history,
        }


class OrderStatusTrackingService:
    """
    Centralized service for managing order status transitions and automatic history tracking.
    """

    # Define valid status transitions
    VALID_TRANSITIONS = {
        'pending': [OrderStatus.CONFIRMED, OrderStatus.PROCESSING, OrderStatus.CANCELLED],
        'confirmed': [OrderStatus.PROCESSING, OrderStatus.DELIVERED, OrderStatus.CANCELLED],
        'processing': [OrderStatus.DELIVERED, OrderStatus.CANCELLED],
        'delivered': [OrderStatus.COMPLETED],
        'completed': [],  # Final state
        'cancelled': [],  # Final state
    }

    ROLE_PERMISSIONS = {
        'manufacturer': [OrderStatus.CANCELLED],  # Manufacturers can only cancel
        'provider': [
            OrderStatus.CONFIRMED, OrderStatus.PROCESSING, OrderStatus.DELIVERED,
            OrderStatus.COMPLETED, OrderStatus.CANCELLED,
        ],
        'admin': list(OrderStatus.values),
    }

    @staticmethod
    @transaction.atomic
    def update_order_status(
        order: Order,
        new_status: str,
        updated_by: User,
        notes: str = "",
        tracking_number: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        Update the fulfilment status with validation and history tracking.

        Args:
            order: Order instance to update
            new_status: New order_status value
            updated_by: User making the change
            notes: Optional notes about the status change
            tracking_number: Optional shipment tracking number to attach

        Returns:
            Dict containing update results and metadata
        """
        role = _party_role(order, updated_by)
        OrderStatusTrackingService._validate_status_transition(order, new_status, role)

        previous_status = order.order_status
        order.order_status = new_status

        context = {}
        if new_status == OrderStatus.DELIVERED:
            order.actual_delivery_date = timezone.now()
            context['delivered_at'] = order.actual_delivery_date
        if tracking_number and role != 'manufacturer':
            order.tracking_number = tracking_number
            context['tracking_number'] = tracking_number

        order.save()

        status_history = OrderStatusTrackingService.create_status_entry(
            order=order,
            previous_status=previous_status,
            new_status=new_status,
            updated_by=updated_by,
            notes=notes,
        )
        logger.info("Order %s: %s -> %s by %s", order.order_number, previous_status, new_status, role)

        return {
            'order': order,
            'previous_status': previous_status,
            'new_status': new_status,
            'status_history': status_history,
            'context': context,
        }

    @staticmethod
    @transaction.atomic
    def update_payment_status(order: Order, new_status: str, updated_by: User, notes: str = "") -> Dict[str, Any]:
        """Either party may move the payment axis; no transition rules apply."""
        _party_role(order, updated_by)
        if new_status not in PaymentStatus.values:
            raise ValidationError({'payment_status': [ErrorMessages.INVALID_PAYMENT_STATUS.format(status=new_status)]})

        previous_status = order.payment_status
        order.payment_status = new_status
        order.save(update_fields=['payment_status', 'updated_at'])

        status_history = OrderStatusTrackingService.create_status_entry(
            order=order,
            previous_status=previous_status,
            new_status=new_status,
            updated_by=updated_by,
            notes=notes,
            axis=StatusAxis.PAYMENT,
        )
        logger.info("Order %s payment: %s -> %s", order.order_number, previous_status, new_status)

        return {
            'order': order,
            'previous_status': previous_status,
            'new_status': new_status,
            'status_history': status_history,
        }

    @staticmethod
    def create_status_entry(
        order: Order,
        new_status: str,
        updated_by: User,
        previous_status: str = "",
        notes: str = "",
        axis: str = StatusAxis.ORDER
    ) -> OrderStatusHistory:
        """
        Create an OrderStatusHistory entry.

        This is the centralized method for ALL status history creation.
        """
        label = "Payment status" if axis == StatusAxis.PAYMENT else "Status"
        return OrderStatusHistory.objects.create(
            order=order,
            axis=axis,
            previous_status=previous_status,
            new_status=new_status,
            updated_by=updated_by,
            notes=notes or f"{label} updated to {new_status}",
            timestamp=timezone.now()
        )

    @staticmethod
    def _validate_status_transition(order: Order, new_status: str, role: str) -> None:
        """Validate if the status transition is allowed."""
        allowed_statuses = OrderStatusTrackingService.ROLE_PERMISSIONS.get(role, [])
        if new_status not in allowed_statuses:
            raise ValidationError(ErrorMessages.ROLE_CANNOT_SET.format(role=role, status=new_status))

        current_status = order.order_status
        valid_next_statuses = OrderStatusTrackingService.VALID_TRANSITIONS.get(str(current_status), [])
        if new_status not in valid_next_statuses:
            raise ValidationError(ErrorMessages.INVALID_TRANSITION.format(
                current=current_status,
                new=new_status,
                valid=[str(s) for s in valid_next_statuses]
            ))
