"""
Customer Services
Customer profiles, inquiries, product quotations and orders between end
customers and manufacturers, plus the admin view of the customer base.
"""
import logging
from collections import Counter
from decimal import Decimal
from typing import Dict, Any, Optional

from django.core.exceptions import ValidationError
from django.db import transaction
from django.db.models import Count
from django.utils import timezone
from django.contrib.auth import get_user_model

from products.models import Product
from quotations.services import quotation_total
from .enums import (
    CustomerInquiryStatus, ProductQuotationStatus, CustomerOrderStatus,
    BusinessRules, ErrorMessages
)
from .models import CustomerProfile, CustomerInquiry, ProductQuotation, CustomerOrder

User = get_user_model()
logger = logging.getLogger(__name__)


class CustomerProfileService:

    PROFILE_FIELDS = ('name', 'email', 'phone', 'company_name', 'state', 'district', 'category')

    @staticmethod
    def save_profile(user: User, **data) -> CustomerProfile:
        """Create the profile on first save, update it afterwards."""
        data.setdefault('phone', user.phone_number)
        data.setdefault('name', user.name)
        values = {field: data[field] for field in CustomerProfileService.PROFILE_FIELDS if field in data}
        profile, created = CustomerProfile.objects.update_or_create(user=user, defaults=values)
        if created:
            logger.info("Registered customer profile %s for user %s", profile.pk, user.pk)
        return profile

    @staticmethod
    def get_for_user(user: User) -> CustomerProfile:
        try:
            return CustomerProfile.objects.get(user=user)
        except CustomerProfile.DoesNotExist:
            raise ValidationError(ErrorMessages.PROFILE_MISSING)


class CustomerInquiryService:

    @staticmethod
    def create_inquiry(customer: User, manufacturer: User, subject: str, message: str) -> CustomerInquiry:
        if not manufacturer.is_manufacturer:
            raise ValidationError({'manufacturer': [ErrorMessages.NOT_A_MANUFACTURER]})
        inquiry = CustomerInquiry.objects.create(
            customer=customer,
            manufacturer=manufacturer,
            subject=subject,
            message=message,
        )
        logger.info("Customer %s sent inquiry %s to manufacturer %s", customer.pk, inquiry.pk, manufacturer.pk)
        return inquiry

    @staticmethod
    def respond(inquiry: CustomerInquiry, manufacturer: User, response: str) -> CustomerInquiry:
        """Answer the customer; an answered inquiry counts as resolved."""
        if inquiry.manufacturer_id != manufacturer.pk:
            raise ValidationError(ErrorMessages.INQUIRY_NOT_FOUND)
        inquiry.response = response
        inquiry.responded_at = timezone.now()
        inquiry.status = CustomerInquiryStatus.RESOLVED
        inquiry.save()
        return inquiry

    @staticmethod
    def update_status(inquiry: CustomerInquiry, manufacturer: User, new_status: str) -> Dict[str, Any]:
        if inquiry.manufacturer_id != manufacturer.pk:
            raise ValidationError(ErrorMessages.INQUIRY_NOT_FOUND)
        old_status = inquiry.status
        inquiry.status = new_status
        inquiry.save(update_fields=['status', 'updated_at'])
        return {
            'inquiry': inquiry,
            'old_status': old_status,
            'new_status': new_status,
        }

    @staticmethod
    def statistics(manufacturer: User) -> Dict[str, int]:
        counts = dict(
            CustomerInquiry.objects.filter(manufacturer=manufacturer)
            .order_by()
            .values_list('status')
            .annotate(total=Count('id'))
        )
        stats = {status.value: counts.get(status.value, 0) for status in CustomerInquiryStatus}
        stats['total'] = sum(counts.values())
        return stats


class ProductQuotationService:

    @staticmethod
    def request_quotation(customer: User, product: Product, quantity: int, message: str = '') -> ProductQuotation:
        """
        Ask the product's manufacturer for a price.

        The request is priced at the catalogue price until the manufacturer
        answers with an offer.
        """
        if not product.is_available:
            raise ValidationError({'product': [ErrorMessages.PRODUCT_UNAVAILABLE]})

        quotation = ProductQuotation.objects.create(
            customer=customer,
            manufacturer=product.manufacturer,
            product=product,
            quantity=quantity,
            quoted_price=product.price,
            total_amount=quotation_total(quantity, product.price),
            message=message,
        )
        logger.info("Customer %s requested quotation %s for product %s", customer.pk, quotation.pk, product.pk)
        return quotation

    @staticmethod
    def _check_pending(quotation: ProductQuotation, manufacturer: User) -> None:
        if quotation.manufacturer_id != manufacturer.pk:
            raise ValidationError(ErrorMessages.QUOTATION_NOT_FOUND)
        if quotation.status != ProductQuotationStatus.PENDING:
            raise ValidationError(ErrorMessages.QUOTATION_ALREADY_ANSWERED.format(status=quotation.status))

    @staticmethod
    def respond(
        quotation: ProductQuotation,
        manufacturer: User,
        response_price: Decimal,
        response_quantity: Optional[int] = None,
        response_message: str = '',
        offer_expiry=None
    ) -> ProductQuotation:
        """
        Send the manufacturer's offer. An answered request is accepted.

        Args:
            quotation: pending request addressed to ``manufacturer``
            manufacturer: responding manufacturer
            response_price: offered unit price
            response_quantity: offered quantity, the requested one when omitted
            response_message: note for the customer
            offer_expiry: the offer cannot be ordered after this moment

        Raises:
            ValidationError: if the request was already answered or the price is not positive
        """
        ProductQuotationService._check_pending(quotation, manufacturer)
        if response_price is None or Decimal(response_price) <= 0:
            raise ValidationError({'response_price': [ErrorMessages.NON_POSITIVE_PRICE]})

        quotation.response_price = response_price
        quotation.response_quantity = response_quantity or quotation.quantity
        quotation.response_message = response_message
        quotation.offer_expiry = offer_expiry
        quotation.responded_at = timezone.now()
        quotation.total_amount = quotation_total(quotation.response_quantity, response_price)
        quotation.status = ProductQuotationStatus.ACCEPTED
        quotation.save()

        logger.info("Manufacturer %s offered ₹%s on quotation %s", manufacturer.pk, quotation.total_amount, quotation.pk)
        return quotation

    @staticmethod
    def reject(quotation: ProductQuotation, manufacturer: User, response_message: str = '') -> ProductQuotation:
        ProductQuotationService._check_pending(quotation, manufacturer)
        quotation.response_message = response_message
        quotation.responded_at = timezone.now()
        quotation.status = ProductQuotationStatus.REJECTED
        quotation.save()
        return quotation


class CustomerOrderService:

    @staticmethod
    @transaction.atomic
    def place_order(
        customer: User,
        quotation: ProductQuotation,
        delivery_address: str,
        contact_number: str
    ) -> CustomerOrder:
        """
        Turn an accepted, unexpired offer into a pending order.

        Price and quantity come from the manufacturer's offer.
        """
        if quotation.customer_id != customer.pk:
            raise ValidationError(ErrorMessages.QUOTATION_NOT_FOUND)
        if quotation.status != ProductQuotationStatus.ACCEPTED:
            raise ValidationError(ErrorMessages.QUOTATION_NOT_ACCEPTED)
        if quotation.offer_expired:
            raise ValidationError(ErrorMessages.OFFER_EXPIRED)
        if CustomerOrder.objects.filter(quotation=quotation).exists():
            raise ValidationError(ErrorMessages.ALREADY_ORDERED)

        price = quotation.offered_price
        quantity = quotation.offered_quantity
        order = CustomerOrder.objects.create(
            customer=customer,
            manufacturer=quotation.manufacturer,
            product=quotation.product,
            quotation=quotation,
            quantity=quantity,
            price=price,
            total_amount=quotation_total(quantity, price),
            delivery_address=delivery_address,
            contact_number=contact_number,
        )
        logger.info("Customer %s placed order %s from quotation %s", customer.pk, order.pk, quotation.pk)
        return order

    @staticmethod
    def _check_customer_pending(order: CustomerOrder, customer: User) -> None:
        if order.customer_id != customer.pk:
            raise ValidationError(ErrorMessages.ORDER_NOT_FOUND)
        if order.status != CustomerOrderStatus.PENDING:
            raise ValidationError(ErrorMessages.ORDER_NOT_PENDING)

    @staticmethod
    def update_order(order: CustomerOrder, customer: User, **changes) -> CustomerOrder:
        """Customer edits quantity or delivery details of a pending order."""
        CustomerOrderService._check_customer_pending(order, customer)
        for field in ('quantity', 'delivery_address', 'contact_number'):
            if changes.get(field) is not None:
                setattr(order, field, changes[field])
        order.total_amount = quotation_total(order.quantity, order.price)
        order.save()
        return order

    @staticmethod
    def cancel_order(order: CustomerOrder, customer: User) -> CustomerOrder:
        CustomerOrderService._check_customer_pending(order, customer)
        order.status = CustomerOrderStatus.CANCELLED
        order.save(update_fields=['status', 'updated_at'])
        logger.info("Customer %s cancelled order %s", customer.pk, order.pk)
        return order

    @staticmethod
    def update_status(
        order: CustomerOrder,
        manufacturer: User,
        new_status: str,
        tracking_number: Optional[str] = None
    ) -> Dict[str, Any]:
        if order.manufacturer_id != manufacturer.pk:
            raise ValidationError(ErrorMessages.ORDER_NOT_FOUND)
        if not BusinessRules.can_transition(order.status, new_status):
            raise ValidationError({'status': [
                ErrorMessages.INVALID_TRANSITION.format(current=order.status, new=new_status)
            ]})

        old_status = order.status
        order.status = new_status
        if tracking_number:
            order.tracking_number = tracking_number
        order.save()

        logger.info("Order %s moved from %s to %s by %s", order.pk, old_status, new_status, manufacturer.pk)
        return {
            'order': order,
            'old_status': old_status,
            'new_status': new_status,
        }


class CustomerAnalyticsService:
    """Admin overview of registered customers."""

    @staticmethod
    def analytics() -> Dict[str, Any]:
        profiles = list(CustomerProfile.objects.values('state', 'category', 'created_at'))
        by_state = Counter(p['state'] or 'Unknown' for p in profiles)
        by_category = Counter(p['category'] or 'Unknown' for p in profiles)
        joined = Counter(timezone.localtime(p['created_at']).strftime('%Y-%m') for p in profiles)
        return {
            'total_customers': len(profiles),
            'by_state': dict(by_state),
            'by_category': dict(by_category),
            'joined_by_month': dict(sorted(joined.items())),
        }
