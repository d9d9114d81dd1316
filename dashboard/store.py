"""
ORM gateway behind the manufacturer request dashboard.

One collection per list type, always scoped to the acting manufacturer.
Failures of the underlying query are logged here and re-raised as
``StoreError`` so callers handle a single exception type.
"""
import logging
from typing import Dict, Iterable, List

from django.core.exceptions import ObjectDoesNotExist, ValidationError
from django.db import DatabaseError, transaction

from inquiries.models import Inquiry
from orders.models import Order
from quotations.models import Quotation
from ratings.models import Rating
from .exceptions import StoreError

logger = logging.getLogger(__name__)

INQUIRIES = 'inquiries'
QUOTATIONS = 'quotations'
ORDERS = 'orders'
RATINGS = 'ratings'
LIST_TYPES = (INQUIRIES, QUOTATIONS, ORDERS, RATINGS)

MODELS = {
    INQUIRIES: Inquiry,
    QUOTATIONS: Quotation,
    ORDERS: Order,
    RATINGS: Rating,
}

STORE_ERRORS = (DatabaseError, ObjectDoesNotExist, ValidationError)


def model_for(list_type: str):
    try:
        return MODELS[list_type]
    except KeyError:
        raise ValueError(f"Unknown list type: {list_type}")


class RecordStore:

    def __init__(self):
        # rows removed by the last successful delete_many
        self.last_deleted_count = 0

    def fetch(self, list_type: str, manufacturer) -> List:
        """Rows of ``list_type`` created by ``manufacturer``, newest first."""
        model = model_for(list_type)
        try:
            return list(
                model.objects.filter(manufacturer=manufacturer)
                .select_related('manufacturer', 'provider')
                .order_by('-created_at', '-id')
            )
        except STORE_ERRORS as exc:
            logger.exception("Fetching %s for manufacturer %s failed", list_type, manufacturer.pk)
            raise StoreError(f"Could not load {list_type}") from exc

    def insert(self, list_type: str, values: Dict):
        model = model_for(list_type)
        try:
            instance = model(**values)
            instance.full_clean()
            instance.save()
        except STORE_ERRORS as exc:
            logger.exception("Inserting into %s failed", list_type)
            raise StoreError(f"Could not save the {list_type} record") from exc
        logger.info("Created %s record %s", list_type, instance.pk)
        return instance

    def delete(self, list_type: str, manufacturer, record_id: int) -> bool:
        """Delete one row. Returns False when no such row belongs to ``manufacturer``."""
        model = model_for(list_type)
        try:
            deleted, _ = model.objects.filter(id=record_id, manufacturer=manufacturer).delete()
        except STORE_ERRORS as exc:
            logger.exception("Deleting %s record %s failed", list_type, record_id)
            raise StoreError(f"Could not delete the {list_type} record") from exc
        if deleted:
            logger.info("Deleted %s record %s", list_type, record_id)
        return bool(deleted)

    def delete_many(self, list_type: str, manufacturer, record_ids: Iterable[int]) -> bool:
        """
        Delete a list of rows in one call; the outcome is a plain success flag.

        Ids that do not belong to ``manufacturer`` are skipped. The number of
        rows actually removed is kept in ``last_deleted_count``.
        """
        model = model_for(list_type)
        record_ids = list(record_ids)
        self.last_deleted_count = 0
        try:
            with transaction.atomic():
                _, per_model = model.objects.filter(id__in=record_ids, manufacturer=manufacturer).delete()
        except STORE_ERRORS:
            logger.exception("Bulk delete of %d %s records failed", len(record_ids), list_type)
            return False
        self.last_deleted_count = per_model.get(model._meta.label, 0)
        logger.info("Bulk deleted %d of %d requested %s records", self.last_deleted_count, len(record_ids), list_type)
        return True

    def delete_all_for_provider(self, manufacturer, provider) -> Dict[str, int]:
        """Remove the manufacturer's inquiries, quotations and orders with one provider."""
        counts = {}
        try:
            with transaction.atomic():
                for list_type in (INQUIRIES, QUOTATIONS, ORDERS):
                    model = model_for(list_type)
                    _, per_model = model.objects.filter(manufacturer=manufacturer, provider=provider).delete()
                    counts[list_type] = per_model.get(model._meta.label, 0)
        except STORE_ERRORS as exc:
            logger.exception("Clearing records with provider %s failed", provider.pk)
            raise StoreError("Could not clear records for this provider") from exc
        logger.info("Cleared records with provider %s: %s", provider.pk, counts)
        return counts
